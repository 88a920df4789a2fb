"""
Configuration package for the Lambda layer maker.

This package contains configuration settings shared by the build, publish and
upload commands.
"""

from layer_maker.config.settings import (
    AWS_REGION,
    REQUIRED_CREDENTIAL_VARS,
    COMPATIBLE_RUNTIMES,
    OUTPUT_DIR,
    DOCKER_BINARY,
    DEFAULT_RUNTIME,
    CONFIG_FILE,
    LAYER_SIZE_LIMIT_MB,
    UNZIPPED_SIZE_LIMIT_MB,
    LOG_LEVEL,
    LOG_FORMAT,
)

__all__ = [
    "AWS_REGION",
    "REQUIRED_CREDENTIAL_VARS",
    "COMPATIBLE_RUNTIMES",
    "OUTPUT_DIR",
    "DOCKER_BINARY",
    "DEFAULT_RUNTIME",
    "CONFIG_FILE",
    "LAYER_SIZE_LIMIT_MB",
    "UNZIPPED_SIZE_LIMIT_MB",
    "LOG_LEVEL",
    "LOG_FORMAT",
]
