"""
Configuration settings for the Lambda layer maker.

This module contains all configuration settings for the layer maker,
including:
- AWS settings (default region, required credential variables)
- Build settings (output directory, docker binary, default runtime)
- Layer size limits
- Logging settings

All settings can be overridden by environment variables with the same name prefixed
with 'LAYER_MAKER_'. For example, OUTPUT_DIR can be overridden by setting the
LAYER_MAKER_OUTPUT_DIR environment variable.
"""

import os
from pathlib import Path
from typing import List

# AWS Settings
AWS_REGION = os.environ.get("LAYER_MAKER_AWS_REGION", "us-west-2")
REQUIRED_CREDENTIAL_VARS: List[str] = [
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
]

# Runtimes a published layer can be declared compatible with
COMPATIBLE_RUNTIMES: List[str] = [
    runtime.strip()
    for runtime in os.environ.get(
        "LAYER_MAKER_COMPATIBLE_RUNTIMES", "python3.12"
    ).split(",")
    if runtime.strip()
]
if not COMPATIBLE_RUNTIMES:
    COMPATIBLE_RUNTIMES = ["python3.12"]

# Build settings
OUTPUT_DIR = os.environ.get("LAYER_MAKER_OUTPUT_DIR", "output")
DOCKER_BINARY = os.environ.get("LAYER_MAKER_DOCKER_BINARY", "docker")
DEFAULT_RUNTIME = os.environ.get("LAYER_MAKER_DEFAULT_RUNTIME", "python3.12amd64")

# Preferences file shared by all commands
CONFIG_FILE = os.environ.get(
    "LAYER_MAKER_CONFIG_FILE", str(Path.home() / ".lambda-layer-maker.json")
)

# Layer size limits (in MB)
LAYER_SIZE_LIMIT_MB = int(os.environ.get("LAYER_MAKER_LAYER_SIZE_LIMIT_MB", "50"))
UNZIPPED_SIZE_LIMIT_MB = int(
    os.environ.get("LAYER_MAKER_UNZIPPED_SIZE_LIMIT_MB", "250")
)

# Logging settings
LOG_LEVEL = os.environ.get("LAYER_MAKER_LOG_LEVEL", "INFO")
LOG_FORMAT = os.environ.get(
    "LAYER_MAKER_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
