"""
Layer builder for Python 3.12 on x86_64.

Dependencies are installed by pip inside a python:3.12-slim container pinned to
linux/amd64. pip is told to accept only prebuilt wheels for the target platform
and interpreter, so nothing is compiled for the build host's architecture.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from layer_maker.common.archiver import ZipArchiver
from layer_maker.common.docker import DockerClient
from layer_maker.runtimes.base import MANIFEST_NAME, LayerBuilder

logger = logging.getLogger(__name__)

# Wheel platform tag pip should select for each container platform
PIP_PLATFORMS: Dict[str, str] = {
    "linux/amd64": "manylinux2014_x86_64",
    "linux/arm64": "manylinux2014_aarch64",
}

CONTAINER_MOUNT = "/output"


class Python312Amd64Builder(LayerBuilder):
    """Builds python/ layers for the python3.12 runtime on x86_64."""

    name = "python3.12amd64"
    archive_prefix = "python3-12-amd64-layer"
    layer_dir_name = "python"
    requires_manifest = True

    image = "python:3.12-slim"
    container_platform = "linux/amd64"
    python_version = "3.12"

    def __init__(
        self,
        output_dir: Optional[Union[str, Path]] = None,
        docker: Optional[DockerClient] = None,
        archiver: Optional[ZipArchiver] = None,
        pip_platform: Optional[str] = None,
    ):
        super().__init__(output_dir=output_dir, docker=docker, archiver=archiver)
        self.pip_platform = pip_platform or PIP_PLATFORMS[self.container_platform]

    def pip_command(self) -> List[str]:
        """pip invocation run inside the container."""
        return [
            "pip",
            "install",
            "--platform",
            self.pip_platform,
            "--only-binary=:all:",
            "--implementation",
            "cp",
            "--python-version",
            self.python_version,
            "-r",
            f"{CONTAINER_MOUNT}/{MANIFEST_NAME}",
            "--target",
            f"{CONTAINER_MOUNT}/{self.layer_dir_name}",
            "--no-cache-dir",
        ]

    def install_dependencies(self) -> None:
        logger.info("Pulling Docker image...")
        self.docker.pull(self.image)

        logger.info("Installing dependencies in Docker container...")
        self.docker.run(
            self.image,
            ["bash", "-c", " ".join(self.pip_command())],
            volumes={str(self.output_dir.resolve()): CONTAINER_MOUNT},
            platform=self.container_platform,
        )
