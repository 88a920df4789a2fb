"""
Thin wrapper around the docker command line.

Only the two operations the layer builders need are exposed: pulling an image
and running a one-off command in a throwaway container with mounted volumes.
"""

import logging
import subprocess
from typing import Dict, List, Optional, Sequence

from layer_maker.common.exceptions import ImageUnavailable, InstallFailed
from layer_maker.config import DOCKER_BINARY

logger = logging.getLogger(__name__)


class DockerClient:
    """Runs docker commands as subprocesses and waits for them to finish."""

    def __init__(self, binary: str = DOCKER_BINARY):
        self.binary = binary

    def pull(self, image: str) -> None:
        """
        Pull an image.

        Raises:
            ImageUnavailable: If docker is missing or the pull exits non-zero
        """
        cmd = [self.binary, "pull", image]
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            subprocess.run(cmd, check=True)
        except FileNotFoundError as e:
            raise ImageUnavailable(
                f"Docker binary '{self.binary}' not found: {str(e)}"
            ) from e
        except subprocess.CalledProcessError as e:
            raise ImageUnavailable(
                f"Failed to pull image {image} (exit code {e.returncode})"
            ) from e

    def build_run_command(
        self,
        image: str,
        command: Sequence[str],
        volumes: Optional[Dict[str, str]] = None,
        platform: Optional[str] = None,
    ) -> List[str]:
        """Build the argument list for `docker run --rm`."""
        cmd = [self.binary, "run", "--rm"]
        if platform:
            cmd.extend(["--platform", platform])
        for host_path, container_path in (volumes or {}).items():
            cmd.extend(["-v", f"{host_path}:{container_path}"])
        cmd.append(image)
        cmd.extend(command)
        return cmd

    def run(
        self,
        image: str,
        command: Sequence[str],
        volumes: Optional[Dict[str, str]] = None,
        platform: Optional[str] = None,
    ) -> None:
        """
        Run a command in a new container that is removed when it exits.

        Args:
            image: Image to run
            command: Command and arguments executed in the container
            volumes: Mapping of host paths to container mount points
            platform: Container platform, e.g. linux/amd64

        Raises:
            InstallFailed: If docker is missing or the container exits non-zero
        """
        cmd = self.build_run_command(image, command, volumes, platform)
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            subprocess.run(cmd, check=True)
        except FileNotFoundError as e:
            raise InstallFailed(
                f"Docker binary '{self.binary}' not found: {str(e)}"
            ) from e
        except subprocess.CalledProcessError as e:
            raise InstallFailed(
                f"Command in {image} failed with exit code {e.returncode}"
            ) from e
