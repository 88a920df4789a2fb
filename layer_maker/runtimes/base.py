"""
Base class for layer builders.

A layer builder turns a requirements file into a zip archive laid out the way the
Lambda runtime expects. Builders share the output directory handling, the build
timestamp and the archive naming; subclasses only say how dependencies are
installed.
"""

import hashlib
import logging
import shutil
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from layer_maker.common.archiver import ZipArchiver
from layer_maker.common.artifacts import get_output_dir
from layer_maker.common.docker import DockerClient
from layer_maker.common.exceptions import ManifestNotFound

logger = logging.getLogger(__name__)

MANIFEST_NAME = "requirements.txt"
CONTENT_HASH_LENGTH = 12


@dataclass(frozen=True)
class BuildRequest:
    """Inputs of a single layer build."""

    manifest_path: Path
    runtime: str


@dataclass(frozen=True)
class BuildResult:
    """Archive produced by a layer build."""

    archive_path: Path
    size_bytes: int


def build_timestamp(now: Optional[datetime] = None) -> str:
    """
    Format a UTC time for use in archive names.

    Colons and dots are not safe in file names everywhere, so
    2024-05-01T10:20:30.123Z becomes 2024-05-01T10-20-30-123Z.
    """
    now = now or datetime.now(timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H-%M-%S-") + f"{now.microsecond // 1000:03d}Z"


def content_hash(path: Union[str, Path]) -> str:
    """Short SHA-256 digest of a file's contents."""
    digest = hashlib.sha256(Path(path).read_bytes()).hexdigest()
    return digest[:CONTENT_HASH_LENGTH]


class LayerBuilder:
    """Common build steps for all runtimes."""

    name = ""
    archive_prefix = ""
    layer_dir_name = ""
    requires_manifest = True

    def __init__(
        self,
        output_dir: Optional[Union[str, Path]] = None,
        docker: Optional[DockerClient] = None,
        archiver: Optional[ZipArchiver] = None,
    ):
        self.output_dir = get_output_dir(output_dir)
        self.docker = docker or DockerClient()
        self.archiver = archiver or ZipArchiver()

    def archive_name(self, timestamp: str, suffix: Optional[str] = None) -> str:
        parts = [self.archive_prefix, timestamp]
        if suffix:
            parts.append(suffix)
        return "-".join(parts) + ".zip"

    def prepare_output_dir(self, manifest_path: Path) -> Path:
        """
        Reset the staging tree and copy the requirements file next to it.

        Returns:
            Path: The freshly created layer directory
        """
        layer_dir = self.output_dir / self.layer_dir_name
        self.output_dir.mkdir(parents=True, exist_ok=True)
        if layer_dir.exists():
            shutil.rmtree(layer_dir)
        layer_dir.mkdir(parents=True)
        manifest_copy = self.output_dir / MANIFEST_NAME
        if manifest_path.resolve() != manifest_copy.resolve():
            shutil.copyfile(manifest_path, manifest_copy)
        return layer_dir

    def install_dependencies(self) -> None:
        raise NotImplementedError

    def create_layer(
        self, manifest_path: Union[str, Path], with_content_hash: bool = False
    ) -> BuildResult:
        """
        Build a layer archive from a requirements file.

        Args:
            manifest_path: Path to the requirements file
            with_content_hash: Append a digest of the requirements file to the
                archive name

        Returns:
            BuildResult: Path and size of the archive in the output directory

        Raises:
            ManifestNotFound: If manifest_path is not a regular file
            ImageUnavailable: If the build image cannot be pulled
            InstallFailed: If installing the dependencies fails
            CompressionFailed: If the archive cannot be written
        """
        request = BuildRequest(Path(manifest_path), self.name)
        if not request.manifest_path.is_file():
            raise ManifestNotFound(str(request.manifest_path))

        logger.info(
            f"Creating Lambda layer for {request.runtime} using {request.manifest_path}"
        )

        timestamp = build_timestamp()
        suffix = content_hash(request.manifest_path) if with_content_hash else None
        zip_name = self.archive_name(timestamp, suffix)
        zip_path = self.output_dir / zip_name

        self.prepare_output_dir(request.manifest_path)
        self.install_dependencies()

        logger.info("Creating zip file...")
        self.archiver.archive(
            zip_path, self.output_dir, [self.layer_dir_name, MANIFEST_NAME]
        )

        logger.info(f"Lambda layer created successfully: {zip_path}")
        return BuildResult(archive_path=zip_path, size_bytes=zip_path.stat().st_size)
