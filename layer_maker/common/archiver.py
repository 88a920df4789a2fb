"""Zip archive creation for layer directories."""

import logging
import os
import zipfile
from pathlib import Path
from typing import Iterable, Union

from layer_maker.common.exceptions import CompressionFailed

logger = logging.getLogger(__name__)


class ZipArchiver:
    """Compresses files and directory trees into a deflated zip archive."""

    def archive(
        self,
        zip_path: Union[str, Path],
        base_dir: Union[str, Path],
        entries: Iterable[str],
    ) -> Path:
        """
        Create a zip archive from entries under base_dir.

        Directories are added recursively. Archive member names are relative to
        base_dir, so an entry "python" ends up as "python/..." in the archive.

        Args:
            zip_path: Path of the archive to create
            base_dir: Directory the entries are relative to
            entries: File or directory names relative to base_dir

        Returns:
            Path: Path to the created archive

        Raises:
            CompressionFailed: If an entry is missing or the archive cannot be written
        """
        zip_path = Path(zip_path)
        base_dir = Path(base_dir)

        try:
            with zipfile.ZipFile(zip_path, "w", zipfile.ZIP_DEFLATED) as zipf:
                for entry in entries:
                    entry_path = base_dir / entry
                    if entry_path.is_dir():
                        for root, dirs, files in os.walk(entry_path):
                            dirs.sort()
                            for file in sorted(files):
                                file_path = os.path.join(root, file)
                                arcname = os.path.relpath(file_path, base_dir)
                                zipf.write(file_path, arcname)
                    elif entry_path.is_file():
                        zipf.write(entry_path, entry)
                    else:
                        raise FileNotFoundError(f"{entry_path} does not exist")
        except (OSError, zipfile.BadZipFile) as e:
            if zip_path.exists():
                zip_path.unlink()
            raise CompressionFailed(f"Failed to create {zip_path}: {str(e)}") from e

        logger.debug(f"Created archive {zip_path}")
        return zip_path
