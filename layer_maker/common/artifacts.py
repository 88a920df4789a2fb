"""Inventory of layer archives already built into the output directory."""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from layer_maker.config import OUTPUT_DIR

logger = logging.getLogger(__name__)

ARCHIVE_EXTENSION = ".zip"


def get_output_dir(output_dir: Optional[Union[str, Path]] = None) -> Path:
    """Resolve the output directory against the current working directory."""
    return Path(os.getcwd()) / (output_dir if output_dir is not None else OUTPUT_DIR)


def list_available_zips(output_dir: Optional[Union[str, Path]] = None) -> List[str]:
    """
    List the layer archives available in the output directory.

    Args:
        output_dir: Directory to scan. If None, uses OUTPUT_DIR relative to the
            current working directory.

    Returns:
        List[str]: Paths of the files ending in .zip, sorted by name. Empty if the
            directory does not exist or cannot be read.
    """
    directory = get_output_dir(output_dir)
    if not directory.exists():
        return []

    try:
        names = sorted(os.listdir(directory))
    except OSError as e:
        logger.error(f"Error reading output directory {directory}: {str(e)}")
        return []

    zips = [
        str(directory / name)
        for name in names
        if name.endswith(ARCHIVE_EXTENSION) and (directory / name).is_file()
    ]
    if not zips:
        logger.info("No zip files found in output directory.")
    return zips
