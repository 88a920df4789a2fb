"""
Size check for built layer archives.

Lambda rejects direct uploads of layer archives larger than 50 MB; bigger archives
must be staged in S3 first. The unzipped size of all layers and the function code
together is capped separately at 250 MB.
"""

import logging
import os
from pathlib import Path
from typing import Union

from layer_maker.config import LAYER_SIZE_LIMIT_MB, UNZIPPED_SIZE_LIMIT_MB

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1024 * 1024


def is_over_limit(size_bytes: int, limit_mb: int = LAYER_SIZE_LIMIT_MB) -> bool:
    """Return True if size_bytes is strictly larger than limit_mb megabytes."""
    return size_bytes > limit_mb * BYTES_PER_MB


def check_layer_size(zip_path: Union[str, Path]) -> bool:
    """
    Report whether a layer archive fits within the direct upload limit.

    Only reports; the archive is never modified and the caller is never stopped.

    Args:
        zip_path: Path to the layer archive

    Returns:
        bool: True if the archive exceeds the limit, False otherwise
    """
    size_bytes = os.path.getsize(zip_path)
    size_mb = size_bytes / BYTES_PER_MB

    if is_over_limit(size_bytes):
        logger.warning(
            f"Layer size ({size_mb:.2f}MB) exceeds AWS Lambda limit of "
            f"{LAYER_SIZE_LIMIT_MB}MB. Upload it to S3 first. Be mindful that the "
            f"Lambda package cannot exceed {UNZIPPED_SIZE_LIMIT_MB}MB unzipped."
        )
        return True

    logger.info(f"Layer size ({size_mb:.2f}MB) is within recommended limits")
    return False
