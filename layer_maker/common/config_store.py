"""
Preferences store for the layer maker.

The answers given to the publish and upload prompts (region, layer name, bucket,
key, ...) are kept in a single JSON file in the user's home directory and offered
as defaults on the next run. The file is advisory only: a missing or unreadable
file yields an empty record, and a failed write is logged and ignored.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from layer_maker.config import CONFIG_FILE

logger = logging.getLogger(__name__)


class ConfigStore:
    """File-backed key/value record of the operator's previous answers."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else Path(CONFIG_FILE)

    def load(self) -> Dict[str, Any]:
        """
        Read the stored preferences.

        Returns:
            Dict[str, Any]: The stored record, or an empty dict if the file is
                missing, unreadable or does not hold a JSON object
        """
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}

        if not isinstance(data, dict):
            return {}
        return data

    def save(self, preferences: Dict[str, Any]) -> bool:
        """
        Merge the given preferences over the stored record and write it back.

        Args:
            preferences: Fields to store; fields not given keep their stored value

        Returns:
            bool: True if the file was written, False otherwise
        """
        merged = {**self.load(), **preferences}
        try:
            self.path.write_text(json.dumps(merged, indent=2), encoding="utf-8")
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Failed to save config to {self.path}: {str(e)}")
            return False
