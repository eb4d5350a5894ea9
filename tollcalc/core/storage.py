# tollcalc/core/storage.py
"""
Loading of the settings file.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tollcalc.core.config import SETTINGS_FILE
from tollcalc.core.models import Settings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """General error type for problems loading data files."""

    pass


def _load_json(file_path: Path) -> list[Any] | dict[str, Any]:
    """
    Read and parse JSON with robust error handling.
    Args:
        file_path: Path to the JSON file
    Returns:
        Parsed JSON data as list or dict
    Raises:
        StorageError: If file cannot be read or JSON is invalid
    """
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.exception("Failed to read JSON file %s", file_path)
        raise StorageError(f"Could not read JSON file {file_path}: {e}") from e

    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        logger.exception("Invalid JSON in file %s", file_path)
        raise StorageError(f"Invalid JSON in file {file_path}: {e}") from e


def load_settings(file_path: str | Path = SETTINGS_FILE) -> Settings:
    """
    Load application settings from data file.
    Returns:
        Application settings
    Raises:
        StorageError: If file cannot be loaded or parsed
    """
    file_path = Path(file_path)
    data = _load_json(file_path)
    try:
        if not isinstance(data, dict):
            raise TypeError("Expected settings dict")
        settings = Settings(**data)
    except (TypeError, ValidationError) as e:
        logger.exception("Failed to parse settings from %s", file_path)
        raise StorageError(f"Could not parse settings from {file_path}: {e}") from e
    return settings
