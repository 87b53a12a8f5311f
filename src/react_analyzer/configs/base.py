"""
Shared helpers for loading JSON project configuration files.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import json5

from react_analyzer.exceptions import ConfigLoadError
from react_analyzer.utils.paths import to_relative_posix

logger = logging.getLogger(__name__)


@dataclass
class ConfigError:
    """A configuration file that could not be loaded and was left out."""

    file_path: str
    message: str


def read_json_object(file_path: Path, root: Path, lenient: bool = False) -> Dict[str, Any]:
    """
    Load a JSON object from *file_path*.

    tsconfig.json is read by TypeScript with a lenient parser, so *lenient*
    files go through json5, which accepts comments and trailing commas.

    Args:
        file_path: Config file to read
        root: Project root, used for error messages
        lenient: Accept comments and trailing commas

    Returns:
        Parsed top-level object

    Raises:
        ConfigLoadError: If the file is unreadable, not JSON, or not an object
    """
    relative = to_relative_posix(file_path, root)
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(relative, f"cannot read file: {e}") from e

    try:
        data = json5.loads(text) if lenient else json.loads(text)
    except (ValueError, RecursionError) as e:
        raise ConfigLoadError(relative, f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigLoadError(relative, "top-level value must be an object")
    return data
