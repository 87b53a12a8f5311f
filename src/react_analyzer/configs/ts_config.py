"""
tsconfig.json loading.

Reads ``compilerOptions.baseUrl`` and ``compilerOptions.paths``. ``extends``
is not followed.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from react_analyzer.configs.base import ConfigError, read_json_object
from react_analyzer.exceptions import ConfigLoadError
from react_analyzer.utils.paths import parent_dir, to_relative_posix

logger = logging.getLogger(__name__)


@dataclass
class CompilerOptions:
    """The subset of compilerOptions used for module resolution."""

    base_url: Optional[str] = None
    paths: Optional[Dict[str, List[str]]] = None


@dataclass
class TypeScriptConfig:
    """A loaded tsconfig.json."""

    file_path: str  # Root-relative
    compiler_options: Optional[CompilerOptions] = None

    @property
    def directory(self) -> str:
        """Directory scoped by this config ("" at the project root)."""
        return parent_dir(self.file_path)


def _parse_paths(value: Any, file_path: str) -> Dict[str, List[str]]:
    if not isinstance(value, dict):
        raise ConfigLoadError(file_path, '"compilerOptions.paths" must be an object')

    paths: Dict[str, List[str]] = {}
    for pattern, targets in value.items():
        if isinstance(targets, str):
            targets = [targets]
        if not isinstance(targets, list) or not all(isinstance(t, str) for t in targets):
            raise ConfigLoadError(file_path, f'paths entry "{pattern}" must be an array of strings')
        paths[pattern] = targets
    return paths


def parse_ts_config(path: Path, root: Path) -> TypeScriptConfig:
    """
    Parse a single tsconfig.json (comments and trailing commas allowed).

    Raises:
        ConfigLoadError: If the file is unreadable or malformed
    """
    file_path = to_relative_posix(path, root)
    data = read_json_object(path, root, lenient=True)

    options = data.get("compilerOptions")
    if options is None:
        return TypeScriptConfig(file_path=file_path)
    if not isinstance(options, dict):
        raise ConfigLoadError(file_path, '"compilerOptions" must be an object')

    base_url = options.get("baseUrl")
    if base_url is not None and not isinstance(base_url, str):
        raise ConfigLoadError(file_path, '"compilerOptions.baseUrl" must be a string')

    paths = options.get("paths")
    return TypeScriptConfig(
        file_path=file_path,
        compiler_options=CompilerOptions(
            base_url=base_url,
            paths=_parse_paths(paths, file_path) if paths is not None else None,
        ),
    )


def load_ts_configs(
    paths: Iterable[Path], root: Path
) -> Tuple[List[TypeScriptConfig], List[ConfigError]]:
    """
    Load every tsconfig.json in *paths*.

    Malformed files are logged, reported as ConfigError and excluded from
    alias resolution.

    Returns:
        Tuple of (loaded configs, errors)
    """
    configs: List[TypeScriptConfig] = []
    errors: List[ConfigError] = []
    for path in paths:
        try:
            configs.append(parse_ts_config(path, root))
        except ConfigLoadError as e:
            logger.warning(f"Skipping tsconfig.json: {e}")
            errors.append(ConfigError(file_path=e.file_path, message=e.message))
    logger.debug("Loaded %d tsconfig.json file(s), %d error(s)", len(configs), len(errors))
    return configs, errors
