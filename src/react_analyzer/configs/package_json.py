"""
package.json loading.

Only the dependency maps are read; version strings are ignored.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

from react_analyzer.configs.base import ConfigError, read_json_object
from react_analyzer.exceptions import ConfigLoadError
from react_analyzer.utils.paths import to_relative_posix

logger = logging.getLogger(__name__)


@dataclass
class PackageJson:
    """Declared dependencies of one package.json."""

    file_path: str  # Root-relative
    dependencies: Dict[str, str] = field(default_factory=dict)
    dev_dependencies: Dict[str, str] = field(default_factory=dict)
    peer_dependencies: Dict[str, str] = field(default_factory=dict)

    def list_dependencies(self) -> List[str]:
        """All declared names, runtime first, without duplicates."""
        names: Dict[str, None] = {}
        for group in (self.dependencies, self.dev_dependencies, self.peer_dependencies):
            for name in group:
                names.setdefault(name, None)
        return list(names)


def _dependency_map(data: Dict[str, Any], key: str, file_path: str) -> Dict[str, str]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigLoadError(file_path, f'"{key}" must be an object')
    return {str(name): str(version) for name, version in value.items()}


def parse_package_json(path: Path, root: Path) -> PackageJson:
    """
    Parse a single package.json.

    Raises:
        ConfigLoadError: If the file is unreadable or malformed
    """
    file_path = to_relative_posix(path, root)
    data = read_json_object(path, root)
    return PackageJson(
        file_path=file_path,
        dependencies=_dependency_map(data, "dependencies", file_path),
        dev_dependencies=_dependency_map(data, "devDependencies", file_path),
        peer_dependencies=_dependency_map(data, "peerDependencies", file_path),
    )


def load_package_jsons(
    paths: Iterable[Path], root: Path
) -> Tuple[List[PackageJson], List[ConfigError]]:
    """
    Load every package.json in *paths*.

    Malformed files are logged, reported as ConfigError and left out.

    Returns:
        Tuple of (loaded configs, errors)
    """
    configs: List[PackageJson] = []
    errors: List[ConfigError] = []
    for path in paths:
        try:
            configs.append(parse_package_json(path, root))
        except ConfigLoadError as e:
            logger.warning(f"Skipping package.json: {e}")
            errors.append(ConfigError(file_path=e.file_path, message=e.message))
    logger.debug("Loaded %d package.json file(s), %d error(s)", len(configs), len(errors))
    return configs, errors


def declared_dependencies(package_jsons: Iterable[PackageJson]) -> List[str]:
    """Union of declared dependency names across *package_jsons*."""
    names: Dict[str, None] = {}
    for package_json in package_jsons:
        for name in package_json.list_dependencies():
            names.setdefault(name, None)
    return list(names)
