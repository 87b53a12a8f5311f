"""
Module specifier resolution.

Turns an import specifier into the canonical key used by the import graph:

- relative specifiers (``./x``, ``../x``) are joined with the importing
  file's directory and normalized lexically;
- other specifiers go through the path aliases of the closest enclosing
  tsconfig.json;
- anything else (bare packages, unmatched aliases) is kept as written.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from react_analyzer.configs.ts_config import TypeScriptConfig
from react_analyzer.utils.paths import (
    is_path_prefix,
    join_paths,
    normalize_path,
    parent_dir,
    path_distance,
)

logger = logging.getLogger(__name__)

WILDCARD = "*"


def closest_config(
    configs: Iterable[TypeScriptConfig], file_path: str
) -> Optional[TypeScriptConfig]:
    """
    Find the most specific tsconfig.json enclosing *file_path*.

    Args:
        configs: Loaded configs
        file_path: Root-relative path of the importing file

    Returns:
        The enclosing config with the smallest path distance, or None
    """
    best: Optional[TypeScriptConfig] = None
    best_distance = 0
    for config in configs:
        if not is_path_prefix(config.directory, file_path):
            continue
        distance = path_distance(config.directory, file_path)
        if best is None or distance < best_distance:
            best = config
            best_distance = distance
    return best


def get_aliases(config: Optional[TypeScriptConfig]) -> Optional[Dict[str, List[str]]]:
    if config is None or config.compiler_options is None:
        return None
    return config.compiler_options.paths


def get_base_url(config: Optional[TypeScriptConfig]) -> Optional[str]:
    if config is None or config.compiler_options is None:
        return None
    return config.compiler_options.base_url


def _match_alias(specifier: str, aliases: Dict[str, List[str]]) -> Optional[Tuple[str, str]]:
    """Return ``(prefix, replacement)`` of the longest matching alias pattern."""
    best: Optional[Tuple[str, str]] = None
    for pattern, targets in aliases.items():
        if not targets:
            continue
        prefix = pattern[:-1] if pattern.endswith(WILDCARD) else pattern
        replacement = targets[0]
        if replacement.endswith(WILDCARD):
            replacement = replacement[:-1]
        if not specifier.startswith(prefix):
            continue
        if best is None or len(prefix) > len(best[0]):
            best = (prefix, replacement)
    return best


def resolve_alias(specifier: str, config: Optional[TypeScriptConfig]) -> Optional[str]:
    """
    Apply the path aliases of *config* to *specifier*.

    When several patterns match, the longest one wins. The substituted path
    is resolved under the config's directory and ``baseUrl``.

    Returns:
        Normalized root-relative key, or None when no alias matches
    """
    aliases = get_aliases(config)
    if not aliases:
        return None

    match = _match_alias(specifier, aliases)
    if match is None:
        return None

    prefix, replacement = match
    substituted = replacement + specifier[len(prefix):]
    base_url = get_base_url(config) or ""
    resolved = normalize_path(join_paths(config.directory, base_url, substituted))
    logger.debug("Alias %r -> %r via %s", specifier, resolved, config.file_path)
    return resolved


def resolve_specifier(
    specifier: str, importing_file: str, config: Optional[TypeScriptConfig]
) -> str:
    """
    Compute the canonical graph key for *specifier*.

    Args:
        specifier: Import source as written
        importing_file: Root-relative path of the importing file
        config: Closest enclosing tsconfig.json, if any

    Returns:
        Canonical key, without a trailing ``/``
    """
    if specifier.startswith("."):
        key = normalize_path(join_paths(parent_dir(importing_file), specifier))
    else:
        key = resolve_alias(specifier, config) or specifier

    if key.endswith("/") and len(key) > 1:
        key = key[:-1]
    return key
