"""
Project configuration loaders.

- package_json: declared dependencies
- ts_config: baseUrl and path aliases
"""

from react_analyzer.configs.base import ConfigError, read_json_object
from react_analyzer.configs.package_json import (
    PackageJson,
    declared_dependencies,
    load_package_jsons,
    parse_package_json,
)
from react_analyzer.configs.ts_config import (
    CompilerOptions,
    TypeScriptConfig,
    load_ts_configs,
    parse_ts_config,
)

__all__ = [
    "ConfigError",
    "read_json_object",
    "PackageJson",
    "declared_dependencies",
    "load_package_jsons",
    "parse_package_json",
    "CompilerOptions",
    "TypeScriptConfig",
    "load_ts_configs",
    "parse_ts_config",
]
