"""
Declared-dependency usage counting.
"""

import logging
from typing import Dict, Iterable

from react_analyzer.analyzer.models import ParsedFile
from react_analyzer.configs.package_json import PackageJson, declared_dependencies

logger = logging.getLogger(__name__)


def cross_reference(
    files: Iterable[ParsedFile], package_jsons: Iterable[PackageJson]
) -> Dict[str, int]:
    """
    Count how often each declared dependency is imported.

    Every name declared in dependencies, devDependencies or peerDependencies
    starts at 0. A non-relative import counts once, for the shortest
    ``/``-separated prefix that is a declared name, so ``lodash/debounce``
    counts towards ``lodash``.

    Returns:
        Mapping of dependency name to usage count
    """
    usage: Dict[str, int] = {name: 0 for name in declared_dependencies(package_jsons)}

    for parsed_file in files:
        for import_info in parsed_file.imports:
            if import_info.source.startswith("."):
                continue
            segments = import_info.source.split("/")
            for end in range(1, len(segments) + 1):
                prefix = "/".join(segments[:end])
                if prefix in usage:
                    usage[prefix] += 1
                    break

    unused = [name for name, count in usage.items() if count == 0]
    if unused:
        logger.debug("Declared but never imported: %s", ", ".join(unused))
    return usage
