"""
Dead-file and unknown-import detection.

Every node without edges is either an external dependency (skipped), a file
that exists on disk but is never imported (dead), or an import target that
resolves to nothing (unknown).
"""

import logging
from pathlib import Path
from typing import Iterable, List, Set, Tuple

from react_analyzer.graph.models import ImportGraph, Node

logger = logging.getLogger(__name__)


def is_declared_dependency(path: str, dependencies: Set[str]) -> bool:
    """True if any component-wise prefix of *path* is a declared dependency.

    ``lodash/debounce`` matches ``lodash``; ``@scope/pkg/x`` matches ``@scope/pkg``.
    """
    segments = path.split("/")
    for end in range(1, len(segments) + 1):
        if "/".join(segments[:end]) in dependencies:
            return True
    return False


def _disk_path(root: Path, node: Node) -> Path:
    path = node.path
    if node.extension and not path.endswith(f".{node.extension}"):
        path = f"{path}.{node.extension}"
    return root / path.lstrip("/")


def find_dead(
    graph: ImportGraph, dependencies: Iterable[str], root: Path
) -> Tuple[List[str], List[str]]:
    """
    Classify disconnected nodes.

    Args:
        graph: Finished import graph
        dependencies: Declared package names
        root: Project root the node paths are relative to

    Returns:
        Tuple of (dead_files, unknown_imports), each in node id order
    """
    connected = graph.connected_ids()
    declared = set(dependencies)
    dead_files: List[str] = []
    unknown_imports: List[str] = []

    for node in graph.nodes:
        if node.id in connected:
            continue
        if is_declared_dependency(node.path, declared):
            continue
        if _disk_path(root, node).exists():
            dead_files.append(node.path)
        else:
            unknown_imports.append(node.path)

    logger.debug("%d dead file(s), %d unknown import(s)", len(dead_files), len(unknown_imports))
    return dead_files, unknown_imports
