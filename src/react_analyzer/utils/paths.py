"""
Lexical path helpers.

Graph keys are root-relative POSIX strings. Nothing in this module touches the
filesystem: ``..`` pops a component, ``.`` and empty components are dropped.
"""

from pathlib import Path, PurePosixPath
from typing import List

ROOT = "/"


def path_components(path: str) -> List[str]:
    """Split *path* into components, keeping a leading ``/`` as its own component."""
    parts = [p for p in path.split("/") if p not in ("", ".")]
    if path.startswith(ROOT):
        return [ROOT] + parts
    return parts


def normalize_path(path: str) -> str:
    """Lexically normalize *path*.

    >>> normalize_path("a/./b/../c")
    'a/c'
    >>> normalize_path("../x")
    'x'
    """
    is_absolute = path.startswith(ROOT)
    parts: List[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts:
                parts.pop()
            continue
        parts.append(part)
    joined = "/".join(parts)
    return ROOT + joined if is_absolute else joined


def join_paths(*parts: str) -> str:
    """Join path fragments with ``/``, skipping empty fragments.

    An absolute fragment restarts the path, as with ``os.path.join``.
    """
    result = ""
    for part in parts:
        if not part:
            continue
        if part.startswith(ROOT) or not result:
            result = part
        else:
            result = f"{result.rstrip('/')}/{part}"
    return result


def parent_dir(path: str) -> str:
    """Return the directory part of *path* ("" for a root-level file)."""
    parent = str(PurePosixPath(path).parent)
    return "" if parent == "." else parent


def strip_extension(path: str) -> str:
    """Drop the last suffix of *path*: ``src/a.test.ts`` -> ``src/a.test``."""
    pure = PurePosixPath(path)
    if not pure.suffix:
        return path
    return str(pure.with_suffix(""))


def is_path_prefix(prefix: str, path: str) -> bool:
    """Component-wise prefix test; ``""`` is a prefix of every relative path."""
    prefix_parts = path_components(prefix)
    path_parts = path_components(path)
    return path_parts[: len(prefix_parts)] == prefix_parts


def path_distance(path_a: str, path_b: str) -> int:
    """Number of components to pop to get from *path_a* to *path_b*.

    At each step the longer path loses its last component; on a tie the
    second path is popped. Siblings are therefore 2 apart and a parent and
    its child 1 apart.
    """
    a = path_components(path_a)
    b = path_components(path_b)
    distance = 0
    while a != b:
        if len(a) > len(b):
            a.pop()
        else:
            b.pop()
        distance += 1
    return distance


def to_relative_posix(path: Path, root: Path) -> str:
    """Return *path* relative to *root* as a POSIX string."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()
