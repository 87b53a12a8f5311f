"""
Utility modules for react-analyzer.

- paths: lexical path helpers
- timer: phase timing instrumentation
"""

from react_analyzer.utils.paths import normalize_path, path_distance
from react_analyzer.utils.timer import Timer, TimingContext

__all__ = [
    "normalize_path",
    "path_distance",
    "Timer",
    "TimingContext",
]
