"""
Timing instrumentation for the analysis phases.

Example:
    >>> timings = TimingContext()
    >>> with timings.measure("build graph"):
    ...     build_import_graph(files)
    >>> timings.phases
    {'build graph': 0.012}
"""

import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator

logger = logging.getLogger(__name__)


class Timer:
    """Context manager measuring the wall time of a block.

    Attributes:
        name: Name of the operation being timed
        elapsed: Time elapsed in seconds (available after the block exits)
    """

    def __init__(self, name: str):
        self.name = name
        self.elapsed: float = 0.0
        self._start_time: float = 0.0

    def __enter__(self) -> "Timer":
        self._start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool:
        self.elapsed = time.perf_counter() - self._start_time
        if exc_type is not None:
            logger.debug("%s failed with %s after %.3fs", self.name, exc_type.__name__, self.elapsed)
        else:
            logger.debug("%s took %.3fs", self.name, self.elapsed)

        # Don't suppress exceptions
        return False


class TimingContext:
    """Collects named phase durations in execution order."""

    def __init__(self):
        self.phases: Dict[str, float] = {}
        self._start_time = time.perf_counter()

    @contextmanager
    def measure(self, name: str) -> Iterator[Timer]:
        with Timer(name) as t:
            yield t
        self.phases[name] = t.elapsed

    @property
    def total(self) -> float:
        return time.perf_counter() - self._start_time
