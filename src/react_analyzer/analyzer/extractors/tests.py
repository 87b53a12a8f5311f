"""
Test-case counting for test files.

Counting is line based: a line containing ``test('...',`` or ``it("...",``
counts as one test, and ``test.skip(`` / ``it.skip(`` lines are also counted
as skipped.
"""

import re
from typing import Tuple

TEST_REGEX = re.compile(r"""(test|it)\(('|").*('|"),""")
SKIPPED_REGEX = re.compile(r"""(test.skip|it.skip)\(('|").*('|"),""")


class TestCountExtractor:
    """Counts test and skipped-test declarations in source text."""

    __test__ = False  # not a pytest class

    def count(self, source: str) -> Tuple[int, int]:
        """Return ``(test_count, skipped_count)`` for *source*."""
        test_count = 0
        skipped_count = 0
        for line in source.splitlines():
            if TEST_REGEX.search(line):
                test_count += 1
            if SKIPPED_REGEX.search(line):
                skipped_count += 1
        return test_count, skipped_count
