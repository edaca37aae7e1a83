"""Magic index search over sorted integer sequences.

A magic index is an index ``i`` such that ``values[i] == i``.  The sequence
must be sorted but may contain duplicates, so a plain binary search cannot
discard a whole half; instead both sides are searched with bounds tightened by
the midpoint value.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

logger = logging.getLogger(__name__)


def find_magic_index(values: Sequence[int]) -> Optional[int]:
    """Return an index ``i`` with ``values[i] == i`` or ``None``.

    When several magic indices exist the left partition is explored first, so
    the result is deterministic for a given input.
    """

    if values is None:
        raise ValueError("values must not be None")
    return _search(values, 0, len(values) - 1)


def _search(values: Sequence[int], start: int, end: int) -> Optional[int]:
    if start > end:
        return None
    middle = (start + end) // 2
    middle_value = values[middle]
    if middle_value == middle:
        logger.debug("Magic index found at %d", middle)
        return middle

    left = _search(values, start, min(middle - 1, middle_value))
    if left is not None:
        return left
    return _search(values, max(middle + 1, middle_value), end)


__all__ = ["find_magic_index"]
