from __future__ import annotations

from enum import Enum
from typing import Any, Protocol


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


class ComparisonResult(int, Enum):
    ORDERED_ASCENDING = -1
    ORDERED_SAME = 0
    ORDERED_DESCENDING = 1


def compare[T: SupportsLessThan](lhs: T, rhs: T) -> ComparisonResult:
    if lhs < rhs:
        return ComparisonResult.ORDERED_ASCENDING
    if rhs < lhs:
        return ComparisonResult.ORDERED_DESCENDING
    return ComparisonResult.ORDERED_SAME
