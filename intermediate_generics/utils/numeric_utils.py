from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from fractions import Fraction


def total[N: (int, float, complex, Decimal, Fraction)](
    numbers: Iterable[N],
) -> N | int:
    result: N | int = 0
    for value in numbers:
        if isinstance(value, bool):
            msg = "total() expects numeric values, got bool."
            raise TypeError(msg)
        result = result + value
    return result


def clamp_non_negative[N: (int, float, Decimal, Fraction)](value: N) -> N:
    if value < 0:
        return type(value)(0)
    return value
