from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from intermediate_generics.utils.numeric_utils import clamp_non_negative


class NonNegative[N: (int, float, Decimal, Fraction)]:
    """Numeric value that is clamped to zero on construction and assignment."""

    __slots__ = ("_value",)

    def __init__(self, value: N) -> None:
        self._value = clamp_non_negative(value)

    @property
    def value(self) -> N:
        return self._value

    @value.setter
    def value(self, new_value: N) -> None:
        self._value = clamp_non_negative(new_value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, NonNegative):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class SpeedTracker(BaseModel):
    current: float = 0.0
    highest: float = 0.0

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("current", "highest", mode="after")
    @classmethod
    def _clamp_speed(cls, value: float) -> float:
        return clamp_non_negative(value)

    def record(self, speed: float) -> None:
        self.current = speed
        if self.current > self.highest:
            self.highest = self.current
