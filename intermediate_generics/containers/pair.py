from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Pair[T]:
    start: T
    end: T

    def as_tuple(self) -> tuple[T, T]:
        return self.start, self.end
