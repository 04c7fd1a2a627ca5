from __future__ import annotations

import logging
from collections.abc import Hashable, ItemsView, Iterable
from typing import Any

from intermediate_generics.containers.policies import (
    RemovalPolicy,
    coerce_removal_policy,
)
from intermediate_generics.settings import get_settings

logger = logging.getLogger(__name__)


class CountedSet[T: Hashable]:
    """Multiset that tracks how many times each distinct element was inserted.

    Keys with a count of zero stay in the mapping, so ``is_empty`` reports
    whether any key was ever recorded rather than whether all counts are zero.
    Under ``RemovalPolicy.CLAMP`` counts never drop below zero and removing an
    unknown element records nothing. ``RemovalPolicy.SIGNED`` turns the set
    into a signed delta counter.
    """

    __slots__ = ("_elements", "_policy")

    def __init__(
        self,
        elements: Iterable[T] | None = None,
        *,
        policy: RemovalPolicy | str | None = None,
    ) -> None:
        if policy is None:
            policy = get_settings().counted_set_removal_policy
        self._policy = coerce_removal_policy(policy)
        self._elements: dict[T, int] = {}
        if elements is not None:
            self.update(elements)

    @property
    def policy(self) -> RemovalPolicy:
        return self._policy

    @property
    def distinct_count(self) -> int:
        return len(self._elements)

    @property
    def is_empty(self) -> bool:
        return not self._elements

    def insert(self, element: T) -> None:
        self._elements[element] = self._elements.get(element, 0) + 1

    def update(self, elements: Iterable[T]) -> None:
        for element in elements:
            self.insert(element)

    def remove(self, element: T) -> None:
        current = self._elements.get(element, 0)
        if self._policy == RemovalPolicy.CLAMP and current <= 0:
            logger.debug(
                "counted_set_remove_clamped element=%r recorded=%s",
                element,
                element in self._elements,
            )
            return
        self._elements[element] = current - 1

    def count(self, element: T) -> int:
        return self._elements.get(element, 0)

    def items(self) -> ItemsView[T, int]:
        return self._elements.items()

    def to_dict(self) -> dict[T, int]:
        return dict(self._elements)

    def copy(self) -> CountedSet[T]:
        clone: CountedSet[T] = CountedSet(policy=self._policy)
        clone._elements = dict(self._elements)
        return clone

    def __contains__(self, element: object) -> bool:
        return self._elements.get(element, 0) > 0  # type: ignore[call-overload]

    def __len__(self) -> int:
        return len(self._elements)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CountedSet):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self) -> int:
        # Instances used as keys must not be mutated afterwards.
        return hash(frozenset(self._elements.items()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._elements!r})"
