from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable


def unique_elements[E, K: Hashable](
    values: Iterable[E],
    key: Callable[[E], K],
) -> list[E]:
    """Keep the first element seen for each distinct ``key(element)``.

    The input is consumed in a single pass and ``key`` is called exactly once
    per element. The result preserves first-occurrence order.
    """
    seen: set[K] = set()
    output: list[E] = []
    for value in values:
        derived = key(value)
        if derived in seen:
            continue
        seen.add(derived)
        output.append(value)
    return output


def dedupe_preserving_order[T: Hashable](values: Iterable[T]) -> list[T]:
    return unique_elements(values, key=lambda value: value)


def removing[T](values: Iterable[T], obj: T) -> list[T]:
    return [value for value in values if value != obj]
