from __future__ import annotations

from intermediate_generics.ordering import ComparisonResult, compare


def test_compare_returns_three_way_result() -> None:
    assert compare(5, 6) is ComparisonResult.ORDERED_ASCENDING
    assert compare(6, 5) is ComparisonResult.ORDERED_DESCENDING
    assert compare(5, 5) is ComparisonResult.ORDERED_SAME


def test_compare_works_with_any_ordered_type() -> None:
    assert compare("apple", "banana") is ComparisonResult.ORDERED_ASCENDING
    assert compare((2, "b"), (2, "a")) is ComparisonResult.ORDERED_DESCENDING


def test_comparison_result_is_usable_as_sign() -> None:
    assert int(compare(1, 2)) == -1
    assert sorted([compare(3, 1), compare(1, 3), compare(2, 2)]) == [-1, 0, 1]
