"""
Sequence helpers: set-style merging and difference, lenient numeric reductions,
falsy filtering and grouping.
"""

import math
from collections.abc import Hashable, Iterable, Mapping, Sequence
from decimal import Decimal
from numbers import Real
from typing import Any, TypeVar

T = TypeVar("T")


def _dedup_key(item: Any) -> tuple[bool, Any]:
    # Keeps True/False apart from 1/0, which hash and compare equal
    return isinstance(item, bool), item


def merge_arrays(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Union of both sequences without duplicates, in first-seen order.

    Items must be hashable. Booleans are kept distinct from the equal
    integers, so ``merge_arrays([1], [True]) == [1, True]``; ``1`` and ``1.0``
    are the same value.
    """
    seen: set[tuple[bool, Any]] = set()
    merged: list[T] = []
    for item in (*first, *second):
        key = _dedup_key(item)
        if key not in seen:
            seen.add(key)
            merged.append(item)
    return merged


def array_difference(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Elements of ``first`` that do not appear in ``second``.

    Booleans only match booleans, as in ``merge_arrays``. Unhashable items in
    ``second`` switch the lookup to a linear scan.
    """
    excluded = [_dedup_key(item) for item in second]
    if all(isinstance(item, Hashable) for _, item in excluded):
        lookup: set[tuple[bool, Any]] | list[tuple[bool, Any]] = set(excluded)
    else:
        lookup = excluded
    return [item for item in first if _dedup_key(item) not in lookup]


def _as_number(value: Any) -> int | float:
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return 0 if math.isnan(value) else value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return 0
        return 0 if math.isnan(number) else number
    if isinstance(value, Real | Decimal):
        return _as_number(float(value))
    return 0


def sum_array(values: Iterable[Any]) -> int | float:
    """Sum numeric entries; anything non-numeric or NaN counts as zero.

    Numeric strings are coerced, so ``sum_array([1, "2", "x"]) == 3``.
    """
    return sum((_as_number(value) for value in values), 0)


def average_array(values: Sequence[Any]) -> float:
    """Mean of ``values`` under ``sum_array`` coercion; 0 for an empty sequence."""
    if not values:
        return 0
    return sum_array(values) / len(values)


def remove_falsy_values(values: Iterable[T]) -> list[T]:
    """Drop falsy entries, NaN included."""
    return [v for v in values if v and not (isinstance(v, float) and math.isnan(v))]


def group_by(records: Iterable[T], key: str) -> dict[str, list[T]]:
    """Bucket records by ``str(record[key])``, preserving input order per bucket.

    Records may be mappings or objects exposing ``key`` as an attribute.
    """
    groups: dict[str, list[T]] = {}
    for record in records:
        value = record.get(key) if isinstance(record, Mapping) else getattr(record, key, None)
        groups.setdefault(str(value), []).append(record)
    return groups
