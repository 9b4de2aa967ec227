"""Classic comparison sorts; each returns a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Insert each item into place, scanning the sorted prefix from its end."""
    result: list[T] = []
    for item in items:
        position = len(result)
        while position and result[position - 1] > item:
            position -= 1
        result.insert(position, item)
    return result


def selection_sort(items: Iterable[T]) -> list[T]:
    """Repeatedly swap the smallest remaining item to the front."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def _partition(values: list[T], low: int, high: int) -> int:
    pivot = values[high]
    store = low
    for j in range(low, high):
        if values[j] < pivot:
            values[store], values[j] = values[j], values[store]
            store += 1
    values[store], values[high] = values[high], values[store]
    return store


def quick_sort(items: Iterable[T]) -> list[T]:
    """Quicksort with the last element of each range as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split = _partition(result, low, high)
        pending.append((split + 1, high))
        pending.append((low, split - 1))
    return result


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sort(values: list[T]) -> list[T]:
    if len(values) <= 1:
        return values
    middle = (len(values) + 1) // 2
    return _merge(_merge_sort(values[:middle]), _merge_sort(values[middle:]))


def merge_sort(items: Iterable[T]) -> list[T]:
    """Top-down merge sort."""
    return _merge_sort(list(items))