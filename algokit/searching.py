"""Binary searches, matrix searches and cyclic-sort based lookups."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "binary_search",
    "staircase_search",
    "find_min",
    "ceiling_index",
    "missing_number",
    "find_duplicates",
    "first_missing_positive",
    "order_agnostic_search",
    "floor_row",
    "sorted_matrix_search",
]

NOT_FOUND: tuple[int, int] = (-1, -1)


def binary_search(items: Sequence[int], target: int) -> int:
    """Iterative binary search over an ascending sequence; -1 when absent."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        if items[mid] < target:
            start = mid + 1
        elif items[mid] > target:
            end = mid - 1
        else:
            return mid
    return -1


def staircase_search(matrix: Sequence[Sequence[int]], target: int) -> tuple[int, int]:
    """Search a square matrix sorted along rows and columns.

    Walks from the top-right corner: right-to-left when the value is too big,
    downwards when it is too small. Returns ``(row, col)`` or ``(-1, -1)``.
    """
    row, col = 0, len(matrix) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return (row, col)
        if value < target:
            row += 1
        else:
            col -= 1
    return NOT_FOUND


def find_min(nums: Sequence[int]) -> int:
    """Smallest value of an ascending sequence that may have been rotated."""
    if not nums:
        raise ValueError("cannot find the minimum of an empty sequence")
    start, end = 0, len(nums) - 1
    while start < end:
        mid = start + (end - start) // 2
        if nums[mid] > nums[end]:
            start = mid + 1
        else:
            end = mid
    return nums[start]


def ceiling_index(items: Sequence[int], target: int) -> int:
    """Index of ``target`` in an ascending sequence, or of the first larger value.

    Returns ``len(items)`` when every value is smaller than ``target``.
    """
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        if items[mid] < target:
            start = mid + 1
        elif items[mid] > target:
            end = mid - 1
        else:
            return mid
    return start


def _cyclic_place(values: list[int], slot_of) -> None:
    """Swap each value towards the slot ``slot_of`` gives it, in place."""
    index = 0
    while index < len(values):
        slot = slot_of(values[index])
        if slot is not None and values[index] != values[slot]:
            values[index], values[slot] = values[slot], values[index]
        else:
            index += 1


def missing_number(nums: Sequence[int]) -> int:
    """The one value of ``0..len(nums)`` that does not appear in ``nums``."""
    values = list(nums)
    size = len(values)
    _cyclic_place(values, lambda value: value if 0 <= value < size else None)
    return next(
        (index for index, value in enumerate(values) if value != index), size
    )


def find_duplicates(nums: Sequence[int]) -> list[int]:
    """Values left out of place after cyclic-sorting values drawn from ``1..n``."""
    values = list(nums)
    size = len(values)
    if any(not 1 <= value <= size for value in values):
        raise ValueError("values must lie between 1 and the length of the sequence")
    _cyclic_place(values, lambda value: value - 1)
    return [value for index, value in enumerate(values) if value != index + 1]


def first_missing_positive(nums: Sequence[int]) -> int:
    """Smallest positive integer that does not appear in ``nums``."""
    values = list(nums)
    size = len(values)
    _cyclic_place(values, lambda value: value - 1 if 1 <= value <= size else None)
    return next(
        (index + 1 for index, value in enumerate(values) if value != index + 1),
        size + 1,
    )


def order_agnostic_search(items: Sequence[int], target: int) -> int:
    """Binary search that works on ascending or descending sequences; -1 if absent."""
    if not items:
        return -1
    start, end = 0, len(items) - 1
    ascending = items[start] < items[end]
    while start <= end:
        mid = (start + end) // 2
        value = items[mid]
        if value == target:
            return mid
        if (value < target) == ascending:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def floor_row(matrix: Sequence[Sequence[int]], target: int) -> int:
    """Index of the last row whose first value is at most ``target``; -1 if none."""
    if not matrix or target < matrix[0][0]:
        return -1
    start, end = 0, len(matrix) - 1
    while start <= end:
        mid = start + (end - start) // 2
        first = matrix[mid][0]
        if target < first:
            end = mid - 1
        elif target > first:
            start = mid + 1
        else:
            return mid
    return end


def sorted_matrix_search(matrix: Sequence[Sequence[int]], target: int) -> tuple[int, int]:
    """Search a matrix whose rows, read one after another, are ascending.

    Returns ``(row, col)`` or ``(-1, -1)``.
    """
    row = floor_row(matrix, target)
    if row < 0:
        return NOT_FOUND
    col = binary_search(matrix[row], target)
    if col < 0:
        return NOT_FOUND
    return (row, col)