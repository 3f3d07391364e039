"""Classic sorting algorithms and a step-counting grid walk."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "bubble_sort",
    "counting_sort",
    "cycle_sort",
    "heap_sort",
    "merge_sort",
    "insertion_sort",
    "is_sorted",
    "quick_sort",
    "digit_pass",
    "radix_sort",
    "selection_sort",
    "wave_sort",
    "step_paths",
]


def bubble_sort(items: Sequence[int]) -> list[int]:
    """Sorted copy by adjacent swaps, stopping after a pass with no swap."""
    result = list(items)
    for last in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(last):
            if result[j + 1] < result[j]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def counting_sort(items: Sequence[int]) -> list[int]:
    """Sorted copy of non-negative integers built from a table of counts."""
    if not items:
        return []
    if any(value < 0 for value in items):
        raise ValueError("counting sort needs non-negative values")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def cycle_sort(items: Sequence[int]) -> list[int]:
    """Sorted copy of values drawn from ``1..n``, each swapped into its own slot."""
    result = list(items)
    size = len(result)
    if any(not 1 <= value <= size for value in result):
        raise ValueError("values must lie between 1 and the length of the sequence")
    index = 0
    while index < size:
        slot = result[index] - 1
        if result[index] != result[slot]:
            result[index], result[slot] = result[slot], result[index]
        else:
            index += 1
    return result


def _sift_down(values: list[int], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == root:
            return
        values[root], values[largest] = values[largest], values[root]
        root = largest


def heap_sort(items: Sequence[int]) -> list[int]:
    """Sorted copy made with a max-heap."""
    result = list(items)
    size = len(result)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(result, size, root)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def merge_sort(items: Sequence[int]) -> list[int]:
    """Sorted copy made by splitting in halves and merging them back."""
    if len(items) <= 1:
        return list(items)
    middle = len(items) // 2
    left = merge_sort(items[:middle])
    right = merge_sort(items[middle:])
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def insertion_sort(items: Sequence[int]) -> list[int]:
    """Sorted copy made by inserting each value into the sorted prefix."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and key < result[j]:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def is_sorted(items: Sequence[int]) -> bool:
    """Whether the values never decrease from left to right."""
    return all(a <= b for a, b in zip(items, items[1:]))


def quick_sort(items: Sequence[int]) -> list[int]:
    """Sorted copy made by partitioning around the middle value."""
    result = list(items)

    def sort(low: int, high: int) -> None:
        if low >= high:
            return
        start, end = low, high
        pivot = result[start + (end - start) // 2]
        while start <= end:
            while result[start] < pivot:
                start += 1
            while result[end] > pivot:
                end -= 1
            if start <= end:
                result[start], result[end] = result[end], result[start]
                start += 1
                end -= 1
        sort(low, end)
        sort(start, high)

    sort(0, len(result) - 1)
    return result


def _check_non_negative(items: Sequence[int]) -> None:
    if any(value < 0 for value in items):
        raise ValueError("radix sorting needs non-negative values")


def digit_pass(items: Sequence[int], exponent: int) -> list[int]:
    """Stable copy ordered by the decimal digit at place value ``exponent``."""
    if exponent < 1:
        raise ValueError("exponent must be a positive place value")
    _check_non_negative(items)
    buckets: list[list[int]] = [[] for _ in range(10)]
    for value in items:
        buckets[(value // exponent) % 10].append(value)
    return [value for bucket in buckets for value in bucket]


def radix_sort(items: Sequence[int]) -> list[int]:
    """Sorted copy of non-negative integers, one decimal digit at a time."""
    _check_non_negative(items)
    result = list(items)
    if not result:
        return result
    largest = max(result)
    exponent = 1
    while largest // exponent > 0:
        result = digit_pass(result, exponent)
        exponent *= 10
    return result


def selection_sort(items: Sequence[int]) -> list[int]:
    """Sorted copy made by swapping the smallest remaining value forward."""
    result = list(items)
    for first in range(len(result)):
        smallest = min(range(first, len(result)), key=result.__getitem__)
        result[first], result[smallest] = result[smallest], result[first]
    return result


def wave_sort(items: Sequence[int]) -> list[int]:
    """Sort, then swap each neighbouring pair so values go high, low, high, ..."""
    result = sorted(items)
    for i in range(0, len(result) - 1, 2):
        result[i], result[i + 1] = result[i + 1], result[i]
    return result


def step_paths(grid: Sequence[Sequence[int]], goal: tuple[int, int]) -> list[list[list[int]]]:
    """Every down/right walk from the top-left cell to ``goal``.

    Each cell holds how many times it may be entered; a walk may only leave
    a cell that still has a visit left after being entered, and never from
    the last row or column. Each walk is returned as a grid of step numbers
    (1 at the start, 0 off the walk).
    """
    counts = [list(row) for row in grid]
    if not counts or not counts[0]:
        return []
    rows, cols = len(counts), len(counts[0])
    target = tuple(goal)
    steps = [[0] * cols for _ in range(rows)]
    found: list[list[list[int]]] = []

    def walk(row: int, col: int, step: int) -> None:
        if (row, col) == target:
            steps[row][col] = step
            found.append([line[:] for line in steps])
            steps[row][col] = 0
            return
        if counts[row][col] == 0:
            return
        counts[row][col] -= 1
        steps[row][col] = step
        if row < rows - 1 and col < cols - 1 and counts[row][col]:
            walk(row + 1, col, step + 1)
            walk(row, col + 1, step + 1)
        steps[row][col] = 0
        counts[row][col] += 1

    walk(0, 0, 1)
    return found