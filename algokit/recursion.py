"""Recursive searching, sorting and string puzzles."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import takewhile

__all__ = [
    "rotated_search",
    "binary_search_recursive",
    "linear_search",
    "recursive_bubble_sort",
    "recursive_selection_sort",
    "star_triangle",
    "permutations",
    "remove_char",
    "remove_banana",
    "remove_ban_not_banana",
    "reverse_number",
    "boggle_score",
    "has_subset_sum",
    "square_root",
    "subsets",
    "hanoi",
]


def rotated_search(items: Sequence[int], target: int) -> int:
    """Find ``target`` in a rotated ascending sequence; return its index or -1."""

    def search(start: int, end: int) -> int:
        if start > end:
            return -1
        mid = start + (end - start) // 2
        if items[mid] == target:
            return mid
        if items[start] <= items[mid]:
            if items[start] <= target < items[mid]:
                return search(start, mid - 1)
            return search(mid + 1, end)
        if items[mid] < target <= items[end]:
            return search(mid + 1, end)
        return search(start, mid - 1)

    return search(0, len(items) - 1)


def binary_search_recursive(items: Sequence[int], target: int) -> int:
    """Recursive binary search over an ascending sequence; -1 when absent."""

    def search(start: int, end: int) -> int:
        if start > end:
            return -1
        mid = start + (end - start) // 2
        if target == items[mid]:
            return mid
        if target < items[mid]:
            return search(start, mid - 1)
        return search(mid + 1, end)

    return search(0, len(items) - 1)


def linear_search(items: Sequence[int], target: int) -> int:
    """Return the index of the first occurrence of ``target``, or -1."""
    return next((index for index, value in enumerate(items) if value == target), -1)


def recursive_bubble_sort(items: Sequence[int]) -> list[int]:
    """Return a sorted copy made by repeated adjacent-swap passes."""
    result = list(items)
    for last in range(len(result) - 1, 0, -1):
        for c in range(last):
            if result[c] > result[c + 1]:
                result[c], result[c + 1] = result[c + 1], result[c]
    return result


def recursive_selection_sort(items: Sequence[int]) -> list[int]:
    """Return a sorted copy made by moving the largest remaining value to the end."""
    result = list(items)
    for end in range(len(result), 0, -1):
        largest = max(range(end), key=result.__getitem__)
        result[largest], result[end - 1] = result[end - 1], result[largest]
    return result


def star_triangle(rows: int) -> str:
    """Render a descending triangle of ``"* "`` cells, one row per line."""
    if rows < 0:
        raise ValueError("rows must not be negative")
    return "".join("* " * width + "\n" for width in range(rows, 0, -1))


def permutations(text: str) -> list[str]:
    """All arrangements of ``text``, built by inserting each letter at every position."""

    def grow(built: str, rest: str) -> Iterator[str]:
        if not rest:
            yield built
            return
        letter = rest[0]
        for position in range(len(built) + 1):
            yield from grow(built[:position] + letter + built[position:], rest[1:])

    return list(grow("", text))


def remove_char(text: str, char: str) -> str:
    """Return ``text`` without any occurrence of ``char``."""
    return "".join(letter for letter in text if letter != char)


def remove_banana(text: str) -> str:
    """Drop six leading characters for as long as "banana" appears in the rest."""
    while "banana" in text:
        text = text[6:]
    return text


def remove_ban_not_banana(text: str) -> str:
    """Drop three leading characters whenever the rest holds "ban" but not "banana"."""
    kept: list[str] = []
    while text:
        if "ban" in text and "banana" not in text:
            text = text[3:]
        else:
            kept.append(text[0])
            text = text[1:]
    return "".join(kept)


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of a positive integer; 0 for values below 1."""
    result = 0
    while n >= 1:
        n, digit = divmod(n, 10)
        result = result * 10 + digit
    return result


def _common_prefix(letters: str, word: str) -> int:
    return sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(letters, word)))


def _cell_score(grid: Sequence[str], word: str, row: int, col: int) -> int:
    score = 0
    # A horizontal run scores once all but the final letter have matched.
    if len(word) >= 2 and _common_prefix(grid[row][col:], word) >= len(word) - 1:
        score += 1000
    column = "".join(line[col] for line in grid[row:])
    if word and _common_prefix(column, word) >= len(word):
        score += 1000
    return score


def boggle_score(grid: Sequence[str], word: str) -> int:
    """Score 1000 for each cell that starts ``word`` rightwards or downwards."""
    return sum(
        _cell_score(grid, word, row, col)
        for row, line in enumerate(grid)
        for col in range(len(line))
    )


def has_subset_sum(numbers: Sequence[int], target: int) -> bool:
    """Whether some subset of ``numbers`` (the empty one included) sums to ``target``."""
    reachable = {0}
    for number in numbers:
        reachable |= {total + number for total in reachable}
    return target in reachable


def square_root(n: int) -> float:
    """Approximate the square root by binary search, then steps of 0.001."""
    if n < 0:
        raise ValueError("cannot take the square root of a negative number")
    start, end = 0, n
    while start < end:
        mid = start + (end - start) // 2
        square = mid * mid
        if square == n:
            return float(mid)
        if square < n:
            start = mid + 1
        else:
            end = mid - 1
    answer = float(end)
    while answer * answer <= n:
        answer += 0.001
    return answer


def subsets(text: str) -> list[str]:
    """All subsequences of ``text``, those keeping the first letter listed first."""

    def grow(chosen: str, rest: str) -> Iterator[str]:
        if not rest:
            yield chosen
            return
        yield from grow(chosen + rest[0], rest[1:])
        yield from grow(chosen, rest[1:])

    return list(grow("", text))


def _hanoi_moves(n: int, source: str, target: str, spare: str) -> Iterator[tuple[int, str, str]]:
    if n == 0:
        return
    yield from _hanoi_moves(n - 1, source, spare, target)
    yield (n, source, target)
    yield from _hanoi_moves(n - 1, spare, target, source)


def hanoi(
    n: int, source: str = "A", target: str = "C", spare: str = "B"
) -> Iterator[tuple[int, str, str]]:
    """Yield ``(disk, from_peg, to_peg)`` moves that carry ``n`` disks to ``target``."""
    if n < 0:
        raise ValueError("number of disks must not be negative")
    return _hanoi_moves(n, source, target, spare)