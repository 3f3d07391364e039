"""Stack-based puzzles: bracket matching, notation conversion and pair removal."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "InvalidExpressionError",
    "is_balanced",
    "infix_to_postfix",
    "infix_to_prefix",
    "sort_stack",
    "equal_sum_pairs",
    "remove_pairs",
]

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())

_OPERATORS = frozenset("+-*/(")
# Precedence of an operator already on the stack, and of one arriving.
_STACK_PRECEDENCE = {"+": 2, "-": 2, "*": 4, "/": 4, "(": 0}
_INCOMING_PRECEDENCE = {"+": 1, "-": 1, "*": 3, "/": 3, "(": 100}


class InvalidExpressionError(ValueError):
    """Raised when an infix expression has unmatched parentheses."""


def is_balanced(expression: str) -> bool:
    """Whether every bracket in ``expression`` is closed in the right order."""
    stack: list[str] = []
    for char in expression:
        if char in _OPENERS:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack


def _is_operand(char: str) -> bool:
    return ("A" <= char <= "Z") or ("a" <= char <= "z") or ("1" <= char <= "9")


def _outranks(top: str, incoming: str) -> bool:
    return _STACK_PRECEDENCE[top] > _INCOMING_PRECEDENCE[incoming]


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operands are letters and the digits 1 to 9; any other character that is
    neither an operator nor a parenthesis is skipped.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if _is_operand(char):
            output.append(char)
        elif char in _OPERATORS:
            while stack and _outranks(stack[-1], char):
                output.append(stack.pop())
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise InvalidExpressionError("closing parenthesis without an opening one")
            stack.pop()
    while stack:
        operator = stack.pop()
        if operator == "(":
            raise InvalidExpressionError("opening parenthesis is never closed")
        output.append(operator)
    return "".join(output)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix by way of its mirrored postfix form."""
    mirrored = expression[::-1].translate(str.maketrans("()", ")("))
    return infix_to_postfix(mirrored)[::-1]


def sort_stack(items: Sequence[int]) -> list[int]:
    """Sort a stack given bottom to top so the largest value lies at the bottom.

    The result is listed bottom to top as well, so its last element is the
    smallest value.
    """
    stack = list(items)
    for _ in range(len(stack)):
        # One pass: lift the top and sink the larger of each neighbouring pair.
        carried: list[int] = []
        value = stack.pop() if stack else None
        while value is not None:
            if not stack:
                stack.append(value)
                break
            below = stack.pop()
            smaller, larger = (below, value) if below < value else (value, below)
            carried.append(smaller)
            value = larger
        while carried:
            stack.append(carried.pop())
    return stack


def equal_sum_pairs(numbers: Sequence[int]) -> list[tuple[tuple[int, int], tuple[int, int]]]:
    """Pairs of value pairs with equal sums, ``a + b == c + d``.

    Pairs are visited in index order; each later pair is matched with the
    first pair that reached the same sum.
    """
    first_with_sum: dict[int, tuple[int, int]] = {}
    found: list[tuple[tuple[int, int], tuple[int, int]]] = []
    for i, left in enumerate(numbers):
        for right in numbers[i + 1:]:
            total = left + right
            if total in first_with_sum:
                found.append((first_with_sum[total], (left, right)))
            else:
                first_with_sum[total] = (left, right)
    return found


def remove_pairs(text: str) -> str:
    """Remove characters from ``text`` two by two, matching each with an earlier twin.

    Characters are taken from the end; each is cancelled against the nearest
    earlier equal character, and what cannot be matched is kept.
    """
    pending = list(text)
    kept: list[str] = []
    kept_top: str | None = None
    while pending:
        char = pending.pop()
        while pending and pending[-1] != char:
            kept.append(pending.pop())
        matched = bool(pending)
        if matched:
            pending.pop()
        while kept and kept[-1] != kept_top:
            pending.append(kept.pop())
        if not matched:
            kept.append(char)
            kept_top = char
    return "".join(reversed(kept))