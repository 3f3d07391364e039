from collections import Counter

import pytest

from algokit.stacks import (
    InvalidExpressionError,
    equal_sum_pairs,
    infix_to_postfix,
    infix_to_prefix,
    is_balanced,
    remove_pairs,
    sort_stack,
)


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("{[()]}", True),
        ("a(b)c[d]{e}", True),
        ("", True),
        ("([)]", False),
        ("(", False),
        (")", False),
        ("{[}", False),
    ],
)
def test_is_balanced(expression, expected):
    assert is_balanced(expression) is expected


def test_postfix_respects_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_prefix_respects_precedence():
    assert infix_to_prefix("a+b*c") == "+a*bc"


@pytest.mark.parametrize("expression", ["(a+b)*c", "a-b-c", "a*(b+c)/d", "x + y"])
def test_postfix_keeps_operands_in_order_and_drops_parentheses(expression):
    result = infix_to_postfix(expression)
    operands = [c for c in expression if c.isalnum()]
    assert [c for c in result if c.isalnum()] == operands
    assert "(" not in result and ")" not in result
    assert Counter(c for c in result if c in "+-*/") == Counter(
        c for c in expression if c in "+-*/"
    )


def test_postfix_of_parenthesised_sum_puts_operator_before_product():
    result = infix_to_postfix("(a+b)*c")
    assert result.index("+") < result.index("c")
    assert result.endswith("*")


def test_prefix_starts_with_outermost_operator():
    assert infix_to_prefix("(a+b)*c").startswith("*")


@pytest.mark.parametrize("expression", ["(a+b", "a+b)", ")a", "((a)"])
def test_unmatched_parentheses_raise(expression):
    with pytest.raises(InvalidExpressionError):
        infix_to_postfix(expression)


def test_invalid_expression_error_is_value_error():
    with pytest.raises(ValueError):
        infix_to_prefix("(a+b")


def test_sort_stack_puts_largest_at_bottom():
    items = [2, 5, 1, 4, 3, 7, 6]
    result = sort_stack(items)
    assert result == sorted(items, reverse=True)
    assert result[-1] == min(items)


def test_sort_stack_does_not_change_input():
    items = [3, 69, 56, 420, 42]
    sort_stack(items)
    assert items == [3, 69, 56, 420, 42]


def test_sort_stack_empty():
    assert sort_stack([]) == []


def test_equal_sum_pairs_sums_match():
    numbers = [3, 4, 7, 1, 2, 9, 8]
    found = equal_sum_pairs(numbers)
    assert found
    for (a, b), (c, d) in found:
        assert a + b == c + d
        assert a in numbers and b in numbers and c in numbers and d in numbers


def test_equal_sum_pairs_none_for_distinct_sums():
    assert equal_sum_pairs([1, 2, 4, 8]) == []


def test_equal_sum_pairs_matches_first_pair_with_sum():
    found = equal_sum_pairs([1, 2, 3, 4, 5])
    firsts = {a + b: (a, b) for (a, b), _ in reversed(found)}
    for (a, b), _ in found:
        assert firsts[a + b] == (a, b)


def test_remove_pairs_example():
    assert remove_pairs("assassin") == "in"


def test_remove_pairs_distinct_characters_are_kept():
    assert remove_pairs("ab") == "ab"


def test_remove_pairs_of_doubled_text_is_empty():
    assert remove_pairs("aa") == ""
    assert remove_pairs("") == ""


def test_remove_pairs_keeps_odd_counts_only():
    text = "an assassin sins"
    result = remove_pairs(text)
    counts = Counter(text)
    assert Counter(result) == Counter(
        {char: 1 for char, count in counts.items() if count % 2}
    )