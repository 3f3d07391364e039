import pytest

from algokit.linked_list import (
    LinkedList,
    ListNode,
    add_numbers,
    delete_duplicates,
    from_iterable,
    rotate,
    swap_pairs,
    to_list,
)


def digits_of(number):
    return [int(ch) for ch in reversed(str(number))]


def number_of(head):
    return int("".join(str(d) for d in reversed(to_list(head))))


@pytest.mark.parametrize("values", [[], [7], [1, 2, 3, 4, 5], [5, 5, 1]])
def test_round_trip(values):
    assert to_list(from_iterable(values)) == values


def test_from_iterable_empty_is_none():
    assert from_iterable([]) is None


def test_linked_list_appends_in_order():
    items = LinkedList()
    for value in [3, 1, 2]:
        items.append(value)
    assert list(items) == [3, 1, 2]
    assert items.head.value == 3


def test_linked_list_from_values():
    assert list(LinkedList([1, 2, 3])) == [1, 2, 3]
    assert list(LinkedList()) == []


def test_swap_pairs_odd_length():
    assert to_list(swap_pairs(from_iterable([1, 2, 3, 4, 5]))) == [2, 1, 4, 3, 5]


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4], list(range(9))])
def test_swap_pairs_twice_restores(values):
    head = swap_pairs(swap_pairs(from_iterable(values)))
    assert to_list(head) == values


def test_swap_pairs_keeps_values():
    values = [9, 8, 7, 6, 5, 4]
    assert sorted(to_list(swap_pairs(from_iterable(values)))) == sorted(values)


def test_rotate_empty():
    assert rotate(None, 3) is None


@pytest.mark.parametrize("k", [0, 5, 10])
def test_rotate_by_multiple_of_length_is_identity(k):
    values = [1, 2, 3, 4, 5]
    assert to_list(rotate(from_iterable(values), k)) == values


def test_rotate_by_one_moves_last_to_front():
    values = [1, 2, 3, 4, 5]
    result = to_list(rotate(from_iterable(values), 1))
    assert result[0] == values[-1]
    assert result[1:] == values[:-1]


@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_rotate_back_restores(k):
    values = [10, 20, 30, 40, 50]
    head = rotate(rotate(from_iterable(values), k), len(values) - k)
    assert to_list(head) == values


def test_delete_duplicates_of_sorted_list():
    values = [1, 1, 1, 2, 3, 3, 4, 5, 5, 5, 5]
    result = to_list(delete_duplicates(from_iterable(values)))
    assert result == sorted(set(values))


def test_delete_duplicates_leaves_distinct_list_alone():
    values = [1, 2, 3]
    assert to_list(delete_duplicates(from_iterable(values))) == values
    assert delete_duplicates(None) is None


def test_delete_duplicates_never_leaves_neighbouring_repeats():
    result = to_list(delete_duplicates(from_iterable([2, 2, 1, 1, 2, 2, 2])))
    assert all(a != b for a, b in zip(result, result[1:]))
    assert set(result) == {1, 2}


@pytest.mark.parametrize(
    "left, right", [(12345, 12345), (0, 0), (999, 1), (5, 99995), (807, 465)]
)
def test_add_numbers_matches_integer_sum(left, right):
    total = add_numbers(from_iterable(digits_of(left)), from_iterable(digits_of(right)))
    assert number_of(total) == left + right


def test_add_numbers_with_empty_operand():
    head = add_numbers(from_iterable([1, 2]), None)
    assert to_list(head) == [1, 2]
    assert add_numbers(None, None) is None


def test_list_node_links():
    head = ListNode(1, ListNode(2))
    assert to_list(head) == [1, 2]