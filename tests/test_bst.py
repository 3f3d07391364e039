import pytest

from algokit.binary_tree import TreeNode
from algokit.bst import (
    BinarySearchTree,
    is_difference_tree,
    min_depth,
    sibling_difference_sum,
)

VALUES = [10, 20, 2, 5, -2, 0, 40, 25]


@pytest.fixture
def tree():
    return BinarySearchTree(VALUES)


def example_difference_tree():
    root = TreeNode(18)
    root.left = TreeNode(10, TreeNode(20), TreeNode(10))
    root.right = TreeNode(5, TreeNode(11), TreeNode(6))
    return root


def test_inorder_is_sorted(tree):
    assert tree.inorder() == sorted(VALUES)


def test_len_and_total(tree):
    assert len(tree) == len(VALUES)
    assert tree.total() == sum(VALUES)


def test_empty_tree():
    empty = BinarySearchTree()
    assert len(empty) == 0
    assert empty.inorder() == []
    assert empty.level_order() == []
    assert empty.render() == ""
    assert empty.height() == 0


def test_contains(tree):
    for value in VALUES:
        assert value in tree
    assert 7 not in tree
    assert 100 not in tree


def test_minimum_and_maximum(tree):
    assert tree.minimum() == min(VALUES)
    assert tree.maximum() == max(VALUES)


def test_minimum_of_empty_tree_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().minimum()
    with pytest.raises(ValueError):
        BinarySearchTree().maximum()


def test_duplicates_go_left():
    t = BinarySearchTree([5, 5])
    assert t.root.left.value == 5
    assert t.root.right is None


def test_preorder_round_trip(tree):
    rebuilt = BinarySearchTree(tree.preorder())
    assert rebuilt.preorder() == tree.preorder()
    assert tree.preorder()[0] == VALUES[0]


def test_level_order_round_trip(tree):
    rebuilt = BinarySearchTree(tree.level_order())
    assert rebuilt.level_order() == tree.level_order()
    assert tree.level_order()[0] == VALUES[0]


def test_postorder_ends_with_root(tree):
    post = tree.postorder()
    assert post[-1] == VALUES[0]
    assert sorted(post) == sorted(VALUES)


@pytest.mark.parametrize("value", [0, 5, 20, 10, -2])
def test_delete_keeps_order(tree, value):
    tree.delete(value)
    expected = sorted(VALUES)
    expected.remove(value)
    assert tree.inorder() == expected
    assert value not in tree


def test_delete_absent_changes_nothing(tree):
    before = tree.preorder()
    tree.delete(99)
    assert tree.preorder() == before


def test_delete_only_node():
    t = BinarySearchTree([3])
    t.delete(3)
    assert len(t) == 0


def test_level_of(tree):
    assert tree.level_of(VALUES[0]) == 0
    assert tree.level_of(VALUES[1]) == 1
    assert tree.level_of(VALUES[2]) == 1
    assert tree.level_of(99) == -1


def test_chain_height_and_diameter():
    chain = [1, 2, 3, 4, 5]
    t = BinarySearchTree(chain)
    assert t.height() == len(chain)
    assert t.diameter() == len(chain) - 1
    assert t.count_right_nodes() == len(chain) - 1
    assert t.count_leaves() == 1


def test_descending_chain_has_no_right_nodes():
    t = BinarySearchTree([5, 4, 3, 2, 1])
    assert t.count_right_nodes() == 0


def test_single_node_measures():
    t = BinarySearchTree([7])
    assert t.diameter() == 0
    assert t.height() == 1
    assert t.count_leaves() == 1


def test_full_tree_leaves_invariant():
    t = BinarySearchTree([4, 2, 6, 1, 3, 5, 7])
    assert t.count_leaves() == len(t) - t.count_leaves() + 1
    assert t.diameter() <= 2 * (t.height() - 1)


def test_render_format():
    assert BinarySearchTree([10, 20]).render() == "\n          20\n\n10\n"


def test_render_has_a_line_per_node(tree):
    lines = [line for line in tree.render().split("\n") if line]
    assert len(lines) == len(VALUES)
    assert all((len(line) - len(line.lstrip(" "))) % 10 == 0 for line in lines)


def test_difference_tree_examples():
    assert is_difference_tree(example_difference_tree()) is True

    second = TreeNode(-22, None, TreeNode(5, TreeNode(11), TreeNode(6)))
    assert is_difference_tree(second) is True

    third = TreeNode(40, TreeNode(21, TreeNode(20), TreeNode(-1)))
    assert is_difference_tree(third) is True


def test_not_a_difference_tree():
    root = example_difference_tree()
    root.right.right.value = 7
    assert is_difference_tree(root) is False
    assert is_difference_tree(None) is True


def test_min_depth():
    assert min_depth(None) == 0
    assert min_depth(TreeNode(1)) == 0
    assert min_depth(TreeNode(1, TreeNode(2), TreeNode(3))) == 1


def test_sibling_difference_sum():
    assert sibling_difference_sum(None) == 0
    assert sibling_difference_sum(TreeNode(1, TreeNode(9))) == 0
    assert sibling_difference_sum(TreeNode(1, TreeNode(9), TreeNode(4))) == 9 - 4
    assert sibling_difference_sum(example_difference_tree()) == (10 - 5) + (20 - 10) + (11 - 6)