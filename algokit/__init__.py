"""Classic searching, sorting, stack, recursion, linked-list and tree algorithms."""

__version__ = "0.1.0"
__all__ = ["binary_tree", "bst", "linked_list", "recursion", "searching", "sorting", "stacks"]