"""Classic data-structure and algorithm routines: linked lists, binary trees,
stack and queue adapters, and string and array problems."""

__version__ = "0.1.0"
__all__ = ["arrays", "binary_tree", "containers", "linked_list", "random_list", "strings"]