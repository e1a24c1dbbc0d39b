"""Classic data structures and algorithms in plain Python: sorting, heaps,
strings, arrays, linked lists, stacks, queues, binary and AVL trees,
dynamic programming and greedy methods."""

__version__ = "0.1.0"

__all__ = [
    "array",
    "array_scan",
    "avl",
    "binary_tree",
    "circular_list",
    "doubly_list",
    "dynamic",
    "expressions",
    "greedy",
    "heap",
    "linked_list",
    "queues",
    "sorting",
    "stacks",
    "strings",
]