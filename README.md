# dsakit

A small library of classic data structures and algorithms in plain Python.
It needs nothing outside the standard library.

## Installation

```
pip install dsakit
```

To run the test suite from a checkout:

```
pip install ".[test]"
python -m pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `quick_sort`, `merge_sort`, `iterative_merge_sort`, `count_sort`, `bin_sort`, `radix_sort`, `shell_sort` |
| `dsakit.heap` | max-heap helpers on plain lists: `heap_push`, `create_heap`, `heap_delete`, `heap_sort`, `heapify` |
| `dsakit.strings` | `string_length`, `reverse_string`, `compare_strings`, `is_palindrome`, `duplicate_characters`, `duplicate_letters_bitwise`, `is_anagram`, `permutations`, `permutations_by_swap`, `to_lower`, `toggle_case` |
| `dsakit.array` | `BoundedArray`, a fixed-capacity array with insert and delete, linear and binary search, extremes and sums, reversal, sorted insertion, merging and set operations, and a search for missing values |
| `dsakit.array_scan` | `missing_elements`, `find_duplicates`, `count_duplicates`, `count_duplicates_hashed`, `count_duplicates_unsorted`, `two_sum`, `two_sum_hashed`, `two_sum_sorted`, `min_max` |
| `dsakit.dynamic` | `fibonacci`, `multistage_shortest_path` |
| `dsakit.linked_list` | `LinkedList`, `Node`, `has_loop`, `intersection_node` |
| `dsakit.circular_list` | `CircularLinkedList` |
| `dsakit.doubly_list` | `DoublyLinkedList` |
| `dsakit.queues` | `ArrayQueue`, `CircularQueue`, `LinkedQueue`, `DoubleEndedQueue`, `PriorityQueue`, `TwoStackQueue`, `QueueFullError`, `QueueEmptyError` |
| `dsakit.stacks` | `ArrayStack`, `LinkedStack`, `StackOverflowError`, `StackUnderflowError` |
| `dsakit.expressions` | `is_balanced`, `is_balanced_brackets`, `infix_to_postfix`, `infix_to_postfix_full`, `evaluate_postfix` |
| `dsakit.binary_tree` | `BinaryTree`, `TreeNode`: building from level order or from inorder and preorder traversals, recursive and iterative traversals, node counts by degree, height |
| `dsakit.avl` | `AVLTree`, `AVLNode`: a self-balancing search tree with insert, delete and membership tests |
| `dsakit.greedy` | `Item`, `Job`, `fractional_knapsack`, `job_sequencing`, `optimal_merge_cost` |

## Examples

The sorting functions accept any iterable. Each returns a new sorted list.
`count_sort`, `bin_sort` and `radix_sort` take non-negative integers only and
raise `ValueError` otherwise.

```python
from dsakit.sorting import quick_sort, radix_sort

quick_sort([50, 70, 60, 90, 40, 80, 10, 80, 20, 30])
# [10, 20, 30, 40, 50, 60, 70, 80, 80, 90]
radix_sort([237, 146, 259, 348, 152, 163, 235, 48, 36, 62])
```

Expressions:

```python
from dsakit.expressions import infix_to_postfix_full, evaluate_postfix

infix_to_postfix_full("((a+b)*c)-d^e^f")   # "ab+c*def^^-"
evaluate_postfix("35*62/+4-")              # 14
```

`evaluate_postfix` takes single-digit operands and `+ - * /`. Its division
truncates towards zero.

Linked lists behave like ordinary iterables:

```python
from dsakit.linked_list import LinkedList

items = LinkedList([3, 5, 7, 9, 1, 0])
items.reverse()
list(items)      # [0, 1, 9, 7, 5, 3]
len(items)       # 6
```

In `LinkedList`, `CircularLinkedList` and `DoublyLinkedList`, `insert(position, value)`
counts positions from 0 and `delete(position)` counts them from 1. A position
out of range raises `IndexError`.

An AVL tree keeps itself balanced:

```python
from dsakit.avl import AVLTree

tree = AVLTree()
for key in (10, 20, 30, 25, 28, 27, 5):
    tree.insert(key)
tree.delete(28)
list(tree)       # [5, 10, 20, 25, 27, 30]
28 in tree       # False
```

Deleting a key that is not in the tree raises `KeyError`.

Binary trees can be built level by level, where `None` marks a missing child:

```python
from dsakit.binary_tree import BinaryTree

tree = BinaryTree.from_level_order([1, 2, 3, None, 4])
tree.inorder()       # [2, 4, 1, 3]
tree.height()        # 3
tree.count_leaves()  # 2
```

Greedy algorithms:

```python
from dsakit.greedy import Item, fractional_knapsack, optimal_merge_cost

fractional_knapsack([Item(100, 10), Item(280, 40), Item(120, 20), Item(120, 24)], 60)
# 440.0
optimal_merge_cost([5, 10, 20, 30, 30])   # 205
```

Bounded containers report overflow and underflow by raising exceptions. They
do not return status codes. In `dsakit.queues` these are `QueueFullError` and
`QueueEmptyError`. In `dsakit.stacks` they are `StackOverflowError` and
`StackUnderflowError`. `BoundedArray` raises `OverflowError` when it is full.
Its searches return `None` when the key is absent.

## What it does not do

- It is a library only. It has no command-line program and reads no input
  interactively. You build every structure from Python values.
- It has no general graph algorithms: no breadth- or depth-first search, no
  Dijkstra, no minimum spanning trees, no topological sort and no cycle or
  bipartite checks. The only graph routine is `multistage_shortest_path`.
- It has no Huffman coding and no job sequencing with a heap.
  `job_sequencing` is the slot-filling version only.