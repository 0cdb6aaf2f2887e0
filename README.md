# algokit

A small library of classic data-structure and algorithm routines. It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.linked_list`

Singly linked lists built on `ListNode` (fields `val` and `next`; nodes compare by identity).

- `from_values(values)` builds a list and `to_values(head)` reads one back.
- `reverse_list`, `middle_node` (the second middle for even lengths), `merge_two_lists`, `insertion_sort_list` and `partition(head, x)` relink existing nodes.
- `remove_elements(head, val)` drops nodes equal to `val`. On a sorted list, `delete_duplicates` keeps one node per value and `delete_all_duplicates` removes every value that repeats.
- `has_cycle`, `detect_cycle` (the node where the cycle begins) and `get_intersection_node`.
- `is_palindrome(head)` leaves the list as it found it.
- `kth_node_from_end(head, cnt)` returns the node (`None` for a count of 0). It raises `ValueError` for a negative count and `IndexError` when the list is too short. `kth_to_last(head, k)` returns the value and raises `IndexError` for `k` below 1.

### `algokit.random_list`

`RandomNode` (fields `val`, `next` and `random`) and `copy_random_list(head)`, which returns a deep copy with the `random` links carried over. The input list is not changed.

### `algokit.binary_tree`

- `TreeNode` has the fields `val`, `left` and `right`.
- `build_tree(values)` builds a tree from a level-order list, in which `None` marks a missing child.
- `invert_tree` mirrors the tree in place.
- `max_depth`, `is_balanced`, `is_same_tree`, `is_subtree`, `preorder_traversal` and `tree_to_str`, which renders a tree as `val(left)(right)`.

### `algokit.containers`

- `MinStack`: `push`, `pop`, `top` and `get_min`, the last returning the minimum in constant time. Its operations raise `IndexError` when the stack is empty.
- `CircularQueue(k)` holds at most `k` values. `enqueue` and `dequeue` return `False` on failure, and `front` and `rear` return `-1` when the queue is empty. It also has `is_empty` and `is_full`.
- `QueueStack` is a stack built on two queues, with `push`, `pop`, `top` and `empty`.
- `StackQueue` is a queue built on two stacks, with `push`, `pop`, `peek` and `empty`.

### `algokit.strings`

- `add_strings(num1, num2)` does decimal addition of digit strings.
- `eval_rpn(tokens)` evaluates reverse Polish notation. Division truncates toward zero. It raises `ValueError` for a malformed expression and `ZeroDivisionError` for division by zero.
- `first_uniq_char(s)` returns the index of the first character that occurs once, or `-1`.
- `is_palindrome(s)` compares ASCII letters and digits only and ignores case.
- `is_valid(s)` checks bracket matching.
- `reverse_only_letters(s)` reverses the ASCII letters and leaves every other character where it was.
- `top_k_frequent(words, k)` orders by count and breaks ties alphabetically.

### `algokit.arrays`

- `add_to_array_form(num, k)` adds `k` to a number given as a list of digits.
- `find_kth_largest(nums, k)` and `smallest_k(arr, k)` (the latter in ascending order).
- `generate(num_rows)` returns the rows of Pascal's triangle.
- `remove_duplicates(nums)` and `remove_element(nums, val)` modify the list in place and return the new length.
- `single_number` finds the value that occurs once among pairs.
- `single_number_thrice` finds the value that occurs once among triples, as a 32-bit signed value.
- `single_numbers` finds the two values that occur once among pairs.
- `shell_sort(a)` sorts in place and returns the list.

## Example

```python
from algokit.linked_list import from_values, reverse_list, to_values
from algokit.binary_tree import build_tree, tree_to_str
from algokit.containers import MinStack
from algokit.strings import add_strings

print(to_values(reverse_list(from_values([1, 2, 3]))))  # [3, 2, 1]
print(tree_to_str(build_tree([1, 2, 3, 4])))            # 1(2(4))(3)

stack = MinStack()
for value in (5, 2, 7):
    stack.push(value)
print(stack.get_min())                                   # 2

print(add_strings("456", "77"))                          # 533
```

## What it does not do

algokit is a library only. It has no command-line tool, and its structures live in memory only.