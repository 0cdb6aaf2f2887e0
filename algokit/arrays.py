"""Array puzzles: digit arithmetic, selection, deduplication, XOR tricks and sorting."""

from __future__ import annotations

import heapq
import operator
from collections.abc import Iterable
from functools import reduce
from itertools import groupby

_INT_BITS = 32


def add_to_array_form(num: list[int], k: int) -> list[int]:
    """Add ``k`` to the number whose decimal digits are ``num`` (most
    significant first) and return the digits of the sum.

    Raises ValueError for a negative ``k``.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    digits: list[int] = []
    carry = 0
    pending = reversed(num)
    while True:
        a = next(pending, None)
        if a is None and k == 0:
            break
        k, k_digit = divmod(k, 10)
        carry, digit = divmod((0 if a is None else a) + k_digit + carry, 10)
        digits.append(digit)
    if carry:
        digits.append(1)
    digits.reverse()
    return digits


def find_kth_largest(nums: list[int], k: int) -> int:
    """Return the ``k``-th largest value (counting duplicates).

    Raises ValueError unless 1 <= k <= len(nums).
    """
    if not 1 <= k <= len(nums):
        raise ValueError("k out of range")
    return heapq.nlargest(k, nums)[-1]


def generate(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError("row count must not be negative")
    rows: list[list[int]] = []
    for _ in range(num_rows):
        if not rows:
            rows.append([1])
        else:
            prev = rows[-1]
            rows.append([1, *(a + b for a, b in zip(prev, prev[1:])), 1])
    return rows


def remove_duplicates(nums: list[int]) -> int:
    """Collapse runs of equal values in ``nums`` in place; return the new length."""
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def remove_element(nums: list[int], val: int) -> int:
    """Drop every occurrence of ``val`` from ``nums`` in place; return the new length."""
    nums[:] = [value for value in nums if value != val]
    return len(nums)


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other appears twice."""
    return reduce(operator.xor, nums, 0)


def single_number_thrice(nums: list[int]) -> int:
    """Return the value that appears once when every other appears three
    times, treating values as 32-bit signed integers."""
    result = 0
    for bit in range(_INT_BITS):
        ones = sum((value >> bit) & 1 for value in nums)
        if ones % 3 == 1:
            result |= 1 << bit
    if result >= 1 << (_INT_BITS - 1):
        result -= 1 << _INT_BITS
    return result


def single_numbers(nums: list[int]) -> list[int]:
    """Return the two values that appear once when every other appears twice.

    The value holding the lowest bit in which the two differ comes first.
    Raises ValueError when there are no two such values.
    """
    diff = reduce(operator.xor, nums, 0)
    if diff == 0:
        raise ValueError("no two distinct values occur once")
    bit = diff & -diff
    first = reduce(operator.xor, (value for value in nums if value & bit), 0)
    return [first, first ^ diff]


def smallest_k(arr: list[int], k: int) -> list[int]:
    """Return the ``k`` smallest values in ascending order.

    Raises ValueError unless 0 <= k <= len(arr).
    """
    if not 0 <= k <= len(arr):
        raise ValueError("k out of range")
    return heapq.nsmallest(k, arr)


def shell_sort(a: list[int]) -> list[int]:
    """Sort ``a`` in place with Shell sort (gap sequence g // 3 + 1) and return it."""
    n = len(a)
    gap = n
    while gap > 1:
        gap = gap // 3 + 1
        for i in range(gap, n):
            item = a[i]
            j = i
            while j >= gap and item < a[j - gap]:
                a[j] = a[j - gap]
                j -= gap
            a[j] = item
    return a