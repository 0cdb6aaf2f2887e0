"""String puzzles: decimal addition, RPN evaluation, bracket matching and more."""

from __future__ import annotations

import operator
from collections import Counter
from collections.abc import Callable, Iterable
from itertools import zip_longest

_DIGITS = frozenset("0123456789")
_CLOSER_TO_OPENER = {")": "(", "]": "[", "}": "{"}


def add_strings(num1: str, num2: str) -> str:
    """Add two non-negative decimal numbers given as digit strings.

    Raises ValueError if either string holds anything but ASCII digits.
    """
    for num in (num1, num2):
        if not _DIGITS.issuperset(num):
            raise ValueError(f"not a decimal digit string: {num!r}")

    digits: list[str] = []
    carry = 0
    for a, b in zip_longest(reversed(num1), reversed(num2), fillvalue="0"):
        carry, digit = divmod(int(a) + int(b) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def _truncating_div(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("division by zero in expression")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer tokens in reverse Polish notation.

    Division truncates toward zero. The value left on top of the stack is
    returned. Raises ValueError for a malformed expression or a bad operand,
    and ZeroDivisionError for division by zero.
    """
    stack: list[int] = []
    for token in tokens:
        op = _OPERATORS.get(token)
        if op is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} lacks operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(op(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def first_uniq_char(s: str) -> int:
    """Return the index of the first character occurring once, or -1."""
    counts = Counter(s)
    return next((i for i, ch in enumerate(s) if counts[ch] == 1), -1)


def _fold_ascii(ch: str) -> str:
    return ch.lower() if "A" <= ch <= "Z" else ch


def _is_alnum_lower(ch: str) -> bool:
    return "a" <= ch <= "z" or "0" <= ch <= "9"


def is_palindrome(s: str) -> bool:
    """Tell whether the ASCII letters and digits of ``s`` read the same both
    ways, ignoring letter case."""
    kept = [ch for ch in map(_fold_ascii, s) if _is_alnum_lower(ch)]
    return kept == kept[::-1]


def is_valid(s: str) -> bool:
    """Tell whether every closing bracket of ``s`` matches the latest open one."""
    if len(s) % 2 == 1:
        return False
    stack: list[str] = []
    for ch in s:
        opener = _CLOSER_TO_OPENER.get(ch)
        if opener is None:
            stack.append(ch)
        elif not stack or stack.pop() != opener:
            return False
    return not stack


def _is_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def reverse_only_letters(s: str) -> str:
    """Reverse the order of the ASCII letters, leaving other characters in place."""
    letters = [ch for ch in s if _is_letter(ch)]
    return "".join(letters.pop() if _is_letter(ch) else ch for ch in s)


def top_k_frequent(words: Iterable[str], k: int) -> list[str]:
    """Return the ``k`` most frequent words, most frequent first; ties go in
    lexicographic order. Raises ValueError when ``k`` is below 1."""
    if k < 1:
        raise ValueError("k must be at least 1")
    counts = Counter(words)
    ranked = sorted(counts, key=lambda word: (-counts[word], word))
    return ranked[:k]