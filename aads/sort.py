from __future__ import generator_stop

from operator import le
from typing import Any, Callable, List, MutableSequence, Optional, TypeVar

from .exceptions import InvalidInput

T = TypeVar("T")

Comparator = Callable[[Any, Any], bool]


def bubble_sort(seq: MutableSequence[T], cmp: Comparator = le) -> None:

    """Stable bubble sort. Sorts input `seq` in place.
    `cmp(a, b)` must return True if `a` may be placed before `b`.
    Stops as soon as a pass doesn't swap anything.
    """

    n = len(seq)
    while True:
        newn = 1
        for i in range(1, n):
            if not cmp(seq[i - 1], seq[i]):
                seq[i - 1], seq[i] = seq[i], seq[i - 1]
                newn = i
        if newn == 1:
            break
        n = newn


def selection_sort(seq: MutableSequence[T], cmp: Comparator = le) -> None:
    # inplace, unstable

    n = len(seq)
    for i in range(n - 1):
        m = i
        for j in range(i + 1, n):
            if not cmp(seq[m], seq[j]):
                m = j
        if m != i:
            seq[i], seq[m] = seq[m], seq[i]


def insertion_sort(seq: MutableSequence[T], cmp: Comparator = le) -> None:
    # inplace, stable

    for loc in range(1, len(seq)):
        value = seq[loc]
        i = loc - 1
        while i >= 0 and not cmp(seq[i], value):
            seq[i + 1] = seq[i]
            i -= 1
        seq[i + 1] = value


def counting_sort(seq: MutableSequence[T], key: Optional[Callable[[T], int]] = None) -> None:

    """Stable counting sort for integers (or items with integer keys given by `key`).
    Runs in O(n + k) where k is the difference between the largest and smallest key.
    """

    if not seq:
        return

    keys: List[int] = [key(x) for x in seq] if key else list(seq)  # type: ignore[arg-type]

    for k in keys:
        if not isinstance(k, int) or isinstance(k, bool):
            raise InvalidInput(f"counting_sort requires integer keys, not {type(k)}")

    lo = min(keys)
    counts = [0] * (max(keys) - lo + 1)
    for k in keys:
        counts[k - lo] += 1

    # prefix sums give the first output slot of each key
    total = 0
    for i, c in enumerate(counts):
        counts[i] = total
        total += c

    out = list(seq)
    for x, k in zip(out, keys):
        seq[counts[k - lo]] = x
        counts[k - lo] += 1
