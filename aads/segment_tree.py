from __future__ import generator_stop

import logging
from operator import index
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from .exceptions import IndexOutOfRange, InvalidInput

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SegmentTree(Generic[T]):

    """Segment tree over a fixed number of elements.
    Supports point updates and aggregation of half-open ranges `[left, right)`
    with an arbitrary associative function `func`, both in O(log n).

    `func` does not need to be commutative, results are always combined in
    left-to-right order. No identity element is assumed, so querying an empty
    range returns `default` instead of calling `func`.

    The tree is stored in a flat list. The root is at index 1 and node `i`
    has the children `2i` and `2i+1`. Index 0 and the slots which are not
    needed for the given size stay `None`.

    Example:
            st = SegmentTree([3, 1, 4, 1, 5], min)
            st.query(1, 4)  # 1
            st.update(1, 9)
            st.query(0, 2)  # 3

    Not thread-safe.
    """

    _tree: List[Optional[T]]

    def __init__(self, elements: Iterable[T], func: Callable[[T, T], T]) -> None:
        elements = list(elements)

        if not elements:
            raise InvalidInput("SegmentTree requires at least one element")

        if not callable(func):
            raise InvalidInput(f"func must be callable, not {type(func)}")

        self.n = len(elements)
        self.func = func
        self._tree = [None] * (4 * self.n)
        self._build(elements, 1, 0, self.n)

        logger.debug("Built segment tree with %d elements using %s", self.n, getattr(func, "__name__", func))

    @classmethod
    def build(cls, elements: Iterable[T], func: Callable[[T, T], T]) -> "SegmentTree[T]":
        return cls(elements, func)

    @property
    def size(self) -> int:
        return self.n

    def _build(self, elements: List[T], node: int, lo: int, hi: int) -> None:
        if hi - lo == 1:
            self._tree[node] = elements[lo]
            return

        mid = lo + (hi - lo) // 2
        self._build(elements, 2 * node, lo, mid)
        self._build(elements, 2 * node + 1, mid, hi)
        self._tree[node] = self.func(self._tree[2 * node], self._tree[2 * node + 1])

    def _check_position(self, position: int) -> int:
        position = index(position)
        if not 0 <= position < self.n:
            raise IndexOutOfRange(f"Position {position} out of range [0, {self.n})", size=self.n)
        return position

    def update(self, position: int, value: T) -> None:
        """Sets the element at `position` to `value` and recomputes all its ancestors.
        If `func` raises, the tree is left unchanged.
        """

        position = self._check_position(position)

        path = []
        node, lo, hi = 1, 0, self.n
        while hi - lo > 1:
            mid = lo + (hi - lo) // 2
            if position < mid:
                path.append((node, True))
                node, hi = 2 * node, mid
            else:
                path.append((node, False))
                node, lo = 2 * node + 1, mid

        # nothing is written until every aggregate on the path is computed
        updates = [(node, value)]
        for parent, from_left in reversed(path):
            if from_left:
                value = self.func(value, self._tree[2 * parent + 1])
            else:
                value = self.func(self._tree[2 * parent], value)
            updates.append((parent, value))

        for node, value in updates:
            self._tree[node] = value

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> T:
        # only called for nodes which overlap [left, right)
        if left <= lo and hi <= right:
            return self._tree[node]

        mid = lo + (hi - lo) // 2
        if right <= mid:
            return self._query(2 * node, lo, mid, left, right)
        if mid <= left:
            return self._query(2 * node + 1, mid, hi, left, right)

        return self.func(
            self._query(2 * node, lo, mid, left, right),
            self._query(2 * node + 1, mid, hi, left, right),
        )

    def query(self, left: int, right: int, default: Optional[T] = None) -> Optional[T]:
        """Combines all elements in `[left, right)` from left to right.
        Returns `default` for an empty range.
        """

        left = index(left)
        right = index(right)

        if not 0 <= left <= right <= self.n:
            raise IndexOutOfRange(f"Interval [{left}, {right}) out of range [0, {self.n}]", size=self.n)

        if left == right:
            return default

        return self._query(1, 0, self.n, left, right)

    def __len__(self) -> int:
        return self.n

    def __getitem__(self, position: int) -> T:
        position = self._check_position(position)
        return self.query(position, position + 1)

    def __setitem__(self, position: int, value: T) -> None:
        self.update(position, value)

    def __iter__(self) -> Iterator[T]:
        for i in range(self.n):
            yield self.query(i, i + 1)

    def __repr__(self) -> str:
        return f"SegmentTree({list(self)!r}, {getattr(self.func, '__name__', self.func)})"
