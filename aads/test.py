from __future__ import generator_stop

from functools import wraps
from itertools import zip_longest
from typing import Any, Callable, Iterable, Optional
from unittest import TestCase


class MyTestCase(TestCase):
    def assertIterEqual(self, first: Iterable, second: Iterable, msg: Optional[str] = None) -> None:
        for i, (a, b) in enumerate(zip_longest(first, second)):
            if msg:
                msg = " : " + str(msg)
            self.assertEqual(a, b, msg=f"in iteration index {i}: {msg}")

    def assertAllEqual(self, args: Iterable, msg: Optional[str] = None) -> None:
        it = iter(args)
        first = next(it)
        for second in it:
            self.assertEqual(first, second, msg)

    def assertSortedBy(self, seq: Iterable, cmp: Callable[[Any, Any], bool], msg: Optional[str] = None) -> None:
        seq = list(seq)
        for i in range(1, len(seq)):
            self.assertTrue(cmp(seq[i - 1], seq[i]), msg or f"{seq[i - 1]!r} before {seq[i]!r} at index {i}")


def random_arguments(n: int, *funcs: Callable[[], Any]) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for i in range(n):
                with self.subTest(str(i)):
                    if func(self, *(f() for f in funcs)) is not None:
                        raise AssertionError

        return inner

    return decorator


# also called: parameterize
def parametrize(*args_list: tuple) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for args in args_list:
                with self.subTest(str(args)[:1000]):
                    if func(self, *args) is not None:
                        raise AssertionError

        return inner

    return decorator


def repeat(number: int) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for _i in range(number):
                if func(self) is not None:
                    raise AssertionError

        return inner

    return decorator
