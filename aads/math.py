from __future__ import generator_stop

from typing import Tuple

from .exceptions import InvalidInput
from .typing import MultipliableT, OrderableT


def minmax(a: OrderableT, b: OrderableT) -> Tuple[OrderableT, OrderableT]:
    if a <= b:
        return a, b
    else:
        return b, a


def binary_exponentiation(element: MultipliableT, power: int) -> MultipliableT:

    """Raises `element` to `power` by repeated squaring using only `*`.
    Works for any type with an associative multiplication, eg. square matrices.
    Needs O(log power) multiplications. `power` must be at least 1,
    since no multiplicative identity is assumed.
    """

    if power < 1:
        raise InvalidInput(f"power must be at least 1, not {power}")

    if power == 1:
        return element

    half = binary_exponentiation(element, power // 2)
    half_squared = half * half

    if power % 2 == 0:
        return half_squared
    else:
        return element * half_squared


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:

    """Returns `(g, x, y)` such that `a*x + b*y == g` where `g` is the non-negative gcd of `a` and `b`."""

    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1

    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y

    if old_r < 0:
        return -old_r, -old_x, -old_y

    return old_r, old_x, old_y
