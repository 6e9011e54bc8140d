"""
calcal.core.arith
-----------------
Integer and exact rational helpers shared by every calendar engine.

All period constants of the astronomical calendars are `Fraction`s; nothing
here ever goes through a float.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Callable, Union

RatT = Union[int, Fraction]


def mod(a: RatT, b: RatT) -> RatT:
    """Floored remainder: sign follows b, so mod(-1, 7) == 6."""
    return a % b


def amod(a: int, b: int) -> int:
    """Adjusted remainder in 1..b instead of 0..b-1."""
    return mod(a - 1, b) + 1


def sum_while(f: Callable[[int], RatT], start: int, pred: Callable[[int], bool]) -> RatT:
    """
    Sum f(i) for i = start, start+1, ... as long as pred(i) holds.

    The predicate is checked before each term is added, so an initially
    false predicate yields 0. Callers rely on pred being monotone in i.
    """
    total: RatT = 0
    i = start
    while pred(i):
        total += f(i)
        i += 1
    return total


def floor_frac(x: RatT) -> int:
    """Exact floor of an int or Fraction."""
    x = Fraction(x)
    return x.numerator // x.denominator


def modr(a: RatT, b: RatT) -> Fraction:
    """Rational floor-modulo a - b*floor(a/b), shifted into [0, b) for b > 0."""
    a, b = Fraction(a), Fraction(b)
    r = a - b * floor_frac(a / b)
    if r < 0:
        r += b
    return r


def quotient(a: RatT, b: RatT) -> int:
    """floor(a / b) as an int."""
    return floor_frac(Fraction(a) / Fraction(b))
