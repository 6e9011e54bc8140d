# tests/test_arith.py

from fractions import Fraction

from calcal.core.arith import amod, floor_frac, mod, modr, quotient, sum_while


def test_mod_is_floored():
    assert mod(-1, 7) == 6
    assert mod(13, 7) == 6
    assert mod(Fraction(-1, 2), 1) == Fraction(1, 2)

def test_amod_range():
    assert amod(7, 7) == 7
    assert amod(0, 7) == 7
    assert amod(8, 7) == 1
    assert all(1 <= amod(x, 13) <= 13 for x in range(-50, 50))

def test_sum_while():
    assert sum_while(lambda i: i, 1, lambda i: i <= 4) == 10
    # predicate false from the start
    assert sum_while(lambda i: i, 5, lambda i: i < 5) == 0

def test_rational_floor_helpers():
    assert floor_frac(Fraction(-1, 2)) == -1
    assert floor_frac(Fraction(7, 2)) == 3
    assert floor_frac(4) == 4
    assert quotient(-7, 2) == -4
    assert quotient(Fraction(10), Fraction(1, 3)) == 30
    assert modr(Fraction(-1, 3), 1) == Fraction(2, 3)
    assert modr(Fraction(7, 2), Fraction(3, 2)) == Fraction(1, 2)
