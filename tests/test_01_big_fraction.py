"""Test exact rational arithmetic."""
from math import gcd
import pytest
from polyrecover.math import BigFraction, InvalidFraction, DivideByZero


def assert_canonical(f):
    assert f.denominator > 0
    assert gcd(abs(f.numerator), f.denominator) == 1


def test_reduction_on_construction():
    f = BigFraction(6, -4)
    assert (f.numerator, f.denominator) == (-3, 2)
    assert_canonical(f)


def test_zero_normalizes():
    f = BigFraction(0, -5)
    assert (f.numerator, f.denominator) == (0, 1)
    assert f.is_zero()
    assert f == BigFraction.ZERO


def test_zero_denominator():
    with pytest.raises(InvalidFraction):
        BigFraction(1, 0)


@pytest.mark.parametrize("a,b,c,d", [(1, 2, 1, 3), (-7, 9, 5, -12), (3, 4, -3, 4), (10**30, 3, 1, 10**29 + 7)])
def test_addition_matches_cross_multiplication(a, b, c, d):
    s = BigFraction(a, b).add(BigFraction(c, d))
    assert_canonical(s)
    # s == (a*d + c*b) / (b*d)  <=>  s.num * b*d == s.den * (a*d + c*b)
    assert s.numerator * (b * d) == s.denominator * (a * d + c * b)
    assert s == BigFraction(a * d + c * b, b * d)


def test_arithmetic():
    half = BigFraction(1, 2)
    third = BigFraction(1, 3)
    assert half + third == BigFraction(5, 6)
    assert half - third == BigFraction(1, 6)
    assert half * third == BigFraction(1, 6)
    assert half / third == BigFraction(3, 2)
    assert -half == BigFraction(-1, 2)
    for f in (half + third, half - third, half * third, half / third):
        assert_canonical(f)


def test_divide_by_zero():
    with pytest.raises(DivideByZero):
        BigFraction(1, 2).divide(BigFraction(0))
    with pytest.raises(ZeroDivisionError):
        BigFraction(1, 2) / BigFraction.ZERO


def test_no_overflow():
    big = BigFraction(2**200 + 1, 3)
    assert (big * big).numerator == (2**200 + 1)**2


def test_is_integer_and_text():
    assert BigFraction(8, 4).is_integer()
    assert str(BigFraction(8, 4)) == "2"
    assert not BigFraction(3, 6).is_integer()
    assert str(BigFraction(3, 6)) == "1/2"
    assert str(BigFraction(-3, 6)) == "-1/2"


def test_value_semantics():
    a = BigFraction(2, 3)
    b = BigFraction(4, 6)
    assert a == b
    assert hash(a) == hash(b)
    assert a + BigFraction.ONE == BigFraction(5, 3)
    assert a == BigFraction(2, 3)
    assert BigFraction(4, 2) == 2


def test_value_of():
    assert BigFraction.value_of("-10/4") == BigFraction(-5, 2)
    assert BigFraction.value_of("7") == BigFraction(7)
    assert BigFraction.value_of(str(BigFraction(22, 7))) == BigFraction(22, 7)


def test_reflected_operators():
    third = BigFraction(1, 3)
    assert 1 + third == BigFraction(4, 3)
    assert 1 - third == BigFraction(2, 3)
    assert 2 * third == BigFraction(2, 3)
    assert 1 / third == BigFraction(3)
    with pytest.raises(DivideByZero):
        1 / BigFraction.ZERO
