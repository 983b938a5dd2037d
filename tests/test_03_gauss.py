"""Test Vandermonde systems and exact Gaussian elimination."""
import pytest
from sympy import Matrix, Rational
from polyrecover.math import BigFraction, RationalMatrix, GaussianElimination, SingularMatrix
from polyrecover.points import Point
from polyrecover.vandermonde import build_system


def fractions(values):
    return [BigFraction.value_of(v) for v in values]


def test_build_system():
    A, b = build_system([Point(2, 5), Point(3, 10), Point(0, 1)])
    assert A == RationalMatrix([fractions([4, 2, 1]), fractions([9, 3, 1]), fractions([0, 0, 1])])
    assert b == fractions([5, 10, 1])


def test_build_system_single_point():
    A, b = build_system([Point(7, 42)])
    assert A == RationalMatrix([[BigFraction.ONE]])
    assert b == [BigFraction(42)]


def test_solve_with_row_swap():
    A = RationalMatrix([fractions([0, 1, 1]), fractions([1, 0, 1]), fractions([1, 1, 0])])
    x = GaussianElimination.get_rational_instance().solve(A, fractions([2, 2, 2]))
    assert x == fractions([1, 1, 1])


def test_solve_rational_solution():
    A = RationalMatrix([fractions([2, 1]), fractions([1, 3])])
    x = GaussianElimination.get_rational_instance().solve(A, fractions([1, 0]))
    assert x == [BigFraction(3, 5), BigFraction(-1, 5)]


def test_interpolation_zero_residual():
    # p(x) = 3x^4 - x^3/2 + 7x - 11
    coeffs = [BigFraction(3), BigFraction(-1, 2), BigFraction(0), BigFraction(7), BigFraction(-11)]
    xs = [1, 2, 4, 5, 9]

    def p(x):
        acc = BigFraction.ZERO
        for c in coeffs:
            acc = acc * x + c
        return acc

    A, _ = build_system([Point(x, 0) for x in xs])
    b = [p(x) for x in xs]
    gauss = GaussianElimination.get_rational_instance()
    solution = gauss.solve(A.clone(), b)
    assert solution == coeffs
    assert all(r.is_zero() for r in gauss.residual(A, solution, b))


def test_matches_sympy():
    points = [Point(1, 995085094601491), Point(3, 196563650089608567), Point(4, 1016509518118225951),
              Point(6, 10788619898233492461), Point(10, 220003896831595324801)]
    A, b = build_system(points)
    expected = Matrix([[p.x**e for e in range(len(points) - 1, -1, -1)] for p in points]).LUsolve(
        Matrix([p.y for p in points]))
    solution = GaussianElimination.get_rational_instance().solve(A, b)
    assert [Rational(s.numerator, s.denominator) for s in solution] == list(expected)


def test_duplicate_x_is_singular():
    A, b = build_system([Point(1, 4), Point(1, 5)])
    with pytest.raises(SingularMatrix):
        GaussianElimination.get_rational_instance().solve(A, b)


def test_zero_column_is_singular():
    A = RationalMatrix([fractions([1, 0, 2]), fractions([3, 0, 1]), fractions([5, 0, 7])])
    with pytest.raises(SingularMatrix):
        GaussianElimination.get_rational_instance().solve(A, fractions([1, 2, 3]))


def test_non_square():
    A = RationalMatrix([fractions([1, 2, 3]), fractions([4, 5, 6])])
    with pytest.raises(ValueError):
        GaussianElimination.get_rational_instance().solve(A, fractions([1, 2]))


def test_swap_rows():
    A = RationalMatrix([fractions([1, 2]), fractions([3, 4])])
    A.swap_rows(0, 1)
    assert A.to_lists() == [fractions([3, 4]), fractions([1, 2])]
