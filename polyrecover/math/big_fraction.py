#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""
Exact rational numbers over arbitrary-precision integers.

BigFraction wraps Python's fractions.Fraction, which keeps every value in
lowest terms with a strictly positive denominator. Python's int has
arbitrary precision, so no operation can overflow. Instances are immutable:
every arithmetic operation returns a new, reduced BigFraction.
"""

from fractions import Fraction
from typing import Union


class InvalidFraction(ArithmeticError):
    """Raised when a fraction is constructed with a zero denominator"""


class DivideByZero(ZeroDivisionError):
    """Raised when dividing by a zero-valued fraction"""


class BigFraction:
    """
    Immutable exact rational number.

    Two BigFractions are equal iff their reduced numerator/denominator pairs
    are equal. The text form is the plain integer when the denominator is 1
    and "numerator/denominator" otherwise.
    """

    __slots__ = ("_fraction",)

    def __init__(self, numerator: Union[int, 'BigFraction', Fraction], denominator: int = None):
        """
        Args:
            numerator: An integer numerator, or another BigFraction/Fraction to copy
            denominator: Optional integer denominator (default 1)

        Raises:
            InvalidFraction: If the denominator is zero
        """
        if denominator is None:
            if isinstance(numerator, BigFraction):
                self._fraction = numerator._fraction
            elif isinstance(numerator, Fraction):
                self._fraction = numerator
            elif isinstance(numerator, int):
                self._fraction = Fraction(numerator)
            else:
                raise TypeError(f"Cannot build BigFraction from {type(numerator).__name__}")
        else:
            if denominator == 0:
                raise InvalidFraction(f"Zero denominator in {numerator}/{denominator}")
            self._fraction = Fraction(numerator, denominator)

    @property
    def numerator(self) -> int:
        return self._fraction.numerator

    @property
    def denominator(self) -> int:
        return self._fraction.denominator

    @staticmethod
    def _coerce(other) -> 'BigFraction':
        if isinstance(other, BigFraction):
            return other
        return BigFraction(other)

    def add(self, other: 'BigFraction') -> 'BigFraction':
        return BigFraction(self._fraction + BigFraction._coerce(other)._fraction)

    def subtract(self, other: 'BigFraction') -> 'BigFraction':
        return BigFraction(self._fraction - BigFraction._coerce(other)._fraction)

    def multiply(self, other: 'BigFraction') -> 'BigFraction':
        return BigFraction(self._fraction * BigFraction._coerce(other)._fraction)

    def divide(self, other: 'BigFraction') -> 'BigFraction':
        """Divide two BigFractions, raising DivideByZero for a zero divisor"""
        other = BigFraction._coerce(other)
        if other.is_zero():
            raise DivideByZero(f"Division of {self} by zero")
        return BigFraction(self._fraction / other._fraction)

    def negate(self) -> 'BigFraction':
        return BigFraction(-self._fraction)

    def is_zero(self) -> bool:
        return self._fraction.numerator == 0

    def is_integer(self) -> bool:
        """Check if fraction represents an integer"""
        return self._fraction.denominator == 1

    def __eq__(self, other) -> bool:
        if isinstance(other, BigFraction):
            return self._fraction == other._fraction
        if isinstance(other, int):
            return self._fraction == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._fraction)

    def __str__(self) -> str:
        if self._fraction.denominator == 1:
            return str(self._fraction.numerator)
        return f"{self._fraction.numerator}/{self._fraction.denominator}"

    def __repr__(self) -> str:
        return f"BigFraction({self._fraction.numerator}, {self._fraction.denominator})"

    # Python operator overloading for convenience
    def __add__(self, other):
        if not isinstance(other, (BigFraction, int)):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if not isinstance(other, (BigFraction, int)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return BigFraction(other).subtract(self)

    def __mul__(self, other):
        if not isinstance(other, (BigFraction, int)):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not isinstance(other, (BigFraction, int)):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return BigFraction(other).divide(self)

    def __neg__(self):
        return self.negate()

    @staticmethod
    def value_of(value: Union[int, str, 'BigFraction']) -> 'BigFraction':
        """
        Factory method to create a BigFraction from an int, another BigFraction
        or its text form ("num/den" or "num").
        """
        if isinstance(value, BigFraction):
            return value
        if isinstance(value, str):
            if '/' in value:
                parts = value.split('/')
                if len(parts) != 2:
                    raise ValueError(f"Invalid fraction format: {value}")
                return BigFraction(int(parts[0]), int(parts[1]))
            return BigFraction(int(value))
        return BigFraction(value)


BigFraction.ZERO = BigFraction(0, 1)
BigFraction.ONE = BigFraction(1, 1)
