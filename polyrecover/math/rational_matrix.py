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
Dense matrix of exact rational values.

Entries are BigFraction objects held in a numpy array of dtype object, so row
operations can be written as whole-row expressions while every entry keeps
exact arithmetic.
"""

from typing import List, Sequence
import numpy as np

from .big_fraction import BigFraction


class RationalMatrix:
    """
    Dense rows x cols matrix of BigFraction values.

    The matrix is mutable: Gaussian elimination modifies it in place. Use
    clone() to keep an untouched copy.
    """

    def __init__(self, data: Sequence[Sequence[BigFraction]]):
        rows = len(data)
        cols = len(data[0]) if rows > 0 else 0
        self._values = np.empty((rows, cols), dtype=object)
        for row, values in enumerate(data):
            if len(values) != cols:
                raise ValueError(f"Row {row} has {len(values)} entries, expected {cols}.")
            for col, value in enumerate(values):
                self._values[row, col] = BigFraction.value_of(value)

    def get_row_count(self) -> int:
        return self._values.shape[0]

    def get_column_count(self) -> int:
        return self._values.shape[1]

    def get_big_fraction_value_at(self, row: int, col: int) -> BigFraction:
        return self._values[row, col]

    def get_row(self, row: int) -> np.ndarray:
        """Returns a view of one row (an object array of BigFraction)"""
        return self._values[row]

    def swap_rows(self, row_a: int, row_b: int) -> None:
        if row_a != row_b:
            self._values[[row_a, row_b]] = self._values[[row_b, row_a]]

    def multiply_vector(self, vector: Sequence[BigFraction]) -> List[BigFraction]:
        """Exact matrix-vector product A*x"""
        if len(vector) != self.get_column_count():
            raise ValueError(f"Vector length {len(vector)} does not match {self.get_column_count()} columns.")
        out = []
        for row in range(self.get_row_count()):
            acc = BigFraction.ZERO
            for col, x in enumerate(vector):
                acc = acc + self._values[row, col] * x
            out.append(acc)
        return out

    def clone(self) -> 'RationalMatrix':
        return RationalMatrix(self._values.tolist())

    def to_lists(self) -> List[List[BigFraction]]:
        return self._values.tolist()

    def __eq__(self, other) -> bool:
        if not isinstance(other, RationalMatrix):
            return NotImplemented
        return self._values.shape == other._values.shape and \
            all(a == b for a, b in zip(self._values.flat, other._values.flat))

    __hash__ = None

    def __str__(self) -> str:
        return "[" + ", ".join("[" + ", ".join(str(v) for v in row) + "]" for row in self._values) + "]"

    def __repr__(self) -> str:
        return f"RationalMatrix({self.get_row_count()}x{self.get_column_count()})"
