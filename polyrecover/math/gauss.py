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
Gaussian elimination over exact rational numbers.

Solves square systems A*x = b where every entry is a BigFraction. Since the
arithmetic is exact, any non-zero pivot is numerically safe: the pivot of a
column is the first row at or below the diagonal with a non-zero entry, and
no magnitude-based pivot search is done.
"""

import logging
from typing import List, Sequence

from .big_fraction import BigFraction
from .rational_matrix import RationalMatrix


class SingularMatrix(ArithmeticError):
    """Raised when a column has no usable pivot"""


class Gauss:
    """
    Gaussian elimination with partial pivoting and back-substitution.
    """

    _rational_instance = None

    @classmethod
    def get_rational_instance(cls) -> 'Gauss':
        """Get singleton instance for exact rational operations"""
        if cls._rational_instance is None:
            cls._rational_instance = cls()
        return cls._rational_instance

    def solve(self, matrix: RationalMatrix, rhs: Sequence[BigFraction]) -> List[BigFraction]:
        """
        Solve matrix * x = rhs exactly.

        The matrix and a working copy of rhs are reduced to row-echelon form;
        matrix is modified in place.

        Args:
            matrix: Square coefficient matrix (modified in place)
            rhs: Right-hand side vector, one entry per row

        Returns:
            The exact solution vector x

        Raises:
            ValueError: If the matrix is not square or rhs has the wrong length
            SingularMatrix: If some column has no non-zero pivot candidate
        """
        n = matrix.get_row_count()
        if matrix.get_column_count() != n:
            raise ValueError(f"Matrix must be square: {n}x{matrix.get_column_count()}")
        if len(rhs) != n:
            raise ValueError(f"Right-hand side has {len(rhs)} entries, expected {n}")
        rhs = list(rhs)
        self._forward_eliminate(matrix, rhs)
        return self._back_substitute(matrix, rhs)

    def residual(self, matrix: RationalMatrix, solution: Sequence[BigFraction],
                 rhs: Sequence[BigFraction]) -> List[BigFraction]:
        """Returns matrix*solution - rhs, all zero for an exact solution"""
        return [ax - b for ax, b in zip(matrix.multiply_vector(solution), rhs)]

    def _find_pivot_row(self, matrix: RationalMatrix, start_row: int, col: int) -> int:
        """First row at or below start_row with a non-zero entry in col, or -1"""
        for row in range(start_row, matrix.get_row_count()):
            if not matrix.get_big_fraction_value_at(row, col).is_zero():
                return row
        return -1

    def _forward_eliminate(self, matrix: RationalMatrix, rhs: List[BigFraction]) -> None:
        n = matrix.get_row_count()
        for col in range(n):
            pivot_row = self._find_pivot_row(matrix, col, col)
            if pivot_row == -1:
                raise SingularMatrix(f"No non-zero pivot in column {col}")
            if pivot_row != col:
                matrix.swap_rows(pivot_row, col)
                rhs[pivot_row], rhs[col] = rhs[col], rhs[pivot_row]
            self._eliminate_column(matrix, rhs, col)
        logging.debug(f"Reduced {n}x{n} system to row-echelon form.")

    def _eliminate_column(self, matrix: RationalMatrix, rhs: List[BigFraction], col: int) -> None:
        """Clears column col in all rows below the pivot row col"""
        pivot_value = matrix.get_big_fraction_value_at(col, col)
        pivot_tail = matrix.get_row(col)[col:]
        for row in range(col + 1, matrix.get_row_count()):
            entry = matrix.get_big_fraction_value_at(row, col)
            if entry.is_zero():
                continue
            factor = entry / pivot_value
            matrix.get_row(row)[col:] = matrix.get_row(row)[col:] - pivot_tail * factor
            rhs[row] = rhs[row] - factor * rhs[col]

    def _back_substitute(self, matrix: RationalMatrix, rhs: List[BigFraction]) -> List[BigFraction]:
        n = matrix.get_row_count()
        solution = [BigFraction.ZERO] * n
        for i in range(n - 1, -1, -1):
            acc = rhs[i]
            for j in range(i + 1, n):
                acc = acc - matrix.get_big_fraction_value_at(i, j) * solution[j]
            solution[i] = acc / matrix.get_big_fraction_value_at(i, i)
        return solution
