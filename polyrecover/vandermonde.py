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
"""Function: Vandermonde system for polynomial interpolation (build_system)"""

from typing import List, Sequence, Tuple

from polyrecover.math import BigFraction, RationalMatrix
from polyrecover.points import Point


def build_system(points: Sequence[Point]) -> Tuple[RationalMatrix, List[BigFraction]]:
    """Builds the linear system for the polynomial through the given points
    
    For k points the unknowns are the coefficients of a polynomial of degree
    k-1, ordered from the highest power down to the constant term. Row i holds
    the powers x_i^(k-1), ..., x_i, 1 and the right-hand side entry y_i, so the
    last entry of the solution vector is the constant term.
    
    Points sharing an x-coordinate produce a singular matrix. This is not
    checked here and surfaces when the system is solved.
    
    Args:
        points (list of Point): 
            The k points that determine the polynomial.

    Returns:
        (Tuple of RationalMatrix and list of BigFraction): 
        The k x k coefficient matrix A and the right-hand side b of A*c = b.
    """
    m = len(points) - 1
    rows = []
    rhs = []
    for p in points:
        powers = [1]
        for _ in range(m):
            powers.append(powers[-1] * p.x)
        rows.append([BigFraction(v) for v in reversed(powers)])
        rhs.append(BigFraction(p.y))
    return RationalMatrix(rows), rhs
