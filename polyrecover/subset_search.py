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
"""Function: search over all k-point subsets of the sample points (search_subsets)"""

from dataclasses import dataclass
from itertools import combinations, islice
from math import comb
from typing import Iterator, List, Optional, Sequence, Tuple
import logging

from polyrecover.math import BigFraction, GaussianElimination, SingularMatrix
from polyrecover.points import Point
from polyrecover.vandermonde import build_system
from polyrecover.names import *


@dataclass(frozen=True)
class SubsetSolution:
    """Outcome of interpolating one subset of points
    
    Args:
        points (tuple of Point):
            The subset, in enumeration order (ascending x).
            
        status (str):
            OPTIMAL if the subset's system was solved, INFEASIBLE if it was
            singular (e.g. two points share an x-coordinate).
            
        coefficients (tuple of BigFraction or None):
            Polynomial coefficients from the highest power down to the constant
            term. None for infeasible subsets.
    """
    points: Tuple[Point, ...]
    status: str
    coefficients: Optional[Tuple[BigFraction, ...]] = None

    @property
    def constant_term(self) -> Optional[BigFraction]:
        if self.coefficients is None:
            return None
        return self.coefficients[-1]

    @property
    def xs(self) -> Tuple[int, ...]:
        return tuple(p.x for p in self.points)


def enumerate_subsets(points: Sequence[Point], k: int, max_subsets: int = None) -> Iterator[Tuple[Point, ...]]:
    """Yields all size-k subsets of points in lexicographic index order
    
    The number of subsets is C(n, k). max_subsets caps how many are generated.
    """
    subsets = combinations(points, k)
    if max_subsets is not None:
        subsets = islice(subsets, max_subsets)
    return subsets


def solve_subset(points: Sequence[Point]) -> SubsetSolution:
    """Interpolates the polynomial through the given points"""
    A, b = build_system(points)
    try:
        coefficients = GaussianElimination.get_rational_instance().solve(A, b)
    except SingularMatrix as e:
        logging.debug(f"  Subset x={[p.x for p in points]} is infeasible: {e}")
        return SubsetSolution(tuple(points), INFEASIBLE)
    return SubsetSolution(tuple(points), OPTIMAL, tuple(coefficients))


def search_subsets(points: Sequence[Point], k: int, max_subsets: int = None) -> List[SubsetSolution]:
    """Interpolates every size-k subset of the sample points
    
    Subsets are visited in lexicographic order of their point indices. A
    singular subset does not stop the search, it is returned as an INFEASIBLE
    SubsetSolution. If k exceeds the number of points, no subset exists and
    the list is empty.
    
    Args:
        points (list of Point): 
            All sample points, ordered by ascending x.
            
        k (int): 
            Subset size (number of polynomial coefficients).
            
        max_subsets (int, optional): 
            Upper limit on the number of subsets examined (default: all).

    Returns:
        (list of SubsetSolution): 
        One entry per examined subset, in enumeration order.
    """
    total = comb(len(points), k) if k <= len(points) else 0
    if max_subsets is not None and max_subsets < total:
        logging.info(f"  Examining {max_subsets} of {total} subsets of size {k}.")
    else:
        logging.info(f"  Examining {total} subsets of size {k}.")
    solutions = [solve_subset(s) for s in enumerate_subsets(points, k, max_subsets)]
    num_infeasible = sum(1 for s in solutions if s.status == INFEASIBLE)
    if num_infeasible:
        logging.info(f"  {num_infeasible} of {len(solutions)} subsets were singular.")
    return solutions
