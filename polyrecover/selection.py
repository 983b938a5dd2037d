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
"""Container and selection policies for reconstruction results (ReconstructionResult)"""

from typing import Dict, List, Optional, Sequence, Tuple
import logging
from sympy import Poly, Rational, Symbol

from polyrecover.math import BigFraction
from polyrecover.points import Point
from polyrecover.subset_search import SubsetSolution
from polyrecover.names import *


class ReconstructionResult(object):
    """Container for the recovered constant term of a polynomial
    
    Objects of this class are returned by reconstruct_constant_term and
    select_result. Besides the selected value they keep every examined subset
    so that the choice can be inspected afterwards.
    
    Args:
        status (str):
            OPTIMAL if an integer-valued constant term was selected, FALLBACK if
            only a non-integer candidate was available and INFEASIBLE if every
            subset was singular (or none existed).
            
        policy (str):
            The selection policy used (FIRST_INTEGER or MAJORITY).
            
        solutions (list of SubsetSolution):
            All examined subsets in enumeration order.
            
        selected (SubsetSolution or None):
            The subset whose polynomial was selected.
            
        support (int):
            Number of feasible subsets that produced the selected constant term.
            
        points (list of Point):
            All sample points of the case.
    """

    def __init__(self, status: str, policy: str, solutions: Sequence[SubsetSolution],
                 selected: Optional[SubsetSolution], support: int, points: Sequence[Point]):
        self.status = status
        self.policy = policy
        self.solutions = list(solutions)
        self.selected = selected
        self.support = support
        self.points = tuple(points)

    @property
    def value(self) -> Optional[BigFraction]:
        """The selected constant term, None if there is no solution"""
        if self.selected is None:
            return None
        return self.selected.constant_term

    @property
    def text(self) -> str:
        if self.selected is None:
            return NO_SOLUTION
        return str(self.value)

    @property
    def candidates(self) -> List[BigFraction]:
        """Constant terms of all feasible subsets in enumeration order"""
        return [s.constant_term for s in self.solutions if s.status == OPTIMAL]

    @property
    def coefficients(self) -> Optional[Tuple[BigFraction, ...]]:
        if self.selected is None:
            return None
        return self.selected.coefficients

    def evaluate(self, x: int) -> BigFraction:
        """Evaluates the selected polynomial at x (Horner scheme)"""
        if self.selected is None:
            raise ValueError("No polynomial was selected.")
        acc = BigFraction.ZERO
        for c in self.selected.coefficients:
            acc = acc * x + c
        return acc

    @property
    def inconsistent_points(self) -> Tuple[int, ...]:
        """x-coordinates of the sample points that do not lie on the selected polynomial"""
        if self.selected is None:
            return ()
        return tuple(p.x for p in self.points if self.evaluate(p.x) != p.y)

    def get_polynomial(self, symbol: str = 'x') -> Poly:
        """Returns the selected polynomial as a sympy Poly with exact rational coefficients"""
        if self.selected is None:
            raise ValueError("No polynomial was selected.")
        coeffs = [Rational(c.numerator, c.denominator) for c in self.selected.coefficients]
        return Poly.from_list(coeffs, Symbol(symbol))

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"ReconstructionResult(status={self.status!r}, value={self.text!r}, support={self.support})"


def _first_integer(feasible: List[SubsetSolution]) -> Tuple[SubsetSolution, str]:
    for s in feasible:
        if s.constant_term.is_integer():
            return s, OPTIMAL
    return feasible[0], FALLBACK


def _majority(feasible: List[SubsetSolution]) -> Tuple[SubsetSolution, str]:
    # dicts keep insertion order, so ties go to the earliest candidate
    first_seen: Dict[BigFraction, SubsetSolution] = {}
    votes: Dict[BigFraction, int] = {}
    for s in feasible:
        first_seen.setdefault(s.constant_term, s)
        votes[s.constant_term] = votes.get(s.constant_term, 0) + 1
    winner = max(votes, key=votes.get)
    selected = first_seen[winner]
    return selected, OPTIMAL if winner.is_integer() else FALLBACK


def select_result(solutions: Sequence[SubsetSolution], policy: str = FIRST_INTEGER,
                  points: Sequence[Point] = None) -> ReconstructionResult:
    """Selects the constant term from the examined subsets
    
    With the FIRST_INTEGER policy, the first feasible subset (in enumeration
    order) with an integer constant term is selected. If no constant term is an
    integer, the first feasible subset is selected as a fallback. Candidates are
    not cross-checked against each other.
    
    With the MAJORITY policy, the constant term produced by the largest number of
    feasible subsets is selected, ties going to the one that appeared first.
    This tolerates sample sets with some inconsistent points.
    
    If there is no feasible subset, the result carries the NO_SOLUTION text.
    
    Args:
        solutions (list of SubsetSolution): 
            The examined subsets in enumeration order.
            
        policy (str): 
            FIRST_INTEGER (default) or MAJORITY.
            
        points (list of Point): 
            All sample points. Defaults to the points appearing in solutions.

    Returns:
        (ReconstructionResult): 
        The selected constant term and the data it was selected from.
    """
    if policy not in POLICIES:
        raise Exception(f"Selection policy '{policy}' is not supported. Use one of {POLICIES}.")
    if points is None:
        points = sorted({p for s in solutions for p in s.points}, key=lambda p: p.x)
    feasible = [s for s in solutions if s.status == OPTIMAL]
    if not feasible:
        logging.info('  No feasible subset found.')
        return ReconstructionResult(INFEASIBLE, policy, solutions, None, 0, points)
    if policy == MAJORITY:
        selected, status = _majority(feasible)
    else:
        selected, status = _first_integer(feasible)
    support = sum(1 for s in feasible if s.constant_term == selected.constant_term)
    logging.info(f"  Selected constant term {selected.constant_term} from subset x={list(selected.xs)} "
                 f"({support} of {len(feasible)} feasible subsets agree).")
    return ReconstructionResult(status, policy, solutions, selected, support, points)
