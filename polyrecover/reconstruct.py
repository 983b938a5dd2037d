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
"""Function: recovering the constant term of a polynomial from sample points (reconstruct_constant_term)"""

from typing import Dict, Union
import logging

from polyrecover.points import CaseRecord, parse_record, load_record
from polyrecover.subset_search import search_subsets
from polyrecover.selection import ReconstructionResult, select_result
from polyrecover.names import *


def reconstruct_constant_term(record: Union[Dict, CaseRecord, str], **kwargs) -> ReconstructionResult:
    """Recovers the constant term of a polynomial from a superset of its sample points
    
    The polynomial has degree k-1 and is sampled at n >= k points whose
    y-values are given as digit strings in bases 2 to 36. Every k-point subset
    is interpolated exactly (Vandermonde system, Gaussian elimination over
    rational numbers) and one of the resulting constant terms is selected.
    
    Example:
        result = reconstruct_constant_term({
            "keys": {"n": 4, "k": 3},
            "1": {"base": "10", "value": "4"},
            "2": {"base": "2", "value": "111"},
            "3": {"base": "10", "value": "12"},
            "6": {"base": "4", "value": "213"}})
        str(result)  # '3'
    
    Args:
        record (dict or CaseRecord or str): 
            The input record, an already decoded CaseRecord, or the path of a
            JSON file holding the record.
            
        policy (optional (str)): (Default: 'first_integer')
            How the constant term is chosen among the subsets: 'first_integer'
            takes the first integer-valued candidate, 'majority' the candidate
            produced by most subsets.
            
        max_subsets (optional (int)): (Default: None)
            Upper limit on the number of examined subsets. By default all C(n,k)
            subsets are examined.

    Returns:
        (ReconstructionResult):
        The selected constant term together with all examined subsets. str()
        of the result gives the constant term in text form or 'No solution'.
    """
    allowed_keys = {POLICY, MAX_SUBSETS}
    for key in kwargs:
        if key not in allowed_keys:
            raise Exception("Key " + key + " is not supported.")
    policy = kwargs.get(POLICY, FIRST_INTEGER)
    if policy not in POLICIES:
        raise Exception(f"Selection policy '{policy}' is not supported. Use one of {POLICIES}.")
    max_subsets = kwargs.get(MAX_SUBSETS)
    if max_subsets is not None and int(max_subsets) < 0:
        raise ValueError(f"'{MAX_SUBSETS}' must be non-negative, got {max_subsets}.")

    if isinstance(record, str):
        case = load_record(record)
    elif isinstance(record, CaseRecord):
        case = record
    else:
        case = parse_record(record)

    logging.info(f"Reconstructing constant term from {len(case.points)} points (k={case.k}).")
    solutions = search_subsets(case.points, case.k, None if max_subsets is None else int(max_subsets))
    result = select_result(solutions, policy, case.points)
    logging.info(f"Finished reconstruction with status '{result.status}': c = {result.text}")
    return result
