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
Exact arithmetic layer

- Arbitrary-precision integers from digit strings in bases 2 to 36
- Exact rational numbers with BigFraction
- Dense rational matrices and Gaussian elimination over them

All operations maintain exact precision using rational arithmetic.
"""

from .big_fraction import BigFraction, InvalidFraction, DivideByZero
from .bigint_parser import parse_big_integer, format_big_integer, parse_base, InvalidDigit, InvalidBase
from .rational_matrix import RationalMatrix
from .gauss import Gauss as GaussianElimination, SingularMatrix

__all__ = [
    'BigFraction',
    'InvalidFraction',
    'DivideByZero',
    'parse_big_integer',
    'format_big_integer',
    'parse_base',
    'InvalidDigit',
    'InvalidBase',
    'RationalMatrix',
    'GaussianElimination',
    'SingularMatrix',
]
