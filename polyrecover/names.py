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
"""Static strings used in the polyrecover package

    Input records

        KEYS = 'keys'

        N = 'n'

        K = 'k'

        BASE = 'base'

        VALUE = 'value'

    Digits

        DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'

        MIN_BASE = 2

        MAX_BASE = 36

    Subset status codes

        OPTIMAL = 'optimal'

        INFEASIBLE = 'infeasible'

    Reconstruction setup

        POLICY = 'policy'

        FIRST_INTEGER = 'first_integer'

        MAJORITY = 'majority'

        MAX_SUBSETS = 'max_subsets'

    Results

        NO_SOLUTION = 'No solution'

        FALLBACK = 'fallback'
"""
# Input records
KEYS = 'keys'
N = 'n'
K = 'k'
BASE = 'base'
VALUE = 'value'

# Digits
DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'
MIN_BASE = 2
MAX_BASE = 36

# Subset status codes
OPTIMAL = 'optimal'
INFEASIBLE = 'infeasible'

# Reconstruction setup
POLICY = 'policy'
FIRST_INTEGER = 'first_integer'
MAJORITY = 'majority'
POLICIES = (FIRST_INTEGER, MAJORITY)
MAX_SUBSETS = 'max_subsets'

# Results
NO_SOLUTION = 'No solution'
FALLBACK = 'fallback'
