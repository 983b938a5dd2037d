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
Arbitrary-precision integers from digit strings in bases 2 to 36.

Digits are drawn from 0-9a-z (values 0 to 35), case-insensitive. No sign is
accepted: every encoded value is a non-negative magnitude.
"""

from polyrecover.names import DIGITS, MIN_BASE, MAX_BASE


class InvalidDigit(ValueError):
    """Raised when a character is not a digit of the declared base"""


class InvalidBase(ValueError):
    """Raised when a base is not an integer in [2, 36]"""


def parse_base(base) -> int:
    """Parses a base given as int or decimal string and checks its range"""
    try:
        value = int(str(base).strip())
    except ValueError:
        raise InvalidBase(f"Base '{base}' is not an integer.") from None
    if not MIN_BASE <= value <= MAX_BASE:
        raise InvalidBase(f"Base {value} is outside [{MIN_BASE}, {MAX_BASE}].")
    return value


def parse_big_integer(digits: str, base) -> int:
    """Decodes a digit string in the given base into a Python int
    
    Surrounding whitespace is trimmed, then the string is scanned from left to
    right, accumulating result = result * base + digit. An empty string
    decodes to 0.
    
    Args:
        digits (str): 
            Digit string, e.g.: 'aed7015a346d635'.
            
        base (int or str): 
            Base of the digit string in [2, 36], e.g.: 15 or '15'.

    Returns:
        (int): 
        The decoded non-negative integer.
        
    Raises:
        InvalidDigit: If a character is not a digit smaller than base.
        InvalidBase: If base is not an integer in [2, 36].
    """
    base = parse_base(base)
    result = 0
    for ch in str(digits).strip().lower():
        value = DIGITS.find(ch)
        if value == -1 or value >= base:
            raise InvalidDigit(f"Invalid digit '{ch}' for base {base}")
        result = result * base + value
    return result


def format_big_integer(value: int, base) -> str:
    """Encodes a non-negative int as a lowercase digit string in the given base"""
    base = parse_base(base)
    if value < 0:
        raise ValueError(f"Cannot encode negative value {value}.")
    if value == 0:
        return DIGITS[0]
    out = []
    while value:
        value, rem = divmod(value, base)
        out.append(DIGITS[rem])
    return ''.join(reversed(out))
