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
"""Sample points and input records (Point, CaseRecord, parse_record)"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple
import logging
import json

from polyrecover.math import parse_big_integer
from polyrecover.names import *


class InvalidRecord(ValueError):
    """Raised when an input record does not follow the expected layout"""


@dataclass(frozen=True)
class Point:
    """A sample point (x, y) of the unknown polynomial"""
    x: int
    y: int


@dataclass(frozen=True)
class CaseRecord:
    """A decoded input record
    
    Args:
        n (int):
            Point count as declared in the record's 'keys' field.
            
        k (int):
            Number of points needed to determine the polynomial (degree k-1).
            
        points (tuple of Point):
            The decoded points, ordered by ascending x.
    """
    n: int
    k: int
    points: Tuple[Point, ...] = field(default_factory=tuple)


def _to_int(value, what) -> int:
    if isinstance(value, bool):
        raise InvalidRecord(f"{what} must be an integer, got {value!r}.")
    try:
        return int(str(value).strip())
    except ValueError:
        raise InvalidRecord(f"{what} must be an integer, got {value!r}.") from None


def parse_record(record: Dict) -> CaseRecord:
    """Decodes an input record into a CaseRecord
    
    The record holds a control field 'keys' with the entries 'n' (number of
    points) and 'k' (points needed). Every other field names a point by its
    x-coordinate and supplies the y-coordinate as a digit string in some base:
    
    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }
    
    Args:
        record (dict): 
            The input record, e.g. as loaded from a JSON file.

    Returns:
        (CaseRecord): 
        The declared n and k and the list of decoded points sorted by x.
        
    Raises:
        InvalidRecord: If the record layout is broken.
        InvalidDigit, InvalidBase: If a y-value cannot be decoded.
    """
    if not isinstance(record, dict):
        raise InvalidRecord(f"Record must be a mapping, got {type(record).__name__}.")
    if KEYS not in record:
        raise InvalidRecord(f"Record has no '{KEYS}' field.")
    keys = record[KEYS]
    if not isinstance(keys, dict) or K not in keys:
        raise InvalidRecord(f"Field '{KEYS}' must be a mapping containing '{K}'.")
    k = _to_int(keys[K], f"'{KEYS}.{K}'")
    if k < 1:
        raise InvalidRecord(f"'{KEYS}.{K}' must be at least 1, got {k}.")

    points = []
    for name, entry in record.items():
        if name == KEYS:
            continue
        if entry is None:
            logging.warning(f"Skipping empty point entry '{name}'.")
            continue
        x = _to_int(name, f"Point key '{name}'")
        if x < 0:
            raise InvalidRecord(f"Point key '{name}' must be non-negative.")
        if not isinstance(entry, dict) or BASE not in entry or VALUE not in entry:
            raise InvalidRecord(f"Point '{name}' must be a mapping with '{BASE}' and '{VALUE}'.")
        points.append(Point(x, parse_big_integer(entry[VALUE], entry[BASE])))
    points.sort(key=lambda p: p.x)

    if N in keys:
        n = _to_int(keys[N], f"'{KEYS}.{N}'")
        if n != len(points):
            logging.warning(f"Record declares n={n} but contains {len(points)} points. Using the decoded points.")
    else:
        n = len(points)
    return CaseRecord(n, k, tuple(points))


def load_record(path) -> CaseRecord:
    """Loads a JSON input record from a file and decodes it"""
    with open(path, 'r') as f:
        try:
            record = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidRecord(f"{path} is not valid JSON: {e}") from e
    return parse_record(record)
