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
"""Command line interface (polyrecover [-v] [--policy POLICY] [FILE ...])"""

from typing import List
import argparse
import logging
import sys

from polyrecover.reconstruct import reconstruct_constant_term
from polyrecover.samples import SAMPLES
from polyrecover.names import *


def _report(label: str, result, show_polynomial: bool) -> None:
    print(f"{label}: c = {result.text}")
    if show_polynomial and result.selected is not None:
        print(f"  p(x) = {result.get_polynomial().as_expr()}")
        if result.inconsistent_points:
            print(f"  points off the polynomial: x = {', '.join(str(x) for x in result.inconsistent_points)}")


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{text}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='polyrecover',
        description="Recover the constant term of a polynomial from sample points given as "
        "digit strings in bases 2 to 36. Without FILE arguments, the built-in sample cases are solved.")
    parser.add_argument('files', nargs='*', metavar='FILE', help='JSON input record(s)')
    parser.add_argument('--policy', choices=POLICIES, default=FIRST_INTEGER,
                        help='how the constant term is selected among subsets (default: %(default)s)')
    parser.add_argument('--max-subsets', type=_non_negative_int, default=None, help='examine at most this many subsets')
    parser.add_argument('--show-polynomial', action='store_true', help='also print the selected polynomial')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='log progress (-vv for debug output)')
    return parser


def main(argv: List[str] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')
    kwargs = {POLICY: args.policy, MAX_SUBSETS: args.max_subsets}

    if not args.files:
        for label, record in SAMPLES.items():
            _report(label, reconstruct_constant_term(record, **kwargs), args.show_polynomial)
        return 0

    failed = False
    for path in args.files:
        try:
            result = reconstruct_constant_term(path, **kwargs)
        except (OSError, ValueError) as e:
            print(f"{path}: error: {e}", file=sys.stderr)
            failed = True
            continue
        _report(path, result, args.show_polynomial)
    return 1 if failed else 0
