#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Command line front end: python -m matrixkit <command> FILE ...
"""

import argparse
import logging
import sys

import numpy as np

from .crossval import split_folds
from .matrix import Matrix

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="matrixkit")
    ap.add_argument(
        "--header", action="store_true", help="file starts with 'rows cols'"
    )
    ap.add_argument("--precision", type=int, default=2)
    ap.add_argument("-v", "--verbose", action="store_true")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("show", help="print the matrix")
    p.add_argument("file")

    p = sub.add_parser("sphere", help="print the standardized matrix")
    p.add_argument("file")
    p.add_argument(
        "--rows", action="store_true", help="standardize rows instead of columns"
    )

    p = sub.add_parser("invert", help="print the inverse")
    p.add_argument("file")

    p = sub.add_parser("split", help="print cross-validation folds")
    p.add_argument("file")
    p.add_argument("splits", type=int)
    p.add_argument("--seed", type=int, default=None)
    return ap


def run(args: argparse.Namespace) -> None:
    m = Matrix.from_file(args.file, header=args.header)
    logger.debug("%s: %s on a %dx%d matrix", args.file, args.command, *m.shape)

    if args.command == "show":
        print(m.format(args.precision))
    elif args.command == "sphere":
        m.sphere(axis=1 if args.rows else 0)
        print(m.format(args.precision))
    elif args.command == "invert":
        print(m.invert().format(args.precision))
    elif args.command == "split":
        for i, fold in enumerate(split_folds(m, args.splits, seed=args.seed)):
            print(f"\nFold {i} ({fold.height} rows)")
            print(fold.format(args.precision))


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        run(args)
    except (OSError, ValueError, np.linalg.LinAlgError) as e:
        print(f"matrixkit: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
