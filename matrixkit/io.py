# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Reading and writing whitespace-delimited numeric tables.

Two layouts are understood:

    plain      one matrix row per line, columns separated by blanks
    header     the first two tokens are ``rows cols``, followed by
               rows * cols values in row-major order (line breaks
               inside the data are not significant)
"""

import logging
import os
from pathlib import Path
from typing import List, Union

import numpy as np

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _data_lines(text: str) -> List[str]:
    return [line for line in text.splitlines() if line.strip()]


def count_rows(text: str) -> int:
    """Number of lines holding at least one token."""
    return len(_data_lines(text))


def count_columns(text: str) -> int:
    """Number of whitespace-separated tokens on the first data line."""
    lines = _data_lines(text)
    return len(lines[0].split()) if lines else 0


def _to_float(tokens: List[str], path: PathLike) -> np.ndarray:
    try:
        return np.array(tokens, dtype=float)
    except ValueError as e:
        logger.error("load_matrix(): non-numeric token in %s", path)
        raise ValueError(f"{path}: {e}") from e


def _parse_plain(path: PathLike) -> np.ndarray:
    # blank lines are skipped; ragged rows and non-numeric values raise
    try:
        return np.loadtxt(path, dtype=float, ndmin=2)
    except ValueError as e:
        logger.error("load_matrix(): cannot parse %s: %s", path, e)
        raise ValueError(f"{path}: {e}") from e


def _parse_header(text: str, path: PathLike) -> np.ndarray:
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError(f"{path}: missing 'rows cols' header")
    try:
        rows, cols = int(tokens[0]), int(tokens[1])
    except ValueError as e:
        raise ValueError(f"{path}: header must be two integers, got {tokens[:2]}") from e
    if rows < 0 or cols < 0:
        raise ValueError(f"{path}: negative dimensions in header ({rows}, {cols})")

    values = tokens[2:]
    if len(values) != rows * cols:
        logger.error(
            "load_matrix(): header of %s announces %dx%d but %d values follow",
            path,
            rows,
            cols,
            len(values),
        )
        raise ValueError(
            f"{path}: header says {rows}x{cols} = {rows * cols} values, found {len(values)}"
        )
    return _to_float(values, path).reshape(rows, cols)


def load_matrix(path: PathLike, header: bool = False) -> np.ndarray:
    """
    Parse a numeric table into a float64 array.

    Parameters
    ----------
    path : str | os.PathLike
        File to read.
    header : bool
        If True, the file starts with ``rows cols``.

    Returns
    -------
    A : (rows, cols) ndarray

    Raises
    ------
    FileNotFoundError : the file does not exist.
    ValueError        : empty file, ragged rows, non-numeric values,
                        or a header that disagrees with the data.
    """
    path = Path(path)
    try:
        text = path.read_text()
    except FileNotFoundError:
        logger.error("load_matrix(): no such file %s", path)
        raise

    if not text.strip():
        raise ValueError(f"{path}: file holds no data")

    A = _parse_header(text, path) if header else _parse_plain(path)
    logger.debug("load_matrix(): read %dx%d from %s", A.shape[0], A.shape[1], path)
    return A


def save_matrix(
    path: PathLike,
    A: np.ndarray,
    header: bool = False,
    fmt: str = "%.6g",
) -> None:
    """Write A in the layout load_matrix reads back."""
    A = np.asarray(A, dtype=float)
    if A.ndim != 2:
        raise ValueError(f"save_matrix needs a 2-D array, got shape {A.shape}")
    first = f"{A.shape[0]} {A.shape[1]}" if header else ""
    np.savetxt(path, A, fmt=fmt, delimiter=" ", header=first, comments="")
