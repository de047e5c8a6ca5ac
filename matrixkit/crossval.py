# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Cross-validation folds over the rows of a Matrix
"""

import logging
from typing import Iterator, List, Tuple

import numpy as np

from .matrix import Matrix
from .utils import SeedLike, as_rng

logger = logging.getLogger(__name__)


def fold_sizes(n_rows: int, n_splits: int) -> List[int]:
    """
    Row count of every fold.

    The first n_rows % n_splits folds get one extra row, e.g. 10 rows
    in 3 folds gives [4, 3, 3].
    """
    if n_splits < 1:
        raise ValueError(f"n_splits must be at least 1, got {n_splits}")
    if n_rows < 0:
        raise ValueError(f"n_rows must be non-negative, got {n_rows}")
    base, extra = divmod(n_rows, n_splits)
    return [base + 1 if i < extra else base for i in range(n_splits)]


def split_folds(
    matrix: Matrix,
    n_splits: int,
    seed: SeedLike = None,
) -> List[Matrix]:
    """
    Partition the rows of `matrix` into n_splits randomized folds whose
    sizes differ by at most one.

    Rows are taken in consecutive blocks of n_splits. Each block is
    shuffled and its i-th row goes to fold i, so block j fills row j of
    every fold. The trailing partial block only reaches the first
    n_rows % n_splits folds, which are exactly the ones with an extra
    row.

    Parameters
    ----------
    matrix : Matrix
        Source rows; it is not modified.
    n_splits : int
        Number of folds, at least 1.
    seed : int | numpy.random.Generator | None
        Randomness source; the same integer seed gives the same folds.

    Returns
    -------
    folds : list[Matrix]
        n_splits matrices of width matrix.width.
    """
    if not isinstance(matrix, Matrix):
        raise TypeError(f"Expected a Matrix, got: {type(matrix)}")
    sizes = fold_sizes(matrix.height, n_splits)
    rng = as_rng(seed)

    folds = [Matrix(size, matrix.width) for size in sizes]
    n_rows = matrix.height

    for j, start in enumerate(range(0, n_rows, n_splits)):
        block = matrix.data[start : start + n_splits]
        # Shuffle up the rows we just scooped up
        order = rng.permutation(block.shape[0])
        # Now spread them across the folds, one row each
        for i, src in enumerate(order):
            folds[i].data[j] = block[src]

    logger.debug("split_folds(): %d rows into folds of %s", n_rows, sizes)
    return folds


def train_test_folds(
    matrix: Matrix,
    n_splits: int,
    seed: SeedLike = None,
) -> Iterator[Tuple[Matrix, Matrix]]:
    """
    Yield (train, test) pairs, one per fold.

    Fold i is the test set; the other folds stacked in fold order form
    the training set. With n_splits == 1 the training set is empty.
    """
    folds = split_folds(matrix, n_splits, seed=seed)
    for i, test in enumerate(folds):
        rest = [f.data for k, f in enumerate(folds) if k != i]
        if rest:
            train = Matrix.from_array(np.vstack(rest))
        else:
            train = Matrix(0, matrix.width)
        yield train, test
