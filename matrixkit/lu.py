# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import List, Tuple

import numpy as np

from .utils import permutation_sign, scale_tol

logger = logging.getLogger(__name__)


def lu_decompose(
    A: np.ndarray,
    check: bool = True,
) -> Tuple[np.ndarray, List[int], float]:
    """
    LU factorization with partial pivoting of an n by n matrix A,
    such that A[perm] = L U.

    Parameters
    ----------
    A : np.ndarray               (n, n)
        Square coefficient matrix (MUST be ndarray).
    check : bool
        If True, raise on a numerically zero pivot. If False the
        elimination skips that column and the factorization is
        returned as-is (useful for the determinant of a singular A).

    Returns
    -------
    LU     : np.ndarray          (n, n)
        U on and above the diagonal, the multipliers of L below it.
        The unit diagonal of L is implicit.
    perm   : list[int]
        Row order: row i of LU comes from original row perm[i].
    sign   : float
        Parity of perm, +1.0 or -1.0.

    Raises
    ------
    numpy.linalg.LinAlgError : if check is True and A is singular.
    """
    if not isinstance(A, np.ndarray):
        raise TypeError("A must be a NumPy ndarray")
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError(f"LU factorization needs a square matrix, got {A.shape}")

    LU = A.astype(float, copy=True)
    n = LU.shape[0]
    pivot_tol = scale_tol(LU)
    perm = list(range(n))  # Identity Permutation

    for col in range(n):
        # Partial pivoting: the largest magnitude at or below the
        # diagonal keeps the multipliers bounded by one.
        col_slice = np.abs(LU[col:, col])
        max_idx = int(col_slice.argmax())
        max_val = col_slice[max_idx]

        if max_val <= pivot_tol:
            if check:
                logger.warning(
                    "lu_decompose(): zero pivot in column %d, matrix is singular", col
                )
                raise np.linalg.LinAlgError("Singular matrix")
            continue

        pivot_row = col + max_idx
        if pivot_row != col:
            LU[[col, pivot_row]] = LU[[pivot_row, col]]
            perm[col], perm[pivot_row] = perm[pivot_row], perm[col]

        # Store the multipliers in place of the eliminated entries
        LU[col + 1 :, col] /= LU[col, col]
        LU[col + 1 :, col + 1 :] -= np.outer(LU[col + 1 :, col], LU[col, col + 1 :])

    return LU, perm, permutation_sign(perm)


def lu_solve(LU: np.ndarray, perm: List[int], b: np.ndarray) -> np.ndarray:
    """
    Solve A x = b given the packed factorization from lu_decompose.

    b may be (n,) or (n, k); the result has the same shape.
    """
    LU = np.asarray(LU, dtype=float)
    b = np.asarray(b, dtype=float)
    n = LU.shape[0]
    if b.shape[0] != n:
        raise ValueError(f"Right-hand side has {b.shape[0]} rows, expected {n}")

    flat = b.ndim == 1
    # (n,)  →  (n,1)
    y = b[perm][:, None] if flat else b[perm].copy()

    # forward sweep with the unit lower triangle
    for i in range(1, n):
        y[i] -= LU[i, :i] @ y[:i]

    # back sweep with the upper triangle
    x = np.zeros_like(y)
    for i in reversed(range(n)):
        x[i] = (y[i] - LU[i, i + 1 :] @ x[i + 1 :]) / LU[i, i]

    return x.ravel() if flat else x


def lu_invert(A: np.ndarray) -> np.ndarray:
    """Inverse of a square matrix, solving A X = I column by column."""
    A = np.asarray(A, dtype=float)
    LU, perm, _sign = lu_decompose(A)
    return lu_solve(LU, perm, np.eye(A.shape[0]))


def lu_det(A: np.ndarray) -> float:
    """
    Determinant as the signed product of the LU pivots.
    """
    A = np.asarray(A, dtype=float)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError("The determinant is undefined for non-square matrices.")
    LU, perm, sign = lu_decompose(A, check=False)
    diag = np.diag(LU)
    if np.any(np.abs(diag) <= scale_tol(A)):
        return 0.0
    return sign * float(np.prod(diag))
