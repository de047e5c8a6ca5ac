# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import Optional, Union

import numpy as np

EPS: float = 1e-12

SeedLike = Optional[Union[int, np.random.Generator]]


def scale_tol(A: np.ndarray) -> float:
    """Return an absolute tolerance scaled to the matrix magnitude."""
    if A.size == 0:
        return EPS
    return EPS * max(1.0, np.linalg.norm(A, ord=np.inf))


def permutation_sign(perm: list[int]) -> float:
    """Return +1 or –1 depending on permutation parity."""
    visited = [False] * len(perm)
    cycles = 0
    for i in range(len(perm)):
        if not visited[i]:
            cycles += 1
            j = i
            while not visited[j]:
                visited[j] = True
                j = perm[j]
    swaps = len(perm) - cycles  # n − #cycles
    return -1.0 if swaps & 1 else 1.0


def as_rng(seed: SeedLike = None) -> np.random.Generator:
    """Turn a seed, an existing Generator or None into a Generator."""
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def random_nonsingular(n, cond=10.0, seed=None) -> np.ndarray:
    """
    Build a random n-by-n matrix that is guaranteed to be invertible.

    A = Q1 · diag(s) · Q2 with random orthogonal Q1, Q2 and singular
    values s drawn from [1, cond], so cond(A) never exceeds `cond`.

    Returns
    -------
    Matrix with float64 dtype
    """
    if cond < 1.0:
        raise ValueError("cond must be at least 1")
    rng = as_rng(seed)
    Q1, _ = np.linalg.qr(rng.standard_normal((n, n)))
    Q2, _ = np.linalg.qr(rng.standard_normal((n, n)))
    s = rng.uniform(1.0, cond, size=n)
    return np.asarray((Q1 * s) @ Q2, dtype=float)
