#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import platform
import time

import numpy as np
import pandas as pd

from matrixkit.lu import lu_invert
from matrixkit.utils import random_nonsingular

REPEATS = 5  # best of 5 runs leads to stable numbers
SIZES = [50, 200, 500]


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def run(sizes=SIZES, repeats=REPEATS, seed=0) -> pd.DataFrame:
    records = []
    for n in sizes:
        A = random_nonsingular(n, seed=seed + n)
        identity = np.eye(n)

        # reference
        t_np = min(wall(np.linalg.inv, A) for _ in range(repeats))
        r_np = np.linalg.norm(A @ np.linalg.inv(A) - identity, np.inf)

        t_lu = min(wall(lu_invert, A) for _ in range(repeats))
        r_lu = np.linalg.norm(A @ lu_invert(A) - identity, np.inf)
        records.append(("LU-inv", f"{n}x{n}", t_lu, t_lu / t_np, r_lu / max(r_np, 1e-300)))

    return pd.DataFrame(
        records,
        columns=["kernel", "size", "sec", "sec/NumPy", "residual/NumPy"],
    )


if __name__ == "__main__":
    df = run()
    print(platform.platform())
    print(df.to_string(index=False))
    df.to_csv("bench_results.csv", index=False)
