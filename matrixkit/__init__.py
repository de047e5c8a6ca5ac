# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
matrixkit
=========

A thin dense matrix / vector layer over NumPy, plus the data-prep
helpers a small regression experiment needs: loading numeric tables,
standardizing features and splitting rows into cross-validation folds.

Public API
~~~~~~~~~~
- Value types
    - `Matrix`, `Vector`
- LU factorization
    - `lu_decompose`, `lu_solve`, `lu_invert`, `lu_det`
- File helpers
    - `load_matrix`, `save_matrix`, `count_rows`, `count_columns`
- Cross-validation
    - `fold_sizes`, `split_folds`, `train_test_folds`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import numpy as np, matrixkit as mk
>>> A = mk.Matrix.from_array(np.random.randn(4, 4))
>>> np.allclose((A @ A.invert()).data, np.eye(4))
True
"""

from importlib.metadata import version as _pkg_version

from .crossval import fold_sizes, split_folds, train_test_folds
from .io import count_columns, count_rows, load_matrix, save_matrix

# ---------------------------------------------------------------------
# Re-export the high-level names users are expected to call.
# Each of these names is implemented in one of the internal sub-modules.
# ---------------------------------------------------------------------
from .lu import lu_decompose, lu_det, lu_invert, lu_solve
from .matrix import Matrix
from .utils import permutation_sign, random_nonsingular, scale_tol
from .vector import Vector

__all__ = [
    "Matrix",
    "Vector",
    "lu_decompose",
    "lu_solve",
    "lu_invert",
    "lu_det",
    "load_matrix",
    "save_matrix",
    "count_rows",
    "count_columns",
    "fold_sizes",
    "split_folds",
    "train_test_folds",
    "scale_tol",
    "permutation_sign",
    "random_nonsingular",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show matrixkit”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see warnings
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
