# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense float64 matrix type.

Storage is a 2-D NumPy array; products go through BLAS via ``@`` and
inversion goes through the LU factorization in :mod:`matrixkit.lu`.
"""

import logging
from typing import Sequence, Union

import numpy as np

from .io import PathLike, load_matrix
from .lu import lu_decompose, lu_det, lu_invert, lu_solve
from .utils import EPS
from .vector import Vector

logger = logging.getLogger(__name__)


class Matrix:
    data: np.ndarray

    def __init__(self, height: int, width: int):
        if height < 0 or width < 0:
            raise ValueError(
                f"Matrix dimensions must be non-negative, got ({height}, {width})"
            )
        self.data = np.zeros((height, width), dtype=float)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "Matrix":
        # No copy: arr becomes the storage (this is how views share data)
        mat = cls.__new__(cls)
        mat.data = arr
        return mat

    @classmethod
    def from_array(cls, values) -> "Matrix":
        """Copy a 2-D array-like into a new Matrix."""
        arr = np.array(values, dtype=float)
        if arr.ndim != 2:
            raise ValueError(f"Matrix needs 2-D data, got shape {arr.shape}")
        return cls._wrap(arr)

    @classmethod
    def from_buffer(cls, buffer: Sequence[float], height: int, width: int) -> "Matrix":
        """
        Build a height-by-width matrix from a flat row-major buffer,
        element (r, c) being buffer[r * width + c].
        """
        n = height * width
        if len(buffer) < n:
            raise ValueError(
                f"Buffer holds {len(buffer)} values, need {height}x{width} = {n}"
            )
        arr = np.array(buffer[:n], dtype=float).reshape(height, width)
        return cls._wrap(arr)

    @classmethod
    def from_vector(cls, vec: Vector) -> "Matrix":
        """Square diagonal matrix with vec on the diagonal."""
        return cls._wrap(np.diag(vec.data).astype(float))

    @classmethod
    def from_file(cls, path: PathLike, header: bool = False) -> "Matrix":
        """Load a whitespace-delimited table, see matrixkit.io.load_matrix."""
        return cls._wrap(load_matrix(path, header=header))

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        return cls._wrap(np.eye(n))

    def clone(self) -> "Matrix":
        return self._wrap(self.data.copy())

    # ------------------------------------------------------------------
    # Shape and element access
    # ------------------------------------------------------------------
    @property
    def height(self) -> int:
        return self.data.shape[0]

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def shape(self):
        return self.data.shape

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.data.tolist()})"

    def __str__(self) -> str:
        return self.format()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.data, other.data))

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(
                f"({row}, {col}) out of range for {self.height}x{self.width} Matrix"
            )

    def get(self, row: int, col: int) -> float:
        self._check_index(row, col)
        return float(self.data[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        self._check_index(row, col)
        self.data[row, col] = value

    def __getitem__(self, key) -> float:
        return self.get(*key)

    def __setitem__(self, key, value: float) -> None:
        self.set(*key, value)

    def row(self, i: int) -> Vector:
        """Copy of row i."""
        self._check_row(i)
        return Vector._wrap(self.data[i].copy())

    def column(self, j: int) -> Vector:
        """Copy of column j."""
        self._check_col(j)
        return Vector._wrap(self.data[:, j].copy())

    def _check_row(self, i: int) -> None:
        if not 0 <= i < self.height:
            raise IndexError(
                f"row {i} out of range for {self.height}x{self.width} Matrix"
            )

    def _check_col(self, j: int) -> None:
        if not 0 <= j < self.width:
            raise IndexError(
                f"column {j} out of range for {self.height}x{self.width} Matrix"
            )

    def set_row(self, i: int, vec: Vector) -> None:
        self._check_row(i)
        if vec.size != self.width:
            raise ValueError(f"Row needs {self.width} values, got {vec.size}")
        self.data[i] = vec.data

    def set_column(self, j: int, vec: Vector) -> None:
        self._check_col(j)
        if vec.size != self.height:
            raise ValueError(f"Column needs {self.height} values, got {vec.size}")
        self.data[:, j] = vec.data

    def submatrix(self, row: int, col: int, height: int, width: int) -> "Matrix":
        """
        height-by-width block starting at (row, col).

        The block shares storage with this matrix: writes through
        either one are visible in the other.
        """
        if row < 0 or col < 0 or height < 0 or width < 0:
            raise ValueError("submatrix offsets and sizes must be non-negative")
        if row + height > self.height or col + width > self.width:
            raise IndexError(
                f"block ({row}, {col}, {height}, {width}) exceeds "
                f"{self.height}x{self.width} Matrix"
            )
        return self._wrap(self.data[row : row + height, col : col + width])

    def transpose(self) -> "Matrix":
        return self._wrap(self.data.T.copy())

    def to_numpy(self) -> np.ndarray:
        return self.data.copy()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def add(self, other: "Matrix") -> None:
        """Element-wise self += other."""
        if not isinstance(other, Matrix):
            raise TypeError(f"Expected a Matrix, got: {type(other)}")
        if other.shape != self.shape:
            raise ValueError(f"Shape mismatch: {self.shape} vs {other.shape}")
        self.data += other.data

    def multiply(self, other: Union["Matrix", Vector]) -> Union["Matrix", Vector]:
        """
        Matrix product self · other.

        Parameters
        ----------
        other : Matrix (width × p) or Vector (width,)

        Returns
        -------
        Matrix (height × p) or Vector (height,)
        """
        if isinstance(other, Matrix):
            if self.width != other.height:
                raise ValueError(f"Incompatible shapes: {self.shape} @ {other.shape}")
            return self._wrap(self.data @ other.data)
        if isinstance(other, Vector):
            if self.width != other.size:
                raise ValueError(f"Incompatible shapes: {self.shape} @ ({other.size},)")
            return Vector._wrap(self.data @ other.data)
        raise TypeError(f"Cannot multiply a Matrix by {type(other)}")

    __matmul__ = multiply

    def _check_square(self, what: str) -> None:
        if self.height != self.width:
            raise ValueError(f"{what} needs a square matrix, got {self.shape}")

    def invert(self) -> "Matrix":
        """
        Inverse via LU factorization with partial pivoting.

        Raises numpy.linalg.LinAlgError if the matrix is singular.
        """
        self._check_square("invert()")
        return self._wrap(lu_invert(self.data))

    def determinant(self) -> float:
        self._check_square("determinant()")
        return lu_det(self.data)

    def solve(self, b: Union["Matrix", Vector]) -> Union["Matrix", Vector]:
        """Solve self · x = b for a Vector or a Matrix of right-hand sides."""
        self._check_square("solve()")
        LU, perm, _sign = lu_decompose(self.data)
        if isinstance(b, Vector):
            return Vector._wrap(lu_solve(LU, perm, b.data))
        if isinstance(b, Matrix):
            return self._wrap(lu_solve(LU, perm, b.data))
        raise TypeError(f"Expected a Vector or Matrix, got: {type(b)}")

    # ------------------------------------------------------------------
    # Standardization
    # ------------------------------------------------------------------
    def sphere(self, axis: int = 0) -> None:
        """
        Standardize in place to zero mean and unit sample variance.

        axis=0 treats every column as one variable (the usual layout,
        samples in rows); axis=1 does the same for every row.

        A constant column (row) has no spread to scale by: it is
        centered to zero and left at that.
        """
        if axis not in (0, 1):
            raise ValueError(f"axis must be 0 or 1, got {axis}")
        n = self.data.shape[axis]
        if n < 2:
            raise ValueError(
                f"sphere() needs at least two samples along axis {axis}, got {n}"
            )

        mean = self.data.mean(axis=axis, keepdims=True)
        stdev = self.data.std(axis=axis, ddof=1, keepdims=True)

        # rounding leaves a constant column with a tiny non-zero spread
        scale = np.abs(self.data).max(axis=axis, keepdims=True)
        flat_mask = stdev <= EPS * np.maximum(1.0, scale)
        constant = flat_mask.ravel()
        if np.any(constant):
            logger.warning(
                "sphere(): %s %s constant, centering only",
                "columns" if axis == 0 else "rows",
                np.flatnonzero(constant).tolist(),
            )

        centered = self.data - mean
        self.data[...] = np.where(
            flat_mask, 0.0, centered / np.where(flat_mask, 1.0, stdev)
        )

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------
    def format(self, precision: int = 2) -> str:
        """One line per row, each value printed as '%.{precision}f '."""
        fmt = f"%.{precision}f "
        return "\n".join("".join(fmt % v for v in row) for row in self.data)
