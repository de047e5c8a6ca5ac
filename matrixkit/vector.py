# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense float64 vectors
"""

from typing import Iterable, Sequence

import numpy as np


class Vector:
    data: np.ndarray

    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"Vector size must be non-negative, got {size}")
        self.data = np.zeros(size, dtype=float)

    @classmethod
    def from_array(cls, values: Iterable[float]) -> "Vector":
        """Copy any 1-D array-like into a new Vector."""
        arr = np.array(values, dtype=float)
        if arr.ndim != 1:
            raise ValueError(f"Vector needs 1-D data, got shape {arr.shape}")
        return cls._wrap(arr)

    @classmethod
    def from_buffer(cls, buffer: Sequence[float], size: int) -> "Vector":
        """Copy the first `size` items of a flat buffer."""
        if len(buffer) < size:
            raise ValueError(f"Buffer holds {len(buffer)} values, need {size}")
        return cls._wrap(np.array(buffer[:size], dtype=float))

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "Vector":
        # No copy: the caller hands over ownership of arr
        vec = cls.__new__(cls)
        vec.data = arr
        return vec

    @property
    def size(self) -> int:
        return self.data.shape[0]

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.data.tolist()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.data.shape == other.data.shape and bool(
            np.array_equal(self.data, other.data)
        )

    def __iter__(self):
        return iter(self.data.tolist())

    def _check_index(self, i: int) -> None:
        if not isinstance(i, (int, np.integer)):
            raise TypeError(f"Vector indices must be integers, got: {type(i)}")
        if not 0 <= i < self.size:
            raise IndexError(f"index {i} out of range for Vector of size {self.size}")

    def get(self, i: int) -> float:
        self._check_index(i)
        return float(self.data[i])

    def set(self, i: int, value: float) -> None:
        self._check_index(i)
        self.data[i] = value

    __getitem__ = get
    __setitem__ = set

    def _check_size(self, other: "Vector") -> None:
        if not isinstance(other, Vector):
            raise TypeError(f"Expected a Vector, got: {type(other)}")
        if other.size != self.size:
            raise ValueError(f"Size mismatch: {self.size} vs {other.size}")

    def add(self, other: "Vector") -> None:
        """Element-wise self += other."""
        self._check_size(other)
        self.data += other.data

    def add_constant(self, c: float) -> None:
        self.data += c

    def scale(self, c: float) -> None:
        self.data *= c

    def dot(self, other: "Vector") -> float:
        """Inner product."""
        self._check_size(other)
        return float(self.data @ other.data)

    def mean(self) -> float:
        if self.size == 0:
            raise ValueError("mean of an empty Vector")
        return float(np.mean(self.data))

    def stdev(self) -> float:
        """Sample standard deviation (n - 1 in the denominator)."""
        if self.size < 2:
            raise ValueError("stdev needs at least two values")
        return float(np.std(self.data, ddof=1))

    def copy(self) -> "Vector":
        return self._wrap(self.data.copy())

    def to_numpy(self) -> np.ndarray:
        return self.data.copy()
