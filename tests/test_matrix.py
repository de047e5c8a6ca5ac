# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
import math

import numpy as np
import pytest

from matrixkit.matrix import Matrix
from matrixkit.utils import random_nonsingular
from matrixkit.vector import Vector


def test_construction():
    m = Matrix(2, 3)
    assert m.shape == (2, 3)
    assert m.height == 2 and m.width == 3
    assert np.all(m.data == 0.0)

    b = Matrix.from_buffer([1, 2, 3, 4, 5, 6], 2, 3)
    assert b.get(1, 0) == 4.0
    assert b.get(0, 2) == 3.0
    with pytest.raises(ValueError):
        Matrix.from_buffer([1, 2, 3], 2, 2)
    with pytest.raises(ValueError):
        Matrix.from_array([1.0, 2.0])


def test_from_vector_is_diagonal():
    d = Matrix.from_vector(Vector.from_array([1.0, 2.0, 3.0]))
    np.testing.assert_array_equal(d.data, np.diag([1.0, 2.0, 3.0]))


def test_get_set_bounds():
    m = Matrix(2, 2)
    m.set(0, 1, 5.0)
    m[1, 0] = 7.0
    assert m[0, 1] == 5.0
    assert m.get(1, 0) == 7.0
    with pytest.raises(IndexError):
        m.get(2, 0)
    with pytest.raises(IndexError):
        m.set(0, -1, 1.0)


def test_row_and_column_are_copies():
    m = Matrix.from_array([[1, 2, 3], [4, 5, 6]])
    r = m.row(1)
    c = m.column(2)
    assert list(r) == [4.0, 5.0, 6.0]
    assert list(c) == [3.0, 6.0]
    r[0] = 100.0
    assert m[1, 0] == 4.0
    with pytest.raises(IndexError):
        m.row(2)
    with pytest.raises(IndexError):
        m.column(3)


def test_set_row_and_column():
    m = Matrix(2, 3)
    m.set_row(0, Vector.from_array([1, 2, 3]))
    m.set_column(2, Vector.from_array([9, 8]))
    np.testing.assert_array_equal(m.data, [[1, 2, 9], [0, 0, 8]])
    with pytest.raises(ValueError):
        m.set_row(1, Vector(2))
    with pytest.raises(ValueError):
        m.set_column(0, Vector(3))


def test_submatrix_shares_storage():
    m = Matrix.from_array(np.arange(20.0).reshape(10, 2))
    sub = m.submatrix(8, 0, 2, 2)
    np.testing.assert_array_equal(sub.data, [[16, 17], [18, 19]])
    sub[0, 1] = -1.0
    assert m[8, 1] == -1.0
    with pytest.raises(IndexError):
        m.submatrix(9, 0, 2, 2)


def test_clone_is_deep_and_keeps_shape():
    m = Matrix.from_array(np.arange(6.0).reshape(2, 3))
    c = m.clone()
    assert c == m
    assert c.shape == (2, 3)
    c[0, 0] = 42.0
    assert m[0, 0] == 0.0


def test_add_in_place():
    a = Matrix.from_array([[1, 2], [3, 4]])
    a.add(Matrix.from_array([[1, 1], [1, 1]]))
    np.testing.assert_array_equal(a.data, [[2, 3], [4, 5]])
    with pytest.raises(ValueError):
        a.add(Matrix(3, 2))


@pytest.mark.parametrize("m,k,n", [(3, 4, 2), (1, 1, 1), (6, 6, 6)])
def test_multiply_matrix(m, k, n):
    rng = np.random.default_rng(seed=m * k * n)
    A = rng.standard_normal((m, k))
    B = rng.standard_normal((k, n))
    C = Matrix.from_array(A).multiply(Matrix.from_array(B))
    assert C.shape == (m, n)
    np.testing.assert_allclose(C.data, A @ B)


def test_multiply_vector():
    A = Matrix.from_array([[1, 2, 3], [4, 5, 6]])
    v = Vector.from_array([1, 0, -1])
    out = A @ v
    assert isinstance(out, Vector)
    assert list(out) == [-2.0, -2.0]
    with pytest.raises(ValueError):
        A.multiply(Vector(2))
    with pytest.raises(TypeError):
        A.multiply(3.0)


def test_multiply_shape_mismatch():
    with pytest.raises(ValueError):
        Matrix(2, 3).multiply(Matrix(2, 3))


def test_invert():
    A = Matrix.from_array(random_nonsingular(8, seed=7))
    before = A.clone()
    inv = A.invert()
    assert A == before
    np.testing.assert_allclose((A @ inv).data, np.eye(8), atol=1e-10)
    with pytest.raises(ValueError):
        Matrix(2, 3).invert()
    with pytest.raises(np.linalg.LinAlgError):
        Matrix.from_array([[1, 2], [2, 4]]).invert()


def test_determinant_and_solve():
    A = Matrix.from_array([[4.0, 3.0], [6.0, 3.0]])
    assert math.isclose(A.determinant(), -6.0)
    x = A.solve(Vector.from_array([10.0, 12.0]))
    np.testing.assert_allclose(x.data, [1.0, 2.0])
    X = A.solve(Matrix.identity(2))
    np.testing.assert_allclose(X.data, np.linalg.inv(A.data))


def test_sphere_columns():
    rng = np.random.default_rng(seed=3)
    X = rng.normal(loc=5.0, scale=3.0, size=(10, 4))
    m = Matrix.from_array(X)
    m.sphere()
    np.testing.assert_allclose(m.data.mean(axis=0), 0.0, atol=1e-12)
    np.testing.assert_allclose(m.data.std(axis=0, ddof=1), 1.0)
    expected = (X - X.mean(axis=0)) / X.std(axis=0, ddof=1)
    np.testing.assert_allclose(m.data, expected)


def test_sphere_rows():
    X = np.array([[1.0, 2.0, 3.0], [10.0, 20.0, 60.0]])
    m = Matrix.from_array(X)
    m.sphere(axis=1)
    np.testing.assert_allclose(m.data.mean(axis=1), 0.0, atol=1e-12)
    np.testing.assert_allclose(m.data.std(axis=1, ddof=1), 1.0)


def test_sphere_constant_column_is_centered(caplog):
    m = Matrix.from_array([[1.0, 5.0], [2.0, 5.0], [3.0, 5.0]])
    with caplog.at_level(logging.WARNING, logger="matrixkit.matrix"):
        m.sphere()
    np.testing.assert_array_equal(m.column(1).data, [0.0, 0.0, 0.0])
    np.testing.assert_allclose(m.column(0).data, [-1.0, 0.0, 1.0])
    assert "constant" in caplog.text


@pytest.mark.parametrize("value", [0.1, 1.0 / 3.0, 1e6 + 0.1, -2.7])
@pytest.mark.parametrize("axis", [0, 1])
def test_sphere_inexact_constant_is_centered(caplog, value, axis):
    X = np.array([[value, 1.0], [value, 2.0], [value, 3.0]])
    if axis == 1:
        X = X.T
    m = Matrix.from_array(X)
    with caplog.at_level(logging.WARNING, logger="matrixkit.matrix"):
        m.sphere(axis=axis)
    flat = m.column(0) if axis == 0 else m.row(0)
    varied = m.column(1) if axis == 0 else m.row(1)
    np.testing.assert_allclose(flat.data, 0.0, atol=1e-9)
    np.testing.assert_allclose(varied.data, [-1.0, 0.0, 1.0])
    assert "constant" in caplog.text


def test_sphere_needs_two_samples():
    with pytest.raises(ValueError):
        Matrix(1, 3).sphere()
    with pytest.raises(ValueError):
        Matrix(3, 3).sphere(axis=2)


def test_format():
    m = Matrix.from_array([[1, 2.5], [-3.125, 0]])
    assert str(m) == "1.00 2.50 \n-3.12 0.00 "
    assert m.format(precision=1) == "1.0 2.5 \n-3.1 0.0 "


def test_transpose():
    m = Matrix.from_array([[1, 2, 3]])
    t = m.transpose()
    assert t.shape == (3, 1)
    t[0, 0] = 9.0
    assert m[0, 0] == 1.0
