"""
Tests for the Matrix container.

Covers construction (rows, columns, arrays, identity), in-place
arithmetic, products, trace, transpose, concatenation, flatten, element
access, tolerant equality and rendering.
"""

import numpy as np
import pytest

from pylinalg import Matrix, Vector
from pylinalg.core.exceptions import (
    DimensionError,
    InvalidValueError,
    NotSquareError,
    ScalarTypeError,
)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_rows(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m.rows == 2
        assert m.cols == 3
        assert m[1, 0] == 4.0

    def test_column_major_storage(self):
        m = Matrix([[1, 2], [3, 4]])
        assert m.column(0) == Vector([1, 3])
        assert m.row(0) == Vector([1, 2])
        np.testing.assert_array_equal(m.flatten().to_numpy(), [1, 3, 2, 4])

    def test_from_columns(self):
        assert Matrix.from_columns([[1, 3], [2, 4]]) == Matrix([[1, 2], [3, 4]])

    def test_from_columns_vectors(self):
        m = Matrix.from_columns([Vector([1, 2, 3]), Vector([4, 5, 6])])
        assert m.shape == (3, 2)

    def test_from_columns_ragged(self):
        with pytest.raises(DimensionError):
            Matrix.from_columns([[1, 2], [3]])

    def test_from_array(self, rng):
        a = rng.standard_normal((3, 4))
        m = Matrix.from_array(a)
        np.testing.assert_array_equal(m.to_numpy(), a)

    def test_from_array_requires_2d(self):
        with pytest.raises(DimensionError):
            Matrix.from_array([1, 2, 3])

    def test_ragged_rows(self):
        with pytest.raises(DimensionError, match="same length"):
            Matrix([[1, 2, 3], [4, 5]])

    def test_flat_input_rejected(self):
        with pytest.raises(DimensionError):
            Matrix([1, 2, 3])

    def test_rows_of_vectors(self):
        m = Matrix([Vector([1, 2]), Vector([3, 4])])
        assert m == Matrix([[1, 2], [3, 4]])

    def test_zeros(self):
        m = Matrix.zeros(2, 3)
        assert m.shape == (2, 3)
        assert m == Matrix([[0, 0, 0], [0, 0, 0]])

    def test_zeros_negative(self):
        with pytest.raises(InvalidValueError):
            Matrix.zeros(-1, 2)

    def test_identity(self):
        assert Matrix.identity(3) == Matrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]])

    def test_identity_scaled(self):
        m = Matrix.identity(4, value=2.5)
        assert m.trace() == 10.0
        assert m.shape == (4, 4)

    def test_identity_complex_value(self):
        assert Matrix.identity(2, value=1j).kind.is_complex

    def test_empty(self):
        m = Matrix()
        assert m.shape == (0, 0)
        assert m.rows == 0

    def test_no_columns_has_no_rows(self):
        assert Matrix.zeros(3, 0).shape == (0, 0)

    def test_input_copied(self):
        a = np.eye(2)
        m = Matrix.from_array(a)
        a[0, 0] = 9
        assert m[0, 0] == 1.0


# ═══════════════════════════════════════════════════════════════════════
# In-place arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestInPlaceArithmetic:

    def test_add(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        m.add(Matrix([[7, 8, 9], [10, 11, 12]]))
        assert m == Matrix([[8, 10, 12], [14, 16, 18]])

    def test_sub(self):
        m = Matrix([[8, 10, 12], [14, 16, 18]])
        m.sub(Matrix([[7, 8, 9], [10, 11, 12]]))
        assert m == Matrix([[1, 2, 3], [4, 5, 6]])

    def test_add_shape_mismatch_leaves_receiver(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(DimensionError):
            m.add(Matrix([[1, 2], [3, 4]]))
        assert m == Matrix([[1, 2, 3], [4, 5, 6]])

    def test_sub_shape_mismatch(self):
        with pytest.raises(DimensionError):
            Matrix([[1, 2, 3], [4, 5, 6]]).sub(Matrix([[1, 2], [3, 4]]))

    def test_scale(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        m.scale(2.0)
        assert m == Matrix([[2, 4, 6], [8, 10, 12]])

    def test_add_complex_into_real_rejected(self):
        with pytest.raises(ScalarTypeError):
            Matrix([[1.0]]).add(Matrix([[1j]]))


# ═══════════════════════════════════════════════════════════════════════
# Products
# ═══════════════════════════════════════════════════════════════════════


class TestProducts:

    def test_mul_vec_identity(self):
        assert Matrix.identity(2).mul_vec(Vector([4, 2])) == Vector([4, 2])

    def test_mul_vec(self):
        m = Matrix([[2, -2], [-2, 2]])
        assert m.mul_vec(Vector([4, 2])) == Vector([4, -4])

    def test_mul_vec_rectangular(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        result = m.mul_vec(Vector([1, 0, -1]))
        assert result == Vector([-2, -2])
        assert len(result) == 2

    def test_mul_vec_size_mismatch(self):
        with pytest.raises(DimensionError):
            Matrix([[1, 2, 3], [4, 5, 6]]).mul_vec(Vector([1, 2]))

    def test_mul_mat(self):
        a = Matrix([[3, -5], [6, 8]])
        b = Matrix([[2, 1], [4, 2]])
        assert a.mul_mat(b) == Matrix([[-14, -7], [44, 22]])

    def test_mul_mat_rectangular(self):
        a = Matrix([[1, 2, 3], [4, 5, 6]])
        b = Matrix([[1, 0], [0, 1], [1, 1]])
        result = a.mul_mat(b)
        assert result.shape == (2, 2)
        assert result == Matrix([[4, 5], [10, 11]])

    def test_mul_mat_shape_mismatch(self):
        with pytest.raises(DimensionError, match="left cols must equal right rows"):
            Matrix([[1, 2]]).mul_mat(Matrix([[1, 2]]))

    def test_matches_numpy(self, rng):
        a = rng.standard_normal((4, 6))
        b = rng.standard_normal((6, 3))
        result = Matrix.from_array(a).mul_mat(Matrix.from_array(b))
        np.testing.assert_allclose(result.to_numpy(), a @ b, rtol=1e-12, atol=1e-12)

    def test_complex_mul_mat(self, rng):
        a = rng.standard_normal((3, 3)) + 1j * rng.standard_normal((3, 3))
        b = rng.standard_normal((3, 3))
        result = Matrix.from_array(a).mul_mat(Matrix.from_array(b))
        assert result.kind.is_complex
        np.testing.assert_allclose(result.to_numpy(), a @ b, rtol=1e-12, atol=1e-12)

    def test_matmul_operator(self):
        a = Matrix([[1, 2], [3, 4]])
        assert a @ Matrix.identity(2) == a
        assert a @ Vector([1, 1]) == Vector([3, 7])


# ═══════════════════════════════════════════════════════════════════════
# Trace, transpose, concatenation, flatten
# ═══════════════════════════════════════════════════════════════════════


class TestStructure:

    def test_trace(self):
        assert Matrix([[2, -5, 0], [4, 3, 7], [-2, 3, 4]]).trace() == 9.0

    def test_trace_negative(self):
        assert Matrix([[-2, -8, 4], [1, -23, 4], [0, 6, 4]]).trace() == -21.0

    def test_trace_not_square(self):
        with pytest.raises(NotSquareError):
            Matrix([[1, 2, 3], [4, 5, 6]]).trace()

    def test_transpose(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        t = m.transpose()
        assert t == Matrix([[1, 4], [2, 5], [3, 6]])
        assert t.shape == (3, 2)

    def test_transpose_is_new(self):
        m = Matrix([[1, 2], [3, 4]])
        t = m.transpose()
        t[0, 1] = 100
        assert m[1, 0] == 3.0

    def test_concatenate(self):
        result = Matrix([[1, 2], [3, 4]]) | Matrix([[5], [6]])
        assert result == Matrix([[1, 2, 5], [3, 4, 6]])

    def test_concatenate_row_mismatch(self):
        with pytest.raises(DimensionError, match="rows"):
            Matrix([[1, 2], [3, 4]]) | Matrix([[5, 6]])

    def test_concatenate_promotes(self):
        result = Matrix([[1.0]]) | Matrix([[1j]])
        assert result.kind.is_complex

    def test_flatten_column_major(self):
        v = Matrix([[1, 2, 3], [4, 5, 6]]).flatten()
        assert v == Vector([1, 4, 2, 5, 3, 6])

    def test_row_column_copies(self):
        m = Matrix([[1, 2], [3, 4]])
        col = m.column(1)
        col[0] = 50
        assert m[0, 1] == 2.0


# ═══════════════════════════════════════════════════════════════════════
# Access, equality, rendering
# ═══════════════════════════════════════════════════════════════════════


class TestAccessAndEquality:

    def test_setitem(self):
        m = Matrix.zeros(2, 2)
        m[0, 1] = 3.0
        assert m == Matrix([[0, 3], [0, 0]])

    def test_single_index_rejected(self):
        with pytest.raises(TypeError, match=r"m\[row, col\]"):
            Matrix([[1]])[0]

    def test_slice_rejected(self):
        with pytest.raises(TypeError):
            Matrix([[1, 2]])[0, :]

    def test_equality_tolerance(self):
        assert Matrix([[1.0, 2.0]]) == Matrix([[1.0 + 5e-6, 2.0]])
        assert Matrix([[1.0, 2.0]]) != Matrix([[1.0 + 5e-4, 2.0]])

    def test_shape_mismatch_not_equal(self):
        assert Matrix([[1, 2]]) != Matrix([[1], [2]])

    def test_complex_equality(self):
        assert Matrix([[1j]]) == Matrix([[1j + 1e-7]])

    def test_str(self):
        assert str(Matrix([[1, 2], [3, 4]])) == "{[1, 2], [3, 4]}"

    def test_str_empty(self):
        assert str(Matrix()) == "{}"

    def test_repr(self):
        assert repr(Matrix.zeros(2, 3)) == "Matrix(2x3, dtype=float64)"

    def test_is_square(self):
        assert Matrix.identity(3).is_square
        assert not Matrix.zeros(2, 3).is_square
