"""
Tests for the Matrix container: construction, access, copy-on-write,
reshape, printing and operators.
"""

import array

import numpy as np
import pytest

from pyvecmat import Matrix
from pyvecmat.core.exceptions import DimensionError, ValidationError


@pytest.fixture
def m22():
    return Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_grid(self):
        m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        assert m.shape == (2, 3)
        assert m.rows == 2
        assert m.columns == 3
        assert m.size == 6
        assert m.dtype == np.float64
        assert m[1, 0] == 4.0

    @pytest.mark.parametrize("rows, columns", [(0, 2), (2, 0), (-1, 3)])
    def test_non_positive_dimensions(self, rows, columns):
        with pytest.raises(ValidationError, match="must be positive"):
            Matrix(rows, columns, [])

    def test_non_integer_dimension(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            Matrix(1.5, 2, [1.0, 2.0])

    def test_grid_length_mismatch(self):
        with pytest.raises(DimensionError, match="expected 4 elements"):
            Matrix(2, 2, [1.0, 2.0, 3.0])

    def test_grid_must_be_flat(self):
        with pytest.raises(DimensionError):
            Matrix(2, 2, [[1.0, 2.0], [3.0, 4.0]])

    def test_constructor_copies_caller_array(self):
        grid = np.array([1.0, 2.0, 3.0, 4.0])
        m = Matrix(2, 2, grid)
        grid[0] = 99.0
        m[1, 1] = -1.0
        assert m[0, 0] == 1.0
        assert grid[3] == 4.0

    def test_constructor_copies_buffer_protocol_input(self):
        buf = array.array('d', [1.0, 2.0, 3.0, 4.0])
        m = Matrix(2, 2, buf)
        m[0, 0] = 42.0
        assert list(buf) == [1.0, 2.0, 3.0, 4.0]
        buf[3] = -1.0
        assert m[1, 1] == 4.0

    def test_full_zeros_identity(self):
        assert Matrix.full(2, 3, 7.0).tolist() == [[7.0, 7.0, 7.0], [7.0, 7.0, 7.0]]
        assert Matrix.zeros(1, 2).tolist() == [[0.0, 0.0]]
        assert Matrix.identity(2).tolist() == [[1.0, 0.0], [0.0, 1.0]]

    def test_float32(self):
        assert Matrix.zeros(2, 2, dtype=np.float32).dtype == np.float32
        assert Matrix(1, 2, np.array([1, 2], dtype=np.float32)).dtype == np.float32

    def test_unsupported_dtype(self):
        with pytest.raises(ValidationError, match="float32 or float64"):
            Matrix.zeros(2, 2, dtype=np.int64)

    def test_from_rows(self, m22):
        assert m22.tolist() == [[1.0, 2.0], [3.0, 4.0]]

    def test_from_rows_dtype(self):
        m = Matrix.from_rows([[1, 2]], dtype=np.float32)
        assert m.dtype == np.float32

    def test_from_rows_ragged(self):
        with pytest.raises(DimensionError, match="equal length"):
            Matrix.from_rows([[1.0, 2.0], [3.0]])

    def test_from_rows_empty(self):
        with pytest.raises(ValidationError):
            Matrix.from_rows([])
        with pytest.raises(ValidationError):
            Matrix.from_rows([[]])

    def test_from_array(self):
        a = np.arange(6.0).reshape(2, 3)
        m = Matrix.from_array(a)
        assert m.shape == (2, 3)
        a[0, 0] = 99.0
        assert m[0, 0] == 0.0

    def test_from_array_copies_buffer_protocol_input(self):
        buf = array.array('d', [0.0, 1.0, 2.0, 3.0, 4.0, 5.0])
        view = memoryview(buf).cast('B').cast('d', [2, 3])
        m = Matrix.from_array(view)
        assert m.tolist() == [[0.0, 1.0, 2.0], [3.0, 4.0, 5.0]]
        m[0, 0] = 42.0
        assert buf[0] == 0.0

    def test_from_array_fortran_order(self):
        a = np.asfortranarray(np.arange(6.0).reshape(2, 3))
        assert Matrix.from_array(a).tolist() == [[0.0, 1.0, 2.0], [3.0, 4.0, 5.0]]

    def test_from_array_requires_2d(self):
        with pytest.raises(DimensionError):
            Matrix.from_array(np.arange(3.0))


# ═══════════════════════════════════════════════════════════════════════
# Element, row and column access
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_element_get_set(self, m22):
        assert m22[0, 1] == 2.0
        m22[0, 1] = 20.0
        assert m22[0, 1] == 20.0
        assert m22.ravel().tolist() == [1.0, 20.0, 3.0, 4.0]

    @pytest.mark.parametrize("key", [(2, 0), (0, 2), (-1, 0), (0, -1)])
    def test_element_out_of_range(self, m22, key):
        with pytest.raises(IndexError):
            m22[key]

    def test_bad_index_arity(self, m22):
        with pytest.raises(IndexError):
            m22[0, 0, 0]

    def test_row(self, m22):
        np.testing.assert_array_equal(m22[1], [3.0, 4.0])
        np.testing.assert_array_equal(m22.row(0), [1.0, 2.0])

    def test_row_view_is_read_only(self, m22):
        with pytest.raises(ValueError):
            m22.row(0)[0] = 5.0

    def test_set_row(self, m22):
        m22[0] = [9.0, 8.0]
        m22.set_row(1, np.array([7.0, 6.0]))
        assert m22.tolist() == [[9.0, 8.0], [7.0, 6.0]]

    def test_set_row_wrong_length(self, m22):
        with pytest.raises(DimensionError, match="needs 2 elements, got 3"):
            m22.set_row(0, [1.0, 2.0, 3.0])

    def test_column(self, m22):
        np.testing.assert_array_equal(m22.column(1), [2.0, 4.0])

    def test_set_column(self, m22):
        m22.set_column(0, [0.0, 0.0])
        assert m22.tolist() == [[0.0, 2.0], [0.0, 4.0]]

    def test_set_column_wrong_length(self, m22):
        with pytest.raises(DimensionError):
            m22.set_column(0, [1.0])

    def test_column_out_of_range(self, m22):
        with pytest.raises(IndexError):
            m22.column(2)

    def test_iteration_yields_rows(self, m22):
        assert [r.tolist() for r in m22] == [[1.0, 2.0], [3.0, 4.0]]
        assert len(m22) == 2

    def test_to_numpy_is_a_copy(self, m22):
        a = m22.to_numpy()
        assert a.shape == (2, 2)
        a[0, 0] = 99.0
        assert m22[0, 0] == 1.0


# ═══════════════════════════════════════════════════════════════════════
# Value semantics (copy-on-write)
# ═══════════════════════════════════════════════════════════════════════


class TestCopyOnWrite:

    def test_borrowed_row_unaffected_by_write(self, m22):
        row = m22.row(0)
        m22[0, 0] = 100.0
        assert row[0] == 1.0
        assert m22[0, 0] == 100.0

    def test_borrowed_column_unaffected_by_set_column(self, m22):
        col = m22.column(0)
        m22.set_column(0, [5.0, 6.0])
        np.testing.assert_array_equal(col, [1.0, 3.0])

    def test_reshape_shares_until_write(self, m22):
        flat = m22.reshape(1, 4)
        m22[0, 0] = -1.0
        assert flat[0, 0] == 1.0
        flat[0, 3] = -4.0
        assert m22[1, 1] == 4.0

    def test_copy_is_independent(self, m22):
        c = m22.copy()
        c[0, 0] = 50.0
        assert m22[0, 0] == 1.0

    def test_compound_assignment_rebinds(self, m22):
        original = m22
        other = Matrix.full(2, 2, 1.0)
        m22 += other
        assert original.tolist() == [[1.0, 2.0], [3.0, 4.0]]
        assert m22.tolist() == [[2.0, 3.0], [4.0, 5.0]]


# ═══════════════════════════════════════════════════════════════════════
# Reshape, transpose, equality
# ═══════════════════════════════════════════════════════════════════════


class TestShape:

    def test_reshape(self):
        m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        r = m.reshape(3, 2)
        assert r.tolist() == [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]

    def test_reshape_round_trip(self, rng):
        m = Matrix.from_array(rng.standard_normal((3, 4)))
        assert m.reshape(4, 3).reshape(3, 4) == m

    def test_reshape_size_mismatch(self, m22):
        with pytest.raises(DimensionError, match=r"cannot reshape Matrix\(2,2\) to shape\(3,1\)"):
            m22.reshape(3, 1)

    def test_transpose(self):
        m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        assert m.T.tolist() == [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]]

    def test_transpose_twice(self, rng):
        m = Matrix.from_array(rng.standard_normal((2, 5)))
        assert m.T.T == m

    def test_equality_is_structural(self):
        a = Matrix(2, 2, [1, 2, 3, 4])
        assert a == Matrix.from_rows([[1, 2], [3, 4]])
        assert a != a.reshape(1, 4)
        assert a != Matrix(2, 2, [1, 2, 3, 5])
        assert (a == "matrix") is False

    def test_unhashable(self, m22):
        with pytest.raises(TypeError):
            hash(m22)

    def test_allclose(self, m22):
        near = Matrix.from_rows([[1.0 + 1e-13, 2.0], [3.0, 4.0]])
        assert m22.allclose(near)
        assert not m22.allclose(Matrix.from_rows([[1.1, 2.0], [3.0, 4.0]]))
        assert not m22.allclose(m22.reshape(1, 4))


# ═══════════════════════════════════════════════════════════════════════
# Printing
# ═══════════════════════════════════════════════════════════════════════


class TestPrinting:

    def test_single_row(self):
        assert str(Matrix.from_rows([[1.0, 2.0]])) == "(\t1.0\t2.0\t)\n"

    def test_multiple_rows(self):
        m = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        assert str(m) == (
            "⎛\t1.0\t2.0\t⎞\n"
            "⎜\t3.0\t4.0\t⎥\n"
            "⎝\t5.0\t6.0\t⎠\n"
        )

    def test_repr(self, m22):
        assert repr(m22) == "Matrix(rows=2, columns=2, dtype=float64)"


# ═══════════════════════════════════════════════════════════════════════
# Operators
# ═══════════════════════════════════════════════════════════════════════


class TestOperators:

    def test_add_sub(self, m22):
        assert (m22 + m22).tolist() == [[2.0, 4.0], [6.0, 8.0]]
        assert (m22 - m22).tolist() == [[0.0, 0.0], [0.0, 0.0]]

    def test_neg(self, m22):
        assert (-m22).tolist() == [[-1.0, -2.0], [-3.0, -4.0]]

    def test_scalar_multiply_both_sides(self, m22):
        assert (2 * m22) == (m22 * 2.0)
        assert (2 * m22).tolist() == [[2.0, 4.0], [6.0, 8.0]]

    def test_elementwise_multiply(self, m22):
        assert (m22 * m22).tolist() == [[1.0, 4.0], [9.0, 16.0]]

    def test_matmul(self):
        a = Matrix.from_rows([[1.0, 2.0, 3.0]])
        b = Matrix.from_rows([[1.0], [1.0], [1.0]])
        assert (a @ b) == Matrix.from_rows([[6.0]])

    def test_matmul_vector_both_sides(self, m22):
        np.testing.assert_array_equal(m22 @ np.array([1.0, 1.0]), [3.0, 7.0])
        np.testing.assert_array_equal(np.array([1.0, 1.0]) @ m22, [4.0, 6.0])
        np.testing.assert_array_equal([1.0, 0.0] @ m22, [1.0, 2.0])

    def test_divide_by_scalar(self, m22):
        assert (m22 / 2).tolist() == [[0.5, 1.0], [1.5, 2.0]]

    def test_divide_by_matrix(self, m22):
        y = Matrix.from_rows([[4.0, 7.0], [2.0, 6.0]])
        expected = m22.to_numpy() @ np.linalg.inv(y.to_numpy())
        np.testing.assert_allclose((m22 / y).to_numpy(), expected, rtol=1e-12)

    def test_power(self, m22):
        assert (m22 ** 2).tolist() == [[1.0, 4.0], [9.0, 16.0]]

    def test_shape_mismatch(self, m22):
        with pytest.raises(DimensionError):
            m22 + Matrix.zeros(2, 3)
        with pytest.raises(DimensionError):
            m22 @ Matrix.zeros(3, 2)

    def test_unsupported_operand(self, m22):
        with pytest.raises(TypeError):
            m22 + 1.0
        with pytest.raises(TypeError):
            m22 * "a"

    def test_operands_unchanged(self, m22):
        before = m22.tolist()
        _ = m22 + m22
        _ = m22 @ m22
        _ = m22 * 3
        assert m22.tolist() == before
