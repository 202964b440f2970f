"""
Tests for the generic Matrix.

Validates:
    - The four construction protocols and their validation errors
    - Row-major iteration and flat/2-D exports
    - dot_product: shapes, identity, vector operands
    - IncompatibleShapesError / ShapeMismatchError
"""

import copy

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from pyvecmath.core.exceptions import (
    DimensionError,
    IncompatibleShapesError,
    ShapeMismatchError,
    ValidationError,
)
from pyvecmath.core.protocols import LinearAlgebraOps
from pyvecmath.core.tolerances import FP64_COMPOSED
from pyvecmath.linalg import Mat2x2, Matrix, Vec2, Vec3, Vector


# ═══════════════════════════════════════════════════════════════════════
# Construction protocols
# ═══════════════════════════════════════════════════════════════════════


class TestNested:

    def test_constructor(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m.height == 2
        assert m.width == 3

    def test_from_nested_matches_constructor(self):
        rows = [[1, 2], [3, 4]]
        assert Matrix.from_nested(rows) == Matrix(rows)

    def test_from_numpy_copies(self):
        source = np.eye(2)
        m = Matrix(source)
        source[0, 0] = 99.0
        assert m.get(0, 0) == 1.0

    def test_ragged_rows(self):
        with pytest.raises(ShapeMismatchError, match="row 1 has 1 values") as exc_info:
            Matrix([[1, 2], [3]])
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 1

    def test_flat_list_rejected(self):
        with pytest.raises(DimensionError):
            Matrix([1, 2, 3])

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            Matrix([[]])

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            Matrix([[1.0, np.inf]])

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            Matrix([["a", "b"]])


class TestFromRows:

    def test_variadic_rows(self):
        m = Matrix.from_rows([1, 2], [3, 4], [5, 6])
        assert m.shape == (3, 2)
        assert_array_equal(m.to_array_2d(), [[1, 2], [3, 4], [5, 6]])

    def test_single_row(self):
        assert Matrix.from_rows([1, 2, 3]).shape == (1, 3)

    def test_ragged_rows(self):
        with pytest.raises(ShapeMismatchError):
            Matrix.from_rows([1, 2], [3, 4, 5])


class TestFromColumns:

    def test_columns(self):
        m = Matrix.from_columns([Vector([1, 2, 3]), Vector([4, 5, 6])])
        assert m.shape == (3, 2)
        assert_array_equal(m.to_array_2d(), [[1, 4], [2, 5], [3, 6]])

    def test_columns_match_transpose_of_rows(self):
        cols = [Vector([1, 2]), Vector([3, 4]), Vector([5, 6])]
        rows = Matrix([[1, 2], [3, 4], [5, 6]])
        assert Matrix.from_columns(cols) == rows.transpose()

    def test_unequal_lengths(self):
        with pytest.raises(ShapeMismatchError, match="columns\\[1\\]"):
            Matrix.from_columns([Vector([1, 2]), Vector([1, 2, 3])])

    def test_empty(self):
        with pytest.raises(ValidationError, match="at least one Vector"):
            Matrix.from_columns([])

    def test_non_vector(self):
        with pytest.raises(ValidationError, match="expected a Vector"):
            Matrix.from_columns([Vector([1, 2]), [3, 4]])


class TestFromFlat:

    def test_row_major(self):
        m = Matrix.from_flat(2, 3, [1, 2, 3, 4, 5, 6])
        assert m.shape == (2, 3)
        assert_array_equal(m[0], [1, 2, 3])
        assert_array_equal(m[1], [4, 5, 6])

    def test_too_few_values(self):
        with pytest.raises(ShapeMismatchError, match="needs 6 values, got 5"):
            Matrix.from_flat(2, 3, [1, 2, 3, 4, 5])

    def test_too_many_values(self):
        with pytest.raises(ShapeMismatchError):
            Matrix.from_flat(2, 2, [1, 2, 3, 4, 5])

    @pytest.mark.parametrize("height,width", [(0, 2), (2, 0), (-1, 1)])
    def test_non_positive_dimensions(self, height, width):
        with pytest.raises(ValidationError):
            Matrix.from_flat(height, width, [])

    def test_flat_round_trip(self, rng):
        values = rng.standard_normal(12)
        m = Matrix.from_flat(3, 4, values)
        assert_array_equal(m.to_array(), values)


class TestIdentity:

    def test_identity(self):
        assert_array_equal(Matrix.identity(3).to_array_2d(), np.eye(3))

    def test_invalid_size(self):
        with pytest.raises(ValidationError):
            Matrix.identity(0)


# ═══════════════════════════════════════════════════════════════════════
# Access and iteration
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_iteration_is_row_major(self):
        m = Matrix([[1, 2], [3, 4], [5, 6]])
        assert list(m) == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]

    def test_iteration_restartable(self):
        m = Matrix([[1, 2], [3, 4]])
        assert list(m) == list(m)

    def test_len(self):
        assert len(Matrix.from_flat(2, 3, range(6))) == 6

    def test_get_and_getitem(self):
        m = Matrix([[1, 2], [3, 4]])
        assert m.get(1, 0) == 3.0
        assert m[0, 1] == 2.0
        assert isinstance(m[1, 1], float)

    def test_row_is_a_copy(self):
        m = Matrix([[1, 2], [3, 4]])
        row = m[0]
        row[0] = 99.0
        assert m.get(0, 0) == 1.0

    def test_exports_are_copies(self):
        m = Matrix([[1, 2], [3, 4]])
        m.to_array()[0] = 99.0
        m.to_array_2d()[0, 0] = 99.0
        assert m.get(0, 0) == 1.0

    def test_slice_in_tuple_key(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        assert_array_equal(m[0, 0:2], [1.0, 2.0])
        assert_array_equal(m[:, 1], [2.0, 5.0])
        assert_array_equal(m[0:1, 1:], [[2.0, 3.0]])

    def test_slices_are_copies(self):
        m = Matrix([[1, 2], [3, 4]])
        m[:, 0][0] = 99.0
        m[0:1][0, 0] = 99.0
        assert m.get(0, 0) == 1.0

    @pytest.mark.parametrize("duplicate", [copy.copy, copy.deepcopy, Matrix.copy])
    def test_copies_do_not_share_storage(self, duplicate):
        m = Matrix([[1, 2], [3, 4]])
        dup = duplicate(m)
        assert dup == m
        dup._values[0, 0] = 99.0
        assert m.get(0, 0) == 1.0

    def test_copy_keeps_fixed_type(self):
        r = Mat2x2.rotation(0.5)
        dup = copy.copy(r)
        assert type(dup) is Mat2x2
        assert dup == r

    def test_transpose(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        assert_array_equal(m.transpose().to_array_2d(), [[1, 4], [2, 5], [3, 6]])

    def test_repr(self):
        assert repr(Matrix([[1, 2]])) == "Matrix([[1.0, 2.0]])"

    def test_satisfies_protocol(self):
        assert isinstance(Matrix.identity(2), LinearAlgebraOps)


# ═══════════════════════════════════════════════════════════════════════
# Products
# ═══════════════════════════════════════════════════════════════════════


class TestDotProduct:

    def test_known_product(self):
        a = Matrix([[1, 2], [3, 4]])
        b = Matrix([[5, 6], [7, 8]])
        assert_array_equal(Matrix.dot_product(a, b).to_array_2d(), [[19, 22], [43, 50]])

    def test_result_shape(self):
        a = Matrix.from_flat(2, 3, range(6))
        b = Matrix.from_flat(3, 4, range(12))
        assert Matrix.dot_product(a, b).shape == (2, 4)

    def test_identity_is_neutral(self, random_square):
        m = Matrix(random_square(4))
        identity = Matrix.identity(4)
        assert Matrix.dot_product(m, identity) == m
        assert Matrix.dot_product(identity, m) == m

    def test_matches_numpy(self, rng):
        a = rng.standard_normal((3, 5))
        b = rng.standard_normal((5, 2))
        out = Matrix.dot_product(Matrix(a), Matrix(b))
        assert_allclose(out.to_array_2d(), a @ b, rtol=FP64_COMPOSED.rtol)

    def test_incompatible_shapes(self):
        a = Matrix.from_flat(2, 3, range(6))
        b = Matrix.identity(2)
        with pytest.raises(IncompatibleShapesError) as exc_info:
            Matrix.dot_product(a, b)
        assert exc_info.value.left_shape == (2, 3)
        assert exc_info.value.right_shape == (2, 2)

    def test_matrix_vector_returns_vector(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        out = Matrix.dot_product(m, Vector([1, 0, 1]))
        assert type(out) is Vector
        assert_array_equal(out.to_array(), [4.0, 10.0])

    def test_vector_type_kept_when_length_kept(self):
        m = Matrix([[0, -1], [1, 0]])
        out = Matrix.dot_product(m, Vec2.of(1, 0))
        assert type(out) is Vec2
        assert (out.x, out.y) == (0.0, 1.0)

    def test_vector_type_dropped_when_length_changes(self):
        m = Matrix([[1, 0, 0], [0, 1, 0]])
        out = Matrix.dot_product(m, Vec3.of(1, 2, 3))
        assert type(out) is Vector
        assert out.length == 2

    def test_vector_incompatible(self):
        with pytest.raises(IncompatibleShapesError):
            Matrix.dot_product(Matrix.identity(3), Vector([1, 2]))

    def test_invalid_operand(self):
        with pytest.raises(ValidationError, match="expected a Matrix or Vector"):
            Matrix.dot_product(Matrix.identity(2), [[1, 0], [0, 1]])

    def test_matmul_operator(self):
        a = Matrix([[1, 2], [3, 4]])
        assert a @ Matrix.identity(2) == a
        assert_array_equal((a @ Vector([1, 1])).to_array(), [3.0, 7.0])

    def test_operands_unchanged(self):
        a = Matrix([[1, 2], [3, 4]])
        v = Vector([1, 1])
        Matrix.dot_product(a, v)
        assert a == Matrix([[1, 2], [3, 4]])
        assert v == Vector([1, 1])


class TestAllclose:

    def test_close(self):
        a = Matrix([[1.0, 2.0]])
        assert a.allclose(Matrix([[1.0 + 1e-14, 2.0]]))

    def test_shape_mismatch_is_false(self):
        assert not Matrix([[1.0, 2.0]]).allclose(Matrix([[1.0], [2.0]]))
