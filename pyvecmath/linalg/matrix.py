"""
Arbitrary-size numeric matrices.

A Matrix owns a row-major float64 array of shape (height, width), with
height and width >= 1. Four construction protocols are exposed as named
factories, each with its own validated contract:

    Matrix(rows) / Matrix.from_nested(rows)   nested sequence of rows
    Matrix.from_rows(*rows)                   rows as separate arguments
    Matrix.from_columns(vectors)              one Vector per column
    Matrix.from_flat(height, width, values)   row-major flat values

Vectors take part in products as single-column matrices; a product with a
vector operand comes back as a Vector.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvecmath.core.exceptions import (
    DimensionError,
    IncompatibleShapesError,
    ShapeMismatchError,
    ValidationError,
)
from pyvecmath.core.tolerances import DEFAULT_TOLERANCE, ToleranceTier
from pyvecmath.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_element_count,
    check_finite,
    check_not_empty,
    check_size,
)
from pyvecmath.linalg.vector import Vector


def _rows_to_array(rows: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate a nested row sequence and convert it to a 2-D float64 array.

    Raises:
        ShapeMismatchError: If rows have different lengths
        DimensionError: If rows is not a sequence of sequences
        ValidationError: If empty, non-numeric or non-finite
    """
    if not isinstance(rows, np.ndarray):
        try:
            row_lengths = [len(row) for row in rows]
        except TypeError as e:
            raise DimensionError(f"{name}: expected a sequence of row sequences") from e
        for i, length in enumerate(row_lengths):
            if length != row_lengths[0]:
                raise ShapeMismatchError(
                    f"{name}: row {i} has {length} values, row 0 has {row_lengths[0]}",
                    expected=row_lengths[0],
                    actual=length,
                )

    arr = check_array(rows, name)
    check_2d(arr, name)
    check_not_empty(arr, name)
    check_finite(arr, name)
    return arr


def _operand_array(operand: Any, name: str) -> tuple[NDArray[np.floating[Any]], bool]:
    """Return (2-D array, was_vector) for a product operand."""
    if isinstance(operand, Vector):
        return operand._values.reshape(-1, 1), True
    if isinstance(operand, Matrix):
        return operand._values, False
    raise ValidationError(
        f"{name}: expected a Matrix or Vector, got {type(operand).__name__}"
    )


class Matrix:
    """
    2-D grid of real numbers.

    Attributes:
        height: Number of rows
        width: Number of columns

    Example:
        >>> m = Matrix.from_flat(2, 3, [1, 2, 3, 4, 5, 6])
        >>> m.to_array_2d()
        array([[1., 2., 3.],
               [4., 5., 6.]])
        >>> list(m)
        [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    """

    # Fixed-size subclasses pin this; None means any shape
    SIZE: int | None = None

    _values: NDArray[np.floating[Any]]

    def __init__(self, rows: ArrayLike) -> None:
        """
        Create a matrix from a nested sequence of rows.

        Args:
            rows: Sequence of equal-length row sequences (or a 2-D array). Copied.
        """
        arr = _rows_to_array(rows, "rows")
        self._check_shape(arr)
        self._values = arr

    # --- Construction protocols ---

    @classmethod
    def from_nested(cls, rows: ArrayLike) -> Matrix:
        """Rows taken directly from a nested sequence."""
        return cls._build(_rows_to_array(rows, "rows"))

    @classmethod
    def from_rows(cls, *rows: Sequence[float]) -> Matrix:
        """Rows passed as separate arguments: ``Matrix.from_rows([1, 2], [3, 4])``."""
        return cls._build(_rows_to_array(rows, "rows"))

    @classmethod
    def from_columns(cls, columns: Sequence[Vector]) -> Matrix:
        """
        One vector per column.

        width is the number of vectors, height their common length.

        Raises:
            ValidationError: If columns is empty or contains a non-Vector
            ShapeMismatchError: If the vectors differ in length
        """
        columns = list(columns)
        if not columns:
            raise ValidationError("columns: must contain at least one Vector")
        for i, column in enumerate(columns):
            if not isinstance(column, Vector):
                raise ValidationError(
                    f"columns[{i}]: expected a Vector, got {type(column).__name__}"
                )
            if column.length != columns[0].length:
                raise ShapeMismatchError(
                    f"columns[{i}]: has length {column.length}, "
                    f"columns[0] has length {columns[0].length}",
                    expected=columns[0].length,
                    actual=column.length,
                )
        return cls._build(np.column_stack([column._values for column in columns]))

    @classmethod
    def from_flat(cls, height: int, width: int, values: ArrayLike) -> Matrix:
        """
        Height, width and exactly height * width values in row-major order.

        Raises:
            ShapeMismatchError: If len(values) != height * width
        """
        height = check_size(height, "height")
        width = check_size(width, "width")
        arr = check_array(values, "values")
        check_1d(arr, "values")
        check_element_count(arr.shape[0], height, width, "values")
        check_finite(arr, "values")
        return cls._build(arr.reshape(height, width))

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """size x size matrix with ones on the diagonal."""
        size = check_size(size, "size")
        return cls._build(np.eye(size))

    @classmethod
    def _build(cls, arr: NDArray[np.floating[Any]]) -> Matrix:
        cls._check_shape(arr)
        return cls._from_array(arr)

    @classmethod
    def _from_array(cls, arr: NDArray[np.floating[Any]]) -> Matrix:
        # Takes ownership of arr; callers pass freshly computed arrays only.
        obj = cls.__new__(cls)
        obj._values = arr
        return obj

    @classmethod
    def _check_shape(cls, arr: NDArray[np.floating[Any]]) -> None:
        if cls.SIZE is not None and arr.shape != (cls.SIZE, cls.SIZE):
            raise ShapeMismatchError(
                f"{cls.__name__} must be {cls.SIZE} x {cls.SIZE}, "
                f"got {arr.shape[0]} x {arr.shape[1]}",
                expected=(cls.SIZE, cls.SIZE),
                actual=tuple(arr.shape),
            )

    # --- Products ---

    @staticmethod
    def dot_product(a: Matrix | Vector, b: Matrix | Vector) -> Matrix | Vector:
        """
        Matrix product a . b.

        Vectors are treated as single-column matrices. If either operand is
        a vector the first column of the product is returned as a Vector.

        Raises:
            IncompatibleShapesError: If a.width != b.height
            ValidationError: If an operand is neither Matrix nor Vector
        """
        left, a_is_vector = _operand_array(a, "a")
        right, b_is_vector = _operand_array(b, "b")

        if left.shape[1] != right.shape[0]:
            raise IncompatibleShapesError(
                f"dot_product: width of the first operand ({left.shape[1]}) must equal "
                f"height of the second ({right.shape[0]})",
                left_shape=tuple(left.shape),
                right_shape=tuple(right.shape),
            )

        out = left @ right

        if b_is_vector:
            return b._wrap(out[:, 0].copy())
        if a_is_vector:
            return a._wrap(out[:, 0].copy())
        return Matrix._from_array(out)

    # --- Shape and access ---

    @property
    def height(self) -> int:
        """Number of rows."""
        return int(self._values.shape[0])

    @property
    def width(self) -> int:
        """Number of columns."""
        return int(self._values.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.height, self.width)

    def get(self, row: int, col: int) -> float:
        """Value at (row, col)."""
        return float(self._values[row, col])

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Row-major flat copy of all height * width values."""
        return self._values.flatten()

    def to_array_2d(self) -> NDArray[np.floating[Any]]:
        """Copy of the values as a (height, width) array."""
        return self._values.copy()

    def copy(self) -> Matrix:
        """Independent matrix of the same type; never shares storage."""
        return type(self)._from_array(self._values.copy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    def transpose(self) -> Matrix:
        return type(self)._from_array(self._values.T.copy())

    def allclose(self, other: Any, tolerance: ToleranceTier | None = None) -> bool:
        """True if other is a matrix of the same shape within tolerance."""
        if not isinstance(other, Matrix) or other.shape != self.shape:
            return False
        tol = tolerance or DEFAULT_TOLERANCE
        return bool(np.allclose(self._values, other._values, rtol=tol.rtol, atol=tol.atol))

    def __iter__(self) -> Iterator[float]:
        # Row 0 left to right, then row 1, ...
        for row in self._values:
            for value in row:
                yield float(value)

    def __len__(self) -> int:
        return self.height * self.width

    def __getitem__(
        self, key: int | slice | tuple[int | slice, int | slice]
    ) -> float | NDArray[np.floating[Any]]:
        """
        ``m[row, col]`` gives a value, ``m[row]`` a copy of that row.

        Slices select sub-arrays the way numpy does (``m[0, 0:2]``,
        ``m[:, 1]``) and are always returned as copies.
        """
        if isinstance(key, tuple) and not any(isinstance(k, slice) for k in key):
            row, col = key
            return self.get(row, col)
        return self._values[key].copy()

    # --- Operators ---

    def __matmul__(self, other: Any) -> Matrix | Vector:
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return type(self).dot_product(self, other)

    def __rmatmul__(self, other: Any) -> Matrix | Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return type(self).dot_product(other, self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))

    __hash__ = None  # compared by value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values.tolist()})"
