"""
Arbitrary-length numeric vectors.

Vector stores its values as an owned float64 array whose length is fixed
at construction. Elementwise operations come in two flavours selected by
the in_place flag:

    in_place=True   mutate the receiver and return it (for chaining)
    in_place=False  return a new vector, receiver unchanged

Defaults differ per method: multiply/add/subtract default to out-of-place,
scale/normalize default to in-place.
"""

from __future__ import annotations

import operator
from typing import Any, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvecmath.core.exceptions import (
    DimensionMismatchError,
    DivideByZeroError,
    ValidationError,
)
from pyvecmath.core.tolerances import DEFAULT_TOLERANCE, ToleranceTier
from pyvecmath.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_not_empty,
    check_same_length,
    is_real_scalar,
)

if TYPE_CHECKING:
    from pyvecmath.linalg.matrix import Matrix


class Vector:
    """
    Fixed-length ordered sequence of real numbers.

    Attributes:
        length: Number of components (never changes)

    Example:
        >>> v = Vector([3.0, 4.0])
        >>> v.magnitude
        5.0
        >>> v.add(Vector.of(1, 1)).to_array()
        array([4., 5.])
    """

    # Fixed-size subclasses pin this; None means any length >= 1
    LENGTH: int | None = None

    _values: NDArray[np.floating[Any]]

    def __init__(self, values: ArrayLike) -> None:
        """
        Create a vector from a sequence of numbers.

        Args:
            values: 1-D array-like of finite real numbers. Copied.

        Raises:
            ValidationError: If values are empty, non-numeric or non-finite
            DimensionError: If values are not 1-dimensional
            DimensionMismatchError: If a fixed-size subclass gets the wrong length
        """
        arr = check_array(values, "values")
        check_1d(arr, "values")
        check_not_empty(arr, "values")
        check_finite(arr, "values")
        if self.LENGTH is not None and arr.shape[0] != self.LENGTH:
            raise DimensionMismatchError(
                f"{type(self).__name__} needs {self.LENGTH} values, got {arr.shape[0]}",
                operation="construct",
                expected=self.LENGTH,
                actual=int(arr.shape[0]),
            )
        self._values = arr

    @classmethod
    def of(cls, *values: float) -> Vector:
        """Create a vector from variadic scalars: ``Vector.of(1, 2, 3)``."""
        return cls(values)

    @classmethod
    def _from_array(cls, arr: NDArray[np.floating[Any]]) -> Vector:
        # Takes ownership of arr; callers pass freshly computed arrays only.
        obj = cls.__new__(cls)
        obj._values = arr
        return obj

    def _wrap(self, arr: NDArray[np.floating[Any]]) -> Vector:
        """Keep the receiver's type when the length is unchanged."""
        if arr.shape[0] == self.length:
            return type(self)._from_array(arr)
        return Vector._from_array(arr)

    # --- Shape and access ---

    @property
    def length(self) -> int:
        """Number of components."""
        return int(self._values.shape[0])

    @property
    def shape(self) -> tuple[int]:
        return (self.length,)

    @property
    def magnitude(self) -> float:
        """Euclidean norm, sqrt of the sum of squares."""
        return float(np.sqrt(np.dot(self._values, self._values)))

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Copy of the components as a 1-D float64 array."""
        return self._values.copy()

    def copy(self) -> Vector:
        """Independent vector of the same type; never shares storage."""
        return type(self)._from_array(self._values.copy())

    def __copy__(self) -> Vector:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Vector:
        return self.copy()

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[float]:
        return iter(self._values.tolist())

    def __getitem__(self, index: int) -> float:
        return float(self._values[operator.index(index)])

    # --- Elementwise operations ---

    def multiply(self, other: Vector | Matrix | float, in_place: bool = False) -> Vector:
        """
        Multiply this vector by a vector, matrix or scalar.

        Args:
            other: Vector -> Hadamard (elementwise) product.
                   Matrix -> matrix . vector dot product.
                   Scalar -> delegates to scale().
            in_place: If True, write the result into this vector and return it.

        Returns:
            The product vector (self when in_place)

        Raises:
            DimensionMismatchError: If vector lengths differ, or an in-place
                matrix product would change this vector's length
            IncompatibleShapesError: If the matrix width != this vector's length
            ValidationError: If other is of an unsupported type
        """
        from pyvecmath.linalg.matrix import Matrix

        if isinstance(other, Vector):
            check_same_length(self.length, other.length, "multiply")
            if in_place:
                self._values *= other._values
                return self
            return self._wrap(self._values * other._values)

        if isinstance(other, Matrix):
            out = type(other).dot_product(other, self)
            if in_place:
                check_same_length(self.length, out.length, "multiply")
                self._values[:] = out._values
                return self
            return self._wrap(out._values)

        if is_real_scalar(other):
            return self.scale(other, in_place)

        raise ValidationError(
            f"multiply: unsupported operand type {type(other).__name__}"
        )

    def add(self, other: Vector, in_place: bool = False) -> Vector:
        """Elementwise sum. Lengths must match."""
        self._check_vector(other, "add")
        if in_place:
            self._values += other._values
            return self
        return self._wrap(self._values + other._values)

    def subtract(self, other: Vector, in_place: bool = False) -> Vector:
        """Elementwise difference (self - other). Lengths must match."""
        self._check_vector(other, "subtract")
        if in_place:
            self._values -= other._values
            return self
        return self._wrap(self._values - other._values)

    def dot_product(self, other: Vector) -> float:
        """Scalar (dot) product. Lengths must match."""
        self._check_vector(other, "dot_product")
        return float(np.dot(self._values, other._values))

    def scale(self, factor: float, in_place: bool = True) -> Vector:
        """Multiply every component by factor."""
        if not is_real_scalar(factor):
            raise ValidationError(
                f"scale: factor must be a real number, got {type(factor).__name__}"
            )
        if in_place:
            self._values *= factor
            return self
        return self._wrap(self._values * factor)

    def normalize(self, in_place: bool = True) -> Vector:
        """
        Scale to unit magnitude.

        Raises:
            DivideByZeroError: If the vector has zero magnitude
        """
        magnitude = self.magnitude
        if magnitude == 0.0:
            raise DivideByZeroError(
                f"normalize: {self!r} has zero magnitude",
                operation="normalize",
            )
        return self.scale(1.0 / magnitude, in_place)

    def allclose(self, other: Any, tolerance: ToleranceTier | None = None) -> bool:
        """True if other is a vector of the same length within tolerance."""
        if not isinstance(other, Vector) or other.length != self.length:
            return False
        tol = tolerance or DEFAULT_TOLERANCE
        return bool(np.allclose(self._values, other._values, rtol=tol.rtol, atol=tol.atol))

    def _check_vector(self, other: Any, operation: str) -> None:
        if not isinstance(other, Vector):
            raise ValidationError(
                f"{operation}: expected a Vector, got {type(other).__name__}"
            )
        check_same_length(self.length, other.length, operation)

    # --- Operators ---

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> Vector:
        if isinstance(other, Vector) or is_real_scalar(other):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Vector:
        if is_real_scalar(other):
            return self.scale(other, in_place=False)
        return NotImplemented

    def __matmul__(self, other: Any) -> float:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot_product(other)

    def __neg__(self) -> Vector:
        return self.scale(-1.0, in_place=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values.tolist()})"


class Vec2(Vector):
    """Two-component vector."""

    LENGTH = 2

    @property
    def x(self) -> float:
        return float(self._values[0])

    @property
    def y(self) -> float:
        return float(self._values[1])


class Vec3(Vector):
    """Three-component vector."""

    LENGTH = 3

    @property
    def x(self) -> float:
        return float(self._values[0])

    @property
    def y(self) -> float:
        return float(self._values[1])

    @property
    def z(self) -> float:
        return float(self._values[2])


class Vec4(Vector):
    """Four-component vector, typically a homogeneous 3-D point (w=1) or direction (w=0)."""

    LENGTH = 4

    @property
    def x(self) -> float:
        return float(self._values[0])

    @property
    def y(self) -> float:
        return float(self._values[1])

    @property
    def z(self) -> float:
        return float(self._values[2])

    @property
    def w(self) -> float:
        return float(self._values[3])
