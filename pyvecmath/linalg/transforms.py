"""
Fixed-size 2x2, 3x3 and 4x4 matrices with graphics transform constructors.

Convention (used by every constructor here):
    - column vectors: a transform M applies to a point p as M @ p
    - A @ B applies B first, then A
    - right-handed coordinates, positive angles rotate counter-clockwise
      when looking down the rotation axis towards the origin
    - homogeneous translation lives in the last column
    - projections follow OpenGL clip space: the camera looks down -z and
      NDC z runs from -1 (near plane) to +1 (far plane)

Same-type products use unrolled closed forms; mixed operands fall back to
the generic Matrix.dot_product.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from pyvecmath.core.exceptions import ShapeMismatchError, ValidationError
from pyvecmath.core.validation import check_array, check_finite, check_scalar, is_real_scalar
from pyvecmath.linalg.matrix import Matrix, _rows_to_array
from pyvecmath.linalg.vector import Vector


class FixedMatrix(Matrix):
    """
    Square matrix whose size is fixed by the subclass.

    Construction accepts either SIZE * SIZE scalars (row-major) or rows:

        Mat2x2(1, 2, 3, 4)
        Mat2x2([1, 2], [3, 4])
        Mat2x2([[1, 2], [3, 4]])
    """

    SIZE: int

    def __init__(self, *values: float | ArrayLike) -> None:
        n = self.SIZE
        if len(values) == n * n and all(is_real_scalar(v) for v in values):
            arr = check_array(values, "values").reshape(n, n)
            check_finite(arr, "values")
        elif len(values) == 1:
            arr = _rows_to_array(values[0], "rows")
        else:
            arr = _rows_to_array(values, "rows")
        self._check_shape(arr)
        self._values = arr

    @classmethod
    def identity(cls, size: int | None = None) -> FixedMatrix:
        """SIZE x SIZE identity; size may be given but must equal SIZE."""
        if size is not None and size != cls.SIZE:
            raise ShapeMismatchError(
                f"{cls.__name__}.identity: size must be {cls.SIZE}, got {size}",
                expected=cls.SIZE,
                actual=size,
            )
        return cls._from_array(np.eye(cls.SIZE))

    @classmethod
    def _of(cls, rows: list[list[float]]) -> FixedMatrix:
        # Closed-form results from factories that already checked their scalars.
        return cls._from_array(np.array(rows, dtype=np.float64))


class Mat2x2(FixedMatrix):
    """2x2 linear transforms of the plane."""

    SIZE = 2

    @classmethod
    def scaling(cls, x: float = 1.0, y: float = 1.0) -> Mat2x2:
        x = check_scalar(x, "x")
        y = check_scalar(y, "y")
        return cls._of([
            [x, 0.0],
            [0.0, y],
        ])

    @classmethod
    def rotation(cls, angle: float) -> Mat2x2:
        """Counter-clockwise rotation by angle radians."""
        angle = check_scalar(angle, "angle")
        c = math.cos(angle)
        s = math.sin(angle)
        return cls._of([
            [c, -s],
            [s, c],
        ])

    @staticmethod
    def dot_product(a: Matrix | Vector, b: Matrix | Vector) -> Matrix | Vector:
        if not (isinstance(a, Mat2x2) and isinstance(b, Mat2x2)):
            return Matrix.dot_product(a, b)

        (a00, a01), (a10, a11) = a._values.tolist()
        (b00, b01), (b10, b11) = b._values.tolist()

        return Mat2x2._of([
            [a00 * b00 + a01 * b10, a00 * b01 + a01 * b11],
            [a10 * b00 + a11 * b10, a10 * b01 + a11 * b11],
        ])


class Mat3x3(FixedMatrix):
    """3x3 homogeneous transforms of the plane."""

    SIZE = 3

    @classmethod
    def scaling(cls, x: float = 1.0, y: float = 1.0) -> Mat3x3:
        x = check_scalar(x, "x")
        y = check_scalar(y, "y")
        return cls._of([
            [x, 0.0, 0.0],
            [0.0, y, 0.0],
            [0.0, 0.0, 1.0],
        ])

    @classmethod
    def rotation(cls, angle: float) -> Mat3x3:
        """Counter-clockwise rotation about the origin by angle radians."""
        angle = check_scalar(angle, "angle")
        c = math.cos(angle)
        s = math.sin(angle)
        return cls._of([
            [c, -s, 0.0],
            [s, c, 0.0],
            [0.0, 0.0, 1.0],
        ])

    @classmethod
    def translation(cls, x: float = 0.0, y: float = 0.0) -> Mat3x3:
        x = check_scalar(x, "x")
        y = check_scalar(y, "y")
        return cls._of([
            [1.0, 0.0, x],
            [0.0, 1.0, y],
            [0.0, 0.0, 1.0],
        ])

    @staticmethod
    def dot_product(a: Matrix | Vector, b: Matrix | Vector) -> Matrix | Vector:
        if not (isinstance(a, Mat3x3) and isinstance(b, Mat3x3)):
            return Matrix.dot_product(a, b)

        (a00, a01, a02), (a10, a11, a12), (a20, a21, a22) = a._values.tolist()
        (b00, b01, b02), (b10, b11, b12), (b20, b21, b22) = b._values.tolist()

        return Mat3x3._of([
            [
                a00 * b00 + a01 * b10 + a02 * b20,
                a00 * b01 + a01 * b11 + a02 * b21,
                a00 * b02 + a01 * b12 + a02 * b22,
            ],
            [
                a10 * b00 + a11 * b10 + a12 * b20,
                a10 * b01 + a11 * b11 + a12 * b21,
                a10 * b02 + a11 * b12 + a12 * b22,
            ],
            [
                a20 * b00 + a21 * b10 + a22 * b20,
                a20 * b01 + a21 * b11 + a22 * b21,
                a20 * b02 + a21 * b12 + a22 * b22,
            ],
        ])


class Mat4x4(FixedMatrix):
    """4x4 homogeneous transforms of 3-D space, including projections."""

    SIZE = 4

    @classmethod
    def scaling(cls, x: float = 1.0, y: float = 1.0, z: float = 1.0) -> Mat4x4:
        x = check_scalar(x, "x")
        y = check_scalar(y, "y")
        z = check_scalar(z, "z")
        return cls._of([
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def rotation_x(cls, angle: float) -> Mat4x4:
        """Rotation about +x: y turns towards z."""
        angle = check_scalar(angle, "angle")
        c = math.cos(angle)
        s = math.sin(angle)
        return cls._of([
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def rotation_y(cls, angle: float) -> Mat4x4:
        """Rotation about +y: z turns towards x."""
        angle = check_scalar(angle, "angle")
        c = math.cos(angle)
        s = math.sin(angle)
        return cls._of([
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def rotation_z(cls, angle: float) -> Mat4x4:
        """Rotation about +z: x turns towards y."""
        angle = check_scalar(angle, "angle")
        c = math.cos(angle)
        s = math.sin(angle)
        return cls._of([
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def rotation(cls, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Mat4x4:
        """
        Combined rotation Rz . Ry . Rx.

        Applied to a point this rotates about x first, then y, then z.
        """
        return Mat4x4.dot_product(
            Mat4x4.dot_product(cls.rotation_z(z), cls.rotation_y(y)),
            cls.rotation_x(x),
        )

    @classmethod
    def translation(cls, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Mat4x4:
        x = check_scalar(x, "x")
        y = check_scalar(y, "y")
        z = check_scalar(z, "z")
        return cls._of([
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def orthographic(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float,
    ) -> Mat4x4:
        """
        Orthographic projection of the box [left, right] x [bottom, top] x [-near, -far]
        onto the [-1, 1] cube (glOrtho).

        Raises:
            ValidationError: If any pair of opposite planes coincides, or an
                argument is not a finite real number
        """
        left = check_scalar(left, "left")
        right = check_scalar(right, "right")
        bottom = check_scalar(bottom, "bottom")
        top = check_scalar(top, "top")
        near = check_scalar(near, "near")
        far = check_scalar(far, "far")
        if right == left or top == bottom or far == near:
            raise ValidationError(
                f"orthographic: degenerate volume left={left}, right={right}, "
                f"bottom={bottom}, top={top}, near={near}, far={far}"
            )
        dx = right - left
        dy = top - bottom
        dz = far - near
        return cls._of([
            [2.0 / dx, 0.0, 0.0, -(right + left) / dx],
            [0.0, 2.0 / dy, 0.0, -(top + bottom) / dy],
            [0.0, 0.0, -2.0 / dz, -(far + near) / dz],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def perspective(cls, fov_y: float, aspect: float, near: float, far: float) -> Mat4x4:
        """
        Perspective projection (gluPerspective).

        Args:
            fov_y: Vertical field of view in radians, in (0, pi)
            aspect: Viewport width / height, > 0
            near: Distance to the near plane, > 0
            far: Distance to the far plane, > 0 and != near

        Raises:
            ValidationError: If any parameter is out of range or not finite
        """
        fov_y = check_scalar(fov_y, "fov_y")
        aspect = check_scalar(aspect, "aspect")
        near = check_scalar(near, "near")
        far = check_scalar(far, "far")
        if not 0.0 < fov_y < math.pi:
            raise ValidationError(f"perspective: fov_y must be in (0, pi), got {fov_y}")
        if aspect <= 0.0:
            raise ValidationError(f"perspective: aspect must be > 0, got {aspect}")
        if near <= 0.0 or far <= 0.0 or near == far:
            raise ValidationError(
                f"perspective: need 0 < near, 0 < far, near != far; got near={near}, far={far}"
            )
        f = 1.0 / math.tan(fov_y / 2.0)
        dz = near - far
        return cls._of([
            [f / aspect, 0.0, 0.0, 0.0],
            [0.0, f, 0.0, 0.0],
            [0.0, 0.0, (far + near) / dz, 2.0 * far * near / dz],
            [0.0, 0.0, -1.0, 0.0],
        ])

    @staticmethod
    def dot_product(a: Matrix | Vector, b: Matrix | Vector) -> Matrix | Vector:
        if not (isinstance(a, Mat4x4) and isinstance(b, Mat4x4)):
            return Matrix.dot_product(a, b)

        (
            (a00, a01, a02, a03),
            (a10, a11, a12, a13),
            (a20, a21, a22, a23),
            (a30, a31, a32, a33),
        ) = a._values.tolist()
        (
            (b00, b01, b02, b03),
            (b10, b11, b12, b13),
            (b20, b21, b22, b23),
            (b30, b31, b32, b33),
        ) = b._values.tolist()

        return Mat4x4._of([
            [
                a00 * b00 + a01 * b10 + a02 * b20 + a03 * b30,
                a00 * b01 + a01 * b11 + a02 * b21 + a03 * b31,
                a00 * b02 + a01 * b12 + a02 * b22 + a03 * b32,
                a00 * b03 + a01 * b13 + a02 * b23 + a03 * b33,
            ],
            [
                a10 * b00 + a11 * b10 + a12 * b20 + a13 * b30,
                a10 * b01 + a11 * b11 + a12 * b21 + a13 * b31,
                a10 * b02 + a11 * b12 + a12 * b22 + a13 * b32,
                a10 * b03 + a11 * b13 + a12 * b23 + a13 * b33,
            ],
            [
                a20 * b00 + a21 * b10 + a22 * b20 + a23 * b30,
                a20 * b01 + a21 * b11 + a22 * b21 + a23 * b31,
                a20 * b02 + a21 * b12 + a22 * b22 + a23 * b32,
                a20 * b03 + a21 * b13 + a22 * b23 + a23 * b33,
            ],
            [
                a30 * b00 + a31 * b10 + a32 * b20 + a33 * b30,
                a30 * b01 + a31 * b11 + a32 * b21 + a33 * b31,
                a30 * b02 + a31 * b12 + a32 * b22 + a33 * b32,
                a30 * b03 + a31 * b13 + a32 * b23 + a33 * b33,
            ],
        ])
