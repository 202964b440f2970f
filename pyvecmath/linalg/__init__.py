"""
Vectors, matrices and fixed-size transform matrices.

Public API:
    Vector, Vec2, Vec3, Vec4   - numeric vectors
    Matrix                     - arbitrary-size matrix
    Mat2x2, Mat3x3, Mat4x4     - fixed-size transform matrices

All types store float64 numpy arrays they own; no two objects share storage.
"""

from pyvecmath.linalg.vector import Vector, Vec2, Vec3, Vec4
from pyvecmath.linalg.matrix import Matrix
from pyvecmath.linalg.transforms import FixedMatrix, Mat2x2, Mat3x3, Mat4x4

__all__ = [
    "Vector",
    "Vec2",
    "Vec3",
    "Vec4",
    "Matrix",
    "FixedMatrix",
    "Mat2x2",
    "Mat3x3",
    "Mat4x4",
]
