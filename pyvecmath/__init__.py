"""
pyvecmath: vectors, matrices, graphics transforms and seeded PRNGs.

Numerically exact, deterministic building blocks for small-scale
geometry and reproducible simulations.

Submodules:
    linalg: Vector, Matrix and fixed-size transform matrices
    prng: Seeded 32-bit generators (sfc32, mulberry32, xoshiro128**)
    utils: Range, sleep and comparison helpers
    core: Exceptions, validation, tolerances, protocols
"""

__version__ = "0.1.0"

from pyvecmath import linalg
from pyvecmath import prng
from pyvecmath.linalg import (
    Vector,
    Vec2,
    Vec3,
    Vec4,
    Matrix,
    Mat2x2,
    Mat3x3,
    Mat4x4,
)
from pyvecmath.prng import create_rng

__all__ = [
    "__version__",
    "linalg",
    "prng",
    "Vector",
    "Vec2",
    "Vec3",
    "Vec4",
    "Matrix",
    "Mat2x2",
    "Mat3x3",
    "Mat4x4",
    "create_rng",
]
