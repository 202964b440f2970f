"""
Core infrastructure for pyvecmath.

This module provides shared abstractions and utilities used by the
linalg and prng subpackages.

Key components:
    protocols: LinearAlgebraOps, RandomSource protocols
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Tolerance tiers for numerical comparison
"""

from pyvecmath.core.protocols import LinearAlgebraOps, RandomSource
from pyvecmath.core.tolerances import ToleranceTier, FP64, FP64_COMPOSED
from pyvecmath.core.exceptions import (
    VecMathError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    IncompatibleShapesError,
    ShapeMismatchError,
    NumericalError,
    DivideByZeroError,
    AlgorithmFallbackWarning,
)

__all__ = [
    # Protocols
    "LinearAlgebraOps",
    "RandomSource",
    # Tolerances
    "ToleranceTier",
    "FP64",
    "FP64_COMPOSED",
    # Exceptions
    "VecMathError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "IncompatibleShapesError",
    "ShapeMismatchError",
    "NumericalError",
    "DivideByZeroError",
    "AlgorithmFallbackWarning",
]
