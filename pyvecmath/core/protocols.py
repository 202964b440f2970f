"""
Core protocols for pyvecmath.

These define structural interfaces shared by the concrete vector, matrix
and generator types. We use Protocol (structural typing) rather than ABC
(nominal typing) so callers can accept any object with the right shape,
including fixed-size subclasses, without isinstance chains.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Runtime checkable, so tests and callers can assert conformance
"""

from typing import Any, Iterator, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from pyvecmath.core.tolerances import ToleranceTier


@runtime_checkable
class LinearAlgebraOps(Protocol):
    """
    Capability interface shared by Vector, Matrix and the fixed-size matrices.

    A vector reports its shape as (length,), a matrix as (height, width).
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """Dimensions of the operand."""
        ...

    def to_array(self) -> NDArray[np.floating[Any]]:
        """
        Copy of the values as a flat float64 array.

        Matrices flatten row-major. The copy never aliases internal storage.
        """
        ...

    def __iter__(self) -> Iterator[float]:
        ...

    def allclose(self, other: Any, tolerance: ToleranceTier | None = None) -> bool:
        """Elementwise comparison within a tolerance tier."""
        ...


@runtime_checkable
class RandomSource(Protocol):
    """
    Protocol for seeded 32-bit pseudorandom generators.

    Generators are stateful: every draw advances the state. They are not
    thread-safe; each thread must own its own instance.
    """

    @property
    def seed(self) -> int | None:
        """Seed the generator was created from, or None for raw state."""
        ...

    def next_uint32(self) -> int:
        """Advance the state and return the raw 32-bit output."""
        ...

    def next(self) -> float:
        """Advance the state and return a float in [0, 1)."""
        ...
