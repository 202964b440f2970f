"""
Tolerance tiers for numerical comparison.

Defines precision expectations for the two kinds of results the library
produces:
- FP64: a single product or constructor, matches closed form to ~1 ulp
- FP64_COMPOSED: chains of products (rotation . rotation . rotation,
  projection . view . model) where rounding error accumulates

Used by allclose() on vectors and matrices and by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Single operation on well-scaled inputs
FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-12,
    name='fp64',
    description='double precision, single operation',
)

# Composed transforms: a few dozen roundings deep
FP64_COMPOSED = ToleranceTier(
    rtol=1e-9,
    atol=1e-10,
    name='fp64_composed',
    description='double precision, chained products',
)

DEFAULT_TOLERANCE = FP64


def select_tolerance(composed: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for a computation."""
    if composed:
        return FP64_COMPOSED
    return FP64
