"""
Seeded pseudorandom number generators.

Usage:
    from pyvecmath.prng import create_rng

    rng = create_rng(seed=42)                    # SFC32
    rng = create_rng(seed=42, algorithm="xoshiro128**")
    x = rng.next()                               # float in [0, 1)
"""

from pyvecmath.prng.generators import (
    Algorithm,
    SeededGenerator,
    SFC32,
    Mulberry32,
    Xoshiro128StarStar,
)
from pyvecmath.prng.factory import (
    DEFAULT_ALGORITHM,
    create_rng,
    random_seed,
    resolve_algorithm,
)

__all__ = [
    "Algorithm",
    "SeededGenerator",
    "SFC32",
    "Mulberry32",
    "Xoshiro128StarStar",
    "DEFAULT_ALGORITHM",
    "create_rng",
    "random_seed",
    "resolve_algorithm",
]
