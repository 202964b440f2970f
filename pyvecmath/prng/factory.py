"""
Generator construction by algorithm name.

create_rng() is permissive about the algorithm: an unrecognised name is
not an error, it selects DEFAULT_ALGORITHM and emits an
AlgorithmFallbackWarning so the substitution is visible.
"""

from __future__ import annotations

import warnings

import numpy as np

from pyvecmath.core.exceptions import AlgorithmFallbackWarning
from pyvecmath.prng._bits import MASK32
from pyvecmath.prng.generators import (
    Algorithm,
    Mulberry32,
    SeededGenerator,
    SFC32,
    Xoshiro128StarStar,
)

DEFAULT_ALGORITHM = Algorithm.SFC32

# Accepted spellings, matched case-insensitively
ALGORITHM_ALIASES: dict[str, Algorithm] = {
    "sfc32": Algorithm.SFC32,
    "mulberry32": Algorithm.MULBERRY32,
    "xoshiro128**": Algorithm.XOSHIRO128SS,
    "xoshiro128ss": Algorithm.XOSHIRO128SS,
    "xoshiro128starstar": Algorithm.XOSHIRO128SS,
}

GENERATORS: dict[Algorithm, type[SeededGenerator]] = {
    Algorithm.SFC32: SFC32,
    Algorithm.MULBERRY32: Mulberry32,
    Algorithm.XOSHIRO128SS: Xoshiro128StarStar,
}


def resolve_algorithm(
    algorithm: str | Algorithm | None,
    stacklevel: int = 2,
) -> Algorithm:
    """
    Map an algorithm name (or enum member) to an Algorithm.

    None selects DEFAULT_ALGORITHM silently. An unknown name selects
    DEFAULT_ALGORITHM with an AlgorithmFallbackWarning.
    """
    if algorithm is None:
        return DEFAULT_ALGORITHM
    if isinstance(algorithm, Algorithm):
        return algorithm

    resolved = ALGORITHM_ALIASES.get(str(algorithm).strip().lower())
    if resolved is None:
        warnings.warn(
            f"Unknown PRNG algorithm {algorithm!r}, using {DEFAULT_ALGORITHM.value!r}. "
            f"Known algorithms: {sorted(ALGORITHM_ALIASES)}",
            AlgorithmFallbackWarning,
            stacklevel=stacklevel,
        )
        return DEFAULT_ALGORITHM
    return resolved


def random_seed() -> int:
    """Fresh uint32 seed from OS entropy."""
    return int(np.random.SeedSequence().entropy) & MASK32


def create_rng(
    seed: int | None = None,
    algorithm: str | Algorithm | None = None,
) -> SeededGenerator:
    """
    Create a seeded generator.

    Args:
        seed: uint32 seed. None draws one from OS entropy; read it back
            from the generator's seed attribute to reproduce the run.
        algorithm: "sfc32" (default), "mulberry32" or "xoshiro128**"
            (aliases "xoshiro128ss", "xoshiro128starstar"), or an
            Algorithm member.

    Returns:
        A generator seeded and ready to draw

    Raises:
        ValidationError: If seed is not an integer in [0, 2**32)

    Example:
        >>> rng = create_rng(42, "mulberry32")
        >>> a = [rng.next() for _ in range(3)]
        >>> rng2 = create_rng(42, "mulberry32")
        >>> a == [rng2.next() for _ in range(3)]
        True
    """
    resolved = resolve_algorithm(algorithm, stacklevel=3)
    if seed is None:
        seed = random_seed()
    return GENERATORS[resolved].from_seed(seed)
