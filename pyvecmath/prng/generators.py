"""
Seeded 32-bit pseudorandom generators.

Three small-state algorithms with bit-exact round functions:

    SFC32               4 words, Chris Doty-Humphrey's Small Fast Counter
    Mulberry32          1 word, Tommy Ettinger's multiplicative mixer
    Xoshiro128StarStar  4 words, Blackman & Vigna's xoshiro128**

Every generator returns next_uint32() / 2**32 from next(), so draws lie in
[0, 1). Output is a pure function of the state words, so two generators
created from the same seed produce identical sequences.

Generators are not thread-safe. Give each thread its own instance.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Iterator

import numpy as np
from numpy.typing import NDArray

from pyvecmath.core.exceptions import ValidationError
from pyvecmath.core.validation import check_size, check_uint32
from pyvecmath.prng._bits import MASK32, TWO_POW_32, imul32, rotl32, splitmix32


class Algorithm(Enum):
    """Available generator algorithms; values are the canonical names."""
    SFC32 = "sfc32"
    MULBERRY32 = "mulberry32"
    XOSHIRO128SS = "xoshiro128**"


class SeededGenerator(ABC):
    """
    Base class for the 32-bit generators.

    Create from raw state words with the class constructor, or from a
    single uint32 seed with from_seed().

    Attributes:
        algorithm: Which Algorithm this class implements
        seed: Seed passed to from_seed(), None when built from raw state
        state: Current state words as a tuple
    """

    algorithm: ClassVar[Algorithm]
    N_WORDS: ClassVar[int]

    def __init__(self, *state: int) -> None:
        if len(state) != self.N_WORDS:
            raise ValidationError(
                f"{type(self).__name__}: needs {self.N_WORDS} state words, got {len(state)}"
            )
        self._state = [check_uint32(word, f"state[{i}]") for i, word in enumerate(state)]
        self._seed: int | None = None

    @classmethod
    def from_seed(cls, seed: int) -> SeededGenerator:
        """
        Create a generator from a single uint32 seed.

        Raises:
            ValidationError: If seed is not an integer in [0, 2**32)
        """
        seed = check_uint32(seed, "seed")
        generator = cls(*cls._seed_state(seed))
        generator._seed = seed
        generator._warm_up()
        return generator

    @classmethod
    @abstractmethod
    def _seed_state(cls, seed: int) -> tuple[int, ...]:
        """Expand a seed into the initial state words."""

    def _warm_up(self) -> None:
        """Discard initial outputs after seeding; no-op unless overridden."""

    @abstractmethod
    def next_uint32(self) -> int:
        """Advance the state and return the raw 32-bit output."""

    def next(self) -> float:
        """Advance the state and return a float in [0, 1)."""
        return self.next_uint32() / TWO_POW_32

    def take(self, n: int) -> NDArray[np.floating[Any]]:
        """Draw n floats into a float64 array."""
        n = check_size(n, "n")
        return np.array([self.next() for _ in range(n)], dtype=np.float64)

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def state(self) -> tuple[int, ...]:
        return tuple(self._state)

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        return self.next()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self._seed}, state={self.state})"


class SFC32(SeededGenerator):
    """
    Small Fast Counter, 32-bit variant.

    State (a, b, c, d); d is a counter incremented every draw, so the
    period is at least 2**32.
    """

    algorithm = Algorithm.SFC32
    N_WORDS = 4

    # Warm-up draws after seeding to decorrelate the seed from the output
    WARM_UP = 15

    @classmethod
    def _seed_state(cls, seed: int) -> tuple[int, ...]:
        return (0x9E3779B9, 0x243F6A88, 0xB7E15162, seed ^ 0xDEADBEEF)

    def _warm_up(self) -> None:
        for _ in range(self.WARM_UP):
            self.next_uint32()

    def next_uint32(self) -> int:
        a, b, c, d = self._state
        t = (a + b) & MASK32
        a = b ^ (b >> 9)
        b = (c + (c << 3)) & MASK32
        c = rotl32(c, 21)
        d = (d + 1) & MASK32
        t = (t + d) & MASK32
        c = (c + t) & MASK32
        self._state = [a, b, c, d]
        return t


class Mulberry32(SeededGenerator):
    """
    Mulberry32: one state word advanced by a Weyl increment, then mixed.

    Period is exactly 2**32.
    """

    algorithm = Algorithm.MULBERRY32
    N_WORDS = 1

    INCREMENT = 0x6D2B79F5

    @classmethod
    def _seed_state(cls, seed: int) -> tuple[int, ...]:
        return (seed,)

    def next_uint32(self) -> int:
        a = (self._state[0] + self.INCREMENT) & MASK32
        self._state[0] = a
        t = imul32(a ^ (a >> 15), a | 1)
        t = ((t + imul32(t ^ (t >> 7), t | 61)) & MASK32) ^ t
        return t ^ (t >> 14)


class Xoshiro128StarStar(SeededGenerator):
    """
    xoshiro128**: xor/shift/rotate linear engine with a ** scrambler.

    The scrambler reads the first state word before the update:
    rotl(a * 5, 7) * 9. The all-zero state is a fixed point and is
    rejected. Seeds are expanded with splitmix32.
    """

    algorithm = Algorithm.XOSHIRO128SS
    N_WORDS = 4

    def __init__(self, *state: int) -> None:
        super().__init__(*state)
        if not any(self._state):
            raise ValidationError(f"{type(self).__name__}: state must not be all zero")

    @classmethod
    def _seed_state(cls, seed: int) -> tuple[int, ...]:
        words = []
        for _ in range(cls.N_WORDS):
            seed, word = splitmix32(seed)
            words.append(word)
        return tuple(words)

    def next_uint32(self) -> int:
        a, b, c, d = self._state
        result = imul32(rotl32(imul32(a, 5), 7), 9)
        t = (b << 9) & MASK32
        c ^= a
        d ^= b
        b ^= c
        a ^= d
        c ^= t
        d = rotl32(d, 11)
        self._state = [a, b, c, d]
        return result
