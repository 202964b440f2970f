"""
Unsigned 32-bit arithmetic helpers.

Python integers never overflow, so every operation that can leave the
uint32 range is masked explicitly.
"""

MASK32 = 0xFFFFFFFF
TWO_POW_32 = 4294967296.0


def rotl32(x: int, k: int) -> int:
    """Rotate a uint32 left by k bits (0 < k < 32)."""
    return ((x << k) | (x >> (32 - k))) & MASK32


def imul32(a: int, b: int) -> int:
    """Low 32 bits of a * b."""
    return (a * b) & MASK32


def splitmix32(state: int) -> tuple[int, int]:
    """
    One splitmix32 step.

    Returns:
        (next_state, output), both uint32
    """
    state = (state + 0x9E3779B9) & MASK32
    t = state ^ (state >> 16)
    t = imul32(t, 0x21F0AAAD)
    t ^= t >> 15
    t = imul32(t, 0x735A2D97)
    t ^= t >> 15
    return state, t
