"""
Lazy numeric range over floats, like range() but with fractional steps.
"""

from __future__ import annotations

from typing import Iterator

from pyvecmath.core.exceptions import ValidationError
from pyvecmath.core.validation import is_real_scalar


def frange(
    start: float | None = None,
    end: float | None = None,
    step: float | None = None,
) -> Iterator[float]:
    """
    Yield start, start + step, ... while the value is below end.

    Argument handling mirrors range():
        frange()          -> 0, 1, ..., 9
        frange(5)         -> 0, 1, 2, 3, 4
        frange(2, 5, 0.5) -> 2, 2.5, 3, 3.5, 4, 4.5

    Values are computed as start + k * step rather than by repeated
    addition, so long ranges do not drift.

    Raises:
        ValidationError: If step is not positive or an argument is not a number
    """
    if start is None and end is None:
        start, end = 0, 10
    elif end is None:
        start, end = 0, start
    elif start is None:
        start = 0
    if step is None:
        step = 1

    for name, value in (("start", start), ("end", end), ("step", step)):
        if not is_real_scalar(value):
            raise ValidationError(f"frange: {name} must be a real number, got {type(value).__name__}")
    if step <= 0:
        raise ValidationError(f"frange: step must be > 0, got {step}")

    k = 0
    value = start
    while value < end:
        yield value
        k += 1
        value = start + k * step
