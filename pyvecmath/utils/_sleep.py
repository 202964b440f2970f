"""
Non-blocking delay for async orchestration code.
"""

import asyncio

from pyvecmath.core.exceptions import ValidationError


async def sleep(milliseconds: float) -> None:
    """
    Suspend the calling coroutine for the given number of milliseconds.

    Raises:
        ValidationError: If milliseconds is negative
    """
    if milliseconds < 0:
        raise ValidationError(f"sleep: milliseconds must be >= 0, got {milliseconds}")
    await asyncio.sleep(milliseconds / 1000.0)
