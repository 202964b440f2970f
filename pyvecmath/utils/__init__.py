"""
Small helpers used alongside the numeric core.

Public API:
    frange(start, end, step)        - lazy float range
    sleep(milliseconds)             - async non-blocking delay
    strict_compare(a, b, ordered)   - multiset / sequence equality
    compare(a, b)                   - mutual membership
"""

from pyvecmath.utils._range import frange
from pyvecmath.utils._sleep import sleep
from pyvecmath.utils._compare import strict_compare, compare

__all__ = [
    "frange",
    "sleep",
    "strict_compare",
    "compare",
]
