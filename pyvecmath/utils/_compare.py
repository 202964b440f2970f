"""
Element-membership comparison of two sequences.

strict_compare: same elements with the same multiplicities (and the same
order when ordered=True). Unhashable elements are matched by equality.
compare: every element of either sequence appears in the other at least
once; multiplicities are ignored.

A target that is not a list or tuple is reported with a warning and
compares unequal.
"""

from __future__ import annotations

import warnings
from collections import Counter
from typing import Any, Sequence


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def strict_compare(values: Sequence[Any], target: Any, ordered: bool = False) -> bool:
    """
    Example:
        >>> strict_compare([1, 2, 3], [1, 3, 2], ordered=True)
        False
        >>> strict_compare([1, 2, 3], [1, 3, 2])
        True
    """
    if not _is_sequence(target):
        warnings.warn(
            f"strict_compare: target is of type {type(target).__name__!r} instead of a sequence",
            RuntimeWarning,
            stacklevel=2,
        )
        return False
    if len(values) != len(target):
        return False

    if ordered:
        return all(a == b for a, b in zip(values, target))
    try:
        return Counter(values) == Counter(target)
    except TypeError:
        # unhashable elements (lists, dicts, arrays): match by equality
        return _same_multiset(values, target)


def _same_multiset(values: Sequence[Any], target: Sequence[Any]) -> bool:
    remaining = list(target)
    for value in values:
        for i, candidate in enumerate(remaining):
            if candidate == value:
                del remaining[i]
                break
        else:
            return False
    return not remaining


def compare(values: Sequence[Any], target: Any) -> bool:
    """
    Example:
        >>> compare([1, 2, 3], [1, 1, 2, 3, 2])
        True
        >>> compare([1, 2], [1, 2, 3])
        False
    """
    if not _is_sequence(target):
        warnings.warn(
            f"compare: target is of type {type(target).__name__!r} instead of a sequence",
            RuntimeWarning,
            stacklevel=2,
        )
        return False

    return all(v in target for v in values) and all(t in values for t in target)
