"""
Input validation utilities for pyvecmath.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent (no padding of short vectors,
no truncation of long value lists).

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from numbers import Integral, Real
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvecmath.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    ShapeMismatchError,
    ValidationError,
)

UINT32_MAX = 0xFFFFFFFF


def is_real_scalar(value: Any) -> bool:
    """True for int/float/numpy real scalars, False for bool and everything else."""
    return isinstance(value, Real) and not isinstance(value, bool)


def check_scalar(value: Any, name: str) -> float:
    """
    Verify value is a finite real number.

    Returns:
        The value as a plain float

    Raises:
        ValidationError: If value is not a real number, or is NaN/Inf
    """
    if not is_real_scalar(value):
        raise ValidationError(f"{name}: expected a real number, got {type(value).__name__}")
    if not np.isfinite(value):
        raise ValidationError(f"{name}: must be finite, got {value}")
    return float(value)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    The result never shares memory with the input.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, booleans, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        ValidationError: If array has size 0
    """
    if array.size == 0:
        raise ValidationError(f"{name}: must contain at least one value, got shape {array.shape}")


def check_same_length(expected: int, actual: int, operation: str) -> None:
    """
    Verify two vector operands have the same length.

    Args:
        expected: Length of the receiver
        actual: Length of the other operand
        operation: Operation name for error messages

    Raises:
        DimensionMismatchError: If the lengths differ
    """
    if expected != actual:
        raise DimensionMismatchError(
            f"{operation}: vectors must have equal length, got {expected} and {actual}",
            operation=operation,
            expected=expected,
            actual=actual,
        )


def check_element_count(count: int, height: int, width: int, name: str) -> None:
    """
    Verify a flat value list fills a height x width matrix exactly.

    Raises:
        ShapeMismatchError: If count != height * width
    """
    if count != height * width:
        raise ShapeMismatchError(
            f"{name}: a {height} x {width} matrix needs {height * width} values, got {count}",
            expected=height * width,
            actual=count,
        )


def check_size(value: Any, name: str) -> int:
    """
    Verify value is a positive integer usable as a matrix dimension.

    Returns:
        The value as a plain int

    Raises:
        ValidationError: If value is not an integer >= 1
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValidationError(f"{name}: expected an integer, got {type(value).__name__}")
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
    return int(value)


def check_uint32(value: Any, name: str) -> int:
    """
    Verify value is an unsigned 32-bit integer.

    Returns:
        The value as a plain int

    Raises:
        ValidationError: If value is not an integer in [0, 2**32)
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValidationError(f"{name}: expected an integer, got {type(value).__name__}")
    if not 0 <= value <= UINT32_MAX:
        raise ValidationError(f"{name}: must be in [0, 2**32), got {value}")
    return int(value)
