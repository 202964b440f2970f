"""
Exception hierarchy for pyvecmath.

All exceptions inherit from VecMathError to allow catching any
library-specific error. Shape problems are ValidationErrors because they
are caused by the arguments a caller passed, not by the arithmetic.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class VecMathError(Exception):
    """Base exception for all pyvecmath errors."""
    pass


class ValidationError(VecMathError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or inconsistent.

    Base class for the three shape errors below, so callers can catch
    any shape problem with a single except clause.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Two vectors in an elementwise operation have different lengths.

    Attributes:
        operation: Name of the operation that was attempted
        expected: Length of the receiver
        actual: Length of the other operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        expected: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class IncompatibleShapesError(DimensionError):
    """
    Matrix product operands do not chain (left width != right height).

    Attributes:
        left_shape: (height, width) of the left operand
        right_shape: (height, width) of the right operand
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class ShapeMismatchError(DimensionError):
    """
    Construction input does not describe the requested shape.

    Raised for a flat value list whose length differs from height * width,
    ragged rows, columns of unequal length, or a fixed-size matrix built
    from input of the wrong size.

    Attributes:
        expected: Expected element count or shape
        actual: Element count or shape actually supplied
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NumericalError(VecMathError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DivideByZeroError(NumericalError):
    """
    Operation would divide by zero.

    Raised when normalizing a vector whose magnitude is zero, instead of
    silently producing NaN/Inf components.

    Attributes:
        operation: Name of the operation that was attempted
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class AlgorithmFallbackWarning(RuntimeWarning):
    """Unknown PRNG algorithm name; the default algorithm is used instead."""
    pass
