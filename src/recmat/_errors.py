"""
Error handling for recmat.

All contract violations raised by the matrix types derive from MatrixError
and carry a numeric code. The concrete subclasses also derive from the
matching builtin (ValueError, IndexError) so callers can catch either.
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

RECMAT_OK = 0

# General errors (1-9)
RECMAT_ERROR_UNKNOWN = 1

# Argument errors (10-19)
RECMAT_ERROR_INVALID_ARGUMENT = 10
RECMAT_ERROR_DIMENSION_MISMATCH = 11
RECMAT_ERROR_INDEX_OUT_OF_BOUNDS = 14


_ERROR_MESSAGES = {
    RECMAT_OK: "Success",
    RECMAT_ERROR_UNKNOWN: "Unknown error",
    RECMAT_ERROR_INVALID_ARGUMENT: "Invalid argument",
    RECMAT_ERROR_DIMENSION_MISMATCH: "Dimension mismatch",
    RECMAT_ERROR_INDEX_OUT_OF_BOUNDS: "Index out of bounds",
}


# =============================================================================
# Exception Classes
# =============================================================================

class MatrixError(Exception):
    """
    Base exception for all recmat errors.
    """

    OK = RECMAT_OK
    ERROR_UNKNOWN = RECMAT_ERROR_UNKNOWN
    ERROR_INVALID_ARGUMENT = RECMAT_ERROR_INVALID_ARGUMENT
    ERROR_DIMENSION_MISMATCH = RECMAT_ERROR_DIMENSION_MISMATCH
    ERROR_INDEX_OUT_OF_BOUNDS = RECMAT_ERROR_INDEX_OUT_OF_BOUNDS

    def __init__(self, code: int, message: Optional[str] = None):
        """
        Create recmat exception.

        Args:
            code: Error code
            message: Optional detailed message (generic text for the code if not provided)
        """
        self.code = code
        if message is None:
            message = _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")
        self.message = message
        super().__init__(message)

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "MatrixError":
        """Create exception from error code with optional context."""
        base_msg = _ERROR_MESSAGES.get(code, "Unknown error")
        msg = f"{context}: {base_msg}" if context else base_msg
        return cls(code, msg)


class InvalidArgumentError(MatrixError, ValueError):
    """An argument violates the contract of the matrix type."""

    def __init__(self, message: Optional[str] = None,
                 code: int = RECMAT_ERROR_INVALID_ARGUMENT):
        super().__init__(code, message)


class IndexOutOfBoundsError(MatrixError, IndexError):
    """A coordinate lies outside the declared matrix dimensions."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(RECMAT_ERROR_INDEX_OUT_OF_BOUNDS, message)


# =============================================================================
# Checks
# =============================================================================

def check_dimension(value: int, name: str) -> int:
    """
    Validate a matrix dimension.

    Raises:
        TypeError: If value is not an integer
        InvalidArgumentError: If value is negative
    """
    value = check_index(value, name)
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")
    return value


def check_index(value, name: str = "index") -> int:
    """Coerce an integer-like value to int, rejecting floats and bools."""
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got bool")
    try:
        return value.__index__()
    except AttributeError:
        raise TypeError(
            f"{name} must be an integer, got {type(value).__name__}"
        ) from None


def check_square(num_rows: int, num_columns: int, kind: str) -> None:
    """Raise InvalidArgumentError unless the requested shape is square."""
    if num_rows != num_columns:
        raise InvalidArgumentError(
            f"{kind} matrices must be square: got {num_rows} rows and "
            f"{num_columns} columns",
            code=RECMAT_ERROR_DIMENSION_MISMATCH,
        )


__all__ = [
    "RECMAT_OK",
    "RECMAT_ERROR_UNKNOWN",
    "RECMAT_ERROR_INVALID_ARGUMENT",
    "RECMAT_ERROR_DIMENSION_MISMATCH",
    "RECMAT_ERROR_INDEX_OUT_OF_BOUNDS",
    "MatrixError",
    "InvalidArgumentError",
    "IndexOutOfBoundsError",
    "check_dimension",
    "check_index",
    "check_square",
]
