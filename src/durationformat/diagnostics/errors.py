"""Duration format exception hierarchy with structured diagnostics.

Mirrors the two error kinds of ECMA-402 constructors: RangeError for
disallowed or incompatible option values, TypeError for invocation errors.
Each concrete class also derives from the matching Python builtin so callers
can catch ``ValueError`` / ``TypeError`` without importing this module.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "DurationFormatError",
    "DurationFormatRangeError",
    "DurationFormatTypeError",
]


class DurationFormatError(Exception):
    """Base exception for all duration format errors.

    Raised directly only for internal errors (unreachable resolver states).

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        category: Error category for log aggregation
    """

    category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DurationFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class DurationFormatRangeError(DurationFormatError, ValueError):
    """Disallowed option value or cross-unit incompatibility.

    Examples:
    - style: "tiny"
    - fractionalDigits: 12
    - hours: "numeric" followed by minutes: "long"
    - millisecondsDisplay: "always" with a fractional milliseconds style

    Construction is aborted; no partially resolved object is returned.
    """

    category = ErrorCategory.RANGE


class DurationFormatTypeError(DurationFormatError, TypeError):
    """Invocation error.

    Examples:
    - DurationFormat(...) called directly instead of DurationFormat.create()
    - options argument that is not a mapping
    - locales argument that is neither a string nor an iterable of strings
    """

    category = ErrorCategory.TYPE
