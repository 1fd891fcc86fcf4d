"""Diagnostic codes and data structures.

Defines error codes, error categories, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for DurationFormatError.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``; log aggregation receives
    plain strings (``"range"``, ``"type"``) rather than the
    ``"ErrorCategory.X"`` repr that a plain ``Enum`` would produce.

    Categories:
        RANGE: Disallowed option value or incompatible unit options
        TYPE: Invocation or argument type error
        INTERNAL: Unreachable resolver state
    """

    RANGE = "range"
    TYPE = "type"
    INTERNAL = "internal"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Option errors (generic options reader)
        2000-2999: Unit consistency errors (unit options resolver)
        3000-3999: Locale errors (tags, locale lists, numbering systems)
        4000-4999: Construction and internal errors
    """

    # Option errors (1000-1999)
    OPTIONS_NOT_MAPPING = 1001
    OPTION_VALUE_INVALID = 1002
    OPTION_NOT_NUMBER = 1003
    OPTION_OUT_OF_RANGE = 1004

    # Unit consistency errors (2000-2999)
    UNIT_STYLE_INVALID = 2001
    FRACTIONAL_DISPLAY_ALWAYS = 2002
    FRACTIONAL_CHAIN_BROKEN = 2003
    NUMERIC_CHAIN_BROKEN = 2004

    # Locale errors (3000-3999)
    LOCALE_TAG_INVALID = 3001
    LOCALE_LIST_INVALID = 3002
    NUMBERING_SYSTEM_INVALID = 3003

    # Construction and internal errors (4000-4999)
    DIRECT_CONSTRUCTION = 4001
    GLOBAL_STYLE_UNMAPPED = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        option_name: Option key that caused the error (option errors)
        received_value: repr() of the offending value (option errors)
        expected_values: Allowed values or range, rendered for display
        unit: Duration unit being resolved (unit consistency errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    option_name: str | None = None
    received_value: str | None = None
    expected_values: str | None = None
    unit: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[OPTION_VALUE_INVALID]: Value 'tiny' is not allowed for option 'style'
              = option: style
              = expected: long, short, narrow, digital
              = received: 'tiny'
              = help: Use one of the allowed values

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
