"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


def _join(values: Iterable[str]) -> str:
    return ", ".join(values)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL
    _DOCS_BASE = "https://tc39.es/ecma402"

    # -- Option errors -------------------------------------------------------

    @staticmethod
    def options_not_mapping(received_type: str) -> Diagnostic:
        """Options argument is neither None nor a mapping.

        Args:
            received_type: Type name of the value passed as options

        Returns:
            Diagnostic for OPTIONS_NOT_MAPPING
        """
        msg = f"Options must be a mapping or None, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.OPTIONS_NOT_MAPPING,
            message=msg,
            hint="Pass options as a dict, e.g. {'style': 'long'}",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-getoptionsobject",
            received_value=received_type,
        )

    @staticmethod
    def option_value_invalid(
        option_name: str, value: str, allowed: Iterable[str]
    ) -> Diagnostic:
        """String option outside its allowed values.

        Args:
            option_name: Option key (camelCase)
            value: The coerced string value
            allowed: Allowed values in declaration order

        Returns:
            Diagnostic for OPTION_VALUE_INVALID
        """
        msg = f"Value '{value}' is not allowed for option '{option_name}'"
        return Diagnostic(
            code=DiagnosticCode.OPTION_VALUE_INVALID,
            message=msg,
            hint="Use one of the allowed values",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-getoption",
            option_name=option_name,
            received_value=repr(value),
            expected_values=_join(allowed),
        )

    @staticmethod
    def option_not_number(option_name: str, value: object) -> Diagnostic:
        """Number option whose value does not convert to a number.

        Args:
            option_name: Option key (camelCase)
            value: The raw value

        Returns:
            Diagnostic for OPTION_NOT_NUMBER
        """
        msg = f"Option '{option_name}' must be a number, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.OPTION_NOT_NUMBER,
            message=msg,
            hint="Pass an integer",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-getnumberoption",
            option_name=option_name,
            received_value=repr(value),
        )

    @staticmethod
    def option_out_of_range(
        option_name: str, value: object, minimum: int, maximum: int
    ) -> Diagnostic:
        """Number option outside [minimum, maximum] or NaN.

        Args:
            option_name: Option key (camelCase)
            value: The raw value
            minimum: Inclusive lower bound
            maximum: Inclusive upper bound

        Returns:
            Diagnostic for OPTION_OUT_OF_RANGE
        """
        msg = f"Option '{option_name}' value {value!r} is out of range"
        return Diagnostic(
            code=DiagnosticCode.OPTION_OUT_OF_RANGE,
            message=msg,
            hint=f"Use an integer between {minimum} and {maximum}",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-defaultnumberoption",
            option_name=option_name,
            received_value=repr(value),
            expected_values=f"{minimum}..{maximum}",
        )

    # -- Unit consistency errors ---------------------------------------------

    @staticmethod
    def unit_style_invalid(unit: str, value: str, allowed: Iterable[str]) -> Diagnostic:
        """Explicit unit style outside the unit's allowed style set.

        Args:
            unit: Unit name (also the option key)
            value: The coerced string value
            allowed: Styles the unit accepts

        Returns:
            Diagnostic for UNIT_STYLE_INVALID
        """
        msg = f"Invalid style value '{value}' for unit '{unit}'"
        return Diagnostic(
            code=DiagnosticCode.UNIT_STYLE_INVALID,
            message=msg,
            hint=f"Unit '{unit}' accepts: {_join(allowed)}",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-getdurationunitoptions",
            option_name=unit,
            received_value=repr(value),
            expected_values=_join(allowed),
            unit=unit,
        )

    @staticmethod
    def fractional_display_always(unit: str) -> Diagnostic:
        """Display 'always' requested for a unit rendered as a fraction.

        Args:
            unit: Unit name

        Returns:
            Diagnostic for FRACTIONAL_DISPLAY_ALWAYS
        """
        msg = f"Unit '{unit}' cannot combine display 'always' with style 'fractional'"
        return Diagnostic(
            code=DiagnosticCode.FRACTIONAL_DISPLAY_ALWAYS,
            message=msg,
            hint=f"Set '{unit}Display' to 'auto' or choose a non-fractional style",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-getdurationunitoptions",
            option_name=f"{unit}Display",
            unit=unit,
        )

    @staticmethod
    def fractional_chain_broken(unit: str, style: str) -> Diagnostic:
        """Unit after a fractional unit is not fractional itself.

        Args:
            unit: Unit name
            style: The resolved style of the unit

        Returns:
            Diagnostic for FRACTIONAL_CHAIN_BROKEN
        """
        msg = f"Unit '{unit}' cannot use style '{style}' after a fractional unit"
        return Diagnostic(
            code=DiagnosticCode.FRACTIONAL_CHAIN_BROKEN,
            message=msg,
            hint="Units following a fractional unit must also be fractional",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-getdurationunitoptions",
            option_name=unit,
            received_value=repr(style),
            expected_values="fractional",
            unit=unit,
        )

    @staticmethod
    def numeric_chain_broken(unit: str, style: str, prev_style: str) -> Diagnostic:
        """Unit after a numeric or 2-digit unit uses a word style.

        Args:
            unit: Unit name
            style: The resolved style of the unit
            prev_style: The style carried from the previous digital-chain unit

        Returns:
            Diagnostic for NUMERIC_CHAIN_BROKEN
        """
        msg = f"Unit '{unit}' cannot use style '{style}' after a '{prev_style}' unit"
        return Diagnostic(
            code=DiagnosticCode.NUMERIC_CHAIN_BROKEN,
            message=msg,
            hint="Units following a numeric unit must be numeric, 2-digit or fractional",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-getdurationunitoptions",
            option_name=unit,
            received_value=repr(style),
            expected_values="fractional, numeric, 2-digit",
            unit=unit,
        )

    # -- Locale errors -------------------------------------------------------

    @staticmethod
    def locale_tag_invalid(tag: str) -> Diagnostic:
        """Locale string is not a well-formed BCP 47 language tag.

        Args:
            tag: The rejected tag

        Returns:
            Diagnostic for LOCALE_TAG_INVALID
        """
        msg = f"Incorrect locale information provided: '{tag}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_TAG_INVALID,
            message=msg,
            hint="Use a BCP 47 language tag such as 'en-US' or 'ar-EG-u-nu-arab'",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-canonicalizelocalelist",
            received_value=repr(tag),
        )

    @staticmethod
    def locale_list_invalid(received_type: str) -> Diagnostic:
        """Locales argument of an unsupported type.

        Args:
            received_type: Type name of the value passed as locales

        Returns:
            Diagnostic for LOCALE_LIST_INVALID
        """
        msg = f"Locales must be a string or an iterable of strings, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_LIST_INVALID,
            message=msg,
            hint="Pass None, 'en-US' or ['en-US', 'de']",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-canonicalizelocalelist",
            received_value=received_type,
        )

    @staticmethod
    def numbering_system_invalid(value: str) -> Diagnostic:
        """numberingSystem does not match the Unicode 'type' nonterminal.

        Args:
            value: The rejected value

        Returns:
            Diagnostic for NUMBERING_SYSTEM_INVALID
        """
        msg = f"Invalid numbering system identifier '{value}'"
        return Diagnostic(
            code=DiagnosticCode.NUMBERING_SYSTEM_INVALID,
            message=msg,
            hint="Numbering systems are 3-8 alphanumeric characters, e.g. 'latn' or 'arab'",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-intl-durationformat-constructor",
            option_name="numberingSystem",
            received_value=repr(value),
        )

    # -- Construction and internal errors ------------------------------------

    @staticmethod
    def direct_construction(class_name: str) -> Diagnostic:
        """Constructor invoked without going through the factory.

        Args:
            class_name: Name of the guarded class

        Returns:
            Diagnostic for DIRECT_CONSTRUCTION
        """
        msg = (
            f"Cannot call {class_name} constructor directly; "
            f"use {class_name}.create() (direct construction is not supported)"
        )
        return Diagnostic(
            code=DiagnosticCode.DIRECT_CONSTRUCTION,
            message=msg,
            hint=f"Replace {class_name}(...) with {class_name}.create(locales, options)",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-intl-durationformat-constructor",
        )

    @staticmethod
    def global_style_unmapped(style: str) -> Diagnostic:
        """Global style has no per-unit counterpart in the word-style branch.

        Args:
            style: The global style value

        Returns:
            Diagnostic for GLOBAL_STYLE_UNMAPPED
        """
        msg = f"Global style '{style}' has no per-unit style mapping"
        return Diagnostic(
            code=DiagnosticCode.GLOBAL_STYLE_UNMAPPED,
            message=msg,
            hint="Only 'long', 'short' and 'narrow' map directly to unit styles",
        )
