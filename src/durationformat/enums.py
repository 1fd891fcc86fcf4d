"""Enumerations for durationformat option values.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so resolved options compare equal to
the raw option strings callers pass in.

Python 3.13+.
"""

from enum import StrEnum

__all__ = [
    "Display",
    "GlobalStyle",
    "LocaleMatcher",
    "Style",
    "UnitCategory",
]


class GlobalStyle(StrEnum):
    """Top-level style requested through the ``style`` option.

    StrEnum provides automatic string conversion: str(GlobalStyle.SHORT) == "short"
    """

    LONG = "long"
    """Full unit names: 1 hour, 2 minutes"""

    SHORT = "short"
    """Abbreviated unit names: 1 hr, 2 min (default)"""

    NARROW = "narrow"
    """Shortest unit names: 1h 2m"""

    DIGITAL = "digital"
    """Clock-like output: 1:02:03"""


class Style(StrEnum):
    """Per-unit display style.

    StrEnum provides automatic string conversion: str(Style.TWO_DIGIT) == "2-digit"
    """

    LONG = "long"
    SHORT = "short"
    NARROW = "narrow"
    NUMERIC = "numeric"
    TWO_DIGIT = "2-digit"
    FRACTIONAL = "fractional"

    @property
    def is_numeric_like(self) -> bool:
        """True for numeric and 2-digit, the clock styles of the digital chain."""
        return self in (Style.NUMERIC, Style.TWO_DIGIT)

    @property
    def is_digital_chain(self) -> bool:
        """True for styles that force numeric styles onto the following units."""
        return self in (Style.NUMERIC, Style.TWO_DIGIT, Style.FRACTIONAL)


class Display(StrEnum):
    """Whether a zero-valued unit is rendered.

    StrEnum provides automatic string conversion: str(Display.AUTO) == "auto"
    """

    AUTO = "auto"
    """Zero values are suppressed"""

    ALWAYS = "always"
    """Zero values are rendered"""


class UnitCategory(StrEnum):
    """Category of a duration unit, selecting its allowed style set."""

    BASE = "base"
    """years, months, weeks, days: word styles only"""

    DIGITAL = "digital"
    """hours, minutes, seconds: word styles plus numeric and 2-digit"""

    FRACTIONAL = "fractional"
    """milliseconds, microseconds, nanoseconds: word styles plus fractional"""


class LocaleMatcher(StrEnum):
    """Locale matching algorithm selected through ``localeMatcher``."""

    LOOKUP = "lookup"
    """BCP 47 Lookup: truncate subtags until an available locale matches"""

    BEST_FIT = "best fit"
    """Likely-subtags expansion via CLDR, then lookup (default)"""
