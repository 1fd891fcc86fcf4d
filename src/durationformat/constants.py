"""Shared constants for durationformat.

This module provides centralized configuration constants used across the
options, locale and runtime layers. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: Fallback locale when negotiation finds no match
- Extension keys: The Unicode extension keyword honoured during negotiation
- Option bounds: Numeric limits enforced by the options reader
- Cache limits: Memory bounds for locale data caching

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    # Extension keys
    "NUMBERING_SYSTEM_KEY",
    # Option bounds
    "MIN_FRACTIONAL_DIGITS",
    "MAX_FRACTIONAL_DIGITS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Used when no requested locale is supported and the system locale is not
# available either. BCP 47 form.
DEFAULT_LOCALE: str = "en"

# ============================================================================
# EXTENSION KEYS
# ============================================================================

# Unicode extension key for the numbering system (-u-nu-arab).
NUMBERING_SYSTEM_KEY: str = "nu"

# ============================================================================
# OPTION BOUNDS
# ============================================================================

# fractionalDigits is bounded to [0, 9]: nanoseconds are the finest unit.
MIN_FRACTIONAL_DIGITS: int = 0
MAX_FRACTIONAL_DIGITS: int = 9

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of Babel Locale objects and per-locale numbering system sets
# cached by the locale data provider.
MAX_LOCALE_CACHE_SIZE: int = 128
