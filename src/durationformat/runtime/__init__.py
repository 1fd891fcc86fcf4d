"""Duration format runtime package.

Provides locale negotiation, unit option resolution, and the DurationFormat
API. Depends on the options, locale_utils and units modules.

Python 3.13+.
"""

from .duration_format import (
    DurationFormat,
    DurationFormatSpec,
    resolve_duration_format,
    resolve_global_style,
)
from .negotiator import ResolvedLocale, resolve_locale
from .provider import BabelLocaleDataProvider, LocaleDataProvider, get_default_provider
from .unit_options import (
    DurationUnitOptions,
    UnitOptions,
    get_duration_unit_options,
    resolve_duration_unit_options,
)

__all__ = [
    "BabelLocaleDataProvider",
    "DurationFormat",
    "DurationFormatSpec",
    "DurationUnitOptions",
    "LocaleDataProvider",
    "ResolvedLocale",
    "UnitOptions",
    "get_default_provider",
    "get_duration_unit_options",
    "resolve_duration_format",
    "resolve_duration_unit_options",
    "resolve_global_style",
    "resolve_locale",
]
