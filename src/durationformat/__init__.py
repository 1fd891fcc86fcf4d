"""durationformat - Intl.DurationFormat option resolution for Python.

Resolves the options of a locale-sensitive duration formatter: negotiates the
locale and numbering system against CLDR data (via Babel), then resolves the
style and display of the ten duration units, enforcing the cross-unit rules of
ECMA-402 DurationFormat.

Public API:
    DurationFormat - Constructed formatter configuration (use DurationFormat.create)
    DurationFormatSpec - Immutable resolved configuration
    resolve_duration_format - Pure construction function
    Unit, Style, Display, GlobalStyle - Unit and option enumerations

Exceptions:
    DurationFormatError - Base exception class
    DurationFormatRangeError - Disallowed or incompatible option values (ValueError)
    DurationFormatTypeError - Invocation errors (TypeError)

Submodules:
    durationformat.runtime - Negotiation, unit resolution, locale data providers
    durationformat.diagnostics - Error codes, templates and formatting
    durationformat.locale_utils - BCP 47 tag parsing and Babel interop
    durationformat.options - Generic options reader
"""

from .diagnostics import (
    DurationFormatError,
    DurationFormatRangeError,
    DurationFormatTypeError,
)
from .enums import Display, GlobalStyle, Style
from .runtime import DurationFormat, DurationFormatSpec, resolve_duration_format
from .units import Unit

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("durationformat")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Display",
    "DurationFormat",
    "DurationFormatError",
    "DurationFormatRangeError",
    "DurationFormatSpec",
    "DurationFormatTypeError",
    "GlobalStyle",
    "Style",
    "Unit",
    "__version__",
    "resolve_duration_format",
]
