"""DurationFormat construction and resolved configuration.

Implements the Intl.DurationFormat constructor as a Python factory:

    DurationFormat.create(locales, options)
        -> canonicalize locales, read localeMatcher and numberingSystem
        -> negotiate locale and numbering system
        -> read style, then every unit's style and display, then
           fractionalDigits
        -> assemble an immutable DurationFormatSpec

Option read order matches the constructor steps, so with several invalid
options the same one is reported as in JavaScript engines.

Design Principles:
    - Immutable by default (frozen dataclasses)
    - Thread-safe (no shared mutable state; provider caches are read-only)
    - All-or-nothing: construction returns a fully resolved object or raises

Python 3.13+. Uses Babel for locale data (via the provider).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from durationformat.constants import MAX_FRACTIONAL_DIGITS, MIN_FRACTIONAL_DIGITS
from durationformat.diagnostics import (
    DurationFormatRangeError,
    DurationFormatTypeError,
    ErrorTemplate,
)
from durationformat.enums import GlobalStyle, LocaleMatcher
from durationformat.locale_utils import LocaleTag, canonicalize_locale_list, is_unicode_type
from durationformat.options import (
    Options,
    get_enum_option,
    get_number_option,
    get_option,
    get_options_object,
)
from durationformat.units import Unit

from .negotiator import best_fit_match, lookup_match, resolve_locale
from .provider import LocaleDataProvider, get_default_provider
from .unit_options import DurationUnitOptions, UnitOptions, resolve_duration_unit_options

__all__ = [
    "DurationFormat",
    "DurationFormatSpec",
    "resolve_duration_format",
    "resolve_global_style",
]

logger = logging.getLogger(__name__)

# Sentinel proving construction went through DurationFormat.create()
_FACTORY_TOKEN: Final = object()


def resolve_global_style(options: Options) -> GlobalStyle:
    """Read the ``style`` option (long, short, narrow, digital; default short)."""
    return get_enum_option(options, "style", GlobalStyle, GlobalStyle.SHORT)


def _read_locale_matcher(options: Options) -> LocaleMatcher:
    return get_enum_option(options, "localeMatcher", LocaleMatcher, LocaleMatcher.BEST_FIT)


def _read_numbering_system(options: Options) -> str | None:
    numbering_system = get_option(options, "numberingSystem")
    if numbering_system is None:
        return None
    if not is_unicode_type(numbering_system):
        raise DurationFormatRangeError(ErrorTemplate.numbering_system_invalid(numbering_system))
    return numbering_system.lower()


@dataclass(frozen=True, slots=True)
class DurationFormatSpec:
    """Fully resolved duration format configuration.

    Read by the renderer and by DurationFormat.resolved_options().

    Attributes:
        locale: Negotiated locale; carries only the ``nu`` keyword, if any
        data_locale: Base name used for locale data lookup
        numbering_system: Validated numbering system override, or None to
            use the locale default
        style: Global style
        fractional_digits: Fraction digit count in [0, 9], or None when
            unspecified (natural precision)
        unit_options: Resolved style and display of every unit
    """

    locale: LocaleTag
    data_locale: str
    numbering_system: str | None
    style: GlobalStyle
    fractional_digits: int | None
    unit_options: DurationUnitOptions

    def unit(self, unit: Unit) -> UnitOptions:
        """Resolved options of one unit."""
        return self.unit_options[unit]


def resolve_duration_format(
    locales: object = None,
    options: object = None,
    *,
    provider: LocaleDataProvider | None = None,
) -> DurationFormatSpec:
    """Resolve constructor arguments into a DurationFormatSpec.

    Args:
        locales: None, a BCP 47 tag, or an iterable of tags
        options: None or a mapping with camelCase option keys
        provider: Locale data provider (default: shared Babel provider)

    Returns:
        Immutable DurationFormatSpec

    Raises:
        DurationFormatTypeError: If locales or options has the wrong type
        DurationFormatRangeError: If an option value is not allowed or unit
            options are incompatible

    Example:
        >>> spec = resolve_duration_format("en", {"style": "digital"})
        >>> spec.unit(Unit.HOURS).style
        <Style.NUMERIC: 'numeric'>
    """
    if provider is None:
        provider = get_default_provider()

    requested = canonicalize_locale_list(locales)
    opts = get_options_object(options)
    matcher = _read_locale_matcher(opts)
    numbering_system = _read_numbering_system(opts)

    resolved_locale = resolve_locale(
        requested, provider, matcher=matcher, numbering_system=numbering_system
    )

    style = resolve_global_style(opts)
    unit_options = resolve_duration_unit_options(opts, style)
    fractional_digits = get_number_option(
        opts, "fractionalDigits", MIN_FRACTIONAL_DIGITS, MAX_FRACTIONAL_DIGITS
    )

    return DurationFormatSpec(
        locale=resolved_locale.locale,
        data_locale=resolved_locale.data_locale,
        numbering_system=resolved_locale.numbering_system,
        style=style,
        fractional_digits=fractional_digits,
        unit_options=unit_options,
    )


class DurationFormat:
    """Locale-sensitive duration formatter configuration.

    Use DurationFormat.create() to construct instances; calling the class
    directly raises DurationFormatTypeError, mirroring the "must be invoked
    with new" rule of Intl.DurationFormat.

    Examples:
        >>> fmt = DurationFormat.create("fr-FR", {"style": "long", "seconds": "numeric"})
        >>> fmt.resolved_options()["milliseconds"]
        'fractional'

        >>> try:
        ...     DurationFormat.create("en", {"hours": "numeric", "minutes": "long"})
        ... except DurationFormatRangeError as e:
        ...     print(e.diagnostic.code.name)
        NUMERIC_CHAIN_BROKEN

    Thread Safety:
        Instances are immutable after construction and can be shared freely.
    """

    __slots__ = ("_provider", "_spec")

    def __init__(
        self,
        spec: DurationFormatSpec,
        provider: LocaleDataProvider,
        *,
        _factory_token: object = None,
    ) -> None:
        if _factory_token is not _FACTORY_TOKEN:
            raise DurationFormatTypeError(ErrorTemplate.direct_construction("DurationFormat"))
        self._spec = spec
        self._provider = provider

    @classmethod
    def create(
        cls,
        locales: object = None,
        options: object = None,
        *,
        provider: LocaleDataProvider | None = None,
    ) -> DurationFormat:
        """Construct a DurationFormat.

        Args:
            locales: None, a BCP 47 tag, or an iterable of tags
            options: None or a mapping with camelCase option keys:
                localeMatcher, numberingSystem, style, fractionalDigits,
                and ``<unit>`` / ``<unit>Display`` for each unit
            provider: Locale data provider (default: shared Babel provider)

        Returns:
            DurationFormat owning a fully resolved DurationFormatSpec

        Raises:
            DurationFormatTypeError: If locales or options has the wrong type
            DurationFormatRangeError: If an option value is not allowed or
                unit options are incompatible
        """
        if provider is None:
            provider = get_default_provider()
        spec = resolve_duration_format(locales, options, provider=provider)
        logger.debug("Created DurationFormat for '%s' (style=%s)", spec.locale, spec.style)
        return cls(spec, provider, _factory_token=_FACTORY_TOKEN)

    @staticmethod
    def supported_locales_of(
        locales: object,
        options: object = None,
        *,
        provider: LocaleDataProvider | None = None,
    ) -> list[str]:
        """Return the requested locales that have locale data.

        Each canonical requested tag is matched on its own; unmatched tags
        are dropped, request order is kept.

        Raises:
            DurationFormatTypeError: If locales or options has the wrong type
            DurationFormatRangeError: If a tag or localeMatcher is invalid
        """
        if provider is None:
            provider = get_default_provider()
        requested = canonicalize_locale_list(locales)
        matcher = _read_locale_matcher(get_options_object(options))
        available = provider.available_locales()
        match_one = lookup_match if matcher is LocaleMatcher.LOOKUP else best_fit_match
        return [tag for tag in requested if match_one([tag], available) is not None]

    @property
    def spec(self) -> DurationFormatSpec:
        """The resolved configuration consumed by renderers."""
        return self._spec

    @property
    def locale(self) -> str:
        """Negotiated locale as a BCP 47 tag."""
        return str(self._spec.locale)

    @property
    def numbering_system(self) -> str:
        """Effective numbering system: the override or the locale default."""
        if self._spec.numbering_system is not None:
            return self._spec.numbering_system
        return self._provider.default_numbering_system(self._spec.data_locale)

    def resolved_options(self) -> dict[str, str | int]:
        """Report the resolved configuration with camelCase keys.

        Every unit style and display is included; ``fractionalDigits`` is
        present only when it was specified.

        Example:
            >>> options = DurationFormat.create("en").resolved_options()
            >>> [options[key] for key in ("locale", "numberingSystem", "years", "yearsDisplay")]
            ['en', 'latn', 'short', 'auto']
            >>> "fractionalDigits" in options
            False
        """
        result: dict[str, str | int] = {
            "locale": self.locale,
            "numberingSystem": self.numbering_system,
            "style": str(self._spec.style),
        }
        for unit, unit_options in self._spec.unit_options:
            result[unit.style_key] = str(unit_options.style)
            result[unit.display_key] = str(unit_options.display)
        if self._spec.fractional_digits is not None:
            result["fractionalDigits"] = self._spec.fractional_digits
        return result

    def __repr__(self) -> str:
        return f"DurationFormat(locale={self.locale!r}, style={str(self._spec.style)!r})"
