"""Locale data provider for duration formatting.

The negotiator needs three things from locale data: the set of available
locales, whether a Unicode extension value is supported for a locale (the
extension-validity oracle), and the default numbering system of a locale.
LocaleDataProvider is the protocol; BabelLocaleDataProvider answers from
Babel's CLDR data.

Numbering systems supported for a locale:
    - its default numbering system (``Locale.default_numbering_system``)
    - the systems named in ``Locale.other_numbering_systems``
      (native, traditional, finance)
    - the systems for which ``Locale.number_symbols`` has data

Thread Safety:
    All lookups are cached with functools.lru_cache, which is internally
    locked. The provider holds no other mutable state, so one instance can be
    shared by concurrent constructions.

Python 3.13+. Uses Babel for CLDR locale data.
"""

from __future__ import annotations

import functools
import logging
from typing import Protocol

from babel import UnknownLocaleError
from babel.localedata import locale_identifiers

from durationformat.constants import MAX_LOCALE_CACHE_SIZE, NUMBERING_SYSTEM_KEY
from durationformat.locale_utils import get_babel_locale, to_bcp47

__all__ = [
    "BabelLocaleDataProvider",
    "LocaleDataProvider",
    "get_default_provider",
]

logger = logging.getLogger(__name__)

_FALLBACK_NUMBERING_SYSTEM = "latn"


class LocaleDataProvider(Protocol):
    """Read-only locale data consulted during locale negotiation.

    Locales are passed as BCP 47 base names without extensions ("en-US").
    """

    def available_locales(self) -> frozenset[str]:
        """BCP 47 base names of every locale with formatting data."""
        ...

    def is_supported(self, locale: str, key: str, value: str) -> bool:
        """Whether Unicode extension ``key=value`` is supported for locale."""
        ...

    def default_numbering_system(self, locale: str) -> str:
        """Numbering system used for locale when none is requested."""
        ...


class BabelLocaleDataProvider:
    """LocaleDataProvider backed by Babel's CLDR data.

    Example:
        >>> provider = BabelLocaleDataProvider()
        >>> "en-US" in provider.available_locales()
        True
        >>> provider.is_supported("en", "nu", "latn")
        True
        >>> provider.is_supported("en", "nu", "zzzz")
        False
    """

    __slots__ = ()

    def available_locales(self) -> frozenset[str]:
        return _babel_available_locales()

    def is_supported(self, locale: str, key: str, value: str) -> bool:
        if key != NUMBERING_SYSTEM_KEY:
            return False
        return value in _babel_numbering_systems(locale)

    def default_numbering_system(self, locale: str) -> str:
        return _babel_default_numbering_system(locale)

    def __repr__(self) -> str:
        return "BabelLocaleDataProvider()"


@functools.cache
def _babel_available_locales() -> frozenset[str]:
    return frozenset(to_bcp47(identifier) for identifier in locale_identifiers())


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _babel_numbering_systems(locale: str) -> frozenset[str]:
    try:
        babel_locale = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning("No locale data for '%s': %s", locale, e)
        return frozenset()

    systems = {babel_locale.default_numbering_system}
    systems.update(babel_locale.other_numbering_systems.values())
    systems.update(babel_locale.number_symbols.keys())
    return frozenset(systems)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _babel_default_numbering_system(locale: str) -> str:
    try:
        return str(get_babel_locale(locale).default_numbering_system)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(
            "No locale data for '%s': %s. Using '%s' digits",
            locale,
            e,
            _FALLBACK_NUMBERING_SYSTEM,
        )
        return _FALLBACK_NUMBERING_SYSTEM


@functools.lru_cache(maxsize=1)
def get_default_provider() -> BabelLocaleDataProvider:
    """Get the shared Babel-backed provider.

    Returns the same instance on every call; it is stateless apart from the
    module-level caches.
    """
    return BabelLocaleDataProvider()
