"""Locale utilities: BCP 47 tags, locale lists, and Babel interop.

Centralizes locale parsing and format conversion used throughout the codebase:
    - LocaleTag: structured, canonicalized BCP 47 language tag with its
      Unicode extension keywords (``en-US-u-nu-latn``)
    - canonicalize_locale_list: the locales argument of a constructor turned
      into an ordered, de-duplicated list of canonical tags
    - normalize_locale / to_bcp47: BCP 47 <-> POSIX conversion for Babel
    - get_babel_locale: cached Babel Locale lookup
    - get_system_locale: locale detection from the OS and environment

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from durationformat.constants import MAX_LOCALE_CACHE_SIZE
from durationformat.diagnostics import (
    DurationFormatRangeError,
    DurationFormatTypeError,
    ErrorTemplate,
)

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LocaleTag",
    "canonicalize_locale_list",
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "is_unicode_type",
    "normalize_locale",
    "parse_locale_tag",
    "to_bcp47",
]

_LANGUAGE = re.compile(r"[a-z]{2,3}|[a-z]{5,8}")
_EXTLANG = re.compile(r"[a-z]{3}")
_SCRIPT = re.compile(r"[a-z]{4}")
_REGION = re.compile(r"[a-z]{2}|[0-9]{3}")
_VARIANT = re.compile(r"[a-z0-9]{5,8}|[0-9][a-z0-9]{3}")
_SINGLETON = re.compile(r"[0-9a-wyz]")
_EXTENSION_SUBTAG = re.compile(r"[a-z0-9]{2,8}")
_PRIVATE_USE_SUBTAG = re.compile(r"[a-z0-9]{1,8}")
_UNICODE_ATTRIBUTE = re.compile(r"[a-z0-9]{3,8}")
_UNICODE_KEY = re.compile(r"[a-z0-9][a-z]")
_UNICODE_TYPE = re.compile(r"[a-z0-9]{3,8}(?:-[a-z0-9]{3,8})*", re.IGNORECASE)


def is_unicode_type(value: str) -> bool:
    """Check a value against the Unicode locale identifier ``type`` nonterminal.

    Example:
        >>> is_unicode_type("latn")
        True
        >>> is_unicode_type("ab")
        False
    """
    return _UNICODE_TYPE.fullmatch(value) is not None


@dataclass(frozen=True, slots=True)
class LocaleTag:
    """Canonical BCP 47 language tag.

    Use parse_locale_tag() to construct from a string; the fields are stored
    in canonical case (language lower, script title, region upper).

    Attributes:
        language: Language subtag ("en")
        script: Script subtag ("Hant") or None
        region: Region subtag ("US", "419") or None
        variants: Variant subtags, sorted
        attributes: Unicode extension attributes, sorted
        keywords: Unicode extension keywords as (key, value) pairs sorted by
            key; a value of "" stands for "true"
        extensions: Other extensions ("t-..."), sorted by singleton
        private_use: Private use sequence without the leading "x-", or None
    """

    language: str
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()
    attributes: tuple[str, ...] = ()
    keywords: tuple[tuple[str, str], ...] = ()
    extensions: tuple[str, ...] = ()
    private_use: str | None = None

    @property
    def base_name(self) -> str:
        """Tag without any extensions ("zh-Hant-TW")."""
        parts = [self.language]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        parts.extend(self.variants)
        return "-".join(parts)

    @property
    def base_tag(self) -> LocaleTag:
        """Copy of this tag with every extension removed."""
        return LocaleTag(self.language, self.script, self.region, self.variants)

    def keyword(self, key: str) -> str | None:
        """Value of a Unicode extension keyword, or None if absent."""
        for name, value in self.keywords:
            if name == key:
                return value
        return None

    def with_keywords(self, keywords: Mapping[str, str]) -> LocaleTag:
        """Copy with the Unicode extension keywords replaced.

        Attributes are cleared together with the keywords.
        """
        return replace(self, attributes=(), keywords=tuple(sorted(keywords.items())))

    def __str__(self) -> str:
        parts = [self.base_name]
        unicode_parts = list(self.attributes)
        for key, value in self.keywords:
            unicode_parts.append(key)
            if value:
                unicode_parts.append(value)
        extensions = list(self.extensions)
        if unicode_parts:
            extensions.append("u-" + "-".join(unicode_parts))
        parts.extend(sorted(extensions))
        if self.private_use:
            parts.append(f"x-{self.private_use}")
        return "-".join(parts)


def _parse_unicode_extension(
    subtags: list[str],
) -> tuple[tuple[str, ...], tuple[tuple[str, str], ...]] | None:
    attributes: list[str] = []
    keywords: dict[str, str] = {}
    i = 0
    while i < len(subtags) and _UNICODE_ATTRIBUTE.fullmatch(subtags[i]):
        attributes.append(subtags[i])
        i += 1
    while i < len(subtags):
        key = subtags[i]
        if not _UNICODE_KEY.fullmatch(key):
            return None
        i += 1
        values: list[str] = []
        while i < len(subtags) and _UNICODE_ATTRIBUTE.fullmatch(subtags[i]):
            values.append(subtags[i])
            i += 1
        value = "-".join(values)
        # First occurrence of a key wins (UTS #35 canonicalization)
        keywords.setdefault(key, "" if value == "true" else value)
    if not attributes and not keywords:
        return None
    return tuple(sorted(set(attributes))), tuple(sorted(keywords.items()))


def _parse_subtags(subtags: list[str]) -> LocaleTag | None:
    i = 0
    if not _LANGUAGE.fullmatch(subtags[i]):
        return None
    language = subtags[i]
    i += 1

    # zh-yue is canonically yue; a second extlang is never valid
    if len(language) <= 3 and i < len(subtags) and _EXTLANG.fullmatch(subtags[i]):
        language = subtags[i]
        i += 1
        if i < len(subtags) and _EXTLANG.fullmatch(subtags[i]):
            return None

    script = None
    if i < len(subtags) and _SCRIPT.fullmatch(subtags[i]):
        script = subtags[i].title()
        i += 1

    region = None
    if i < len(subtags) and _REGION.fullmatch(subtags[i]):
        region = subtags[i].upper()
        i += 1

    variants: list[str] = []
    while i < len(subtags) and _VARIANT.fullmatch(subtags[i]):
        if subtags[i] in variants:
            return None
        variants.append(subtags[i])
        i += 1

    attributes: tuple[str, ...] = ()
    keywords: tuple[tuple[str, str], ...] = ()
    extensions: list[str] = []
    seen_singletons: set[str] = set()
    private_use = None

    while i < len(subtags):
        singleton = subtags[i]
        i += 1
        if singleton == "x":
            rest = subtags[i:]
            if not rest or not all(_PRIVATE_USE_SUBTAG.fullmatch(s) for s in rest):
                return None
            private_use = "-".join(rest)
            break
        if not _SINGLETON.fullmatch(singleton) or singleton in seen_singletons:
            return None
        seen_singletons.add(singleton)
        start = i
        while i < len(subtags) and _EXTENSION_SUBTAG.fullmatch(subtags[i]):
            i += 1
        body = subtags[start:i]
        if not body:
            return None
        if singleton == "u":
            parsed = _parse_unicode_extension(body)
            if parsed is None:
                return None
            attributes, keywords = parsed
        else:
            extensions.append("-".join([singleton, *body]))

    return LocaleTag(
        language=language,
        script=script,
        region=region,
        variants=tuple(sorted(variants)),
        attributes=attributes,
        keywords=keywords,
        extensions=tuple(sorted(extensions)),
        private_use=private_use,
    )


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def parse_locale_tag(tag: str) -> LocaleTag:
    """Parse and canonicalize a BCP 47 language tag.

    Underscores are accepted as separators (POSIX style input). An extended
    language subtag replaces the primary language, so "zh-yue-HK" parses as
    "yue-HK"; only one extended language subtag is allowed.

    Args:
        tag: Language tag such as "en-US" or "ar-EG-u-nu-arab"

    Returns:
        Canonical LocaleTag

    Raises:
        DurationFormatRangeError: If the tag is not structurally valid

    Example:
        >>> str(parse_locale_tag("EN-us-u-NU-Latn"))
        'en-US-u-nu-latn'
        >>> parse_locale_tag("zh_hant_tw").base_name
        'zh-Hant-TW'
        >>> str(parse_locale_tag("zh-yue-HK"))
        'yue-HK'
    """
    subtags = tag.lower().replace("_", "-").split("-")
    if not all(subtags):
        raise DurationFormatRangeError(ErrorTemplate.locale_tag_invalid(tag))
    parsed = _parse_subtags(subtags)
    if parsed is None:
        raise DurationFormatRangeError(ErrorTemplate.locale_tag_invalid(tag))
    return parsed


def canonicalize_locale_list(locales: object) -> list[str]:
    """Turn a locales argument into an ordered list of canonical tags.

    Args:
        locales: None, a tag string, a LocaleTag, or an iterable of those

    Returns:
        Canonical tags in request order, duplicates removed

    Raises:
        DurationFormatTypeError: If locales (or an element) has the wrong type
        DurationFormatRangeError: If a tag is not structurally valid

    Example:
        >>> canonicalize_locale_list(["en-us", "EN-US", "de"])
        ['en-US', 'de']
    """
    if locales is None:
        return []
    if isinstance(locales, (str, LocaleTag)):
        items: Iterable[object] = [locales]
    elif isinstance(locales, Iterable) and not isinstance(locales, (bytes, bytearray, Mapping)):
        items = locales
    else:
        raise DurationFormatTypeError(ErrorTemplate.locale_list_invalid(type(locales).__name__))

    seen: dict[str, None] = {}
    for item in items:
        match item:
            case LocaleTag():
                canonical = str(item)
            case str():
                canonical = str(parse_locale_tag(item))
            case _:
                raise DurationFormatTypeError(
                    ErrorTemplate.locale_list_invalid(type(item).__name__)
                )
        seen.setdefault(canonical, None)
    return list(seen)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Example:
        >>> normalize_locale("zh-Hant-TW")
        'zh_Hant_TW'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def to_bcp47(identifier: str) -> str:
    """Convert a POSIX/Babel locale identifier to BCP 47 form.

    Example:
        >>> to_bcp47("zh_Hant_TW")
        'zh-Hant-TW'
    """
    return identifier.replace("_", "-")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. Thread-safe via
    lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted); must not
            carry extensions

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel locales and parsed tags."""
    get_babel_locale.cache_clear()
    parse_locale_tag.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Encoding (".UTF-8") and modifier ("@euro") suffixes are stripped; the
    "C" and "POSIX" pseudo-locales are ignored.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and _strip_posix_suffixes(system_locale) not in ("C", "POSIX"):
            return normalize_locale(_strip_posix_suffixes(system_locale))
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = _strip_posix_suffixes(os.environ.get(var, ""))
        if value and value not in ("C", "POSIX"):
            return normalize_locale(value)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en_US"


def _strip_posix_suffixes(value: str) -> str:
    return value.split(".")[0].split("@")[0]
