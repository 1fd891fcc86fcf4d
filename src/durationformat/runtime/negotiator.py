"""Locale negotiation for DurationFormat.

Implements ResolveLocale for the duration format service: pick the best
available locale for the requested list, then settle the numbering system.

Numbering system rules:
    1. An explicit ``numberingSystem`` option wins if the provider supports it
       for the negotiated locale.
    2. Otherwise the ``-u-nu-`` keyword of the matched requested tag is used,
       under the same check.
    3. An unsupported value is dropped silently: the locale default applies.

The resolved locale keeps no Unicode extension except the validated ``nu``
keyword.

Python 3.13+. Uses Babel for likely-subtags expansion.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from babel.core import get_global

from durationformat.constants import DEFAULT_LOCALE, NUMBERING_SYSTEM_KEY
from durationformat.enums import LocaleMatcher
from durationformat.locale_utils import (
    LocaleTag,
    get_system_locale,
    parse_locale_tag,
    to_bcp47,
)

from .provider import LocaleDataProvider

__all__ = [
    "LocaleMatch",
    "ResolvedLocale",
    "add_likely_subtags",
    "best_fit_match",
    "lookup_match",
    "match_locale",
    "resolve_locale",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleMatch:
    """Outcome of locale matching.

    Attributes:
        locale: Available locale that matched (BCP 47 base name)
        requested: Canonical requested tag that produced the match, or None
            when the default locale was used
    """

    locale: str
    requested: LocaleTag | None = None


@dataclass(frozen=True, slots=True)
class ResolvedLocale:
    """Negotiated locale and numbering system.

    Attributes:
        locale: Negotiated tag; carries only the validated ``nu`` keyword
        data_locale: Base name used to look up locale data
        numbering_system: Validated numbering system override, or None to
            use the locale default
    """

    locale: LocaleTag
    data_locale: str
    numbering_system: str | None = None


def _truncate(base_name: str) -> str:
    """Drop the last subtag, and a singleton left dangling before it."""
    subtags = base_name.split("-")[:-1]
    if len(subtags) >= 2 and len(subtags[-1]) == 1:
        subtags.pop()
    return "-".join(subtags)


def _available_index(available: frozenset[str]) -> dict[str, str]:
    return {tag.lower(): tag for tag in available}


def _lookup_candidate(base_name: str, index: dict[str, str]) -> str | None:
    candidate = base_name
    while candidate:
        found = index.get(candidate.lower())
        if found is not None:
            return found
        candidate = _truncate(candidate)
    return None


def lookup_match(requested: Sequence[str], available: frozenset[str]) -> LocaleMatch | None:
    """BCP 47 Lookup over canonical requested tags.

    Example:
        >>> lookup_match(["de-CH-1996"], frozenset({"de", "en"})).locale
        'de'
    """
    index = _available_index(available)
    for tag in requested:
        parsed = parse_locale_tag(tag)
        found = _lookup_candidate(parsed.base_name, index)
        if found is not None:
            return LocaleMatch(found, parsed)
    return None


def add_likely_subtags(tag: LocaleTag) -> LocaleTag | None:
    """Fill in missing script and region from CLDR likely subtags.

    Returns None when CLDR has no entry for the tag.

    Example:
        >>> add_likely_subtags(parse_locale_tag("zh-TW")).base_name
        'zh-Hant-TW'
    """
    likely = get_global("likely_subtags")
    keys = []
    if tag.script and tag.region:
        keys.append(f"{tag.language}_{tag.script}_{tag.region}")
    if tag.region:
        keys.append(f"{tag.language}_{tag.region}")
    if tag.script:
        keys.append(f"{tag.language}_{tag.script}")
    if tag.region:
        keys.append(f"und_{tag.region}")
    keys.append(tag.language)

    for key in keys:
        target = likely.get(key)
        if target is None:
            continue
        language, *parts = str(target).split("_")
        if language != tag.language:
            continue
        script = region = None
        for part in parts:
            if len(part) == 4:
                script = part
            else:
                region = part
        return replace(
            tag.base_tag,
            script=tag.script or script,
            region=tag.region or region,
        )
    return None


def best_fit_match(requested: Sequence[str], available: frozenset[str]) -> LocaleMatch | None:
    """Exact match, then likely-subtags expansion, then lookup.

    CLDR likely subtags expand ``zh-TW`` to ``zh-Hant-TW``; when that is not
    available, ``zh-Hant`` is tried before lookup would fall back to ``zh``
    (Simplified Chinese).
    """
    index = _available_index(available)
    for tag in requested:
        parsed = parse_locale_tag(tag)
        candidates = [parsed.base_name]
        expanded = add_likely_subtags(parsed)
        if expanded is not None:
            candidates.append(expanded.base_name)
            if expanded.script:
                candidates.append(f"{expanded.language}-{expanded.script}")
        for candidate in candidates:
            found = index.get(candidate.lower())
            if found is not None:
                return LocaleMatch(found, parsed)
        found = _lookup_candidate(parsed.base_name, index)
        if found is not None:
            return LocaleMatch(found, parsed)
    return None


def _default_match(available: frozenset[str]) -> LocaleMatch:
    index = _available_index(available)
    system = _lookup_candidate(to_bcp47(get_system_locale()), index)
    if system is not None:
        return LocaleMatch(system)
    return LocaleMatch(index.get(DEFAULT_LOCALE, DEFAULT_LOCALE))


def match_locale(
    requested: Sequence[str],
    available: frozenset[str],
    matcher: LocaleMatcher = LocaleMatcher.BEST_FIT,
) -> LocaleMatch:
    """Match requested tags against available locales, falling back to the default."""
    match matcher:
        case LocaleMatcher.LOOKUP:
            found = lookup_match(requested, available)
        case LocaleMatcher.BEST_FIT:
            found = best_fit_match(requested, available)
    if found is None:
        found = _default_match(available)
        if requested:
            logger.warning(
                "None of the requested locales %s is supported. Using '%s'",
                list(requested),
                found.locale,
            )
    return found


def resolve_locale(
    requested: Sequence[str],
    provider: LocaleDataProvider,
    *,
    matcher: LocaleMatcher = LocaleMatcher.BEST_FIT,
    numbering_system: str | None = None,
) -> ResolvedLocale:
    """Negotiate the locale and numbering system.

    Never fails: an unsupported numbering system, from the options or from
    the requested tag, is dropped and the locale default applies.

    Args:
        requested: Canonical requested tags (see canonicalize_locale_list)
        provider: Locale data provider
        matcher: Locale matching algorithm
        numbering_system: Explicit numberingSystem option, already checked
            for syntax, or None

    Returns:
        ResolvedLocale with extensions cleared except a validated ``nu``

    Example:
        >>> from durationformat.runtime.provider import get_default_provider
        >>> resolved = resolve_locale(["ar-EG-u-ca-islamic-nu-latn"], get_default_provider())
        >>> str(resolved.locale)
        'ar-EG-u-nu-latn'
    """
    found = match_locale(requested, provider.available_locales(), matcher)
    data_locale = found.locale

    def supported(value: str | None) -> bool:
        if not value:
            return False
        if provider.is_supported(data_locale, NUMBERING_SYSTEM_KEY, value):
            return True
        logger.debug(
            "Numbering system '%s' is not supported for '%s'; using locale default",
            value,
            data_locale,
        )
        return False

    resolved_nu: str | None = None
    if supported(numbering_system):
        resolved_nu = numbering_system
    elif found.requested is not None:
        keyword_nu = found.requested.keyword(NUMBERING_SYSTEM_KEY)
        if supported(keyword_nu):
            resolved_nu = keyword_nu

    keywords = {NUMBERING_SYSTEM_KEY: resolved_nu} if resolved_nu else {}
    locale = parse_locale_tag(data_locale).with_keywords(keywords)
    logger.debug("Resolved locale '%s' (requested %s)", locale, list(requested))
    return ResolvedLocale(locale=locale, data_locale=data_locale, numbering_system=resolved_nu)
