"""Tests for locale_utils.py.

Covers BCP 47 parsing and canonicalization, locale list canonicalization,
POSIX conversion, Babel locale caching and system locale detection.

Python 3.13+.
"""

import os
from unittest.mock import patch

import pytest
from babel import Locale
from hypothesis import given
from hypothesis import strategies as st

from durationformat.diagnostics import (
    DiagnosticCode,
    DurationFormatRangeError,
    DurationFormatTypeError,
)
from durationformat.locale_utils import (
    LocaleTag,
    canonicalize_locale_list,
    clear_locale_cache,
    get_babel_locale,
    get_system_locale,
    is_unicode_type,
    normalize_locale,
    parse_locale_tag,
    to_bcp47,
)


class TestParseLocaleTag:
    """BCP 47 parsing and canonical casing."""

    def test_language_only(self) -> None:
        """Bare language subtag."""
        tag = parse_locale_tag("en")
        assert tag == LocaleTag("en")
        assert str(tag) == "en"

    def test_canonical_casing(self) -> None:
        """Language lower, script title, region upper."""
        tag = parse_locale_tag("ZH-hant-tw")
        assert tag.language == "zh"
        assert tag.script == "Hant"
        assert tag.region == "TW"
        assert str(tag) == "zh-Hant-TW"

    def test_numeric_region(self) -> None:
        """UN M.49 regions are digits."""
        assert parse_locale_tag("es-419").region == "419"

    def test_underscore_separator(self) -> None:
        """POSIX-style separators are accepted."""
        assert str(parse_locale_tag("en_US")) == "en-US"

    def test_variants_sorted(self) -> None:
        """Variants are kept in sorted order."""
        tag = parse_locale_tag("sl-rozaj-biske")
        assert tag.variants == ("biske", "rozaj")

    def test_unicode_keywords(self) -> None:
        """Unicode extension keywords are parsed and sorted by key."""
        tag = parse_locale_tag("ar-EG-u-nu-latn-ca-islamic")
        assert tag.keywords == (("ca", "islamic"), ("nu", "latn"))
        assert tag.keyword("nu") == "latn"
        assert tag.keyword("hc") is None
        assert str(tag) == "ar-EG-u-ca-islamic-nu-latn"

    def test_keyword_true_value_dropped(self) -> None:
        """A 'true' keyword value is canonicalized away."""
        tag = parse_locale_tag("en-u-kn-true")
        assert tag.keyword("kn") == ""
        assert str(tag) == "en-u-kn"

    def test_duplicate_keyword_first_wins(self) -> None:
        """Only the first occurrence of a key is kept."""
        assert parse_locale_tag("en-u-nu-thai-nu-latn").keyword("nu") == "thai"

    def test_other_extensions_and_private_use(self) -> None:
        """Non-unicode extensions and private use survive canonicalization."""
        tag = parse_locale_tag("en-t-ja-x-private")
        assert tag.extensions == ("t-ja",)
        assert tag.private_use == "private"
        assert str(tag) == "en-t-ja-x-private"

    def test_base_name_and_base_tag(self) -> None:
        """base_name drops every extension."""
        tag = parse_locale_tag("de-CH-u-nu-latn-x-foo")
        assert tag.base_name == "de-CH"
        assert tag.base_tag == LocaleTag("de", region="CH")

    def test_with_keywords_replaces_all(self) -> None:
        """with_keywords clears previous keywords."""
        tag = parse_locale_tag("en-u-ca-gregory-nu-thai")
        assert str(tag.with_keywords({"nu": "latn"})) == "en-u-nu-latn"
        assert str(tag.with_keywords({})) == "en"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("zh-yue-HK", "yue-HK"),
            ("zh-cmn-Hans-CN", "cmn-Hans-CN"),
            ("ar-aao", "aao"),
            ("sgn-ase-u-nu-latn", "ase-u-nu-latn"),
        ],
    )
    def test_extended_language_replaces_language(self, raw: str, expected: str) -> None:
        """An extended language subtag becomes the language."""
        assert str(parse_locale_tag(raw)) == expected

    @pytest.mark.parametrize(
        "bad",
        [
            "",
            "e",
            "englishlanguage",
            "en--US",
            "en-",
            "12",
            "en-u",
            "en-u-nu-latn-u-ca-gregory",
            "de-1996-1996",
            "en-x",
            "x-private",
            "en-US-u-n",
            "zh-yue-cmn",
            "english-yue",
        ],
    )
    def test_invalid_tags_raise(self, bad: str) -> None:
        """Structurally invalid tags raise a range error."""
        with pytest.raises(DurationFormatRangeError) as exc_info:
            parse_locale_tag(bad)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.LOCALE_TAG_INVALID

    @given(
        language=st.from_regex(r"[a-z]{2,3}", fullmatch=True),
        region=st.none() | st.from_regex(r"[A-Z]{2}", fullmatch=True),
    )
    def test_canonical_form_is_stable(self, language: str, region: str | None) -> None:
        """Canonicalizing a canonical tag is a no-op."""
        raw = language if region is None else f"{language}-{region}"
        canonical = str(parse_locale_tag(raw.upper()))
        assert str(parse_locale_tag(canonical)) == canonical


class TestIsUnicodeType:
    """Unicode 'type' nonterminal check used for numberingSystem."""

    @pytest.mark.parametrize("value", ["latn", "arab", "hanidec", "abc", "abcdefgh", "abc-defg"])
    def test_valid(self, value: str) -> None:
        """3-8 alphanumerics, hyphen-joined."""
        assert is_unicode_type(value)

    @pytest.mark.parametrize("value", ["", "ab", "abcdefghi", "latn-", "-latn", "la_tn", "lat n"])
    def test_invalid(self, value: str) -> None:
        """Anything else is rejected."""
        assert not is_unicode_type(value)


class TestCanonicalizeLocaleList:
    """Locales argument handling."""

    def test_none_is_empty(self) -> None:
        """None requests no locale."""
        assert canonicalize_locale_list(None) == []

    def test_single_string(self) -> None:
        """A string is a one-element list."""
        assert canonicalize_locale_list("en-us") == ["en-US"]

    def test_locale_tag_accepted(self) -> None:
        """LocaleTag instances are accepted."""
        assert canonicalize_locale_list(LocaleTag("fr", region="CA")) == ["fr-CA"]

    def test_duplicates_removed_in_order(self) -> None:
        """Duplicates after canonicalization are dropped, order kept."""
        assert canonicalize_locale_list(["en-us", "de", "EN-US", "fr"]) == ["en-US", "de", "fr"]

    def test_tuple_and_generator(self) -> None:
        """Any iterable works."""
        assert canonicalize_locale_list(("de", "fr")) == ["de", "fr"]
        assert canonicalize_locale_list(t for t in ["de"]) == ["de"]

    @pytest.mark.parametrize("value", [42, b"en", {"en": 1}])
    def test_wrong_type_raises(self, value: object) -> None:
        """Non-string, non-iterable locales are an invocation error."""
        with pytest.raises(DurationFormatTypeError) as exc_info:
            canonicalize_locale_list(value)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.LOCALE_LIST_INVALID

    def test_wrong_element_type_raises(self) -> None:
        """Every element must be a string or LocaleTag."""
        with pytest.raises(DurationFormatTypeError):
            canonicalize_locale_list(["en", 5])

    def test_invalid_element_raises_range_error(self) -> None:
        """A malformed tag aborts canonicalization."""
        with pytest.raises(DurationFormatRangeError):
            canonicalize_locale_list(["en", "not a tag"])


class TestPosixConversion:
    """BCP 47 <-> POSIX identifiers."""

    def test_normalize_locale(self) -> None:
        """Hyphens become underscores."""
        assert normalize_locale("zh-Hant-TW") == "zh_Hant_TW"

    def test_normalize_already_posix(self) -> None:
        """POSIX identifiers pass through."""
        assert normalize_locale("en_US") == "en_US"

    def test_to_bcp47(self) -> None:
        """Underscores become hyphens."""
        assert to_bcp47("zh_Hant_TW") == "zh-Hant-TW"


class TestGetBabelLocale:
    """Cached Babel locale lookup."""

    def test_bcp47_format(self) -> None:
        """BCP-47 format locale parsed correctly."""
        locale = get_babel_locale("en-US")
        assert isinstance(locale, Locale)
        assert locale.language == "en"
        assert locale.territory == "US"

    def test_caching(self) -> None:
        """Repeated calls return the cached object."""
        assert get_babel_locale("pt-BR") is get_babel_locale("pt-BR")

    def test_clear_locale_cache(self) -> None:
        """clear_locale_cache empties both caches."""
        get_babel_locale("de-DE")
        parse_locale_tag("de-DE")
        clear_locale_cache()
        assert get_babel_locale.cache_info().currsize == 0
        assert parse_locale_tag.cache_info().currsize == 0


class TestGetSystemLocale:
    """System locale detection."""

    def test_os_locale_used_first(self) -> None:
        """locale.getlocale() wins when it reports a real locale."""
        with patch("locale.getlocale", return_value=("de_DE.UTF-8", "UTF-8")):
            assert get_system_locale() == "de_DE"

    def test_env_fallback(self) -> None:
        """Environment variables are read in order."""
        env = {"LC_ALL": "", "LC_MESSAGES": "fr_FR.UTF-8@euro", "LANG": "en_US.UTF-8"}
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, env, clear=True),
        ):
            assert get_system_locale() == "fr_FR"

    def test_c_locale_ignored(self) -> None:
        """The C pseudo-locale falls through to the default."""
        with (
            patch("locale.getlocale", return_value=("C", None)),
            patch.dict(os.environ, {"LANG": "C"}, clear=True),
        ):
            assert get_system_locale() == "en_US"

    def test_raise_on_failure(self) -> None:
        """raise_on_failure turns the fallback into an error."""
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {}, clear=True),
            pytest.raises(RuntimeError, match="Could not determine system locale"),
        ):
            get_system_locale(raise_on_failure=True)
