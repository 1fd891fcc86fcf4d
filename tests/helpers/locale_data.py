"""In-memory locale data for negotiation tests.

FakeLocaleDataProvider satisfies the LocaleDataProvider protocol with a small
fixed table, so results do not move when Babel ships a new CLDR revision.
"""

from __future__ import annotations


class FakeLocaleDataProvider:
    """LocaleDataProvider with a fixed locale table."""

    NUMBERING_SYSTEMS: dict[str, frozenset[str]] = {
        "en": frozenset({"latn"}),
        "en-US": frozenset({"latn"}),
        "en-GB": frozenset({"latn"}),
        "de": frozenset({"latn"}),
        "de-CH": frozenset({"latn"}),
        "fr": frozenset({"latn"}),
        "ar": frozenset({"arab", "latn"}),
        "ar-EG": frozenset({"arab", "latn"}),
        "th": frozenset({"latn", "thai"}),
        "zh-Hans": frozenset({"latn", "hanidec"}),
        "zh-Hant": frozenset({"latn", "hanidec"}),
        "zh-Hant-TW": frozenset({"latn", "hanidec"}),
    }

    DEFAULTS: dict[str, str] = {"ar": "arab", "ar-EG": "arab"}

    def available_locales(self) -> frozenset[str]:
        return frozenset(self.NUMBERING_SYSTEMS)

    def is_supported(self, locale: str, key: str, value: str) -> bool:
        return key == "nu" and value in self.NUMBERING_SYSTEMS.get(locale, frozenset())

    def default_numbering_system(self, locale: str) -> str:
        return self.DEFAULTS.get(locale, "latn")
