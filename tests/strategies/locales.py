"""Hypothesis strategies for locale tags and locale lists.

Usage:
    from hypothesis import given
    from tests.strategies.locales import locale_requests

    @given(requested=locale_requests())
    def test_negotiation(requested):
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

# Base names grouped by script, in mixed case to exercise canonicalization.
_LOCALES_BY_SCRIPT = {
    "latin": ["en", "en-us", "EN-GB", "de", "de-CH", "de-at", "fr", "fr-CA"],
    "cjk": ["zh", "zh-TW", "zh-HK", "zh-Hans", "zh-hant-tw", "ja-JP"],
    "arabic": ["ar", "ar-EG", "ar-SA"],
    "thai": ["th", "th-TH"],
    "unknown": ["qaa", "xx-XX", "tlh"],
}

numbering_systems: SearchStrategy[str] = st.sampled_from(
    ["latn", "arab", "thai", "hanidec", "deva", "zzzz"]
)


@composite
def locale_tags(draw: st.DrawFn) -> str:
    """Generate a well-formed tag, sometimes carrying extensions.

    Events emitted:
    - locale_script={latin|cjk|arabic|thai|unknown}
    - locale_extension={none|nu|nu+ca}
    """
    script = draw(st.sampled_from(sorted(_LOCALES_BY_SCRIPT)))
    tag = draw(st.sampled_from(_LOCALES_BY_SCRIPT[script]))
    event(f"locale_script={script}")

    extension = draw(st.sampled_from(["none", "nu", "nu+ca"]))
    event(f"locale_extension={extension}")
    match extension:
        case "nu":
            tag = f"{tag}-u-nu-{draw(numbering_systems)}"
        case "nu+ca":
            tag = f"{tag}-u-ca-gregory-nu-{draw(numbering_systems)}"
    return tag


def locale_requests(max_size: int = 4) -> SearchStrategy[list[str]]:
    """Ordered locale lists, possibly empty."""
    return st.lists(locale_tags(), max_size=max_size)
