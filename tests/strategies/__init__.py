"""Hypothesis strategies for durationformat property-based testing.

Strategies are organized by domain:

- options: DurationFormat option mappings and scalar option values
- locales: BCP 47 tags and locale lists

Usage:
    from tests.strategies import duration_options, locale_requests
    from tests.strategies.options import unit_styles

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - duration_options, locale_tags
"""

from .locales import locale_requests, locale_tags, numbering_systems
from .options import (
    displays,
    duration_options,
    fractional_digits,
    global_styles,
    out_of_range_fractional_digits,
    unit_styles,
    word_style_options,
)

__all__ = [
    "displays",
    "duration_options",
    "fractional_digits",
    "global_styles",
    "locale_requests",
    "locale_tags",
    "numbering_systems",
    "out_of_range_fractional_digits",
    "unit_styles",
    "word_style_options",
]
