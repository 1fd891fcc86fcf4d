"""Per-unit style and display resolution.

Implements GetDurationUnitOptions and the loop over the unit table that
drives it. Each unit's defaults and checks depend on the style resolved for
the previous unit of the digital chain (hours through microseconds), so the
units are resolved strictly in Unit declaration order with the previous
style threaded through as an explicit accumulator.

Rules for one unit:
    1. Explicit style: the ``<unit>`` option, restricted to the unit's
       allowed styles. displayDefault starts as "always".
    2. No explicit style:
       - global "digital": the unit's digital default; displayDefault is
         "always" for hours, minutes, seconds and "auto" otherwise
       - previous style numeric, 2-digit or fractional: "numeric";
         displayDefault is "always" for minutes and seconds, else "auto"
       - otherwise: the global style; displayDefault "auto"
    3. "numeric" on a subsecond unit becomes "fractional", displayDefault "auto".
    4. Display: the ``<unit>Display`` option, defaulting to displayDefault.
    5. Checks: "always" + "fractional" is rejected; after "fractional" only
       "fractional" is allowed; after "numeric"/"2-digit" only numeric-like or
       fractional styles are allowed, and minutes/seconds become "2-digit".

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from durationformat.diagnostics import (
    DurationFormatError,
    DurationFormatRangeError,
    ErrorTemplate,
)
from durationformat.enums import Display, GlobalStyle, Style
from durationformat.options import Options, get_enum_option, get_option
from durationformat.units import Unit

__all__ = [
    "DurationUnitOptions",
    "UnitOptions",
    "get_duration_unit_options",
    "global_style_to_unit_style",
    "resolve_duration_unit_options",
]


@dataclass(frozen=True, slots=True)
class UnitOptions:
    """Resolved style and display of one unit."""

    style: Style
    display: Display


@dataclass(frozen=True, slots=True)
class DurationUnitOptions:
    """Resolved options of all ten units.

    Iteration yields ``(unit, options)`` pairs in unit order.
    """

    years: UnitOptions
    months: UnitOptions
    weeks: UnitOptions
    days: UnitOptions
    hours: UnitOptions
    minutes: UnitOptions
    seconds: UnitOptions
    milliseconds: UnitOptions
    microseconds: UnitOptions
    nanoseconds: UnitOptions

    def __getitem__(self, unit: Unit) -> UnitOptions:
        return getattr(self, unit.value)  # type: ignore[no-any-return]

    def __iter__(self) -> Iterator[tuple[Unit, UnitOptions]]:
        for unit in Unit:
            yield unit, self[unit]

    def __len__(self) -> int:
        return len(Unit)


def global_style_to_unit_style(style: GlobalStyle) -> Style:
    """Map a word global style to the same unit style.

    Raises:
        DurationFormatError: For GlobalStyle.DIGITAL, which has no word
            counterpart; callers handle digital before reaching this mapping
    """
    match style:
        case GlobalStyle.LONG:
            return Style.LONG
        case GlobalStyle.SHORT:
            return Style.SHORT
        case GlobalStyle.NARROW:
            return Style.NARROW
        case _:
            raise DurationFormatError(ErrorTemplate.global_style_unmapped(str(style)))


def _explicit_style(unit: Unit, options: Options) -> Style | None:
    allowed = unit.spec.allowed_styles
    value = get_option(options, unit.style_key)
    if value is None:
        return None
    if value not in allowed:
        raise DurationFormatRangeError(
            ErrorTemplate.unit_style_invalid(unit.value, value, allowed)
        )
    return Style(value)


def get_duration_unit_options(
    unit: Unit,
    options: Options,
    base_style: GlobalStyle,
    prev_style: Style | None,
) -> UnitOptions:
    """Resolve style and display for one unit.

    Args:
        unit: Unit being resolved
        options: Options mapping
        base_style: Resolved global style
        prev_style: Style carried from the previous digital-chain unit, or
            None before hours

    Returns:
        Resolved UnitOptions

    Raises:
        DurationFormatRangeError: If the unit style is not allowed for the
            unit, the display value is not allowed, or the combination with
            prev_style is incompatible
    """
    spec = unit.spec
    style = _explicit_style(unit, options)
    display_default = Display.ALWAYS

    if style is None:
        if base_style is GlobalStyle.DIGITAL:
            if not spec.is_time_of_day:
                display_default = Display.AUTO
            style = spec.digital_default
        elif prev_style is not None and prev_style.is_digital_chain:
            if not spec.is_clock_field:
                display_default = Display.AUTO
            style = Style.NUMERIC
        else:
            display_default = Display.AUTO
            style = global_style_to_unit_style(base_style)

    if style is Style.NUMERIC and spec.is_subsecond:
        style = Style.FRACTIONAL
        display_default = Display.AUTO

    display = get_enum_option(options, unit.display_key, Display, display_default)

    if display is Display.ALWAYS and style is Style.FRACTIONAL:
        raise DurationFormatRangeError(ErrorTemplate.fractional_display_always(unit.value))

    if prev_style is Style.FRACTIONAL and style is not Style.FRACTIONAL:
        raise DurationFormatRangeError(
            ErrorTemplate.fractional_chain_broken(unit.value, str(style))
        )

    if prev_style is not None and prev_style.is_numeric_like:
        if not style.is_digital_chain:
            raise DurationFormatRangeError(
                ErrorTemplate.numeric_chain_broken(unit.value, str(style), str(prev_style))
            )
        if spec.is_clock_field:
            style = Style.TWO_DIGIT

    return UnitOptions(style=style, display=display)


def resolve_duration_unit_options(
    options: Options, base_style: GlobalStyle
) -> DurationUnitOptions:
    """Resolve all ten units in order.

    The first incompatible unit aborts resolution; no partial result is
    returned.

    Example:
        >>> resolved = resolve_duration_unit_options({}, GlobalStyle.DIGITAL)
        >>> resolved.hours
        UnitOptions(style=<Style.NUMERIC: 'numeric'>, display=<Display.ALWAYS: 'always'>)
        >>> resolved.minutes.style
        <Style.TWO_DIGIT: '2-digit'>
    """
    resolved: dict[str, UnitOptions] = {}
    prev_style: Style | None = None
    for unit in Unit:
        unit_options = get_duration_unit_options(unit, options, base_style, prev_style)
        resolved[unit.value] = unit_options
        if unit.spec.carries_style:
            prev_style = unit_options.style
    return DurationUnitOptions(**resolved)
