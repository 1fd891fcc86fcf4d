"""Duration unit catalog.

The ten duration units in their fixed traversal order, each with a static
catalog entry: category, allowed styles, digital default, and the option keys
read for it. Resolution code looks units up here instead of dispatching on
strings, so option names cannot drift from the unit list.

Unit table (ECMA-402 DurationFormat, Table "Internal slots and property names
of DurationFormat instances relevant to Intl.DurationFormat constructor"):

    unit          category    digital default  carries prevStyle
    years         base        short            no
    months        base        short            no
    weeks         base        short            no
    days          base        short            no
    hours         digital     numeric          yes
    minutes       digital     numeric          yes
    seconds       digital     numeric          yes
    milliseconds  fractional  numeric          yes
    microseconds  fractional  fractional       yes
    nanoseconds   fractional  fractional       no

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Final

from durationformat.enums import Style, UnitCategory

__all__ = [
    "BASE_STYLES",
    "DIGITAL_STYLES",
    "FRACTIONAL_STYLES",
    "UNIT_TABLE",
    "Unit",
    "UnitSpec",
]

BASE_STYLES: Final = (Style.LONG, Style.SHORT, Style.NARROW)
DIGITAL_STYLES: Final = (*BASE_STYLES, Style.NUMERIC, Style.TWO_DIGIT)
FRACTIONAL_STYLES: Final = (*BASE_STYLES, Style.FRACTIONAL)

_STYLES_BY_CATEGORY: Final = MappingProxyType({
    UnitCategory.BASE: BASE_STYLES,
    UnitCategory.DIGITAL: DIGITAL_STYLES,
    UnitCategory.FRACTIONAL: FRACTIONAL_STYLES,
})


class Unit(StrEnum):
    """Duration unit. Declaration order is the resolution order.

    StrEnum provides automatic string conversion: str(Unit.HOURS) == "hours"
    """

    YEARS = "years"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"
    NANOSECONDS = "nanoseconds"

    @property
    def spec(self) -> "UnitSpec":
        """Catalog entry for this unit."""
        return UNIT_TABLE[self]

    @property
    def style_key(self) -> str:
        """Option key holding the unit style (``"hours"``)."""
        return self.value

    @property
    def display_key(self) -> str:
        """Option key holding the unit display (``"hoursDisplay"``)."""
        return f"{self.value}Display"


@dataclass(frozen=True, slots=True)
class UnitSpec:
    """Static properties of one duration unit.

    Attributes:
        category: Base, digital or fractional
        digital_default: Style used when the global style is digital and the
            unit has no explicit style
        carries_style: Whether the resolved style becomes prevStyle for the
            next unit
        is_clock_field: Minutes and seconds; forced to 2-digit after a
            numeric unit and shown by default after one
        is_time_of_day: Hours, minutes and seconds; shown by default in the
            digital style
        is_subsecond: Milliseconds, microseconds and nanoseconds; numeric
            becomes fractional
    """

    category: UnitCategory
    digital_default: Style
    carries_style: bool
    is_clock_field: bool = False
    is_time_of_day: bool = False
    is_subsecond: bool = False

    @property
    def allowed_styles(self) -> tuple[Style, ...]:
        """Styles accepted for the unit's explicit style option."""
        return _STYLES_BY_CATEGORY[self.category]


UNIT_TABLE: Final = MappingProxyType({
    Unit.YEARS: UnitSpec(UnitCategory.BASE, Style.SHORT, carries_style=False),
    Unit.MONTHS: UnitSpec(UnitCategory.BASE, Style.SHORT, carries_style=False),
    Unit.WEEKS: UnitSpec(UnitCategory.BASE, Style.SHORT, carries_style=False),
    Unit.DAYS: UnitSpec(UnitCategory.BASE, Style.SHORT, carries_style=False),
    Unit.HOURS: UnitSpec(
        UnitCategory.DIGITAL, Style.NUMERIC, carries_style=True, is_time_of_day=True
    ),
    Unit.MINUTES: UnitSpec(
        UnitCategory.DIGITAL,
        Style.NUMERIC,
        carries_style=True,
        is_clock_field=True,
        is_time_of_day=True,
    ),
    Unit.SECONDS: UnitSpec(
        UnitCategory.DIGITAL,
        Style.NUMERIC,
        carries_style=True,
        is_clock_field=True,
        is_time_of_day=True,
    ),
    Unit.MILLISECONDS: UnitSpec(
        UnitCategory.FRACTIONAL, Style.NUMERIC, carries_style=True, is_subsecond=True
    ),
    Unit.MICROSECONDS: UnitSpec(
        UnitCategory.FRACTIONAL, Style.FRACTIONAL, carries_style=True, is_subsecond=True
    ),
    Unit.NANOSECONDS: UnitSpec(
        UnitCategory.FRACTIONAL, Style.FRACTIONAL, carries_style=False, is_subsecond=True
    ),
})
