"""Quickstart example for durationformat.

This example demonstrates constructing DurationFormat instances, reading the
resolved options, and handling invalid option combinations.

Note: Examples print full resolved_options() output only where it is short;
in production, read the keys you need.
"""

from durationformat import (
    DurationFormat,
    DurationFormatRangeError,
    DurationFormatTypeError,
    Unit,
)
from durationformat.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Defaults
print("=" * 50)
print("Example 1: Defaults")
print("=" * 50)

fmt = DurationFormat.create("en-US")
print(fmt)
print(fmt.resolved_options()["style"], fmt.resolved_options()["hours"])
# Output: short short

# Example 2: Digital style
print("\n" + "=" * 50)
print("Example 2: Digital Style")
print("=" * 50)

fmt = DurationFormat.create("en", {"style": "digital", "fractionalDigits": 3})
for unit in (Unit.HOURS, Unit.MINUTES, Unit.SECONDS, Unit.MILLISECONDS):
    options = fmt.spec.unit(unit)
    print(f"{unit:>12}: {options.style} ({options.display})")
# Output:
#        hours: numeric (always)
#      minutes: 2-digit (always)
#      seconds: 2-digit (always)
# milliseconds: fractional (auto)

# Example 3: Numbering systems
print("\n" + "=" * 50)
print("Example 3: Numbering Systems")
print("=" * 50)

for locales, options in [
    ("ar-EG", None),
    ("ar-EG", {"numberingSystem": "latn"}),
    ("ar-EG-u-nu-latn", None),
    ("en", {"numberingSystem": "arab"}),
]:
    fmt = DurationFormat.create(locales, options)
    print(f"{locales!r:20} {options!r:30} -> {fmt.locale} / {fmt.numbering_system}")
# Output:
# 'ar-EG'              None                           -> ar-EG / arab
# 'ar-EG'              {'numberingSystem': 'latn'}    -> ar-EG-u-nu-latn / latn
# 'ar-EG-u-nu-latn'    None                           -> ar-EG-u-nu-latn / latn
# 'en'                 {'numberingSystem': 'arab'}    -> en / latn

# Example 4: Locale matching
print("\n" + "=" * 50)
print("Example 4: Locale Matching")
print("=" * 50)

print(DurationFormat.create("zh-TW").locale)
# Output: zh-Hant-TW
print(DurationFormat.supported_locales_of(["de-AT", "qaa", "ja"]))
# Output: ['de-AT', 'ja']

# Example 5: Errors
print("\n" + "=" * 50)
print("Example 5: Errors")
print("=" * 50)

try:
    DurationFormat.create("en", {"hours": "numeric", "minutes": "long"})
except DurationFormatRangeError as e:
    print(e)
# Output:
# error[NUMERIC_CHAIN_BROKEN]: Unit 'minutes' cannot use style 'long' after a 'numeric' unit
#   = option: minutes
#   = unit: minutes
#   ...

try:
    DurationFormat.create("en", {"millisecondsDisplay": "always", "style": "digital"})
except DurationFormatRangeError as e:
    if e.diagnostic is not None:
        print(DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(e.diagnostic))
# Output: FRACTIONAL_DISPLAY_ALWAYS: Unit 'milliseconds' cannot combine ...

try:
    DurationFormat.create("en", "long")
except DurationFormatTypeError as e:
    print(type(e).__name__, e.category)
# Output: DurationFormatTypeError type

print("\n" + "=" * 50)
print("All examples completed successfully!")
print("=" * 50)
