"""Generic options reader.

Implements the ECMA-402 option accessors (GetOptionsObject, GetOption,
GetNumberOption) over plain Python mappings. Option keys use the camelCase
names of the JavaScript API (``hoursDisplay``, ``fractionalDigits``) so that
option dictionaries are portable between the two.

Coercion rules:
    - ``None`` and missing keys mean "undefined" and yield the default.
    - String options coerce other values to text (``True`` -> ``"true"``,
      ``2.0`` -> ``"2"``) before checking the allowed values.
    - Number options accept int, float, Decimal, bool and numeric strings;
      NaN and out-of-range values raise, fractions are floored.
    - Numeric strings follow the JavaScript StringNumericLiteral grammar:
      ``"0x1F"``, ``".5"`` and ``"-Infinity"`` are numbers, while Python-only
      forms such as ``"1_000"``, ``"inf"`` or ``"nan"`` are not.

Python 3.13+.
"""

import math
import re
from collections.abc import Mapping, Sequence
from decimal import Decimal, InvalidOperation
from enum import StrEnum
from types import MappingProxyType
from typing import TypeAlias, TypeVar

from durationformat.diagnostics import (
    DurationFormatRangeError,
    DurationFormatTypeError,
    ErrorTemplate,
)

__all__ = [
    "Options",
    "get_enum_option",
    "get_number_option",
    "get_option",
    "get_options_object",
]

Options: TypeAlias = Mapping[str, object]

E = TypeVar("E", bound=StrEnum)

_EMPTY_OPTIONS: Options = MappingProxyType({})

_DECIMAL_LITERAL = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)
_NON_DECIMAL_LITERAL = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_RADIX = {"x": 16, "o": 8, "b": 2}


def get_options_object(options: object) -> Options:
    """Validate the options argument of a constructor.

    Args:
        options: None or a mapping of option names to values

    Returns:
        The mapping itself, or an empty read-only mapping for None

    Raises:
        DurationFormatTypeError: If options is neither None nor a mapping
    """
    if options is None:
        return _EMPTY_OPTIONS
    if isinstance(options, Mapping):
        return options
    raise DurationFormatTypeError(ErrorTemplate.options_not_mapping(type(options).__name__))


def _to_string(value: object) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case float() if math.isnan(value):
            return "NaN"
        case float() if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        case float() if value.is_integer():
            return str(int(value))
        case _:
            return str(value)


def get_option(
    options: Options,
    key: str,
    allowed: Sequence[str] | None = None,
    default: str | None = None,
) -> str | None:
    """Read a string option.

    Args:
        options: Options mapping
        key: Option name
        allowed: Allowed values, or None to accept any string
        default: Value returned when the option is absent

    Returns:
        The coerced option value, or default when absent

    Raises:
        DurationFormatRangeError: If the value is not in allowed

    Example:
        >>> get_option({"style": "long"}, "style", ("long", "short"), "short")
        'long'
        >>> get_option({}, "style", ("long", "short"), "short")
        'short'
    """
    raw = options.get(key)
    if raw is None:
        return default
    value = _to_string(raw)
    if allowed is not None and value not in allowed:
        raise DurationFormatRangeError(ErrorTemplate.option_value_invalid(key, value, allowed))
    return value


def get_enum_option(
    options: Options,
    key: str,
    enum_type: type[E],
    default: E,
) -> E:
    """Read a string option whose allowed values are the members of a StrEnum.

    Args:
        options: Options mapping
        key: Option name
        enum_type: StrEnum listing the allowed values
        default: Member returned when the option is absent

    Returns:
        The matching enum member

    Raises:
        DurationFormatRangeError: If the value is not a member value
    """
    value = get_option(options, key, tuple(member.value for member in enum_type))
    if value is None:
        return default
    return enum_type(value)


def _int_to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _parse_numeric_literal(text: str) -> float:
    """Convert a string the way JavaScript ToNumber does; NaN when malformed."""
    text = text.strip()
    if not text:
        return 0.0
    if _NON_DECIMAL_LITERAL.fullmatch(text):
        return _int_to_float(int(text[2:], _RADIX[text[1].lower()]))
    if _DECIMAL_LITERAL.fullmatch(text):
        return float(text)
    return math.nan


def _to_number(key: str, raw: object) -> float:
    match raw:
        case bool():
            return float(raw)
        case int():
            return _int_to_float(raw)
        case float():
            return raw
        case Decimal():
            try:
                return float(raw)
            except (ValueError, InvalidOperation):
                return math.nan
        case str():
            return _parse_numeric_literal(raw)
        case _:
            raise DurationFormatRangeError(ErrorTemplate.option_not_number(key, raw))


def get_number_option(
    options: Options,
    key: str,
    minimum: int,
    maximum: int,
    default: int | None = None,
) -> int | None:
    """Read an integer option bounded to [minimum, maximum].

    Args:
        options: Options mapping
        key: Option name
        minimum: Inclusive lower bound
        maximum: Inclusive upper bound
        default: Value returned when the option is absent (None keeps the
            "unspecified" state distinct from any number)

    Returns:
        The floored option value, or default when absent

    Raises:
        DurationFormatRangeError: If the value is not numeric, is NaN, or lies
            outside the bounds

    Example:
        >>> get_number_option({"fractionalDigits": 3}, "fractionalDigits", 0, 9)
        3
        >>> get_number_option({}, "fractionalDigits", 0, 9) is None
        True
    """
    raw = options.get(key)
    if raw is None:
        return default
    number = _to_number(key, raw)
    if math.isnan(number) or number < minimum or number > maximum:
        raise DurationFormatRangeError(
            ErrorTemplate.option_out_of_range(key, raw, minimum, maximum)
        )
    return math.floor(number)
