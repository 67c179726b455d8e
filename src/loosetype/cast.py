"""Utilities for casting and comparing scripted values.

Scripted values juggle types more loosely than Python does: adding 1 to the
text "hello" gives 1 (the text is cast to 0), ``"false"`` is a false
boolean, and list indices may be words like ``"last"``. Use these helpers
when coercing a value before computing with it.

Every function is total: invalid input resolves to a fallback value instead
of raising.
"""

import json
import logging
import math
import random
import re
from collections.abc import Sequence

from loosetype import color, sanitizer
from loosetype.config import DEFAULT_FALLBACK
from loosetype.domain.value_objects import ListIndex, RGBColor
from loosetype.domain.values import (
    ABSENT,
    AssociativeMap,
    RawValue,
    ValueKind,
    is_number,
    kind_of,
)
from loosetype.utils.primitives import (
    HOST_WHITESPACE,
    is_finite,
    is_nan,
    parse_integer_text,
    parse_number,
    stringify,
)

__all__ = [
    "LIST_ALL",
    "LIST_INVALID",
    "as_numbered_item",
    "compare",
    "is_big_int",
    "is_int",
    "is_white_space",
    "to_array",
    "to_big_int",
    "to_boolean",
    "to_list_index",
    "to_map",
    "to_number",
    "to_object",
    "to_object_like",
    "to_rgb_color_list",
    "to_rgb_color_object",
    "to_string",
]

logger = logging.getLogger(__name__)

LIST_ALL = ListIndex.ALL
LIST_INVALID = ListIndex.INVALID

OPAQUE_BLACK = RGBColor(r=0, g=0, b=0, a=255)
NUMBERED_ITEM_PATTERN = re.compile(r"\(([0-9]+)\) ?")
INTEGER_TEXT_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")


# ============================================================================
#                               Primitives
# ============================================================================


def to_number(value: RawValue) -> int | float:
    """Cast a value to a number, treating NaN as 0.

    Args:
        value: Value to cast.

    Returns:
        The number. Never NaN: values that do not convert become 0.
    """
    n = value if is_number(value) else parse_number(value)
    if is_nan(n):
        return 0
    return n


def to_boolean(value: RawValue) -> bool:
    """Cast a value to a boolean.

    Text is true unless it is empty, ``"0"`` or any casing of ``"false"``;
    note that ``"0.0"`` and whitespace are true. Other values follow the
    host rules: null-ish, 0 and NaN are false, and containers (even empty
    ones) are true, as is any other object.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return not (value in ("", "0") or value.lower() == "false")
    if kind_of(value) is ValueKind.ABSENT:
        return False
    if is_number(value):
        return not (value == 0 or is_nan(value))
    return True


def to_string(value: RawValue) -> str:
    """Cast a value to text using host string conversion."""
    return stringify(value)


def is_white_space(value: RawValue) -> bool:
    """Return True for null-ish values and text that is empty once trimmed."""
    if kind_of(value) is ValueKind.ABSENT:
        return True
    return isinstance(value, str) and not value.strip(HOST_WHITESPACE)


def _is_not_actually_zero(value: RawValue) -> bool:
    # Text such as "" or " " converts to 0 but has no zero digit in it.
    return isinstance(value, str) and "0" not in value


def compare(v1: RawValue, v2: RawValue) -> int | float:
    """Compare two values, numerically when possible.

    Both values are converted to numbers. Text that converts to 0 without
    containing a ``0`` digit (for example ``""`` or ``"\\t"``) does not count
    as a number. If either side is not a number, the values are compared as
    case-insensitive text.

    Args:
        v1: First value to compare.
        v2: Second value to compare.

    Returns:
        A negative number if ``v1 < v2``, 0 if they are equal, a positive
        number otherwise. Numeric comparisons return ``v1 - v2`` itself.
    """
    n1 = parse_number(v1)
    n2 = parse_number(v2)
    if n1 == 0 and _is_not_actually_zero(v1):
        n1 = math.nan
    elif n2 == 0 and _is_not_actually_zero(v2):
        n2 = math.nan

    if is_nan(n1) or is_nan(n2):
        s1 = stringify(v1).lower()
        s2 = stringify(v2).lower()
        if s1 < s2:
            return -1
        if s1 > s2:
            return 1
        return 0

    # inf - inf would be NaN
    if not is_finite(n1) and n1 == n2:
        return 0
    try:
        return n1 - n2
    except OverflowError:
        # an int too large for a float against a float
        return 1 if n1 > n2 else -1


def is_int(value: RawValue) -> bool:
    """Determine whether a value represents a round integer.

    NaN, infinities and booleans count as integers, numbers count when they
    have no fractional part, and text counts when it has no decimal point.
    """
    if isinstance(value, int):  # bool included
        return True
    if isinstance(value, float):
        return math.isnan(value) or math.isinf(value) or value.is_integer()
    if isinstance(value, str):
        return "." not in value
    return False


def is_big_int(value: RawValue) -> bool:
    """Determine whether a value can be widened to an arbitrary-size integer."""
    return is_int(value)


def to_big_int(value: RawValue) -> int:
    """Cast a value to an arbitrary-size integer.

    Integers pass through, integer text is converted exactly, and anything
    else goes through `to_number` and is truncated toward zero. NaN and
    infinities become 0.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and INTEGER_TEXT_PATTERN.fullmatch(value):
        return parse_integer_text(value)
    n = to_number(value)
    if not is_finite(n):
        return 0
    return math.trunc(n)


# ============================================================================
#                               Lists
# ============================================================================


def to_list_index(index: RawValue, length: int, accept_all: bool) -> int | ListIndex:
    """Compute a 1-based index into a list.

    Besides numbers, the words ``"all"`` (only when ``accept_all``),
    ``"last"``, ``"random"`` and ``"any"`` are recognised.

    Args:
        index: The requested index.
        length: Length of the list.
        accept_all: Whether ``"all"`` is allowed.

    Returns:
        A 1-based index, `ListIndex.ALL` when the whole list is meant, or
        `ListIndex.INVALID` when the index does not resolve to an item.
    """
    if not is_number(index):
        if index == "all":
            return LIST_ALL if accept_all else LIST_INVALID
        if index == "last":
            return length if length > 0 else LIST_INVALID
        if index in ("random", "any"):
            return random.randint(1, length) if length > 0 else LIST_INVALID
    n = to_number(index)
    if not is_finite(n):
        return LIST_INVALID
    position = math.floor(n)
    if position < 1 or position > length:
        return LIST_INVALID
    return position


def _wrap_item_number(n: int | float, count: int) -> int | float:
    if not is_finite(n):
        return 1
    modulus = abs((1 + count) or 1)
    if isinstance(n, int):
        # remainder takes the sign of the dividend, as math.fmod does
        wrapped = abs(n) % modulus
        if n < 0:
            wrapped = -wrapped
    else:
        wrapped = math.fmod(n, modulus)
    if wrapped == 0:
        return 1
    return int(wrapped) if wrapped.is_integer() else wrapped


def _has_option(valid: Sequence[str], position: int | float) -> bool:
    if isinstance(position, float) and not position.is_integer():
        return False
    position = int(position)
    return 0 <= position < len(valid) and valid[position] is not None


def as_numbered_item(
    value: str | int | float,
    count: int | None = None,
    valid: Sequence[str] | None = None,
) -> str:
    """Convert a numbered menu value to an item index or a menu option.

    Numbers are wrapped into ``1..count`` (``count`` defaults to the number
    of valid options). Text like ``"(2) circle"`` is read as item 2; other
    text is returned lower-cased.

    Args:
        value: The menu value.
        count: Number of items to wrap numbers around.
        valid: Optional lower-case valid options. When given, numbers with no
            option at that position, and text that is not an option, fall
            back to ``"1"``.

    Returns:
        The item index or option, as text.
    """
    if is_number(value):
        if count is None:
            count = len(valid) if valid is not None else 0
        position = _wrap_item_number(value, count)
        if valid is not None and not _has_option(valid, position):
            return "1"
        return stringify(position)

    text = stringify(value).lower()
    if not text.startswith("("):
        return text
    if match := NUMBERED_ITEM_PATTERN.match(text):
        position = parse_integer_text(match.group(1))
        if count:
            position = _wrap_item_number(position, count)
        if valid is not None and not _has_option(valid, position):
            return "1"
        return stringify(position)
    if valid is not None and text not in valid:
        return "1"
    return text


# ============================================================================
#                               Colours
# ============================================================================


def to_rgb_color_object(value: RawValue) -> RGBColor:
    """Cast a value to an `RGBColor`.

    Text starting with ``#`` is read as hex (opaque black if it is not a
    valid colour). Anything else is cast to a number and unpacked as a
    decimal colour.
    """
    if isinstance(value, str) and value.startswith("#"):
        rgb = color.hex_to_rgb(value)
        return rgb if rgb is not None else OPAQUE_BLACK
    return color.decimal_to_rgb(to_number(value))


def to_rgb_color_list(value: RawValue) -> list[float]:
    """Cast a value to an ``[r, g, b]`` list with channels in [0, 255]."""
    rgb = to_rgb_color_object(value)
    return [rgb.r, rgb.g, rgb.b]


# ============================================================================
#                               Containers
# ============================================================================


def to_object_like(
    value: RawValue, no_bad: bool = False, rehome_mapping: bool = False
) -> RawValue:
    """Cast a value to something container-shaped.

    Containers are returned as-is (sanitized when ``no_bad``). Text is parsed
    as JSON and the result cast again; anything else, including text that is
    not JSON, becomes an empty mapping.

    Args:
        value: Value to cast.
        no_bad: When True, null-ish values become an empty mapping and every
            result is sanitized.
        rehome_mapping: See `sanitizer.sanitize_object`.

    Returns:
        A mapping, a sequence, an associative map, or (only when ``no_bad``
        is False) the null-ish input itself.
    """
    kind = kind_of(value)
    if kind is ValueKind.ABSENT and no_bad:
        return {}
    if kind is not ValueKind.PRIMITIVE:
        if no_bad:
            return sanitizer.sanitize_value(value, DEFAULT_FALLBACK, rehome_mapping)
        return value
    if not isinstance(value, str) or value == "":
        return {}
    if no_bad:
        parsed = sanitizer.parse_json(value, DEFAULT_FALLBACK, rehome_mapping)
    else:
        try:
            parsed = json.loads(value)
        except ValueError:
            parsed = {}
    return to_object_like(parsed, no_bad, rehome_mapping)


def to_object(value: RawValue) -> dict:
    """Cast a value to a sanitized mapping.

    Null-ish values, sequences and associative maps become an empty
    mapping; text is parsed as JSON.
    """
    kind = kind_of(value)
    if kind in (ValueKind.ABSENT, ValueKind.SEQUENCE, ValueKind.ASSOCIATIVE_MAP):
        return {}
    if kind is ValueKind.MAPPING:
        return sanitizer.sanitize_object(value, DEFAULT_FALLBACK, True)
    return to_object(to_object_like(value, True, True))


def to_array(value: RawValue) -> list:
    """Cast a value to a sanitized list.

    Null-ish values and mappings become an empty list, an associative map
    becomes a list of ``[key, value]`` pairs, and text is parsed as JSON.
    """
    kind = kind_of(value)
    if kind is ValueKind.SEQUENCE:
        return sanitizer.sanitize_sequence(value, DEFAULT_FALLBACK)
    if kind is ValueKind.ASSOCIATIVE_MAP:
        return to_array([[key, item] for key, item in value.items()])
    if kind is ValueKind.MAPPING:
        return []
    return to_array(to_object_like(value, True, True))


def _pair(entry: RawValue) -> tuple[RawValue, RawValue]:
    if kind_of(entry) is not ValueKind.SEQUENCE:
        raise TypeError(f"Not a key/value pair: {entry!r}")
    key = entry[0] if len(entry) > 0 else ABSENT
    item = entry[1] if len(entry) > 1 else ABSENT
    return key, item


def to_map(value: RawValue) -> AssociativeMap:
    """Cast a value to a sanitized `AssociativeMap`.

    An associative map is sanitized in place and returned. A mapping's
    entries, or a sequence of ``[key, value]`` pairs, are copied into a new
    map; text is parsed as JSON first. Anything else, including a sequence
    with an item that is not a pair, becomes an empty map.
    """
    kind = kind_of(value)
    if kind is ValueKind.ASSOCIATIVE_MAP:
        return sanitizer.sanitize_map(value, DEFAULT_FALLBACK, True)
    if kind is ValueKind.MAPPING:
        entries = list(sanitizer.sanitize_object(value, DEFAULT_FALLBACK).items())
    elif kind is ValueKind.SEQUENCE:
        entries = to_array(value)
    elif isinstance(value, str):
        return to_map(to_object_like(value, True, True))
    else:
        return AssociativeMap()

    try:
        result = AssociativeMap(_pair(entry) for entry in entries)
    except TypeError as e:
        logger.debug("Cannot build a map from %r: %s", value, e)
        return AssociativeMap()
    return sanitizer.sanitize_map(result, DEFAULT_FALLBACK, True)
