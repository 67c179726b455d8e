"""Host-runtime conversions for primitive values.

Scripted values follow the conversion rules of a JavaScript host: text like
``" 0x1F "`` is a number, ``1e21`` prints as ``"1e+21"``, and bit operations
work on 32-bit integers. The helpers here reproduce those rules so the cast
layer can build its looser semantics on top of them.
"""

import math
import re
from decimal import Decimal

from loosetype.domain.values import ABSENT, ValueKind, is_nullish, is_number, kind_of

# Characters removed by the host's String.prototype.trim()
HOST_WHITESPACE = (
    "\t\n\v\f\r \xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)

DECIMAL_PATTERN = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)
RADIX_PATTERN = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
RADIX_BASES = {"x": 16, "o": 8, "b": 2}

# Largest magnitude printed without an exponent
EXPONENT_THRESHOLD = 21

# int() refuses longer digit strings (sys.get_int_max_str_digits)
INTEGER_CHUNK_DIGITS = 4000


def _parse_text(text: str) -> float:
    text = text.strip(HOST_WHITESPACE)
    if not text:
        return 0.0
    if RADIX_PATTERN.fullmatch(text):
        as_int = int(text[2:], RADIX_BASES[text[1].lower()])
        try:
            return float(as_int)
        except OverflowError:
            return math.inf
    if DECIMAL_PATTERN.fullmatch(text):
        return float(text)
    return math.nan


def parse_number(value: object) -> int | float:
    """Convert any value to a number the way the host runtime does.

    Args:
        value: Value to convert.

    Returns:
        The numeric value, which may be NaN or infinite. Integers and floats
        pass through unchanged; booleans become 0 or 1; null becomes 0 and an
        absent value becomes NaN. Text is trimmed, and empty text is 0.
        Sequences convert through their string form, mappings are NaN.
    """
    if isinstance(value, bool):
        return int(value)
    if is_number(value):
        return value
    if value is None:
        return 0
    if value is ABSENT:
        return math.nan
    if isinstance(value, str):
        return _parse_text(value)
    if kind_of(value) is ValueKind.SEQUENCE:
        return _parse_text(stringify(value))
    return math.nan


def _shortest_digits(x: float) -> tuple[str, int]:
    # repr() gives the shortest round-tripping digits for a float.
    _sign, digit_tuple, exponent = Decimal(repr(x)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    return stripped, int(exponent) + len(digits) - len(stripped)


def format_number(n: int | float) -> str:
    """Format a number as the host runtime would print it.

    Examples:
        ``format_number(2.0) == "2"``, ``format_number(1e-7) == "1e-7"``,
        ``format_number(float("nan")) == "NaN"``.
    """
    if isinstance(n, int):
        if abs(n) < 10**EXPONENT_THRESHOLD:
            return str(n)
        try:
            n = float(n)
        except OverflowError:
            n = math.inf if n > 0 else -math.inf
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "Infinity" if n > 0 else "-Infinity"
    if n == 0:
        return "0"

    sign = "-" if n < 0 else ""
    digits, exponent = _shortest_digits(abs(n))
    size = len(digits)
    point = exponent + size  # position of the decimal point within digits

    if size <= point <= EXPONENT_THRESHOLD:
        body = digits + "0" * (point - size)
    elif 0 < point <= EXPONENT_THRESHOLD:
        body = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        body = "0." + "0" * -point + digits
    else:
        power = point - 1
        mantissa = digits[0] + (f".{digits[1:]}" if size > 1 else "")
        body = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
    return sign + body


def stringify(value: object) -> str:
    """Convert any value to text the way the host runtime does.

    Null is ``"null"``, an absent value is ``"undefined"``, booleans are
    lower-case, and sequences are joined with commas (null-ish items print
    as empty text). Mappings print as ``"[object Object]"`` and associative
    maps as ``"[object Map]"``.
    """
    if value is None:
        return "null"
    if value is ABSENT:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return format_number(value)
    if isinstance(value, str):
        return value
    kind = kind_of(value)
    if kind is ValueKind.SEQUENCE:
        return ",".join("" if is_nullish(item) else stringify(item) for item in value)
    if kind is ValueKind.MAPPING:
        return "[object Object]"
    if kind is ValueKind.ASSOCIATIVE_MAP:
        return "[object Map]"
    return str(value)


def to_int32(n: int | float) -> int:
    """Wrap a number into a signed 32-bit integer (NaN and infinities are 0)."""
    if isinstance(n, float):
        if not math.isfinite(n):
            return 0
        n = math.trunc(n)
    n = int(n) & 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def is_nan(n: int | float) -> bool:
    """Return True if ``n`` is NaN. Integers of any size are never NaN."""
    return isinstance(n, float) and math.isnan(n)


def is_finite(n: int | float) -> bool:
    """Return True unless ``n`` is NaN or infinite.

    Unlike `math.isfinite`, integers too large for a float are accepted.
    """
    return not isinstance(n, float) or math.isfinite(n)


def parse_integer_text(text: str) -> int:
    """Convert optionally signed decimal digits to an exact integer.

    Args:
        text: Digits with an optional leading sign and surrounding whitespace.

    Returns:
        The integer, however many digits it has.
    """
    text = text.strip()
    sign = -1 if text.startswith("-") else 1
    digits = text.lstrip("+-")
    value = 0
    for start in range(0, len(digits), INTEGER_CHUNK_DIGITS):
        chunk = digits[start : start + INTEGER_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return sign * value
