"""Conversions between colour representations.

Four representations are supported:

* decimal: a packed integer, ``0xAARRGGBB`` or ``0xRRGGBB``;
* hex: a ``#RRGGBB`` (or ``#RGB``) string;
* RGB: an `RGBColor` with channels in [0, 255];
* HSV: an `HSVColor` with hue in [0, 360) and saturation/value in [0, 1].

All functions are pure. Inputs outside the documented ranges are wrapped or
clamped as described per function rather than rejected.
"""

import logging
import math
import re

from loosetype.domain.value_objects import RGB_BLACK, RGB_WHITE, HSVColor, RGBColor
from loosetype.utils.primitives import is_finite, to_int32

__all__ = [
    "RGB_BLACK",
    "RGB_WHITE",
    "decimal_to_hex",
    "decimal_to_rgb",
    "hex_to_decimal",
    "hex_to_rgb",
    "hsv_to_rgb",
    "mix_rgb",
    "rgb_to_decimal",
    "rgb_to_hex",
    "rgb_to_hsv",
]

logger = logging.getLogger(__name__)

HEX_DIGITS_PATTERN = re.compile(r"[0-9a-fA-F]+")
COLOR_SPACE_SIZE = 0xFFFFFF + 1


def decimal_to_hex(decimal: int | float) -> str:
    """Convert a decimal colour to a ``#RRGGBB`` hex string.

    Negative values wrap around the 24-bit colour space. Values wider than
    24 bits are not truncated and produce more than six digits. Fractional
    values are truncated toward zero.

    Args:
        decimal: RGB colour as a packed integer.

    Returns:
        The colour as a ``#``-prefixed, zero-padded hex string.
    """
    if decimal < 0:
        decimal += COLOR_SPACE_SIZE
    if isinstance(decimal, float):
        decimal = math.trunc(decimal) if math.isfinite(decimal) else 0
    digits = format(decimal, "x")
    return f"#{'0' * (6 - len(digits))}{digits}"


def decimal_to_rgb(decimal: int | float) -> RGBColor:
    """Unpack a decimal colour into an `RGBColor`.

    The top byte is read as alpha. A zero alpha is reported as 255 so that
    packed colours without an alpha channel come out fully opaque.
    """
    packed = to_int32(decimal)
    a = (packed >> 24) & 0xFF
    r = (packed >> 16) & 0xFF
    g = (packed >> 8) & 0xFF
    b = packed & 0xFF
    return RGBColor(r=r, g=g, b=b, a=a if a > 0 else 255)


def hex_to_rgb(hex_string: str) -> RGBColor | None:
    """Convert a hex colour (``F00``, ``#03F``, ``#0033FF``) to an `RGBColor`.

    A single leading ``#`` is optional. Three-digit colours expand each digit
    into a pair (``F`` becomes ``FF``). No alpha is produced.

    Args:
        hex_string: Hex representation of the colour.

    Returns:
        The colour, or None if the text is not three or six hex digits.
    """
    digits = hex_string.removeprefix("#")
    if not HEX_DIGITS_PATTERN.fullmatch(digits) or len(digits) not in (3, 6):
        logger.debug("Not a hex colour: %r", hex_string)
        return None
    parsed = int(digits, 16)
    if len(digits) == 6:
        return RGBColor(
            r=(parsed >> 16) & 0xFF, g=(parsed >> 8) & 0xFF, b=parsed & 0xFF
        )
    r = (parsed >> 8) & 0xF
    g = (parsed >> 4) & 0xF
    b = parsed & 0xF
    return RGBColor(r=(r << 4) | r, g=(g << 4) | g, b=(b << 4) | b)


def rgb_to_hex(rgb: RGBColor) -> str:
    """Convert an `RGBColor` to a ``#RRGGBB`` hex string."""
    return decimal_to_hex(rgb_to_decimal(rgb))


def rgb_to_decimal(rgb: RGBColor) -> int | float:
    """Pack an `RGBColor` into a 24-bit decimal colour. Alpha is ignored."""
    return to_int32(to_int32(rgb.r) << 16) + to_int32(to_int32(rgb.g) << 8) + rgb.b


def hex_to_decimal(hex_string: str) -> int | float | None:
    """Convert a hex colour to a decimal colour.

    Returns:
        The packed colour, or None when ``hex_string`` is not a hex colour.
    """
    rgb = hex_to_rgb(hex_string)
    if rgb is None:
        return None
    return rgb_to_decimal(rgb)


def hsv_to_rgb(hsv: HSVColor) -> RGBColor:
    """Convert an `HSVColor` to an `RGBColor`.

    Hue wraps modulo 360 (NaN and infinite hues are read as 0); saturation
    and value are clamped to [0, 1]. Output channels are truncated, not
    rounded.
    """
    h = hsv.h % 360 if is_finite(hsv.h) else 0.0
    s = max(0.0, min(hsv.s, 1.0))
    v = max(0.0, min(hsv.v, 1.0))

    sector = math.floor(h / 60)
    f = (h / 60) - sector
    p = v * (1 - s)
    q = v * (1 - (s * f))
    t = v * (1 - (s * (1 - f)))

    channels = {
        1: (q, v, p),
        2: (p, v, t),
        3: (p, q, v),
        4: (t, p, v),
        5: (v, p, q),
    }
    r, g, b = channels.get(sector, (v, t, p))
    return RGBColor(r=math.floor(r * 255), g=math.floor(g * 255), b=math.floor(b * 255))


def rgb_to_hsv(rgb: RGBColor) -> HSVColor:
    """Convert an `RGBColor` to an `HSVColor`.

    Achromatic colours (all channels equal) report a hue and saturation of 0.
    """
    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255
    x = min(r, g, b)
    v = max(r, g, b)

    h = 0.0
    s = 0.0
    if x != v:
        if r == x:
            f, i = g - b, 3
        elif g == x:
            f, i = b - r, 5
        else:
            f, i = r - g, 1
        h = ((i - (f / (v - x))) * 60) % 360
        s = (v - x) / v

    return HSVColor(h=h, s=s, v=v)


def mix_rgb(rgb0: RGBColor, rgb1: RGBColor, fraction1: float) -> RGBColor:
    """Linearly interpolate between two colours.

    Args:
        rgb0: The colour at ``fraction1 <= 0``.
        rgb1: The colour at ``fraction1 >= 1``.
        fraction1: Interpolation parameter; 0.5 mixes the colours equally.

    Returns:
        ``rgb0`` or ``rgb1`` unchanged at the boundaries, otherwise the blended
        colour (channels may be fractional, alpha is not blended).
    """
    if fraction1 <= 0:
        return rgb0
    if fraction1 >= 1:
        return rgb1
    fraction0 = 1 - fraction1
    return RGBColor(
        r=(fraction0 * rgb0.r) + (fraction1 * rgb1.r),
        g=(fraction0 * rgb0.g) + (fraction1 * rgb1.g),
        b=(fraction0 * rgb0.b) + (fraction1 * rgb1.b),
    )
