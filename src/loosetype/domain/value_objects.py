"""Module including value objects used across the package."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class RGBColor:
    """Value object representing an RGB colour.

    Channels are nominally integers in [0, 255]; interpolation can produce
    fractional channels. Alpha, when present, is also an integer in [0, 255]
    (255 is fully opaque).
    """

    r: float
    g: float
    b: float
    a: int | None = None


@dataclass(frozen=True)
class HSVColor:
    """Value object representing an HSV colour.

    Hue is in [0, 360); saturation and value are in [0, 1].
    """

    h: float
    s: float
    v: float


class ListIndex(str, Enum):
    """Special outcomes of resolving a list index."""

    ALL = "ALL"
    INVALID = "INVALID"


RGB_BLACK = RGBColor(r=0, g=0, b=0)
RGB_WHITE = RGBColor(r=255, g=255, b=255)
