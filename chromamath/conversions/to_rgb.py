import math

import numpy as np

from .constants import XYZ_TO_SRGB
from .hue import normalize_hue


def _sector_to_unit_rgb(h: float, chroma: float, m: float) -> tuple[float, float, float]:
    """Place ``chroma`` on the hexagon sector of hue ``h`` and lift by ``m``."""
    h_prime = normalize_hue(h) / 60.0
    x = chroma * (1 - abs(h_prime % 2 - 1))
    sector = int(math.floor(h_prime))

    if sector == 0:
        r, g, b = chroma, x, 0.0
    elif sector == 1:
        r, g, b = x, chroma, 0.0
    elif sector == 2:
        r, g, b = 0.0, chroma, x
    elif sector == 3:
        r, g, b = 0.0, x, chroma
    elif sector == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees, any value (wrapped modulo 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    chroma = (1 - abs(2 * l - 1)) * s
    return _sector_to_unit_rgb(h, chroma, l - chroma / 2)


def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to RGB.

    Args:
        h: Hue in degrees, any value (wrapped modulo 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    chroma = v * s
    return _sector_to_unit_rgb(h, chroma, v - chroma)


def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> tuple[float, float, float]:
    """Convert naive CMYK in [0, 1] to RGB in [0, 1]."""
    return (1 - c) * (1 - k), (1 - m) * (1 - k), (1 - y) * (1 - k)


def srgb_compand(channel: float) -> float:
    """Apply the sRGB transfer curve to a linear channel."""
    if channel <= 0.0031308:
        return 12.92 * channel
    return 1.055 * channel ** (1 / 2.4) - 0.055


def xyz_to_unit_rgb(x: float, y: float, z: float) -> tuple[float, float, float]:
    """
    Convert CIE XYZ (D65, Y of white = 1) to sRGB.

    Out-of-gamut colors produce channels outside [0, 1]; they are not clipped.
    """
    linear = XYZ_TO_SRGB @ np.array([x, y, z], dtype=np.float64)
    r, g, b = (srgb_compand(float(c)) for c in linear)
    return r, g, b
