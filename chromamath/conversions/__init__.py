"""
Chromamath Color Space Conversions
==================================

Scalar conversion formulas between the supported color spaces. Every
function works on plain floats: RGB, HSL, HSV and CMYK channels in [0, 1],
hues in degrees, XYZ relative to a D65 white of Y = 1, LAB/LUV/LCH in their
CIE ranges. Scaling to the user-facing channel ranges (RGB 0-255, percent
saturation, ...) is done by the color classes in :mod:`chromamath.colors`.

Conversion graph
----------------
Only neighbouring spaces have a direct formula; everything else is routed
through the hubs RGB and XYZ::

    HSL ─┐              ┌─ LAB
    HSV ─┼── RGB ── XYZ ─┤
    CMYK ┘              └─ LUV ── LCH

Functions
---------
RGB → HSL / HSV / CMYK / XYZ:
    unit_rgb_to_hsl, unit_rgb_to_hsv, unit_rgb_to_cmyk, unit_rgb_to_xyz
HSL / HSV / CMYK / XYZ → RGB:
    hsl_to_unit_rgb, hsv_to_unit_rgb, cmyk_to_unit_rgb, xyz_to_unit_rgb
HSV ↔ HSL:
    hsv_to_hsl, hsl_to_hsv
XYZ ↔ LAB, XYZ ↔ LUV:
    xyz_to_lab, lab_to_xyz, xyz_to_luv, luv_to_xyz
LUV ↔ LCH:
    luv_to_lch, lch_to_luv

Examples
--------
>>> from chromamath.conversions import hsl_to_unit_rgb
>>> r, g, b = hsl_to_unit_rgb(96, 0.48, 0.59)
>>> round(r * 255), round(g * 255), round(b * 255)
(140, 201, 100)
"""

from .to_hsl import unit_rgb_to_hsl, hsv_to_hsl
from .to_hsv import unit_rgb_to_hsv, hsl_to_hsv
from .to_cmyk import unit_rgb_to_cmyk
from .to_rgb import (
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    cmyk_to_unit_rgb,
    xyz_to_unit_rgb,
    srgb_compand,
)
from .to_xyz import unit_rgb_to_xyz, lab_to_xyz, luv_to_xyz, srgb_linearize
from .to_lab import xyz_to_lab
from .to_luv import xyz_to_luv, lch_to_luv
from .to_lch import luv_to_lch
from .hue import normalize_hue

__all__ = [
    # RGB → *
    'unit_rgb_to_hsl',
    'unit_rgb_to_hsv',
    'unit_rgb_to_cmyk',
    'unit_rgb_to_xyz',

    # * → RGB
    'hsl_to_unit_rgb',
    'hsv_to_unit_rgb',
    'cmyk_to_unit_rgb',
    'xyz_to_unit_rgb',

    # HSV ↔ HSL
    'hsv_to_hsl',
    'hsl_to_hsv',

    # CIE
    'xyz_to_lab',
    'lab_to_xyz',
    'xyz_to_luv',
    'luv_to_xyz',
    'luv_to_lch',
    'lch_to_luv',

    # Helpers
    'srgb_compand',
    'srgb_linearize',
    'normalize_hue',
]
