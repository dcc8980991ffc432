"""
Chromamath - color space conversion and mixing
==============================================

Immutable color values in eight color spaces with explicit conversions
between every pair, a uniform component interface, and CSS-style
polar-aware mixing.

Quick Start
-----------
>>> from chromamath import HSL, LCH, RGB, mix
>>>
>>> # Convert color spaces
>>> HSL(96, 48, 59).to_rgb().to_int_tuple()
(140, 201, 100)
>>>
>>> # Introspect any space through its model
>>> [c.name for c in LCH.model.components]
['l', 'c', 'h', 'alpha']
>>>
>>> # Mix in a perceptual space; hues take the short way round
>>> purple = mix(LCH.model, RGB(255, 0, 0), RGB(0, 0, 255))

Modules
-------
- colors: Color classes and their ColorModel metadata
- conversions: Scalar conversion formulas between spaces
- transform: Interpolation primitives and mixing
"""

from .colors import (
    Color, ColorModel, ColorComponentInfo, ComponentSizeError,
    RGB, HSL, HSV, CMYK, XYZ, LAB, LUV, LCH,
    RGB_MODEL, HSL_MODEL, HSV_MODEL, CMYK_MODEL,
    XYZ_MODEL, LAB_MODEL, LUV_MODEL, LCH_MODEL,
    get_model,
)
from .transform import HueMode, lerp, hue_lerp, mix

__version__ = "1.0.0"

__all__ = [
    # Base contract
    "Color",
    "ColorModel",
    "ColorComponentInfo",
    "ComponentSizeError",

    # Color classes
    "RGB", "HSL", "HSV", "CMYK", "XYZ", "LAB", "LUV", "LCH",

    # Models
    "RGB_MODEL", "HSL_MODEL", "HSV_MODEL", "CMYK_MODEL",
    "XYZ_MODEL", "LAB_MODEL", "LUV_MODEL", "LCH_MODEL",
    "get_model",

    # Transforms
    "HueMode",
    "lerp",
    "hue_lerp",
    "mix",

    # Version
    "__version__",
]
