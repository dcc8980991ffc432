"""
Chromamath Color Classes
========================

Immutable color values, one class per color space, all sharing the
:class:`Color` contract.

Features
--------
- Immutable color instances (attribute assignment raises ``AttributeError``)
- Explicit conversions (``to_rgb()``, ``to_lab()``, ...) between every pair of spaces
- Uniform component access: ``components()``, ``component_count()``,
  ``component_is_polar(i)``, ``from_components(...)``
- Static per-space metadata through :class:`ColorModel` (``LCH.model``)
- Polar-aware interpolation between any two colors

Usage
-----
>>> from chromamath.colors import HSL, LCH
>>> HSL(96, 48, 59).to_rgb().to_int_tuple()
(140, 201, 100)
>>> lch = LCH.model.create([50, 40, 120])
>>> lch.alpha
1.0
>>> [c.is_polar for c in LCH.model.components]
[False, False, True, False]

Color Classes
-------------
    - RGB:  sRGB, channels in [0, 255]
    - HSL:  hue degrees, saturation/lightness in [0, 100]
    - HSV:  hue degrees, saturation/value in [0, 100]
    - CMYK: naive CMYK, channels in [0, 100]
    - XYZ:  CIE XYZ, D65, Y of white = 1
    - LAB:  CIE L*a*b*
    - LUV:  CIE L*u*v*
    - LCH:  CIE LCh(uv), cylindrical LUV

Notes
-----
- Alpha is always the last component, in [0, 1], default 1
- Hues are read modulo 360 and produced in [0, 360)
"""

from .color_base import Color
from .component import ColorComponentInfo, ComponentSizeError
from .model import ColorModel
from .rgb import RGB
from .hsl import HSL
from .hsv import HSV
from .cmyk import CMYK
from .xyz import XYZ
from .lab import LAB
from .luv import LUV
from .lch import LCH
from .color import color_convert, get_model, model_registry

RGB_MODEL = RGB.model
HSL_MODEL = HSL.model
HSV_MODEL = HSV.model
CMYK_MODEL = CMYK.model
XYZ_MODEL = XYZ.model
LAB_MODEL = LAB.model
LUV_MODEL = LUV.model
LCH_MODEL = LCH.model

__all__ = [
    'Color', 'ColorModel', 'ColorComponentInfo', 'ComponentSizeError',
    'RGB', 'HSL', 'HSV', 'CMYK', 'XYZ', 'LAB', 'LUV', 'LCH',
    'RGB_MODEL', 'HSL_MODEL', 'HSV_MODEL', 'CMYK_MODEL',
    'XYZ_MODEL', 'LAB_MODEL', 'LUV_MODEL', 'LCH_MODEL',
    'color_convert', 'get_model', 'model_registry',
]
