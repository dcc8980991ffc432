from __future__ import annotations
from typing import Union

from .color_base import Color
from .model import ColorModel
from .rgb import RGB
from .hsl import HSL
from .hsv import HSV
from .cmyk import CMYK
from .xyz import XYZ
from .lab import LAB
from .luv import LUV
from .lch import LCH


def build_registry(*classes: type[Color]) -> dict[str, ColorModel]:
    return {cls.model.name.lower(): cls.model for cls in classes}


model_registry: dict[str, ColorModel] = build_registry(RGB, HSL, HSV, CMYK, XYZ, LAB, LUV, LCH)


def get_model(name: Union[str, ColorModel]) -> ColorModel:
    """
    Look up a color model by (case-insensitive) name.

    A :class:`ColorModel` is returned unchanged, so callers can accept either.
    """
    if isinstance(name, ColorModel):
        return name
    model = model_registry.get(name.lower())
    if model is None:
        raise ValueError(
            f"Unsupported color space: {name!r}; expected one of {sorted(model_registry)}"
        )
    return model


def color_convert(self: Color, to_space: Union[str, ColorModel]) -> Color:
    """
    Convert this color to another space given by name or model.

    Args:
        to_space: Target space, e.g. ``"lab"`` or ``LAB.model``

    Returns:
        New color in the target space (``self`` if already there)
    """
    return get_model(to_space).convert(self)


Color.convert = color_convert
