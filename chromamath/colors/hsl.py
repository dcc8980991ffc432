from __future__ import annotations
from typing import TYPE_CHECKING

from .color_base import Color, channel
from .component import ColorComponentInfo, with_alpha_info
from .model import ColorModel
from ..conversions import hsl_to_unit_rgb, hsl_to_hsv

if TYPE_CHECKING:
    from .rgb import RGB
    from .hsv import HSV


class HSL(Color):
    """
    Hue, saturation, lightness: the cylindrical form of sRGB.

    ``h`` is an angle in degrees; ``s`` and ``l`` are percentages in ``[0, 100]``.
    """
    __slots__ = ()

    h = channel(0, "Hue in degrees")
    s = channel(1, "Saturation in [0, 100]")
    l = channel(2, "Lightness in [0, 100]")

    def __init__(self, h: float, s: float, l: float, alpha: float = 1.0) -> None:
        super().__init__((h, s, l, alpha))

    def to_rgb(self) -> RGB:
        from .rgb import RGB
        return RGB.from_unit(*hsl_to_unit_rgb(self.h, self.s / 100, self.l / 100), self.alpha)

    def to_hsl(self) -> HSL:
        return self

    def to_hsv(self) -> HSV:
        from .hsv import HSV
        h, s, v = hsl_to_hsv(self.h, self.s / 100, self.l / 100)
        return HSV(h, s * 100, v * 100, self.alpha)


HSL.model = ColorModel("HSL", HSL, with_alpha_info(
    ColorComponentInfo("h", True, 0.0, 360.0),
    ColorComponentInfo("s", False, 0.0, 100.0),
    ColorComponentInfo("l", False, 0.0, 100.0),
))
