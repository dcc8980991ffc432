from __future__ import annotations
from typing import TYPE_CHECKING

from .color_base import Color, channel
from .component import ColorComponentInfo, with_alpha_info
from .model import ColorModel
from ..conversions import hsv_to_unit_rgb, hsv_to_hsl

if TYPE_CHECKING:
    from .rgb import RGB
    from .hsl import HSL


class HSV(Color):
    """
    Hue, saturation, value. ``h`` in degrees, ``s`` and ``v`` in ``[0, 100]``.
    """
    __slots__ = ()

    h = channel(0, "Hue in degrees")
    s = channel(1, "Saturation in [0, 100]")
    v = channel(2, "Value in [0, 100]")

    def __init__(self, h: float, s: float, v: float, alpha: float = 1.0) -> None:
        super().__init__((h, s, v, alpha))

    def to_rgb(self) -> RGB:
        from .rgb import RGB
        return RGB.from_unit(*hsv_to_unit_rgb(self.h, self.s / 100, self.v / 100), self.alpha)

    def to_hsl(self) -> HSL:
        from .hsl import HSL
        h, s, l = hsv_to_hsl(self.h, self.s / 100, self.v / 100)
        return HSL(h, s * 100, l * 100, self.alpha)

    def to_hsv(self) -> HSV:
        return self


HSV.model = ColorModel("HSV", HSV, with_alpha_info(
    ColorComponentInfo("h", True, 0.0, 360.0),
    ColorComponentInfo("s", False, 0.0, 100.0),
    ColorComponentInfo("v", False, 0.0, 100.0),
))
