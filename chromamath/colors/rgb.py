from __future__ import annotations
from typing import TYPE_CHECKING, Tuple

from boundednumbers.functions import clamp

from .color_base import Color, channel
from .component import ColorComponentInfo, with_alpha_info
from .model import ColorModel
from ..conversions import unit_rgb_to_hsl, unit_rgb_to_hsv, unit_rgb_to_cmyk, unit_rgb_to_xyz

if TYPE_CHECKING:
    from .hsl import HSL
    from .hsv import HSV
    from .cmyk import CMYK
    from .xyz import XYZ

RGB_MAX = 255.0


class RGB(Color):
    """
    sRGB color, the hub of the device-dependent spaces.

    ``r``, ``g`` and ``b`` are in ``[0, 255]``; fractional values are kept
    as-is, and out-of-gamut results of CIE conversions are not clipped
    (see :meth:`clamp`).
    """
    __slots__ = ()

    r = channel(0, "Red in [0, 255]")
    g = channel(1, "Green in [0, 255]")
    b = channel(2, "Blue in [0, 255]")

    def __init__(self, r: float, g: float, b: float, alpha: float = 1.0) -> None:
        super().__init__((r, g, b, alpha))

    @classmethod
    def from_unit(cls, r: float, g: float, b: float, alpha: float = 1.0) -> RGB:
        """Build from channels in [0, 1]."""
        return cls(r * RGB_MAX, g * RGB_MAX, b * RGB_MAX, alpha)

    def to_unit(self) -> Tuple[float, float, float]:
        """Channels scaled to [0, 1], alpha excluded."""
        return self.r / RGB_MAX, self.g / RGB_MAX, self.b / RGB_MAX

    @property
    def is_in_gamut(self) -> bool:
        return all(0.0 <= c <= RGB_MAX for c in self._value[:3])

    def clamp(self) -> RGB:
        """Clip every channel into its valid range."""
        r, g, b = (float(clamp(c, 0.0, RGB_MAX)) for c in self._value[:3])
        return RGB(r, g, b, float(clamp(self.alpha, 0.0, 1.0)))

    def to_int_tuple(self) -> Tuple[int, int, int]:
        """Clipped and rounded 8-bit channels, alpha excluded."""
        clipped = self.clamp()
        return round(clipped.r), round(clipped.g), round(clipped.b)

    # ------------------ CONVERSIONS ------------------
    def to_rgb(self) -> RGB:
        return self

    def to_hsl(self) -> HSL:
        from .hsl import HSL
        h, s, l = unit_rgb_to_hsl(*self.to_unit())
        return HSL(h, s * 100, l * 100, self.alpha)

    def to_hsv(self) -> HSV:
        from .hsv import HSV
        h, s, v = unit_rgb_to_hsv(*self.to_unit())
        return HSV(h, s * 100, v * 100, self.alpha)

    def to_cmyk(self) -> CMYK:
        from .cmyk import CMYK
        c, m, y, k = unit_rgb_to_cmyk(*self.to_unit())
        return CMYK(c * 100, m * 100, y * 100, k * 100, self.alpha)

    def to_xyz(self) -> XYZ:
        from .xyz import XYZ
        return XYZ(*unit_rgb_to_xyz(*self.to_unit()), self.alpha)


RGB.model = ColorModel("RGB", RGB, with_alpha_info(
    ColorComponentInfo("r", False, 0.0, RGB_MAX),
    ColorComponentInfo("g", False, 0.0, RGB_MAX),
    ColorComponentInfo("b", False, 0.0, RGB_MAX),
))
