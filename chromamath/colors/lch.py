from __future__ import annotations
from typing import TYPE_CHECKING

from .color_base import Color, channel
from .component import ColorComponentInfo, with_alpha_info
from .model import ColorModel
from ..conversions import lch_to_luv

if TYPE_CHECKING:
    from .rgb import RGB
    from .xyz import XYZ
    from .luv import LUV


class LCH(Color):
    """
    CIE LCh(uv), the cylindrical representation of :class:`LUV`.

    ``l``, lightness, is a percentage, typically in ``[0, 100]``.
    ``c``, chroma, is typically in ``[0, 180]`` for sRGB colors but unbounded.
    ``h``, hue, is an angle in degrees; any value is accepted and read modulo 360.

    Every conversion except :meth:`to_luv` goes through LUV, so ``to_lab``
    travels LCH → LUV → XYZ → LAB.
    """
    __slots__ = ()

    l = channel(0, "Lightness, typically in [0, 100]")
    c = channel(1, "Chroma")
    h = channel(2, "Hue in degrees")

    def __init__(self, l: float, c: float, h: float, alpha: float = 1.0) -> None:
        super().__init__((l, c, h, alpha))

    def to_rgb(self) -> RGB:
        from .rgb import RGB
        if self.l == 0:
            return RGB(0.0, 0.0, 0.0, self.alpha)
        return self.to_luv().to_xyz().to_rgb()

    def to_xyz(self) -> XYZ:
        return self.to_luv().to_xyz()

    def to_luv(self) -> LUV:
        from .luv import LUV
        return LUV(*lch_to_luv(self.l, self.c, self.h), self.alpha)

    def to_lch(self) -> LCH:
        return self


LCH.model = ColorModel("LCH", LCH, with_alpha_info(
    ColorComponentInfo("l", False, 0.0, 100.0),
    ColorComponentInfo("c", False, 0.0, 179.04),
    ColorComponentInfo("h", True, 0.0, 360.0),
))
