from __future__ import annotations
from typing import TYPE_CHECKING

from .color_base import Color, channel
from .component import ColorComponentInfo, with_alpha_info
from .model import ColorModel
from ..conversions import luv_to_xyz, luv_to_lch

if TYPE_CHECKING:
    from .rgb import RGB
    from .xyz import XYZ
    from .lch import LCH


class LUV(Color):
    """
    CIE L*u*v* (D65).

    ``l`` is a percentage, typically in ``[0, 100]``; ``u`` and ``v`` are
    unbounded.
    """
    __slots__ = ()

    l = channel(0, "Lightness, typically in [0, 100]")
    u = channel(1, "u* chromaticity")
    v = channel(2, "v* chromaticity")

    def __init__(self, l: float, u: float, v: float, alpha: float = 1.0) -> None:
        super().__init__((l, u, v, alpha))

    def to_rgb(self) -> RGB:
        return self.to_xyz().to_rgb()

    def to_xyz(self) -> XYZ:
        from .xyz import XYZ
        return XYZ(*luv_to_xyz(self.l, self.u, self.v), self.alpha)

    def to_luv(self) -> LUV:
        return self

    def to_lch(self) -> LCH:
        from .lch import LCH
        return LCH(*luv_to_lch(self.l, self.u, self.v), self.alpha)


LUV.model = ColorModel("LUV", LUV, with_alpha_info(
    ColorComponentInfo("l", False, 0.0, 100.0),
    ColorComponentInfo("u", False, -83.08, 175.02),
    ColorComponentInfo("v", False, -134.12, 107.41),
))
