from __future__ import annotations
from typing import TYPE_CHECKING

from .color_base import Color, channel
from .component import ColorComponentInfo, with_alpha_info
from .model import ColorModel
from ..conversions import lab_to_xyz

if TYPE_CHECKING:
    from .rgb import RGB
    from .xyz import XYZ


class LAB(Color):
    """
    CIE L*a*b* (D65).

    ``l`` is a percentage, typically in ``[0, 100]``; ``a`` and ``b`` are
    unbounded but stay within about ``[-128, 128]`` for sRGB colors.
    """
    __slots__ = ()

    l = channel(0, "Lightness, typically in [0, 100]")
    a = channel(1, "Green-red axis")
    b = channel(2, "Blue-yellow axis")

    def __init__(self, l: float, a: float, b: float, alpha: float = 1.0) -> None:
        super().__init__((l, a, b, alpha))

    def to_rgb(self) -> RGB:
        return self.to_xyz().to_rgb()

    def to_xyz(self) -> XYZ:
        from .xyz import XYZ
        return XYZ(*lab_to_xyz(self.l, self.a, self.b), self.alpha)

    def to_lab(self) -> LAB:
        return self


LAB.model = ColorModel("LAB", LAB, with_alpha_info(
    ColorComponentInfo("l", False, 0.0, 100.0),
    ColorComponentInfo("a", False, -86.18, 98.23),
    ColorComponentInfo("b", False, -107.86, 94.48),
))
