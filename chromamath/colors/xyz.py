from __future__ import annotations
from typing import TYPE_CHECKING

from .color_base import Color, channel
from .component import ColorComponentInfo, with_alpha_info
from .model import ColorModel
from ..conversions import xyz_to_unit_rgb, xyz_to_lab, xyz_to_luv
from ..conversions.constants import D65_WHITE

if TYPE_CHECKING:
    from .rgb import RGB
    from .lab import LAB
    from .luv import LUV


class XYZ(Color):
    """
    CIE 1931 XYZ relative to the D65 white point, with Y of white = 1.

    XYZ is the hub of the CIE spaces: LAB and LUV are derived from it, and
    it is the only bridge between them and sRGB.
    """
    __slots__ = ()

    x = channel(0, "X tristimulus")
    y = channel(1, "Y tristimulus (luminance)")
    z = channel(2, "Z tristimulus")

    def __init__(self, x: float, y: float, z: float, alpha: float = 1.0) -> None:
        super().__init__((x, y, z, alpha))

    def to_rgb(self) -> RGB:
        from .rgb import RGB
        return RGB.from_unit(*xyz_to_unit_rgb(self.x, self.y, self.z), self.alpha)

    def to_xyz(self) -> XYZ:
        return self

    def to_lab(self) -> LAB:
        from .lab import LAB
        return LAB(*xyz_to_lab(self.x, self.y, self.z), self.alpha)

    def to_luv(self) -> LUV:
        from .luv import LUV
        return LUV(*xyz_to_luv(self.x, self.y, self.z), self.alpha)


XYZ.model = ColorModel("XYZ", XYZ, with_alpha_info(
    ColorComponentInfo("x", False, 0.0, D65_WHITE[0]),
    ColorComponentInfo("y", False, 0.0, D65_WHITE[1]),
    ColorComponentInfo("z", False, 0.0, D65_WHITE[2]),
))
