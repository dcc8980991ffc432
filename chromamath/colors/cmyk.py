from __future__ import annotations
from typing import TYPE_CHECKING

from .color_base import Color, channel
from .component import ColorComponentInfo, with_alpha_info
from .model import ColorModel
from ..conversions import cmyk_to_unit_rgb

if TYPE_CHECKING:
    from .rgb import RGB


class CMYK(Color):
    """Naive device CMYK, every channel a percentage in ``[0, 100]``."""
    __slots__ = ()

    c = channel(0, "Cyan in [0, 100]")
    m = channel(1, "Magenta in [0, 100]")
    y = channel(2, "Yellow in [0, 100]")
    k = channel(3, "Key (black) in [0, 100]")

    def __init__(self, c: float, m: float, y: float, k: float, alpha: float = 1.0) -> None:
        super().__init__((c, m, y, k, alpha))

    def to_rgb(self) -> RGB:
        from .rgb import RGB
        return RGB.from_unit(*cmyk_to_unit_rgb(self.c / 100, self.m / 100, self.y / 100, self.k / 100), self.alpha)

    def to_cmyk(self) -> CMYK:
        return self


CMYK.model = ColorModel("CMYK", CMYK, with_alpha_info(
    ColorComponentInfo("c", False, 0.0, 100.0),
    ColorComponentInfo("m", False, 0.0, 100.0),
    ColorComponentInfo("y", False, 0.0, 100.0),
    ColorComponentInfo("k", False, 0.0, 100.0),
))
