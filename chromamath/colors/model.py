from __future__ import annotations
from typing import TYPE_CHECKING, Generic, Sequence, TypeVar

import numpy as np

from .component import ColorComponentInfo
from ..transform.interpolate import HueMode

if TYPE_CHECKING:
    from .color_base import Color

T = TypeVar("T", bound="Color")


class ColorModel(Generic[T]):
    """
    Metadata and factory for one color space.

    There is exactly one model per concrete color class, reachable as
    ``RGB.model``, ``LCH.model``, ... The model lets generic code introspect
    a space without an instance and move arbitrary colors into it.

    Attributes:
        name: Space name, e.g. ``"LCH"``
        color_type: The concrete :class:`Color` subclass of this space
        components: Channel descriptions, same order and size as ``Color.components()``
    """
    __slots__ = ("name", "color_type", "components", "_to_method")

    def __init__(self, name: str, color_type: type[T], components: Sequence[ColorComponentInfo]) -> None:
        self.name = name
        self.color_type = color_type
        self.components = tuple(components)
        self._to_method = f"to_{name.lower()}"

    @property
    def component_count(self) -> int:
        return len(self.components)

    def convert(self, color: Color) -> T:
        """Convert any color into this model's space."""
        return getattr(color, self._to_method)()

    def create(self, components: Sequence[float] | np.ndarray) -> T:
        """
        Create a color of this space from raw components.

        ``components`` must hold either ``component_count`` values or one
        less, in which case alpha defaults to 1.
        """
        return self.color_type.from_components(components)

    def mix(
        self,
        color1: Color,
        *args,
        hue_mode: HueMode = HueMode.SHORTEST,
    ) -> T:
        """
        Shortcut for :func:`chromamath.transform.mix` in this space.

        Takes ``color1, amount1, color2, amount2`` or one of the shorter forms.
        """
        from ..transform.mix import mix  # local import to avoid cycles

        return mix(self, color1, *args, hue_mode=hue_mode)

    def __repr__(self) -> str:
        names = ", ".join(c.name for c in self.components)
        return f"ColorModel({self.name}: {names})"
