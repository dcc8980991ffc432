from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Sequence, Tuple, Self, Callable, Union

import numpy as np
from boundednumbers.functions import clamp

from .component import check_component_index, check_component_size
from .model import ColorModel
from ..transform.interpolate import HueMode, hue_lerp, lerp

if TYPE_CHECKING:
    from .rgb import RGB
    from .hsl import HSL
    from .hsv import HSV
    from .cmyk import CMYK
    from .xyz import XYZ
    from .lab import LAB
    from .luv import LUV
    from .lch import LCH


def channel(index: int, doc: str) -> property:
    """Read-only named view on one slot of a color's component tuple."""
    return property(lambda self: self._value[index], doc=doc)


class Color(ABC):
    """
    One immutable point in one color space.

    Subclasses store their channels, alpha last, in a private tuple and
    expose them as named properties. Each subclass is paired with exactly
    one :class:`ColorModel` (``cls.model``) whose component metadata drives
    the generic operations defined here.

    Conversions follow a fixed graph with RGB and XYZ as hubs. The defaults
    below route every target through :meth:`to_rgb`; concrete spaces
    override the routes for which a shorter path exists::

        HSL ─┐              ┌─ LAB
        HSV ─┼── RGB ── XYZ ─┤
        CMYK ┘              └─ LUV ── LCH
    """
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    model: ClassVar[ColorModel]
    # color_convert(self, to_space) is attached by .color
    convert: Callable[[Color, Union[str, ColorModel]], Color]

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    def __init__(self, value: Sequence[float]) -> None:
        values = check_component_size(len(self.model.components), value, self.model.name)
        object.__setattr__(self, '_value', values)

    # ------------------ CONVERSIONS ------------------
    @abstractmethod
    def to_rgb(self) -> RGB:
        ...

    def to_hsl(self) -> HSL:
        return self.to_rgb().to_hsl()

    def to_hsv(self) -> HSV:
        return self.to_rgb().to_hsv()

    def to_cmyk(self) -> CMYK:
        return self.to_rgb().to_cmyk()

    def to_xyz(self) -> XYZ:
        return self.to_rgb().to_xyz()

    def to_lab(self) -> LAB:
        return self.to_xyz().to_lab()

    def to_luv(self) -> LUV:
        return self.to_xyz().to_luv()

    def to_lch(self) -> LCH:
        return self.to_luv().to_lch()

    def convert_to_this(self, other: Color) -> Self:
        """Convert ``other`` into the space of this color."""
        return self.model.convert(other)

    # ------------------ COMPONENTS ------------------
    @property
    def alpha(self) -> float:
        return self._value[-1]

    def component_count(self) -> int:
        """Number of components of this space, alpha included."""
        return len(self.model.components)

    def components(self) -> Tuple[float, ...]:
        """Channel values in model order; the last one is always alpha."""
        return self._value

    def component_is_polar(self, i: int) -> bool:
        """
        Whether component ``i`` is an angle.

        Raises:
            IndexError: If ``i`` is not a valid component index.
        """
        return self.model.components[check_component_index(self.component_count(), i)].is_polar

    @classmethod
    def from_components(cls, components: Sequence[float] | np.ndarray) -> Self:
        """
        Build a color of this space from a raw component array.

        ``components`` holds either every component or every component but
        alpha, which then defaults to 1.

        Raises:
            ComponentSizeError: On any other length.
        """
        return cls(*check_component_size(len(cls.model.components), components, cls.model.name))

    def to_array(self) -> np.ndarray:
        """Components as a float64 numpy array, alpha last."""
        return np.asarray(self._value, dtype=np.float64)

    def with_alpha(self, alpha: float) -> Self:
        """Return a copy with alpha replaced, clamped to [0, 1]."""
        a = float(clamp(float(alpha), 0.0, 1.0))
        return self.from_components(self._value[:-1] + (a,))

    # ------------------ INTERPOLATION ------------------
    def interpolate(self, other: Color, t: float, hue_mode: HueMode = HueMode.SHORTEST) -> Self:
        """
        Blend this color with ``other`` in this color's space.

        ``other`` is converted into this space first. Polar channels travel
        the arc selected by ``hue_mode`` (the shorter one by default), all
        other channels, alpha included, are blended linearly.

        Args:
            other: Color in any space
            t: 0 returns this color's values, 1 returns ``other``'s
            hue_mode: Arc used for polar channels

        Returns:
            New color of this space.
        """
        end = self.convert_to_this(other).components()
        values = tuple(
            hue_lerp(a, b, t, hue_mode) if info.is_polar else lerp(a, b, t)
            for info, a, b in zip(self.model.components, self._value, end)
        )
        return self.from_components(values)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{info.name}={value:g}" for info, value in zip(self.model.components, self._value)
        )
        return f"{self.__class__.__name__}({fields})"

    def __reduce__(self):
        return self.__class__, self._value
