from __future__ import annotations
import warnings
from numbers import Real
from typing import TYPE_CHECKING, TypeVar

from .interpolate import HueMode
from ..conversions.constants import NEAR_ZERO_MIX_SUM

if TYPE_CHECKING:
    from ..colors.color_base import Color
    from ..colors.model import ColorModel

T = TypeVar("T", bound="Color")


def _split_mix_args(args: tuple) -> tuple[float, Color, float]:
    """Resolve the accepted call shapes to ``(amount1, color2, amount2)``."""
    if len(args) == 3:
        return args
    if len(args) == 2:
        if isinstance(args[0], Real):
            amount1, color2 = args
            return amount1, color2, 1 - amount1
        color2, amount2 = args
        return 1 - amount2, color2, amount2
    if len(args) == 1:
        return 0.5, args[0], 0.5
    raise TypeError(
        "mix() expects (color1, amount1, color2, amount2), (color1, amount1, color2), "
        f"(color1, color2, amount2) or (color1, color2); got {len(args) + 1} positional arguments"
    )


def mix(
    model: ColorModel[T],
    color1: Color,
    *args,
    hue_mode: HueMode = HueMode.SHORTEST,
) -> T:
    """
    Mix ``amount1`` of ``color1`` and ``amount2`` of ``color2`` in the space of ``model``.

    The full form is ``mix(model, color1, amount1, color2, amount2)``.

    This implements ``color-mix()`` from CSS Color Module 5
    (https://www.w3.org/TR/css-color-5/#color-mix). If the amounts sum to
    more than one they are normalized so the sum equals one. If they sum to
    less than one they are normalized as well, and the alpha of the result
    is multiplied by their sum. The scaled alpha is clamped to [0, 1], so a
    negative sum such as ``(0.5, -0.7)`` gives a fully transparent result.

    Omitted amounts follow CSS:

    - ``mix(model, color1, color2)`` mixes 50/50
    - ``mix(model, color1, amount1, color2)`` uses ``amount2 = 1 - amount1``
    - ``mix(model, color1, color2, amount2)`` uses ``amount1 = 1 - amount2``

    Args:
        model: Space in which to mix; both colors are converted into it
        color1: First color, any space
        *args: ``amount1, color2, amount2`` or one of the shorter forms above
        hue_mode: Arc used for polar channels

    Returns:
        New color of ``model``'s space

    Raises:
        ValueError: If the amounts sum to exactly 0.
        TypeError: If the positional arguments match none of the forms.

    Example:
        >>> from chromamath import LCH, RGB
        >>> mixed = mix(LCH.model, RGB(255, 0, 0), 0.3, RGB(0, 0, 255), 0.3)
        >>> round(mixed.alpha, 6)
        0.6
    """
    amount1, color2, amount2 = _split_mix_args(args)
    total = amount1 + amount2
    if total == 0:
        raise ValueError("mix amounts cannot sum to 0")
    if abs(total) < NEAR_ZERO_MIX_SUM:
        warnings.warn(
            f"mix amounts sum to {total!r}; the result is numerically unstable",
            RuntimeWarning,
            stacklevel=2,
        )

    result = model.convert(color1).interpolate(color2, amount2 / total, hue_mode)
    if total < 1:
        return result.with_alpha(result.alpha * total)
    return result
