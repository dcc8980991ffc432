from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

import numpy as np


class ComponentSizeError(ValueError):
    """Raised when a component array does not fit the arity of a color space."""


@dataclass(frozen=True)
class ColorComponentInfo:
    """
    Static description of one channel of a color space.

    Attributes:
        name: Channel name, e.g. ``"h"`` or ``"alpha"``
        is_polar: True for angular channels (hues, in degrees), False for rectangular ones
        min: Smallest value the channel takes for colors converted from sRGB
        max: Largest value the channel takes for colors converted from sRGB
    """
    name: str
    is_polar: bool
    min: float
    max: float


ALPHA_INFO = ColorComponentInfo("alpha", False, 0.0, 1.0)


def with_alpha_info(*infos: ColorComponentInfo) -> tuple[ColorComponentInfo, ...]:
    """Append the universal trailing alpha channel to a space's channel list."""
    return (*infos, ALPHA_INFO)


def check_component_index(count: int, index: int) -> int:
    if not 0 <= index < count:
        raise IndexError(f"component index {index} out of range [0, {count})")
    return index


def check_component_size(count: int, components: Sequence[float] | np.ndarray, name: str = "color") -> tuple[float, ...]:
    """
    Validate a raw component array against a space of ``count`` components.

    Args:
        count: Number of components of the space, alpha included
        components: Sequence or 1-D array of length ``count`` or ``count - 1``
        name: Space name used in the error message

    Returns:
        The components as a tuple of floats, alpha appended (1.0) when omitted.

    Raises:
        ComponentSizeError: If the length is neither ``count`` nor ``count - 1``.
    """
    if isinstance(components, np.ndarray) and components.ndim != 1:
        raise ComponentSizeError(f"{name} expects a 1-D component array, got shape {components.shape}")

    values = tuple(float(c) for c in components)
    if len(values) == count - 1:
        return values + (1.0,)
    if len(values) != count:
        raise ComponentSizeError(
            f"{name} expects {count - 1} or {count} components, got {len(values)}"
        )
    return values
