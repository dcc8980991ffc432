"""
Scalar interpolation primitives used by :meth:`Color.interpolate` and :func:`mix`.
"""

from enum import IntEnum

from ..conversions.constants import HUE_360
from ..conversions.hue import normalize_hue


class HueMode(IntEnum):
    """
    Hue interpolation modes for cyclical channels (CSS Color 4 names in brackets).

    CW:       Clockwise, hue always increases [increasing]
    CCW:      Counterclockwise, hue always decreases [decreasing]
    SHORTEST: Shortest path (≤180° arc) - most common [shorter]
    LONGEST:  Longest path (≥180° arc) [longer]
    """
    CW = 0
    CCW = 1
    SHORTEST = 2
    LONGEST = 3


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation; ``t=0`` gives ``a`` and ``t=1`` gives ``b``."""
    return a + (b - a) * t


def hue_lerp(h0: float, h1: float, t: float, mode: HueMode = HueMode.SHORTEST) -> float:
    """
    Interpolate between two hue angles.

    Both angles are wrapped into [0, 360) first, then one of them is shifted
    by a full turn so that the plain linear blend travels the arc selected
    by ``mode``.

    Args:
        h0: Start hue in degrees, any value
        h1: End hue in degrees, any value
        t: Interpolation coefficient
        mode: Which arc to travel

    Returns:
        Interpolated hue in [0, 360)

    Example:
        >>> hue_lerp(350, 10, 0.5)
        0.0
        >>> hue_lerp(350, 10, 0.5, HueMode.LONGEST)
        180.0
    """
    h0 = normalize_hue(h0)
    h1 = normalize_hue(h1)
    delta = h1 - h0

    if mode == HueMode.SHORTEST:
        if delta > HUE_360 / 2:
            h0 += HUE_360
        elif delta < -HUE_360 / 2:
            h1 += HUE_360
    elif mode == HueMode.LONGEST:
        if 0 < delta < HUE_360 / 2:
            h0 += HUE_360
        elif -HUE_360 / 2 < delta <= 0:
            h1 += HUE_360
    elif mode == HueMode.CW:
        if h1 < h0:
            h1 += HUE_360
    elif mode == HueMode.CCW:
        if h0 < h1:
            h0 += HUE_360
    else:
        raise ValueError(f"Invalid hue mode: {mode!r}")

    return normalize_hue(lerp(h0, h1, t))
