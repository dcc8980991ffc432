from boundednumbers.functions import cyclic_wrap_float

from .constants import HUE_360


def normalize_hue(h: float) -> float:
    """Wrap a hue angle in degrees into [0, 360)."""
    h = float(cyclic_wrap_float(float(h), 0.0, HUE_360))
    # the wrap is inclusive of its upper bound
    return 0.0 if h >= HUE_360 else h


def hue_from_unit_rgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Shared hue computation of the HSL and HSV conversions.

    Returns:
        (hue in degrees, max channel, min channel). Hue is 0 for achromatic input.
    """
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn

    if delta == 0:
        return 0.0, mx, mn

    if mx == r:
        h = 60.0 * (((g - b) / delta) % 6)
    elif mx == g:
        h = 60.0 * ((b - r) / delta + 2)
    else:
        h = 60.0 * ((r - g) / delta + 4)

    return normalize_hue(h), mx, mn
