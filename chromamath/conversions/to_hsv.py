from .hue import hue_from_unit_rgb, normalize_hue


def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB in [0, 1] to HSV.

    Returns:
        (h, s, v): hue in degrees [0, 360), saturation and value in [0, 1]
    """
    h, mx, mn = hue_from_unit_rgb(r, g, b)
    s = 0.0 if mx == 0 else (mx - mn) / mx
    return h, s, mx


def hsl_to_hsv(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert HSL to HSV; saturation/lightness/value in [0, 1]."""
    v = l + s * min(l, 1 - l)
    s_v = 0.0 if v == 0 else 2 * (1 - l / v)
    return normalize_hue(h), s_v, v
