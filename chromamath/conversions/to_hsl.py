from .hue import hue_from_unit_rgb, normalize_hue


def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB in [0, 1] to HSL.

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        (h, s, l): hue in degrees [0, 360), saturation and lightness in [0, 1]
    """
    h, mx, mn = hue_from_unit_rgb(r, g, b)
    l = (mx + mn) / 2
    delta = mx - mn

    denominator = 1 - abs(2 * l - 1)
    # out-of-gamut input can put lightness at or beyond the white point
    if delta == 0 or denominator <= 0:
        return h, 0.0, l

    return h, delta / denominator, l


def hsv_to_hsl(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert HSV to HSL; saturation/value/lightness in [0, 1]."""
    l = v * (1 - s / 2)
    if l == 0 or l == 1:
        return normalize_hue(h), 0.0, l
    return normalize_hue(h), (v - l) / min(l, 1 - l), l
