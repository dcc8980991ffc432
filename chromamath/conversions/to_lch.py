import math

from .hue import normalize_hue


def luv_to_lch(l: float, u: float, v: float) -> tuple[float, float, float]:
    """
    Convert CIE LUV to its cylindrical form LCh(uv).

    http://www.brucelindbloom.com/Eqn_Luv_to_LCH.html
    """
    c = math.hypot(u, v)
    if c == 0:
        return l, 0.0, 0.0
    return l, c, normalize_hue(math.degrees(math.atan2(v, u)))
