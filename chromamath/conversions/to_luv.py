import math

from .constants import CIE_EPSILON, CIE_KAPPA, D65_WHITE, WHITE_U_PRIME, WHITE_V_PRIME


def xyz_to_luv(x: float, y: float, z: float) -> tuple[float, float, float]:
    """
    Convert CIE XYZ (D65) to CIE LUV.

    http://www.brucelindbloom.com/Eqn_XYZ_to_Luv.html
    """
    denominator = x + 15 * y + 3 * z
    if denominator == 0:
        return 0.0, 0.0, 0.0

    yr = y / D65_WHITE[1]
    l = 116 * yr ** (1 / 3) - 16 if yr > CIE_EPSILON else CIE_KAPPA * yr
    u_prime = 4 * x / denominator
    v_prime = 9 * y / denominator

    return l, 13 * l * (u_prime - WHITE_U_PRIME), 13 * l * (v_prime - WHITE_V_PRIME)


def lch_to_luv(l: float, c: float, h: float) -> tuple[float, float, float]:
    """Convert the cylindrical LCh(uv) form back to rectangular LUV."""
    radians = math.radians(h)
    return l, c * math.cos(radians), c * math.sin(radians)
