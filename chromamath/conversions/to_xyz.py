import numpy as np

from .constants import (
    CIE_EPSILON,
    CIE_KAPPA,
    D65_WHITE,
    SRGB_TO_XYZ,
    WHITE_U_PRIME,
    WHITE_V_PRIME,
)


def srgb_linearize(channel: float) -> float:
    """Undo the sRGB transfer curve."""
    if channel <= 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def unit_rgb_to_xyz(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert sRGB in [0, 1] to CIE XYZ (D65, Y of white = 1)."""
    linear = np.array([srgb_linearize(r), srgb_linearize(g), srgb_linearize(b)], dtype=np.float64)
    x, y, z = (float(c) for c in SRGB_TO_XYZ @ linear)
    return x, y, z


def _lightness_to_y(l: float) -> float:
    if l > CIE_KAPPA * CIE_EPSILON:
        return ((l + 16) / 116) ** 3
    return l / CIE_KAPPA


def lab_to_xyz(l: float, a: float, b: float) -> tuple[float, float, float]:
    """
    Convert CIE LAB to XYZ relative to the D65 white point.

    http://www.brucelindbloom.com/Eqn_Lab_to_XYZ.html
    """
    fy = (l + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    fx3 = fx ** 3
    fz3 = fz ** 3
    xr = fx3 if fx3 > CIE_EPSILON else (116 * fx - 16) / CIE_KAPPA
    yr = _lightness_to_y(l)
    zr = fz3 if fz3 > CIE_EPSILON else (116 * fz - 16) / CIE_KAPPA

    return xr * D65_WHITE[0], yr * D65_WHITE[1], zr * D65_WHITE[2]


def luv_to_xyz(l: float, u: float, v: float) -> tuple[float, float, float]:
    """
    Convert CIE LUV to XYZ relative to the D65 white point.

    http://www.brucelindbloom.com/Eqn_Luv_to_XYZ.html
    """
    if l == 0:
        return 0.0, 0.0, 0.0

    y = _lightness_to_y(l) * D65_WHITE[1]
    u_prime = u / (13 * l) + WHITE_U_PRIME
    v_prime = v / (13 * l) + WHITE_V_PRIME
    # v' == 0 has no chromaticity; keep the luminance only
    if v_prime == 0:
        return 0.0, y, 0.0

    x = y * 9 * u_prime / (4 * v_prime)
    z = y * (12 - 3 * u_prime - 20 * v_prime) / (4 * v_prime)
    return x, y, z
