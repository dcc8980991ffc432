from .constants import CIE_EPSILON, CIE_KAPPA, D65_WHITE


def _f(t: float) -> float:
    if t > CIE_EPSILON:
        return t ** (1 / 3)
    return (CIE_KAPPA * t + 16) / 116


def xyz_to_lab(x: float, y: float, z: float) -> tuple[float, float, float]:
    """
    Convert CIE XYZ (D65) to CIE LAB.

    http://www.brucelindbloom.com/Eqn_XYZ_to_Lab.html
    """
    fx = _f(x / D65_WHITE[0])
    fy = _f(y / D65_WHITE[1])
    fz = _f(z / D65_WHITE[2])

    l = 116 * fy - 16
    a = 500 * (fx - fy)
    b = 200 * (fy - fz)
    return l, a, b
