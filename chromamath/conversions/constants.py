# No runtime configuration; every constant below is fixed by a standard.
import numpy as np

# CIE standard illuminant D65, 2° observer, Y normalized to 1
D65_WHITE = (0.95047, 1.0, 1.08883)

# CIE 15:2004 exact rational forms of the LAB/LUV threshold constants
CIE_EPSILON = 216 / 24389
CIE_KAPPA = 24389 / 27

# Linear sRGB -> XYZ (D65), IEC 61966-2-1
SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

XYZ_TO_SRGB = np.linalg.inv(SRGB_TO_XYZ)

# Chromaticity of the reference white, used by LUV
_denominator = D65_WHITE[0] + 15 * D65_WHITE[1] + 3 * D65_WHITE[2]
WHITE_U_PRIME = 4 * D65_WHITE[0] / _denominator
WHITE_V_PRIME = 9 * D65_WHITE[1] / _denominator

HUE_360 = 360.0

# Mixes whose amounts sum to less than this in magnitude are numerically dubious
NEAR_ZERO_MIX_SUM = 1e-9
