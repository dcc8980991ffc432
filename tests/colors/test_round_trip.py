from itertools import product

from chromamath import RGB, HSL, HSV, CMYK, XYZ, LAB, LUV, LCH
from ..samples import samples_rgb
from ..utils import assert_colors_close

ALL_TYPES = [RGB, HSL, HSV, CMYK, XYZ, LAB, LUV, LCH]


def test_round_trip_every_pair():
    for rgb, (space_a, space_b) in product(samples_rgb, product(ALL_TYPES, repeat=2)):
        a = space_a.model.convert(RGB(*rgb, 0.7))
        back = space_a.model.convert(space_b.model.convert(a))
        assert_colors_close(back, a, tol=1e-3)


def test_round_trip_rgb_to_hsl_to_rgb():
    for rgb in samples_rgb:
        color = RGB(*rgb)
        assert color.to_hsl().to_rgb().to_int_tuple() == rgb


def test_round_trip_rgb_to_lch_to_rgb():
    for rgb in samples_rgb:
        color = RGB(*rgb)
        assert_colors_close(color.to_lch().to_rgb(), color, tol=1e-6)


def test_round_trip_low_lightness():
    for lab in [LAB(2, 3, -4), LAB(7.9, -1, 1), LAB(8.1, 1, -1)]:
        assert_colors_close(lab.to_xyz().to_lab(), lab, tol=1e-9)
        assert_colors_close(lab.to_luv().to_lab(), lab, tol=1e-9)
