import pytest

from chromamath.conversions import (
    unit_rgb_to_xyz,
    xyz_to_lab,
    lab_to_xyz,
    xyz_to_luv,
    luv_to_xyz,
    luv_to_lch,
    lch_to_luv,
)
from chromamath import LUV, RGB
from chromamath.conversions.constants import D65_WHITE, WHITE_U_PRIME, WHITE_V_PRIME
from ..samples import samples_rgb_lab, samples_rgb_luv


def test_rgb_to_xyz_red_is_matrix_column():
    x, y, z = unit_rgb_to_xyz(1.0, 0.0, 0.0)
    assert x == pytest.approx(0.4124564)
    assert y == pytest.approx(0.2126729)
    assert z == pytest.approx(0.0193339)


def test_rgb_to_lab_reference_values():
    for (r, g, b), expected in samples_rgb_lab.items():
        lab = xyz_to_lab(*unit_rgb_to_xyz(r / 255, g / 255, b / 255))
        assert lab == pytest.approx(expected, abs=0.02)


def test_rgb_to_luv_reference_values():
    for (r, g, b), expected in samples_rgb_luv.items():
        luv = xyz_to_luv(*unit_rgb_to_xyz(r / 255, g / 255, b / 255))
        assert luv == pytest.approx(expected, abs=0.05)


def test_lab_xyz_round_trip_both_branches():
    # one point above and one below the CIE epsilon threshold
    for xyz in [(0.3, 0.4, 0.5), (0.002, 0.003, 0.004)]:
        assert lab_to_xyz(*xyz_to_lab(*xyz)) == pytest.approx(xyz, abs=1e-12)


def test_luv_xyz_round_trip_both_branches():
    for xyz in [(0.3, 0.4, 0.5), (0.002, 0.003, 0.004)]:
        assert luv_to_xyz(*xyz_to_luv(*xyz)) == pytest.approx(xyz, abs=1e-12)


def test_white_point_maps_to_neutral_lab():
    assert xyz_to_lab(*D65_WHITE) == pytest.approx((100.0, 0.0, 0.0), abs=1e-9)


def test_black_luv_does_not_divide_by_zero():
    assert xyz_to_luv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    assert luv_to_xyz(0.0, 12.0, -3.0) == (0.0, 0.0, 0.0)


def test_luv_with_zero_u_prime_does_not_divide_by_zero():
    x, y, z = luv_to_xyz(50.0, -13 * 50 * WHITE_U_PRIME, 0.0)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y > 0 and z > 0
    assert isinstance(LUV(50, -13 * 50 * WHITE_U_PRIME, 0).to_rgb(), RGB)


def test_luv_with_zero_v_prime_keeps_luminance(monkeypatch):
    # with a zero white v', v == 0 puts v' exactly on zero
    monkeypatch.setattr("chromamath.conversions.to_xyz.WHITE_V_PRIME", 0.0)
    x, y, z = luv_to_xyz(50.0, 10.0, 0.0)
    assert (x, z) == (0.0, 0.0)
    assert y == pytest.approx(0.18418651851244416)
    assert luv_to_xyz(50.0, 0.0, -13 * 50 * WHITE_V_PRIME)[1] == pytest.approx(y)


def test_luv_to_lch():
    l, c, h = luv_to_lch(50.0, 0.0, 10.0)
    assert (l, c) == (50.0, 10.0)
    assert h == pytest.approx(90.0)

    # negative angles come back in [0, 360)
    _, _, h = luv_to_lch(50.0, 0.0, -10.0)
    assert h == pytest.approx(270.0)

    assert luv_to_lch(50.0, 0.0, 0.0) == (50.0, 0.0, 0.0)


def test_lch_to_luv():
    assert lch_to_luv(50.0, 10.0, 180.0) == pytest.approx((50.0, -10.0, 0.0))
    assert lch_to_luv(50.0, 10.0, 450.0) == pytest.approx((50.0, 0.0, 10.0))
