import numpy as np
import pytest

from chromamath import RGB, HSL, HSV, CMYK, XYZ, LAB, LUV, LCH, ColorComponentInfo

ALL_TYPES = [RGB, HSL, HSV, CMYK, XYZ, LAB, LUV, LCH]

EXPECTED_NAMES = {
    RGB: ["r", "g", "b", "alpha"],
    HSL: ["h", "s", "l", "alpha"],
    HSV: ["h", "s", "v", "alpha"],
    CMYK: ["c", "m", "y", "k", "alpha"],
    XYZ: ["x", "y", "z", "alpha"],
    LAB: ["l", "a", "b", "alpha"],
    LUV: ["l", "u", "v", "alpha"],
    LCH: ["l", "c", "h", "alpha"],
}


def test_component_count_matches_model():
    sample = RGB(200, 120, 30, 0.5)
    for color_type in ALL_TYPES:
        color = color_type.model.convert(sample)
        assert len(color.components()) == color.component_count()
        assert color.component_count() == len(color_type.model.components)
        assert color.component_count() == color_type.model.component_count
        assert color.components()[-1] == 0.5


def test_component_is_polar_matches_model():
    sample = RGB(200, 120, 30)
    for color_type in ALL_TYPES:
        color = color_type.model.convert(sample)
        for i, info in enumerate(color_type.model.components):
            assert color.component_is_polar(i) == info.is_polar


def test_polar_components():
    assert [c.is_polar for c in LCH.model.components] == [False, False, True, False]
    assert [c.is_polar for c in HSL.model.components] == [True, False, False, False]
    assert not any(c.is_polar for c in LAB.model.components)


def test_component_names():
    for color_type, names in EXPECTED_NAMES.items():
        assert [c.name for c in color_type.model.components] == names


def test_alpha_info_is_last_everywhere():
    for color_type in ALL_TYPES:
        alpha = color_type.model.components[-1]
        assert alpha == ColorComponentInfo("alpha", False, 0.0, 1.0)


def test_component_index_out_of_range():
    lch = LCH(50, 30, 120)
    with pytest.raises(IndexError, match=r"component index 4 out of range \[0, 4\)"):
        lch.component_is_polar(4)
    with pytest.raises(IndexError, match=r"component index -1 out of range \[0, 4\)"):
        lch.component_is_polar(-1)
    with pytest.raises(IndexError, match=r"\[0, 5\)"):
        CMYK(0, 0, 0, 0).component_is_polar(5)


def test_from_components_defaults_alpha():
    lch = LCH.from_components([50, 30, 120])
    assert lch == LCH(50, 30, 120, 1.0)
    assert lch.alpha == 1.0

    lch = LCH.from_components((50, 30, 120, 0.25))
    assert lch.alpha == 0.25


def test_from_components_on_instance_and_numpy():
    lab = LAB(1, 2, 3)
    assert lab.from_components(np.array([10.0, 20.0, 30.0])) == LAB(10, 20, 30)


def test_model_create():
    for color_type in ALL_TYPES:
        model = color_type.model
        values = [float(i + 1) for i in range(model.component_count - 1)]
        color = model.create(values)
        assert isinstance(color, color_type)
        assert color.components() == tuple(values) + (1.0,)


def test_components_round_trip_through_array():
    hsv = HSV(210, 40, 70, 0.8)
    assert HSV.model.create(hsv.to_array()) == hsv
    assert HSV.from_components(hsv.components()) == hsv


def test_component_info_is_frozen():
    info = LCH.model.components[2]
    with pytest.raises(AttributeError):
        info.is_polar = False
