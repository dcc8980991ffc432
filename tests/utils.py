from chromamath import Color


def hue_distance(h0: float, h1: float) -> float:
    """Angular distance between two hues in degrees, in [0, 180]."""
    d = abs(h0 - h1) % 360
    return min(d, 360 - d)


def assert_colors_close(actual: Color, expected: Color, tol: float = 1e-3) -> None:
    """Compare two colors of the same space channel by channel, hues on the circle."""
    assert type(actual) is type(expected)
    for info, a, e in zip(expected.model.components, actual.components(), expected.components()):
        if info.is_polar:
            assert hue_distance(a, e) < tol, f"{info.name}: {a} != {e}"
        else:
            assert abs(a - e) < tol, f"{info.name}: {a} != {e}"
