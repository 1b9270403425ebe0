import math

import pytest

from pixelplay.geometry import ZERO, Rect, Vec, lerp


def close(a, b, tol=1e-9):
    return math.isclose(a.x, b.x, abs_tol=tol) and math.isclose(a.y, b.y, abs_tol=tol)


def test_add_and_sub_round_trip():
    a, b = Vec(1.5, -2.0), Vec(4.0, 7.25)
    assert (a + b) - b == a
    assert a + ZERO == a


def test_scaled_and_length():
    v = Vec(3.0, 4.0)
    assert v.scaled(2).length() == pytest.approx(2 * v.length())
    assert v.scaled(0) == ZERO
    assert v.length() == pytest.approx(5.0)


def test_unit_has_length_one_and_same_direction():
    v = Vec(-6.0, 2.5)
    u = v.unit()
    assert u.length() == pytest.approx(1.0)
    assert close(u.scaled(v.length()), v)


def test_unit_of_zero_vector():
    assert ZERO.unit() == Vec(1.0, 0.0)


@pytest.mark.parametrize("angle", [0.0, 0.3, math.pi / 2, math.pi, -2.0])
def test_rotation_preserves_length_and_round_trips(angle):
    v = Vec(2.0, -3.0)
    r = v.rotated(angle)
    assert r.length() == pytest.approx(v.length())
    assert close(r.rotated(-angle), v)


def test_quarter_turn_of_x_axis():
    r = Vec(1.0, 0.0).rotated(math.pi / 2)
    assert r.x == pytest.approx(0.0, abs=1e-9)
    assert r.y == pytest.approx(1.0)


def test_rect_moved_keeps_size_and_moves_center():
    r = Rect(Vec(-6, -7), Vec(6, 7))
    delta = Vec(10, -3)
    m = r.moved(delta)
    assert m.width() == r.width()
    assert m.height() == r.height()
    assert close(m.center(), r.center() + delta)


def test_rect_dimensions_from_corners():
    r = Rect(Vec(-50, -34), Vec(50, -32))
    assert r.width() == 100
    assert r.height() == 2
    assert close(r.center(), Vec(0, -33))


def test_lerp_endpoints_and_midpoint():
    a, b = Vec(1, 2), Vec(9, -4)
    start = lerp(a, b, 0)
    assert (start.x, start.y) == (pytest.approx(1), pytest.approx(2))
    end = lerp(a, b, 1)
    assert (end.x, end.y) == (pytest.approx(9), pytest.approx(-4))
    mid = lerp(a, b, 0.5)
    assert mid.x == pytest.approx(5)
    assert mid.y == pytest.approx(-1)