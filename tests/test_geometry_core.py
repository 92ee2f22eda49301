from __future__ import annotations

import math

import pytest

from analog_clock.geometry import Affine, BoxConstraints, Rect, Size


def test_rect_from_points_normalises_corners() -> None:
    r = Rect.from_points((2.0, 20.0), (-3.0, -100.0))

    assert r == Rect(-3.0, -100.0, 2.0, 20.0)
    assert r.width == pytest.approx(5.0)
    assert r.height == pytest.approx(120.0)
    assert r.corners() == ((-3.0, -100.0), (2.0, -100.0), (2.0, 20.0), (-3.0, 20.0))


def test_rotate_quarter_turn_is_clockwise_on_y_down_surface() -> None:
    up = (0.0, -10.0)

    assert Affine.rotate(math.pi / 2.0).apply(up) == pytest.approx((10.0, 0.0))
    assert Affine.rotate(math.pi).apply(up) == pytest.approx((0.0, 10.0))


def test_composition_applies_right_operand_first() -> None:
    m = Affine.translate(100.0, 50.0) * Affine.rotate(math.pi / 2.0)

    assert m.apply((0.0, -10.0)) == pytest.approx((110.0, 50.0))
    assert (Affine() * m) == m


def test_constrain_aspect_ratio_prefers_requested_width() -> None:
    bc = BoxConstraints(0.0, 0.0, 500.0, 500.0)
    assert bc.constrain_aspect_ratio(1.0, 400.0) == Size(400.0, 400.0)


def test_constrain_aspect_ratio_shrinks_to_fit() -> None:
    assert BoxConstraints.loose(Size(300.0, 200.0)).constrain_aspect_ratio(1.0, 400.0) == Size(200.0, 200.0)
    assert BoxConstraints.loose(Size(150.0, 900.0)).constrain_aspect_ratio(1.0, 400.0) == Size(150.0, 150.0)


def test_constrain_aspect_ratio_grows_to_minimum() -> None:
    bc = BoxConstraints(450.0, 0.0, 800.0, 800.0)
    assert bc.constrain_aspect_ratio(1.0, 400.0) == Size(450.0, 450.0)


def test_constrain_aspect_ratio_falls_back_when_ratio_cannot_fit() -> None:
    bc = BoxConstraints.tight(Size(300.0, 200.0))
    assert bc.constrain_aspect_ratio(1.0, 400.0) == Size(300.0, 200.0)

    with pytest.raises(ValueError):
        bc.constrain_aspect_ratio(0.0, 400.0)


def test_box_constraints_validation() -> None:
    with pytest.raises(ValueError):
        BoxConstraints(min_width=-1.0)
    with pytest.raises(ValueError):
        BoxConstraints(min_width=10.0, max_width=5.0)
