"""Tests for structured transforms."""

import pytest

from patternforge.engine.transforms import Rotate, Scale, Transform, Translate
from patternforge.utils.math_helpers import format_number


def test_positioned_to_svg():
    t = Transform.positioned(109, 109, 2.90625, -2.90625, 32)
    assert t.to_svg() == "translate(109, 109) scale(2.90625, -2.90625) translate(-32, -32)"
    assert t.is_positioned_shape()


def test_positioned_maps_box_center_to_cell_center():
    t = Transform.positioned(109, 250, 3, -3, 32)
    assert t.apply(32, 32) == pytest.approx((109, 250))


def test_positioned_mirror():
    t = Transform.positioned(0, 0, -1, 1, 32)
    # Native left edge lands on the right after a horizontal flip
    assert t.apply(0, 32) == pytest.approx((32, 0))


def test_rotate_forms():
    assert Rotate(45).to_svg() == "rotate(45)"
    assert Rotate(12.5, 100, 200).to_svg() == "rotate(12.5 100 200)"
    assert not Rotate(45).has_pivot


def test_rotate_about_pivot_keeps_pivot():
    t = Transform((Rotate(73, 40, 60),))
    assert t.apply(40, 60) == pytest.approx((40, 60))


def test_rotate_direction_matches_svg():
    # SVG y points down: +90 turns +x into +y
    assert Transform((Rotate(90),)).apply(1, 0) == pytest.approx((0, 1))


def test_ops_apply_right_to_left():
    t = Transform((Translate(10, 0), Scale(2, 2)))
    assert t.apply(1, 1) == pytest.approx((12, 2))


def test_insert_and_then():
    t = Transform((Translate(1, 2),))
    assert t.then(Scale(2, 2)).ops == (Translate(1, 2), Scale(2, 2))
    assert t.insert(0, Rotate(5)).ops == (Rotate(5), Translate(1, 2))


def test_first_translate():
    assert Transform((Scale(1, 1), Translate(3, 4))).first_translate() == Translate(3, 4)
    assert Transform((Scale(1, 1),)).first_translate() is None


def test_empty_transform_is_falsy():
    assert not Transform()
    assert len(Transform()) == 0


@pytest.mark.parametrize(
    "value, text",
    [(186.0, "186"), (2.5, "2.5"), (-32, "-32"), (0.1, "0.1"), (-0.0, "0")],
)
def test_format_number(value, text):
    assert format_number(value) == text
