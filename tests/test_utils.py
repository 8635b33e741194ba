import math

import pytest

from wheelcore.utils import (
    HORIZONTAL_AXIS,
    VERTICAL_AXIS,
    Hand,
    matrix_from_axis_angle,
    strip_format_codes,
)


def apply(matrix, vector):
    return tuple(sum(row[i] * vector[i] for i in range(3)) for row in matrix)


def test_strip_removes_tags():
    text = "Deals <font color='#FFFFFF'>50</font> points of fire damage."
    assert strip_format_codes(text) == "Deals 50 points of fire damage."


def test_strip_leaves_plain_text():
    assert strip_format_codes("no markup here") == "no markup here"


def test_strip_unclosed_bracket_is_kept():
    assert strip_format_codes("value <open") == "value <open"


def test_strip_closing_before_opening_truncates():
    assert strip_format_codes("a > b <c") == "a > b "


def test_strip_empty():
    assert strip_format_codes("") == ""


def test_zero_angle_is_identity():
    matrix = matrix_from_axis_angle(0.0)
    for i in range(3):
        for j in range(3):
            assert matrix[i][j] == pytest.approx(1.0 if i == j else 0.0)


def test_quarter_turn_about_z_maps_x_to_y():
    result = apply(matrix_from_axis_angle(math.pi / 2, HORIZONTAL_AXIS), (1.0, 0.0, 0.0))
    assert result == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)


def test_rotation_preserves_length_and_axis():
    matrix = matrix_from_axis_angle(0.7, VERTICAL_AXIS)
    vector = (0.3, -1.2, 2.5)
    rotated = apply(matrix, vector)
    assert math.hypot(*rotated) == pytest.approx(math.hypot(*vector))
    assert apply(matrix, VERTICAL_AXIS) == pytest.approx(VERTICAL_AXIS)


def test_opposite_rotations_cancel():
    vector = (1.0, 2.0, 3.0)
    forward = matrix_from_axis_angle(1.1)
    back = matrix_from_axis_angle(-1.1)
    assert apply(back, apply(forward, vector)) == pytest.approx(vector)


def test_axis_must_have_three_components():
    with pytest.raises(ValueError):
        matrix_from_axis_angle(1.0, (1.0, 0.0))


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (True, True, Hand.BOTH),
        (True, False, Hand.LEFT),
        (False, True, Hand.RIGHT),
        (False, False, Hand.NONE),
    ],
)
def test_hand_from_equipped(left, right, expected):
    assert Hand.from_equipped(left, right) is expected


def test_clean_item_prefers_base_match():
    hand = Hand.from_equipped(True, False, False, True, item_clean=True)
    assert hand is Hand.RIGHT


def test_base_flags_ignored_unless_clean():
    hand = Hand.from_equipped(True, False, False, True, item_clean=False)
    assert hand is Hand.LEFT


def test_clean_without_base_falls_back():
    hand = Hand.from_equipped(False, True, item_clean=True)
    assert hand is Hand.RIGHT