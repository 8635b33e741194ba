import pytest

from wheelcore.color_interpolator import TimeColorInterpolator
from wheelcore.colors import C_BLACK, C_SKYRIMGREY, C_SKYRIMWHITE, im_col32
from wheelcore.interpolator import InterpolatorManager


@pytest.fixture
def manager():
    return InterpolatorManager()


def test_default_is_all_zero(manager):
    interp = TimeColorInterpolator(manager=manager)
    assert (interp.red, interp.green, interp.blue, interp.alpha) == (0, 0, 0, 0)
    assert interp.color == 0


def test_initial_color_channels(manager):
    start = im_col32(10, 20, 30, 40)
    interp = TimeColorInterpolator(start, manager=manager)
    assert (interp.red, interp.green, interp.blue, interp.alpha) == (10, 20, 30, 40)
    assert interp.color == start


def test_reaches_target_color(manager):
    interp = TimeColorInterpolator(C_BLACK, manager=manager)
    interp.interpolate_to(C_SKYRIMWHITE, 1.0)
    manager.update(1.0)
    assert interp.color == C_SKYRIMWHITE
    assert len(manager) == 0


def test_channels_stay_between_start_and_target(manager):
    interp = TimeColorInterpolator(C_BLACK, manager=manager)
    interp.interpolate_to(C_SKYRIMGREY, 1.0)
    manager.update(0.3)
    assert 0 <= interp.red <= 255
    assert 100 <= interp.alpha <= 255
    assert interp.red == interp.green == interp.blue


def test_invalid_color_rejected(manager):
    interp = TimeColorInterpolator(manager=manager)
    with pytest.raises(ValueError):
        interp.interpolate_to(-1, 1.0)