import pytest

from wheelcore.bounce import TimeBounceInterpolator
from wheelcore.interpolator import InterpolatorManager


@pytest.fixture
def manager():
    return InterpolatorManager()


def test_bounces_out_and_back(manager):
    bounce = TimeBounceInterpolator(0.0, manager=manager)
    bounce.interpolate_to(10.0, 1.0)
    manager.update(1.0)
    assert bounce.value == pytest.approx(10.0)
    assert bounce.returning is True
    assert len(manager) == 1
    manager.update(1.0)
    assert bounce.value == pytest.approx(0.0)
    assert len(manager) == 0


def test_second_completion_does_not_restart(manager):
    bounce = TimeBounceInterpolator(2.0, manager=manager)
    bounce.force_value(2.0)
    bounce.interpolate_to(6.0, 0.5)
    manager.update(0.5)
    manager.update(0.5)
    manager.update(0.5)
    assert bounce.value == pytest.approx(2.0)
    assert len(manager) == 0


def test_interpolate_to_resets_direction(manager):
    bounce = TimeBounceInterpolator(0.0, manager=manager)
    bounce.interpolate_to(5.0, 1.0)
    manager.update(1.0)
    assert bounce.returning is True
    bounce.interpolate_to(8.0, 1.0)
    assert bounce.returning is False
    manager.update(1.0)
    assert bounce.value == pytest.approx(8.0)


def test_force_finish_on_forward_pass_returns_to_original(manager):
    bounce = TimeBounceInterpolator(1.5, manager=manager)
    bounce.interpolate_to(9.0, 1.0)
    manager.update(0.3)
    bounce.force_finish()
    assert bounce.value == 1.5
    assert bounce.returning is False
    assert len(manager) == 0


def test_force_finish_on_return_pass_lands_on_original(manager):
    bounce = TimeBounceInterpolator(1.5, manager=manager)
    bounce.force_value(1.5)
    bounce.interpolate_to(9.0, 1.0)
    manager.update(1.0)
    manager.update(0.2)
    bounce.force_finish()
    assert bounce.value == 1.5
    assert bounce.returning is False


def test_set_and_force_value(manager):
    bounce = TimeBounceInterpolator(0.0, manager=manager)
    bounce.set_value(4.0)
    assert bounce.value == 4.0
    bounce.force_value(-3.0)
    manager.update(1.0)
    assert bounce.value == -3.0