import pytest

from wheelcore.interpolator import InterpolatorManager
from wheelcore.trapezoid import TimeTrapezoidInterpolator


@pytest.fixture
def manager():
    return InterpolatorManager()


def test_default_points_are_zero(manager):
    trap = TimeTrapezoidInterpolator(manager=manager)
    assert trap.points == (0.0, 0.0, 0.0, 0.0)


def test_initial_points(manager):
    trap = TimeTrapezoidInterpolator(1.0, 2.0, 3.0, 4.0, manager=manager)
    assert (trap.point1, trap.point2, trap.point3, trap.point4) == (1.0, 2.0, 3.0, 4.0)


def test_reaches_targets(manager):
    trap = TimeTrapezoidInterpolator(manager=manager)
    trap.interpolate_to(-1.0, 2.0, 3.5, 8.0, 1.0)
    assert len(manager) == 4
    manager.update(1.5)
    assert trap.points == pytest.approx((-1.0, 2.0, 3.5, 8.0))
    assert len(manager) == 0


def test_points_move_together(manager):
    trap = TimeTrapezoidInterpolator(manager=manager)
    trap.interpolate_to(10.0, 20.0, 30.0, 40.0, 1.0)
    manager.update(0.25)
    p1, p2, p3, p4 = trap.points
    assert 0.0 < p1 < 10.0
    assert p2 == pytest.approx(2 * p1)
    assert p3 == pytest.approx(3 * p1)
    assert p4 == pytest.approx(4 * p1)