import gc

import pytest

from wheelcore.interpolator import InterpolatorManager, TimeFloatInterpolator


@pytest.fixture
def manager():
    return InterpolatorManager()


def test_initial_value_and_target(manager):
    interp = TimeFloatInterpolator(3.5, manager=manager)
    assert interp.value == 3.5
    assert interp.target == 3.5
    assert len(manager) == 0


def test_interpolate_to_registers(manager):
    interp = TimeFloatInterpolator(0.0, manager=manager)
    interp.interpolate_to(10.0, 1.0)
    assert interp in manager
    assert interp.value == 0.0


def test_reaches_target_and_is_removed(manager):
    interp = TimeFloatInterpolator(0.0, manager=manager)
    interp.interpolate_to(10.0, 1.0)
    manager.update(0.4)
    assert interp in manager
    manager.update(0.7)
    assert interp.value == pytest.approx(10.0)
    assert interp not in manager


def test_value_moves_monotonically_towards_target(manager):
    interp = TimeFloatInterpolator(0.0, manager=manager)
    interp.interpolate_to(100.0, 1.0)
    previous = interp.value
    for _ in range(9):
        manager.update(0.1)
        assert previous <= interp.value <= 100.0
        previous = interp.value
    assert interp.value < 100.0


def test_half_duration_step(manager):
    interp = TimeFloatInterpolator(0.0, manager=manager)
    interp.interpolate_to(10.0, 1.0)
    manager.update(0.5)
    assert interp.value == pytest.approx(5.0)


def test_update_returns_done_flag():
    interp = TimeFloatInterpolator(1.0, manager=InterpolatorManager())
    interp.interpolate_to(2.0, 0.5)
    assert interp.update(0.2) is False
    assert interp.update(0.5) is True
    assert interp.update(0.5) is False
    assert interp.value == pytest.approx(2.0)


def test_callbacks_fire_on_completion(manager):
    calls = []
    interp = TimeFloatInterpolator(0.0, lambda: calls.append("first"), manager=manager)
    interp.push_callback(lambda: calls.append("second"))
    interp.interpolate_to(1.0, 1.0)
    manager.update(0.5)
    assert calls == []
    manager.update(0.6)
    assert calls == ["first", "second"]


def test_callback_may_restart_interpolation(manager):
    interp = TimeFloatInterpolator(0.0, manager=manager)
    restarted = []

    def again():
        if not restarted:
            restarted.append(True)
            interp.interpolate_to(0.0, 1.0)

    interp.push_callback(again)
    interp.interpolate_to(4.0, 1.0)
    manager.update(1.0)
    assert interp in manager
    manager.update(1.0)
    assert interp.value == pytest.approx(0.0)
    assert interp not in manager


def test_force_finish_with_callbacks(manager):
    calls = []
    interp = TimeFloatInterpolator(0.0, lambda: calls.append(1), manager=manager)
    interp.interpolate_to(7.0, 5.0)
    interp.force_finish()
    assert interp.value == 7.0
    assert calls == [1]
    assert interp not in manager


def test_force_finish_without_callbacks(manager):
    calls = []
    interp = TimeFloatInterpolator(0.0, lambda: calls.append(1), manager=manager)
    interp.interpolate_to(7.0, 5.0)
    interp.force_finish(False)
    assert interp.value == 7.0
    assert calls == []


def test_set_value_keeps_interpolation(manager):
    interp = TimeFloatInterpolator(0.0, manager=manager)
    interp.interpolate_to(10.0, 1.0)
    interp.set_value(20.0)
    assert interp.value == 20.0
    assert interp.target == 10.0
    manager.update(2.0)
    assert interp.value == pytest.approx(10.0)


def test_force_value_cancels_interpolation(manager):
    interp = TimeFloatInterpolator(0.0, manager=manager)
    interp.interpolate_to(10.0, 1.0)
    interp.force_value(3.0)
    manager.update(1.0)
    assert interp.value == 3.0
    assert interp.target == 3.0


def test_unregister_stops_updates(manager):
    interp = TimeFloatInterpolator(0.0, manager=manager)
    interp.interpolate_to(10.0, 1.0)
    manager.unregister(interp)
    manager.update(1.0)
    assert interp.value == 0.0


def test_dropped_interpolator_leaves_manager(manager):
    interp = TimeFloatInterpolator(0.0, manager=manager)
    interp.interpolate_to(10.0, 100.0)
    assert len(manager) == 1
    del interp
    gc.collect()
    assert len(manager) == 0