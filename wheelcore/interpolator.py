"""Time-driven linear interpolation of a float value and the manager that ticks it."""

from __future__ import annotations

import threading
import weakref
from typing import Callable, Iterable, Optional

__all__ = [
    "InterpolatorManager",
    "TimeFloatInterpolator",
    "DEFAULT_MANAGER",
]

Callback = Callable[[], None]


class InterpolatorManager:
    """Keeps the interpolators that are currently moving and advances them each frame.

    Interpolators are held weakly: one that is no longer referenced elsewhere
    drops out of the manager on its own.
    """

    def __init__(self) -> None:
        self._interpolators: "weakref.WeakSet[TimeFloatInterpolator]" = weakref.WeakSet()
        self._lock = threading.Lock()

    def register(self, interpolator: "TimeFloatInterpolator") -> None:
        """Start ticking ``interpolator`` on every :meth:`update`."""
        with self._lock:
            self._interpolators.add(interpolator)

    def unregister(self, interpolator: "TimeFloatInterpolator") -> None:
        """Stop ticking ``interpolator``; unknown interpolators are ignored."""
        with self._lock:
            self._interpolators.discard(interpolator)

    def update(self, dt: float) -> None:
        """Advance every registered interpolator by ``dt`` seconds.

        Interpolators that reach their target are removed first; their
        callbacks run afterwards, outside the manager's lock, so a callback
        may start a new interpolation.
        """
        with self._lock:
            finished = [item for item in list(self._interpolators) if item._advance(dt)]
            for item in finished:
                self._interpolators.discard(item)
        for item in finished:
            item._fire_callbacks()

    def __len__(self) -> int:
        with self._lock:
            return len(self._interpolators)

    def __contains__(self, interpolator: object) -> bool:
        with self._lock:
            return interpolator in self._interpolators


DEFAULT_MANAGER = InterpolatorManager()


class TimeFloatInterpolator:
    """A float that moves towards a target over a given duration.

    While idle the value stays where it is. Each tick moves the value by the
    fraction of the duration elapsed so far towards the target, and on
    reaching the end of the duration the registered callbacks are invoked.
    """

    def __init__(
        self,
        initial_value: float = 0.0,
        callback: Optional[Callback] = None,
        manager: Optional[InterpolatorManager] = None,
    ) -> None:
        self._value = float(initial_value)
        self._target = float(initial_value)
        self._duration = 0.0
        self._elapsed = 0.0
        self.callbacks: list[Callback] = [callback] if callback is not None else []
        self._manager = manager if manager is not None else DEFAULT_MANAGER

    @property
    def value(self) -> float:
        """Current value."""
        return self._value

    @property
    def target(self) -> float:
        """Value the interpolator is heading for."""
        return self._target

    @property
    def manager(self) -> InterpolatorManager:
        return self._manager

    def interpolate_to(self, target: float, duration: float) -> None:
        """Start moving towards ``target`` over ``duration`` seconds."""
        self._target = float(target)
        self._duration = float(duration)
        self._elapsed = 0.0
        self._manager.register(self)

    def push_callback(self, callback: Callback) -> None:
        """Add a callback to run whenever an interpolation finishes."""
        self.callbacks.append(callback)

    def update(self, dt: float) -> bool:
        """Advance by ``dt`` seconds; return True when the target was just reached."""
        done = self._advance(dt)
        if done:
            self._fire_callbacks()
        return done

    def force_finish(self, want_callback: bool = True) -> None:
        """Jump straight to the target and stop ticking."""
        self._elapsed = self._duration
        self._value = self._target
        self._manager.unregister(self)
        if want_callback:
            self._fire_callbacks()

    def set_value(self, value: float) -> None:
        """Overwrite the current value, keeping any running interpolation."""
        self._value = float(value)

    def force_value(self, value: float) -> None:
        """Set both value and target, cancelling any running interpolation."""
        self._target = float(value)
        self._value = float(value)
        self._duration = 0.0
        self._elapsed = 0.0

    def _advance(self, dt: float) -> bool:
        if self._elapsed < self._duration:
            self._elapsed += dt
            t = min(self._elapsed / self._duration, 1.0)
            self._value = self._value + (self._target - self._value) * t
            return self._elapsed >= self._duration
        return False

    def _fire_callbacks(self) -> None:
        callbacks: Iterable[Callback] = list(self.callbacks)
        for callback in callbacks:
            callback()