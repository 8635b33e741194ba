"""An interpolator that goes to a target and then comes back to its original value."""

from __future__ import annotations

from typing import Optional

from wheelcore.interpolator import InterpolatorManager, TimeFloatInterpolator

__all__ = ["TimeBounceInterpolator"]


class TimeBounceInterpolator:
    """Moves to a target over a duration, then back to the original value over the same duration.

    The underlying value starts at zero; ``original`` is where each bounce returns to.
    """

    def __init__(self, original: float, manager: Optional[InterpolatorManager] = None) -> None:
        self._interpolator = TimeFloatInterpolator(manager=manager)
        self._original = float(original)
        self._target = 0.0
        self._duration = 0.0
        self._returning = False
        self._interpolator.push_callback(self._on_reached)

    @property
    def value(self) -> float:
        """Current value."""
        return self._interpolator.value

    @property
    def original(self) -> float:
        return self._original

    @property
    def returning(self) -> bool:
        """True while heading back to the original value."""
        return self._returning

    def interpolate_to(self, target: float, duration: float) -> None:
        """Bounce out to ``target`` and back, each leg taking ``duration`` seconds."""
        self._target = float(target)
        self._duration = float(duration)
        self._returning = False
        self._interpolator.interpolate_to(self._target, self._duration)

    def force_finish(self) -> None:
        """End the bounce at once, leaving the value at the original."""
        self._interpolator.force_finish(False)
        if not self._returning:
            self._interpolator.force_value(self._original)
        self._returning = False

    def set_value(self, value: float) -> None:
        self._interpolator.set_value(value)

    def force_value(self, value: float) -> None:
        self._interpolator.force_value(value)

    def _on_reached(self) -> None:
        if not self._returning:
            self._returning = True
            self._interpolator.interpolate_to(self._original, self._duration)