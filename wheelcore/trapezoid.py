"""Interpolation of the four corner values of a trapezoid."""

from __future__ import annotations

from typing import Optional

from wheelcore.interpolator import InterpolatorManager, TimeFloatInterpolator

__all__ = ["TimeTrapezoidInterpolator"]


class TimeTrapezoidInterpolator:
    """Four floats moved together towards new targets over the same duration."""

    def __init__(
        self,
        p1: float = 0.0,
        p2: float = 0.0,
        p3: float = 0.0,
        p4: float = 0.0,
        manager: Optional[InterpolatorManager] = None,
    ) -> None:
        self._points = tuple(TimeFloatInterpolator(p, manager=manager) for p in (p1, p2, p3, p4))

    def interpolate_to(self, p1: float, p2: float, p3: float, p4: float, duration: float) -> None:
        """Move all four points to their targets over ``duration`` seconds."""
        for point, target in zip(self._points, (p1, p2, p3, p4)):
            point.interpolate_to(target, duration)

    @property
    def point1(self) -> float:
        return self._points[0].value

    @property
    def point2(self) -> float:
        return self._points[1].value

    @property
    def point3(self) -> float:
        return self._points[2].value

    @property
    def point4(self) -> float:
        return self._points[3].value

    @property
    def points(self) -> tuple[float, float, float, float]:
        """All four current values in order."""
        return (self.point1, self.point2, self.point3, self.point4)