"""Interpolation of packed colours, one channel at a time."""

from __future__ import annotations

from typing import Optional

from wheelcore.colors import color_components, im_col32
from wheelcore.interpolator import InterpolatorManager, TimeFloatInterpolator

__all__ = ["TimeColorInterpolator"]


class TimeColorInterpolator:
    """Moves a packed 32-bit colour towards a target through four channel interpolators."""

    def __init__(
        self,
        initial_color: Optional[int] = None,
        manager: Optional[InterpolatorManager] = None,
    ) -> None:
        channels = color_components(initial_color) if initial_color is not None else (0, 0, 0, 0)
        red, green, blue, alpha = channels
        self._red = TimeFloatInterpolator(red, manager=manager)
        self._green = TimeFloatInterpolator(green, manager=manager)
        self._blue = TimeFloatInterpolator(blue, manager=manager)
        self._alpha = TimeFloatInterpolator(alpha, manager=manager)

    def interpolate_to(self, target_color: int, duration: float) -> None:
        """Move every channel towards ``target_color`` over ``duration`` seconds."""
        red, green, blue, alpha = color_components(target_color)
        self._red.interpolate_to(red, duration)
        self._green.interpolate_to(green, duration)
        self._blue.interpolate_to(blue, duration)
        self._alpha.interpolate_to(alpha, duration)

    @property
    def red(self) -> int:
        return int(self._red.value)

    @property
    def green(self) -> int:
        return int(self._green.value)

    @property
    def blue(self) -> int:
        return int(self._blue.value)

    @property
    def alpha(self) -> int:
        return int(self._alpha.value)

    @property
    def color(self) -> int:
        """Current colour, packed."""
        return im_col32(self.red, self.green, self.blue, self.alpha)