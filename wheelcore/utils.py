"""Small helpers: equipped-hand results, description cleanup and rotation matrices."""

from __future__ import annotations

import enum
import math
from typing import Sequence

__all__ = [
    "HORIZONTAL_AXIS",
    "VERTICAL_AXIS",
    "Hand",
    "strip_format_codes",
    "matrix_from_axis_angle",
]

HORIZONTAL_AXIS = (0.0, 0.0, 1.0)
VERTICAL_AXIS = (1.0, 0.0, 0.0)

Matrix3 = tuple[tuple[float, float, float], tuple[float, float, float], tuple[float, float, float]]


class Hand(enum.Enum):
    """Which hand, if any, holds an item."""

    LEFT = 0
    RIGHT = 1
    BOTH = 2
    NONE = 3

    @classmethod
    def from_equipped(
        cls,
        left_equipped: bool,
        right_equipped: bool,
        left_equipped_base: bool = False,
        right_equipped_base: bool = False,
        item_clean: bool = False,
    ) -> "Hand":
        """Resolve the hand from per-hand match flags.

        With ``item_clean`` a match on an unmodified instance takes priority;
        otherwise only the exact-instance flags count.
        """
        if item_clean:
            base = cls._combine(left_equipped_base, right_equipped_base)
            if base is not cls.NONE:
                return base
        return cls._combine(left_equipped, right_equipped)

    @classmethod
    def _combine(cls, left: bool, right: bool) -> "Hand":
        if left and right:
            return cls.BOTH
        if left:
            return cls.LEFT
        if right:
            return cls.RIGHT
        return cls.NONE


def strip_format_codes(text: str) -> str:
    """Remove ``<...>`` markup from a magic item description.

    A ``<`` whose first ``>`` in the text comes before it removes everything
    from the ``<`` to the end; a ``<`` with no ``>`` at all stops the cleanup.
    """
    while True:
        left = text.find("<")
        if left == -1:
            break
        right = text.find(">")
        if right == -1:
            break
        if right < left:
            text = text[:left]
        else:
            text = text[:left] + text[right + 1:]
    return text


def matrix_from_axis_angle(theta: float, axis: Sequence[float] = HORIZONTAL_AXIS) -> Matrix3:
    """Rotation matrix of ``theta`` radians about a unit ``axis``, as rows."""
    if len(axis) != 3:
        raise ValueError(f"axis must have three components, got {len(axis)}")
    x, y, z = (float(component) for component in axis)
    c = math.cos(theta)
    s = math.sin(theta)
    k = 1 - c
    return (
        (c + x * x * k, x * y * k - z * s, x * z * k + y * s),
        (y * x * k + z * s, c + y * y * k, y * z * k - x * s),
        (z * x * k - y * s, z * y * k + x * s, c + z * z * k),
    )