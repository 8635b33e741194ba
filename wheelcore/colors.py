"""Packed 32-bit colours in the R, G, B, A byte order used by the wheel UI."""

from __future__ import annotations

import math

__all__ = [
    "IM_PI",
    "C_SKYRIMGREY",
    "C_SKYRIMWHITE",
    "C_BLACK",
    "C_SKYRIMDARKGREY_MENUBACKGROUND",
    "C_QUARTERTRANSPARENT",
    "C_HALFTRANSPARENT",
    "C_TRIQUARTERTRANSPARENT",
    "C_VOID",
    "im_col32",
    "color_components",
    "mult_alpha",
]

IM_PI = math.pi

_R_SHIFT = 0
_G_SHIFT = 8
_B_SHIFT = 16
_A_SHIFT = 24
_UINT32_MAX = 0xFFFFFFFF


def im_col32(r: int, g: int, b: int, a: int) -> int:
    """Pack four 0-255 channel values into one 32-bit colour."""
    for name, channel in (("r", r), ("g", g), ("b", b), ("a", a)):
        if not 0 <= channel <= 0xFF:
            raise ValueError(f"channel {name}={channel} is outside 0..255")
    return (a << _A_SHIFT) | (b << _B_SHIFT) | (g << _G_SHIFT) | (r << _R_SHIFT)


def color_components(color: int) -> tuple[int, int, int, int]:
    """Split a packed colour into its (r, g, b, a) channels."""
    if not 0 <= color <= _UINT32_MAX:
        raise ValueError(f"colour {color} is not a 32-bit unsigned value")
    return (
        (color >> _R_SHIFT) & 0xFF,
        (color >> _G_SHIFT) & 0xFF,
        (color >> _B_SHIFT) & 0xFF,
        (color >> _A_SHIFT) & 0xFF,
    )


def mult_alpha(color: int, mult: float) -> int:
    """Return the colour with its alpha channel scaled by ``mult``."""
    if not 0 <= color <= _UINT32_MAX:
        raise ValueError(f"colour {color} is not a 32-bit unsigned value")
    alpha = int((color >> _A_SHIFT) * mult) & 0xFF
    return (color & 0x00FFFFFF) | (alpha << _A_SHIFT)


C_SKYRIMGREY = im_col32(255, 255, 255, 100)
C_SKYRIMWHITE = im_col32(255, 255, 255, 255)
C_BLACK = im_col32(0, 0, 0, 255)
C_SKYRIMDARKGREY_MENUBACKGROUND = im_col32(0, 0, 0, 125)
C_QUARTERTRANSPARENT = im_col32(255, 255, 255, int(255.0 * 0.25))
C_HALFTRANSPARENT = im_col32(255, 255, 255, int(255.0 * 0.5))
C_TRIQUARTERTRANSPARENT = im_col32(255, 255, 255, int(255.0 * 0.75))
C_VOID = im_col32(255, 255, 255, 0)