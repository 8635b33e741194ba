"""User-tunable styling, animation and control settings, read from INI files."""

from __future__ import annotations

import enum
import logging
import re
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from wheelcore.colors import (
    C_BLACK,
    C_HALFTRANSPARENT,
    C_QUARTERTRANSPARENT,
    C_SKYRIMDARKGREY_MENUBACKGROUND,
    C_SKYRIMGREY,
    C_SKYRIMWHITE,
    IM_PI,
)

__all__ = [
    "REFERENCE_WIDTH",
    "REFERENCE_HEIGHT",
    "STYLE_SETTINGS_PATH",
    "CONTROL_SETTINGS_PATH",
    "SD_WHEELSWITCH",
    "SD_ENTRYSWITCH",
    "SD_WHEELERTOGGLE",
    "SD_ITEMSWITCH",
    "WidgetAlignment",
    "Config",
]

_log = logging.getLogger(__name__)

REFERENCE_WIDTH = 1920
REFERENCE_HEIGHT = 1080

STYLE_SETTINGS_PATH = Path("Data", "SKSE", "Plugins", "wheeler", "Styles.ini")
CONTROL_SETTINGS_PATH = Path("Data", "SKSE", "Plugins", "wheeler", "Controls.ini")

SD_WHEELSWITCH = "UIFavorite"
SD_ENTRYSWITCH = "UIMenuFocus"
SD_WHEELERTOGGLE = "UIInventoryOpenSD"
SD_ITEMSWITCH = "UIMenuPrevNextSD"


class WidgetAlignment(enum.IntEnum):
    LEFT = 0
    CENTER = 1


class _Source(enum.Enum):
    STYLE = "style"
    CONTROL = "control"


Value = Union[bool, int, float, WidgetAlignment]


@dataclass(frozen=True)
class _Setting:
    section: str
    key: str
    default: Value
    source: _Source | None
    scaled: bool = False


def _group(section: str, source: _Source | None, *entries: tuple) -> list[_Setting]:
    settings = []
    for entry in entries:
        key, default, *rest = entry
        scaled = bool(rest and rest[0])
        settings.append(_Setting(section, key, default, source, scaled))
    return settings


_S = True
_STYLE = _Source.STYLE
_CONTROL = _Source.CONTROL

_SETTINGS: list[_Setting] = [
    *_group(
        "InputBindings.GamePad", _CONTROL,
        ("nextWheel", 281), ("prevWheel", 0), ("toggleWheel", 280),
        ("nextItem", 269), ("prevItem", 268),
        ("activatePrimary", 275), ("activateSecondary", 274),
        ("addWheel", 0), ("addEmptyEntry", 0),
        ("moveEntryForward", 0), ("moveEntryBack", 0),
        ("moveWheelForward", 0), ("moveWheelBack", 0),
        ("toggleWheelIfInInventory", 0), ("toggleWheelIfNotInInventory", 0),
    ),
    *_group(
        "InputBindings.MKB", _CONTROL,
        ("nextWheel", 0x12), ("prevWheel", 0x10), ("toggleWheel", 58),
        ("prevItem", 264), ("nextItem", 265),
        ("activatePrimary", 256), ("activateSecondary", 257),
        ("addWheel", 49), ("addEmptyEntry", 50),
        ("moveEntryForward", 200), ("moveEntryBack", 208),
        ("moveWheelForward", 205), ("moveWheelBack", 203),
    ),
    *_group(
        "Control.Wheel", _CONTROL,
        ("CursorRadiusPerEntry", 10.0, _S),
        ("DoubleActivateDisable", True),
        ("ToggleHoldThreshold", 0.25),
        ("HideGameUIInEditMode", True),
    ),
    *_group(
        "Animation", _STYLE,
        ("EntryHighlightExpandTime", 0.2),
        ("EntryHighlightRetractTime", 0.2),
        ("EntryHighlightExpandScale", 0.15),
        ("EntryInputBumpTime", 0.1),
        ("EntryInputBumpScale", -0.1),
        ("ToggleVerticalFadeDistance", 0.0, _S),
        ("ToggleHorizontalFadeDistance", 0.0, _S),
        ("FadeTime", 0.08),
    ),
    *_group("Animation", None, ("SnappyCursorIndicator", False)),
    *_group(
        "Styling.Wheel", _STYLE,
        ("UseGeometricPrimitiveForBackgroundTexture", False),
        ("CursorIndicatorDist", 10.0, _S),
        ("CusorIndicatorArcWidth", 3.0, _S),
        ("CursorIndicatorArcAngle", 2 * IM_PI * 1 / 12.0),
        ("CursorIndicatorTriangleSideLength", 5.0, _S),
        ("CursorIndicatorColor", C_SKYRIMWHITE),
        ("CursorIndicatorInwardFacing", True),
        ("WheelIndicatorOffsetX", 260.0, _S),
        ("WheelIndicatorOffsetY", 340.0, _S),
        ("WheelIndicatorSize", 10.0, _S),
        ("WheelIndicatorSpacing", 25.0, _S),
        ("WheelIndicatorActiveColor", C_SKYRIMWHITE),
        ("WheelIndicatorInactiveColor", C_SKYRIMGREY),
        ("InnerCircleRadius", 220.0, _S),
        ("OuterCircleRadius", 360.0, _S),
        ("InnerSpacing", 10.0, _S),
        ("HoveredColorBegin", C_QUARTERTRANSPARENT),
        ("HoveredColorEnd", C_HALFTRANSPARENT),
        ("UnhoveredColorBegin", C_SKYRIMDARKGREY_MENUBACKGROUND),
        ("UnhoveredColorEnd", C_SKYRIMDARKGREY_MENUBACKGROUND),
        ("ActiveArcColorBegin", C_SKYRIMWHITE),
        ("ActiveArcColorEnd", C_SKYRIMWHITE),
        ("InActiveArcColorBegin", C_SKYRIMGREY),
        ("InActiveArcColorEnd", C_SKYRIMGREY),
        ("ActiveArcWidth", 7.0, _S),
        ("BlurOnOpen", True),
        ("SlowTimeScale", 0.1),
        ("CenterOffsetX", 450.0, _S),
        ("CenterOffsetY", 0.0, _S),
        ("TextColor", C_SKYRIMWHITE),
        ("TextShadowColor", C_BLACK),
    ),
    *_group(
        "Styling.Wheel", None,
        ("WheelBackgroundTextureScale", 1.0),
        ("WheelIndicatorAlignment", WidgetAlignment.LEFT),
    ),
    *_group(
        "Styling.Entry.Highlight.Text", _STYLE,
        ("OffsetX", 0.0, _S), ("OffsetY", -130.0, _S), ("Size", 27.0, _S),
    ),
    *_group(
        "Styling.Item.Highlight.Texture", _STYLE,
        ("OffsetX", 0.0, _S), ("OffsetY", -50.0, _S), ("Scale", 0.2, _S),
    ),
    *_group(
        "Styling.Item.Highlight.Text", _STYLE,
        ("OffsetX", 0.0, _S), ("OffsetY", 20.0, _S), ("Size", 35.0, _S),
    ),
    *_group(
        "Styling.Item.Highlight.Desc", _STYLE,
        ("OffsetX", 0.0, _S), ("OffsetY", 50.0, _S), ("Size", 30.0, _S),
        ("LineLength", 500.0, _S), ("LineSpacing", 5.0, _S),
    ),
    *_group(
        "Styling.Item.Highlight.StatIcon", _STYLE,
        ("OffsetX", 0.0, _S), ("OffsetY", 0.0, _S), ("Scale", 0.2, _S),
    ),
    *_group(
        "Styling.Item.Highlight.StatText", _STYLE,
        ("OffsetX", 0.0, _S), ("OffsetY", 0.0, _S), ("Size", 35.0, _S),
    ),
    *_group(
        "Styling.Item.Slot.Texture", _STYLE,
        ("OffsetX", 0.0, _S), ("OffsetY", -25.0, _S), ("Scale", 0.1, _S),
    ),
    *_group(
        "Styling.Item.Slot.Text", _STYLE,
        ("OffsetX", 0.0, _S), ("OffsetY", 10.0, _S), ("Size", 30.0, _S),
    ),
    *_group("Styling.Item.Slot.BackgroundTexture", _STYLE, ("Scale", 0.1, _S)),
]

_UINT32_MAX = 0xFFFFFFFF
_SPACE = "[ \t\n\v\f\r]*"
_UINT_RE = re.compile(_SPACE + r"([+-]?)([0-9]+)")
_FLOAT_RE = re.compile(
    _SPACE
    + r"([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_uint32(text: str) -> int | None:
    """Parse a leading decimal integer; None when there is none."""
    match = _UINT_RE.match(text)
    if match is None:
        return None
    magnitude = int(match.group(2))
    if magnitude > _UINT32_MAX:
        raise ValueError(f"{text!r} is out of range for a 32-bit unsigned value")
    if match.group(1) == "-":
        return -magnitude & _UINT32_MAX
    return magnitude


def _parse_float(text: str) -> float | None:
    """Parse a leading floating-point number; None when there is none."""
    match = _FLOAT_RE.match(text)
    if match is None:
        return None
    value = float(match.group(1))
    try:
        struct.pack("<f", value)
    except OverflowError:
        raise ValueError(f"{text!r} is out of range for a float") from None
    return value


def _parse_bool(text: str, default: bool) -> bool:
    lowered = text[:2].lower()
    if not lowered:
        return default
    first = lowered[0]
    if first in "ty1":
        return True
    if first in "fn0":
        return False
    if first == "o" and len(lowered) > 1:
        if lowered[1] == "n":
            return True
        if lowered[1] == "f":
            return False
    return default


def _load_ini(path: Union[str, Path]) -> dict[tuple[str, str], str]:
    """Read an INI file into a map keyed by lower-cased (section, key)."""
    try:
        text = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError):
        return {}
    entries: dict[tuple[str, str], str] = {}
    section = ""
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line[0] in ";#":
            continue
        if line.startswith("["):
            end = line.find("]")
            if end != -1:
                section = line[1:end].strip()
            continue
        key, sep, value = line.partition("=")
        if sep:
            entries[(section.lower(), key.strip().lower())] = value.strip()
    return entries


class Config:
    """Current values of all settings, starting from their built-in defaults."""

    def __init__(self) -> None:
        self._values: dict[tuple[str, str], Value] = {
            (setting.section, setting.key): setting.default for setting in _SETTINGS
        }

    def get(self, section: str, key: str) -> Value:
        """Return the current value of a setting; KeyError if there is none."""
        try:
            return self._values[(section, key)]
        except KeyError:
            raise KeyError(f"unknown setting {section}: {key}") from None

    def read_style_config(self, path: Union[str, Path] = STYLE_SETTINGS_PATH) -> None:
        """Apply styling and animation settings found in the given INI file."""
        self._read(path, _Source.STYLE)

    def read_control_config(self, path: Union[str, Path] = CONTROL_SETTINGS_PATH) -> None:
        """Apply input bindings and control settings found in the given INI file."""
        self._read(path, _Source.CONTROL)

    def offset_sizing_to_viewport(self, viewport_height: float) -> None:
        """Scale every size-like setting by the viewport height over the reference height."""
        scale = viewport_height / REFERENCE_HEIGHT
        for setting in _SETTINGS:
            if setting.scaled:
                slot = (setting.section, setting.key)
                self._values[slot] = self._values[slot] * scale

    def _read(self, path: Union[str, Path], source: _Source) -> None:
        entries = _load_ini(path)
        for setting in _SETTINGS:
            if setting.source is not source:
                continue
            raw = entries.get((setting.section.lower(), setting.key.lower()))
            if raw is None:
                continue
            slot = (setting.section, setting.key)
            current = self._values[slot]
            if isinstance(setting.default, bool):
                self._values[slot] = _parse_bool(raw, bool(current))
            elif isinstance(setting.default, int):
                parsed = _parse_uint32(raw)
                if parsed is None:
                    _log.error(
                        "Failed to parse %s: %s when reading uint32 value.",
                        setting.section, setting.key,
                    )
                else:
                    self._values[slot] = parsed
            else:
                parsed_float = _parse_float(raw)
                if parsed_float is None:
                    _log.error(
                        "Failed to parse %s: %s when reading float value.",
                        setting.section, setting.key,
                    )
                else:
                    self._values[slot] = parsed_float