"""Routing of raw input events to the wheel and filtering of those it consumes."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Protocol

from wheelcore.controls import Controls

__all__ = [
    "INVALID_KEY",
    "KEYBOARD_OFFSET",
    "MOUSE_OFFSET",
    "GAMEPAD_OFFSET",
    "EVENTS_TO_FILTER_WHEN_WHEELER_ACTIVE",
    "GamepadKey",
    "InputDevice",
    "MouseMoveEvent",
    "ThumbstickEvent",
    "ButtonEvent",
    "WheelView",
    "InputFilter",
    "gamepad_index",
]

INVALID_KEY = 0xFFFFFFFF
KEYBOARD_OFFSET = 0
MOUSE_OFFSET = 256
GAMEPAD_OFFSET = 266

EVENTS_TO_FILTER_WHEN_WHEELER_ACTIVE = frozenset(
    {
        "Favorites",
        "Inventory",
        "Stats",
        "Map",
        "Tween Menu",
        "Quick Inventory",
        "Quick Magic",
        "Quick Stats",
        "Quick Map",
        "Wait",
        "Journal",
    }
)


class GamepadKey(enum.IntEnum):
    """Raw gamepad button codes."""

    UP = 0x0001
    DOWN = 0x0002
    LEFT = 0x0004
    RIGHT = 0x0008
    START = 0x0010
    BACK = 0x0020
    LEFT_THUMB = 0x0040
    RIGHT_THUMB = 0x0080
    LEFT_SHOULDER = 0x0100
    RIGHT_SHOULDER = 0x0200
    A = 0x1000
    B = 0x2000
    X = 0x4000
    Y = 0x8000
    LEFT_TRIGGER = 0x0009
    RIGHT_TRIGGER = 0x000A


class InputDevice(enum.IntEnum):
    KEYBOARD = 0
    MOUSE = 1
    GAMEPAD = 2
    VIRTUAL_KEYBOARD = 3


_GAMEPAD_ORDER = (
    GamepadKey.UP,
    GamepadKey.DOWN,
    GamepadKey.LEFT,
    GamepadKey.RIGHT,
    GamepadKey.START,
    GamepadKey.BACK,
    GamepadKey.LEFT_THUMB,
    GamepadKey.RIGHT_THUMB,
    GamepadKey.LEFT_SHOULDER,
    GamepadKey.RIGHT_SHOULDER,
    GamepadKey.A,
    GamepadKey.B,
    GamepadKey.X,
    GamepadKey.Y,
    GamepadKey.LEFT_TRIGGER,
    GamepadKey.RIGHT_TRIGGER,
)
_GAMEPAD_INDEX = {int(key): index for index, key in enumerate(_GAMEPAD_ORDER)}


def gamepad_index(key: int) -> int:
    """Unified key id of a raw gamepad code, or INVALID_KEY for unknown codes."""
    index = _GAMEPAD_INDEX.get(int(key))
    return INVALID_KEY if index is None else index + GAMEPAD_OFFSET


@dataclass
class MouseMoveEvent:
    x: int
    y: int


@dataclass
class ThumbstickEvent:
    x: float
    y: float
    is_right: bool


@dataclass
class ButtonEvent:
    device: InputDevice
    id_code: int
    value: float = 1.0
    held_duration: float = 0.0

    @property
    def is_down(self) -> bool:
        """Pressed in this frame."""
        return self.value != 0 and self.held_duration == 0

    @property
    def is_up(self) -> bool:
        """Released in this frame."""
        return self.value == 0 and self.held_duration != 0


class WheelView(Protocol):
    def is_wheeler_open(self) -> bool: ...

    def update_cursor_pos_mouse(self, x: float, y: float) -> None: ...

    def update_cursor_pos_gamepad(self, x: float, y: float) -> None: ...


UserEventLookup = Callable[[int, InputDevice], str]


class InputFilter:
    """Feeds input events to the wheel and drops the ones it consumes.

    ``user_event_name`` maps a key id and device to the game's user-event
    name; when given, menu-opening events are suppressed while the wheel is open.
    """

    def __init__(
        self,
        controls: Controls,
        wheel: WheelView,
        user_event_name: Optional[UserEventLookup] = None,
    ) -> None:
        self._controls = controls
        self._wheel = wheel
        self._user_event_name = user_event_name

    def process_and_filter(self, events: Iterable[object]) -> list[object]:
        """Handle each event in order and return those that should still reach the game."""
        wheeler_open = self._wheel.is_wheeler_open()
        kept = []
        for event in events:
            if self._should_dispatch(event, wheeler_open):
                kept.append(event)
        return kept

    def _should_dispatch(self, event: object, wheeler_open: bool) -> bool:
        if isinstance(event, MouseMoveEvent):
            if wheeler_open:
                self._wheel.update_cursor_pos_mouse(event.x, event.y)
                return False
            return True
        if isinstance(event, ThumbstickEvent):
            if wheeler_open and event.is_right:
                self._wheel.update_cursor_pos_gamepad(event.x, event.y)
                return False
            return True
        if isinstance(event, ButtonEvent):
            return self._handle_button(event, wheeler_open)
        return True

    def _handle_button(self, button: ButtonEvent, wheeler_open: bool) -> bool:
        key = button.id_code
        is_gamepad = False
        if button.device is InputDevice.MOUSE:
            key += MOUSE_OFFSET
        elif button.device is InputDevice.KEYBOARD:
            key += KEYBOARD_OFFSET
        elif button.device is InputDevice.GAMEPAD:
            key = gamepad_index(key)
            is_gamepad = True

        should_dispatch = True
        is_bound = self._controls.is_key_bound(key)
        if wheeler_open:
            if is_bound:
                should_dispatch = False
            elif self._user_event_name is not None:
                name = self._user_event_name(key, button.device)
                should_dispatch = name not in EVENTS_TO_FILTER_WHEN_WHEELER_ACTIVE
        if is_bound and (button.is_down or button.is_up):
            self._controls.dispatch(key, button.is_down, is_gamepad)
        return should_dispatch