"""Key bindings: maps key ids to wheel actions and dispatches presses and releases."""

from __future__ import annotations

import enum
import threading
from typing import Callable, Mapping, Optional

from wheelcore.config import Config

__all__ = ["Action", "Controls"]

Handler = Callable[[], None]


class Action(enum.Enum):
    """Wheel operations that an input can trigger."""

    ACTIVATE_HOVERED_ENTRY_PRIMARY = "activate_hovered_entry_primary"
    ACTIVATE_HOVERED_ENTRY_SECONDARY = "activate_hovered_entry_secondary"
    ADD_WHEEL = "add_wheel"
    ADD_EMPTY_ENTRY_TO_CURRENT_WHEEL = "add_empty_entry_to_current_wheel"
    MOVE_ENTRY_FORWARD_IN_CURRENT_WHEEL = "move_entry_forward_in_current_wheel"
    MOVE_ENTRY_BACK_IN_CURRENT_WHEEL = "move_entry_back_in_current_wheel"
    MOVE_WHEEL_FORWARD = "move_wheel_forward"
    MOVE_WHEEL_BACK = "move_wheel_back"
    NEXT_WHEEL = "next_wheel"
    PREV_WHEEL = "prev_wheel"
    TOGGLE_WHEELER = "toggle_wheeler"
    TOGGLE_WHEEL_IF_IN_INVENTORY = "toggle_wheel_if_in_inventory"
    TOGGLE_WHEEL_IF_NOT_IN_INVENTORY = "toggle_wheel_if_not_in_inventory"
    PREV_ITEM_IN_ENTRY = "prev_item_in_entry"
    NEXT_ITEM_IN_ENTRY = "next_item_in_entry"
    CLOSE_WHEELER_IF_OPENED_LONG_ENOUGH = "close_wheeler_if_opened_long_enough"
    CLOSE_WHEELER_IF_OPENED_LONG_ENOUGH_IF_IN_INVENTORY = (
        "close_wheeler_if_opened_long_enough_if_in_inventory"
    )
    CLOSE_WHEELER_IF_OPENED_LONG_ENOUGH_IF_NOT_IN_INVENTORY = (
        "close_wheeler_if_opened_long_enough_if_not_in_inventory"
    )


_MKB_SECTION = "InputBindings.MKB"
_GAMEPAD_SECTION = "InputBindings.GamePad"

# Bindings are applied in this order; a later binding on the same key wins.
_MKB_DOWN = (
    ("activatePrimary", Action.ACTIVATE_HOVERED_ENTRY_PRIMARY),
    ("activateSecondary", Action.ACTIVATE_HOVERED_ENTRY_SECONDARY),
    ("addWheel", Action.ADD_WHEEL),
    ("addEmptyEntry", Action.ADD_EMPTY_ENTRY_TO_CURRENT_WHEEL),
    ("moveEntryForward", Action.MOVE_ENTRY_FORWARD_IN_CURRENT_WHEEL),
    ("moveEntryBack", Action.MOVE_ENTRY_BACK_IN_CURRENT_WHEEL),
    ("moveWheelForward", Action.MOVE_WHEEL_FORWARD),
    ("moveWheelBack", Action.MOVE_WHEEL_BACK),
    ("nextWheel", Action.NEXT_WHEEL),
    ("prevWheel", Action.PREV_WHEEL),
    ("toggleWheel", Action.TOGGLE_WHEELER),
    ("prevItem", Action.PREV_ITEM_IN_ENTRY),
    ("nextItem", Action.NEXT_ITEM_IN_ENTRY),
)
_MKB_UP = (("toggleWheel", Action.CLOSE_WHEELER_IF_OPENED_LONG_ENOUGH),)

_GAMEPAD_DOWN = (
    ("activatePrimary", Action.ACTIVATE_HOVERED_ENTRY_PRIMARY),
    ("activateSecondary", Action.ACTIVATE_HOVERED_ENTRY_SECONDARY),
    ("addWheel", Action.ADD_WHEEL),
    ("addEmptyEntry", Action.ADD_EMPTY_ENTRY_TO_CURRENT_WHEEL),
    ("moveEntryForward", Action.MOVE_ENTRY_FORWARD_IN_CURRENT_WHEEL),
    ("moveEntryBack", Action.MOVE_ENTRY_BACK_IN_CURRENT_WHEEL),
    ("moveWheelForward", Action.MOVE_WHEEL_FORWARD),
    ("moveWheelBack", Action.MOVE_WHEEL_BACK),
    ("nextWheel", Action.NEXT_WHEEL),
    ("prevWheel", Action.PREV_WHEEL),
    ("toggleWheel", Action.TOGGLE_WHEELER),
    ("toggleWheelIfNotInInventory", Action.TOGGLE_WHEEL_IF_NOT_IN_INVENTORY),
    ("toggleWheelIfInInventory", Action.TOGGLE_WHEEL_IF_IN_INVENTORY),
    ("prevItem", Action.PREV_ITEM_IN_ENTRY),
    ("nextItem", Action.NEXT_ITEM_IN_ENTRY),
)
_GAMEPAD_UP = (
    ("toggleWheel", Action.CLOSE_WHEELER_IF_OPENED_LONG_ENOUGH),
    ("toggleWheelIfInInventory", Action.CLOSE_WHEELER_IF_OPENED_LONG_ENOUGH_IF_IN_INVENTORY),
    (
        "toggleWheelIfNotInInventory",
        Action.CLOSE_WHEELER_IF_OPENED_LONG_ENOUGH_IF_NOT_IN_INVENTORY,
    ),
)

_Table = dict[int, Action]


def _empty_tables() -> dict[tuple[bool, bool], _Table]:
    return {(is_down, is_gamepad): {} for is_down in (True, False) for is_gamepad in (True, False)}


class Controls:
    """Holds the key-to-action tables for key down and key up, keyboard/mouse and gamepad.

    ``handlers`` supplies the function to run for each action; actions without
    a handler are left unbound.
    """

    def __init__(self, handlers: Mapping[Action, Handler]) -> None:
        self._handlers = dict(handlers)
        self._tables = _empty_tables()
        self._lock = threading.Lock()

    def bind_all_inputs_from_config(self, config: Config) -> None:
        """Replace every binding with the key ids currently set in ``config``."""
        tables = _empty_tables()
        layouts = (
            (False, _MKB_SECTION, _MKB_DOWN, _MKB_UP),
            (True, _GAMEPAD_SECTION, _GAMEPAD_DOWN, _GAMEPAD_UP),
        )
        for is_gamepad, section, down, up in layouts:
            for is_down, mapping in ((True, down), (False, up)):
                table = tables[(is_down, is_gamepad)]
                for key_name, action in mapping:
                    if action not in self._handlers:
                        continue
                    table[int(config.get(section, key_name))] = action
        with self._lock:
            self._tables = tables

    def is_key_bound(self, key: int) -> bool:
        """True if ``key`` has any binding, on any device, for press or release."""
        with self._lock:
            return any(key in table for table in self._tables.values())

    def bound_action(
        self, key: int, is_down: bool = True, is_gamepad: bool = False
    ) -> Optional[Action]:
        """The action bound to ``key`` for the given condition, or None."""
        with self._lock:
            return self._tables[(is_down, is_gamepad)].get(key)

    def dispatch(self, key: int, is_down: bool = True, is_gamepad: bool = False) -> bool:
        """Run the action bound to ``key``; return whether one was found."""
        action = self.bound_action(key, is_down, is_gamepad)
        if action is None:
            return False
        self._handlers[action]()
        return True