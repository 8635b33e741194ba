"""Reaction to callback events sent by the in-game settings menu."""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Callable, Optional, Union

from wheelcore.config import CONTROL_SETTINGS_PATH, STYLE_SETTINGS_PATH, Config
from wheelcore.controls import Controls

__all__ = [
    "UPDATE_SETTINGS_EVENT",
    "BUTTON_CALLBACK_EVENT",
    "SETTINGS_PAGES",
    "RESET_ALL_WHEELS_BUTTON",
    "EventResult",
    "ModCallbackEventHandler",
]

UPDATE_SETTINGS_EVENT = "dmenu_updateSettings"
BUTTON_CALLBACK_EVENT = "dmenu_buttonCallback"
SETTINGS_PAGES = frozenset({"Wheeler Styles", "Wheeler Controls"})
RESET_ALL_WHEELS_BUTTON = "wheeler_reset_all_wheels"


class EventResult(enum.Enum):
    CONTINUE = 0
    STOP = 1


class ModCallbackEventHandler:
    """Reloads settings or resets wheels in response to settings-menu events."""

    def __init__(
        self,
        config: Config,
        controls: Controls,
        viewport_height: float,
        on_reset_wheels: Optional[Callable[[], None]] = None,
        style_path: Union[str, Path] = STYLE_SETTINGS_PATH,
        control_path: Union[str, Path] = CONTROL_SETTINGS_PATH,
    ) -> None:
        self._config = config
        self._controls = controls
        self._viewport_height = viewport_height
        self._on_reset_wheels = on_reset_wheels
        self._style_path = style_path
        self._control_path = control_path

    def process_event(self, event_name: Optional[str], str_arg: Optional[str]) -> EventResult:
        """Handle one event; always lets other listeners see it too."""
        if event_name is None:
            return EventResult.CONTINUE
        if event_name == UPDATE_SETTINGS_EVENT:
            if str_arg in SETTINGS_PAGES:
                self._config.read_style_config(self._style_path)
                self._config.read_control_config(self._control_path)
                self._config.offset_sizing_to_viewport(self._viewport_height)
                self._controls.bind_all_inputs_from_config(self._config)
        elif event_name == BUTTON_CALLBACK_EVENT:
            if str_arg == RESET_ALL_WHEELS_BUTTON and self._on_reset_wheels is not None:
                self._on_reset_wheels()
        return EventResult.CONTINUE