"""User-facing strings, translatable through an INI file."""

from __future__ import annotations

import configparser
import enum
import logging
from pathlib import Path
from typing import Union

__all__ = ["TEXTS_PATH", "TextType", "Texts"]

_log = logging.getLogger(__name__)

TEXTS_PATH = Path("Data", "SKSE", "Plugins", "wheeler", "Texts.ini")
_SECTION = "Texts"


class TextType(enum.Enum):
    ALCHEMY_DYNAMIC_ID_CONSUMPTION_WARNING = "AlchemyDynamicIDConsumptionWarning"
    NO_WHEEL_PRESENT = "NoWheelPresent"


class Texts:
    """Current text for each TextType; each starts out as its own identifier."""

    def __init__(self) -> None:
        self._texts: dict[TextType, str] = {text_type: text_type.value for text_type in TextType}

    def load_translations(self, path: Union[str, Path] = TEXTS_PATH) -> None:
        """Replace texts from the ``[Texts]`` section of an INI file.

        Each text is looked up under a key equal to its current text; texts
        without a matching key, or a missing file, leave values unchanged.
        """
        parser = configparser.ConfigParser(interpolation=None, strict=False)
        try:
            parser.read(Path(path), encoding="utf-8-sig")
        except (configparser.Error, UnicodeDecodeError) as exc:
            _log.error("Error loading from Texts.ini: %s", exc)
            return
        if not parser.has_section(_SECTION):
            return
        for text_type, text in self._texts.items():
            if parser.has_option(_SECTION, text):
                self._texts[text_type] = parser.get(_SECTION, text)

    def get_text(self, text_type: TextType) -> str:
        return self._texts[text_type]