"""Icon images for wheel items, looked up by form id, keyword or icon type."""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Union

__all__ = [
    "ICON_DIRECTORY",
    "IMG_DIRECTORY",
    "ICON_CUSTOM_DIRECTORY",
    "IconImageType",
    "Image",
    "CustomIcon",
    "IconRegistry",
    "ICON_FILE_NAMES",
    "hex_string_to_int",
    "parse_custom_icon_name",
]

_log = logging.getLogger(__name__)

ICON_DIRECTORY = Path("Data", "SKSE", "Plugins", "Wheeler", "resources", "icons")
IMG_DIRECTORY = Path("Data", "SKSE", "Plugins", "Wheeler", "resources", "img")
ICON_CUSTOM_DIRECTORY = Path("Data", "SKSE", "Plugins", "Wheeler", "resources", "icons_custom")

_SVG = ".svg"
_FORM_ID_PREFIX = "FID_"
_KEYWORD_PREFIX = "KWD_"
_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)
_HEX_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


class IconImageType(enum.IntEnum):
    """Kinds of built-in icon, numbered from zero in declaration order."""

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):  # type: ignore[override]
        return count

    POTION_HEALTH = enum.auto()
    POTION_DEFAULT = enum.auto()
    SWORD_ONE_HANDED = enum.auto()
    AXE_ONE_HANDED = enum.auto()
    MACE = enum.auto()
    DAGGER = enum.auto()
    SWORD_TWO_HANDED = enum.auto()
    AXE_TWO_HANDED = enum.auto()
    WARHAMMER_TWO_HANDED = enum.auto()
    STAFF = enum.auto()
    BOW = enum.auto()
    CROSSBOW = enum.auto()
    SPELL_DEFAULT = enum.auto()
    DESTRUCTION = enum.auto()
    SHOUT = enum.auto()
    POWER = enum.auto()
    FOOD = enum.auto()
    SHIELD = enum.auto()
    ICON_DEFAULT = enum.auto()
    DESTRUCTION_FIRE = enum.auto()
    DESTRUCTION_FROST = enum.auto()
    DESTRUCTION_SHOCK = enum.auto()
    RESTORATION = enum.auto()
    POISON_DEFAULT = enum.auto()
    ARMOR_HEAVY_SHIELD = enum.auto()
    ARMOR_LIGHT_SHIELD = enum.auto()
    ARMOR_LIGHT_CHEST = enum.auto()
    ARMOR_HEAVY_CHEST = enum.auto()
    ARMOR_LIGHT_ARM = enum.auto()
    ARMOR_HEAVY_ARM = enum.auto()
    ARMOR_LIGHT_FOOT = enum.auto()
    ARMOR_HEAVY_FOOT = enum.auto()
    ARMOR_LIGHT_HEAD = enum.auto()
    ARMOR_HEAVY_HEAD = enum.auto()
    ARMOR_CLOTHING_HEAD = enum.auto()
    ARMOR_CLOTHING_CHEST = enum.auto()
    ARMOR_CLOTHING_FOOT = enum.auto()
    ARMOR_CLOTHING_ARM = enum.auto()
    ARMOR_NECKLACE = enum.auto()
    ARMOR_CIRCLET = enum.auto()
    ARMOR_RING = enum.auto()
    ARMOR_DEFAULT = enum.auto()
    SCROLL = enum.auto()
    ARROW = enum.auto()
    HAND_TO_HAND = enum.auto()
    POTION_STAMINA = enum.auto()
    POTION_MAGICKA = enum.auto()
    POTION_FIRE_RESIST = enum.auto()
    POTION_SHOCK_RESIST = enum.auto()
    POTION_FROST_RESIST = enum.auto()
    POTION_MAGIC_RESIST = enum.auto()
    ALTERATION = enum.auto()
    CONJURATION = enum.auto()
    ILLUSION = enum.auto()
    TORCH = enum.auto()
    LANTERN = enum.auto()
    MASK = enum.auto()
    ARMOR_RATING = enum.auto()
    WEAPON_DAMAGE = enum.auto()
    SLOT_BACKGROUND = enum.auto()
    SLOT_HIGHLIGHTED_BACKGROUND = enum.auto()
    SLOT_ACTIVE_BACKGROUND = enum.auto()
    WHEEL_BACKGROUND = enum.auto()
    WHEEL_INDICATOR_ACTIVE = enum.auto()
    WHEEL_INDICATOR_INACTIVE = enum.auto()

    @property
    def file_name(self) -> str:
        """Name of the SVG file that holds this icon."""
        return self.name.lower() + _SVG


ICON_FILE_NAMES: dict[str, IconImageType] = {
    icon_type.file_name: icon_type for icon_type in IconImageType
}


@dataclass(frozen=True)
class Image:
    """A loaded texture and its native size."""

    texture: Any = None
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class CustomIcon:
    """What a custom icon file name refers to: a plugin's form id or a keyword."""

    plugin_name: Optional[str] = None
    form_id: Optional[int] = None
    keyword: Optional[str] = None

    @property
    def is_form_id(self) -> bool:
        return self.form_id is not None


Loader = Callable[[Path], Optional[Image]]
FormLookup = Callable[[int, str], Optional[int]]


def hex_string_to_int(text: str) -> int:
    """Parse a hexadecimal number with an optional ``0x`` prefix.

    Parsing stops at the first character that is not a hex digit; text
    without digits gives 0, and values outside a signed 32-bit int are
    clamped to its range.
    """
    if text.startswith("0x"):
        text = text[2:]
    match = _HEX_RE.match(text)
    if match is None:
        return 0
    value = int(match.group(2), 16)
    if match.group(1) == "-":
        value = -value
    return max(_INT_MIN, min(_INT_MAX, value))


def parse_custom_icon_name(file_name: str) -> Optional[CustomIcon]:
    """Interpret a custom icon file name, or None when it follows neither pattern.

    ``FID_<plugin>_0x<formid>.svg`` names a form of a plugin;
    ``KWD_<keyword>.svg`` names a keyword.
    """
    if Path(file_name).suffix != _SVG:
        return None
    if file_name.startswith(_FORM_ID_PREFIX):
        begin = len(_FORM_ID_PREFIX)
        plugin_end = file_name.find("_0x", begin)
        if plugin_end == -1:
            plugin_end = file_name.find("_0X", begin)
            if plugin_end == -1:
                return None
        plugin_name = file_name[begin:plugin_end]
        form_begin = plugin_end + 1
        form_end = file_name.find(_SVG)
        form_text = file_name[form_begin:form_end] if form_end >= form_begin else file_name[form_begin:]
        form_id = hex_string_to_int(form_text) & 0xFFFFFFFF
        return CustomIcon(plugin_name=plugin_name, form_id=form_id)
    if file_name.startswith(_KEYWORD_PREFIX):
        begin = len(_KEYWORD_PREFIX)
        end = file_name.find(_SVG)
        return CustomIcon(keyword=file_name[begin:end])
    return None


class IconRegistry:
    """Loaded icons by built-in type, and custom icons by form id and by keyword."""

    def __init__(self) -> None:
        self._by_type: dict[IconImageType, Image] = {}
        self._by_form_id: dict[int, Image] = {}
        self._by_keyword: dict[str, Image] = {}

    def load_images(self, directory: Union[str, Path], loader: Loader) -> None:
        """Load every built-in icon file found in ``directory``.

        ``loader`` turns a file into an Image, or returns None when it fails;
        a failed icon is recorded as an empty Image.
        """
        for entry in sorted(Path(directory).iterdir()):
            icon_type = ICON_FILE_NAMES.get(entry.name)
            if icon_type is None:
                continue
            if entry.suffix != _SVG:
                _log.warning("file %s, does not match supported extension '.svg'", entry.name)
                continue
            image = loader(entry)
            if image is None:
                _log.error("failed to load texture %s", entry.name)
                image = Image()
            self._by_type[icon_type] = image

    def load_custom_icon_images(
        self, directory: Union[str, Path], loader: Loader, lookup_form: FormLookup
    ) -> None:
        """Load custom icons named by form id or keyword from ``directory``.

        ``lookup_form`` resolves a plugin-local form id and plugin name to
        the form's runtime id, or None when there is no such form.
        """
        for entry in sorted(Path(directory).iterdir()):
            if entry.suffix != _SVG:
                continue
            icon = parse_custom_icon_name(entry.name)
            if icon is None:
                continue
            if icon.is_form_id:
                assert icon.form_id is not None and icon.plugin_name is not None
                resolved = lookup_form(icon.form_id, icon.plugin_name)
                if resolved is None:
                    continue
                self._by_form_id[resolved] = loader(entry) or Image()
            else:
                assert icon.keyword is not None
                self._by_keyword[icon.keyword] = loader(entry) or Image()

    def get_icon_image(
        self,
        image_type: IconImageType,
        form_id: Optional[int] = None,
        keywords: Iterable[str] = (),
    ) -> Image:
        """The icon for a form: by form id, then by keyword, then by type."""
        if form_id is not None and form_id in self._by_form_id:
            return self._by_form_id[form_id]
        form_keywords = set(keywords)
        for keyword in sorted(self._by_keyword):
            if keyword in form_keywords:
                return self._by_keyword[keyword]
        return self._by_type.get(IconImageType(image_type), Image())