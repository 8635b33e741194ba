from pathlib import Path

import pytest

from wheelcore.icons import (
    ICON_FILE_NAMES,
    CustomIcon,
    IconImageType,
    IconRegistry,
    Image,
    hex_string_to_int,
    parse_custom_icon_name,
)


def _loader(path: Path) -> Image:
    return Image(texture=path.name, width=10, height=20)


def _touch(directory: Path, *names: str) -> None:
    for name in names:
        (directory / name).write_text("<svg/>", encoding="utf-8")


@pytest.mark.parametrize("value", [0, 1, 0x12EB7, 0xABCDEF, 0x7FFFFFFF])
def test_hex_round_trip(value):
    assert hex_string_to_int(hex(value)) == value
    assert hex_string_to_int(f"{value:X}") == value


def test_hex_uppercase_prefix():
    assert hex_string_to_int("0X" + "ff") == hex_string_to_int("ff")


def test_hex_stops_at_invalid_character():
    assert hex_string_to_int("1Aqq") == hex_string_to_int("1A")


def test_hex_without_digits_is_zero():
    assert hex_string_to_int("zz") == 0


def test_hex_clamps_to_int_range():
    assert hex_string_to_int("0xFFFFFFFFFF") == 2**31 - 1


def test_parse_form_id_name():
    icon = parse_custom_icon_name("FID_Skyrim.esm_0x12EB7.svg")
    assert icon == CustomIcon(plugin_name="Skyrim.esm", form_id=0x12EB7)
    assert icon.is_form_id


def test_parse_form_id_uppercase_marker():
    icon = parse_custom_icon_name("FID_My_Mod.esp_0X800.svg")
    assert icon.plugin_name == "My_Mod.esp"
    assert icon.form_id == 0x800


def test_parse_keyword_name():
    icon = parse_custom_icon_name("KWD_WeapTypeSword.svg")
    assert icon == CustomIcon(keyword="WeapTypeSword")
    assert not icon.is_form_id


@pytest.mark.parametrize(
    "name", ["bow.svg", "FID_Skyrim.esm.svg", "KWD_Sword.png", "kwd_Sword.svg", "XFID_a_0x1.svg"]
)
def test_parse_rejects_other_names(name):
    assert parse_custom_icon_name(name) is None


def test_icon_types_numbered_in_order(tmp_path):
    members = list(IconImageType)
    assert members[0] is IconImageType.POTION_HEALTH
    assert [int(m) for m in members] == list(range(len(members)))
    _touch(tmp_path, *ICON_FILE_NAMES)
    registry = IconRegistry()
    registry.load_images(tmp_path, _loader)
    for name, image_type in ICON_FILE_NAMES.items():
        assert registry.get_icon_image(image_type) == Image(name, 10, 20)


def test_file_name_map_covers_every_type():
    assert set(ICON_FILE_NAMES.values()) == set(IconImageType)
    assert ICON_FILE_NAMES["wheel_background.svg"] is IconImageType.WHEEL_BACKGROUND


def test_load_images_by_type(tmp_path):
    _touch(tmp_path, "bow.svg", "unknown.svg", "notes.txt")
    registry = IconRegistry()
    registry.load_images(tmp_path, _loader)
    assert registry.get_icon_image(IconImageType.BOW) == Image("bow.svg", 10, 20)
    assert registry.get_icon_image(IconImageType.MACE) == Image()


def test_failed_load_gives_empty_image(tmp_path):
    _touch(tmp_path, "bow.svg")
    registry = IconRegistry()
    registry.load_images(tmp_path, lambda path: None)
    assert registry.get_icon_image(IconImageType.BOW) == Image()


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        IconRegistry().load_images(tmp_path / "absent", _loader)


def _custom_registry(tmp_path):
    _touch(
        tmp_path,
        "FID_Skyrim.esm_0x12EB7.svg",
        "FID_Missing.esp_0x1.svg",
        "KWD_Beta.svg",
        "KWD_Alpha.svg",
        "KWD_Ignored.png",
    )
    resolved = {(0x12EB7, "Skyrim.esm"): 0x00012EB7}
    registry = IconRegistry()
    registry.load_images(tmp_path, _loader)
    registry.load_custom_icon_images(tmp_path, _loader, lambda fid, plugin: resolved.get((fid, plugin)))
    return registry


def test_custom_form_id_takes_priority(tmp_path):
    registry = _custom_registry(tmp_path)
    image = registry.get_icon_image(IconImageType.BOW, form_id=0x00012EB7, keywords=["Alpha"])
    assert image.texture == "FID_Skyrim.esm_0x12EB7.svg"


def test_custom_keyword_first_in_sorted_order(tmp_path):
    registry = _custom_registry(tmp_path)
    image = registry.get_icon_image(IconImageType.BOW, form_id=5, keywords=["Beta", "Alpha"])
    assert image.texture == "KWD_Alpha.svg"


def test_unresolved_form_and_unknown_keyword_fall_back(tmp_path):
    _touch(tmp_path, "bow.svg")
    registry = _custom_registry(tmp_path)
    image = registry.get_icon_image(IconImageType.BOW, form_id=0x1, keywords=["Ignored"])
    assert image.texture == "bow.svg"