"""Saving and loading the wheel layout as a length-prefixed JSON record."""

from __future__ import annotations

import json
import logging
from typing import Any, BinaryIO, Protocol

__all__ = [
    "WHEELER_SERIALIZATION_ID",
    "WHEELER_JSON_STRING_TYPE",
    "SERIALIZER_VERSION",
    "WheelState",
    "SerializationEntry",
    "four_cc",
    "write_string",
    "read_string",
]

_log = logging.getLogger(__name__)

_LENGTH_SIZE = 8


def four_cc(code: str) -> int:
    """Pack a four-character ASCII code into a 32-bit id, first character highest."""
    if len(code) != 4 or not code.isascii():
        raise ValueError(f"four-character code must be 4 ASCII characters, got {code!r}")
    return int.from_bytes(code.encode("ascii"), "big")


WHEELER_SERIALIZATION_ID = four_cc("WHLR")
WHEELER_JSON_STRING_TYPE = four_cc("WJSN")
SERIALIZER_VERSION = 2


def write_string(stream: BinaryIO, text: str) -> None:
    """Write ``text`` as a 64-bit little-endian byte length followed by its UTF-8 bytes."""
    data = text.encode("utf-8")
    stream.write(len(data).to_bytes(_LENGTH_SIZE, "little"))
    stream.write(data)


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def read_string(stream: BinaryIO) -> str:
    """Read a string written by :func:`write_string`; EOFError if the data is short."""
    size = int.from_bytes(_read_exact(stream, _LENGTH_SIZE), "little")
    if size == 0:
        return ""
    return _read_exact(stream, size).decode("utf-8")


class WheelState(Protocol):
    def serialize_into_json(self) -> Any: ...

    def serialize_from_json(self, data: Any) -> None: ...

    def clear(self) -> None: ...


class SerializationEntry:
    """Writes the wheel state into a save record and rebuilds it from one."""

    def __init__(self, wheel: WheelState) -> None:
        self._wheel = wheel

    def save(self, stream: BinaryIO) -> str:
        """Write the wheel state as compact JSON; return the JSON written."""
        _log.info("Serializing wheel into save...")
        payload = json.dumps(
            self._wheel.serialize_into_json(),
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
        )
        _log.info("Serializing following record: %s", payload)
        write_string(stream, payload)
        return payload

    def load(self, record_type: int, version: int, stream: BinaryIO) -> bool:
        """Rebuild the wheel state from a record; return whether it was loaded.

        Records of another type or version are ignored. The state is cleared
        only once the JSON has parsed.
        """
        if record_type != WHEELER_JSON_STRING_TYPE:
            _log.info("Load: wrong type, abort loading")
            return False
        if version != SERIALIZER_VERSION:
            _log.info("Load: wrong version, abort loading")
            return False
        try:
            text = read_string(stream)
        except (EOFError, UnicodeDecodeError) as exc:
            _log.info("Failed to read record: %s", exc)
            return False
        _log.info("Read str: %s", text)
        try:
            data = json.loads(text)
            self._wheel.clear()
            self._wheel.serialize_from_json(data)
        except (ValueError, KeyError, TypeError) as exc:
            _log.info("Failed to parse json: %s", exc)
            return False
        return True

    def revert(self) -> None:
        """Drop the current wheel state."""
        self._wheel.clear()