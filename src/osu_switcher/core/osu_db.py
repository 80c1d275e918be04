"""Minimal osu!.db editor: rewrites the stored player name and nothing else.

Layout of the header (little-endian):

    int32   version
    int32   folder count
    bool    account unlocked
    int64   unlock date (.NET ticks)
    string  player name

osu! strings are a marker byte (0x00 = null, 0x0b = present) followed, when
present, by a ULEB128 byte length and UTF-8 bytes. Everything after the player
name (the beatmap listing) is copied through untouched.
"""

import logging
import os
import struct
from pathlib import Path

from osu_switcher.core.errors import DatabaseEditError

logger = logging.getLogger(__name__)

_HEADER = struct.Struct("<ii?q")
_STRING_NULL = 0x00
_STRING_PRESENT = 0x0B


def read_uleb128(data: bytes, offset: int) -> tuple[int, int]:
    """Decode a ULEB128 integer at `offset`, returning (value, next_offset)."""
    result = 0
    shift = 0
    while True:
        if offset >= len(data):
            raise ValueError("truncated ULEB128 length")
        byte = data[offset]
        offset += 1
        result |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return result, offset
        shift += 7


def encode_uleb128(value: int) -> bytes:
    if value < 0:
        raise ValueError("ULEB128 cannot encode negative values")
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def read_osu_string(data: bytes, offset: int) -> tuple[str | None, int]:
    if offset >= len(data):
        raise ValueError("truncated string marker")
    marker = data[offset]
    offset += 1
    if marker == _STRING_NULL:
        return None, offset
    if marker != _STRING_PRESENT:
        raise ValueError(f"invalid string marker 0x{marker:02x} at byte {offset - 1}")
    length, offset = read_uleb128(data, offset)
    end = offset + length
    if end > len(data):
        raise ValueError("truncated string body")
    return data[offset:end].decode("utf-8"), end


def encode_osu_string(value: str | None) -> bytes:
    if value is None:
        return bytes([_STRING_NULL])
    raw = value.encode("utf-8")
    return bytes([_STRING_PRESENT]) + encode_uleb128(len(raw)) + raw


def read_player_name(db_path: Path) -> str | None:
    data = db_path.read_bytes()
    if len(data) < _HEADER.size:
        raise ValueError("file is shorter than the osu!.db header")
    name, _ = read_osu_string(data, _HEADER.size)
    return name


def replace_player_name(data: bytes, new_name: str) -> bytes:
    """Return a copy of the database bytes with the player name replaced."""
    if len(data) < _HEADER.size:
        raise ValueError("file is shorter than the osu!.db header")
    version, _, _, _ = _HEADER.unpack_from(data, 0)
    _, name_end = read_osu_string(data, _HEADER.size)
    logger.debug(
        "osu!.db version %d, player name spans bytes %d-%d", version, _HEADER.size, name_end
    )
    return data[: _HEADER.size] + encode_osu_string(new_name) + data[name_end:]


def edit_player_name(db_path: Path, new_name: str) -> None:
    """Rewrite the player name stored in osu!.db.

    Raises:
        DatabaseEditError: If the file is missing, unreadable, malformed, or
            cannot be written back
    """
    try:
        data = db_path.read_bytes()
    except OSError as e:
        raise DatabaseEditError("open osu!.db", db_path, str(e)) from e

    try:
        updated = replace_player_name(data, new_name)
    except (ValueError, UnicodeDecodeError, struct.error) as e:
        raise DatabaseEditError("parse osu!.db", db_path, str(e)) from e

    temp_path = db_path.with_name(db_path.name + ".tmp")
    try:
        with temp_path.open("wb") as f:
            f.write(updated)
            f.flush()
            os.fsync(f.fileno())
        temp_path.replace(db_path)
    except OSError as e:
        raise DatabaseEditError("write osu!.db", db_path, str(e)) from e
