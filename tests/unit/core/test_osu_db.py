from pathlib import Path

import pytest

from osu_switcher.core.errors import DatabaseEditError
from osu_switcher.core.osu_db import (
    edit_player_name,
    encode_uleb128,
    read_osu_string,
    read_player_name,
    read_uleb128,
    replace_player_name,
)
from tests.test_utils.osu_install import DB_TRAILER, build_osu_db


def test_uleb128_multi_byte_lengths() -> None:
    assert encode_uleb128(127) == b"\x7f"
    assert encode_uleb128(300) == b"\xac\x02"
    assert read_uleb128(b"\xac\x02rest", 0) == (300, 2)


def test_null_string_marker() -> None:
    assert read_osu_string(b"\x00", 0) == (None, 1)


def test_invalid_string_marker() -> None:
    with pytest.raises(ValueError, match="invalid string marker"):
        read_osu_string(b"\x05abc", 0)


def test_replace_keeps_header_and_trailer() -> None:
    original = build_osu_db("old")

    updated = replace_player_name(original, "a much longer player name")

    assert updated[:17] == original[:17]
    assert updated.endswith(DB_TRAILER)


def test_replace_null_name() -> None:
    updated = replace_player_name(build_osu_db(None), "someone")

    assert updated == build_osu_db("someone")


def test_edit_player_name_in_place(tmp_path: Path) -> None:
    db_path = tmp_path / "osu!.db"
    db_path.write_bytes(build_osu_db("old"))

    edit_player_name(db_path, "ユーザー")

    assert read_player_name(db_path) == "ユーザー"
    assert db_path.read_bytes().endswith(DB_TRAILER)


def test_edit_to_empty_name(tmp_path: Path) -> None:
    db_path = tmp_path / "osu!.db"
    db_path.write_bytes(build_osu_db("old"))

    edit_player_name(db_path, "")

    assert read_player_name(db_path) == ""


def test_missing_database(tmp_path: Path) -> None:
    db_path = tmp_path / "osu!.db"

    with pytest.raises(DatabaseEditError) as exc_info:
        edit_player_name(db_path, "someone")

    assert exc_info.value.path == db_path
    assert exc_info.value.operation == "open osu!.db"


def test_truncated_database_is_not_modified(tmp_path: Path) -> None:
    db_path = tmp_path / "osu!.db"
    truncated = build_osu_db("old")[:19]
    db_path.write_bytes(truncated)

    with pytest.raises(DatabaseEditError) as exc_info:
        edit_player_name(db_path, "someone")

    assert exc_info.value.operation == "parse osu!.db"
    assert db_path.read_bytes() == truncated
