from pathlib import Path

from osu_switcher.core.installation import (
    OsuPaths,
    exe_from_open_command,
    flatten_installation_path,
    is_osu_installation,
    parse_path_input,
)


def test_stable_requires_both_marker_files(tmp_path: Path) -> None:
    (tmp_path / "osu!.exe").write_bytes(b"MZ")
    assert not is_osu_installation(tmp_path)

    (tmp_path / "OpenTK.dll").write_bytes(b"MZ")
    assert is_osu_installation(tmp_path)


def test_missing_directory_is_not_an_installation(tmp_path: Path) -> None:
    assert not is_osu_installation(tmp_path / "missing")


def test_paths_are_named_after_system_user() -> None:
    paths = OsuPaths.for_installation(Path("/games/osu!"), "alice")

    assert paths.user_config == Path("/games/osu!/osu!.alice.cfg")
    assert paths.stash == Path("/games/osu!/osu!switcher.ini")
    assert paths.legacy_stash == Path("/games/osu!/server-account-switcher.ini")
    assert paths.auth_log == Path("/games/osu!/Logs/osu!auth.log")
    assert paths.repair_marker == Path("/games/osu!/.require_update")


def test_exe_path_flattens_to_directory() -> None:
    assert flatten_installation_path(Path("/games/osu!/osu!.exe")) == Path("/games/osu!")
    assert flatten_installation_path(Path("/games/osu!")) == Path("/games/osu!")


def test_parse_path_input_strips_quotes_and_whitespace() -> None:
    assert parse_path_input('  "/games/osu!/osu!.exe"  ') == Path("/games/osu!")
    assert parse_path_input("'/games/osu!'") == Path("/games/osu!")


def test_exe_from_open_command() -> None:
    command = '"C:\\Games\\osu!\\osu!.exe" "%1"'

    assert exe_from_open_command(command) == Path("C:\\Games\\osu!\\osu!.exe")
    assert exe_from_open_command("no quotes here") is None
