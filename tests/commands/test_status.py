"""Tests for the status command."""

import json
from pathlib import Path

from click.testing import CliRunner

from osu_switcher.cli.cli import cli
from tests.fakes.context import create_test_context
from tests.test_utils.osu_install import make_installation


def test_status_lists_active_and_saved_accounts(tmp_path: Path) -> None:
    paths = make_installation(
        tmp_path / "osu",
        username="pserver",
        endpoint="akatsuki.gg",
        stash_text=(
            "[osu.ppy.sh]\nUsername=main\nPassword=secret\n\n[ripple.moe]\nUsername=\nPassword=\n"
        ),
    )
    test_ctx = create_test_context()

    runner = CliRunner()
    result = runner.invoke(cli, ["status", "--osu", str(paths.root)], obj=test_ctx)

    assert result.exit_code == 0, result.output
    assert "Active: akatsuki.gg as pserver" in result.output
    assert "osu.ppy.sh: main" in result.output
    assert "ripple.moe: (empty)" in result.output
    assert "secret" not in result.output


def test_status_before_first_switch(tmp_path: Path) -> None:
    paths = make_installation(tmp_path / "osu", username=None)
    test_ctx = create_test_context()

    runner = CliRunner()
    result = runner.invoke(cli, ["status", "--osu", str(paths.root)], obj=test_ctx)

    assert result.exit_code == 0, result.output
    assert "(no osu! user config yet)" in result.output
    assert "No saved accounts." in result.output
    assert not paths.stash.exists()


def test_status_json_never_includes_passwords(tmp_path: Path) -> None:
    paths = make_installation(
        tmp_path / "osu",
        username="",
        password="",
        stash_text="[gatari.pw]\nUsername=g\nPassword=hunter2\n",
    )
    test_ctx = create_test_context()

    runner = CliRunner()
    result = runner.invoke(cli, ["status", "--osu", str(paths.root), "--json"], obj=test_ctx)

    assert result.exit_code == 0, result.output
    assert "hunter2" not in result.output
    data = json.loads(result.output)
    assert data["active_server"] == "osu.ppy.sh"
    assert data["active_username"] == ""
    assert data["stash_file"] == str(paths.stash)
    assert data["stashed"] == [{"server": "gatari.pw", "username": "g", "has_password": True}]


def test_status_requires_installation(tmp_path: Path) -> None:
    test_ctx = create_test_context()

    runner = CliRunner()
    result = runner.invoke(cli, ["status", "--osu", str(tmp_path)], obj=test_ctx)

    assert result.exit_code == 1
    assert "Error:" in result.output
