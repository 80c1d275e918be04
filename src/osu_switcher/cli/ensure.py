"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

from pathlib import Path
from typing import NoReturn, TypeVar

import click

from osu_switcher.cli.output import user_output
from osu_switcher.core.errors import SwitchError
from osu_switcher.core.installation import flatten_installation_path, is_osu_installation

T = TypeVar("T")


def fail(error_message: str) -> NoReturn:
    """Output a styled error and exit with code 1."""
    user_output(click.style("Error: ", fg="red") + error_message)
    raise SystemExit(1)


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            fail(error_message)

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Provides type narrowing from `T | None` to `T`.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            fail(error_message)
        return value

    @staticmethod
    def installation(path: Path) -> Path:
        """Ensure `path` (or the directory of a given osu!.exe) is an osu!stable install.

        Returns:
            The flattened installation directory

        Raises:
            SystemExit: If the directory is not an installation (with exit code 1)
        """
        osu_dir = flatten_installation_path(path)
        if not is_osu_installation(osu_dir):
            fail(
                f"'{osu_dir}' is not an osu!stable installation "
                "(expected both osu!.exe and OpenTK.dll)"
            )
        return osu_dir


def report_switch_error(error: SwitchError) -> NoReturn:
    """Error boundary for switch failures: print which file/operation failed and exit."""
    message = str(error)
    fail(message[:1].upper() + message[1:])
