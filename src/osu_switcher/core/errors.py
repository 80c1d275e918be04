"""Error taxonomy for server switching.

Every error names the file or operation that failed so the CLI boundary can
print something actionable. Fatal errors are raised; non-fatal ones (currently
only DatabaseEditError) are collected on SwitchResult.warnings instead.
"""

from pathlib import Path


class SwitchError(Exception):
    """Base class for all switching failures.

    Attributes:
        path: File involved in the failure, if any
        operation: Short description of what was being attempted
    """

    def __init__(self, operation: str, path: Path | None = None, detail: str | None = None) -> None:
        self.operation = operation
        self.path = path
        self.detail = detail
        super().__init__(self._format())

    def _format(self) -> str:
        message = f"failed to {self.operation}"
        if self.path is not None:
            message += f" ({self.path})"
        if self.detail:
            message += f": {self.detail}"
        return message


class InstallationNotFoundError(SwitchError):
    """The given directory is not an osu!stable installation."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            "locate osu! installation",
            path,
            "expected both osu!.exe and OpenTK.dll in this directory",
        )


class ConfigCorruptedError(SwitchError):
    """The primary config or the stash could not be parsed."""


class ConfigWriteError(SwitchError):
    """The primary config or the stash could not be written."""


class DatabaseEditError(SwitchError):
    """osu!.db could not be read or rewritten. Non-fatal: the game regenerates it."""


class RelaunchError(SwitchError):
    """The game process could not be stopped or started."""


class ShortcutCreationError(SwitchError):
    """A desktop shortcut could not be written."""


class UserCancelledError(SwitchError):
    """The user aborted an interactive prompt."""

    def __init__(self, operation: str = "continue switching") -> None:
        super().__init__(operation, None, "cancelled by user")
