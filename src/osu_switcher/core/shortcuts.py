"""Desktop shortcuts that run `osu-switcher switch` for one server each."""

import logging
import os
import shutil
import stat
import sys
from abc import ABC, abstractmethod
from pathlib import Path

from osu_switcher.core.errors import ShortcutCreationError
from osu_switcher.core.icons import shortcut_icon
from osu_switcher.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)

LAUNCHER_NAME = "osu-switcher"


def shortcut_name(server: str) -> str:
    return f"osu! ({server})"


def shortcut_arguments(osu_dir: Path, server: str) -> str:
    """Command-line arguments the shortcut passes to the launcher."""
    return f'switch --osu "{osu_dir}" --server "{server}"'


def default_shortcut_dir() -> Path:
    """The current user's Desktop."""
    if sys.platform == "win32":
        profile = os.environ.get("USERPROFILE")
        if profile:
            return Path(profile) / "Desktop"
    return Path.home() / "Desktop"


def find_launcher() -> Path:
    """Locate the installed console script, falling back to how we were invoked."""
    found = shutil.which(LAUNCHER_NAME)
    if found:
        return Path(found)
    return Path(sys.argv[0]).resolve()


def _ps_quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def build_lnk_script(link_path: Path, launcher: Path, arguments: str, icon: Path) -> str:
    """PowerShell that writes a .lnk through the WScript.Shell COM object."""
    return "; ".join(
        [
            "$shell = New-Object -ComObject WScript.Shell",
            f"$link = $shell.CreateShortcut({_ps_quote(str(link_path))})",
            f"$link.TargetPath = {_ps_quote(str(launcher))}",
            f"$link.Arguments = {_ps_quote(arguments)}",
            f"$link.IconLocation = {_ps_quote(str(icon))}",
            f"$link.WorkingDirectory = {_ps_quote(str(launcher.parent))}",
            "$link.Save()",
        ]
    )


def build_desktop_entry(name: str, launcher: Path, arguments: str, icon: Path) -> str:
    """freedesktop.org .desktop entry equivalent of a Windows shortcut."""
    return (
        "[Desktop Entry]\n"
        "Type=Application\n"
        f"Name={name}\n"
        f'Exec="{launcher}" {arguments}\n'
        f"Icon={icon}\n"
        "Terminal=true\n"
    )


class ShortcutInstaller(ABC):
    """Abstract interface for creating per-server shortcuts."""

    @abstractmethod
    def create_shortcut(self, osu_dir: Path, server: str) -> Path:
        """Create (or replace) the shortcut for `server`.

        Returns:
            Path of the shortcut file

        Raises:
            ShortcutCreationError: If the shortcut could not be written
        """
        ...


class RealShortcutInstaller(ShortcutInstaller):
    """Writes .lnk files on Windows and .desktop files elsewhere."""

    def __init__(
        self,
        shortcut_dir: Path | None = None,
        icons_dir: Path | None = None,
        launcher: Path | None = None,
    ) -> None:
        self._shortcut_dir = shortcut_dir
        self._icons_dir = icons_dir
        self._launcher = launcher

    def create_shortcut(self, osu_dir: Path, server: str) -> Path:
        target_dir = self._shortcut_dir
        if target_dir is None:
            target_dir = default_shortcut_dir()
        if not target_dir.is_dir():
            raise ShortcutCreationError("find shortcut directory", target_dir, "does not exist")

        launcher = self._launcher if self._launcher is not None else find_launcher()
        name = shortcut_name(server)
        arguments = shortcut_arguments(osu_dir, server)
        icon = shortcut_icon(osu_dir, server, self._icons_dir)

        if sys.platform == "win32":
            link_path = target_dir / f"{name}.lnk"
            self._remove_existing(link_path)
            try:
                run_subprocess_with_context(
                    [
                        "powershell",
                        "-NoProfile",
                        "-Command",
                        build_lnk_script(link_path, launcher, arguments, icon),
                    ],
                    operation_context=f"create shortcut {link_path}",
                )
            except RuntimeError as e:
                raise ShortcutCreationError("create shortcut", link_path, str(e)) from e
        else:
            link_path = target_dir / f"{name}.desktop"
            self._remove_existing(link_path)
            try:
                link_path.write_text(
                    build_desktop_entry(name, launcher, arguments, icon), encoding="utf-8"
                )
                link_path.chmod(link_path.stat().st_mode | stat.S_IXUSR)
            except OSError as e:
                raise ShortcutCreationError("create shortcut", link_path, str(e)) from e

        logger.debug("Created shortcut %s -> %s %s", link_path, launcher, arguments)
        return link_path

    def _remove_existing(self, link_path: Path) -> None:
        if not link_path.exists():
            return
        try:
            link_path.unlink()
        except OSError as e:
            raise ShortcutCreationError("delete old shortcut", link_path, str(e)) from e
