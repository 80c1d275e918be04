"""osu!stable installation layout, validation and auto-detection."""

import getpass
import logging
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

OSU_EXE = "osu!.exe"
# Only osu!stable ships OpenTK.dll; lazer installs also contain an osu!.exe
OPENTK_DLL = "OpenTK.dll"

STASH_FILE = "osu!switcher.ini"
LEGACY_STASH_FILE = "server-account-switcher.ini"
DATABASE_FILE = "osu!.db"
REPAIR_MARKER_FILE = ".require_update"
AUTH_LOG_FILE = Path("Logs") / "osu!auth.log"

_OSZ_OPEN_COMMAND_KEY = r"osustable.File.osz\Shell\Open\Command"


@dataclass(frozen=True)
class OsuPaths:
    """All files the switcher touches inside one installation."""

    root: Path
    user_config: Path
    stash: Path
    legacy_stash: Path
    database: Path
    executable: Path
    repair_marker: Path
    auth_log: Path

    @staticmethod
    def for_installation(root: Path, system_username: str | None = None) -> "OsuPaths":
        """Build paths for `root`, using the current OS user's config by default."""
        user = system_username if system_username is not None else getpass.getuser()
        return OsuPaths(
            root=root,
            user_config=root / f"osu!.{user}.cfg",
            stash=root / STASH_FILE,
            legacy_stash=root / LEGACY_STASH_FILE,
            database=root / DATABASE_FILE,
            executable=root / OSU_EXE,
            repair_marker=root / REPAIR_MARKER_FILE,
            auth_log=root / AUTH_LOG_FILE,
        )


def is_osu_installation(path: Path) -> bool:
    """Check whether `path` is an osu!stable installation directory."""
    return (path / OSU_EXE).is_file() and (path / OPENTK_DLL).is_file()


def flatten_installation_path(path: Path) -> Path:
    """Accept a path to osu!.exe itself as meaning its directory."""
    if path.name == OSU_EXE:
        return path.parent
    return path


def parse_path_input(text: str) -> Path:
    """Turn user-entered text into a candidate installation directory.

    Surrounding whitespace and quotes (as produced by Explorer's "Copy as
    path") are dropped before flattening.
    """
    cleaned = text.strip().strip('"').strip("'").strip()
    return flatten_installation_path(Path(cleaned).expanduser())


def exe_from_open_command(command: str) -> Path | None:
    """Extract the executable from a registry command like `"C:\\osu!\\osu!.exe" "%1"`."""
    parts = command.split('"')
    if len(parts) < 2 or not parts[1]:
        return None
    return Path(parts[1])


class InstallationLocator(ABC):
    """Finds an existing installation without asking the user."""

    @abstractmethod
    def find_installation(self) -> Path | None:
        """Return a validated installation directory, or None if none was found."""
        ...


class RealInstallationLocator(InstallationLocator):
    """Uses the .osz file association osu!stable registers on Windows."""

    def find_installation(self) -> Path | None:
        if sys.platform != "win32":
            logger.debug("Installation auto-detection is only available on Windows")
            return None

        import winreg

        try:
            with winreg.OpenKey(winreg.HKEY_CLASSES_ROOT, _OSZ_OPEN_COMMAND_KEY) as key:
                command, _ = winreg.QueryValueEx(key, "")
        except OSError:
            logger.debug("No osu!stable .osz association in the registry")
            return None

        exe = exe_from_open_command(str(command))
        if exe is None:
            return None

        osu_dir = flatten_installation_path(exe)
        if not is_osu_installation(osu_dir):
            logger.debug("Registered osu! path %s is not a valid installation", osu_dir)
            return None
        return osu_dir
