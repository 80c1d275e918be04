"""Game process lifecycle: stop any running osu! and start it against a server.

This abstraction enables dependency injection for testing without mock.patch.
"""

import logging
import subprocess
import sys
from abc import ABC, abstractmethod
from pathlib import Path

from osu_switcher.core.errors import RelaunchError
from osu_switcher.core.servers import launch_argument
from osu_switcher.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)

_KILL_OSU_POWERSHELL = (
    "$p = Get-Process -Name osu! -ErrorAction SilentlyContinue; "
    "if (!$p) { Exit 0; }; "
    "Stop-Process -Force -InputObject $p -ErrorAction Stop; "
    "Wait-Process -InputObject $p"
)


class GameProcess(ABC):
    """Abstract interface for restarting the game client."""

    @abstractmethod
    def restart(self, osu_exe: Path, server: str) -> None:
        """Kill any running osu! instance and launch `osu_exe` for `server`.

        Args:
            osu_exe: Path to osu!.exe
            server: Server identifier; remapped to the -devserver argument

        Raises:
            RelaunchError: If the game could not be stopped or started
        """
        ...


class RealGameProcess(GameProcess):
    """Production implementation.

    Windows uses PowerShell to stop the process and `cmd /C start` to detach
    the new one. Elsewhere osu! is assumed to run under wine.
    """

    def restart(self, osu_exe: Path, server: str) -> None:
        devserver = launch_argument(server)
        if sys.platform == "win32":
            self._kill_windows()
            command = ["cmd", "/C", "start", "", str(osu_exe), "-devserver", devserver]
        else:
            self._kill_posix()
            command = ["wine", str(osu_exe), "-devserver", devserver]

        logger.debug("Launching: %s", command)
        try:
            subprocess.Popen(command, cwd=osu_exe.parent)
        except OSError as e:
            raise RelaunchError("start osu!", osu_exe, str(e)) from e

    def _kill_windows(self) -> None:
        try:
            run_subprocess_with_context(
                ["powershell", "-NoProfile", "-Command", _KILL_OSU_POWERSHELL],
                operation_context="stop running osu!",
            )
        except RuntimeError as e:
            raise RelaunchError("stop running osu!", detail=str(e)) from e

    def _kill_posix(self) -> None:
        try:
            # pkill exits 1 when nothing matched, which is the common case
            result = run_subprocess_with_context(
                ["pkill", "-f", "osu!.exe"],
                operation_context="stop running osu!",
                check=False,
            )
        except RuntimeError as e:
            raise RelaunchError("stop running osu!", detail=str(e)) from e
        if result.returncode not in (0, 1):
            raise RelaunchError("stop running osu!", detail=result.stderr.strip() or None)
