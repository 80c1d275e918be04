"""Fake GameProcess for testing.

Records restart() calls instead of killing and spawning osu!.
"""

from pathlib import Path

from osu_switcher.core.errors import RelaunchError
from osu_switcher.core.game_process import GameProcess


class FakeGameProcess(GameProcess):
    """In-memory fake that tracks restarts.

    Constructor Injection:
    - fail_with: error raised from restart() (the call is still recorded)
    """

    def __init__(self, *, fail_with: RelaunchError | None = None) -> None:
        self._fail_with = fail_with
        self._restart_calls: list[tuple[Path, str]] = []

    def restart(self, osu_exe: Path, server: str) -> None:
        self._restart_calls.append((osu_exe, server))
        if self._fail_with is not None:
            raise self._fail_with

    @property
    def restart_calls(self) -> list[tuple[Path, str]]:
        """Get the list of (osu_exe, server) restart() calls.

        This property is for test assertions only.
        """
        return self._restart_calls.copy()
