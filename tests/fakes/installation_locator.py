"""Fake InstallationLocator with a fixed answer."""

from pathlib import Path

from osu_switcher.core.installation import InstallationLocator


class FakeInstallationLocator(InstallationLocator):
    def __init__(self, installation: Path | None = None) -> None:
        self._installation = installation

    def find_installation(self) -> Path | None:
        return self._installation
