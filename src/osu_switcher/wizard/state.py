"""Wizard states.

WizardState is a closed union of frozen dataclasses. Each variant carries
exactly what is needed to render or resume that step; transitions build a new
value rather than mutating the old one.
"""

from dataclasses import dataclass, replace
from pathlib import Path

from osu_switcher.wizard.text_input import TextInputBuffer


@dataclass(frozen=True)
class ServerEntry:
    server: str
    enabled: bool = False


@dataclass(frozen=True)
class Started:
    """Before auto-detection has run."""

    servers: tuple[ServerEntry, ...]


@dataclass(frozen=True)
class SelectingInstallDirectory:
    """Choose between the detected installation (cursor 0) and manual entry (cursor 1)."""

    cursor: int
    detected_path: Path
    servers: tuple[ServerEntry, ...]

    ITEM_COUNT = 2


@dataclass(frozen=True)
class EnteringInstallDirectory:
    buffer: TextInputBuffer
    invalid: bool
    servers: tuple[ServerEntry, ...]


@dataclass(frozen=True)
class SelectingServers:
    """Multi-select over `servers`, plus a trailing "enter custom" item at index len(servers)."""

    cursor: int
    servers: tuple[ServerEntry, ...]
    install_dir: Path

    @property
    def item_count(self) -> int:
        return len(self.servers) + 1

    @property
    def on_custom_item(self) -> bool:
        return self.cursor >= len(self.servers)

    def enabled_servers(self) -> list[str]:
        return [entry.server for entry in self.servers if entry.enabled]

    def toggled(self) -> "SelectingServers":
        if self.on_custom_item:
            return self
        entry = self.servers[self.cursor]
        servers = list(self.servers)
        servers[self.cursor] = replace(entry, enabled=not entry.enabled)
        return replace(self, servers=tuple(servers))


@dataclass(frozen=True)
class EnteringServer:
    buffer: TextInputBuffer
    invalid: bool
    servers: tuple[ServerEntry, ...]
    install_dir: Path


@dataclass(frozen=True)
class Finished:
    """Shortcuts are created for `servers` on entry; the next key exits."""

    install_dir: Path
    servers: tuple[str, ...]


@dataclass(frozen=True)
class Exited:
    cancelled: bool


WizardState = (
    Started
    | SelectingInstallDirectory
    | EnteringInstallDirectory
    | SelectingServers
    | EnteringServer
    | Finished
    | Exited
)
