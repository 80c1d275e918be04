"""Pure transition function for the shortcut wizard.

`step(state, event)` never performs I/O: installation validation is injected
as a predicate and shortcut creation happens in the runner once a Finished
state is produced. This keeps whole sessions replayable from a list of keys.
"""

from collections.abc import Callable
from dataclasses import replace
from pathlib import Path

from osu_switcher.core.installation import parse_path_input
from osu_switcher.core.servers import is_valid_server
from osu_switcher.wizard.keys import Key, KeyEvent
from osu_switcher.wizard.state import (
    EnteringInstallDirectory,
    EnteringServer,
    Exited,
    Finished,
    SelectingInstallDirectory,
    SelectingServers,
    ServerEntry,
    Started,
    WizardState,
)
from osu_switcher.wizard.text_input import TextInputBuffer

InstallationPredicate = Callable[[Path], bool]


def initial_state(servers: list[str]) -> Started:
    return Started(servers=tuple(ServerEntry(server=s) for s in servers))


def resolve_started(state: Started, detected: Path | None) -> WizardState:
    """Leave Started using the auto-detected installation, if any."""
    if detected is None:
        return EnteringInstallDirectory(
            buffer=TextInputBuffer(), invalid=False, servers=state.servers
        )
    return SelectingInstallDirectory(cursor=0, detected_path=detected, servers=state.servers)


def move_cursor(cursor: int, item_count: int, key: Key) -> int | None:
    """New cursor for a navigation key (saturating, no wraparound), or None if not navigation."""
    last = max(item_count - 1, 0)
    if key is Key.UP:
        return max(cursor - 1, 0)
    if key is Key.DOWN:
        return min(cursor + 1, last)
    if key in (Key.HOME, Key.PAGE_UP):
        return 0
    if key in (Key.END, Key.PAGE_DOWN):
        return last
    return None


def step(
    state: WizardState, event: KeyEvent, *, is_installation: InstallationPredicate
) -> WizardState:
    """Apply one key event to the wizard state."""
    if event.key is Key.INTERRUPT:
        return Exited(cancelled=True)

    if isinstance(state, Finished):
        return Exited(cancelled=False)
    if isinstance(state, SelectingInstallDirectory):
        return _step_selecting_install_directory(state, event)
    if isinstance(state, EnteringInstallDirectory):
        return _step_entering_install_directory(state, event, is_installation)
    if isinstance(state, SelectingServers):
        return _step_selecting_servers(state, event)
    if isinstance(state, EnteringServer):
        return _step_entering_server(state, event)

    # Started is resolved by resolve_started(); Exited is terminal
    return state


def _step_selecting_install_directory(
    state: SelectingInstallDirectory, event: KeyEvent
) -> WizardState:
    if event.key is Key.ENTER:
        if state.cursor == 0:
            return SelectingServers(
                cursor=0, servers=state.servers, install_dir=state.detected_path
            )
        return EnteringInstallDirectory(
            buffer=TextInputBuffer(), invalid=False, servers=state.servers
        )

    cursor = move_cursor(state.cursor, SelectingInstallDirectory.ITEM_COUNT, event.key)
    if cursor is None:
        return state
    return replace(state, cursor=cursor)


def _step_entering_install_directory(
    state: EnteringInstallDirectory, event: KeyEvent, is_installation: InstallationPredicate
) -> WizardState:
    if event.key is not Key.ENTER:
        return replace(state, buffer=state.buffer.apply(event))

    if not state.buffer.content.strip():
        return replace(state, invalid=True)

    install_dir = parse_path_input(state.buffer.content)
    if not is_installation(install_dir):
        return replace(state, invalid=True)
    return SelectingServers(cursor=0, servers=state.servers, install_dir=install_dir)


def _step_selecting_servers(state: SelectingServers, event: KeyEvent) -> WizardState:
    if event.key is Key.CHAR:
        if event.char == " ":
            return state.toggled()
        return state

    if event.key is Key.ENTER:
        if state.on_custom_item:
            return EnteringServer(
                buffer=TextInputBuffer(),
                invalid=False,
                servers=state.servers,
                install_dir=state.install_dir,
            )
        enabled = state.enabled_servers()
        if not enabled:
            return state
        return Finished(install_dir=state.install_dir, servers=tuple(enabled))

    cursor = move_cursor(state.cursor, state.item_count, event.key)
    if cursor is None:
        return state
    return replace(state, cursor=cursor)


def _step_entering_server(state: EnteringServer, event: KeyEvent) -> WizardState:
    if event.key is Key.ESCAPE:
        return SelectingServers(
            cursor=len(state.servers), servers=state.servers, install_dir=state.install_dir
        )

    if event.key is not Key.ENTER:
        return replace(state, buffer=state.buffer.apply(event))

    server = state.buffer.content.strip()
    if not is_valid_server(server):
        return replace(state, invalid=True)

    servers = list(state.servers)
    existing = [i for i, entry in enumerate(servers) if entry.server == server]
    if existing:
        cursor = existing[0]
        servers[cursor] = replace(servers[cursor], enabled=True)
    else:
        servers.append(ServerEntry(server=server, enabled=True))
        cursor = len(servers) - 1

    return SelectingServers(cursor=cursor, servers=tuple(servers), install_dir=state.install_dir)
