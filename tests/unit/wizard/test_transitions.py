"""Tests for the pure wizard transition function."""

from pathlib import Path

from osu_switcher.wizard.keys import Key, KeyEvent
from osu_switcher.wizard.state import (
    EnteringInstallDirectory,
    EnteringServer,
    Exited,
    Finished,
    SelectingInstallDirectory,
    SelectingServers,
    ServerEntry,
    WizardState,
)
from osu_switcher.wizard.text_input import TextInputBuffer
from osu_switcher.wizard.transitions import initial_state, move_cursor, resolve_started, step
from tests.fakes.wizard_io import keys, typed

INSTALL_DIR = Path("/games/osu!")


def _accept_all(path: Path) -> bool:
    return True


def _reject_all(path: Path) -> bool:
    return False


def _run(state: WizardState, events: list[KeyEvent], is_installation=_accept_all) -> WizardState:
    for event in events:
        state = step(state, event, is_installation=is_installation)
    return state


def _selecting(*servers: str, cursor: int = 0) -> SelectingServers:
    return SelectingServers(
        cursor=cursor,
        servers=tuple(ServerEntry(server=s) for s in servers),
        install_dir=INSTALL_DIR,
    )


def test_started_with_detected_installation_offers_it() -> None:
    state = resolve_started(initial_state(["a.example"]), INSTALL_DIR)

    assert state == SelectingInstallDirectory(
        cursor=0, detected_path=INSTALL_DIR, servers=(ServerEntry("a.example"),)
    )


def test_started_without_detection_asks_for_path() -> None:
    state = resolve_started(initial_state(["a.example"]), None)

    assert isinstance(state, EnteringInstallDirectory)
    assert state.buffer == TextInputBuffer()
    assert not state.invalid


def test_move_cursor_saturates() -> None:
    assert move_cursor(0, 3, Key.UP) == 0
    assert move_cursor(2, 3, Key.DOWN) == 2
    assert move_cursor(1, 3, Key.PAGE_DOWN) == 2
    assert move_cursor(1, 3, Key.HOME) == 0
    assert move_cursor(1, 3, Key.ENTER) is None


def test_navigation_in_server_list_does_not_wrap() -> None:
    state = _run(_selecting("a.example", "b.example"), keys(Key.UP, Key.UP))
    assert isinstance(state, SelectingServers)
    assert state.cursor == 0

    state = _run(state, keys(Key.DOWN, Key.DOWN, Key.DOWN, Key.DOWN))
    assert isinstance(state, SelectingServers)
    assert state.cursor == 2
    assert state.on_custom_item


def test_space_toggles_without_moving_cursor() -> None:
    state = _run(_selecting("a.example", "b.example"), keys(Key.DOWN) + typed(" "))

    assert isinstance(state, SelectingServers)
    assert state.cursor == 1
    assert state.enabled_servers() == ["b.example"]

    state = _run(state, typed(" "))
    assert isinstance(state, SelectingServers)
    assert state.enabled_servers() == []


def test_space_on_custom_item_is_a_noop() -> None:
    start = _selecting("a.example", cursor=1)

    assert _run(start, typed(" ")) == start


def test_confirm_with_nothing_selected_stays_put() -> None:
    start = _selecting("a.example", "b.example")

    assert _run(start, keys(Key.ENTER)) == start


def test_confirm_finishes_with_enabled_servers_in_list_order() -> None:
    state = _run(
        _selecting("a.example", "b.example", "c.example"),
        keys(Key.END, Key.UP) + typed(" ") + keys(Key.HOME) + typed(" ") + keys(Key.ENTER),
    )

    assert state == Finished(install_dir=INSTALL_DIR, servers=("a.example", "c.example"))


def test_custom_item_opens_server_entry() -> None:
    state = _run(_selecting("a.example", cursor=1), keys(Key.ENTER))

    assert state == EnteringServer(
        buffer=TextInputBuffer(),
        invalid=False,
        servers=(ServerEntry("a.example"),),
        install_dir=INSTALL_DIR,
    )


def test_invalid_server_reprompts_and_keeps_selections() -> None:
    start = _selecting("a.example", "b.example")
    state = _run(start, typed(" ") + keys(Key.END, Key.ENTER) + typed("bad") + keys(Key.ENTER))

    assert isinstance(state, EnteringServer)
    assert state.invalid
    assert state.buffer.content == "bad"
    assert state.servers[0].enabled


def test_valid_server_is_appended_enabled_and_selected() -> None:
    start = _selecting("a.example", "b.example", cursor=2)
    state = _run(start, keys(Key.ENTER) + typed("new.example") + keys(Key.ENTER))

    assert isinstance(state, SelectingServers)
    assert state.servers[-1] == ServerEntry(server="new.example", enabled=True)
    assert state.cursor == 2
    assert state.enabled_servers() == ["new.example"]


def test_localhost_is_accepted_as_a_server() -> None:
    state = _run(_selecting(cursor=0), keys(Key.ENTER) + typed("localhost") + keys(Key.ENTER))

    assert isinstance(state, SelectingServers)
    assert state.enabled_servers() == ["localhost"]


def test_known_server_entered_again_is_enabled_not_duplicated() -> None:
    start = _selecting("a.example", "b.example", cursor=2)
    state = _run(start, keys(Key.ENTER) + typed(" b.example ") + keys(Key.ENTER))

    assert isinstance(state, SelectingServers)
    assert [entry.server for entry in state.servers] == ["a.example", "b.example"]
    assert state.cursor == 1
    assert state.enabled_servers() == ["b.example"]


def test_escape_returns_to_list_on_custom_item() -> None:
    start = _selecting("a.example", cursor=1)
    state = _run(start, keys(Key.ENTER) + typed("abc") + keys(Key.ESCAPE))

    assert state == start


def test_detected_directory_accepted() -> None:
    start = SelectingInstallDirectory(cursor=0, detected_path=INSTALL_DIR, servers=())

    assert _run(start, keys(Key.ENTER)) == SelectingServers(
        cursor=0, servers=(), install_dir=INSTALL_DIR
    )


def test_manual_directory_chosen_from_selection() -> None:
    start = SelectingInstallDirectory(cursor=0, detected_path=INSTALL_DIR, servers=())
    state = _run(start, keys(Key.DOWN, Key.DOWN, Key.ENTER))

    assert state == EnteringInstallDirectory(buffer=TextInputBuffer(), invalid=False, servers=())


def test_invalid_directory_is_flagged_and_input_kept() -> None:
    start = EnteringInstallDirectory(buffer=TextInputBuffer(), invalid=False, servers=())
    state = _run(start, typed("/nowhere") + keys(Key.ENTER), is_installation=_reject_all)

    assert isinstance(state, EnteringInstallDirectory)
    assert state.invalid
    assert state.buffer.content == "/nowhere"


def test_blank_directory_is_invalid() -> None:
    start = EnteringInstallDirectory(buffer=TextInputBuffer(), invalid=False, servers=())

    state = _run(start, typed("  ") + keys(Key.ENTER))

    assert isinstance(state, EnteringInstallDirectory)
    assert state.invalid


def test_quoted_path_to_exe_becomes_directory() -> None:
    seen: list[Path] = []

    def record(path: Path) -> bool:
        seen.append(path)
        return True

    start = EnteringInstallDirectory(buffer=TextInputBuffer(), invalid=False, servers=())
    state = _run(start, typed('"/games/osu!/osu!.exe"') + keys(Key.ENTER), is_installation=record)

    assert seen == [INSTALL_DIR]
    assert state == SelectingServers(cursor=0, servers=(), install_dir=INSTALL_DIR)


def test_interrupt_exits_from_any_state() -> None:
    states: list[WizardState] = [
        SelectingInstallDirectory(cursor=0, detected_path=INSTALL_DIR, servers=()),
        EnteringInstallDirectory(buffer=TextInputBuffer(), invalid=False, servers=()),
        _selecting("a.example"),
        EnteringServer(buffer=TextInputBuffer(), invalid=True, servers=(), install_dir=INSTALL_DIR),
        Finished(install_dir=INSTALL_DIR, servers=("a.example",)),
    ]

    for state in states:
        assert step(state, KeyEvent(Key.INTERRUPT), is_installation=_accept_all) == Exited(
            cancelled=True
        )


def test_any_key_after_finishing_exits() -> None:
    finished = Finished(install_dir=INSTALL_DIR, servers=("a.example",))

    assert _run(finished, typed("q")) == Exited(cancelled=False)


def test_exited_is_terminal() -> None:
    exited = Exited(cancelled=False)

    assert _run(exited, keys(Key.ENTER, Key.DOWN)) == exited


def test_pasted_path_lands_in_buffer_with_cursor_at_end() -> None:
    start = EnteringInstallDirectory(
        buffer=TextInputBuffer(content="[]", cursor=1), invalid=False, servers=()
    )

    state = _run(start, [KeyEvent.of("/games/osu!")])

    assert isinstance(state, EnteringInstallDirectory)
    assert state.buffer == TextInputBuffer(content="[/games/osu!]", cursor=12)


def test_pasted_server_is_accepted_on_enter() -> None:
    state = _run(
        _selecting("a.example", cursor=1),
        keys(Key.ENTER) + [KeyEvent.of("paste.example")] + keys(Key.ENTER),
    )

    assert isinstance(state, SelectingServers)
    assert state.enabled_servers() == ["paste.example"]
