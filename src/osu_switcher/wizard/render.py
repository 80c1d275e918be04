"""Terminal rendering of wizard states with rich."""

from abc import ABC, abstractmethod

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from osu_switcher.wizard.state import (
    EnteringInstallDirectory,
    EnteringServer,
    Exited,
    Finished,
    SelectingInstallDirectory,
    SelectingServers,
    Started,
    WizardState,
)
from osu_switcher.wizard.text_input import TextInputBuffer

BANNER = """\
██████ █████ ██  ██   ██   █████ ██     ██ ██ ██████ █████ ██   ██
██  ██ ██    ██  ██   ██   ██    ██     ██ ██   ██   ██    ██   ██
██  ██    ██ ██  ██           ██ ██ ███ ██ ██   ██   ██    ██ █ ██
██████ █████ ██████   ██   █████  ███ ███  ██   ██   █████ ██   ██

osu!stable server+account switcher to automate re-signing in

Press 'Ctrl+C' to forcefully exit."""

CUSTOM_DIRECTORY_ITEM = "Enter a custom osu! installation path..."
CUSTOM_SERVER_ITEM = "Enter a custom osu! private server..."


class WizardView(ABC):
    """Draws the wizard. Implementations must not change state."""

    @abstractmethod
    def render(self, state: WizardState) -> None:
        ...


def _list_item(label: Text, highlighted: bool) -> Text:
    line = Text("> " if highlighted else "  ")
    line.append_text(label)
    if highlighted:
        line.stylize("reverse", 2)
    return line


def render_text_input(buffer: TextInputBuffer) -> Text:
    """Buffer contents with the cursor shown as a reversed cell."""
    text = Text(buffer.content[: buffer.cursor])
    under_cursor = buffer.content[buffer.cursor : buffer.cursor + 1] or " "
    text.append(under_cursor, style="reverse")
    text.append(buffer.content[buffer.cursor + 1 :])
    return text


def build_body(state: WizardState) -> Panel | Group | Text | None:
    """Renderable for one state, or None when there is nothing to draw."""
    if isinstance(state, Started | Exited):
        return None

    if isinstance(state, SelectingInstallDirectory):
        items = [
            _list_item(Text(str(state.detected_path), style="bold green"), state.cursor == 0),
            _list_item(Text(CUSTOM_DIRECTORY_ITEM, style="italic grey50"), state.cursor == 1),
        ]
        return Panel(Group(*items), title=" osu! install directory ", border_style="grey50")

    if isinstance(state, EnteringInstallDirectory | EnteringServer):
        if isinstance(state, EnteringInstallDirectory):
            title = " Enter osu! installation directory (eg. 'D:\\osu!') "
            error = "Invalid osu! installation! Please try again."
        else:
            title = " Enter new osu! private server domain (eg. 'akatsuki.pw') "
            error = "Invalid domain! Please try again."
        box = Panel(
            render_text_input(state.buffer),
            title=title,
            border_style="red" if state.invalid else "grey50",
        )
        if state.invalid:
            return Group(box, Text(error, style="red"))
        return box

    if isinstance(state, SelectingServers):
        items = []
        for index, entry in enumerate(state.servers):
            style = "bold underline green" if entry.enabled else "grey50"
            items.append(_list_item(Text(entry.server, style=style), state.cursor == index))
        items.append(
            _list_item(Text(CUSTOM_SERVER_ITEM, style="italic grey50"), state.on_custom_item)
        )
        return Panel(
            Group(*items),
            title=" osu! private server domains "
            "(Press 'Space' to select, and 'Enter' to continue) ",
            border_style="grey50",
        )

    if isinstance(state, Finished):
        return Text(
            "Created all shortcuts! Press any key to exit...", style="green", justify="center"
        )

    return None


class RichWizardView(WizardView):
    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console()

    def render(self, state: WizardState) -> None:
        body = build_body(state)
        self._console.clear()
        self._console.print(Text(BANNER, style="dim", justify="center"))
        self._console.print()
        if body is not None:
            self._console.print(body)

