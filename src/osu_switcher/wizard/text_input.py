"""Single-line text input buffer for the wizard's free-text steps."""

from dataclasses import dataclass

from osu_switcher.wizard.keys import Key, KeyEvent


@dataclass(frozen=True)
class TextInputBuffer:
    """Immutable text buffer with a cursor.

    The cursor counts characters, not encoded bytes, so a multi-byte
    character moves it by exactly one position. Every edit returns a new
    buffer.
    """

    content: str = ""
    cursor: int = 0

    def insert(self, char: str) -> "TextInputBuffer":
        content = self.content[: self.cursor] + char + self.content[self.cursor :]
        return TextInputBuffer(content=content, cursor=self.cursor + len(char))

    def backspace(self) -> "TextInputBuffer":
        if self.cursor == 0:
            return self
        content = self.content[: self.cursor - 1] + self.content[self.cursor :]
        return TextInputBuffer(content=content, cursor=self.cursor - 1)

    def move_left(self) -> "TextInputBuffer":
        return TextInputBuffer(content=self.content, cursor=max(self.cursor - 1, 0))

    def move_right(self) -> "TextInputBuffer":
        return TextInputBuffer(content=self.content, cursor=min(self.cursor + 1, len(self.content)))

    def home(self) -> "TextInputBuffer":
        return TextInputBuffer(content=self.content, cursor=0)

    def end(self) -> "TextInputBuffer":
        return TextInputBuffer(content=self.content, cursor=len(self.content))

    def apply(self, event: KeyEvent) -> "TextInputBuffer":
        """Route an editing key to the matching operation; other keys are ignored."""
        if event.key is Key.CHAR:
            return self.insert(event.char)
        if event.key is Key.BACKSPACE:
            return self.backspace()
        if event.key is Key.LEFT:
            return self.move_left()
        if event.key is Key.RIGHT:
            return self.move_right()
        if event.key is Key.HOME:
            return self.home()
        if event.key is Key.END:
            return self.end()
        return self
