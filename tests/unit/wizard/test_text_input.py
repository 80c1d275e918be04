from osu_switcher.wizard.keys import Key, KeyEvent
from osu_switcher.wizard.text_input import TextInputBuffer


def _apply_all(buffer: TextInputBuffer, *events: KeyEvent) -> TextInputBuffer:
    for event in events:
        buffer = buffer.apply(event)
    return buffer


def test_insert_in_the_middle() -> None:
    buffer = _apply_all(
        TextInputBuffer(),
        KeyEvent.of("a"),
        KeyEvent.of("b"),
        KeyEvent(Key.LEFT),
        KeyEvent.of("X"),
    )

    assert buffer == TextInputBuffer(content="aXb", cursor=2)


def test_backspace_at_start_is_a_noop() -> None:
    buffer = TextInputBuffer(content="abc", cursor=0)

    assert buffer.backspace() == buffer


def test_backspace_removes_character_before_cursor() -> None:
    buffer = TextInputBuffer(content="abc", cursor=2)

    assert buffer.backspace() == TextInputBuffer(content="ac", cursor=1)


def test_cursor_is_clamped_at_both_ends() -> None:
    buffer = TextInputBuffer(content="ab", cursor=0)

    assert buffer.move_left().cursor == 0
    assert buffer.end().move_right().cursor == 2


def test_home_and_end() -> None:
    buffer = TextInputBuffer(content="hello", cursor=2)

    assert buffer.apply(KeyEvent(Key.HOME)).cursor == 0
    assert buffer.apply(KeyEvent(Key.END)).cursor == 5


def test_multibyte_characters_move_cursor_by_one() -> None:
    buffer = _apply_all(TextInputBuffer(), KeyEvent.of("ö"), KeyEvent.of("す"))
    assert buffer == TextInputBuffer(content="öす", cursor=2)

    buffer = _apply_all(buffer, KeyEvent(Key.LEFT), KeyEvent(Key.BACKSPACE))
    assert buffer == TextInputBuffer(content="す", cursor=0)


def test_non_editing_keys_are_ignored() -> None:
    buffer = TextInputBuffer(content="abc", cursor=1)

    assert buffer.apply(KeyEvent(Key.UP)) == buffer
    assert buffer.apply(KeyEvent(Key.ENTER)) == buffer
