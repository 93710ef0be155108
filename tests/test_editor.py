from textgrid.buffer import TextBuffer
from textgrid.editor import Editor, KeyInput


def type_text(editor: Editor, text: str) -> None:
    for char in text:
        if char == "\n":
            editor.handle_key(KeyInput(key="ENTER"))
        else:
            editor.handle_key(KeyInput(key=char, text=char))


def test_new_editor_owns_empty_buffer() -> None:
    editor = Editor()

    assert editor.buffer.length() == 0
    assert editor.cursor == (0, 0)
    assert editor.visible_lines() == ()


def test_typing_into_empty_buffer() -> None:
    editor = Editor()

    type_text(editor, "hi\nthere")

    assert editor.buffer.get_lines() == ["hi", "there"]
    assert editor.cursor == (1, 5)


def test_enter_splits_at_cursor() -> None:
    editor = Editor(TextBuffer.from_text("hello"))
    editor.cursor = (0, 2)

    result = editor.handle_key(KeyInput(key="ENTER"))

    assert result.consumed
    assert editor.buffer.get_lines() == ["he", "llo"]
    assert editor.cursor == (1, 0)


def test_backspace_deletes_and_joins() -> None:
    editor = Editor(TextBuffer.from_text("ab\ncd"))
    editor.cursor = (1, 1)

    editor.handle_key(KeyInput(key="BACKSPACE"))
    assert editor.buffer.get_lines() == ["ab", "d"]
    assert editor.cursor == (1, 0)

    editor.handle_key(KeyInput(key="BACKSPACE"))
    assert editor.buffer.get_lines() == ["abd"]
    assert editor.cursor == (0, 2)


def test_backspace_at_start_and_on_empty_buffer() -> None:
    editor = Editor(TextBuffer.from_text("ab"))

    editor.handle_key(KeyInput(key="BACKSPACE"))
    assert editor.buffer.get_lines() == ["ab"]

    empty = Editor()
    assert empty.handle_key(KeyInput(key="BACKSPACE")).consumed
    assert empty.buffer.length() == 0


def test_cursor_movement_wraps_and_clamps() -> None:
    editor = Editor(TextBuffer.from_text("abc\nx"))
    editor.cursor = (0, 3)

    editor.move("RIGHT")
    assert editor.cursor == (1, 0)
    editor.move("LEFT")
    assert editor.cursor == (0, 3)
    editor.move("DOWN")
    assert editor.cursor == (1, 1)
    editor.move("DOWN")
    assert editor.cursor == (1, 1)
    editor.move("UP")
    editor.move("END")
    assert editor.cursor == (0, 3)
    editor.move("HOME")
    assert editor.cursor == (0, 0)


def test_unknown_and_control_keys_are_ignored() -> None:
    editor = Editor(TextBuffer.from_text("ab"))

    assert not editor.handle_key(KeyInput(key="F5")).consumed
    assert not editor.handle_key(KeyInput(key="s", text="s", modifiers=("CTRL",))).consumed
    assert editor.buffer.version == 0


def test_window_follows_cursor() -> None:
    editor = Editor(TextBuffer.from_text("0\n1\n2\n3\n4"), height=2)

    for _ in range(3):
        editor.move("DOWN")
    assert editor.top == 2
    assert editor.visible_lines() == ("2", "3")

    editor.move("UP")
    editor.move("UP")
    assert editor.top == 1

    view = editor.view()
    assert view.lines == ("1", "2")
    assert view.cursor == (1, 0)


def test_resize_keeps_cursor_visible() -> None:
    editor = Editor(TextBuffer.from_text("0\n1\n2\n3"), height=4)
    editor.move("END")
    for _ in range(3):
        editor.move("DOWN")

    editor.resize(1)

    assert editor.top == 3
    assert editor.visible_lines() == ("3",)
