from __future__ import annotations

from typing import List

from textgrid.adapters.textual import TextualEditorAdapter, TextualUIHooks
from textgrid.buffer import TextBuffer
from textgrid.editor import Editor, EditorView


def make_adapter(
    text: str | None = None,
    *,
    views: List[EditorView] | None = None,
    statuses: List[str] | None = None,
    logs: List[str] | None = None,
) -> TextualEditorAdapter:
    buffer = TextBuffer.from_text(text) if text is not None else TextBuffer.empty()
    hooks = TextualUIHooks(
        update_buffer=lambda view: views.append(view) if views is not None else None,
        update_status=lambda status: (
            statuses.append(status) if statuses is not None else None
        ),
        log=lambda line: logs.append(line) if logs is not None else None,
    )
    return TextualEditorAdapter(Editor(buffer), hooks)


def test_adapter_renders_on_creation() -> None:
    views: List[EditorView] = []
    statuses: List[str] = []

    make_adapter("hello", views=views, statuses=statuses)

    assert views[-1].lines == ("hello",)
    assert statuses[-1] == "Ln 1, Col 1"


def test_adapter_translates_textual_keys() -> None:
    views: List[EditorView] = []
    statuses: List[str] = []
    adapter = make_adapter(views=views, statuses=statuses)

    adapter.handle_textual_key("h", text="h")
    adapter.handle_textual_key("i", text="i")
    adapter.handle_textual_key("enter", text="\r")
    adapter.handle_textual_key("x", text="x")
    adapter.handle_textual_key("backspace", text="\x08")
    adapter.handle_textual_key("backspace")

    assert views[-1].lines == ("hi",)
    assert statuses[-1] == "Ln 1, Col 3"


def test_adapter_skips_refresh_for_ignored_keys() -> None:
    views: List[EditorView] = []
    adapter = make_adapter("ab", views=views)

    result = adapter.handle_textual_key("f5")

    assert not result.consumed
    assert len(views) == 1


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    adapter = make_adapter("ab", logs=logs)

    adapter.handle_textual_key("right")

    assert any(line.startswith("key ->") for line in logs)
    assert any("changed=False" in line for line in logs)


def test_adapter_resize_pushes_new_view() -> None:
    views: List[EditorView] = []
    adapter = make_adapter("a\nb\nc", views=views)

    adapter.resize(1)

    assert views[-1].lines == ("a",)
