"""Executable Textual app that hosts a TextBuffer editor."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence, Tuple

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Static

from textgrid.buffer import TextBuffer
from textgrid.editor import Editor, EditorView
from textgrid.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks


class TextGridApp(App[None]):
    """Minimal Textual UI embedding the editor shell."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		content-align: left top;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, text: Optional[str] = None, height: int = 0) -> None:
        super().__init__()
        buffer = TextBuffer.from_text(text) if text is not None else TextBuffer.empty()
        self.editor = Editor(buffer, height=height)
        self._fixed_height = height > 0
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self.logger = telemetry.get_logger("textgrid.app")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._buffer_widget = Static("", id="buffer-view", markup=False)
        yield self._buffer_widget
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.editor, hooks)

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter and not self._fixed_height and self._buffer_widget:
            self.adapter.resize(self._buffer_widget.content_size.height)

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        result = self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        if result.consumed:
            event.stop()

    def _update_buffer(self, view: EditorView) -> None:
        if self._buffer_widget:
            self._buffer_widget.update("\n".join(view.lines))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            name = self.editor.buffer.name
            self._status_widget.update(f"{name} | {status}")

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        key = event.key
        if key in {"ctrl+c", "ctrl+q"}:
            return None
        modifiers = []
        if key.startswith("ctrl+"):
            modifiers.append("CTRL")
        text = event.character if event.is_printable else None
        return (key, text, tuple(modifiers))


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(key)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the textgrid Textual editor.")
    parser.add_argument(
        "--text",
        default=None,
        help="Initial buffer contents (default: an empty buffer)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=_env_int("TEXTGRID_HEIGHT", 0),
        help="Visible window height in lines (0 follows the terminal size)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default="production",
        help="Telemetry preset (default: production, logs to a file)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    app = TextGridApp(text=args.text, height=args.height)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
