"""Editor shell that turns key input into TextBuffer operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from textgrid.buffer import TextBuffer
from textgrid.runtime import telemetry

Cursor = Tuple[int, int]  # (row, column)


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to the editor."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class EditorResult:
    """Result returned from ``Editor.handle_key``."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None


@dataclass(slots=True)
class EditorView:
    """What a host needs to draw one frame."""

    lines: Tuple[str, ...]
    top: int
    cursor: Cursor
    version: int


class Editor:
    """Owns a buffer plus the cursor and window a host renders.

    All edits go through the buffer's public operations; the editor only
    decides which row and column to pass.
    """

    def __init__(self, buffer: Optional[TextBuffer] = None, *, height: int = 0) -> None:
        self.buffer = buffer if buffer is not None else TextBuffer.empty()
        self.height = height
        self.top = 0
        self.cursor: Cursor = (0, 0)
        self.logger = telemetry.get_logger("textgrid.editor")

    def handle_key(self, key: KeyInput) -> EditorResult:
        if key.key == "ENTER":
            self.newline()
            return EditorResult(consumed=True, message="split_line")
        if key.key == "BACKSPACE":
            self.backspace()
            return EditorResult(consumed=True, message="backspace")
        if key.key in _MOVES:
            self.move(key.key)
            return EditorResult(consumed=True, message="move")
        if key.text and key.text.isprintable() and "CTRL" not in key.modifiers:
            self.insert_text(key.text)
            return EditorResult(consumed=True, message="insert")
        return EditorResult(consumed=False, status="ignored", message=key.key)

    # -- edits -----------------------------------------------------------

    def insert_text(self, text: str) -> None:
        if self.buffer.length() == 0:
            self.buffer.append_line()
        row, col = self.cursor
        line = self.buffer.get_line(row)
        self.buffer.set_line(row, line[:col] + text + line[col:])
        self._place(row, col + len(text))

    def newline(self) -> None:
        if self.buffer.length() == 0:
            self.buffer.append_line()
        row, col = self.cursor
        self.buffer.split_line_at(row, col)
        self._place(row + 1, 0)

    def backspace(self) -> None:
        if self.buffer.length() == 0:
            return
        row, col = self.cursor
        if col > 0:
            self.buffer.delete_char_at(row, col)
            self._place(row, col - 1)
        elif row > 0:
            join_at = self.buffer.width_at(row - 1)
            self.buffer.delete_char_at(row, col)
            self._place(row - 1, join_at)

    # -- cursor ----------------------------------------------------------

    def move(self, direction: str) -> None:
        if self.buffer.length() == 0:
            return
        row, col = self.cursor
        last = self.buffer.length() - 1
        if direction == "LEFT":
            if col > 0:
                col -= 1
            elif row > 0:
                row -= 1
                col = self.buffer.width_at(row)
        elif direction == "RIGHT":
            if col < self.buffer.width_at(row):
                col += 1
            elif row < last:
                row, col = row + 1, 0
        elif direction == "UP":
            row = max(row - 1, 0)
        elif direction == "DOWN":
            row = min(row + 1, last)
        elif direction == "HOME":
            col = 0
        elif direction == "END":
            col = self.buffer.width_at(row)
        self._place(row, col)

    def _place(self, row: int, col: int) -> None:
        """Clamp ``(row, col)`` into the buffer and keep it inside the window."""

        count = self.buffer.length()
        if count == 0:
            self.cursor = (0, 0)
            self.top = 0
            return
        row = min(max(row, 0), count - 1)
        col = min(max(col, 0), self.buffer.width_at(row))
        self.cursor = (row, col)
        if self.height > 0:
            if row < self.top:
                self.top = row
            elif row >= self.top + self.height:
                self.top = row - self.height + 1
        self.logger.debug(f"cursor -> {self.cursor} top={self.top}")

    # -- rendering -------------------------------------------------------

    def visible_lines(self) -> Tuple[str, ...]:
        lines = self.buffer.get_lines()
        if self.height <= 0:
            return tuple(lines)
        return tuple(lines[self.top : self.top + self.height])

    def view(self) -> EditorView:
        return EditorView(
            lines=self.visible_lines(),
            top=self.top,
            cursor=self.cursor,
            version=self.buffer.version,
        )

    def resize(self, height: int) -> None:
        self.height = max(height, 0)
        self._place(*self.cursor)


_MOVES = frozenset({"LEFT", "RIGHT", "UP", "DOWN", "HOME", "END"})
