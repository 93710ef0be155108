"""Line-oriented text buffer with bounds-checked line and character editing."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Iterable, List, Optional

from textgrid.runtime import telemetry

from .storage import LineStore, ListLineStore
from .validation import (
    check_character,
    check_column,
    check_insertion,
    check_line,
    check_text,
)

LINE_BREAK = "\n"


class TextBuffer:
    """Ordered lines of code points addressed by ``(line, column)`` indices.

    An empty buffer (no lines at all) is a distinct state from a buffer holding
    one empty line, although both serialize to ``""``.

    Every index is checked before anything changes. Invalid indices raise
    ``IndexOutOfRange``; the only exception is ``delete_line_at`` on an empty
    buffer, which does nothing. Reads return fresh strings and lists, never
    views into the storage.
    """

    def __init__(
        self,
        lines: Iterable[str] = (),
        *,
        name: str = "default",
        store: Optional[LineStore] = None,
    ) -> None:
        self.name = name
        self.version = 0
        self._store: LineStore = store if store is not None else ListLineStore()
        for line in lines:
            self._store.insert(self._store.line_count(), check_text(line))

    @classmethod
    def empty(cls, *, name: str = "default") -> "TextBuffer":
        return cls(name=name)

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "TextBuffer":
        """Build a buffer with one line per ``"\\n"``-separated segment.

        Text without a line break yields a single line, and a trailing line
        break yields a trailing empty line, so ``to_text`` reproduces ``text``
        exactly.
        """

        return cls(text.split(LINE_BREAK), name=name)

    def to_text(self) -> str:
        return LINE_BREAK.join(self._store.read_all())

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return (
            f"TextBuffer(name={self.name!r}, lines={self.length()}, "
            f"version={self.version})"
        )

    def __len__(self) -> int:
        return self.length()

    # -- queries ---------------------------------------------------------

    def length(self) -> int:
        return self._store.line_count()

    def width_at(self, i: int) -> int:
        """Return the number of code points on line ``i``."""

        check_line(self._store, i)
        return self._store.width(i)

    def get_line(self, i: int) -> str:
        check_line(self._store, i)
        return self._store.read(i)

    def get_lines(self) -> List[str]:
        """Return every line, in order, as a new list."""

        return self._store.read_all()

    # -- line operations -------------------------------------------------

    def set_line(self, i: int, text: str) -> None:
        check_line(self._store, i)
        check_text(text)
        with Mutation(self, "set_line"):
            self._store.write(i, text)

    def add_line_at(self, i: int) -> None:
        """Insert an empty line so that it becomes line ``i``.

        ``i`` may equal ``length()``, which appends.
        """

        check_insertion(self._store, i)
        with Mutation(self, "add_line_at"):
            self._store.insert(i)

    def append_line(self) -> None:
        self.add_line_at(self.length())

    def prepend_line(self) -> None:
        self.add_line_at(0)

    def delete_line_at(self, i: int) -> None:
        """Remove line ``i``. On an empty buffer this is a no-op for any ``i``."""

        if self.length() == 0:
            _record_noop(self, "delete_line_at", line=i)
            return
        check_line(self._store, i)
        with Mutation(self, "delete_line_at"):
            self._store.remove(i)

    def clear_line_at(self, i: int) -> None:
        check_line(self._store, i)
        with Mutation(self, "clear_line_at"):
            self._store.write(i, "")

    # -- character operations --------------------------------------------

    def set_character_at(self, i: int, j: int, c: str) -> None:
        """Overwrite the existing code point at column ``j`` of line ``i``."""

        check_column(self._store, i, j, allow_end=False)
        check_character(c)
        with Mutation(self, "set_character_at"):
            self._store.set_char(i, j, c)

    def split_line_at(self, i: int, j: int) -> None:
        """Break line ``i`` at column ``j``.

        Columns ``[0, j)`` stay on line ``i``; the rest becomes a new line
        ``i + 1``. ``j`` may equal the line width, leaving an empty new line.
        """

        check_column(self._store, i, j, allow_end=True)
        with Mutation(self, "split_line_at"):
            tail = self._store.truncate(i, j)
            self._store.insert(i + 1, tail)

    def delete_char_at(self, i: int, j: int) -> None:
        """Backspace from cursor position ``(i, j)``.

        * ``j > 0`` removes the character at column ``j - 1``.
        * ``(0, 0)`` does nothing.
        * ``j == 0`` on a later line joins line ``i`` onto the end of line
          ``i - 1``, removing the line break between them.
        """

        check_column(self._store, i, j, allow_end=True)
        if j > 0:
            with Mutation(self, "delete_char_at"):
                self._store.delete_char(i, j - 1)
        elif i > 0:
            with Mutation(self, "join_lines"):
                self._store.extend(i - 1, self._store.remove(i))
        else:
            _record_noop(self, "delete_char_at", line=i, column=j)


class Mutation(AbstractContextManager["Mutation"]):
    """Wraps one buffer edit in a telemetry span and bumps the version on success."""

    def __init__(self, buffer: TextBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Mutation":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.buffer.version += 1
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


def _record_noop(buffer: TextBuffer, operation: str, **indices: int) -> None:
    telemetry.record_event(
        "buffer.noop",
        level="debug",
        data={"buffer": buffer.name, "operation": operation, **indices},
    )
