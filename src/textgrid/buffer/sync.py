"""Shared-access boundary for buffers touched by more than one caller."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .grid import TextBuffer


@dataclass(slots=True, frozen=True)
class BufferMirror:
    """Host-friendly snapshot of a buffer at one version."""

    name: str
    version: int
    lines: Tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def mirror_of(buffer: TextBuffer) -> BufferMirror:
    return BufferMirror(
        name=buffer.name, version=buffer.version, lines=tuple(buffer.get_lines())
    )


class SynchronizedBuffer:
    """Serializes every call on a ``TextBuffer`` behind one re-entrant lock.

    Locking is per buffer, not per line: shifting operations touch many line
    indices at once. Use ``locked()`` to run several operations as one step.
    """

    def __init__(self, buffer: TextBuffer) -> None:
        self._buffer = buffer
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator[TextBuffer]:
        with self._lock:
            yield self._buffer

    def mirror(self) -> BufferMirror:
        with self._lock:
            return mirror_of(self._buffer)

    @property
    def name(self) -> str:
        return self._buffer.name

    @property
    def version(self) -> int:
        with self._lock:
            return self._buffer.version

    def __len__(self) -> int:
        return self.length()

    def to_text(self) -> str:
        with self._lock:
            return self._buffer.to_text()

    def length(self) -> int:
        with self._lock:
            return self._buffer.length()

    def width_at(self, i: int) -> int:
        with self._lock:
            return self._buffer.width_at(i)

    def get_line(self, i: int) -> str:
        with self._lock:
            return self._buffer.get_line(i)

    def get_lines(self) -> List[str]:
        with self._lock:
            return self._buffer.get_lines()

    def set_line(self, i: int, text: str) -> None:
        with self._lock:
            self._buffer.set_line(i, text)

    def add_line_at(self, i: int) -> None:
        with self._lock:
            self._buffer.add_line_at(i)

    def append_line(self) -> None:
        with self._lock:
            self._buffer.append_line()

    def prepend_line(self) -> None:
        with self._lock:
            self._buffer.prepend_line()

    def delete_line_at(self, i: int) -> None:
        with self._lock:
            self._buffer.delete_line_at(i)

    def clear_line_at(self, i: int) -> None:
        with self._lock:
            self._buffer.clear_line_at(i)

    def set_character_at(self, i: int, j: int, c: str) -> None:
        with self._lock:
            self._buffer.set_character_at(i, j, c)

    def split_line_at(self, i: int, j: int) -> None:
        with self._lock:
            self._buffer.split_line_at(i, j)

    def delete_char_at(self, i: int, j: int) -> None:
        with self._lock:
            self._buffer.delete_char_at(i, j)
