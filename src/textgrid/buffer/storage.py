"""Line storage backends for TextBuffer.

``TextBuffer`` validates indices and implements the editing rules; a store only
moves code points around. The list-of-lists model is kept deliberately simple.
Rope-backed or gap-buffer variants can be introduced later by implementing
``LineStore`` without changing the buffer API.
"""

from __future__ import annotations

from typing import Iterable, List, Protocol


class LineStore(Protocol):
    """Primitive, unchecked line operations a buffer is built on.

    Callers guarantee every index is already in range.
    """

    def line_count(self) -> int: ...

    def width(self, index: int) -> int: ...

    def read(self, index: int) -> str: ...

    def read_all(self) -> List[str]: ...

    def write(self, index: int, text: str) -> None: ...

    def insert(self, index: int, text: str = "") -> None: ...

    def remove(self, index: int) -> str: ...

    def set_char(self, index: int, column: int, char: str) -> None: ...

    def delete_char(self, index: int, column: int) -> None: ...

    def truncate(self, index: int, column: int) -> str: ...

    def extend(self, index: int, text: str) -> None: ...


class ListLineStore:
    """Stores each line as its own list of code points."""

    __slots__ = ("_lines",)

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: List[List[str]] = [list(line) for line in lines]

    def line_count(self) -> int:
        return len(self._lines)

    def width(self, index: int) -> int:
        return len(self._lines[index])

    def read(self, index: int) -> str:
        return "".join(self._lines[index])

    def read_all(self) -> List[str]:
        return ["".join(line) for line in self._lines]

    def write(self, index: int, text: str) -> None:
        self._lines[index] = list(text)

    def insert(self, index: int, text: str = "") -> None:
        self._lines.insert(index, list(text))

    def remove(self, index: int) -> str:
        return "".join(self._lines.pop(index))

    def set_char(self, index: int, column: int, char: str) -> None:
        self._lines[index][column] = char

    def delete_char(self, index: int, column: int) -> None:
        del self._lines[index][column]

    def truncate(self, index: int, column: int) -> str:
        """Cut everything from ``column`` onward and return it."""

        line = self._lines[index]
        tail = line[column:]
        del line[column:]
        return "".join(tail)

    def extend(self, index: int, text: str) -> None:
        self._lines[index].extend(text)

    def __repr__(self) -> str:
        return f"ListLineStore(lines={len(self._lines)})"
