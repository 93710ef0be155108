"""Validation helpers shared across buffer operations."""

from __future__ import annotations

from .errors import IndexOutOfRange
from .storage import LineStore


def check_line(store: LineStore, index: int) -> int:
    """Require ``index`` to address an existing line."""

    count = store.line_count()
    if index < 0 or index >= count:
        raise IndexOutOfRange(index, count)
    return index


def check_insertion(store: LineStore, index: int) -> int:
    """Require ``index`` to be a valid insertion point (``len`` appends)."""

    count = store.line_count()
    if index < 0 or index > count:
        raise IndexOutOfRange(index, count)
    return index


def check_column(
    store: LineStore, line: int, column: int, *, allow_end: bool
) -> int:
    """Require ``column`` to address a character of ``line``.

    With ``allow_end`` the position just past the last character is accepted
    too, which is what cursor-style operations (split, backspace) need.
    """

    check_line(store, line)
    width = store.width(line)
    upper = width if allow_end else width - 1
    if column < 0 or column > upper:
        raise IndexOutOfRange(column, width, line=line)
    return column


def check_text(text: str) -> str:
    if "\n" in text:
        raise ValueError("line text must not contain a line break")
    return text


def check_character(char: str) -> str:
    if len(char) != 1 or char == "\n":
        raise ValueError(f"expected a single non-newline character, got {char!r}")
    return char
