"""Error types raised by the buffer layer."""

from __future__ import annotations

from typing import Optional


class IndexOutOfRange(IndexError):
    """Raised when a line or column index falls outside its documented range.

    ``limit`` is the length the index was checked against. ``line`` is set for
    column errors and names the line whose width was exceeded.
    """

    def __init__(self, index: int, limit: int, *, line: Optional[int] = None) -> None:
        if line is None:
            message = f"index {index} out of bounds for grid of length {limit}"
        else:
            message = (
                f"index {index} out of bounds for row width {limit} at line {line}"
            )
        super().__init__(message)
        self.index = index
        self.limit = limit
        self.line = line
