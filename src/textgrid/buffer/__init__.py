"""Line-oriented text buffer, its storage, and the shared-access wrapper."""

from .errors import IndexOutOfRange
from .grid import LINE_BREAK, TextBuffer
from .storage import LineStore, ListLineStore
from .sync import BufferMirror, SynchronizedBuffer, mirror_of

__all__ = [
    "LINE_BREAK",
    "TextBuffer",
    "IndexOutOfRange",
    "LineStore",
    "ListLineStore",
    "BufferMirror",
    "SynchronizedBuffer",
    "mirror_of",
]
