"""Line-oriented text buffer with a thin terminal editor shell."""

__all__ = [
    "adapters",
    "buffer",
    "editor",
    "runtime",
]

__version__ = "0.1.0"
