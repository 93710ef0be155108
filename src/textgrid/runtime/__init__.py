"""Runtime services shared by the buffer and its hosts."""

from . import telemetry

__all__ = ["telemetry"]
