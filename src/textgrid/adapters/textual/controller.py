"""Minimal Textual adapter that wires Editor results into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from textgrid.editor import Editor, EditorResult, EditorView, KeyInput


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


# Textual key names -> editor key names.
_KEY_NAMES: Dict[str, str] = {
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "ctrl+h": "BACKSPACE",
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
    "home": "HOME",
    "end": "END",
}


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[EditorView], None]
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges an Editor to a Textual-friendly surface."""

    def __init__(self, editor: Editor, hooks: TextualUIHooks) -> None:
        self.editor = editor
        self.hooks = hooks
        self._refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> EditorResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        name = _KEY_NAMES.get(key.lower(), key)
        if name != key:
            text = None
        self._log_state("key ->", key=name, text=text, mods=normalized_modifiers)
        version = self.editor.buffer.version
        result = self.editor.handle_key(
            KeyInput(key=name, text=text, modifiers=normalized_modifiers)
        )
        if result.consumed:
            self._refresh()
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            changed=self.editor.buffer.version != version,
        )
        return result

    def resize(self, height: int) -> None:
        self.editor.resize(height)
        self._refresh()

    def _refresh(self) -> None:
        self.hooks.update_buffer(self.editor.view())
        row, col = self.editor.cursor
        self.hooks.update_status(f"Ln {row + 1}, Col {col + 1}")

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "cursor": self.editor.cursor,
            "top": self.editor.top,
            "buffer": self.editor.buffer.name,
            "buffer_version": self.editor.buffer.version,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
