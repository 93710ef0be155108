"""Editor shell driving a TextBuffer from key input."""

from .editor import Cursor, Editor, EditorResult, EditorView, KeyInput

__all__ = ["Cursor", "Editor", "EditorResult", "EditorView", "KeyInput"]
