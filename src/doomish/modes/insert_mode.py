"""Insert mode: typed characters edit the buffer at the cursor."""

from __future__ import annotations

from .base_mode import EditorMode, EditorState, KeyInput, Mode, ModeResult


class InsertMode(Mode):
    name = EditorMode.INSERT

    def handle_key(self, state: EditorState, key: KeyInput) -> ModeResult:
        buffer = state.buffer
        row, col = state.cursor

        if key.key == "escape":
            return ModeResult(consumed=True, switch_to=EditorMode.NORMAL, status="exit_insert")

        if key.key == "backspace":
            state.cursor = buffer.delete_char_backward(row, col)
            return ModeResult(consumed=True, status="edit")

        if key.key == "enter":
            state.cursor = buffer.insert_newline(row, col)
            return ModeResult(consumed=True, status="edit")

        char = key.printable
        if char is not None:
            state.cursor = buffer.insert_char(row, col, char)
            return ModeResult(consumed=True, status="edit")

        return ModeResult(consumed=False, status="unhandled")


__all__ = ["InsertMode"]
