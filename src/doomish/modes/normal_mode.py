"""Normal mode: cursor motions and entry points into the other modes."""

from __future__ import annotations

from typing import Dict, Tuple

from doomish.buffer import Cursor

from .base_mode import EditorMode, EditorState, KeyInput, Mode, ModeResult

MOTIONS: Dict[str, Tuple[int, int]] = {
    "h": (0, -1),
    "l": (0, 1),
    "j": (1, 0),
    "k": (-1, 0),
}

MODE_KEYS: Dict[str, EditorMode] = {
    "i": EditorMode.INSERT,
    "v": EditorMode.VISUAL,
}


class NormalMode(Mode):
    name = EditorMode.NORMAL

    def handle_key(self, state: EditorState, key: KeyInput) -> ModeResult:
        token = key.key
        if token == self.manager.config.leader_key:
            return ModeResult(
                consumed=True, switch_to=EditorMode.LEADER, status="leader_start"
            )

        target = MODE_KEYS.get(token)
        if target is not None:
            return ModeResult(
                consumed=True, switch_to=target, status=f"enter_{target.value}"
            )

        if token == ":":
            self.manager.open_palette(state, "")
            return ModeResult(consumed=True, status="palette_open")

        return self._move(state, token)

    def _move(self, state: EditorState, token: str) -> ModeResult:
        row, col = state.cursor
        delta = MOTIONS.get(token)
        if delta is not None:
            state.cursor = Cursor(row + delta[0], col + delta[1])
        elif token == "0":
            state.cursor = Cursor(row, 0)
        elif token == "$":
            state.cursor = Cursor(row, len(state.current_line))
        else:
            return ModeResult(consumed=False, status="unhandled")
        return ModeResult(consumed=True, status="motion")


__all__ = ["MOTIONS", "NormalMode"]
