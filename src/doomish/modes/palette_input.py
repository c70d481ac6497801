"""Key routing while the command palette is open.

The palette sits on top of whatever mode is active and swallows every key
until it closes; the underlying mode is left untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from doomish.palette import confirm
from doomish.runtime.effects import LoadFile

from .base_mode import EditorState, KeyInput, ModeResult

if TYPE_CHECKING:
    from .mode_manager import ModeManager

SELECTION_KEYS = {"up": -1, "down": 1, "ctrl+p": -1, "ctrl+n": 1}


class PaletteInput:
    def __init__(self, manager: "ModeManager") -> None:
        self.manager = manager

    def handle_key(self, state: EditorState, key: KeyInput) -> ModeResult:
        palette = state.palette
        assert palette is not None
        titles = self.manager.registry.titles()

        if key.key == "escape":
            self.close(state)
            return ModeResult(consumed=True, status="palette_close")

        if key.key == "enter":
            return self._confirm(state)

        if key.key == "backspace":
            palette.backspace(titles)
            return ModeResult(consumed=True, status="palette_query")

        delta = SELECTION_KEYS.get(key.key)
        if delta is not None:
            palette.move_selection(delta)
            return ModeResult(consumed=True, status="palette_select")

        char = key.printable
        if char is not None:
            palette.type_text(char, titles)
            return ModeResult(consumed=True, status="palette_query")

        return ModeResult(consumed=True, status="palette_ignored")

    def close(self, state: EditorState) -> None:
        state.palette = None
        self.manager.bus.emit("palette.close", None)

    def _confirm(self, state: EditorState) -> ModeResult:
        assert state.palette is not None
        decision = confirm(state.palette)
        self.close(state)

        if decision.action == "open_path" and decision.path:
            return ModeResult(
                consumed=True, status="palette_open_path", effects=(LoadFile(decision.path),)
            )

        command = (
            self.manager.registry.find_by_title(decision.title)
            if decision.action == "command" and decision.title
            else None
        )
        if command is None:
            return ModeResult(consumed=True, status="palette_no_match")

        outcome = self.manager.run_command(state, command.id)
        return ModeResult(
            consumed=True,
            status="palette_command",
            message=outcome.message,
            effects=outcome.effects,
        )


__all__ = ["PaletteInput"]
