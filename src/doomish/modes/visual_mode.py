"""Visual mode: Normal-mode keys under a different label.

There is no selection range yet; only ``escape`` behaves differently.
"""

from __future__ import annotations

from .base_mode import EditorMode, EditorState, KeyInput, ModeResult
from .normal_mode import NormalMode


class VisualMode(NormalMode):
    name = EditorMode.VISUAL

    def handle_key(self, state: EditorState, key: KeyInput) -> ModeResult:
        if key.key == "escape":
            return ModeResult(consumed=True, switch_to=EditorMode.NORMAL, status="exit_visual")
        return super().handle_key(state, key)


__all__ = ["VisualMode"]
