"""Editor session: owns the state and performs the effects the core requests."""

from __future__ import annotations

import os
from typing import Iterable, Optional

from doomish.buffer import Cursor, TextBuffer
from doomish.modes import EditorState, KeyInput, ModeManager, ModeResult
from doomish.render import RenderModel, build_render_model

from . import telemetry
from .config import EditorConfig
from .effects import Effect, Exit, LoadFile, SaveFile
from .project import find_project_root

WELCOME_MESSAGE = "SPC f f to open a file, SPC SPC for commands."
OPENED_MESSAGE = "Opened."
SAVED_MESSAGE = "Saved."


class EditorSession:
    """The outer shell around ``ModeManager``.

    Each key event is routed through the manager and every effect it returns
    is run to completion before ``handle_key`` returns, so file I/O never
    interleaves with input handling.
    """

    def __init__(
        self,
        *,
        config: EditorConfig | None = None,
        manager: ModeManager | None = None,
    ) -> None:
        self.config = config or (manager.config if manager else EditorConfig())
        self.manager = manager or ModeManager(config=self.config)
        self.state: EditorState = self.manager.initial_state()
        self.running = True
        self.exit_reason: Optional[str] = None

    def start(self, path: Optional[str] = None) -> None:
        if not path:
            self.state.status_message = WELCOME_MESSAGE
            return
        self.open_file(os.path.abspath(path))

    def handle_key(self, key: KeyInput) -> ModeResult:
        if not self.running:
            return ModeResult(consumed=False, status="stopped")
        result = self.manager.handle_key(self.state, key)
        self.run_effects(result.effects)
        return result

    def run_effects(self, effects: Iterable[Effect]) -> None:
        for effect in effects:
            if isinstance(effect, LoadFile):
                self.open_file(effect.path)
            elif isinstance(effect, SaveFile):
                self.save_file(effect.path)
            elif isinstance(effect, Exit):
                self.exit(effect.reason)
            else:
                raise TypeError(f"Unsupported effect: {effect!r}")

    def open_file(self, path: str) -> bool:
        if not os.path.exists(path):
            self._fail("open", path, f"File not found: {path}")
            return False

        buffer = TextBuffer()
        try:
            buffer.load(path)
        except OSError as exc:
            self._fail("open", path, f"Cannot open {path}: {_reason(exc)}")
            return False

        state = self.state
        state.buffer = buffer
        state.cursor = Cursor()
        state.viewport = state.viewport.scrolled_to(0)
        root = find_project_root(os.path.dirname(path) or ".", self.config.vcs_markers)
        state.project_root = str(root) if root is not None else None
        state.status_message = OPENED_MESSAGE
        telemetry.record_event(
            "file.opened",
            data={"path": path, "lines": buffer.line_count(), "project": state.project_root},
            logger_name="doomish.session",
        )
        return True

    def save_file(self, path: str) -> bool:
        try:
            self.state.buffer.save(path)
        except OSError as exc:
            self._fail("save", path, f"Cannot save {path}: {_reason(exc)}")
            return False
        self.state.status_message = SAVED_MESSAGE
        telemetry.record_event(
            "file.saved", data={"path": path}, logger_name="doomish.session"
        )
        return True

    def exit(self, reason: str = "quit") -> None:
        self.running = False
        self.exit_reason = reason
        telemetry.record_event(
            "session.exit", data={"reason": reason}, logger_name="doomish.session"
        )

    def resize(self, height: int) -> None:
        self.manager.resize(self.state, height)

    def render(self, width: int, height: Optional[int] = None) -> RenderModel:
        rows = self.state.viewport.height if height is None else height
        return build_render_model(self.state, width=width, height=rows, config=self.config)

    def _fail(self, operation: str, path: str, message: str) -> None:
        self.state.status_message = message
        telemetry.record_event(
            "file.error",
            level="warning",
            data={"operation": operation, "path": path, "message": message},
            logger_name="doomish.session",
        )


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


__all__ = ["EditorSession", "OPENED_MESSAGE", "SAVED_MESSAGE", "WELCOME_MESSAGE"]
