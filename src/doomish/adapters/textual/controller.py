"""UI-agnostic bridge between an ``EditorSession`` and Textual widgets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from doomish.modes import KeyInput, ModeResult
from doomish.render import RenderModel
from doomish.runtime.session import EditorSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[RenderModel], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop
    exit: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Feeds Textual key events into the session and pushes frames back out."""

    def __init__(
        self,
        session: EditorSession,
        hooks: TextualUIHooks,
        *,
        width: int = 80,
        height: Optional[int] = None,
    ) -> None:
        self.session = session
        self.hooks = hooks
        self.width = width
        if height is not None:
            self.session.resize(height)
        self._subscribe_events()
        self.refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a Textual key event into a ``KeyInput`` and dispatch it."""

        normalized_modifiers = tuple(str(mod).lower() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.session.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            switch_to=result.switch_to,
            effects=len(result.effects),
        )
        self.refresh()
        if not self.session.running:
            self.hooks.exit(self.session.exit_reason or "quit")
        return result

    def resize(self, width: int, height: int) -> None:
        self.width = max(1, width)
        self.session.resize(height)
        self.refresh()

    def refresh(self) -> RenderModel:
        model = self.session.render(self.width)
        self.hooks.update_view(model)
        self.hooks.update_status(model.status_line)
        return model

    def _subscribe_events(self) -> None:
        bus = self.session.manager.bus
        for event in (
            "mode.switch",
            "leader.step",
            "command.run",
            "palette.open",
            "palette.close",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        state = self.session.state
        return {
            "mode": state.mode.value,
            "cursor": tuple(state.cursor),
            "scroll_top": state.viewport.scroll_top,
            "palette": state.palette.query if state.palette is not None else None,
            "file": state.file_path,
            "dirty": state.buffer.dirty,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
