"""Mode manager: routes key events and keeps cursor/viewport in bounds."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Optional, Tuple, Type

from doomish.actions import (
    CommandContext,
    CommandOutcome,
    CommandRegistry,
    apply_command,
    load_default_commands,
)
from doomish.actions.commands import show_palette
from doomish.buffer import TextBuffer, Viewport, clamp_cursor, ensure_visible
from doomish.keymaps import DEFAULT_LEADER_MAP, KeyGroup, validate_leader_map
from doomish.runtime import telemetry
from doomish.runtime.config import EditorConfig
from doomish.runtime.effects import Effect, Exit

from .base_mode import EditorMode, EditorState, KeyInput, Mode, ModeBus, ModeResult
from .insert_mode import InsertMode
from .leader_mode import LeaderMode
from .normal_mode import NormalMode
from .palette_input import PaletteInput
from .visual_mode import VisualMode

DEFAULT_MODES: Tuple[Type[Mode], ...] = (NormalMode, InsertMode, VisualMode, LeaderMode)


class ModeManager:
    """Owns the mode handlers, the command registry, and the leader map.

    The manager holds no per-document state; every call receives the
    ``EditorState`` it should act on.
    """

    def __init__(
        self,
        *,
        config: EditorConfig | None = None,
        registry: CommandRegistry | None = None,
        leader_map: KeyGroup | None = None,
        load_defaults: bool = True,
        bus: ModeBus | None = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.registry = registry or CommandRegistry(logger_name="doomish.commands")
        if load_defaults and registry is None:
            load_default_commands(self.registry)
        self.leader_map = leader_map or DEFAULT_LEADER_MAP
        validate_leader_map(self.leader_map, self.registry.ids())
        self.bus = bus or ModeBus()
        self.palette_input = PaletteInput(self)
        self._modes: Dict[EditorMode, Mode] = {}
        for mode_cls in DEFAULT_MODES:
            self.register_mode(mode_cls)

    def register_mode(
        self,
        mode_cls: Type[Mode],
        /,
        *mode_args: object,
        replace: bool = False,
        **mode_kwargs: object,
    ) -> Mode:
        mode = mode_cls(self, *mode_args, **mode_kwargs)
        if mode.name in self._modes and not replace:
            raise ValueError(f"Mode '{mode.name.value}' already registered")
        self._modes[mode.name] = mode
        return mode

    def mode_for(self, name: EditorMode) -> Mode:
        try:
            return self._modes[name]
        except KeyError as exc:
            raise KeyError(f"Unknown mode '{name.value}'") from exc

    def initial_state(self, *, buffer: TextBuffer | None = None) -> EditorState:
        return EditorState(
            buffer=buffer or TextBuffer(),
            viewport=Viewport(height=self.config.viewport_height),
        )

    def handle_key(self, state: EditorState, key: KeyInput) -> ModeResult:
        with telemetry.span(
            name=f"mode::{state.mode.value}",
            component=True,
            metadata={
                "key": key.key,
                "mode": state.mode.value,
                "palette": state.palette is not None,
            },
        ) as handle:
            if key.is_interrupt:
                result = ModeResult(
                    consumed=True, status="interrupt", effects=(Exit("interrupt"),)
                )
            elif state.palette is not None:
                result = self.palette_input.handle_key(state, key)
            else:
                result = self.mode_for(state.mode).handle_key(state, key)
            handle.add_metadata("status", result.status)
        return self._after_mode_result(state, result)

    def switch_mode(self, state: EditorState, target: EditorMode) -> None:
        current = state.mode
        if current == target:
            return
        self.mode_for(current).on_exit(state, target)
        state.mode = target
        state.status_message = ""
        self.mode_for(target).on_enter(state, current)
        telemetry.record_event(
            "mode.switch", level="debug", data={"from": current.value, "to": target.value}
        )
        self.bus.emit("mode.switch", {"from": current, "to": target})

    def run_command(self, state: EditorState, command_id: str) -> CommandOutcome:
        context = CommandContext(state=state, registry=self.registry, config=self.config)
        outcome = apply_command(self.registry, command_id, context)
        self.bus.emit("command.run", command_id)
        if state.palette is not None:
            self.bus.emit("palette.open", state.palette.query)
        return outcome

    def open_palette(self, state: EditorState, prefill: str) -> None:
        show_palette(state, self.registry, self.config, prefill)
        self.bus.emit("palette.open", prefill)

    def resize(self, state: EditorState, height: int) -> None:
        state.viewport = state.viewport.resized(height)
        self.settle(state)

    def settle(self, state: EditorState) -> None:
        state.cursor = clamp_cursor(state.buffer, state.cursor)
        state.viewport = ensure_visible(state.viewport.height, state.cursor, state.viewport)

    def _after_mode_result(self, state: EditorState, result: ModeResult) -> ModeResult:
        if result.switch_to is not None:
            self.switch_mode(state, result.switch_to)
        if result.message is not None:
            state.status_message = result.message
        self.settle(state)
        return result


@lru_cache(maxsize=None)
def default_manager() -> ModeManager:
    return ModeManager()


def update(
    state: EditorState, key: KeyInput, manager: Optional[ModeManager] = None
) -> Tuple[EditorState, Tuple[Effect, ...]]:
    """Process one key event and return the state plus requested effects."""

    result = (manager or default_manager()).handle_key(state, key)
    return state, result.effects


__all__ = ["DEFAULT_MODES", "ModeManager", "default_manager", "update"]
