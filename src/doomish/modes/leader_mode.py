"""Leader mode: walk the leader map one key at a time."""

from __future__ import annotations

from typing import Optional

from doomish.keymaps import LeaderState, advance_leader
from doomish.runtime import telemetry

from .base_mode import EditorMode, EditorState, KeyInput, Mode, ModeResult


class LeaderMode(Mode):
    name = EditorMode.LEADER

    def on_enter(self, state: EditorState, previous: Optional[EditorMode]) -> None:
        del previous
        state.leader = LeaderState.start(self.manager.leader_map)

    def on_exit(self, state: EditorState, next_mode: Optional[EditorMode]) -> None:
        del next_mode
        state.leader = None

    def handle_key(self, state: EditorState, key: KeyInput) -> ModeResult:
        if key.key == "escape" or state.leader is None:
            return ModeResult(consumed=True, switch_to=EditorMode.NORMAL, status="leader_cancel")

        step = advance_leader(state.leader, key.key)
        self.manager.bus.emit("leader.step", step)

        if step.status == "miss":
            telemetry.record_event(
                "leader.miss", level="debug", data={"sequence": step.label}
            )
            return ModeResult(
                consumed=True,
                switch_to=EditorMode.NORMAL,
                status="leader_miss",
                message=f"No binding for: {step.label}",
            )

        if step.status == "group":
            return ModeResult(consumed=True, status="leader_pending")

        assert step.binding is not None
        outcome = self.manager.run_command(state, step.binding.command_id)
        return ModeResult(
            consumed=True,
            switch_to=EditorMode.NORMAL,
            status="leader_match",
            message=outcome.message,
            effects=outcome.effects,
        )


__all__ = ["LeaderMode"]
