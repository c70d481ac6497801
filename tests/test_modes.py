from __future__ import annotations

import os
import random
from typing import List, Tuple

import pytest

from doomish.actions import Command, CommandOutcome, CommandRegistry, load_default_commands
from doomish.buffer import Cursor, TextBuffer
from doomish.keymaps import LeaderMapError, bind, group
from doomish.modes import (
    EditorMode,
    EditorState,
    KeyInput,
    ModeManager,
    NormalMode,
    update,
)
from doomish.runtime.config import EditorConfig
from doomish.runtime.effects import Effect, Exit, LoadFile


def make_key(name: str) -> KeyInput:
    if name == "space":
        return KeyInput(key="space", text=" ")
    if len(name) == 1:
        return KeyInput(key=name, text=name)
    return KeyInput(key=name)


def make_manager(**kwargs) -> ModeManager:
    return ModeManager(**kwargs)


def make_state(manager: ModeManager, *lines: str) -> EditorState:
    buffer = TextBuffer(lines) if lines else None
    return manager.initial_state(buffer=buffer)


def press(manager: ModeManager, state: EditorState, *keys: str) -> Tuple[Effect, ...]:
    effects: List[Effect] = []
    for name in keys:
        effects.extend(manager.handle_key(state, make_key(name)).effects)
    return tuple(effects)


def test_insert_mode_round_trip() -> None:
    manager = make_manager()
    state = make_state(manager)

    press(manager, state, "i", "h", "i", "space", "x")
    assert state.mode is EditorMode.INSERT
    assert state.buffer.lines == ("hi x",)
    assert state.cursor == Cursor(0, 4)

    press(manager, state, "enter", "y", "backspace", "backspace")
    assert state.buffer.lines == ("hi x",)
    assert state.cursor == Cursor(0, 4)

    press(manager, state, "escape")
    assert state.mode is EditorMode.NORMAL


def test_normal_motions_clamp_to_document() -> None:
    manager = make_manager()
    state = make_state(manager, "abc", "de")

    press(manager, state, "l", "l", "l", "l", "l")
    assert state.cursor == Cursor(0, 3)

    press(manager, state, "j")
    assert state.cursor == Cursor(1, 2)

    press(manager, state, "j", "j", "0")
    assert state.cursor == Cursor(1, 0)

    press(manager, state, "k", "$")
    assert state.cursor == Cursor(0, 3)

    press(manager, state, "h", "k", "k")
    assert state.cursor == Cursor(0, 2)


def test_unbound_normal_key_is_not_consumed() -> None:
    manager = make_manager()
    state = make_state(manager, "abc")

    result = manager.handle_key(state, make_key("z"))

    assert result.consumed is False
    assert state.buffer.lines == ("abc",)


def test_visual_mode_moves_like_normal_and_escapes() -> None:
    manager = make_manager()
    state = make_state(manager, "abc")

    press(manager, state, "v", "l", "l")
    assert state.mode is EditorMode.VISUAL
    assert state.cursor == Cursor(0, 2)

    press(manager, state, "escape")
    assert state.mode is EditorMode.NORMAL


def test_entering_a_mode_clears_status_message() -> None:
    manager = make_manager()
    state = make_state(manager)
    state.status_message = "Saved."

    press(manager, state, "i")

    assert state.status_message == ""


def test_leader_sequence_runs_bound_command_once() -> None:
    calls: List[str] = []
    registry = load_default_commands(CommandRegistry())
    registry.register(
        Command(
            id="file.open",
            title="Find file (open)",
            handler=lambda ctx: calls.append("open") or CommandOutcome(),
        ),
        replace=True,
    )
    manager = make_manager(registry=registry)
    state = make_state(manager)

    press(manager, state, "space")
    assert state.mode is EditorMode.LEADER
    assert state.leader is not None

    press(manager, state, "f")
    assert calls == []
    assert state.mode is EditorMode.LEADER

    press(manager, state, "f")
    assert calls == ["open"]
    assert state.mode is EditorMode.NORMAL
    assert state.leader is None


def test_leader_find_file_opens_prefixed_palette() -> None:
    manager = make_manager()
    state = make_state(manager)

    press(manager, state, "space", "f", "f")

    assert state.mode is EditorMode.NORMAL
    assert state.palette is not None
    assert state.palette.query == "Open file: "


def test_leader_miss_keeps_message_after_returning_to_normal() -> None:
    manager = make_manager()
    state = make_state(manager)

    press(manager, state, "space", "f", "x")

    assert state.mode is EditorMode.NORMAL
    assert state.leader is None
    assert state.status_message == "No binding for: SPC f x"


def test_leader_escape_cancels_without_running_anything() -> None:
    manager = make_manager()
    state = make_state(manager)

    effects = press(manager, state, "space", "escape")

    assert effects == ()
    assert state.mode is EditorMode.NORMAL
    assert state.palette is None


def test_leader_quit_requests_exit() -> None:
    manager = make_manager()
    state = make_state(manager)

    assert press(manager, state, "space", "q") == (Exit("quit"),)


def test_leader_save_without_path_sets_message() -> None:
    manager = make_manager()
    state = make_state(manager)

    effects = press(manager, state, "space", "f", "s")

    assert effects == ()
    assert state.status_message == "No file path. Use SPC f f and type a path."


def test_colon_palette_runs_selected_command() -> None:
    manager = make_manager()
    state = make_state(manager)

    press(manager, state, ":")
    assert state.palette is not None
    assert state.mode is EditorMode.NORMAL

    effects = press(manager, state, "q", "u", "i", "t", "enter")

    assert effects == (Exit("quit"),)
    assert state.palette is None


def test_palette_swallows_keys_until_closed() -> None:
    manager = make_manager()
    state = make_state(manager, "abc", "def")

    press(manager, state, "space", "space", "j", "i")
    assert state.palette is not None
    assert state.palette.query == "ji"
    assert state.cursor == Cursor(0, 0)
    assert state.mode is EditorMode.NORMAL

    press(manager, state, "backspace", "escape")
    assert state.palette is None
    assert state.buffer.lines == ("abc", "def")


def test_palette_path_entry_requests_load() -> None:
    manager = make_manager()
    state = make_state(manager)

    press(manager, state, ":")
    effects = press(manager, state, *"./notes.txt", "enter")

    assert effects == (LoadFile(os.path.abspath("./notes.txt")),)
    assert state.palette is None


def test_palette_confirm_without_match_closes_silently() -> None:
    manager = make_manager()
    state = make_state(manager)
    state.status_message = "before"

    press(manager, state, ":")
    effects = press(manager, state, "z", "z", "z", "enter")

    assert effects == ()
    assert state.palette is None
    assert state.status_message == "before"


def test_palette_selection_moves_with_arrows() -> None:
    manager = make_manager()
    state = make_state(manager)

    press(manager, state, ":", "down", "down")
    assert state.palette is not None
    assert state.palette.selected_label == "List buffers"

    press(manager, state, "up", "enter")
    assert state.status_message == "No file path. Use SPC f f and type a path."
    assert state.palette is None


def test_interrupt_exits_from_any_mode() -> None:
    manager = make_manager()
    state = make_state(manager)

    press(manager, state, "i")
    assert press(manager, state, "ctrl+c") == (Exit("interrupt"),)

    press(manager, state, "escape", ":")
    assert press(manager, state, "ctrl+c") == (Exit("interrupt"),)


def test_update_returns_state_and_effects() -> None:
    manager = make_manager()
    state = make_state(manager)

    new_state, effects = update(state, make_key("i"), manager)
    assert new_state is state
    assert effects == ()
    assert state.mode is EditorMode.INSERT

    _, effects = update(state, make_key("ctrl+c"), manager)
    assert effects == (Exit("interrupt"),)


def test_cursor_scrolls_viewport() -> None:
    manager = make_manager(config=EditorConfig(viewport_height=3))
    state = make_state(manager, *[f"line {idx}" for idx in range(10)])

    press(manager, state, *"jjjjj")
    assert state.cursor.row == 5
    assert state.viewport.scroll_top == 3

    press(manager, state, *"kkkk")
    assert state.viewport.scroll_top == 1


def test_resize_reapplies_visibility() -> None:
    manager = make_manager()
    state = make_state(manager, *[str(idx) for idx in range(30)])
    press(manager, state, *("j" * 20))

    manager.resize(state, 5)

    assert state.viewport.height == 5
    assert state.viewport.scroll_top == 16


def test_manager_rejects_leader_map_with_unknown_command() -> None:
    bad_map = group("leader", {"x": bind("Explode", "does.not.exist")})

    with pytest.raises(LeaderMapError):
        make_manager(leader_map=bad_map)


def test_register_mode_twice_requires_replace() -> None:
    manager = make_manager()

    with pytest.raises(ValueError):
        manager.register_mode(NormalMode)
    manager.register_mode(NormalMode, replace=True)


def test_bus_reports_mode_switches() -> None:
    manager = make_manager()
    state = make_state(manager)
    seen: List[object] = []
    manager.bus.subscribe("mode.switch", seen.append)

    press(manager, state, "i", "escape")

    assert seen == [
        {"from": EditorMode.NORMAL, "to": EditorMode.INSERT},
        {"from": EditorMode.INSERT, "to": EditorMode.NORMAL},
    ]


def test_random_key_sequences_keep_cursor_and_viewport_valid() -> None:
    manager = make_manager(config=EditorConfig(viewport_height=4))
    state = make_state(manager, "alpha", "", "gamma delta")
    keys = [
        "i", "v", "escape", "h", "j", "k", "l", "0", "$", "enter", "backspace",
        "a", "b", "space", "f", "x", ":", "up", "down",
    ]
    rng = random.Random(1234)

    for _ in range(2000):
        manager.handle_key(state, make_key(rng.choice(keys)))
        buffer = state.buffer
        row, col = state.cursor
        assert buffer.line_count() >= 1
        assert 0 <= row < buffer.line_count()
        assert 0 <= col <= len(buffer.line_at(row))
        top = state.viewport.scroll_top
        assert 0 <= top <= row < top + state.viewport.height
