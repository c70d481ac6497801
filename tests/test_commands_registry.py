from __future__ import annotations

import pytest

from doomish.actions import (
    DEFAULT_COMMANDS,
    Command,
    CommandContext,
    CommandOutcome,
    CommandRegistry,
    apply_command,
    load_default_commands,
)
from doomish.buffer import TextBuffer
from doomish.modes import EditorState
from doomish.runtime.effects import Exit, SaveFile


def make_registry() -> CommandRegistry:
    return load_default_commands(CommandRegistry())


def make_context(registry: CommandRegistry, **state_kwargs) -> CommandContext:
    return CommandContext(state=EditorState(**state_kwargs), registry=registry)


def test_default_commands_register_in_canonical_order() -> None:
    registry = make_registry()

    assert registry.ids() == ("file.open", "file.save", "buffer.list", "palette.open", "quit")
    assert registry.titles() == (
        "Find file (open)",
        "Save file",
        "List buffers",
        "Command palette",
        "Quit",
    )
    assert len(registry) == len(DEFAULT_COMMANDS)


def test_duplicate_registration_requires_replace() -> None:
    registry = make_registry()
    replacement = Command(id="quit", title="Leave", handler=lambda ctx: None)

    with pytest.raises(ValueError):
        registry.register(replacement)

    registry.register(replacement, replace=True)
    assert registry.get("quit").title == "Leave"


def test_unknown_command_raises_key_error() -> None:
    registry = make_registry()

    with pytest.raises(KeyError):
        registry.get("missing")
    with pytest.raises(KeyError):
        apply_command(registry, "missing", make_context(registry))


def test_command_validates_fields() -> None:
    with pytest.raises(ValueError):
        Command(id="", title="x", handler=lambda ctx: None)
    with pytest.raises(ValueError):
        Command(id="x", title="", handler=lambda ctx: None)
    with pytest.raises(TypeError):
        Command(id="x", title="x", handler="not callable")  # type: ignore[arg-type]


def test_handler_returning_none_yields_empty_outcome() -> None:
    registry = CommandRegistry()
    registry.register(Command(id="noop", title="Nothing", handler=lambda ctx: None))

    assert apply_command(registry, "noop", make_context(registry)) == CommandOutcome()


def test_find_by_title() -> None:
    registry = make_registry()

    command = registry.find_by_title("Save file")
    assert command is not None
    assert command.id == "file.save"
    assert registry.find_by_title("Nope") is None


def test_save_without_path_reports_message() -> None:
    registry = make_registry()

    outcome = apply_command(registry, "file.save", make_context(registry))

    assert outcome.effects == ()
    assert outcome.message == "No file path. Use SPC f f and type a path."


def test_save_with_path_requests_save_effect() -> None:
    registry = make_registry()
    buffer = TextBuffer(["x"], source_path="/tmp/notes.txt")

    outcome = apply_command(registry, "file.save", make_context(registry, buffer=buffer))

    assert outcome.effects == (SaveFile("/tmp/notes.txt"),)


def test_open_file_prefills_palette() -> None:
    registry = make_registry()
    context = make_context(registry)

    outcome = apply_command(registry, "file.open", context)

    assert outcome == CommandOutcome()
    assert context.state.palette is not None
    assert context.state.palette.query == "Open file: "


def test_palette_open_uses_empty_query() -> None:
    registry = make_registry()
    context = make_context(registry)

    apply_command(registry, "palette.open", context)

    assert context.state.palette is not None
    assert context.state.palette.query == ""
    assert context.state.palette.ranked_items == list(registry.titles())


def test_buffer_list_and_quit() -> None:
    registry = make_registry()

    listed = apply_command(registry, "buffer.list", make_context(registry))
    quit_outcome = apply_command(registry, "quit", make_context(registry))

    assert listed.message == "Single buffer only."
    assert quit_outcome.effects == (Exit("quit"),)


def test_load_default_commands_can_exclude() -> None:
    registry = load_default_commands(CommandRegistry(), exclude=["quit"])

    assert "quit" not in registry
    assert "file.open" in registry
