"""Built-in commands and the central dispatch into them."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from doomish.palette import open_palette
from doomish.runtime import telemetry
from doomish.runtime.config import EditorConfig
from doomish.runtime.effects import Exit, SaveFile

from .registry import Command, CommandContext, CommandOutcome, CommandRegistry

if TYPE_CHECKING:
    from doomish.modes.base_mode import EditorState

NO_PATH_MESSAGE = "No file path. Use SPC f f and type a path."
SINGLE_BUFFER_MESSAGE = "Single buffer only."


def show_palette(
    state: "EditorState", registry: CommandRegistry, config: EditorConfig, prefill: str
) -> None:
    state.palette = open_palette(
        prefill,
        registry.titles(),
        open_file_prefix=config.open_file_prefix,
        open_path_label=config.open_path_label,
        limit=config.palette_limit,
    )


def open_file(context: CommandContext) -> CommandOutcome:
    show_palette(
        context.state, context.registry, context.config, context.config.open_file_prefix
    )
    return CommandOutcome()


def save_file(context: CommandContext) -> CommandOutcome:
    path = context.state.buffer.source_path
    if not path:
        return CommandOutcome(message=NO_PATH_MESSAGE)
    return CommandOutcome(effects=(SaveFile(path),))


def list_buffers(context: CommandContext) -> CommandOutcome:
    del context
    return CommandOutcome(message=SINGLE_BUFFER_MESSAGE)


def open_command_palette(context: CommandContext) -> CommandOutcome:
    show_palette(context.state, context.registry, context.config, "")
    return CommandOutcome()


def quit_editor(context: CommandContext) -> CommandOutcome:
    del context
    return CommandOutcome(effects=(Exit("quit"),))


DEFAULT_COMMANDS: tuple[Command, ...] = (
    Command(
        id="file.open",
        title="Find file (open)",
        handler=open_file,
        description="Prompt for a path and load it",
    ),
    Command(
        id="file.save",
        title="Save file",
        handler=save_file,
        description="Write the buffer to its file",
    ),
    Command(
        id="buffer.list",
        title="List buffers",
        handler=list_buffers,
        description="Show open buffers",
    ),
    Command(
        id="palette.open",
        title="Command palette",
        handler=open_command_palette,
        description="Fuzzy-search every command",
    ),
    Command(
        id="quit",
        title="Quit",
        handler=quit_editor,
        description="Exit without saving",
    ),
)


def load_default_commands(
    registry: CommandRegistry,
    *,
    replace: bool = False,
    exclude: Sequence[str] | None = None,
) -> CommandRegistry:
    """Register the built-in commands in their canonical order."""

    skipped = set(exclude or ())
    for command in DEFAULT_COMMANDS:
        if command.id in skipped:
            continue
        registry.register(command, replace=replace)
    return registry


def apply_command(
    registry: CommandRegistry, command_id: str, context: CommandContext
) -> CommandOutcome:
    """Run ``command_id`` once and return what it asks the shell to do."""

    command = registry.get(command_id)
    with telemetry.span(
        "commands::apply",
        component="commands",
        metadata={"command_id": command_id},
    ) as handle:
        outcome = command(context)
        handle.add_metadata("effects", len(outcome.effects))
    return outcome


__all__ = [
    "DEFAULT_COMMANDS",
    "NO_PATH_MESSAGE",
    "SINGLE_BUFFER_MESSAGE",
    "apply_command",
    "load_default_commands",
    "show_palette",
]
