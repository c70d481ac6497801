"""Editor commands addressed by id, plus their registry."""

from .registry import (
    Command,
    CommandContext,
    CommandHandler,
    CommandOutcome,
    CommandRegistry,
)
from .commands import DEFAULT_COMMANDS, apply_command, load_default_commands

__all__ = [
    "Command",
    "CommandContext",
    "CommandHandler",
    "CommandOutcome",
    "CommandRegistry",
    "DEFAULT_COMMANDS",
    "apply_command",
    "load_default_commands",
]
