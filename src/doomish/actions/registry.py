"""Command metadata and the registry that owns it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, Iterator, Optional

from doomish.runtime import telemetry
from doomish.runtime.config import EditorConfig
from doomish.runtime.effects import Effect

if TYPE_CHECKING:
    from doomish.modes.base_mode import EditorState


@dataclass(frozen=True, slots=True)
class CommandOutcome:
    """Effects and status text produced by running a command."""

    effects: tuple[Effect, ...] = ()
    message: Optional[str] = None


@dataclass(slots=True)
class CommandContext:
    """Everything a command handler may read or update."""

    state: "EditorState"
    registry: "CommandRegistry"
    config: EditorConfig = field(default_factory=EditorConfig)


CommandHandler = Callable[[CommandContext], Optional[CommandOutcome]]


@dataclass(frozen=True, slots=True)
class Command:
    """Named editor command addressed by a stable id."""

    id: str
    title: str
    handler: CommandHandler
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Command id cannot be empty")
        if not self.title:
            raise ValueError("Command title cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, context: CommandContext) -> CommandOutcome:
        return self.handler(context) or CommandOutcome()


class CommandRegistry:
    """Insertion-ordered mapping from command id to ``Command``."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._commands: Dict[str, Command] = {}
        self._logger_name = logger_name

    def __contains__(self, command_id: object) -> bool:
        return command_id in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def register(self, command: Command, *, replace: bool = False) -> Command:
        with telemetry.span(
            "commands::register",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command.id},
        ):
            if not replace and command.id in self._commands:
                raise ValueError(f"Command '{command.id}' already registered")
            self._commands[command.id] = command
            return command

    def get(self, command_id: str) -> Command:
        try:
            return self._commands[command_id]
        except KeyError as exc:
            raise KeyError(f"Command '{command_id}' is not registered") from exc

    def find_by_title(self, title: str) -> Optional[Command]:
        for command in self._commands.values():
            if command.title == title:
                return command
        return None

    def ids(self) -> tuple[str, ...]:
        return tuple(self._commands)

    def titles(self) -> tuple[str, ...]:
        return tuple(command.title for command in self._commands.values())


__all__ = [
    "Command",
    "CommandContext",
    "CommandHandler",
    "CommandOutcome",
    "CommandRegistry",
]
