"""Editor state, key events, and the base class every mode builds on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple

from doomish.buffer import Cursor, TextBuffer, Viewport
from doomish.keymaps import LeaderState
from doomish.palette import PaletteState
from doomish.runtime.effects import Effect

if TYPE_CHECKING:
    from .mode_manager import ModeManager

INTERRUPT_KEY = "ctrl+c"


class EditorMode(str, Enum):
    """Available editor modes."""

    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"
    COMMAND = "command"
    LEADER = "leader"

    @property
    def label(self) -> str:
        return self.value.upper()


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Normalized key event: a key name plus the character it types, if any."""

    key: str
    text: Optional[str] = None
    modifiers: Tuple[str, ...] = ()

    @property
    def is_interrupt(self) -> bool:
        return self.key == INTERRUPT_KEY

    @property
    def printable(self) -> Optional[str]:
        if self.text is None or len(self.text) != 1:
            return None
        if self.text == "\t" or self.text.isprintable():
            return self.text
        return None


@dataclass(slots=True)
class ModeResult:
    """Result of routing one key event."""

    consumed: bool
    switch_to: Optional[EditorMode] = None
    status: str = "ok"
    message: Optional[str] = None
    effects: Tuple[Effect, ...] = ()


@dataclass(slots=True)
class EditorState:
    """Everything the core mutates while processing key events."""

    buffer: TextBuffer = field(default_factory=TextBuffer)
    cursor: Cursor = Cursor()
    viewport: Viewport = field(default_factory=Viewport)
    mode: EditorMode = EditorMode.NORMAL
    leader: Optional[LeaderState] = None
    palette: Optional[PaletteState] = None
    project_root: Optional[str] = None
    status_message: str = ""

    @property
    def file_path(self) -> Optional[str]:
        return self.buffer.source_path

    @property
    def current_line(self) -> str:
        return self.buffer.line_at(self.cursor.row)


class ModeBus:
    """Minimal event bus letting hosts observe mode and palette activity."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class Mode:
    """Base class for the per-mode key handlers."""

    name: EditorMode = EditorMode.NORMAL

    def __init__(self, manager: "ModeManager") -> None:
        self.manager = manager

    def on_enter(
        self, state: EditorState, previous: Optional[EditorMode]
    ) -> None:  # pragma: no cover - default no-op
        del state, previous

    def on_exit(
        self, state: EditorState, next_mode: Optional[EditorMode]
    ) -> None:  # pragma: no cover - default no-op
        del state, next_mode

    def handle_key(
        self, state: EditorState, key: KeyInput
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError
