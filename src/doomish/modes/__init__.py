"""Editor state, mode handlers, and the mode manager."""

from .base_mode import (
    EditorMode,
    EditorState,
    KeyInput,
    Mode,
    ModeBus,
    ModeResult,
)
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .visual_mode import VisualMode
from .leader_mode import LeaderMode
from .palette_input import PaletteInput
from .mode_manager import ModeManager, default_manager, update

__all__ = [
    "EditorMode",
    "EditorState",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeResult",
    "NormalMode",
    "InsertMode",
    "VisualMode",
    "LeaderMode",
    "PaletteInput",
    "ModeManager",
    "default_manager",
    "update",
]
