"""Document storage plus cursor and viewport clamping."""

from .document import TextBuffer
from .state import Cursor, Viewport
from .viewport import clamp_cursor, ensure_visible

__all__ = [
    "TextBuffer",
    "Cursor",
    "Viewport",
    "clamp_cursor",
    "ensure_visible",
]
