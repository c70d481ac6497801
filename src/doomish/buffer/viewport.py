"""Clamping helpers that keep cursor and viewport within the document."""

from __future__ import annotations

from .document import TextBuffer
from .state import Cursor, Viewport


def clamp_cursor(buffer: TextBuffer, cursor: Cursor) -> Cursor:
    row = max(0, min(cursor.row, buffer.line_count() - 1))
    col = max(0, min(cursor.col, len(buffer.line_at(row))))
    return Cursor(row, col)


def ensure_visible(height: int, cursor: Cursor, viewport: Viewport) -> Viewport:
    scroll_top = viewport.scroll_top
    if cursor.row < scroll_top:
        scroll_top = cursor.row
    if cursor.row >= scroll_top + height:
        scroll_top = cursor.row - height + 1
    return viewport.scrolled_to(max(0, scroll_top))


__all__ = ["clamp_cursor", "ensure_visible"]
