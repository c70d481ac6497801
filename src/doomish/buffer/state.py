"""Cursor and viewport values tracked alongside a TextBuffer."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import NamedTuple


class Cursor(NamedTuple):
    row: int = 0
    col: int = 0


@dataclass(frozen=True, slots=True)
class Viewport:
    """Vertical scroll window over the document."""

    scroll_top: int = 0
    height: int = 24

    def scrolled_to(self, scroll_top: int) -> "Viewport":
        return replace(self, scroll_top=scroll_top)

    def resized(self, height: int) -> "Viewport":
        return replace(self, height=max(1, height))
