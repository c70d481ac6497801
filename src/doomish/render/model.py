"""Frame description handed to the display host after every key event."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from doomish.buffer import Cursor
from doomish.keymaps import KeyHint, leader_hints
from doomish.modes.base_mode import EditorMode, EditorState
from doomish.runtime.config import EditorConfig

EMPTY_ROW = "~"
NO_FILE = "[No File]"
NO_PROJECT = "-"


@dataclass(frozen=True, slots=True)
class PaletteView:
    query: str
    items: Tuple[str, ...]
    selected: int


@dataclass(frozen=True, slots=True)
class RenderModel:
    """Visible rows, status line, overlays, and the terminal cursor target."""

    rows: Tuple[str, ...]
    status_line: str
    hints: Tuple[KeyHint, ...] = ()
    palette: Optional[PaletteView] = None
    cursor: Tuple[int, int] = (0, 0)


def gutter_label(row: int, cursor: Cursor, gutter_width: int) -> str:
    number = row + 1 if row == cursor.row else abs(row - cursor.row)
    return str(number).rjust(gutter_width - 1) + " "


def visible_rows(state: EditorState, width: int, height: int, gutter_width: int) -> Tuple[str, ...]:
    buffer = state.buffer
    room = max(0, width - gutter_width)
    rows = []
    for offset in range(height):
        row = state.viewport.scroll_top + offset
        if row >= buffer.line_count():
            rows.append(EMPTY_ROW)
            continue
        line = buffer.line_at(row)
        rows.append(gutter_label(row, state.cursor, gutter_width) + line[:room])
    return tuple(rows)


def status_line(state: EditorState) -> str:
    label = EditorMode.COMMAND.label if state.palette is not None else state.mode.label
    name = os.path.basename(state.file_path) if state.file_path else NO_FILE
    dirty = "*" if state.buffer.dirty else ""
    project = os.path.basename(state.project_root) if state.project_root else NO_PROJECT
    position = f"{state.cursor.row + 1}:{state.cursor.col + 1}"
    message = f"  - {state.status_message}" if state.status_message else ""
    return f" {label}  {name}{dirty}  proj:{project}  {position}{message}"


def build_render_model(
    state: EditorState,
    *,
    width: int,
    height: int,
    config: EditorConfig | None = None,
) -> RenderModel:
    """Describe one frame of ``height`` editor rows at ``width`` columns."""

    gutter_width = (config or EditorConfig()).gutter_width
    hints: Tuple[KeyHint, ...] = ()
    if state.mode == EditorMode.LEADER and state.leader is not None:
        hints = leader_hints(state.leader.node)

    palette = None
    if state.palette is not None:
        palette = PaletteView(
            query=state.palette.query,
            items=tuple(state.palette.display_items),
            selected=state.palette.selected,
        )

    cursor = (
        state.cursor.row - state.viewport.scroll_top,
        gutter_width + state.cursor.col,
    )
    return RenderModel(
        rows=visible_rows(state, width, max(0, height), gutter_width),
        status_line=status_line(state),
        hints=hints,
        palette=palette,
        cursor=cursor,
    )


def format_hint(hint: KeyHint) -> str:
    glyph = "▸" if hint.kind == "group" else "•"
    return f"{hint.key}  {glyph} {hint.title}"


__all__ = [
    "EMPTY_ROW",
    "PaletteView",
    "RenderModel",
    "build_render_model",
    "format_hint",
    "gutter_label",
    "status_line",
]
