"""Command palette state: query text, ranked labels, and confirmation."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Sequence

from doomish.runtime import telemetry

from .fuzzy import find_ranked

PATH_HINT_CHARS = frozenset("/\\.")
NO_RESULTS = "(no results)"


@dataclass(slots=True)
class PaletteState:
    """Transient palette UI state; discarded when the palette closes."""

    query: str = ""
    ranked_items: List[str] = field(default_factory=list)
    selected: int = 0
    open_file_prefix: str = "Open file: "
    open_path_label: str = "Open file path: "
    limit: int = 30

    @property
    def filter_text(self) -> str:
        return strip_prefix(self.query, self.open_file_prefix)

    @property
    def selected_label(self) -> Optional[str]:
        if not self.ranked_items:
            return None
        return self.ranked_items[self.selected]

    @property
    def display_items(self) -> Sequence[str]:
        return self.ranked_items or (NO_RESULTS,)

    def refresh(self, titles: Sequence[str], query: str) -> None:
        with telemetry.span(
            "palette::rank",
            component="palette",
            metadata={"query": query, "candidates": len(titles)},
        ) as handle:
            hits = find_ranked(query, titles, lambda title: title, self.limit)
            items = [hit.item for hit in hits]
            trimmed = query.strip()
            if trimmed and PATH_HINT_CHARS.intersection(trimmed):
                items.insert(0, f"{self.open_path_label}{trimmed}")
            self.ranked_items = items
            self.selected = 0
            handle.add_metadata("results", len(items))

    def on_query_changed(self, new_query: str, titles: Sequence[str]) -> None:
        self.query = new_query
        self.refresh(titles, self.filter_text)

    def type_text(self, text: str, titles: Sequence[str]) -> None:
        self.on_query_changed(self.query + text, titles)

    def backspace(self, titles: Sequence[str]) -> None:
        if self.query:
            self.on_query_changed(self.query[:-1], titles)

    def move_selection(self, delta: int) -> None:
        if not self.ranked_items:
            self.selected = 0
            return
        self.selected = max(0, min(self.selected + delta, len(self.ranked_items) - 1))


@dataclass(frozen=True, slots=True)
class PaletteDecision:
    """What confirming the palette asks the editor to do."""

    action: Literal["open_path", "command", "none"]
    path: Optional[str] = None
    title: Optional[str] = None


def open_palette(
    prefill: str,
    titles: Sequence[str],
    *,
    open_file_prefix: str = "Open file: ",
    open_path_label: str = "Open file path: ",
    limit: int = 30,
) -> PaletteState:
    palette = PaletteState(
        query=prefill,
        open_file_prefix=open_file_prefix,
        open_path_label=open_path_label,
        limit=limit,
    )
    palette.refresh(titles, "")
    return palette


def confirm(palette: PaletteState, selected_label: Optional[str] = None) -> PaletteDecision:
    """Decide what the selected row (or the typed open-file path) means."""

    label = palette.selected_label if selected_label is None else selected_label
    if label is not None and label.startswith(palette.open_path_label):
        return _open_path(label[len(palette.open_path_label):])

    raw = palette.query.strip()
    prefix = palette.open_file_prefix.strip()
    if prefix and raw.startswith(prefix):
        return _open_path(raw[len(prefix):])

    if label is None:
        return PaletteDecision(action="none")
    return PaletteDecision(action="command", title=label)


def _open_path(raw_path: str) -> PaletteDecision:
    cleaned = raw_path.strip()
    if not cleaned:
        return PaletteDecision(action="none")
    return PaletteDecision(action="open_path", path=os.path.abspath(cleaned))


def strip_prefix(query: str, prefix: str) -> str:
    stripped = prefix.strip()
    if stripped and query.startswith(stripped):
        return query[len(stripped):].lstrip()
    return query


__all__ = [
    "NO_RESULTS",
    "PaletteDecision",
    "PaletteState",
    "confirm",
    "open_palette",
    "strip_prefix",
]
