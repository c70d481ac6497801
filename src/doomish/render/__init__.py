"""Render model produced for the display host."""

from .model import (
    EMPTY_ROW,
    PaletteView,
    RenderModel,
    build_render_model,
    format_hint,
    gutter_label,
    status_line,
)

__all__ = [
    "EMPTY_ROW",
    "PaletteView",
    "RenderModel",
    "build_render_model",
    "format_hint",
    "gutter_label",
    "status_line",
]
