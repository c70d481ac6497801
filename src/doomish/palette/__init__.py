"""Fuzzy ranking and command palette state."""

from .fuzzy import FuzzyHit, find_ranked, score
from .palette import (
    NO_RESULTS,
    PaletteDecision,
    PaletteState,
    confirm,
    open_palette,
    strip_prefix,
)

__all__ = [
    "FuzzyHit",
    "NO_RESULTS",
    "PaletteDecision",
    "PaletteState",
    "confirm",
    "find_ranked",
    "open_palette",
    "score",
    "strip_prefix",
]
