"""Editor configuration and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass

ENV_PREFIX = "DOOMISH_"


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Static knobs shared by the core, the renderer, and the host."""

    leader_key: str = "space"
    gutter_width: int = 6
    palette_limit: int = 30
    viewport_height: int = 24
    open_file_prefix: str = "Open file: "
    open_path_label: str = "Open file path: "
    vcs_markers: tuple[str, ...] = (".git",)

    def __post_init__(self) -> None:
        if not self.leader_key:
            raise ValueError("leader_key cannot be empty")
        if self.gutter_width < 2:
            raise ValueError("gutter_width must be at least 2")
        if self.palette_limit < 1:
            raise ValueError("palette_limit must be positive")
        if self.viewport_height < 1:
            raise ValueError("viewport_height must be positive")

    @classmethod
    def from_env(cls) -> "EditorConfig":
        defaults = cls()
        return cls(
            leader_key=os.environ.get(f"{ENV_PREFIX}LEADER_KEY") or defaults.leader_key,
            gutter_width=_env_int("GUTTER_WIDTH", defaults.gutter_width),
            palette_limit=_env_int("PALETTE_LIMIT", defaults.palette_limit),
        )


__all__ = ["EditorConfig"]
