"""Side effects requested by the core and performed by the session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class LoadFile:
    path: str


@dataclass(frozen=True, slots=True)
class SaveFile:
    path: str


@dataclass(frozen=True, slots=True)
class Exit:
    reason: str = "quit"


Effect = Union[LoadFile, SaveFile, Exit]

__all__ = ["Effect", "Exit", "LoadFile", "SaveFile"]
