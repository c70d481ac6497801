"""Project-root discovery by walking up to a version-control marker."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional


def find_project_root(
    start: str | Path, markers: Iterable[str] = (".git",)
) -> Optional[Path]:
    """Return the nearest ancestor of ``start`` holding one of ``markers``."""

    names = tuple(markers)
    current = Path(start).resolve()
    for candidate in (current, *current.parents):
        if any((candidate / name).exists() for name in names):
            return candidate
    return None


__all__ = ["find_project_root"]
