"""Line-oriented document storage for the editor."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from doomish.runtime import telemetry

from .state import Cursor


class TextBuffer:
    """Ordered list of lines with a dirty flag and an optional source path.

    The line list is never empty. Positional edits take ``(row, col)`` that
    callers have already clamped; ``insert_char`` additionally clamps ``col``
    to the line so splicing is always well defined.
    """

    def __init__(
        self, lines: Optional[Iterable[str]] = None, *, source_path: Optional[str] = None
    ) -> None:
        self._lines: List[str] = list(lines) if lines is not None else [""]
        if not self._lines:
            self._lines = [""]
        self.dirty = False
        self.source_path = source_path

    @classmethod
    def from_text(cls, text: str, *, source_path: Optional[str] = None) -> "TextBuffer":
        return cls(_split_lines(text), source_path=source_path)

    @property
    def lines(self) -> Sequence[str]:
        return tuple(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, row: int) -> str:
        if 0 <= row < len(self._lines):
            return self._lines[row]
        return ""

    def load(self, path: str | Path) -> None:
        """Replace the contents with the file at ``path``.

        Raises ``OSError`` when the file cannot be read; the buffer keeps its
        previous contents in that case.
        """

        target = Path(path)
        with telemetry.span(
            "buffer::load", component="buffer", metadata={"path": str(target)}
        ) as handle:
            data = target.read_bytes()
            self._lines = _split_lines(data.decode("utf-8", errors="replace"))
            self.dirty = False
            self.source_path = str(target)
            handle.add_metadata("lines", len(self._lines))

    def save(self, path: str | Path) -> None:
        """Write the lines joined by ``\\n``; raises ``OSError`` on failure."""

        target = Path(path)
        with telemetry.span(
            "buffer::save", component="buffer", metadata={"path": str(target)}
        ):
            target.write_bytes(self.text.encode("utf-8"))
            self.dirty = False
            self.source_path = str(target)

    def insert_char(self, row: int, col: int, ch: str) -> Cursor:
        line = self.line_at(row)
        col = max(0, min(col, len(line)))
        self._lines[row] = line[:col] + ch + line[col:]
        self.dirty = True
        return Cursor(row, col + len(ch))

    def delete_char_backward(self, row: int, col: int) -> Cursor:
        if row < 0:
            return Cursor(0, 0)
        line = self.line_at(row)
        if col == 0:
            if row == 0:
                return Cursor(0, 0)
            previous = self._lines[row - 1]
            self._lines[row - 1] = previous + line
            del self._lines[row]
            self.dirty = True
            return Cursor(row - 1, len(previous))

        self._lines[row] = line[: col - 1] + line[col:]
        self.dirty = True
        return Cursor(row, col - 1)

    def insert_newline(self, row: int, col: int) -> Cursor:
        line = self.line_at(row)
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, line[col:])
        self.dirty = True
        return Cursor(row + 1, 0)


def _split_lines(text: str) -> List[str]:
    lines = text.replace("\r\n", "\n").split("\n")
    return lines or [""]


__all__ = ["TextBuffer"]
