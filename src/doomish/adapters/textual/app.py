"""Executable Textual app that hosts the editor core."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use doomish.adapters.textual.app"
    ) from exc

from doomish.render import RenderModel, format_hint
from doomish.runtime import telemetry
from doomish.runtime.config import EditorConfig
from doomish.runtime.session import EditorSession

from .controller import TextualEditorAdapter, TextualUIHooks

NAMED_KEYS = {
    "escape": "escape",
    "enter": "enter",
    "return": "enter",
    "backspace": "backspace",
    "ctrl+h": "backspace",
    "space": "space",
    "up": "up",
    "down": "down",
    "left": "left",
    "right": "right",
    "tab": "tab",
    "ctrl+c": "ctrl+c",
}


class DoomishApp(App[None]):
    """Textual host: editor rows, status line, leader hints and the palette."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor-view {
		height: 1fr;
		content-align: left top;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
	}

	#hints {
		dock: bottom;
		height: auto;
		max-height: 12;
		margin-bottom: 1;
		border: round $accent;
		display: none;
	}

	#palette {
		dock: top;
		height: auto;
		max-height: 34;
		margin: 1 8;
		border: round $accent;
		display: none;
	}
	"""

    ENABLE_COMMAND_PALETTE = False

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session
        self.adapter: TextualEditorAdapter | None = None
        self._editor_widget: Static | None = None
        self._status_widget: Static | None = None
        self._hints_widget: Static | None = None
        self._palette_widget: Static | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="editor-area"):
            self._editor_widget = Static("", id="editor-view")
            yield self._editor_widget
        self._status_widget = Static("", id="status-line")
        self._hints_widget = Static("", id="hints")
        self._palette_widget = Static("", id="palette")
        yield self._status_widget
        yield self._hints_widget
        yield self._palette_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            log=self._log_line,
            exit=self._exit_editor,
        )
        width, height = self._editor_size()
        self.adapter = TextualEditorAdapter(
            self.session, hooks, width=width, height=height
        )

    def on_resize(self, event: events.Resize) -> None:
        del event
        if self.adapter:
            width, height = self._editor_size()
            self.adapter.resize(width, height)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text = normalized
        event.stop()
        event.prevent_default()
        self.adapter.handle_textual_key(key, text=text)

    def _editor_size(self) -> Tuple[int, int]:
        size = self.size
        return max(1, size.width), max(1, size.height - 1)

    def _update_view(self, model: RenderModel) -> None:
        if self._editor_widget:
            self._editor_widget.update(self._editor_text(model))
        if self._hints_widget:
            self._hints_widget.display = bool(model.hints)
            self._hints_widget.update("\n".join(format_hint(h) for h in model.hints))
        if self._palette_widget:
            self._palette_widget.display = model.palette is not None
            if model.palette is not None:
                self._palette_widget.update(self._palette_text(model))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(Text(status))

    @staticmethod
    def _editor_text(model: RenderModel) -> Text:
        cursor_row, cursor_col = model.cursor
        result = Text(no_wrap=True, overflow="crop")
        for index, row in enumerate(model.rows):
            if index:
                result.append("\n")
            if index != cursor_row:
                result.append(row)
                continue
            padded = row.ljust(cursor_col + 1)
            result.append(padded[:cursor_col])
            result.append(padded[cursor_col], style="reverse")
            result.append(padded[cursor_col + 1 :])
        return result

    @staticmethod
    def _palette_text(model: RenderModel) -> Text:
        assert model.palette is not None
        palette = model.palette
        result = Text(no_wrap=True, overflow="ellipsis")
        result.append(f"> {palette.query}", style="bold")
        for index, item in enumerate(palette.items):
            result.append("\n")
            style = "reverse" if index == palette.selected else ""
            result.append(f"  {item}", style=style)
        return result

    def _log_line(self, line: str) -> None:
        telemetry.record_event(
            "textual.trace", level="debug", data={"line": line}, logger_name="doomish.textual"
        )

    def _exit_editor(self, reason: str) -> None:
        telemetry.record_event(
            "textual.exit", data={"reason": reason}, logger_name="doomish.textual"
        )
        self.exit()

    @staticmethod
    def _normalize_key(event: events.Key) -> Optional[Tuple[str, Optional[str]]]:
        return _normalize_key(event.key, event.character)


def _normalize_key(key: str, character: Optional[str]) -> Optional[Tuple[str, Optional[str]]]:
    """Map a Textual key name and character onto the core's key vocabulary."""

    named = NAMED_KEYS.get(key)
    if named == "space":
        return ("space", " ")
    if named == "tab":
        return ("tab", "\t")
    if named is not None:
        return (named, None)
    if character and len(character) == 1 and character.isprintable():
        return (character, character)
    return None


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="doomish", description="Modal terminal editor with a leader-key command tree."
    )
    parser.add_argument("path", nargs="?", help="File to open at startup")
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="Telemetry preset (default: configured from DOOMISH_* variables)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    session = EditorSession(config=EditorConfig.from_env())
    session.start(args.path)
    app = DoomishApp(session)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
