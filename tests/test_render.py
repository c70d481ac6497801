from __future__ import annotations

from doomish.buffer import Cursor, TextBuffer, Viewport
from doomish.keymaps import KeyHint
from doomish.modes import EditorMode, EditorState, KeyInput, ModeManager
from doomish.render import build_render_model, format_hint, gutter_label, status_line
from doomish.runtime.config import EditorConfig


def make_state(*lines: str, **kwargs) -> EditorState:
    return EditorState(buffer=TextBuffer(lines), **kwargs)


def test_gutter_shows_absolute_on_cursor_row_and_relative_elsewhere() -> None:
    cursor = Cursor(2, 0)

    assert gutter_label(2, cursor, 6) == "    3 "
    assert gutter_label(0, cursor, 6) == "    2 "
    assert gutter_label(5, cursor, 6) == "    3 "


def test_rows_are_truncated_and_padded_with_tildes() -> None:
    state = make_state("abcdefghij", "xy", viewport=Viewport(height=4))

    model = build_render_model(state, width=10, height=4)

    assert model.rows == ("    1 abcd", "    1 xy", "~", "~")


def test_rows_start_at_scroll_top() -> None:
    state = make_state(
        *[f"line {idx}" for idx in range(10)],
        cursor=Cursor(6, 2),
        viewport=Viewport(scroll_top=5, height=2),
    )

    model = build_render_model(state, width=40, height=2)

    assert model.rows == ("    1 line 5", "    7 line 6")
    assert model.cursor == (1, 8)


def test_status_line_format() -> None:
    buffer = TextBuffer(["abc"], source_path="/work/proj/notes.txt")
    buffer.insert_char(0, 0, "x")
    state = EditorState(
        buffer=buffer,
        cursor=Cursor(0, 2),
        project_root="/work/proj",
        status_message="Opened.",
    )

    assert status_line(state) == " NORMAL  notes.txt*  proj:proj  1:3  - Opened."


def test_status_line_without_file_or_project() -> None:
    state = make_state("", mode=EditorMode.INSERT)

    assert status_line(state) == " INSERT  [No File]  proj:-  1:1"


def test_palette_shows_command_label_and_view() -> None:
    manager = ModeManager()
    state = manager.initial_state()
    manager.handle_key(state, KeyInput(key=":", text=":"))
    manager.handle_key(state, KeyInput(key="z", text="z"))
    manager.handle_key(state, KeyInput(key="z", text="z"))

    model = build_render_model(state, width=40, height=3)

    assert model.status_line.startswith(" COMMAND ")
    assert model.palette is not None
    assert model.palette.query == "zz"
    assert model.palette.items == ("(no results)",)


def test_leader_hints_listed_for_current_node() -> None:
    manager = ModeManager()
    state = manager.initial_state()
    manager.handle_key(state, KeyInput(key="space", text=" "))
    manager.handle_key(state, KeyInput(key="f", text="f"))

    model = build_render_model(state, width=40, height=3)

    assert [(hint.key, hint.title, hint.kind) for hint in model.hints] == [
        ("f", "Find file (open)", "binding"),
        ("s", "Save file", "binding"),
    ]
    assert model.status_line.startswith(" LEADER ")


def test_no_hints_outside_leader_mode() -> None:
    state = make_state("abc")

    model = build_render_model(state, width=40, height=1, config=EditorConfig(gutter_width=4))

    assert model.hints == ()
    assert model.palette is None
    assert model.rows == ("  1 abc",)
    assert model.cursor == (0, 4)


def test_format_hint_glyphs() -> None:
    assert format_hint(KeyHint(key="f", title="files", kind="group")) == "f  ▸ files"
    assert format_hint(KeyHint(key="q", title="Quit", kind="binding")) == "q  • Quit"
