from dualtodo.editor import EditorState
from dualtodo.todo import TodoCollection, TodoEntry
from dualtodo.ui.screen import (
    caret_position,
    format_row,
    help_segments,
    list_title,
    pad_line,
    scroll_offset,
    snapshot,
)


def _state(*texts: str) -> EditorState:
    return EditorState(TodoCollection(daily=[TodoEntry(t) for t in texts]))


def test_snapshot_reflects_active_list_and_markers() -> None:
    state = _state("milk", "eggs")
    state.todos.set_status(1, "done")

    snap = snapshot(state)

    assert snap.rows == (("#", "milk"), ("*", "eggs"))
    assert snap.mode == "normal"
    assert snap.target == "daily"
    assert snap.input == "milk"
    assert (snap.row, snap.column) == (0, 0)
    assert [format_row(m, t) for m, t in snap.rows] == ["#: milk", "*: eggs"]


def test_caret_sits_after_prefix_and_row_offset() -> None:
    state = _state("abc", "defg")
    state.move_cursor("down")
    state.move_cursor("right")
    state.move_cursor("right")

    assert caret_position(snapshot(state)) == (5, 2)
    assert caret_position(snapshot(state), scroll=1) == (5, 1)


def test_caret_counts_wide_characters_as_two_cells() -> None:
    state = _state("日本語")
    state.column = 2

    assert caret_position(snapshot(state)) == (3 + 4, 1)


def test_help_line_depends_on_mode() -> None:
    normal = "".join(text for text, _ in help_segments("normal"))
    editing = "".join(text for text, _ in help_segments("editing"))

    assert "q to exit" in normal
    assert "t to change todo type" in normal
    assert "Esc to stop editing" in editing
    assert ("Enter", True) in help_segments("editing")


def test_list_titles() -> None:
    assert list_title("daily") == "Daily"
    assert list_title("long_term") == "Long Term"


def test_scroll_keeps_cursor_row_visible() -> None:
    assert scroll_offset(0, 0, 5) == 0
    assert scroll_offset(7, 0, 5) == 3
    assert scroll_offset(2, 3, 5) == 2
    assert scroll_offset(4, 3, 5) == 3


def test_pad_line_cuts_and_pads_by_cells() -> None:
    assert pad_line("abc", 5) == "abc  "
    assert pad_line("abcdef", 4) == "abcd"
    assert pad_line("日本", 3) == "日 "
