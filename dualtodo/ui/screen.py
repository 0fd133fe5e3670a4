"""
dualtodo/ui/screen.py

Draws the editor: a help line, the "Input" box holding the edit buffer, the list
view for the active list and a one-line status bar. Drawing only reads the
editor state; the pure helpers below are what the tests exercise.
"""

import curses
from dataclasses import dataclass
from typing import List, Tuple

from wcwidth import wcswidth

from dualtodo import logger
from dualtodo.todo import TARGET_TITLES

MARGIN = 2
INPUT_BOX_HEIGHT = 3
# Width of the "#: " / "*: " prefix in front of every list row
ROW_PREFIX_WIDTH = 3

PAIR_EDITING = 1

HELP_NORMAL = [
    ("Press ", False),
    ("q", True),
    (" to exit, ", False),
    ("e", True),
    (" to start editing, ", False),
    ("t", True),
    (" to change todo type, ", False),
    ("d", True),
    (" to mark done, ", False),
    ("r", True),
    (" to remove.", False),
]

HELP_EDITING = [
    ("Press ", False),
    ("Esc", True),
    (" to stop editing, ", False),
    ("Enter", True),
    (" to record the message", False),
]


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of everything the screen needs to draw one frame."""
    mode: str
    target: str
    rows: Tuple[Tuple[str, str], ...]
    input: str
    row: int
    column: int


def snapshot(state) -> Snapshot:
    rows = tuple((entry.marker, entry.text) for entry in state.todos.active_list())
    return Snapshot(
        mode=state.mode,
        target=state.target,
        rows=rows,
        input=state.input,
        row=state.row,
        column=state.column,
    )

def display_width(text: str) -> int:
    """Terminal cell width of `text`; falls back to its length if it has control characters."""
    width = wcswidth(text)
    return width if width >= 0 else len(text)

def help_segments(mode: str) -> List[Tuple[str, bool]]:
    """(text, bold) pieces of the help line for `mode`."""
    return HELP_EDITING if mode == "editing" else HELP_NORMAL

def format_row(marker: str, text: str) -> str:
    return f"{marker}: {text}"

def list_title(target: str) -> str:
    return TARGET_TITLES[target]

def caret_position(snap: Snapshot, scroll: int = 0) -> Tuple[int, int]:
    """
    Caret (x, y) in the list view: x counts from the first cell inside the left
    border and skips the row prefix, y counts from the top border.
    """
    text = snap.rows[snap.row][1]
    x = ROW_PREFIX_WIDTH + display_width(text[:snap.column])
    y = 1 + snap.row - scroll
    return x, y

def scroll_offset(row: int, scroll: int, visible: int) -> int:
    """Adjust `scroll` so that `row` falls inside a window of `visible` rows."""
    visible = max(1, visible)
    if row < scroll:
        scroll = row
    if row >= scroll + visible:
        scroll = row - visible + 1
    return max(0, scroll)

def pad_line(text, width):
    """Cut or pad `text` to exactly `width` terminal cells."""
    out = ""
    used = 0
    for ch in text:
        w = max(display_width(ch), 0)
        if used + w > width:
            break
        out += ch
        used += w
    return out + " " * (width - used)

def init_colors():
    """Set up the single colour pair used while editing (yellow on default)."""
    try:
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(PAIR_EDITING, curses.COLOR_YELLOW, -1)
    except curses.error:
        logger.log("colour support unavailable")

def draw_box(stdscr, y, x, height, width, title, attr=0):
    """Draw a single-line border box with `title` set into the top edge."""
    inner = max(0, width - 2)
    top = "┌" + title[:inner] + "─" * (inner - len(title[:inner])) + "┐"
    logger.safe_addstr(stdscr, y, x, top, attr)
    for i in range(1, height - 1):
        logger.safe_addstr(stdscr, y + i, x, "│", attr)
        logger.safe_addstr(stdscr, y + i, x + width - 1, "│", attr)
    logger.safe_addstr(stdscr, y + height - 1, x, "└" + "─" * inner + "┘", attr)

def draw_help(stdscr, y, x, width, mode):
    used = 0
    for text, bold in help_segments(mode):
        if used >= width:
            break
        piece = text[:width - used]
        logger.safe_addstr(stdscr, y, x + used, piece, curses.A_BOLD if bold else 0)
        used += len(piece)

def display(state, stdscr, scroll: int = 0) -> int:
    """
    Re-draw the whole screen from the editor state and place the caret.
    Returns the list view's scroll offset so the caller can keep it between frames.
    """
    snap = snapshot(state)
    height, width = stdscr.getmaxyx()
    stdscr.erase()

    x = MARGIN
    inner_width = max(0, width - 2 * MARGIN)
    editing_attr = curses.color_pair(PAIR_EDITING) if snap.mode == "editing" else 0

    draw_help(stdscr, MARGIN, x, inner_width, snap.mode)

    input_y = MARGIN + 1
    draw_box(stdscr, input_y, x, INPUT_BOX_HEIGHT, inner_width, "Input", editing_attr)
    logger.safe_addstr(stdscr, input_y + 1, x + 1, pad_line(snap.input, max(0, inner_width - 2)), editing_attr)

    list_y = input_y + INPUT_BOX_HEIGHT
    list_height = max(3, height - list_y - MARGIN)
    visible = list_height - 2
    scroll = scroll_offset(snap.row, scroll, visible)
    draw_box(stdscr, list_y, x, list_height, inner_width, list_title(snap.target), editing_attr)
    for i, (marker, text) in enumerate(snap.rows[scroll:scroll + visible]):
        row_attr = curses.A_REVERSE if scroll + i == snap.row else 0
        line = pad_line(format_row(marker, text), max(0, inner_width - 2))
        logger.safe_addstr(stdscr, list_y + 1 + i, x + 1, line, row_attr)

    if state.command_log:
        logger.safe_addstr(stdscr, height - 1, x, pad_line(state.command_log[-1], inner_width))

    caret_x, caret_y = caret_position(snap, scroll)
    try:
        curses.curs_set(2)
    except curses.error:
        pass
    logger.safe_move(stdscr, list_y + caret_y, x + 1 + caret_x)
    stdscr.refresh()
    return scroll
