"""Key constants for dualtodo.

Characters read with get_wch() arrive as one-character strings, special keys
as curses integer codes. Enter, Backspace and Escape are listed in both forms.
"""
import curses

# Normal mode commands
KEY_EDIT = "e"
KEY_QUIT = "q"
KEY_SWITCH = "t"
KEY_REMOVE = "r"
KEY_DONE = "d"

ENTER_KEYS = ("\n", "\r", curses.KEY_ENTER, 10, 13)
BACKSPACE_KEYS = ("\x7f", "\x08", curses.KEY_BACKSPACE, 127, 8)
ESC_KEYS = ("\x1b", 27)

ARROW_DIRECTIONS = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
}

def is_character(key) -> bool:
    """True for a single printable character (not a control or curses key code)."""
    return isinstance(key, str) and len(key) == 1 and key.isprintable()

__all__ = [
    "KEY_EDIT",
    "KEY_QUIT",
    "KEY_SWITCH",
    "KEY_REMOVE",
    "KEY_DONE",
    "ENTER_KEYS",
    "BACKSPACE_KEYS",
    "ESC_KEYS",
    "ARROW_DIRECTIONS",
    "is_character",
]
