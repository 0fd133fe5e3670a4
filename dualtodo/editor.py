"""
Editor state for dualtodo.

EditorState ties the todo collection to a cursor (row/column) and an edit buffer
holding a copy of the text on the cursor row. Every operation leaves the cursor
inside the active list and inside the current line, so the state never needs
to be repaired from outside.
"""
from typing import Iterable, List, Literal, Optional

from dualtodo import logger
from dualtodo.todo import Target, TodoCollection, TodoEntry

Mode = Literal["normal", "editing"]
Direction = Literal["up", "down", "left", "right"]

def clamp(value: int, min_value: int, max_value: int) -> int:
    return max(min_value, min(value, max_value))

class EditorState:
    """Holds the todo lists, cursor, edit buffer and input mode."""
    def __init__(self, todos: Optional[TodoCollection] = None):
        self.todos = todos if todos is not None else TodoCollection()
        self.mode: Mode = "normal"
        # Cursor position within the active list (entry index and character offset)
        self.row = 0
        self.column = 0
        # Copy of the text on the cursor row
        self.input = ""
        self.exit_flag = False
        # Recent commands, newest last, for the status line
        self.command_log: List[str] = []
        self.reload_buffer()

    @property
    def target(self):
        return self.todos.target

    def current_entry(self) -> TodoEntry:
        return self.todos.entry_at(self.row)

    def clamp_row(self):
        """Keep the row inside the active list."""
        self.row = clamp(self.row, 0, len(self.todos.active_list_mut()) - 1)

    def clamp_column(self):
        """Keep the column between the start of the line and just past its last character."""
        self.column = clamp(self.column, 0, len(self.current_entry().text))

    def reload_buffer(self):
        """Copy the text on the cursor row into the edit buffer."""
        self.input = self.current_entry().text

    def move_cursor(self, direction: Direction):
        """Move one step in `direction`; overshooting an edge just stays put."""
        if direction == "up":
            self.row -= 1
        elif direction == "down":
            self.row += 1
        elif direction == "left":
            self.column -= 1
        elif direction == "right":
            self.column += 1
        self.clamp_row()
        self.clamp_column()
        self.reload_buffer()

    def insert_char(self, ch: str):
        """Insert `ch` at the cursor and write the line back to its entry."""
        self.input = self.input[:self.column] + ch + self.input[self.column:]
        self.current_entry().text = self.input
        self.column += len(ch)

    def delete_char(self):
        """Delete the character before the cursor (backspace)."""
        if not self.input or self.column <= 0:
            return
        self.input = self.input[:self.column - 1] + self.input[self.column:]
        self.current_entry().text = self.input
        self.column -= 1

    def commit_line(self):
        """
        Finish editing the current line and go back to normal mode.
        Only on the last row does this start a new blank entry below it.
        """
        if self.row >= len(self.todos.active_list_mut()) - 1:
            self.todos.push(TodoEntry())
            self.row += 1
            self.column = 0
        self.reload_buffer()
        self.mode = "normal"

    def switch_active_list(self):
        """Flip to the other list, starting again from its first entry."""
        self.todos.switch_active_list()
        self.row = 0
        self.reload_buffer()
        self.clamp_column()

    def load(self, target: Target, texts: Iterable[str]):
        """Replace the `target` list with `texts`, keeping the cursor on a real entry."""
        self.todos.bulk_load(target, texts)
        self.clamp_row()
        self.clamp_column()
        self.reload_buffer()

    def remove_current(self):
        """Remove the entry under the cursor, then settle on the row above it."""
        self.todos.remove(self.row)
        self.move_cursor("up")

    def mark_done(self):
        self.todos.set_status(self.row, "done")

    def log_command(self, msg: str):
        """
        Log a command or action to the status line history (and debug log file).
        """
        self.command_log.append(msg)
        if len(self.command_log) > 5:
            self.command_log = self.command_log[-5:]
        logger.log(msg)

    def graceful_exit(self):
        """End the session; the event loop stops after the current key."""
        logger.log("Editor exited.")
        self.exit_flag = True
