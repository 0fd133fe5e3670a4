"""
Todo model for dualtodo.

Defines TodoEntry (one line of a list) and TodoCollection, which owns the two
parallel lists ("daily" and "long_term") and remembers which one is active.
Neither list is ever left empty: removing the last entry puts a fresh blank
entry in its place.
"""
from dataclasses import dataclass
from typing import Iterable, List, Literal

Status = Literal["todo", "done"]
Target = Literal["daily", "long_term"]

STATUS_MARKERS = {"todo": "#", "done": "*"}
TARGET_TITLES = {"daily": "Daily", "long_term": "Long Term"}


class IndexOutOfRange(IndexError):
    """Raised when a row does not address an entry of the active list."""

    def __init__(self, row: int, length: int):
        super().__init__(f"row {row} out of range for list of {length} entries")
        self.row = row
        self.length = length


@dataclass
class TodoEntry:
    """A single todo line with its completion status."""

    text: str = ""
    status: Status = "todo"

    @property
    def marker(self) -> str:
        return STATUS_MARKERS[self.status]


class TodoCollection:
    """The daily and long-term lists plus the active-list selector."""

    def __init__(self, daily=None, long_term=None):
        self.daily: List[TodoEntry] = list(daily or [])
        self.long_term: List[TodoEntry] = list(long_term or [])
        if not self.daily:
            self.daily.append(TodoEntry())
        if not self.long_term:
            self.long_term.append(TodoEntry())
        self.target: Target = "daily"

    def active_list(self) -> List[TodoEntry]:
        """Return a read-only copy of the active list."""
        return list(self.active_list_mut())

    def active_list_mut(self) -> List[TodoEntry]:
        """Return the active list itself; every structural change goes through here."""
        if self.target == "daily":
            return self.daily
        return self.long_term

    def entry_at(self, row: int) -> TodoEntry:
        entries = self.active_list_mut()
        self._check_row(entries, row)
        return entries[row]

    def push(self, entry: TodoEntry) -> None:
        """Append an entry to the end of the active list."""
        self.active_list_mut().append(entry)

    def remove(self, row: int) -> TodoEntry:
        """
        Remove and return the entry at `row` of the active list.
        An emptied list gets one blank entry back; the caller reclamps its cursor.
        """
        entries = self.active_list_mut()
        self._check_row(entries, row)
        removed = entries.pop(row)
        self.ensure_not_empty()
        return removed

    def set_status(self, row: int, status: Status) -> None:
        self.entry_at(row).status = status

    def switch_active_list(self) -> Target:
        """Toggle between the daily and long-term lists and return the new target."""
        self.target = "long_term" if self.target == "daily" else "daily"
        return self.target

    def ensure_not_empty(self) -> None:
        """Ensure the active list has at least one (blank) entry."""
        entries = self.active_list_mut()
        if len(entries) == 0:
            entries.append(TodoEntry())

    def bulk_load(self, target: Target, texts: Iterable[str]) -> None:
        """Replace the `target` list with fresh entries, one per text."""
        entries = [TodoEntry(text) for text in texts]
        if not entries:
            entries = [TodoEntry()]
        if target == "daily":
            self.daily = entries
        else:
            self.long_term = entries

    @staticmethod
    def _check_row(entries, row: int) -> None:
        if not 0 <= row < len(entries):
            raise IndexOutOfRange(row, len(entries))
