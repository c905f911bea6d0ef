"""Interaction state for the gallery view.

At most one transient surface is open at a time: the player for a
selected entry, the add form, or the reset confirmation. Each one is
entered from idle and left back to idle.
"""

from enum import Enum

from .models import EntryForm, VideoEntry
from .search import filter_entries
from .store import EntryStore


class Mode(str, Enum):
    IDLE = "idle"
    VIEWING = "viewing"
    ADDING = "adding"
    CONFIRMING_RESET = "confirming_reset"


class InvalidTransition(Exception):
    """Raised when an action is not allowed in the current mode."""

    pass


class GallerySession:
    """View state of one running gallery, bound to its store."""

    def __init__(self, store: EntryStore) -> None:
        self.store = store
        self.mode = Mode.IDLE
        self.active: VideoEntry | None = None
        # Last rejected form input, shown again in the add form
        self.draft: EntryForm | None = None

    def _require(self, mode: Mode, action: str) -> None:
        if self.mode != mode:
            raise InvalidTransition(f"Cannot {action} while {self.mode.value}")

    def visible(self, query: str = ""):
        return filter_entries(self.store.current(), query)

    def open_entry(self, index: int) -> VideoEntry:
        self._require(Mode.IDLE, "open an entry")
        entries = self.store.current()
        if not 0 <= index < len(entries):
            raise IndexError(f"No entry at position {index}")
        self.active = entries[index]
        self.mode = Mode.VIEWING
        return self.active

    def close(self) -> None:
        """Close whatever is open. Nothing in the store changes."""
        self.mode = Mode.IDLE
        self.active = None
        self.draft = None

    def begin_add(self) -> None:
        self._require(Mode.IDLE, "add an entry")
        self.mode = Mode.ADDING

    def submit(self, form: EntryForm) -> bool:
        """Store the form's entry and close. Incomplete forms keep the form open."""
        self._require(Mode.ADDING, "submit")
        if not form.can_save():
            self.draft = form
            return False
        self.store.add(form.to_entry())
        self.close()
        return True

    def add_entry(self, entry: VideoEntry) -> bool:
        """Add directly, without the form. Any open surface stays open."""
        return self.store.add(entry)

    def reset_all(self) -> None:
        """Reset without confirmation and close whatever is open."""
        self.store.reset_to_default()
        self.close()

    def begin_reset(self) -> None:
        self._require(Mode.IDLE, "reset")
        self.mode = Mode.CONFIRMING_RESET

    def confirm_reset(self) -> None:
        self._require(Mode.CONFIRMING_RESET, "confirm reset")
        self.store.reset_to_default()
        self.close()
