"""In-memory gallery list backed by local storage."""

from .models import VideoEntry, default_entries
from .storage import GalleryPersistence


class EntryStore:
    """Ordered list of entries, newest first.

    Every mutation is written through `persistence` before it becomes
    visible, so a failed write leaves the store unchanged.
    """

    def __init__(self, persistence: GalleryPersistence, entries: list[VideoEntry] | None = None) -> None:
        self.persistence = persistence
        self._entries = list(entries) if entries is not None else default_entries()

    @classmethod
    def open(cls, persistence: GalleryPersistence) -> 'EntryStore':
        """Restore from storage; missing or corrupted data gives the defaults."""
        result = persistence.read()
        if not result.ok or result.entries is None:
            return cls(persistence)
        return cls(persistence, result.entries)

    def current(self) -> tuple[VideoEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, entry: VideoEntry) -> bool:
        """Prepend `entry` and save. Blank title or URL is ignored (returns False)."""
        if not entry.is_acceptable():
            return False
        updated = [entry, *self._entries]
        self.persistence.save(updated)
        self._entries = updated
        return True

    def reset_to_default(self) -> None:
        """Back to the built-in entries, with nothing left in storage."""
        self.persistence.clear()
        self._entries = default_entries()
