"""Title and tag filtering."""

from collections.abc import Sequence

from .models import VideoEntry


def matches(entry: VideoEntry, needle: str) -> bool:
    """Case-insensitive substring match on title or any tag. `needle` must be lowercase."""
    if needle in (entry.title or "").lower():
        return True
    return any(needle in tag.lower() for tag in entry.tags)


def filter_entries(entries: Sequence[VideoEntry], query: str) -> Sequence[VideoEntry]:
    """Entries matching `query`, in input order. Blank query returns `entries` as is."""
    needle = query.strip().lower()
    if not needle:
        return entries
    return [e for e in entries if matches(e, needle)]
