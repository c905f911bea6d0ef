"""Shared helpers."""

from pathlib import Path


def has_content(path: Path) -> bool:
    """Check if file exists and has content."""
    try:
        return path.stat().st_size > 0
    except FileNotFoundError:
        return False


def clean_optional(value: str | None) -> str | None:
    """Trim a form value; blank becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def byte_size(text: str) -> int:
    return len(text.encode("utf-8"))
