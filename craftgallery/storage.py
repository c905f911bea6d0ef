"""Local key-value storage and the gallery persistence adapter."""

import json
from dataclasses import dataclass
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .config import STORAGE_KEY, STORAGE_QUOTA_BYTES
from .models import VideoEntry
from .utils import byte_size, has_content


class StorageQuotaError(Exception):
    """Raised when a write would exceed the storage quota."""

    pass


class CorruptDataError(Exception):
    """Raised when a stored value does not parse as a list of entries."""

    pass


class KeyValueStorage:
    """Synchronous string key-value storage with a size quota.

    Subclasses provide ``_read_all`` and ``_write_all``; every change is
    written through immediately.
    """

    def __init__(self, quota: int = STORAGE_QUOTA_BYTES) -> None:
        self.quota = quota

    def _read_all(self) -> dict[str, str]:
        raise NotImplementedError

    def _write_all(self, items: dict[str, str]) -> None:
        raise NotImplementedError

    def get_item(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        used = sum(byte_size(k) + byte_size(v) for k, v in items.items())
        if used > self.quota:
            raise StorageQuotaError(f"Storing {key!r} needs {used} bytes, quota is {self.quota}")
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if items.pop(key, None) is not None:
            self._write_all(items)

    def keys(self) -> list[str]:
        return list(self._read_all())


class MemoryStorage(KeyValueStorage):
    """Storage that lives only as long as the process."""

    def __init__(self, quota: int = STORAGE_QUOTA_BYTES) -> None:
        super().__init__(quota)
        self._items: dict[str, str] = {}

    def _read_all(self) -> dict[str, str]:
        return dict(self._items)

    def _write_all(self, items: dict[str, str]) -> None:
        self._items = dict(items)


class FileStorage(KeyValueStorage):
    """Storage kept as one JSON object file on this device."""

    def __init__(self, path: Path, quota: int = STORAGE_QUOTA_BYTES) -> None:
        super().__init__(quota)
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not has_content(self.path):
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            # Unreadable file is an empty storage; next write replaces it.
            return {}
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, items: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Write beside the target and swap, so a crash never leaves a partial file
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(items, indent=2, ensure_ascii=False), encoding="utf-8")
        tmp_path.replace(self.path)


_entry_list = TypeAdapter(list[VideoEntry])


@dataclass
class LoadResult:
    """Outcome of reading the stored gallery list.

    Both fields None means nothing was stored.
    """
    entries: list[VideoEntry] | None = None
    error: CorruptDataError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class GalleryPersistence:
    """Reads and writes the gallery list under a fixed storage key."""

    def __init__(self, storage: KeyValueStorage, key: str = STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key

    def read(self) -> LoadResult:
        raw = self.storage.get_item(self.key)
        if raw is None:
            return LoadResult()
        try:
            return LoadResult(entries=_entry_list.validate_json(raw))
        except ValidationError as e:
            error = CorruptDataError(
                f"Stored value under {self.key!r} is not a gallery list ({e.error_count()} errors)"
            )
            return LoadResult(error=error)

    def load(self) -> list[VideoEntry] | None:
        """Stored entries, or None when nothing usable is stored."""
        return self.read().entries

    def save(self, entries: list[VideoEntry]) -> None:
        raw = _entry_list.dump_json(list(entries), by_alias=True, exclude_none=True)
        self.storage.set_item(self.key, raw.decode("utf-8"))

    def clear(self) -> None:
        self.storage.remove_item(self.key)
