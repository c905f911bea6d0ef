"""Default locations and limits for craftgallery."""

import os
from pathlib import Path

# Key under which the gallery list is stored in local storage
STORAGE_KEY = "kidsCraftGallery.items"

STORAGE_FILENAME = "local_storage.json"
MEDIA_DIRNAME = "videos"

# Typical per-origin localStorage quota
STORAGE_QUOTA_BYTES = 5 * 1024 * 1024

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


def default_data_dir() -> Path:
    """Data directory from CRAFTGALLERY_DATA_DIR, else ./data."""
    return Path(os.environ.get("CRAFTGALLERY_DATA_DIR", "data"))


def storage_path(data_dir: Path) -> Path:
    return data_dir / STORAGE_FILENAME


def media_dir(data_dir: Path) -> Path:
    return data_dir / MEDIA_DIRNAME
