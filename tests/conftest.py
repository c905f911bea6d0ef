"""Pytest fixtures for gallery tests."""

import pytest
from fastapi.testclient import TestClient

from craftgallery.models import VideoEntry
from craftgallery.server import create_app
from craftgallery.session import GallerySession
from craftgallery.storage import GalleryPersistence, MemoryStorage
from craftgallery.store import EntryStore


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def persistence(storage):
    return GalleryPersistence(storage)


@pytest.fixture
def store(persistence):
    return EntryStore.open(persistence)


@pytest.fixture
def session(store):
    return GallerySession(store)


@pytest.fixture
def client(session, tmp_path):
    """Test client for an app serving an empty media directory."""
    media = tmp_path / "videos"
    media.mkdir()
    (media / "paper-crown.mp4").write_bytes(b"\x00\x00\x00\x18ftypmp42")
    return TestClient(create_app(session, media))


@pytest.fixture
def paper_crown():
    return VideoEntry(title="Paper Crown", video_url="videos/paper-crown.mp4", tags=["paper", "kids"])
