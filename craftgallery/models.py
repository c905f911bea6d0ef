"""Data models for craftgallery."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .utils import clean_optional


class VideoEntry(BaseModel):
    """One playable video and its metadata.

    Serialized with the camelCase names used in local storage
    (``videoUrl``, ``videoWebmUrl``).
    """
    model_config = ConfigDict(populate_by_name=True)

    title: str
    thumbnail: str | None = None
    video_url: str = Field(alias="videoUrl")
    video_alt_url: str | None = Field(default=None, alias="videoWebmUrl")
    description: str | None = None
    tags: list[str] = Field(default_factory=list)

    def is_acceptable(self) -> bool:
        """Title and video URL are both non-blank."""
        return bool(self.title.strip() and self.video_url.strip())

    def to_storage(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


def parse_tags(text: str) -> list[str]:
    """Split comma-separated tag input, trimming and dropping blanks.

    "slime, , snow,  " -> ["slime", "snow"]
    """
    return [t.strip() for t in text.split(",") if t.strip()]


class EntryForm(BaseModel):
    """Raw input of the add-entry form."""
    title: str = ""
    thumbnail: str = ""
    video_url: str = ""
    video_alt_url: str = ""
    description: str = ""
    tags: str = ""

    def can_save(self) -> bool:
        return bool(self.title.strip() and self.video_url.strip())

    def to_entry(self) -> VideoEntry:
        return VideoEntry(
            title=self.title.strip(),
            thumbnail=clean_optional(self.thumbnail),
            video_url=self.video_url.strip(),
            video_alt_url=clean_optional(self.video_alt_url),
            description=clean_optional(self.description),
            tags=parse_tags(self.tags),
        )


class GallerySnapshot(BaseModel):
    """Exported copy of the gallery list."""
    entries: list[VideoEntry] = Field(default_factory=list)

    def save(self, path: Path) -> None:
        path.write_text(self.model_dump_json(indent=2, by_alias=True, exclude_none=True))

    @classmethod
    def load(cls, path: Path) -> 'GallerySnapshot':
        return cls.model_validate_json(path.read_text())


# Built-in examples; relative URLs resolve against the media directory.
_DEFAULTS = [
    {
        "title": "Paper Crown",
        "thumbnail": "https://images.unsplash.com/photo-1556306535-abccb3b5bebe?q=80&w=600&auto=format&fit=crop",
        "videoUrl": "videos/paper-crown.mp4",
        "tags": ["paper", "crown", "kids"],
    },
    {
        "title": "Glitter Slime",
        "thumbnail": "https://images.unsplash.com/photo-1561322043-1023e0b1f0ef?q=80&w=600&auto=format&fit=crop",
        "videoUrl": "videos/slime-glitter.mp4",
        "tags": ["slime", "glitter"],
    },
    {
        "title": "Cotton Cloud Jar",
        "thumbnail": "https://images.unsplash.com/photo-1519681393784-d120267933ba?q=80&w=600&auto=format&fit=crop",
        "videoUrl": "videos/cloud-jar.mp4",
        "tags": ["jar", "cloud"],
    },
]


def default_entries() -> list[VideoEntry]:
    """Fresh copies of the three built-in entries."""
    return [VideoEntry.model_validate(d) for d in _DEFAULTS]
