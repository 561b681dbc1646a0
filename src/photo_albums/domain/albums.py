"""Album domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Photo:
    """A photo record as published by the photo service."""

    id: int
    title: str
    url: str
    thumbnail_url: str


@dataclass(frozen=True)
class Album:
    """An album id paired with its photos, in upstream order."""

    album_id: int
    photos: tuple[Photo, ...]
