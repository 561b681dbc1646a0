"""Pydantic models for album API responses."""

from pydantic import BaseModel, Field

from photo_albums.domain.albums import Album, Photo


class PhotoResponse(BaseModel):
    """Photo payload."""

    id: int
    title: str
    url: str
    thumbnail_url: str = Field(serialization_alias="thumbnailUrl")

    @classmethod
    def from_photo(cls, photo: Photo) -> "PhotoResponse":
        return cls(
            id=photo.id,
            title=photo.title,
            url=photo.url,
            thumbnail_url=photo.thumbnail_url,
        )


class AlbumResponse(BaseModel):
    """Album payload with its photos."""

    album_id: int = Field(serialization_alias="albumId")
    photos: list[PhotoResponse]

    @classmethod
    def from_album(cls, album: Album) -> "AlbumResponse":
        return cls(
            album_id=album.album_id,
            photos=[PhotoResponse.from_photo(photo) for photo in album.photos],
        )
