"""Upstream photo service client."""

from dataclasses import dataclass
from typing import Protocol

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from photo_albums.domain.albums import Photo
from photo_albums.domain.errors import (
    BadPayloadError,
    UpstreamError,
    UpstreamUnavailableError,
)


class PhotoServiceClient(Protocol):
    """Interface for photo service interactions."""

    async def get_photos(self, album_id: int) -> list[Photo]:
        """Return the photos of an album in upstream order."""


class _UpstreamPhoto(BaseModel):
    model_config = ConfigDict(strict=True)

    id: int
    title: str
    url: str
    thumbnail_url: str = Field(alias="thumbnailUrl")


_PHOTO_LIST = TypeAdapter(list[_UpstreamPhoto])


@dataclass
class HttpxPhotoServiceClient(PhotoServiceClient):
    """HTTPX-backed photo service client.

    Makes a single attempt per call and relies on the transport's default
    timeout.
    """

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxPhotoServiceClient":
        """Create a photo service client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient())

    async def get_photos(self, album_id: int) -> list[Photo]:
        """Fetch the photos of an album."""
        url = f"{self.base_url}/albums/{album_id}/photos"
        try:
            response = await self.http_client.get(url)
        except httpx.DecodingError as exc:
            raise BadPayloadError(album_id, "body could not be decoded") from exc
        except httpx.TransportError as exc:
            raise UpstreamUnavailableError(album_id) from exc
        if not response.is_success:
            raise UpstreamError(album_id, response.status_code)
        try:
            payload = response.json()
        except ValueError as exc:
            raise BadPayloadError(album_id, "body is not valid JSON") from exc
        try:
            records = _PHOTO_LIST.validate_python(payload)
        except ValidationError as exc:
            reason = f"{exc.error_count()} invalid field(s)"
            raise BadPayloadError(album_id, reason) from exc
        return [
            Photo(
                id=record.id,
                title=record.title,
                url=record.url,
                thumbnail_url=record.thumbnail_url,
            )
            for record in records
        ]

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
