"""Album lookups backed by the photo service."""

import logging
from dataclasses import dataclass

from photo_albums.adapters.photo_client import PhotoServiceClient
from photo_albums.domain.albums import Album

_logger = logging.getLogger(__name__)


@dataclass
class AlbumService:
    """Application service pairing an album id with its photos."""

    photo_client: PhotoServiceClient

    async def get_album(self, album_id: int) -> Album:
        """Fetch an album's photos and wrap them with the album id.

        Photo service errors propagate to the caller unchanged.
        """
        photos = await self.photo_client.get_photos(album_id)
        _logger.info("Fetched album %s with %s photo(s)", album_id, len(photos))
        return Album(album_id=album_id, photos=tuple(photos))
