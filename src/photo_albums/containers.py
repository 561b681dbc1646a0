"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from photo_albums.adapters.photo_client import (
    HttpxPhotoServiceClient,
    PhotoServiceClient,
)
from photo_albums.config import Settings
from photo_albums.services.albums import AlbumService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    photo_client: PhotoServiceClient
    album_service: AlbumService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    photo_client = HttpxPhotoServiceClient.create(
        base_url=resolved_settings.photos_api_base_url
    )
    album_service = AlbumService(photo_client)

    async def close_resources() -> None:
        await photo_client.close()

    return AppContainer(
        settings=resolved_settings,
        photo_client=photo_client,
        album_service=album_service,
        close_resources=close_resources,
    )
