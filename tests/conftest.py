"""Shared test fixtures."""

import json
from dataclasses import dataclass, field
from pathlib import Path

import httpx
import pytest

from photo_albums.adapters.photo_client import (
    HttpxPhotoServiceClient,
    PhotoServiceClient,
)
from photo_albums.config import Settings
from photo_albums.containers import AppContainer
from photo_albums.domain.albums import Photo
from photo_albums.services.albums import AlbumService

FIXTURES = Path(__file__).parent / "fixtures"
PHOTOS_BASE_URL = "https://photos.test"


def mapping_transport(
    mappings_file: str = "photo-service-mappings.json",
) -> httpx.MockTransport:
    """Replay recorded photo service request/response mappings.

    Requests with no matching mapping get a 404, like an unstubbed mock server.
    """
    mappings = json.loads((FIXTURES / mappings_file).read_text())["mappings"]

    def handler(request: httpx.Request) -> httpx.Response:
        for mapping in mappings:
            expected = mapping["request"]
            if (
                request.method == expected["method"]
                and request.url.path == expected["url"]
            ):
                return _build_response(mapping["response"])
        return httpx.Response(404)

    return httpx.MockTransport(handler)


def _build_response(spec: dict[str, object]) -> httpx.Response:
    status_code = int(spec["status"])
    if "bodyFileName" in spec:
        content = (FIXTURES / str(spec["bodyFileName"])).read_bytes()
        return httpx.Response(
            status_code,
            content=content,
            headers={"Content-Type": "application/json"},
        )
    if "jsonBody" in spec:
        return httpx.Response(status_code, json=spec["jsonBody"])
    if "body" in spec:
        return httpx.Response(status_code, text=str(spec["body"]))
    return httpx.Response(status_code)


@dataclass
class FakePhotoServiceClient(PhotoServiceClient):
    """Fake photo client with in-memory albums."""

    albums: dict[int, list[Photo]] = field(default_factory=dict)
    error: Exception | None = None
    calls: list[int] = field(default_factory=list)

    async def get_photos(self, album_id: int) -> list[Photo]:
        self.calls.append(album_id)
        if self.error is not None:
            raise self.error
        return self.albums.get(album_id, [])


@pytest.fixture
def settings() -> Settings:
    return Settings(photos_api_base_url=PHOTOS_BASE_URL)


@pytest.fixture
def photo_client() -> HttpxPhotoServiceClient:
    return HttpxPhotoServiceClient(
        base_url=PHOTOS_BASE_URL,
        http_client=httpx.AsyncClient(transport=mapping_transport()),
    )


@pytest.fixture
def container(
    settings: Settings, photo_client: HttpxPhotoServiceClient
) -> AppContainer:
    album_service = AlbumService(photo_client)

    async def close_resources() -> None:
        await photo_client.close()

    return AppContainer(
        settings=settings,
        photo_client=photo_client,
        album_service=album_service,
        close_resources=close_resources,
    )
