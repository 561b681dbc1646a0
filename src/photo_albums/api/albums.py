"""Album API endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, HTTPException, Path, Request, status

from photo_albums.api.models import AlbumResponse
from photo_albums.domain.errors import PhotoServiceError, UpstreamError

if TYPE_CHECKING:
    from photo_albums.containers import AppContainer

_logger = logging.getLogger(__name__)


async def get_album(
    album_id: Annotated[int, Path(gt=0)], request: Request
) -> AlbumResponse:
    """Return an album with the photos fetched from the photo service."""
    container: AppContainer = request.app.state.container
    try:
        album = await container.album_service.get_album(album_id)
    except UpstreamError as exc:
        if exc.is_not_found:
            _logger.warning("Album %s not found upstream", album_id)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Album not found"
            ) from exc
        _logger.exception("Photo service call failed", extra={"album_id": album_id})
        raise _server_error() from exc
    except PhotoServiceError as exc:
        _logger.exception("Photo service call failed", extra={"album_id": album_id})
        raise _server_error() from exc
    return AlbumResponse.from_album(album)


def _server_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Photo service call failed",
    )


router = APIRouter(prefix="/api", tags=["albums"])
router.add_api_route(
    "/albums/{album_id}",
    get_album,
    methods=["GET"],
    response_model=AlbumResponse,
)
