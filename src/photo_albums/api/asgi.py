"""ASGI app serving albums from the photo service named by PHOTOS_API_BASE_URL."""

from photo_albums.api.app import create_app
from photo_albums.containers import build_container

app = create_app(build_container())
