"""Errors raised when talking to the photo service."""

_NOT_FOUND = 404


class PhotoServiceError(Exception):
    """Base class for photo service failures."""

    def __init__(self, album_id: int, message: str) -> None:
        super().__init__(message)
        self.album_id = album_id


class UpstreamUnavailableError(PhotoServiceError):
    """The photo service could not be reached or timed out."""

    def __init__(self, album_id: int) -> None:
        super().__init__(album_id, f"Photo service unavailable for album {album_id}")


class UpstreamError(PhotoServiceError):
    """The photo service answered with a non-2xx status."""

    def __init__(self, album_id: int, status_code: int) -> None:
        super().__init__(
            album_id,
            f"Photo service returned {status_code} for album {album_id}",
        )
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        return self.status_code == _NOT_FOUND


class BadPayloadError(PhotoServiceError):
    """The photo service body did not match the expected shape."""

    def __init__(self, album_id: int, reason: str) -> None:
        super().__init__(
            album_id,
            f"Unexpected photo service payload for album {album_id}: {reason}",
        )
        self.reason = reason
