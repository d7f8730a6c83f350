from __future__ import annotations

from fastapi import HTTPException


class StoreError(HTTPException):
    """
    Anticipated pipeline failure. Each subclass carries a fixed status code
    and a message that is safe to show to the caller.
    """

    status_code = 500
    message = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(status_code=self.status_code, detail=detail or self.message)


class RoutingError(StoreError):
    status_code = 404
    message = "Not found"


class BadRequest(StoreError):
    status_code = 400
    message = "Bad request"


class UnsupportedMediaType(StoreError):
    status_code = 415
    message = "Bad request, invalid content-type"


class NotFound(StoreError):
    status_code = 404
    message = "File does not exist"


class Conflict(StoreError):
    # Reported as "forbidden" on the wire.
    status_code = 403
    message = "File does exist"
