from __future__ import annotations
import logging
from typing import Callable

from fastapi import Request
from starlette.requests import ClientDisconnect

from ..config import settings
from ..models import FileLocation, RequestContext
from .content import decode_content
from .guards import require_absent, require_directory_exists, require_exists
from .paths import resolve_location, strip_prefix

log = logging.getLogger(__name__)

Guard = Callable[[FileLocation], None]


def require_by_shape(location: FileLocation) -> None:
    """GET serves statistics for directories and content for files."""
    if location.is_directory_shaped:
        require_directory_exists(location)
    else:
        require_exists(location)


async def _drain(request: Request) -> None:
    try:
        await request.body()
    except ClientDisconnect:
        log.debug("client went away before the body was read: %s", request.url.path)


class Pipeline:
    """
    Request stages for one store operation, used as a FastAPI dependency:
    strip prefix, resolve location, run the guard, then (optionally) check
    the content type and decode the body. The first failing stage raises;
    the resulting RequestContext goes to the endpoint.
    """

    def __init__(self, guard: Guard, *, with_content: bool = False) -> None:
        self.guard = guard
        self.with_content = with_content

    async def __call__(self, request: Request) -> RequestContext:
        try:
            return await self._run(request)
        finally:
            if self.with_content:
                await _drain(request)

    async def _run(self, request: Request) -> RequestContext:
        path = request.url.path
        strip_prefix(settings.path_prefix, path)
        ctx = RequestContext(
            location=resolve_location(
                settings.files_dir,
                settings.path_prefix,
                path,
                settings.content_extension,
            )
        )
        self.guard(ctx.location)
        if self.with_content:
            body = await request.body()
            ctx.content = decode_content(request.headers, body)
        return ctx


CREATE = Pipeline(require_absent, with_content=True)
MODIFY = Pipeline(require_exists, with_content=True)
REMOVE = Pipeline(require_exists)
RETRIEVE = Pipeline(require_by_shape)
