import logging
import os
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .routes.store import router as store_router
from .schemas import ErrorResponse

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    root = os.path.abspath(settings.files_dir)
    os.makedirs(root, exist_ok=True)
    logger.info("dirstore serving %s under prefix %s", root, settings.path_prefix)
    yield


app = FastAPI(title="dirstore", lifespan=lifespan)


def _error(status_code: int, message: str, headers=None) -> JSONResponse:
    body = ErrorResponse(error=message).model_dump(by_alias=True)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


@app.middleware("http")
async def recovery_middleware(request: Request, call_next):
    """
    Outermost boundary: anything the pipeline did not anticipate becomes a
    500 with no other output. The traceback always goes to the log; it only
    reaches the caller when OUTPUT_ERRORS is on.
    """
    try:
        return await call_next(request)
    except Exception as e:
        logger.exception("Unexpected error: %s %s", request.method, request.url.path)
        display = "Internal server error"
        if settings.output_errors:
            display = f"Unexpected error: {e}, in {traceback.format_exc()}"
        return _error(500, display)


# Prefix matching happens in the pipeline so a mismatch is a RoutingError.
app.include_router(store_router)
