"""lanwake FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from lanwake import __version__
from lanwake.config import settings
from lanwake.schemas.system import ErrorResponse
from lanwake.services import init_services, shutdown_services

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    setup_logging()
    init_services()
    logger.info("lanwake v%s started — listening on %s:%s", __version__, settings.host, settings.port)
    if settings.source_ip:
        logger.info("Broadcasting from source address %s", settings.source_ip)

    try:
        yield
    finally:
        shutdown_services()
        logger.info("lanwake shutting down")


def setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for noisy in ("uvicorn.access", "asyncio"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def _error_response(status: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    body = ErrorResponse(status=status, message=message)
    return JSONResponse(body.model_dump(), status_code=status, headers=headers)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = str(exc.detail)
    if exc.status_code == 404 and message == "Not Found":
        message = "Resource not found"
    elif exc.status_code == 405 and message == "Method Not Allowed":
        message = f"Invalid method {request.method}, must be GET, POST or DELETE"
    return _error_response(exc.status_code, message, getattr(exc, "headers", None))


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected request body for %s: %s", request.url.path, exc.errors())
    return _error_response(400, "Malformed JSON")


def create_app() -> FastAPI:
    """Application factory."""
    from lanwake.api.routes import api_router

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
        lifespan=_lifespan,
    )

    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    # Mount API routes
    app.include_router(api_router, prefix=settings.api_prefix)

    if settings.static_dir:
        static_dir = Path(settings.static_dir)
        if static_dir.is_dir():
            app.mount("/static", StaticFiles(directory=static_dir), name="static")
            logger.info("Static files mounted from %s", static_dir)
        else:
            logger.warning("Static directory %s not found — not serving /static", static_dir)

    return app


app = create_app()


def run(**kwargs: Any) -> None:
    import uvicorn

    uvicorn.run(
        "lanwake.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        **kwargs,
    )


if __name__ == "__main__":
    run()
