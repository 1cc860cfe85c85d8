"""FastAPI application for the tweetclone JSON API."""

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..config import get_database_path, load_settings
from ..db import init_db
from ..errors import StorageUnavailable, ValidationError
from ..models import TweetcloneConfig
from ..shortener import build_shortener
from .routes import messages, statuses, users

log = logging.getLogger(__name__)


def create_app(db_path: Path | None = None, settings: TweetcloneConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Tweetclone",
        description="Micro-blogging JSON API",
        version="0.1.0",
    )

    settings = settings or load_settings()
    app.state.settings = settings
    app.state.db_path = db_path or get_database_path()
    app.state.shorten = build_shortener(settings.shortener)

    init_db(app.state.db_path)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=422, content={"error": "validation_error", "message": str(exc)})

    @app.exception_handler(StorageUnavailable)
    async def storage_error_handler(request: Request, exc: StorageUnavailable):
        log.error("Storage unavailable: %s", exc)
        return JSONResponse(status_code=503, content={"error": "storage_unavailable", "message": str(exc)})

    app.include_router(statuses.router, prefix="/api")
    app.include_router(users.router, prefix="/api")
    app.include_router(messages.router, prefix="/api")

    return app
