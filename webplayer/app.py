"""Application assembly for the WebPlayer HTTP API."""
from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import Response
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from webplayer import __version__
from webplayer.core.config import Settings, get_settings
from webplayer.repositories.json_storage import Storage
from webplayer.routers import history as history_router
from webplayer.routers import pages as pages_router
from webplayer.routers import playlists as playlists_router

logger = logging.getLogger(__name__)

BASE = os.path.dirname(__file__)
WEB = os.path.join(BASE, "web")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """Open CORS headers on every response; pre-flight requests end here with 204."""

    async def dispatch(self, request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        else:
            response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        return response


async def _http_error(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return Response(status_code=405)
    # unrouted paths fall through to the frontend (client-side deep links)
    if exc.status_code == 404:
        return pages_router.render_frontend(request)
    return await http_exception_handler(request, exc)


def create_app(storage: Storage | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the app around ``storage``; one is opened from ``settings`` when omitted."""
    settings = settings or get_settings()
    if storage is None:
        storage = Storage(settings.data_file, history_limit=settings.history_limit)

    app = FastAPI(title="WebPlayer API", version=__version__)
    app.state.settings = settings
    app.state.storage = storage
    app.state.templates = Jinja2Templates(directory=WEB)

    app.add_middleware(PermissiveCORSMiddleware)
    app.add_exception_handler(StarletteHTTPException, _http_error)

    app.include_router(pages_router.router)
    app.include_router(playlists_router.router)
    app.include_router(history_router.router)

    logger.debug("WebPlayer app created with data file %s", storage.path)
    return app
