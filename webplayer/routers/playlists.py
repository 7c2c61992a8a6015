from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from webplayer.core.utils import new_id, unix_now
from webplayer.domain.models import Playlist
from webplayer.repositories.json_storage import PersistenceError
from webplayer.routers.deps import (
    RequestDecodeError,
    decode_body,
    error_response,
    get_storage,
    ok_response,
)

router = APIRouter(prefix="/api", tags=["playlists"])
logger = logging.getLogger(__name__)


@router.get("/data")
def read_data(request: Request):
    return get_storage(request).read_all().to_json()


@router.get("/playlists")
def list_playlists(request: Request):
    return [p.to_json() for p in get_storage(request).list_playlists()]


@router.post("/playlists")
async def save_playlist(request: Request):
    try:
        playlist = await decode_body(request, Playlist)
    except RequestDecodeError as exc:
        return error_response(exc, 400)
    if not playlist.id:
        playlist.id = new_id()
    if playlist.created_at == 0:
        playlist.created_at = unix_now()
    try:
        await run_in_threadpool(get_storage(request).upsert_playlist, playlist)
    except PersistenceError as exc:
        return error_response(exc, 500)
    logger.debug("Saved playlist %s (%d channels)", playlist.id, len(playlist.channels))
    return JSONResponse(playlist.to_json())


# Only the last path segment is the id, so nested paths still resolve.
@router.delete("/playlists/{playlist_path:path}")
def delete_playlist(playlist_path: str, request: Request):
    playlist_id = playlist_path.rstrip("/").rsplit("/", 1)[-1]
    try:
        get_storage(request).delete_playlist(playlist_id)
    except PersistenceError as exc:
        return error_response(exc, 500)
    return ok_response("deleted")
