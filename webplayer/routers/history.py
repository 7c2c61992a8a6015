from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from webplayer.core.utils import new_id, unix_now
from webplayer.domain.models import Channel
from webplayer.repositories.json_storage import PersistenceError
from webplayer.routers.deps import (
    RequestDecodeError,
    decode_body,
    error_response,
    get_storage,
    ok_response,
)

router = APIRouter(prefix="/api/history", tags=["history"])


@router.get("")
def list_history(request: Request):
    return [ch.to_json() for ch in get_storage(request).list_history()]


@router.post("")
async def record_play(request: Request):
    try:
        channel = await decode_body(request, Channel)
    except RequestDecodeError as exc:
        return error_response(exc, 400)
    if not channel.id:
        channel.id = new_id()
    # client timestamps are ignored; the play time is the server's
    channel.added_at = unix_now()
    try:
        await run_in_threadpool(get_storage(request).record_history, channel)
    except PersistenceError as exc:
        return error_response(exc, 500)
    return JSONResponse(channel.to_json())


@router.delete("")
def clear_history(request: Request):
    try:
        get_storage(request).clear_history()
    except PersistenceError as exc:
        return error_response(exc, 500)
    return ok_response("cleared")
