"""Request helpers shared by the API routers."""
from __future__ import annotations

import json
from typing import Type, TypeVar

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from webplayer.repositories.json_storage import Storage

ModelT = TypeVar("ModelT", bound=BaseModel)


class RequestDecodeError(Exception):
    """Raised when a request body is not a valid document."""


def get_storage(request: Request) -> Storage:
    storage = getattr(getattr(request.app, "state", None), "storage", None)
    if storage is None:
        raise RuntimeError("Storage not configured")
    return storage


async def decode_body(request: Request, model: Type[ModelT]) -> ModelT:
    raw = await request.body()
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise RequestDecodeError(str(exc)) from exc
    # a null body decodes to an empty document
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise RequestDecodeError(f"expected a JSON object, got {type(payload).__name__}")
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise RequestDecodeError(str(exc)) from exc


def error_response(exc: Exception, status_code: int) -> JSONResponse:
    return JSONResponse({"error": str(exc)}, status_code=status_code)


def ok_response(verb: str) -> JSONResponse:
    return JSONResponse({"ok": verb})
