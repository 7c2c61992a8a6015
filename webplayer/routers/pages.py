from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

router = APIRouter(prefix="", tags=["pages"])

# The frontend answers on "/" whatever the method.
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


def _templates(request: Request):
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")


def render_frontend(request: Request) -> HTMLResponse:
    """Render the single-page frontend; also served for paths no route handles."""
    templates = _templates(request)
    settings = request.app.state.settings
    return templates.TemplateResponse(
        request,
        "index.html",
        {"history_limit": settings.history_limit},
        media_type="text/html; charset=utf-8",
    )


@router.api_route("/", methods=ANY_METHOD, response_class=HTMLResponse)
def index(request: Request):
    return render_frontend(request)
