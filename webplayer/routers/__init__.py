"""
FastAPI routers grouped by resource (pages, playlists, history).

Each module exposes an APIRouter included by ``webplayer.app.create_app``.
"""
