"""
Configuration helpers for the WebPlayer backend.

Settings are read from environment variables once and cached; the CLI flags
override them when the server is started from the command line.
"""

from dataclasses import dataclass, replace
from functools import lru_cache
import os

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 4001
DEFAULT_DATA_FILE = "webplayer-data.json"
DEFAULT_HISTORY_LIMIT = 50


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    host: str
    port: int
    data_file: str
    history_limit: int
    log_level: str

    def override(self, **changes) -> "Settings":
        """Return a copy with the non-None values of ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    history_limit = _int(os.getenv("WEBPLAYER_HISTORY_LIMIT"), DEFAULT_HISTORY_LIMIT)
    return Settings(
        host=(os.getenv("WEBPLAYER_HOST") or DEFAULT_HOST).strip(),
        port=_int(os.getenv("WEBPLAYER_PORT"), DEFAULT_PORT),
        data_file=os.getenv("WEBPLAYER_DATA") or DEFAULT_DATA_FILE,
        history_limit=history_limit if history_limit > 0 else DEFAULT_HISTORY_LIMIT,
        log_level=(os.getenv("WEBPLAYER_LOG_LEVEL") or "INFO").upper(),
    )
