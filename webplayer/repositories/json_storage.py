"""
JSON-file document store.

The whole Store lives in memory and is rewritten to disk after every mutation.
A reader/writer lock lets concurrent reads proceed while mutations (including
their disk write) run exclusively.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List

from pydantic import ValidationError

from webplayer.core.config import DEFAULT_HISTORY_LIMIT
from webplayer.core.locks import ReadWriteLock
from webplayer.domain.models import Channel, Playlist, Store

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Raised when the document could not be written to disk."""


class Storage:
    """Concurrency-safe owner of the Store document."""

    def __init__(self, path: str | os.PathLike, history_limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        self._path = Path(path)
        self._history_limit = history_limit
        self._lock = ReadWriteLock()
        self._data = self._load()

    @property
    def path(self) -> Path:
        return self._path

    # -------------------------- reads --------------------------
    def read_all(self) -> Store:
        with self._lock.read():
            return self._data.model_copy(deep=True)

    def list_playlists(self) -> List[Playlist]:
        with self._lock.read():
            return [p.model_copy(deep=True) for p in self._data.playlists]

    def list_history(self) -> List[Channel]:
        with self._lock.read():
            return [ch.model_copy() for ch in self._data.history]

    # -------------------------- playlists --------------------------
    def upsert_playlist(self, playlist: Playlist) -> None:
        with self._lock.write():
            playlists = self._data.playlists
            for idx, existing in enumerate(playlists):
                if existing.id == playlist.id:
                    playlists[idx] = playlist
                    break
            else:
                playlists.append(playlist)
            self._save()

    def delete_playlist(self, playlist_id: str) -> None:
        with self._lock.write():
            self._data.playlists = [p for p in self._data.playlists if p.id != playlist_id]
            self._save()

    # -------------------------- history --------------------------
    def record_history(self, channel: Channel) -> None:
        with self._lock.write():
            history = [h for h in self._data.history if h.url != channel.url]
            history.insert(0, channel)
            self._data.history = history[: self._history_limit]
            self._save()

    def clear_history(self) -> None:
        with self._lock.write():
            self._data.history = []
            self._save()

    # -------------------------- file --------------------------
    def _load(self) -> Store:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("Data file %s not found; starting with an empty store", self._path)
            return Store()
        except OSError as exc:
            logger.warning("Could not read %s (%s); starting with an empty store", self._path, exc)
            return Store()
        try:
            return Store.model_validate(json.loads(raw))
        except (ValueError, ValidationError) as exc:
            logger.warning("Could not parse %s (%s); starting with an empty store", self._path, exc)
            return Store()

    def _save(self) -> None:
        """Replace the file with the current document. Caller holds the write lock."""
        text = json.dumps(self._data.to_json(), ensure_ascii=False, indent=2)
        directory = self._path.parent
        tmp_name = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", suffix=".tmp", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, self._path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.error("Failed to persist %s: %s", self._path, exc)
            raise PersistenceError(str(exc)) from exc
