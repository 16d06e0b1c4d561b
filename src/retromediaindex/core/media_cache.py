"""Persistent record of scanned media directories.

The cache lets a refresh skip walking media folders it has already seen. It is
a single JSON document::

    {"version": "1.0",
     "media_dirs": [{"dir_path": ..., "last_scan_time": ..., "files": [...]}]}

Loading never fails: a missing, unreadable, malformed or outdated file yields an
empty cache. Saving never raises either; failures are logged and reported
through the return value.
"""

from __future__ import annotations

from datetime import datetime
import json
import logging
import os
from pathlib import Path
import tempfile

from pydantic import BaseModel, Field, StrictInt, ValidationError

from retromediaindex.config.settings import CACHE_VERSION

logger = logging.getLogger(__name__)


class FileRecord(BaseModel):
    """One classified media file and the key that linked it to a game."""

    file_path: str
    asset_type: str
    mtime: StrictInt = 0
    size: StrictInt = 0
    game_key: str


class MediaDirectoryRecord(BaseModel):
    """Result of the last full scan of one media directory."""

    dir_path: str
    last_scan_time: str = ""
    files: list[FileRecord] = Field(default_factory=list)

    @property
    def scanned_at(self) -> datetime | None:
        try:
            return datetime.fromisoformat(self.last_scan_time)
        except ValueError:
            return None


class MediaCache(BaseModel):
    version: str = CACHE_VERSION
    media_dirs: list[MediaDirectoryRecord] = Field(default_factory=list)

    @classmethod
    def fresh(cls) -> MediaCache:
        return cls(version=CACHE_VERSION, media_dirs=[])


def load_media_cache(path: Path) -> MediaCache:
    if not path.exists():
        logger.info("No existing media cache found at %s, will create a new one.", path)
        return MediaCache.fresh()
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError, RecursionError) as exc:
        logger.warning("Invalid media cache format in %s, will reset: %s", path, exc)
        return MediaCache.fresh()

    if not isinstance(payload, dict):
        logger.warning("Invalid media cache format in %s, will reset.", path)
        return MediaCache.fresh()
    version = payload.get("version")
    if version != CACHE_VERSION:
        logger.warning("Media cache version mismatch (%r, expected %r), resetting.", version, CACHE_VERSION)
        return MediaCache.fresh()

    try:
        cache = MediaCache.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Invalid media cache content in %s, will reset: %s", path, exc)
        return MediaCache.fresh()
    cache.media_dirs = _unique_directories(cache.media_dirs)
    return cache


def save_media_cache(path: Path, cache: MediaCache) -> bool:
    """Write the cache through a temporary file so readers never see a partial file."""
    temp_path: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=".media_cache_", suffix=".tmp")
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(cache.model_dump(mode="json"), handle, indent=4, ensure_ascii=False)
        os.replace(temp_path, path)
        temp_path = None
    except (OSError, ValueError) as exc:
        # ValueError covers unencodable path strings and pydantic serialization errors.
        logger.warning("Failed to save media cache to %s: %s", path, exc)
        return False
    finally:
        if temp_path is not None and os.path.exists(temp_path):
            try:
                os.remove(temp_path)
            except OSError:
                logger.debug("Could not remove temporary cache file %s", temp_path)
    logger.debug("Saved media cache to %s (%d directories)", path, len(cache.media_dirs))
    return True


def find_directory(cache: MediaCache, dir_path: str) -> MediaDirectoryRecord | None:
    for record in cache.media_dirs:
        if record.dir_path == dir_path:
            return record
    return None


def _unique_directories(records: list[MediaDirectoryRecord]) -> list[MediaDirectoryRecord]:
    seen: set[str] = set()
    unique: list[MediaDirectoryRecord] = []
    for record in records:
        if record.dir_path in seen:
            continue
        seen.add(record.dir_path)
        unique.append(record)
    return unique
