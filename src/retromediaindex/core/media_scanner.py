from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
import logging
import os
from pathlib import Path
import stat
from typing import Callable

from retromediaindex.config.settings import MEDIA_SUBDIRS, default_cache_path
from retromediaindex.core.asset_types import canonical_name, detect_asset_type, from_canonical_name
from retromediaindex.core.game_lookup import GameLookupIndex
from retromediaindex.core.media_cache import (
    FileRecord,
    MediaCache,
    MediaDirectoryRecord,
    find_directory,
    load_media_cache,
    save_media_cache,
)
from retromediaindex.core.models import AssetType, ScanContext
from retromediaindex.core.paths import DirNormalizer, clean_abs_dir

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


@dataclass(slots=True)
class ScanResult:
    cache: MediaCache
    scanned_dirs: list[str] = field(default_factory=list)
    replayed_dirs: list[str] = field(default_factory=list)
    attached: int = 0
    cache_saved: bool = False
    warnings: list[str] = field(default_factory=list)


@dataclass(slots=True)
class _WalkOutcome:
    records: list[FileRecord] = field(default_factory=list)
    attached: int = 0
    errors: list[str] = field(default_factory=list)


class MediaScanner:
    """Links files under each collection's media folders to the games they belong to.

    A media directory seen in a previous run is replayed from the cache without
    touching the filesystem; only unknown directories are walked. Cached
    directories are trusted as-is, so files added or removed since their scan
    stay invisible until ``force_rescan`` is used.
    """

    def __init__(
        self,
        cache_path: Path | None = None,
        media_subdirs: tuple[str, ...] = MEDIA_SUBDIRS,
        normalize_dir: DirNormalizer = clean_abs_dir,
    ) -> None:
        self.cache_path = cache_path if cache_path is not None else default_cache_path()
        self.media_subdirs = media_subdirs
        self._normalize_dir = normalize_dir

    def run(
        self,
        context: ScanContext,
        progress_callback: ProgressCallback | None = None,
        force_rescan: bool = False,
    ) -> ScanResult:
        cache = load_media_cache(self.cache_path)
        index = GameLookupIndex.build(context.game_files, normalize_dir=self._normalize_dir)
        result = ScanResult(cache=cache)
        visited: list[MediaDirectoryRecord] = []
        visited_paths: set[str] = set()

        for dir_base in context.game_dirs:
            base = dir_base.rstrip("/\\") or dir_base
            for media_subdir in self.media_subdirs:
                media_dir = base + media_subdir
                if media_dir in visited_paths or not os.path.isdir(media_dir):
                    continue
                visited_paths.add(media_dir)

                cached = None if force_rescan else find_directory(cache, media_dir)
                if cached is not None:
                    self._emit(progress_callback, f"[media] Using cached media index for {media_dir}")
                    result.attached += self._replay(cached, index)
                    result.replayed_dirs.append(media_dir)
                    visited.append(cached)
                    continue

                self._emit(progress_callback, f"[media] Scanning {media_dir}")
                outcome = self._scan_directory(base, media_subdir, index)
                result.attached += outcome.attached
                result.scanned_dirs.append(media_dir)
                if outcome.errors:
                    # Incomplete listings are not cached; the directory is rescanned next run.
                    result.warnings.append(
                        f"Media directory {media_dir} was only partially readable; it will be rescanned next run."
                    )
                    logger.warning("Skipped %d unreadable entries under %s", len(outcome.errors), media_dir)
                    continue
                visited.append(
                    MediaDirectoryRecord(
                        dir_path=media_dir,
                        last_scan_time=datetime.now().isoformat(timespec="seconds"),
                        files=outcome.records,
                    )
                )

        untouched = [record for record in cache.media_dirs if record.dir_path not in visited_paths]
        cache.media_dirs = visited + untouched
        result.cache_saved = save_media_cache(self.cache_path, cache)
        if not result.cache_saved:
            result.warnings.append(f"Media cache could not be saved to {self.cache_path}.")
        self._emit(
            progress_callback,
            f"[media] Attached {result.attached} assets "
            f"({len(result.scanned_dirs)} scanned, {len(result.replayed_dirs)} from cache).",
        )
        return result

    @staticmethod
    def _replay(record: MediaDirectoryRecord, index: GameLookupIndex) -> int:
        attached = 0
        for file_record in record.files:
            game = index.resolve(file_record.game_key)
            if game is None:
                continue
            asset_type = from_canonical_name(file_record.asset_type)
            if asset_type == AssetType.UNKNOWN:
                continue
            if game.append_asset(asset_type, file_record.file_path):
                attached += 1
        return attached

    def _scan_directory(self, base: str, media_subdir: str, index: GameLookupIndex) -> _WalkOutcome:
        outcome = _WalkOutcome()
        media_dir = base + media_subdir
        # The normalizer maps a file to its directory, so probe with a placeholder entry.
        media_prefix = self._normalize_dir(os.path.join(media_dir, "_")).rstrip("/")
        base_key = self._normalize_dir(os.path.join(base, "_")).rstrip("/")

        for file_path, file_stat in _walk_files(media_dir, outcome.errors):
            game_key = self._game_key(file_path, media_prefix, base_key)
            game = index.resolve(game_key)
            if game is None:
                continue
            stem, ext = os.path.splitext(os.path.basename(file_path))
            asset_type = detect_asset_type(stem, ext)
            if asset_type == AssetType.UNKNOWN:
                continue
            outcome.records.append(
                FileRecord(
                    file_path=file_path,
                    asset_type=canonical_name(asset_type),
                    mtime=int(file_stat.st_mtime),
                    size=file_stat.st_size,
                    game_key=game_key,
                )
            )
            if game.append_asset(asset_type, file_path):
                outcome.attached += 1
        return outcome

    def _game_key(self, file_path: str, media_prefix: str, base_key: str) -> str:
        directory = self._normalize_dir(file_path)
        if directory == media_prefix or directory.startswith(media_prefix + "/"):
            return base_key + directory[len(media_prefix):]
        return directory

    @staticmethod
    def _emit(callback: ProgressCallback | None, message: str) -> None:
        logger.debug(message)
        if callback is not None:
            callback(message)


def refresh_media(
    context: ScanContext,
    cache_path: Path | None = None,
    progress_callback: ProgressCallback | None = None,
    force_rescan: bool = False,
) -> ScanResult:
    return MediaScanner(cache_path=cache_path).run(
        context,
        progress_callback=progress_callback,
        force_rescan=force_rescan,
    )


def _walk_files(root: str, errors: list[str]) -> Iterator[tuple[str, os.stat_result]]:
    """Yield regular files below ``root`` in directory order, following symlinks once."""
    seen_dirs: set[str] = set()

    def _on_error(exc: OSError) -> None:
        errors.append(str(exc.filename or root))
        logger.debug("Cannot read %s: %s", exc.filename, exc)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error, followlinks=True):
        real_dir = os.path.realpath(dirpath)
        if real_dir in seen_dirs:
            dirnames[:] = []
            continue
        seen_dirs.add(real_dir)
        for name in filenames:
            file_path = os.path.join(dirpath, name)
            if not _is_encodable(file_path):
                # Undecodable names cannot be stored in the JSON cache.
                logger.debug("Skipping file with undecodable name %r", file_path)
                continue
            try:
                file_stat = os.stat(file_path)
            except OSError:
                # Dangling symlinks and files removed mid-scan.
                continue
            if stat.S_ISREG(file_stat.st_mode):
                yield file_path, file_stat


def _is_encodable(path: str) -> bool:
    try:
        path.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
