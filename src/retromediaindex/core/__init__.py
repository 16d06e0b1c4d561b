"""Media discovery and caching engine for RetroMediaIndex."""

from retromediaindex.core.asset_types import allowed_extensions, canonical_name, classify, detect_asset_type
from retromediaindex.core.game_lookup import GameLookupIndex
from retromediaindex.core.media_cache import (
    FileRecord,
    MediaCache,
    MediaDirectoryRecord,
    find_directory,
    load_media_cache,
    save_media_cache,
)
from retromediaindex.core.media_scanner import MediaScanner, ScanResult, refresh_media
from retromediaindex.core.models import Asset, AssetType, Game, GameFile, ScanContext

__all__ = [
    "Asset",
    "AssetType",
    "FileRecord",
    "Game",
    "GameFile",
    "GameLookupIndex",
    "MediaCache",
    "MediaDirectoryRecord",
    "MediaScanner",
    "ScanContext",
    "ScanResult",
    "allowed_extensions",
    "canonical_name",
    "classify",
    "detect_asset_type",
    "find_directory",
    "load_media_cache",
    "refresh_media",
    "save_media_cache",
]
