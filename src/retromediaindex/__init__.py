"""RetroMediaIndex: per-game media discovery with an incremental scan cache."""

from retromediaindex.core import MediaScanner, ScanContext, refresh_media

__version__ = "0.1.0"

__all__ = ["MediaScanner", "ScanContext", "refresh_media", "__version__"]
