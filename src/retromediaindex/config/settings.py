from __future__ import annotations

import os
from pathlib import Path
import sys

APP_DIRNAME = "retromediaindex"
HOME_ENV_VAR = "RETROMEDIAINDEX_HOME"

CACHE_VERSION = "1.0"
CACHE_FILENAME = "media_cache.json"

# Media folders looked up under every collection root, relative to that root.
MEDIA_SUBDIRS: tuple[str, ...] = ("/media",)


def writable_config_dir(portable: bool = False) -> Path:
    """Directory for files the application writes, created if missing.

    ``$RETROMEDIAINDEX_HOME`` overrides everything; portable mode keeps data
    next to the working directory.
    """
    override = os.environ.get(HOME_ENV_VAR, "").strip()
    if override:
        config_dir = Path(override).expanduser()
    elif portable:
        config_dir = Path.cwd() / "config"
    else:
        config_dir = _platform_config_root() / APP_DIRNAME
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def default_cache_path(portable: bool = False) -> Path:
    return writable_config_dir(portable=portable) / CACHE_FILENAME


def _platform_config_root() -> Path:
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA", "").strip()
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME", "").strip()
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"
