from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

DirNormalizer = Callable[[str], str]


def clean_abs_dir(path: str | Path) -> str:
    """Return the normalized absolute directory containing ``path``.

    Separators become "/" and case is folded on case-insensitive platforms.
    Symlinks are not resolved, so keys stay in the namespace the caller walked.
    """
    parent = os.path.dirname(os.path.abspath(os.fspath(path)))
    return normalize_path(parent)


def normalize_path(path: str | Path) -> str:
    normalized = os.path.normcase(os.path.normpath(os.fspath(path)))
    return normalized.replace("\\", "/")


def lookup_key(directory: str, name: str) -> str:
    # Case-folded like the directory part.
    return directory.rstrip("/") + "/" + os.path.normcase(name)
