from __future__ import annotations

from collections.abc import Iterable
import logging
from pathlib import Path

from retromediaindex.core.models import Game, GameFile, ScanContext

logger = logging.getLogger(__name__)

ROM_EXTENSIONS: set[str] = {
    ".zip",
    ".7z",
    ".rar",
    ".chd",
    ".cue",
    ".iso",
    ".bin",
    ".img",
    ".mdf",
    ".pbp",
    ".nes",
    ".unf",
    ".sfc",
    ".smc",
    ".fig",
    ".gba",
    ".gb",
    ".gbc",
    ".nds",
    ".3ds",
    ".n64",
    ".z64",
    ".v64",
    ".sms",
    ".gg",
    ".gen",
    ".md",
    ".32x",
    ".a26",
    ".a78",
    ".pce",
    ".sg",
    ".ngp",
    ".ngc",
    ".ws",
    ".wsc",
    ".lnx",
    ".m3u",
    ".rom",
}


def build_scan_context(game_dirs: Iterable[Path], extensions: set[str] | None = None) -> ScanContext:
    """Treat every ROM file directly inside each directory as a game titled after its file name."""
    allowed = extensions if extensions is not None else ROM_EXTENSIONS
    context = ScanContext()
    for game_dir in game_dirs:
        root = game_dir.expanduser().absolute()
        if not root.is_dir():
            logger.warning("Skipping missing game directory %s", root)
            continue
        context.game_dirs.append(str(root))
        for rom_path in sorted(root.iterdir()):
            if not rom_path.is_file() or rom_path.suffix.lower() not in allowed:
                continue
            context.add_game_file(GameFile(path=rom_path, game=Game(title=rom_path.stem)))
    return context


def games_of(context: ScanContext) -> list[Game]:
    """Distinct games of a context, in game-file order."""
    games: list[Game] = []
    seen: set[int] = set()
    for game_file in context.game_files.values():
        game = game_file.game
        if id(game) in seen or not isinstance(game, Game):
            continue
        seen.add(id(game))
        games.append(game)
    return games
