from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from retromediaindex.core.models import AssetTarget, GameFile
from retromediaindex.core.paths import DirNormalizer, clean_abs_dir, lookup_key


class GameLookupIndex:
    """Maps ``{game dir}/{name}`` keys to the games media folders can belong to.

    Every game file registers two keys sharing its directory: one for the file's
    basename and one for the game's title. Colliding keys are overwritten by the
    game registered last.
    """

    def __init__(self, normalize_dir: DirNormalizer = clean_abs_dir) -> None:
        self._normalize_dir = normalize_dir
        self._games: dict[str, AssetTarget] = {}

    @classmethod
    def build(
        cls,
        game_files: Mapping[str, GameFile] | Iterable[GameFile],
        normalize_dir: DirNormalizer = clean_abs_dir,
    ) -> GameLookupIndex:
        index = cls(normalize_dir=normalize_dir)
        entries = game_files.values() if isinstance(game_files, Mapping) else game_files
        for game_file in entries:
            index.register(game_file.path, game_file.game)
        return index

    def register(self, game_path: str | Path, game: AssetTarget) -> None:
        path = Path(game_path)
        directory = self._normalize_dir(str(path))
        self._games[lookup_key(directory, path.stem)] = game
        # The media folder may be named after the title instead of the file.
        self._games[lookup_key(directory, game.title)] = game

    def resolve(self, key: str) -> AssetTarget | None:
        return self._games.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._games

    def __len__(self) -> int:
        return len(self._games)
