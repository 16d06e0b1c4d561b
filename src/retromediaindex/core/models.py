from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol


class AssetType(str, Enum):
    BOX_FRONT = "box_front"
    BOX_BACK = "box_back"
    BOX_SPINE = "box_spine"
    BOX_FULL = "box_full"
    CARTRIDGE = "cartridge"
    LOGO = "logo"
    ARCADE_MARQUEE = "marquee"
    ARCADE_BEZEL = "bezel"
    ARCADE_PANEL = "panel"
    ARCADE_CABINET_L = "cabinet_left"
    ARCADE_CABINET_R = "cabinet_right"
    UI_TILE = "tile"
    UI_BANNER = "banner"
    UI_STEAMGRID = "steamgrid"
    POSTER = "poster"
    BACKGROUND = "background"
    MUSIC = "music"
    SCREENSHOT = "screenshot"
    VIDEO = "video"
    TITLESCREEN = "titlescreen"
    UNKNOWN = "unknown"


class AssetTarget(Protocol):
    """Anything media files can be attached to."""

    title: str

    def append_asset(self, asset_type: AssetType, file_path: str | Path) -> bool:
        ...


@dataclass(slots=True)
class Asset:
    asset_type: AssetType
    file_path: Path


@dataclass(slots=True, eq=False)
class Game:
    title: str
    assets: list[Asset] = field(default_factory=list)

    def append_asset(self, asset_type: AssetType, file_path: str | Path) -> bool:
        """Attach a media file; attaching the same type and path twice is a no-op.

        Returns True when the asset was added.
        """
        path = Path(file_path)
        for asset in self.assets:
            if asset.asset_type == asset_type and asset.file_path == path:
                return False
        self.assets.append(Asset(asset_type=asset_type, file_path=path))
        return True

    def assets_of(self, asset_type: AssetType) -> list[Path]:
        return [asset.file_path for asset in self.assets if asset.asset_type == asset_type]


@dataclass(slots=True)
class GameFile:
    path: Path
    game: AssetTarget


@dataclass(slots=True)
class ScanContext:
    """Input of one media refresh: every known game file and the collection roots."""

    game_files: dict[str, GameFile] = field(default_factory=dict)
    game_dirs: list[str] = field(default_factory=list)

    def add_game_file(self, game_file: GameFile) -> None:
        self.game_files[str(game_file.path)] = game_file
