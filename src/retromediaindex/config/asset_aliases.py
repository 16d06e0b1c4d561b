from __future__ import annotations

from retromediaindex.core.models import AssetType

# Filename tokens recognized as asset types. Lookup is case-sensitive, so common
# spellings are listed explicitly. Declaration order is also the order in which
# prefix matches are tried (e.g. "logo-alt" -> "logo").
ASSET_ALIASES: tuple[tuple[str, AssetType], ...] = (
    ("boxfront", AssetType.BOX_FRONT),
    ("boxFront", AssetType.BOX_FRONT),
    ("box_front", AssetType.BOX_FRONT),
    ("boxart2D", AssetType.BOX_FRONT),
    ("boxart2d", AssetType.BOX_FRONT),
    ("boxback", AssetType.BOX_BACK),
    ("boxBack", AssetType.BOX_BACK),
    ("box_back", AssetType.BOX_BACK),
    ("boxspine", AssetType.BOX_SPINE),
    ("boxSpine", AssetType.BOX_SPINE),
    ("box_spine", AssetType.BOX_SPINE),
    ("boxside", AssetType.BOX_SPINE),
    ("boxSide", AssetType.BOX_SPINE),
    ("box_side", AssetType.BOX_SPINE),
    ("boxfull", AssetType.BOX_FULL),
    ("boxFull", AssetType.BOX_FULL),
    ("box_full", AssetType.BOX_FULL),
    ("box", AssetType.BOX_FULL),
    ("cartridge", AssetType.CARTRIDGE),
    ("disc", AssetType.CARTRIDGE),
    ("cart", AssetType.CARTRIDGE),
    ("logo", AssetType.LOGO),
    ("wheel", AssetType.LOGO),
    ("marquee", AssetType.ARCADE_MARQUEE),
    ("bezel", AssetType.ARCADE_BEZEL),
    ("screenmarquee", AssetType.ARCADE_BEZEL),
    ("border", AssetType.ARCADE_BEZEL),
    ("panel", AssetType.ARCADE_PANEL),
    ("cabinetleft", AssetType.ARCADE_CABINET_L),
    ("cabinetLeft", AssetType.ARCADE_CABINET_L),
    ("cabinet_left", AssetType.ARCADE_CABINET_L),
    ("cabinetright", AssetType.ARCADE_CABINET_R),
    ("cabinetRight", AssetType.ARCADE_CABINET_R),
    ("cabinet_right", AssetType.ARCADE_CABINET_R),
    ("tile", AssetType.UI_TILE),
    ("banner", AssetType.UI_BANNER),
    ("steam", AssetType.UI_STEAMGRID),
    ("steamgrid", AssetType.UI_STEAMGRID),
    ("grid", AssetType.UI_STEAMGRID),
    ("poster", AssetType.POSTER),
    ("flyer", AssetType.POSTER),
    ("background", AssetType.BACKGROUND),
    ("music", AssetType.MUSIC),
    ("screenshot", AssetType.SCREENSHOT),
    ("screenshots", AssetType.SCREENSHOT),
    ("video", AssetType.VIDEO),
    ("videos", AssetType.VIDEO),
    ("titlescreen", AssetType.TITLESCREEN),
)

IMAGE_EXTENSIONS: frozenset[str] = frozenset({"png", "jpg", "webp", "apng"})
VIDEO_EXTENSIONS: frozenset[str] = frozenset({"webm", "mp4", "avi"})
AUDIO_EXTENSIONS: frozenset[str] = frozenset({"mp3", "ogg", "wav"})

# Asset types not listed here are images.
EXTENSIONS_BY_ASSET_TYPE: dict[AssetType, frozenset[str]] = {
    AssetType.UNKNOWN: frozenset(),
    AssetType.VIDEO: VIDEO_EXTENSIONS,
    AssetType.MUSIC: AUDIO_EXTENSIONS,
}
