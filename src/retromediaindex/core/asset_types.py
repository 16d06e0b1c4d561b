from __future__ import annotations

from retromediaindex.config.asset_aliases import ASSET_ALIASES, EXTENSIONS_BY_ASSET_TYPE, IMAGE_EXTENSIONS
from retromediaindex.core.models import AssetType

_ALIAS_LOOKUP: dict[str, AssetType] = {}
for _alias, _asset_type in ASSET_ALIASES:
    _ALIAS_LOOKUP.setdefault(_alias, _asset_type)

_CANONICAL_LOOKUP: dict[str, AssetType] = {asset_type.value: asset_type for asset_type in AssetType}


def classify(token: str) -> AssetType:
    """Map a filename token to an asset type.

    Exact alias matches win; otherwise the first alias (in table order) that
    prefixes the token is used, so "logo-alt" or "screenshot2" still resolve.
    """
    exact = _ALIAS_LOOKUP.get(token)
    if exact is not None:
        return exact
    for alias, asset_type in ASSET_ALIASES:
        if token.startswith(alias):
            return asset_type
    return AssetType.UNKNOWN


def canonical_name(asset_type: AssetType) -> str:
    return asset_type.value


def from_canonical_name(token: str) -> AssetType:
    """Inverse of canonical_name, tolerant of alias spellings in older caches."""
    asset_type = _CANONICAL_LOOKUP.get(token)
    if asset_type is not None:
        return asset_type
    return classify(token)


def allowed_extensions(asset_type: AssetType) -> frozenset[str]:
    return EXTENSIONS_BY_ASSET_TYPE.get(asset_type, IMAGE_EXTENSIONS)


def detect_asset_type(basename: str, extension: str) -> AssetType:
    """Classify a media file by name, rejecting extensions its type does not allow."""
    asset_type = classify(basename)
    ext = extension.lstrip(".").lower()
    if ext in allowed_extensions(asset_type):
        return asset_type
    return AssetType.UNKNOWN
