from __future__ import annotations

import re
from typing import Iterable, List, Pattern

from errors import AmbiguousAsset, AssetNotFound
from models.release import Asset


def pattern_to_regex(pattern: str) -> Pattern[str]:
    """
    Compile a filename glob where '*' stands for zero or more characters.
    Every other character is literal and the match spans the whole name:
      "eep-macos-*-x64" -> eep\\-macos\\-.*\\-x64  (used with fullmatch)
    """
    parts = [re.escape(part) for part in pattern.split("*")]
    return re.compile(".*".join(parts), re.DOTALL)


def match_asset(pattern: str, assets: Iterable[Asset]) -> Asset:
    """Return the one asset whose name matches `pattern`."""
    regex = pattern_to_regex(pattern)
    assets = list(assets)
    matches: List[Asset] = [a for a in assets if regex.fullmatch(a.name)]

    if not matches:
        raise AssetNotFound(
            f"Asset matching '{pattern}' not found",
            context={"available": ", ".join(a.name for a in assets) or "<none>"},
        )
    if len(matches) > 1:
        raise AmbiguousAsset(
            f"Pattern '{pattern}' matches {len(matches)} assets",
            context={"matches": ", ".join(a.name for a in matches)},
        )

    asset = matches[0]
    if not asset.download_url:
        raise AssetNotFound(f"No download URL found for asset '{asset.name}'")
    return asset
