from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class Asset:
    name: str
    download_url: str

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Asset":
        return cls(
            name=str(payload.get("name") or ""),
            download_url=str(payload.get("browser_download_url") or ""),
        )


@dataclass(frozen=True)
class Release:
    repository: str
    tag: str
    assets: List[Asset] = field(default_factory=list)

    @classmethod
    def from_api(cls, repository: str, payload: Dict[str, Any]) -> "Release":
        """
        Build a Release from a GitHub REST release object:
          {"tag_name": "v1.4.45", "assets": [{"name": ..., "browser_download_url": ...}, ...]}
        """
        assets = [Asset.from_api(a) for a in (payload.get("assets") or []) if isinstance(a, dict)]
        return cls(
            repository=repository,
            tag=str(payload.get("tag_name") or ""),
            assets=assets,
        )

    @property
    def asset_names(self) -> List[str]:
        return [a.name for a in self.assets]
