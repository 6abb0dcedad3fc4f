from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class IntegrityRecord:
    url: str
    sha256: str

    def to_dict(self) -> Dict[str, str]:
        return {"url": self.url, "sha256": self.sha256}
