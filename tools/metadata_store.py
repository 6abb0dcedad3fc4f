from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union

import utils
from configuration import Configuration as Config
from errors import CorruptMetadata
from loggers.formula_gen_logger import formula_gen_logger as logger


class MetadataStore:
    """
    JSON document holding the resolved version and, per source repository,
    resource name -> {"url": ..., "sha256": ...}:

      {
        "version": "1.4.45",
        "expresslang/eep-releases": {
          "mac-x86-64": {"url": "...", "sha256": "..."}
        }
      }
    """

    def __init__(self, path: Union[str, Path] = Config.metadata_file, *, dry_run: bool = False) -> None:
        self.path = Path(path)
        self.dry_run = dry_run

    def load(self) -> Dict[str, Any]:
        if not self.path.exists():
            logger.info(f"Metadata file {self.path} not found, creating new one...")
            return {}

        try:
            data = utils.read_json_file(self.path)
        except ValueError as e:
            raise CorruptMetadata(str(e), context={"path": self.path}) from e

        if not isinstance(data, dict):
            raise CorruptMetadata(
                f"Metadata file {self.path} must contain a JSON object",
                context={"found": type(data).__name__},
            )
        return data

    def save(self, doc: Dict[str, Any]) -> None:
        content = utils.to_pretty_json(doc)

        if self.dry_run:
            print(f"\n--- {self.path} (DRY RUN) ---")
            print("```json")
            print(content)
            print("```")
            print(f"--- END {self.path} ---\n")
            return

        utils.write_text_atomic(self.path, content + "\n")
        logger.info(f"  Saved: {self.path}")
