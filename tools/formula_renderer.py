"""Fill a formula template with the resolved version and release metadata.

Placeholders use string.Template syntax. Besides plain names such as
``${version}``, a braced placeholder may be a dotted path into the nested
metadata, e.g. ``${expresslang/eep-releases.mac-x86-64.sha256}``. Repository
and resource names may themselves contain dots; the longest key that exists
wins at each level. ``$$`` renders a literal dollar sign.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from string import Template
from typing import Any, Dict, Iterator, List, Union

import utils
from errors import TemplateError, TemplateNotFound
from loggers.formula_gen_logger import formula_gen_logger as logger


class FormulaTemplate(Template):
    braceidpattern = r"[A-Za-z0-9_][A-Za-z0-9_./-]*"


class _PathLookup(Mapping):
    def __init__(self, context: Dict[str, Any]) -> None:
        self._context = context

    def __getitem__(self, key: str) -> str:
        value = _resolve(self._context, key.split("."))
        if isinstance(value, (dict, list)):
            raise TemplateError(f"Placeholder '{key}' refers to a structure, not a value")
        return str(value)

    def __iter__(self) -> Iterator[str]:
        return iter(self._context)

    def __len__(self) -> int:
        return len(self._context)


def _resolve(node: Any, parts: List[str]) -> Any:
    if not parts:
        return node
    if not isinstance(node, dict):
        raise KeyError(".".join(parts))
    for i in range(len(parts), 0, -1):
        head = ".".join(parts[:i])
        if head in node:
            try:
                return _resolve(node[head], parts[i:])
            except KeyError:
                continue
    raise KeyError(".".join(parts))


class FormulaRenderer:
    def __init__(self, *, dry_run: bool = False) -> None:
        self.dry_run = dry_run

    def render(self, template_path: Union[str, Path], context: Dict[str, Any]) -> str:
        path = Path(template_path)
        if not path.is_file():
            raise TemplateNotFound(f"Template file {path} not found")

        template = FormulaTemplate(path.read_text(encoding="utf-8"))
        try:
            return template.substitute(_PathLookup(context))
        except KeyError as e:
            raise TemplateError(
                f"Template {path.name} references undefined field '{e.args[0]}'",
                context={"template": path},
            ) from None
        except ValueError as e:
            raise TemplateError(f"Invalid placeholder in {path.name}: {e}", context={"template": path}) from e

    def write(self, output_path: Union[str, Path], content: str) -> None:
        path = Path(output_path)

        if self.dry_run:
            print(f"\n--- {path} (DRY RUN) ---")
            print(content)
            print(f"--- END {path} ---\n")
            return

        utils.write_text_atomic(path, content)
        logger.info(f"  Generated: {path}")

    def generate(
        self,
        template_path: Union[str, Path],
        output_path: Union[str, Path],
        context: Dict[str, Any],
    ) -> str:
        content = self.render(template_path, context)
        self.write(output_path, content)
        return content
