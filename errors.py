"""Error taxonomy for the formula generator.

Every error aborts the run. main.py is the only place that catches them.
"""

from __future__ import annotations

from typing import Mapping, Optional


class FormulaGenError(Exception):
    """Base error carrying a message plus optional key/value context."""

    def __init__(self, message: str, *, context: Optional[Mapping[str, object]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})

    def __str__(self) -> str:
        parts = [self.message]
        for k, v in self.context.items():
            if v is not None and v != "":
                parts.append(f"  {k}: {v}")
        return "\n".join(parts)


class ConfigurationError(FormulaGenError):
    pass


class InvalidVersion(FormulaGenError):
    pass


class ReleaseNotFound(FormulaGenError):
    pass


class AssetNotFound(FormulaGenError):
    pass


class AmbiguousAsset(FormulaGenError):
    pass


class FetchError(FormulaGenError):
    """An HTTP request failed, either with a non-success status or in transport."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        context: Optional[Mapping[str, object]] = None,
    ) -> None:
        super().__init__(message, context=context)
        self.status = status


class RedirectError(FetchError):
    pass


class TooManyRedirects(FetchError):
    pass


class CorruptMetadata(FormulaGenError):
    pass


class TemplateNotFound(FormulaGenError):
    pass


class TemplateError(FormulaGenError):
    pass


class UsageError(FormulaGenError):
    pass
