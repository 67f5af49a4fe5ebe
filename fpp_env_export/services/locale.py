"""Locale providers.

The locale is auxiliary data (holiday lists, locale name and whatever else
the provider defines). It is passed through to the export untouched, so the
providers only decode it and never look inside.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Protocol

from ..core import LoadResult
from ..utils import read_text

logger = logging.getLogger(__name__)


class LocaleProvider(Protocol):
    def load_locale(self) -> LoadResult: ...


class FileLocaleProvider:
    """Load the locale from a JSON file on disk."""

    def __init__(self, path: Path | str, *, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    def load_locale(self) -> LoadResult:
        if not self.path.is_file():
            return LoadResult.failure(f"Locale file not found: {self.path}")

        try:
            text = read_text(self.path, self.encoding)
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            return LoadResult.failure(f"Unable to read locale file {self.path}: {exc}")

        try:
            locale = json.loads(text, parse_constant=_reject_constant)
        except ValueError as exc:
            return LoadResult.failure(f"Invalid JSON in locale file {self.path}: {exc}")

        return LoadResult.success(locale)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard constant {name}")


class CallableLocaleProvider:
    """Load the locale through an in-process API call."""

    def __init__(self, fetch: Callable[[], Any], *, name: str | None = None):
        self.fetch = fetch
        self.name = name or getattr(fetch, "__name__", "locale provider")

    def load_locale(self) -> LoadResult:
        # The callable belongs to the host; nothing it raises may escape.
        try:
            locale = self.fetch()
        except Exception as exc:
            logger.debug("Locale provider %s raised", self.name, exc_info=True)
            return LoadResult.failure(f"Locale provider {self.name} failed: {exc}")
        return LoadResult.success(locale)
