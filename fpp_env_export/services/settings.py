"""Access to the host application's settings store."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Protocol

from ..core import LoadResult
from ..utils import parse_settings_line, read_text

logger = logging.getLogger(__name__)


class SettingsSource(Protocol):
    """Key/value lookup that must be initialized once before use."""

    def initialize(self) -> LoadResult: ...

    def get(self, name: str) -> str: ...


class FileSettingsSource:
    """Read settings from the host's ``<media root>/settings`` file."""

    def __init__(self, media_root: Path | str, *, filename: str = "settings", encoding: str = "auto"):
        self.media_root = Path(media_root)
        self.filename = filename
        self.encoding = encoding
        self._values: dict[str, str] = {}

    @property
    def path(self) -> Path:
        return self.media_root / self.filename

    def initialize(self) -> LoadResult:
        self._values = {}
        path = self.path
        if not path.is_file():
            return LoadResult.failure(f"Settings file not found: {path}")

        try:
            text = read_text(path, self.encoding)
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            return LoadResult.failure(f"Unable to read settings file {path}: {exc}")

        for line in text.splitlines():
            parsed = parse_settings_line(line)
            if parsed is not None:
                key, value = parsed
                self._values[key] = value

        logger.debug("Loaded %s setting(s) from %s", len(self._values), path)
        return LoadResult.success(dict(self._values))

    def get(self, name: str) -> str:
        return self._values.get(name, "")


class MappingSettingsSource:
    """In-memory settings source."""

    def __init__(self, values: Mapping[str, str] | None = None, *, init_error: str | None = None):
        self.values = dict(values or {})
        self.init_error = init_error

    def initialize(self) -> LoadResult:
        if self.init_error:
            return LoadResult.failure(self.init_error)
        return LoadResult.success(dict(self.values))

    def get(self, name: str) -> str:
        value = self.values.get(name)
        return "" if value is None else str(value)
