"""Domain models used throughout the exporter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from ..config import EXPORT_CONFIG


class ExitCode(IntEnum):
    """Process exit status of an export run."""

    OK = 0
    INVALID = 1
    WRITE_FAILURE = 2


@dataclass(slots=True)
class LoadResult:
    """Outcome of a call into an external collaborator."""

    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any = None) -> "LoadResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str, value: Any = None) -> "LoadResult":
        return cls(value=value, error=error)


@dataclass(slots=True)
class ExportDocument:
    """Snapshot of the host environment written for the downstream plugin."""

    timezone: str = ""
    raw_locale: Any = field(default_factory=dict)
    latitude: float = 0.0
    longitude: float = 0.0
    ok: bool = False
    errors: list[str] = field(default_factory=list)
    locale_error: str | None = None
    settings_error: str | None = None
    schema_version: int = EXPORT_CONFIG.schema_version
    source: str = EXPORT_CONFIG.source

    def as_dict(self) -> dict:
        payload: dict[str, Any] = {
            "schemaVersion": self.schema_version,
            "source": self.source,
            "timezone": self.timezone,
            "rawLocale": self.raw_locale,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "ok": self.ok,
        }
        if self.errors:
            payload["errors"] = list(self.errors)
            payload["error"] = "; ".join(self.errors)
        if self.locale_error:
            payload["localeError"] = self.locale_error
        if self.settings_error:
            payload["settingsError"] = self.settings_error
        return payload


@dataclass(slots=True)
class EnvironmentSnapshot:
    """Typed view of a previously written export, as seen by its consumer."""

    ok: bool
    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    error: str | None = None
    raw: dict = field(default_factory=dict)

    @classmethod
    def invalid(cls, error: str) -> "EnvironmentSnapshot":
        return cls(ok=False, error=error)

    @property
    def raw_locale(self) -> Any:
        return self.raw.get("rawLocale")
