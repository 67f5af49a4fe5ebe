"""Runtime configuration for the FPP environment exporter."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

MEDIA_ROOT = Path("/home/fpp/media")
PLUGIN_NAME = "GoogleCalendarScheduler"


@dataclass(frozen=True)
class ExportPaths:
    """Collection of filesystem paths used by the exporter."""

    media_root: Path
    locale_file: Path
    output: Path

    @property
    def settings_file(self) -> Path:
        """Location of the host settings file."""
        return self.media_root / "settings"


@dataclass(frozen=True)
class ExportConfig:
    """Fixed values stamped into every export."""

    schema_version: int = 1
    source: str = "fpp-env-export"
    indent: int = 2


EXPORT_CONFIG = ExportConfig()
EXPORT_PATHS = ExportPaths(
    media_root=MEDIA_ROOT,
    locale_file=MEDIA_ROOT / "config" / "locale.json",
    output=MEDIA_ROOT / "plugins" / PLUGIN_NAME / "runtime" / "fpp-env.json",
)
