"""Export pipeline orchestrator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..config import EXPORT_PATHS
from ..core import ExitCode, ExportDocument, ExportError, LoadResult
from ..services import (
    DocumentWriter,
    FileLocaleProvider,
    FileSettingsSource,
    LocaleProvider,
    SettingsSource,
    serialization_error,
    validate_environment,
)
from ..utils import parse_coordinate

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EnvironmentExporter:
    """Gather, validate and write the environment snapshot."""

    settings: SettingsSource
    locale_provider: LocaleProvider
    writer: DocumentWriter
    output_path: Path

    def run(self) -> ExitCode:
        document = self.build_document()

        try:
            self.writer.write(document, self.output_path)
        except ExportError as exc:
            logger.error("%s: %s", exc, exc.reason)
            return ExitCode.WRITE_FAILURE

        logger.info("Wrote environment export to %s (ok=%s)", self.output_path, document.ok)
        return ExitCode.OK if document.ok else ExitCode.INVALID

    def build_document(self) -> ExportDocument:
        """Collect settings and locale data into a validated document."""

        document = ExportDocument()

        init = self.settings.initialize()
        if not init.ok:
            logger.warning("Settings initialization failed, continuing: %s", init.error)
            document.settings_error = init.error

        # Host settings are canonical for coordinates and timezone.
        document.latitude = parse_coordinate(self.settings.get("Latitude"))
        document.longitude = parse_coordinate(self.settings.get("Longitude"))
        document.timezone = self.settings.get("TimeZone")

        locale = self.locale_provider.load_locale()
        if locale.ok:
            problem = serialization_error(locale.value)
            if problem:
                locale = LoadResult.failure(f"Locale is not serializable as JSON: {problem}")

        if locale.ok:
            document.raw_locale = locale.value
        else:
            logger.warning("Locale unavailable: %s", locale.error)
            document.raw_locale = {}
            document.locale_error = locale.error

        document.errors = validate_environment(document)
        for message in document.errors:
            logger.warning("%s", message)
        document.ok = not document.errors
        return document

    @classmethod
    def default(cls, *, locale_provider: LocaleProvider | None = None) -> "EnvironmentExporter":
        return cls(
            settings=FileSettingsSource(EXPORT_PATHS.media_root),
            locale_provider=locale_provider or FileLocaleProvider(EXPORT_PATHS.locale_file),
            writer=DocumentWriter(),
            output_path=EXPORT_PATHS.output,
        )
