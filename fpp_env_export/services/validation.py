"""Validation of the exported environment."""

from __future__ import annotations

from ..core import ExportDocument

COORDINATES_MISSING = "Latitude/Longitude not present (or zero)"
TIMEZONE_MISSING = "Timezone not present"


def validate_environment(document: ExportDocument) -> list[str]:
    """Return every diagnostic that applies to ``document``.

    Zero is never a real coordinate here, so it counts as missing.
    """

    diagnostics: list[str] = []
    if document.latitude == 0.0 or document.longitude == 0.0:
        diagnostics.append(COORDINATES_MISSING)
    if not document.timezone:
        diagnostics.append(TIMEZONE_MISSING)
    return diagnostics
