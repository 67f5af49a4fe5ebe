"""Read an export back, the way the downstream plugin consumes it."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..config import EXPORT_CONFIG
from ..core import EnvironmentSnapshot
from ..utils import parse_optional_float

logger = logging.getLogger(__name__)


def load_environment(path: Path | str) -> tuple[EnvironmentSnapshot, list[str]]:
    """Load a written export.

    Returns the snapshot together with human readable warnings. Problems with
    the file never raise; they produce an invalid snapshot instead.
    """

    path = Path(path)
    warnings: list[str] = []

    if not path.is_file():
        warnings.append(f"Environment export missing ({path.name} not found).")
        return EnvironmentSnapshot.invalid("missing environment file"), warnings

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Unable to read %s: %s", path, exc)
        warnings.append(f"Unable to read {path.name}.")
        return EnvironmentSnapshot.invalid("unreadable environment file"), warnings

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError:
        payload = None
    if not isinstance(payload, dict):
        warnings.append(f"Invalid JSON in {path.name}.")
        return EnvironmentSnapshot.invalid("invalid JSON"), warnings

    if payload.get("schemaVersion") != EXPORT_CONFIG.schema_version:
        warnings.append("Unsupported environment schemaVersion.")
        return EnvironmentSnapshot.invalid("unsupported schema version"), warnings

    ok = bool(payload.get("ok", False))
    error = _error_text(payload)
    if not ok:
        warnings.append(error or "Environment export reported failure.")

    timezone = payload.get("timezone")
    snapshot = EnvironmentSnapshot(
        ok=ok,
        latitude=parse_optional_float(payload.get("latitude")),
        longitude=parse_optional_float(payload.get("longitude")),
        timezone=timezone if isinstance(timezone, str) else None,
        error=error,
        raw=payload,
    )
    return snapshot, warnings


def _error_text(payload: dict) -> str | None:
    errors = payload.get("errors")
    if isinstance(errors, list):
        messages = [str(item) for item in errors if item]
        if messages:
            return "; ".join(messages)
    error = payload.get("error")
    return error if isinstance(error, str) and error else None


def holiday_index(snapshot: EnvironmentSnapshot) -> dict[str, dict]:
    """Index the locale's holiday definitions by their ``shortName``."""

    locale = snapshot.raw_locale
    if not isinstance(locale, dict):
        return {}
    holidays = locale.get("holidays")
    if not isinstance(holidays, list):
        return {}

    index: dict[str, dict] = {}
    for holiday in holidays:
        if not isinstance(holiday, dict):
            continue
        short_name = holiday.get("shortName")
        if not isinstance(short_name, str):
            continue
        index[short_name] = holiday
    return index
