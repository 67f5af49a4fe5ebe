"""Value parsing helpers."""

from __future__ import annotations

import math


def parse_coordinate(value: object) -> float:
    """Return ``value`` as a float, or ``0.0`` when it is missing or unusable."""

    if value in (None, ""):
        return 0.0
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def parse_optional_float(value: object) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def parse_settings_line(line: str) -> tuple[str, str] | None:
    """Split a ``key = "value"`` settings line.

    Returns ``None`` for blank lines, comments and lines without a separator.
    """

    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, value = line.split("=", 1)
    key = key.strip()
    if not key:
        return None
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        value = value[1:-1]
    return key, value
