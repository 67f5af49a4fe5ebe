"""Core domain primitives for the exporter."""

from .models import (
    EnvironmentSnapshot,
    ExitCode,
    ExportDocument,
    LoadResult,
)
from .exceptions import ExportError

__all__ = [
    "EnvironmentSnapshot",
    "ExitCode",
    "ExportDocument",
    "LoadResult",
    "ExportError",
]
