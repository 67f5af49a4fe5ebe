"""Exceptions raised by the exporter."""

from __future__ import annotations

import os


class ExportError(RuntimeError):
    """Raised when the export document cannot be written to ``path``."""

    def __init__(self, path: os.PathLike[str] | str, reason: object):
        super().__init__(f"Unable to write {path}")
        self.path = str(path)
        self.reason = str(reason)

    @property
    def details(self) -> dict:
        return {"path": self.path, "reason": self.reason}

    def as_dict(self) -> dict:
        """Return a serializable representation."""
        return {"message": str(self), "details": self.details}
