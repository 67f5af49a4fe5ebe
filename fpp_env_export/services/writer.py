"""Write export documents to disk."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..config import EXPORT_CONFIG
from ..core import ExportDocument, ExportError


def encode_json(value: Any, *, indent: int | None = None) -> str:
    """Encode ``value`` as strict JSON (no ``NaN`` or ``Infinity``)."""

    return json.dumps(value, indent=indent, ensure_ascii=False, allow_nan=False, default=str)


def serialization_error(value: Any) -> str | None:
    """Return why ``value`` cannot be written as JSON, or ``None`` when it can."""

    try:
        encode_json(value)
    except (TypeError, ValueError, RecursionError) as exc:
        return str(exc)
    return None


@dataclass(slots=True)
class DocumentWriter:
    """Serialize an :class:`ExportDocument` and write it to the output file."""

    indent: int = EXPORT_CONFIG.indent

    def serialize(self, document: ExportDocument) -> str:
        return encode_json(document.as_dict(), indent=self.indent) + "\n"

    def write(self, document: ExportDocument, output_path: Path | str) -> Path:
        """Write ``document`` to ``output_path``.

        The text is fully serialized before the file is opened, then written
        with a single call, so a document is never emitted half built.
        """

        output_path = Path(output_path)
        content = self.serialize(document)

        try:
            with output_path.open("w", encoding="utf-8") as handle:
                handle.write(content)
        except OSError as exc:
            raise ExportError(output_path, exc) from exc

        return output_path
