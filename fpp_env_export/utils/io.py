"""File IO utilities."""

from __future__ import annotations

import os

import chardet


def detect_encoding(path: os.PathLike[str] | str) -> str:
    """Detect the encoding of a text file."""

    with open(path, "rb") as handle:
        raw = handle.read()
    detection = chardet.detect(raw)
    return detection.get("encoding") or "utf-8"


def read_text(path: os.PathLike[str] | str, encoding: str = "utf-8") -> str:
    """Read ``path`` as text, detecting the encoding when ``encoding`` is ``"auto"``."""

    if encoding == "auto":
        encoding = detect_encoding(path)
    with open(path, "r", encoding=encoding) as handle:
        return handle.read()
