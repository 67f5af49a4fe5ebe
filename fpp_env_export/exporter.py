"""Command line entry point for the FPP environment exporter."""

from __future__ import annotations

import logging

from .pipelines import EnvironmentExporter

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    exporter = EnvironmentExporter.default()
    exit_code = exporter.run()
    logger.debug("Export finished with exit code %s", int(exit_code))
    return int(exit_code)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
