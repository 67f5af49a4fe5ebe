"""Top-level package for the FPP environment exporter."""

from .exporter import main
from .pipelines.export_pipeline import EnvironmentExporter

__all__ = ["main", "EnvironmentExporter"]
