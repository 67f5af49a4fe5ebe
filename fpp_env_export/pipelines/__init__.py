from .export_pipeline import EnvironmentExporter

__all__ = ["EnvironmentExporter"]
