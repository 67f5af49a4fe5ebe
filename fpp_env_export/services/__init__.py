"""Service layer exports."""

from .settings import FileSettingsSource, MappingSettingsSource, SettingsSource
from .locale import CallableLocaleProvider, FileLocaleProvider, LocaleProvider
from .validation import validate_environment
from .writer import DocumentWriter, serialization_error
from .reader import holiday_index, load_environment

__all__ = [
    "FileSettingsSource",
    "MappingSettingsSource",
    "SettingsSource",
    "CallableLocaleProvider",
    "FileLocaleProvider",
    "LocaleProvider",
    "validate_environment",
    "DocumentWriter",
    "serialization_error",
    "holiday_index",
    "load_environment",
]
