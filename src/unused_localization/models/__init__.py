"""Data models for the unused localization scanner."""

from .localization_key import LocalizationKey
from .scan_result import FileFailure, ScanResult

__all__ = [
    "LocalizationKey",
    "FileFailure",
    "ScanResult",
]
