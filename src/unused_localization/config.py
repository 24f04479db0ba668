"""Configuration management for the unused localization scanner."""

import os
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple
from dotenv import load_dotenv

load_dotenv()


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> Optional[int]:
    value = os.getenv(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        # Reported by Config.validate
        return None


def _default_workers() -> int:
    # Same default as concurrent.futures.ThreadPoolExecutor
    return min(32, (os.cpu_count() or 1) + 4)


@dataclass(frozen=True)
class ScanSettings:
    """Settings consumed by a single scan."""

    resource_extension: str = ".strings"
    source_extension: str = ".swift"
    excluded_components: Tuple[str, ...] = ("Pods", "Carthage")
    excluded_files: Tuple[str, ...] = ("InfoPlist.strings",)
    lproj: Optional[str] = None
    max_workers: int = field(default_factory=_default_workers)
    show_files: bool = False


@dataclass
class Config:
    """Application configuration."""

    # File classification
    resource_extension: str = field(
        default_factory=lambda: os.getenv("UNUSED_L10N_RESOURCE_EXT", ".strings")
    )
    source_extension: str = field(
        default_factory=lambda: os.getenv("UNUSED_L10N_SOURCE_EXT", ".swift")
    )
    excluded_components: List[str] = field(
        default_factory=lambda: _env_list("UNUSED_L10N_EXCLUDE", "Pods,Carthage")
    )
    # System resource files that never hold application strings
    excluded_files: List[str] = field(default_factory=lambda: ["InfoPlist.strings"])
    lproj: Optional[str] = field(default_factory=lambda: os.getenv("UNUSED_L10N_LPROJ") or None)

    # Scanning
    max_workers: Optional[int] = field(
        default_factory=lambda: _env_int("UNUSED_L10N_WORKERS", _default_workers())
    )

    # Reporting
    show_files: bool = field(default_factory=lambda: _env_flag("UNUSED_L10N_SHOW_FILES"))

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if self.max_workers is None:
            errors.append("UNUSED_L10N_WORKERS must be an integer")
        elif self.max_workers < 1:
            errors.append("UNUSED_L10N_WORKERS must be at least 1")
        for name, ext in (
            ("UNUSED_L10N_RESOURCE_EXT", self.resource_extension),
            ("UNUSED_L10N_SOURCE_EXT", self.source_extension),
        ):
            if not ext.startswith(".") or len(ext) < 2:
                errors.append(f"{name} must be a file extension like '.strings', got '{ext}'")
        return errors

    def scan_settings(self, **overrides) -> ScanSettings:
        """
        Build the settings for one scan.

        Args:
            **overrides: ScanSettings fields to override; None values are ignored

        Returns:
            ScanSettings derived from this configuration
        """
        settings = ScanSettings(
            resource_extension=self.resource_extension,
            source_extension=self.source_extension,
            excluded_components=tuple(self.excluded_components),
            excluded_files=tuple(self.excluded_files),
            lproj=self.lproj,
            max_workers=self.max_workers,
            show_files=self.show_files,
        )
        return replace(settings, **{k: v for k, v in overrides.items() if v is not None})


# Global config instance
config = Config()
