"""Data models for the outcome of a project scan."""

from dataclasses import dataclass, field
from typing import Dict, List, Set

from .localization_key import LocalizationKey


@dataclass(frozen=True)
class FileFailure:
    """A file that could not be decoded or parsed during a scan."""

    path: str
    kind: str  # read, decode, parse
    message: str


@dataclass
class ScanResult:
    """Aggregated keys and literals gathered from every scanned file."""

    defined_keys: Set[LocalizationKey] = field(default_factory=set)
    used_literals: Set[str] = field(default_factory=set)
    occurrences: Dict[str, List[LocalizationKey]] = field(default_factory=dict)
    resource_files: int = 0
    source_files: int = 0
    failed_files: List[FileFailure] = field(default_factory=list)

    def add_keys(self, keys: Set[LocalizationKey]) -> None:
        """Fold one resource file's keys into the result."""
        self.defined_keys |= keys
        for key in keys:
            self.occurrences.setdefault(key.key, []).append(key)

    def add_literals(self, literals: Set[str]) -> None:
        """Fold one source file's literals into the result."""
        self.used_literals |= literals

    def unused_keys(self) -> List[LocalizationKey]:
        """Get the defined keys that never appear as a string literal, sorted by key."""
        unused = [k for k in self.defined_keys if k.key not in self.used_literals]
        return sorted(unused, key=lambda k: k.key)

    def locations_of(self, key: str) -> List[str]:
        """Get every ``file:line`` a key was defined at, in a stable order."""
        sites = self.occurrences.get(key, [])
        return sorted({k.location for k in sites if k.location})
