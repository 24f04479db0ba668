"""Data model for a key defined in a .strings resource file."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class LocalizationKey:
    """
    A localization key extracted from a .strings file.

    Two keys are equal when their key text is equal; the originating file and
    line are carried along for reporting only.
    """

    key: str
    file: Optional[str] = field(default=None, compare=False)
    line_number: Optional[int] = field(default=None, compare=False)

    @property
    def location(self) -> str:
        """Human readable definition site (``file:line``)."""
        if self.file is None:
            return ""
        if self.line_number is None:
            return self.file
        return f"{self.file}:{self.line_number}"
