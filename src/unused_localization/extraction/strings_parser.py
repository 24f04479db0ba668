"""Parser for the key/value entries of Apple's .strings resource format."""

import re
from typing import Optional, Set

from ..errors import FileDecodeError, PatternCompileError
from ..models.localization_key import LocalizationKey
from .encoding import RESOURCE_ENCODINGS, decode_text

# Matches "key" = "value"; with escaped characters allowed in both halves.
# The value body already admits newlines, so multi-line values need no extra branch.
ENTRY_PATTERN = r"""
    (?<!\\)"                # Opening quote of the key, not escaped
    (                       # Key capture group
        [^"\\]*             # Anything but a quote or backslash
        (?:
            \\.             # An escaped character
            [^"\\]*
        )*
    )
    "                       # Closing quote of the key
    \s*=\s*
    "                       # Opening quote of the value
    (?:
        [^"\\]*
        (?:
            \\.
            [^"\\]*
        )*
    )
    "                       # Closing quote of the value
    \s*;
"""


class StringsFileParser:
    """
    Extracts localization keys from .strings file content.

    Unmatched text is skipped rather than rejected: comments, malformed entries
    and anything else outside a complete ``"key" = "value";`` entry simply
    contribute no key.
    """

    def __init__(self, pattern: str = ENTRY_PATTERN):
        """
        Compile the entry pattern.

        Args:
            pattern: Regular expression whose first group captures the key

        Raises:
            PatternCompileError: If the pattern is not a valid regular expression
        """
        try:
            self.pattern = re.compile(pattern, re.VERBOSE | re.DOTALL)
        except re.error as e:
            raise PatternCompileError(f"Regex pattern error: {e}") from e

        if self.pattern.groups < 1:
            raise PatternCompileError("Regex pattern must capture the key in group 1")

    def parse_string(self, content: str, file: Optional[str] = None) -> Set[LocalizationKey]:
        """
        Parse .strings content.

        Args:
            content: Decoded file content
            file: Optional file name recorded on every key

        Returns:
            Set of keys, verbatim as written between the quotes
        """
        keys = set()
        for match in self.pattern.finditer(content):
            line_number = content.count("\n", 0, match.start()) + 1
            keys.add(LocalizationKey(key=match.group(1), file=file, line_number=line_number))
        return keys

    def parse_bytes(self, data: bytes, file: Optional[str] = None) -> Set[LocalizationKey]:
        """
        Decode and parse raw .strings file content.

        Raises:
            FileDecodeError: If no supported encoding can decode the data
        """
        try:
            content, _ = decode_text(data, RESOURCE_ENCODINGS)
        except UnicodeDecodeError as e:
            raise FileDecodeError(file or "<memory>", f"Could not decode file: {e.reason}") from e

        return self.parse_string(content, file=file)
