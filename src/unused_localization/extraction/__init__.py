"""Key and literal extraction modules."""

from .strings_parser import StringsFileParser
from .swift_literals import SwiftLiteralExtractor

__all__ = ["StringsFileParser", "SwiftLiteralExtractor"]
