"""Find localization keys defined in .strings files but never used in Swift code."""

__version__ = "0.1.0"
