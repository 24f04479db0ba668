"""Exception types raised while scanning a project."""


class UnusedLocalizationError(Exception):
    """Base class for every error raised by the scanner."""


class PatternCompileError(UnusedLocalizationError):
    """Raised when the .strings entry pattern cannot be compiled."""


class GrammarLoadError(UnusedLocalizationError):
    """Raised when the Swift grammar cannot be loaded."""


class RootPathNotFound(UnusedLocalizationError, FileNotFoundError):
    """Raised when the scan root does not exist or is not a directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Directory not found: {path}")


class FileScanError(UnusedLocalizationError):
    """A single file could not be processed. Never fatal to the whole scan."""

    kind = "scan"

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class FileDecodeError(FileScanError, ValueError):
    """None of the supported text encodings could decode the file."""

    kind = "decode"


class FileParseError(FileScanError):
    """The Swift parser rejected the file's syntax."""

    kind = "parse"
