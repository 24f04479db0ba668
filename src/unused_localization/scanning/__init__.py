"""Project tree scanning."""

from .file_scanner import FileKind, FileScanner
from .filesystem import DiskFileReader, FileSystemEnumerator, InMemoryFileSystem

__all__ = [
    "FileKind",
    "FileScanner",
    "DiskFileReader",
    "FileSystemEnumerator",
    "InMemoryFileSystem",
]
