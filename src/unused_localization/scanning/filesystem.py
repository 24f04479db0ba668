"""Filesystem collaborators used by the file scanner."""

import os
from pathlib import Path, PurePosixPath
from typing import Dict, Iterable, Iterator, Protocol, Union

from ..errors import RootPathNotFound

PathLike = Union[str, Path]


class DirectoryEnumerator(Protocol):
    def enumerate(self, root: PathLike) -> Iterable[Path]:
        ...


class FileReader(Protocol):
    def read(self, path: PathLike) -> bytes:
        ...


def is_hidden(name: str) -> bool:
    return name.startswith(".")


class FileSystemEnumerator:
    """Recursively lists regular files, skipping hidden files and directories."""

    def enumerate(self, root: PathLike) -> Iterator[Path]:
        """
        Enumerate every regular file below a directory.

        Args:
            root: Directory to walk

        Returns:
            Iterator of file paths

        Raises:
            RootPathNotFound: If root does not exist or is not a directory
        """
        root_path = Path(root)
        if not root_path.is_dir():
            raise RootPathNotFound(str(root))
        return self._walk(root_path)

    def _walk(self, root_path: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root_path):
            # Prune in place so os.walk never descends into hidden directories
            dirnames[:] = sorted(d for d in dirnames if not is_hidden(d))
            for name in sorted(filenames):
                if is_hidden(name):
                    continue
                path = Path(dirpath) / name
                if path.is_file():
                    yield path


class DiskFileReader:
    """Reads file content from disk."""

    def read(self, path: PathLike) -> bytes:
        return Path(path).read_bytes()


class InMemoryFileSystem:
    """
    Directory enumerator and file reader over a dict of paths to content.

    Paths are POSIX-style and relative to the scan root; str content is
    stored as UTF-8.
    """

    def __init__(self, files: Dict[str, Union[str, bytes]], root: str = "/project"):
        self.root = PurePosixPath(root)
        self.files: Dict[Path, bytes] = {}
        for name, content in files.items():
            data = content.encode("utf-8") if isinstance(content, str) else content
            self.files[Path(self.root / name)] = data
        self.reads: list[Path] = []

    def enumerate(self, root: PathLike) -> Iterator[Path]:
        if Path(root) != Path(self.root):
            raise RootPathNotFound(str(root))

        def visible(path: Path) -> bool:
            relative = path.relative_to(Path(self.root))
            return not any(is_hidden(part) for part in relative.parts)

        return iter(sorted(p for p in self.files if visible(p)))

    def read(self, path: PathLike) -> bytes:
        self.reads.append(Path(path))
        try:
            return self.files[Path(path)]
        except KeyError:
            raise FileNotFoundError(f"File not found: {path}") from None
