"""Scans a project tree and gathers defined keys and used string literals."""

from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Set

from ..config import ScanSettings
from ..errors import FileScanError
from ..extraction.strings_parser import StringsFileParser
from ..extraction.swift_literals import SwiftLiteralExtractor
from ..models.localization_key import LocalizationKey
from ..models.scan_result import FileFailure, ScanResult
from ..reporting.console_logger import ConsoleLogging
from .filesystem import DirectoryEnumerator, FileReader, PathLike


class FileKind(str, Enum):
    """How a file takes part in a scan."""
    RESOURCE = "resource"
    SOURCE = "source"
    IGNORED = "ignored"


@dataclass
class FileContribution:
    """What one file contributed to a scan."""
    path: Path
    kind: FileKind
    keys: Set[LocalizationKey] = field(default_factory=set)
    literals: Set[str] = field(default_factory=set)
    failure: Optional[FileFailure] = None


class FileScanner:
    """
    Finds .strings and Swift files below a root directory and parses them.

    Every candidate file is parsed as an independent task on a thread pool.
    Completed results are folded into the scan result one at a time on the
    calling thread, so tasks never share mutable state.
    """

    def __init__(
        self,
        strings_parser: StringsFileParser,
        literal_extractor: SwiftLiteralExtractor,
        enumerator: DirectoryEnumerator,
        reader: FileReader,
        logger: ConsoleLogging,
        settings: Optional[ScanSettings] = None,
    ):
        self.strings_parser = strings_parser
        self.literal_extractor = literal_extractor
        self.enumerator = enumerator
        self.reader = reader
        self.logger = logger
        self.settings = settings or ScanSettings()

    def classify(self, path: PathLike, root: Optional[PathLike] = None) -> FileKind:
        """
        Decide whether a file is a resource file, a source file, or neither.

        Excluded components only apply to resource files: keys defined by
        dependencies are not the project's, but Swift code anywhere in the
        tree can still reference the project's keys. Components are matched
        against the path relative to root, so a project that itself lives
        below e.g. ``Pods`` is still scanned.
        """
        path = Path(path)
        relative = path
        if root is not None:
            try:
                relative = path.relative_to(root)
            except ValueError:
                pass

        suffix = path.suffix.lower()
        if suffix == self.settings.resource_extension.lower():
            if any(part in self.settings.excluded_components for part in relative.parts):
                return FileKind.IGNORED
            if path.name in self.settings.excluded_files:
                return FileKind.IGNORED
            if self.settings.lproj and path.parent.name != f"{self.settings.lproj}.lproj":
                return FileKind.IGNORED
            return FileKind.RESOURCE

        if suffix == self.settings.source_extension.lower():
            return FileKind.SOURCE

        return FileKind.IGNORED

    def scan(self, root: PathLike) -> ScanResult:
        """
        Scan a project directory.

        Args:
            root: Project directory

        Returns:
            ScanResult holding every defined key and used literal

        Raises:
            RootPathNotFound: If root does not exist or is not a directory
        """
        candidates: Dict[Path, FileKind] = {}
        for path in self.enumerator.enumerate(root):
            kind = self.classify(path, root)
            if kind is not FileKind.IGNORED:
                candidates[Path(path)] = kind

        result = ScanResult(
            resource_files=sum(1 for k in candidates.values() if k is FileKind.RESOURCE),
            source_files=sum(1 for k in candidates.values() if k is FileKind.SOURCE),
        )
        self.logger.log_count("Found", len(candidates), "files to scan.")

        self.logger.start_progress("Scanning files", total=len(candidates))
        try:
            for contribution in self._run(candidates):
                self._fold(result, contribution)
                self.logger.advance()
        finally:
            self.logger.finish_progress()

        result.failed_files.sort(key=lambda f: f.path)
        for failure in result.failed_files:
            verb = "parse" if failure.kind == "parse" else "read"
            self.logger.log_warning(f"Could not {verb} file: {failure.path} ({failure.message})")
        return result

    def _run(self, candidates: Dict[Path, FileKind]):
        """Parse every candidate concurrently, yielding results as they complete."""
        if not candidates:
            return

        executor = ThreadPoolExecutor(max_workers=self.settings.max_workers)
        try:
            futures: List[Future] = [
                executor.submit(self.process_file, path, kind) for path, kind in candidates.items()
            ]
            for future in as_completed(futures):
                yield future.result()
        except BaseException:
            executor.shutdown(wait=False, cancel_futures=True)
            raise
        else:
            executor.shutdown(wait=True)

    def process_file(self, path: Path, kind: FileKind) -> FileContribution:
        """Parse one file; per-file errors become an empty contribution."""
        contribution = FileContribution(path=path, kind=kind)
        try:
            data = self.reader.read(path)
            if kind is FileKind.RESOURCE:
                contribution.keys = self.strings_parser.parse_bytes(data, file=str(path))
            elif kind is FileKind.SOURCE:
                contribution.literals = self.literal_extractor.extract_bytes(data, file=str(path))
        except FileScanError as e:
            contribution.failure = FileFailure(path=str(path), kind=e.kind, message=e.reason)
        except OSError as e:
            contribution.failure = FileFailure(path=str(path), kind="read", message=str(e))
        return contribution

    @staticmethod
    def _fold(result: ScanResult, contribution: FileContribution) -> None:
        if contribution.failure is not None:
            result.failed_files.append(contribution.failure)
        result.add_keys(contribution.keys)
        result.add_literals(contribution.literals)
