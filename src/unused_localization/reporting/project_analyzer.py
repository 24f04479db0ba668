"""Drives a project scan and reports the unused localization keys."""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Callable, List, Union

from ..models.localization_key import LocalizationKey
from ..models.scan_result import ScanResult
from .console_logger import ConsoleLogging

if TYPE_CHECKING:
    from ..scanning.file_scanner import FileScanner


@dataclass
class AnalysisReport:
    """Outcome of analyzing one project."""

    result: ScanResult
    unused: List[LocalizationKey]
    elapsed: float

    @property
    def unused_count(self) -> int:
        return len(self.unused)


class ProjectAnalyzer:
    """
    Runs the scan phases in order and prints the report.

    Keys are only compared against literals after the scanner has gathered
    every file, then each unused key is logged once.
    """

    def __init__(
        self,
        scanner: "FileScanner",
        logger: ConsoleLogging,
        show_files: bool = False,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.scanner = scanner
        self.logger = logger
        self.show_files = show_files
        self.clock = clock

    def analyze(self, root: Union[str, Path]) -> AnalysisReport:
        """
        Analyze a project directory.

        Args:
            root: Project directory

        Returns:
            AnalysisReport with the unused keys

        Raises:
            RootPathNotFound: If root does not exist or is not a directory
        """
        start = self.clock()

        self.logger.log_progress("Searching for Localization Keys in .strings files...")
        result = self.scanner.scan(root)

        self.logger.log_count("Total", len(result.defined_keys), "localization keys found.")
        self.logger.log_count("Total", result.source_files, "swift files found.")
        self.logger.log_progress("Searching for unused keys...")

        unused = result.unused_keys()

        self.logger.log_progress("Unused Localization Keys:")
        for key in unused:
            self.logger.log_key(self._format_key(key, result))
        self.logger.log_count("Total", len(unused), "unused localization keys found.")

        elapsed = self.clock() - start
        self.logger.log_progress(f"Completed in: {elapsed:.1f}s")

        return AnalysisReport(result=result, unused=unused, elapsed=elapsed)

    def _format_key(self, key: LocalizationKey, result: ScanResult) -> str:
        if not self.show_files:
            return key.key
        locations = result.locations_of(key.key)
        if not locations:
            return key.key
        return f"{key.key}  ({', '.join(locations)})"
