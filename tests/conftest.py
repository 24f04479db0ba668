"""Shared fixtures for the scanner tests."""

import pytest

from unused_localization.config import ScanSettings
from unused_localization.extraction.strings_parser import StringsFileParser
from unused_localization.extraction.swift_literals import SwiftLiteralExtractor
from unused_localization.reporting.console_logger import RecordingLogger
from unused_localization.scanning.file_scanner import FileScanner
from unused_localization.scanning.filesystem import InMemoryFileSystem


@pytest.fixture(scope="session")
def strings_parser():
    return StringsFileParser()


@pytest.fixture(scope="session")
def extractor():
    return SwiftLiteralExtractor()


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def make_scanner(strings_parser, extractor, logger):
    """Build a FileScanner over an in-memory project rooted at /project."""

    def _make(files, **settings):
        fs = InMemoryFileSystem(files)
        scanner = FileScanner(
            strings_parser=strings_parser,
            literal_extractor=extractor,
            enumerator=fs,
            reader=fs,
            logger=logger,
            settings=ScanSettings(**settings),
        )
        return scanner, fs

    return _make
