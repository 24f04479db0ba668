"""Command-line interface for the unused localization scanner."""

import os
from typing import Optional, Tuple

import click
from rich.console import Console

from . import __version__
from .config import config
from .errors import UnusedLocalizationError
from .extraction.strings_parser import StringsFileParser
from .extraction.swift_literals import SwiftLiteralExtractor
from .reporting.console_logger import ConsoleLogger
from .reporting.project_analyzer import ProjectAnalyzer
from .scanning.file_scanner import FileScanner
from .scanning.filesystem import DiskFileReader, FileSystemEnumerator

console = Console(highlight=False)


@click.group()
@click.version_option(version=__version__)
def cli():
    """Scans all files in the project to detect unused localization keys."""
    pass


@cli.command()
@click.option(
    "--path", "-p",
    "path",
    default=os.getcwd,
    show_default="current directory",
    help="Project directory path"
)
@click.option(
    "--show-files",
    is_flag=True,
    help="Show the files and lines each unused key is defined at"
)
@click.option(
    "--exclude", "-e",
    "exclude",
    multiple=True,
    help="Additional path component whose .strings files are skipped (repeatable, e.g. 'Vendor')"
)
@click.option(
    "--lproj",
    default=None,
    help="Only read .strings files from <LPROJ>.lproj directories (e.g. 'en')"
)
@click.option(
    "--workers", "-w",
    type=click.IntRange(min=1),
    default=None,
    help="Number of files parsed concurrently"
)
def scan(
    path: str,
    show_files: bool,
    exclude: Tuple[str, ...],
    lproj: Optional[str],
    workers: Optional[int],
):
    """Scan a project for localization keys never used in Swift code."""
    errors = config.validate()
    if errors:
        console.print("[red]Configuration errors:[/red]")
        for error in errors:
            console.print(f"  - {error}")
        raise click.Abort()

    settings = config.scan_settings(
        excluded_components=tuple(config.excluded_components) + exclude,
        lproj=lproj,
        max_workers=workers,
        show_files=show_files or None,
    )
    logger = ConsoleLogger(console)

    try:
        scanner = FileScanner(
            strings_parser=StringsFileParser(),
            literal_extractor=SwiftLiteralExtractor(),
            enumerator=FileSystemEnumerator(),
            reader=DiskFileReader(),
            logger=logger,
            settings=settings,
        )
        analyzer = ProjectAnalyzer(scanner, logger, show_files=settings.show_files)
        analyzer.analyze(path)
    except UnusedLocalizationError as e:
        logger.log_error(f"Error: {e}")
        raise click.Abort()


if __name__ == "__main__":
    cli()
