"""Console output and report orchestration."""

from .console_logger import ConsoleLogger, ConsoleLogging, RecordingLogger
from .project_analyzer import AnalysisReport, ProjectAnalyzer

__all__ = [
    "ConsoleLogger",
    "ConsoleLogging",
    "RecordingLogger",
    "AnalysisReport",
    "ProjectAnalyzer",
]
