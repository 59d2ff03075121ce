"""Concurrent batch analysis of configured log files"""

from .core.analyzer import LogAnalyzer
from .core.errors import AnalysisError, ErrorKind
from .core.loader import read_configs
from .core.randomness import RandomSource, SeededRandomSource
from .core.records import AnalysisStatus, LogConfig, LogResult
from .core.reporter import export_report, results_to_json, summarize

__version__ = "1.0.0"

__all__ = [
    "AnalysisError",
    "AnalysisStatus",
    "ErrorKind",
    "LogAnalyzer",
    "LogConfig",
    "LogResult",
    "RandomSource",
    "SeededRandomSource",
    "export_report",
    "read_configs",
    "results_to_json",
    "summarize",
]
