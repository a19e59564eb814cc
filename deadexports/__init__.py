"""Find exported symbols that no other file in a source tree imports."""

from .analyzers import extract_exports, find_dead_exports, get_detector
from .models import DeadExportEntry, DeadExportReport, SourceFile
from .scanner import DeadExportScanner

__version__ = "0.1.0"

__all__ = [
    "DeadExportEntry",
    "DeadExportReport",
    "DeadExportScanner",
    "SourceFile",
    "extract_exports",
    "find_dead_exports",
    "get_detector",
]
