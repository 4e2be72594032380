"""
jsoncompare - Structural diff for JSON and YAML documents

Compares two document trees and reports every missing key, type mismatch,
array length mismatch and value mismatch, each tagged with its path.
"""

__version__ = "0.1.0"

from .core.path import Path
from .core.loader import load_document, parse_document
from .diff.engine import DiffEngine, compare
from .diff.models import ComparisonResult, DiscrepancyKind, DiscrepancyRecord
from .config import CompareConfig, load_config
from .exceptions import JSONCompareError, ConfigError, DocumentError, ReportError

__all__ = [
    # Version
    "__version__",
    # Engine
    "DiffEngine",
    "compare",
    # Data models
    "Path",
    "ComparisonResult",
    "DiscrepancyKind",
    "DiscrepancyRecord",
    # Loading and configuration
    "load_document",
    "parse_document",
    "CompareConfig",
    "load_config",
    # Errors
    "JSONCompareError",
    "ConfigError",
    "DocumentError",
    "ReportError",
]
