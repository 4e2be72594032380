"""
Diff engine for comparing document trees.
"""

from .engine import DiffEngine, compare
from .models import ComparisonResult, DiscrepancyKind, DiscrepancyRecord

__all__ = [
    "DiffEngine",
    "compare",
    "ComparisonResult",
    "DiscrepancyKind",
    "DiscrepancyRecord",
]
