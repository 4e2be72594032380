"""
Report sinks for comparison results.
"""

from .renderer import DiffRenderer
from .csv_export import CSVExporter

__all__ = [
    "DiffRenderer",
    "CSVExporter",
]
