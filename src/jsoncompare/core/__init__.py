"""
Core components for jsoncompare: tree values, paths and document loading.
"""

from .path import Path, ROOT
from .tree import NodeKind, TreeValue, node_kind, type_name, scalars_equal, format_value
from .loader import load_document, parse_document, detect_format

__all__ = [
    "Path",
    "ROOT",
    "NodeKind",
    "TreeValue",
    "node_kind",
    "type_name",
    "scalars_equal",
    "format_value",
    "load_document",
    "parse_document",
    "detect_format",
]
