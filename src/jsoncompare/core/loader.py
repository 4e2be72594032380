"""
Document loading.

Decodes JSON or YAML files into the generic tree representation consumed by
the diff engine. Any failure is raised as DocumentError before a comparison
starts.
"""

import json
import logging
import math
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..exceptions import DocumentError
from .tree import TreeValue

logger = logging.getLogger(__name__)

FORMATS = ("json", "yaml")

_SUFFIX_FORMATS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def detect_format(path: Union[str, Path]) -> str:
    """Pick a document format from the file suffix, defaulting to JSON."""
    return _SUFFIX_FORMATS.get(Path(path).suffix.lower(), "json")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name!r}")


def _validate_tree(value: Any, source: str) -> None:
    """
    Ensure a decoded YAML tree fits the JSON model.

    Mapping keys must be strings, floats must be finite, and aliases must
    not make the tree contain itself.
    """
    active = set()
    stack = [(value, False)]
    while stack:
        node, leaving = stack.pop()
        if leaving:
            active.discard(id(node))
            continue

        if isinstance(node, float) and not math.isfinite(node):
            raise DocumentError(f"Non-finite number {node!r} in document", path=source)

        if not isinstance(node, (dict, list)):
            continue
        if id(node) in active:
            raise DocumentError("Recursive alias in document", path=source)
        active.add(id(node))
        stack.append((node, True))

        if isinstance(node, dict):
            for key, child in node.items():
                if not isinstance(key, str):
                    raise DocumentError(
                        f"Non-string key {key!r} in document",
                        path=source,
                    )
                stack.append((child, False))
        else:
            stack.extend((child, False) for child in node)


def parse_document(text: str, format: str = "json", source: str = "<string>") -> TreeValue:
    """
    Parse serialized text into a tree value.

    Args:
        text: Serialized document
        format: "json" or "yaml"
        source: Name used in error messages

    Returns:
        The decoded tree value

    Raises:
        DocumentError: If the text is not a valid document
    """
    if format not in FORMATS:
        raise DocumentError(f"Unsupported document format {format!r}", path=source)

    try:
        if format == "json":
            value = json.loads(text, parse_constant=_reject_constant)
        else:
            value = yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as e:
        raise DocumentError(f"Invalid {format.upper()} document", path=source, cause=e) from e
    except RecursionError as e:
        raise DocumentError(f"{format.upper()} document is nested too deeply", path=source, cause=e) from e

    if format == "yaml":
        _validate_tree(value, source)

    return value


def load_document(path: Union[str, Path], format: Optional[str] = None) -> TreeValue:
    """
    Read and decode a document file.

    Args:
        path: File to read
        format: Force "json" or "yaml"; inferred from the suffix when omitted

    Returns:
        The decoded tree value

    Raises:
        DocumentError: If the file cannot be read or decoded
    """
    path = Path(path)
    format = format or detect_format(path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentError("Error reading document", path=str(path), cause=e) from e

    value = parse_document(text, format=format, source=str(path))
    logger.debug(f"Loaded {format} document from {path}")
    return value
