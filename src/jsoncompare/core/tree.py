"""
Helpers for generic document trees.

A tree value is whatever a decoder produces for a self-describing document:
dicts for objects, lists (or tuples) for arrays, and str, int, float, bool
or None for scalars.
"""

import json
import math
from enum import Enum
from typing import Any, Dict, List, Union

TreeValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]


class NodeKind(Enum):
    """Shape of a tree value."""
    OBJECT = "object"
    ARRAY = "array"
    SCALAR = "scalar"


def node_kind(value: Any) -> NodeKind:
    """Classify a value as object, array or scalar."""
    if isinstance(value, dict):
        return NodeKind.OBJECT
    if isinstance(value, (list, tuple)):
        return NodeKind.ARRAY
    return NodeKind.SCALAR


def type_name(value: Any) -> str:
    """
    Name the JSON type of a value.

    Returns one of ``object``, ``array``, ``string``, ``number``,
    ``boolean`` or ``null``. Values outside the JSON model are named
    by their Python type.
    """
    kind = node_kind(value)
    if kind is not NodeKind.SCALAR:
        return kind.value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return type(value).__name__


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def scalars_equal(left: Any, right: Any) -> bool:
    """
    Type-sensitive equality for a scalar against any value.

    Numbers compare numerically regardless of int/float, but never equal
    a boolean or a string. None only equals None.
    """
    if left is None or right is None:
        return left is None and right is None
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if _is_number(left) or _is_number(right):
        return _is_number(left) and _is_number(right) and left == right
    if node_kind(right) is not NodeKind.SCALAR:
        return False
    return type(left) is type(right) and left == right


def format_number(value: Union[int, float]) -> str:
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)
    return str(value)


def format_value(value: Any) -> str:
    """
    Render a value for reports.

    Strings are shown verbatim, numbers in their shortest form, booleans and
    null in JSON spelling, containers as compact JSON with sorted keys.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if _is_number(value):
        return format_number(value)
    if isinstance(value, str):
        return value
    if node_kind(value) is not NodeKind.SCALAR:
        try:
            return json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)
        except RecursionError:
            return f"<{type_name(value)} nested too deeply to display>"
    return str(value)
