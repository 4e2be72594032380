"""
Structural diff engine for comparing document trees.

Walks two decoded documents depth-first and reports every divergence:
missing keys, type mismatches, array length mismatches and scalar value
mismatches, each tagged with the path where it occurred.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..core.path import Path, ROOT
from ..core.tree import NodeKind, node_kind, type_name, scalars_equal, format_value
from .models import ComparisonResult, DiscrepancyKind, DiscrepancyRecord

logger = logging.getLogger(__name__)

# A pending pair of nodes to compare, or a record ready to be emitted.
Frame = Tuple[Any, Any, Path]
Task = Union[Frame, DiscrepancyRecord]


class DiffEngine:
    """
    Engine for computing structural diffs between two documents.

    Arrays are compared by position. A shape mismatch or an array length
    mismatch is reported once at the subtree root and the subtree is not
    descended into.

    Traversal is depth-first pre-order, driven by an explicit stack so
    document depth is not bounded by the interpreter's recursion limit.
    """

    def __init__(self, sort_keys: bool = True):
        """
        Initialize the diff engine.

        Args:
            sort_keys: Visit object keys in sorted order so reports are
                reproducible; otherwise use the mappings' insertion order
        """
        self.sort_keys = sort_keys

    def compare(self, left: Any, right: Any) -> ComparisonResult:
        """
        Compare two tree values.

        Args:
            left: First document (baseline)
            right: Second document (comparison)

        Returns:
            ComparisonResult with every divergence found
        """
        logger.debug("Comparing documents")
        result = ComparisonResult()

        stack: List[Task] = [(left, right, ROOT)]
        while stack:
            task = stack.pop()
            if isinstance(task, DiscrepancyRecord):
                result.add(task)
                continue
            # Children go on in reverse so they pop in traversal order.
            stack.extend(reversed(self._expand(*task)))

        result.finish()
        logger.debug(f"Comparison finished with {result.mismatch_count} mismatches")
        return result

    def _expand(self, left: Any, right: Any, path: Path) -> List[Task]:
        """Tasks for one node pair, in the order they must be reported."""
        kind = node_kind(left)
        if kind is NodeKind.OBJECT:
            return self._compare_objects(left, right, path)
        if kind is NodeKind.ARRAY:
            return self._compare_arrays(left, right, path)
        return self._compare_scalars(left, right, path)

    def _compare_objects(self, left: Mapping[str, Any], right: Any, path: Path) -> List[Task]:
        if node_kind(right) is not NodeKind.OBJECT:
            return [self._record(path, DiscrepancyKind.TYPE_MISMATCH, type_name(left), type_name(right))]

        tasks: List[Task] = []
        for key in self._keys(left):
            child_path = path.child(key)
            if key not in right:
                tasks.append(self._record(
                    child_path, DiscrepancyKind.MISSING_IN_SECOND, format_value(left[key]), ""
                ))
                continue
            tasks.append((left[key], right[key], child_path))

        for key in self._keys(right):
            if key not in left:
                tasks.append(self._record(
                    path.child(key), DiscrepancyKind.MISSING_IN_FIRST, "", format_value(right[key])
                ))
        return tasks

    def _compare_arrays(self, left: Sequence[Any], right: Any, path: Path) -> List[Task]:
        if node_kind(right) is not NodeKind.ARRAY:
            return [self._record(path, DiscrepancyKind.TYPE_MISMATCH, type_name(left), type_name(right))]

        if len(left) != len(right):
            return [self._record(path, DiscrepancyKind.LENGTH_MISMATCH, str(len(left)), str(len(right)))]

        return [
            (left_item, right_item, path.index(i))
            for i, (left_item, right_item) in enumerate(zip(left, right))
        ]

    def _compare_scalars(self, left: Any, right: Any, path: Path) -> List[Task]:
        # Containers on the right land here too and are reported as value mismatches.
        if scalars_equal(left, right):
            return []
        return [DiscrepancyRecord(
            path=path,
            kind=DiscrepancyKind.VALUE_MISMATCH,
            left_repr=format_value(left),
            right_repr=format_value(right),
            left_type=type_name(left),
            right_type=type_name(right),
        )]

    def _keys(self, mapping: Mapping[str, Any]) -> Iterable[str]:
        if self.sort_keys:
            return sorted(mapping.keys(), key=str)
        return list(mapping.keys())

    def _record(
        self,
        path: Path,
        kind: DiscrepancyKind,
        left_repr: str,
        right_repr: str,
    ) -> DiscrepancyRecord:
        return DiscrepancyRecord(path=path, kind=kind, left_repr=left_repr, right_repr=right_repr)


_default_engine: Optional[DiffEngine] = None


def compare(left: Any, right: Any) -> ComparisonResult:
    """Compare two tree values with a default DiffEngine."""
    global _default_engine
    if _default_engine is None:
        _default_engine = DiffEngine()
    return _default_engine.compare(left, right)
