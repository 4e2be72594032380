"""
Data models for document comparison results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from ..core.path import Path

IDENTICAL_SUMMARY = "JSON files are identical"
DIFFERENCES_HEADER = "Differences found:"


class DiscrepancyKind(Enum):
    """Kinds of divergence between two documents."""
    MISSING_IN_SECOND = "missing_in_second"
    MISSING_IN_FIRST = "missing_in_first"
    TYPE_MISMATCH = "type_mismatch"
    LENGTH_MISMATCH = "length_mismatch"
    VALUE_MISMATCH = "value_mismatch"


@dataclass(frozen=True)
class DiscrepancyRecord:
    """A single divergence found at a path."""
    path: Path
    kind: DiscrepancyKind
    left_repr: str = ""
    right_repr: str = ""
    # JSON type names of the compared values; set for value mismatches.
    left_type: str = ""
    right_type: str = ""

    @property
    def path_text(self) -> str:
        return self.path.render()

    def _shown(self, text: str, type_name: str) -> str:
        return f'"{text}"' if type_name == "string" else text

    @property
    def message(self) -> str:
        """Human-readable description of this divergence."""
        where = self.path_text or "<root>"
        if self.kind == DiscrepancyKind.MISSING_IN_SECOND:
            return f"Key '{self.path.segments[-1]}' missing in second document at {where}"
        if self.kind == DiscrepancyKind.MISSING_IN_FIRST:
            return f"Key '{self.path.segments[-1]}' missing in first document at {where}"
        if self.kind == DiscrepancyKind.TYPE_MISMATCH:
            return f"Type mismatch at {where}: expected {self.left_repr} got {self.right_repr}"
        if self.kind == DiscrepancyKind.LENGTH_MISMATCH:
            return f"Length mismatch at {where}: {self.left_repr} != {self.right_repr}"
        left = self._shown(self.left_repr, self.left_type)
        right = self._shown(self.right_repr, self.right_type)
        return f"Value mismatch at {where}: {left} != {right}"

    def to_row(self) -> Tuple[str, str, str]:
        """Tabular form: (path, left value, right value)."""
        return (self.path_text, self.left_repr, self.right_repr)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "path": self.path_text,
            "kind": self.kind.value,
            "left": self.left_repr,
            "right": self.right_repr,
            "message": self.message,
        }


@dataclass
class ComparisonResult:
    """
    Outcome of comparing two documents.

    Records are kept in traversal order. The mismatch count only moves
    through add(), so it always equals the number of records.
    """
    records: List[DiscrepancyRecord] = field(default_factory=list)
    mismatch_count: int = 0
    summary: str = IDENTICAL_SUMMARY

    def add(self, record: DiscrepancyRecord) -> None:
        """Count a divergence and keep its record."""
        self.records.append(record)
        self.mismatch_count += 1

    def finish(self) -> "ComparisonResult":
        """Build the summary once traversal is complete."""
        if not self.records:
            self.summary = IDENTICAL_SUMMARY
        else:
            lines = [DIFFERENCES_HEADER]
            lines.extend(record.message for record in self.records)
            self.summary = "\n".join(lines)
        return self

    @property
    def identical(self) -> bool:
        return self.mismatch_count == 0

    def by_kind(self, kind: DiscrepancyKind) -> List[DiscrepancyRecord]:
        """Records of one kind, in traversal order."""
        return [r for r in self.records if r.kind == kind]

    def counts_by_kind(self) -> Dict[str, int]:
        counts = {kind.value: 0 for kind in DiscrepancyKind}
        for record in self.records:
            counts[record.kind.value] += 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "identical": self.identical,
            "mismatch_count": self.mismatch_count,
            "counts": self.counts_by_kind(),
            "records": [r.to_dict() for r in self.records],
            "summary": self.summary,
        }
