"""
Diff renderer for displaying document comparisons.

Supports terminal text and JSON output.
"""

import json
from io import StringIO
from typing import Optional

from ..diff.models import ComparisonResult, DiscrepancyKind, DiscrepancyRecord

_KIND_COLORS = {
    DiscrepancyKind.MISSING_IN_SECOND: "red",
    DiscrepancyKind.MISSING_IN_FIRST: "green",
    DiscrepancyKind.TYPE_MISMATCH: "magenta",
    DiscrepancyKind.LENGTH_MISMATCH: "blue",
    DiscrepancyKind.VALUE_MISMATCH: "yellow",
}

_KIND_PREFIXES = {
    DiscrepancyKind.MISSING_IN_SECOND: "-",
    DiscrepancyKind.MISSING_IN_FIRST: "+",
    DiscrepancyKind.TYPE_MISMATCH: "!",
    DiscrepancyKind.LENGTH_MISMATCH: "#",
    DiscrepancyKind.VALUE_MISMATCH: "~",
}


class DiffRenderer:
    """
    Renders comparison results in various formats.
    """

    def __init__(self, color: bool = True):
        """
        Initialize the renderer.

        Args:
            color: Whether to use colored output (terminal)
        """
        self.color = color

    def render_summary(self, result: ComparisonResult) -> str:
        """Plain summary, exactly as built by the engine."""
        return result.summary

    def render_terminal(
        self,
        result: ComparisonResult,
        first_name: Optional[str] = None,
        second_name: Optional[str] = None,
    ) -> str:
        """
        Render a comparison for terminal output.

        Args:
            result: The ComparisonResult to render
            first_name: Label for the first document
            second_name: Label for the second document

        Returns:
            Formatted string for terminal display
        """
        output = StringIO()

        if first_name or second_name:
            output.write(f"First:  {first_name or '-'}\n")
            output.write(f"Second: {second_name or '-'}\n\n")

        if result.identical:
            output.write(self._color(result.summary, "green") + "\n")
            return output.getvalue()

        output.write(result.summary.splitlines()[0] + "\n")
        for record in result.records:
            self._render_record(output, record)

        output.write("\n" + "-" * 40 + "\n")
        output.write(f"Total mismatches: {result.mismatch_count}\n")
        for kind, count in result.counts_by_kind().items():
            if count:
                output.write(f"  {kind}: {count}\n")

        return output.getvalue()

    def _render_record(self, output: StringIO, record: DiscrepancyRecord) -> None:
        """Render a single discrepancy line."""
        prefix = _KIND_PREFIXES[record.kind]
        line = f"{prefix} {record.message}"
        output.write(self._color(line, _KIND_COLORS[record.kind]) + "\n")

    def _color(self, text: str, color: str) -> str:
        """Apply ANSI color to text."""
        if not self.color:
            return text

        colors = {
            "red": "\033[91m",
            "green": "\033[92m",
            "yellow": "\033[93m",
            "blue": "\033[94m",
            "magenta": "\033[95m",
            "reset": "\033[0m",
        }

        return f"{colors.get(color, '')}{text}{colors['reset']}"

    def render_json(
        self,
        result: ComparisonResult,
        first_name: Optional[str] = None,
        second_name: Optional[str] = None,
    ) -> str:
        """
        Render a comparison as JSON.

        Args:
            result: The ComparisonResult to render
            first_name: Label for the first document
            second_name: Label for the second document

        Returns:
            Indented JSON string
        """
        data = {
            "first": first_name,
            "second": second_name,
        }
        data.update(result.to_dict())
        return json.dumps(data, indent=2)
