"""
CSV export for comparison results.
"""

import csv
import logging
from io import StringIO
from pathlib import Path
from typing import List, Union

from ..diff.models import ComparisonResult
from ..exceptions import ReportError

logger = logging.getLogger(__name__)


class CSVExporter:
    """
    Exports comparison records as a table.

    The header row names the two compared documents; each following row is
    (path, first document value, second document value).
    """

    def __init__(self, first_name: str, second_name: str):
        """
        Initialize the exporter.

        Args:
            first_name: Column label for the first document
            second_name: Column label for the second document
        """
        self.first_name = first_name
        self.second_name = second_name

    def rows(self, result: ComparisonResult) -> List[List[str]]:
        """Header row followed by one row per record."""
        rows = [["Path", self.first_name, self.second_name]]
        rows.extend(list(record.to_row()) for record in result.records)
        return rows

    def render(self, result: ComparisonResult) -> str:
        """Render the table as CSV text."""
        output = StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerows(self.rows(result))
        return output.getvalue()

    def write(self, result: ComparisonResult, path: Union[str, Path]) -> Path:
        """
        Write the table to a CSV file.

        Args:
            result: The ComparisonResult to export
            path: Destination file

        Returns:
            The path written

        Raises:
            ReportError: If the file cannot be written
        """
        path = Path(path)
        try:
            with open(path, "w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f)
                writer.writerows(self.rows(result))
        except OSError as e:
            raise ReportError("Error writing CSV report", path=str(path), cause=e) from e

        logger.info(f"Wrote {result.mismatch_count} rows to {path}")
        return path
