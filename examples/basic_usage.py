"""
Basic usage example for jsoncompare.

This example demonstrates:
- Comparing in-memory documents
- Loading documents from disk
- Rendering a terminal report and a CSV table
"""

from pathlib import Path

from jsoncompare import DiffEngine, DiscrepancyKind, load_document
from jsoncompare.report import CSVExporter, DiffRenderer

HERE = Path(__file__).parent


def main():
    # 1. Compare two in-memory trees
    engine = DiffEngine()
    result = engine.compare(
        {"a": {"b": [1, {"c": 2}]}},
        {"a": {"b": [1, {"c": 3}]}},
    )
    print(result.summary)
    print()

    # 2. Compare two files
    before = load_document(HERE / "data" / "before.json")
    after = load_document(HERE / "data" / "after.json")
    result = engine.compare(before, after)

    renderer = DiffRenderer(color=True)
    print(renderer.render_terminal(result, "before.json", "after.json"))

    # 3. Inspect records by kind
    for record in result.by_kind(DiscrepancyKind.VALUE_MISMATCH):
        print(f"{record.path_text}: {record.left_repr!r} -> {record.right_repr!r}")

    # 4. Tabular report
    print()
    print(CSVExporter("before.json", "after.json").render(result))


if __name__ == "__main__":
    main()
