"""
Tests for the diff engine.
"""

import pytest

from jsoncompare.core.path import Path
from jsoncompare.diff.engine import DiffEngine, compare
from jsoncompare.diff.models import ComparisonResult, DiscrepancyKind, DiscrepancyRecord


def paths(result):
    return [r.path_text for r in result.records]


class TestIdentity:
    """Comparing a document with itself."""

    @pytest.mark.parametrize(
        "value",
        [
            {},
            [],
            None,
            0,
            "",
            {"a": [1, {"b": None}], "c": "text", "d": True, "e": 2.5},
            [[[]], {"x": {}}],
        ],
    )
    def test_identical_documents(self, value):
        """Test that a document equals itself."""
        result = compare(value, value)

        assert result.mismatch_count == 0
        assert result.records == []
        assert result.identical
        assert result.summary == "JSON files are identical"

    def test_equal_but_distinct_objects(self):
        """Test that structurally equal copies compare equal."""
        left = {"a": {"b": [1, 2, {"c": "x"}]}}
        right = {"a": {"b": [1, 2, {"c": "x"}]}}

        assert compare(left, right).mismatch_count == 0


class TestObjects:
    """Tests for object comparison."""

    def test_missing_keys_both_directions(self):
        """Test keys missing on either side."""
        result = compare({"x": 1}, {"y": 1})

        assert result.mismatch_count == 2
        assert len(result.records) == 2

        missing_second = result.by_kind(DiscrepancyKind.MISSING_IN_SECOND)
        missing_first = result.by_kind(DiscrepancyKind.MISSING_IN_FIRST)
        assert [r.path_text for r in missing_second] == ["x"]
        assert [r.path_text for r in missing_first] == ["y"]

    def test_missing_key_reprs(self):
        """Test the present side is rendered and the absent side is empty."""
        result = compare({"x": 1}, {"y": "v"})

        missing_second = result.by_kind(DiscrepancyKind.MISSING_IN_SECOND)[0]
        missing_first = result.by_kind(DiscrepancyKind.MISSING_IN_FIRST)[0]
        assert (missing_second.left_repr, missing_second.right_repr) == ("1", "")
        assert (missing_first.left_repr, missing_first.right_repr) == ("", "v")

    def test_missing_key_is_not_descended(self):
        """Test a missing subtree counts once."""
        result = compare({"a": {"b": {"c": 1, "d": 2}}}, {})

        assert result.mismatch_count == 1
        assert result.records[0].kind == DiscrepancyKind.MISSING_IN_SECOND
        assert result.records[0].path_text == "a"

    def test_first_side_pass_precedes_second_side_pass(self):
        """Test records from left keys come before right-only keys."""
        result = compare({"b": 1, "a": 1, "same": 1}, {"same": 2, "z": 1, "c": 1})

        kinds = [r.kind for r in result.records]
        assert kinds == [
            DiscrepancyKind.MISSING_IN_SECOND,
            DiscrepancyKind.MISSING_IN_SECOND,
            DiscrepancyKind.VALUE_MISMATCH,
            DiscrepancyKind.MISSING_IN_FIRST,
            DiscrepancyKind.MISSING_IN_FIRST,
        ]
        assert paths(result) == ["a", "b", "same", "c", "z"]

    def test_key_order_independence(self):
        """Test permuting key insertion order does not change findings."""
        left_a = {"a": 1, "b": {"x": 1, "y": 2}, "c": [1]}
        left_b = {"c": [1], "b": {"y": 2, "x": 1}, "a": 1}
        right = {"b": {"x": 2}, "a": "1", "d": None}

        for engine in (DiffEngine(sort_keys=True), DiffEngine(sort_keys=False)):
            first = engine.compare(left_a, right)
            second = engine.compare(left_b, right)

            assert first.mismatch_count == second.mismatch_count
            assert set(paths(first)) == set(paths(second))

    def test_unsorted_uses_insertion_order(self):
        """Test sort_keys=False follows mapping order."""
        engine = DiffEngine(sort_keys=False)
        result = engine.compare({"b": 1, "a": 1}, {})

        assert paths(result) == ["b", "a"]

    def test_sorted_is_default(self):
        """Test keys are visited in sorted order by default."""
        result = DiffEngine().compare({"b": 1, "a": 1}, {})

        assert paths(result) == ["a", "b"]


class TestArrays:
    """Tests for array comparison."""

    def test_length_mismatch(self):
        """Test length mismatch is reported once at the array."""
        result = compare([1, 2, 3], [1, 2])

        assert result.mismatch_count == 1
        record = result.records[0]
        assert record.kind == DiscrepancyKind.LENGTH_MISMATCH
        assert record.path_text == ""
        assert (record.left_repr, record.right_repr) == ("3", "2")
        assert result.by_kind(DiscrepancyKind.VALUE_MISMATCH) == []

    def test_length_mismatch_skips_elements(self):
        """Test differing elements are not reported when lengths differ."""
        result = compare({"arr": [1, 2, 3]}, {"arr": [9]})

        assert result.mismatch_count == 1
        assert result.records[0].path_text == "arr"

    def test_positional_comparison(self):
        """Test elements are compared by index, not aligned."""
        result = compare([1, 2, 3], [3, 2, 1])

        assert result.mismatch_count == 2
        assert paths(result) == ["[0]", "[2]"]

    def test_nested_index_paths(self):
        """Test index segments inside objects."""
        result = compare({"arr": [{"name": "a"}]}, {"arr": [{"name": "b"}]})

        assert paths(result) == ["arr[0].name"]

    def test_tuple_counts_as_array(self):
        """Test tuples are treated like lists."""
        assert compare((1, 2), [1, 2]).identical


class TestTypeMismatch:
    """Tests for shape mismatches."""

    def test_object_vs_array_short_circuits(self):
        """Test a type mismatch is reported once for the subtree."""
        result = compare({"a": {"x": 1}}, {"a": [1, 2, 3]})

        assert result.mismatch_count == 1
        record = result.records[0]
        assert record.kind == DiscrepancyKind.TYPE_MISMATCH
        assert record.path_text == "a"
        assert (record.left_repr, record.right_repr) == ("object", "array")

    def test_array_vs_scalar(self):
        """Test array on the left against a scalar."""
        result = compare([1], "text")

        assert result.mismatch_count == 1
        assert result.records[0].kind == DiscrepancyKind.TYPE_MISMATCH
        assert result.records[0].right_repr == "string"

    def test_object_vs_null(self):
        """Test object on the left against null."""
        result = compare({"a": 1}, None)

        assert result.records[0].kind == DiscrepancyKind.TYPE_MISMATCH
        assert result.records[0].right_repr == "null"

    def test_scalar_vs_container_is_value_mismatch(self):
        """Test scalar on the left against a container."""
        result = compare({"a": 1}, {"a": {"b": 1}})

        assert result.mismatch_count == 1
        record = result.records[0]
        assert record.kind == DiscrepancyKind.VALUE_MISMATCH
        assert record.left_repr == "1"
        assert record.right_repr == '{"b":1}'

    def test_null_vs_array_is_value_mismatch(self):
        """Test null on the left against an array."""
        result = compare(None, [1, 2])

        assert result.records[0].kind == DiscrepancyKind.VALUE_MISMATCH
        assert result.records[0].right_repr == "[1,2]"


class TestScalars:
    """Tests for scalar equality."""

    def test_nested_value_mismatch(self):
        """Test path and reprs of a nested value mismatch."""
        left = {"a": {"b": [1, {"c": 2}]}}
        right = {"a": {"b": [1, {"c": 3}]}}

        result = compare(left, right)

        assert result.mismatch_count == 1
        record = result.records[0]
        assert record.path_text == "a.b[1].c"
        assert record.kind == DiscrepancyKind.VALUE_MISMATCH
        assert record.left_repr == "2"
        assert record.right_repr == "3"

    @pytest.mark.parametrize(
        "left, right",
        [
            (1, "1"),
            (True, 1),
            (0, False),
            (None, 0),
            (None, ""),
            ("true", True),
            (1.5, 1),
        ],
    )
    def test_type_sensitive_inequality(self, left, right):
        """Test values of different types never compare equal."""
        result = compare(left, right)

        assert result.mismatch_count == 1
        assert result.records[0].kind == DiscrepancyKind.VALUE_MISMATCH

    def test_int_and_float_are_one_number_type(self):
        """Test JSON numbers compare numerically."""
        assert compare(1, 1.0).identical
        assert compare({"n": 2.0}, {"n": 2}).identical

    def test_value_rendering(self):
        """Test booleans, null and floats are rendered in JSON spelling."""
        result = compare([True, None, 2.5], [False, "x", 3.0])

        rows = [(r.left_repr, r.right_repr) for r in result.records]
        assert rows == [("true", "false"), ("null", "x"), ("2.5", "3")]


class TestSymmetry:
    """Comparing in both directions."""

    def test_swapped_arguments(self):
        """Test detection is symmetric with kinds and reprs swapped."""
        a = {"x": 1, "shared": {"v": [1, 2]}, "n": "s", "t": {"k": 1}}
        b = {"y": 2, "shared": {"v": [1, 3]}, "n": 4, "t": [1]}

        forward = compare(a, b)
        backward = compare(b, a)

        assert forward.mismatch_count == backward.mismatch_count
        assert set(paths(forward)) == set(paths(backward))

        swap = {
            DiscrepancyKind.MISSING_IN_SECOND: DiscrepancyKind.MISSING_IN_FIRST,
            DiscrepancyKind.MISSING_IN_FIRST: DiscrepancyKind.MISSING_IN_SECOND,
        }
        backward_by_path = {r.path_text: r for r in backward.records}
        for record in forward.records:
            other = backward_by_path[record.path_text]
            assert other.kind == swap.get(record.kind, record.kind)
            if record.kind != DiscrepancyKind.TYPE_MISMATCH:
                assert (other.left_repr, other.right_repr) == (record.right_repr, record.left_repr)


class TestComparisonResult:
    """Tests for ComparisonResult."""

    def test_count_matches_records(self):
        """Test every counted mismatch has a record."""
        left = {"a": [1, 2], "b": {"c": 1}, "d": 1, "e": "x"}
        right = {"a": [1], "b": [], "f": 1, "e": "y"}

        result = compare(left, right)

        assert result.mismatch_count == len(result.records) == 5

    def test_summary_lines(self):
        """Test the summary header and one line per record."""
        result = compare({"x": 1, "arr": [1, 2]}, {"y": 1, "arr": [1]})

        lines = result.summary.split("\n")
        assert lines[0] == "Differences found:"
        assert lines[1:] == [
            "Length mismatch at arr: 2 != 1",
            "Key 'x' missing in second document at x",
            "Key 'y' missing in first document at y",
        ]

    def test_root_message(self):
        """Test the root path is named in messages."""
        result = compare("a", "b")

        assert result.records[0].path_text == ""
        assert result.records[0].message == 'Value mismatch at <root>: "a" != "b"'

    def test_type_mismatch_message(self):
        """Test the type mismatch message."""
        result = compare({"a": {}}, {"a": 1})

        assert result.records[0].message == "Type mismatch at a: expected object got number"

    def test_to_dict(self):
        """Test result serialization."""
        result = compare({"x": 1}, {"x": 2})

        data = result.to_dict()

        assert data["identical"] is False
        assert data["mismatch_count"] == 1
        assert data["counts"]["value_mismatch"] == 1
        assert data["records"][0] == {
            "path": "x",
            "kind": "value_mismatch",
            "left": "1",
            "right": "2",
            "message": "Value mismatch at x: 1 != 2",
        }

    def test_add_keeps_count_in_step(self):
        """Test add() appends and counts together."""
        result = ComparisonResult()
        result.add(DiscrepancyRecord(path=Path(("a",)), kind=DiscrepancyKind.VALUE_MISMATCH))
        result.finish()

        assert result.mismatch_count == 1
        assert result.summary.startswith("Differences found:")

    def test_records_are_immutable(self):
        """Test records cannot be modified."""
        record = compare(1, 2).records[0]

        with pytest.raises(AttributeError):
            record.left_repr = "changed"

    def test_string_values_quoted_in_message(self):
        """Test strings are quoted in messages but not in reprs."""
        result = compare({"x": "1"}, {"x": 1})

        record = result.records[0]
        assert (record.left_repr, record.right_repr) == ("1", "1")
        assert record.message == 'Value mismatch at x: "1" != 1'


def nest(depth, leaf):
    """Build {"a": {"a": ... leaf}} iteratively."""
    value = leaf
    for _ in range(depth):
        value = {"a": value}
    return value


def nest_mixed(depth, leaf):
    """Alternate objects and single-element arrays."""
    value = leaf
    for i in range(depth):
        value = [value] if i % 2 else {"k": value}
    return value


class TestDeepDocuments:
    """Tests for documents deeper than the interpreter's recursion limit."""

    def test_parsed_deep_document_identity(self):
        """Test a deeply nested parsed document compares equal to itself."""
        from jsoncompare.core.loader import parse_document

        text = '{"a":' * 600 + "1" + "}" * 600
        result = compare(parse_document(text), parse_document(text))

        assert result.identical

    def test_deep_identity(self):
        """Test identity well past the recursion limit."""
        result = compare(nest(5000, 1), nest(5000, 1))

        assert result.mismatch_count == 0

    def test_deep_value_mismatch(self):
        """Test a mismatch at the bottom of a deep document."""
        result = compare(nest(5000, 1), nest(5000, 2))

        assert result.mismatch_count == 1
        record = result.records[0]
        assert record.kind == DiscrepancyKind.VALUE_MISMATCH
        assert len(record.path) == 5000
        assert record.path_text == ".".join(["a"] * 5000)

    def test_deep_mixed_paths(self):
        """Test index and key segments at depth."""
        result = compare(nest_mixed(3000, "x"), nest_mixed(3000, "y"))

        assert result.mismatch_count == 1
        assert result.records[0].path_text.startswith("[0].k[0].k")

    def test_deep_missing_subtree(self):
        """Test a missing deep subtree counts once."""
        result = compare({"a": nest(5000, 1), "b": 1}, {"b": 1})

        assert result.mismatch_count == 1
        assert result.records[0].kind == DiscrepancyKind.MISSING_IN_SECOND
        assert result.records[0].path_text == "a"


class TestTraversalOrder:
    """Records follow depth-first pre-order."""

    def test_nested_order(self):
        """Test nested records precede later siblings, right-only keys come last."""
        left = {"a": {"p": 1, "q": 1}, "b": [1, 2], "c": 1}
        right = {"a": {"q": 2, "r": 1}, "b": [1, 3], "d": 1}

        result = compare(left, right)

        assert paths(result) == ["a.p", "a.q", "a.r", "b[1]", "c", "d"]
        assert [r.kind for r in result.records] == [
            DiscrepancyKind.MISSING_IN_SECOND,
            DiscrepancyKind.VALUE_MISMATCH,
            DiscrepancyKind.MISSING_IN_FIRST,
            DiscrepancyKind.VALUE_MISMATCH,
            DiscrepancyKind.MISSING_IN_SECOND,
            DiscrepancyKind.MISSING_IN_FIRST,
        ]

    def test_unsorted_nested_order(self):
        """Test insertion order is kept at every level when unsorted."""
        left = {"z": {"y": 1, "x": 1}, "m": 1}

        result = DiffEngine(sort_keys=False).compare(left, {"z": {}, "n": 1})

        assert paths(result) == ["z.y", "z.x", "m", "n"]
