"""Tests for labeled document import."""

import json

import pytest

from hunklabel.diffpack import FileDiff, Hunk
from hunklabel.document import ExportedFileDiff, parse_document
from hunklabel.errors import DocumentParseError, ParseError


def _file_diff(name: str, *hunks: dict) -> dict:
    return {"oldFileName": f"a/{name}", "newFileName": f"b/{name}", "hunks": list(hunks)}


def _hunk(start: int, *lines: str) -> dict:
    return {"oldStart": start, "oldLines": 1, "newStart": start, "newLines": 1, "lines": list(lines)}


class TestParseDocument:
    """Test parse_document function."""

    def test_groups_in_key_order(self):
        """Test groups follow the document's key order."""
        text = json.dumps(
            {
                "bugfix": [_file_diff("a.py", _hunk(1, "-a", "+b"))],
                "undefined": [_file_diff("b.py", _hunk(4, "-c", "+d"))],
            }
        )
        groups = parse_document(text)

        assert [group.label_text for group in groups] == ["bugfix", "undefined"]
        assert groups[0].file_diffs == (
            FileDiff("a/a.py", "b/a.py", (Hunk(1, 1, 1, 1, ("-a", "+b")),)),
        )

    def test_optional_header_fields(self):
        """Test index and header fields are read when present."""
        entry = _file_diff("a.py", _hunk(1, "-a", "+b"))
        entry.update({"index": "a.py", "oldHeader": "t1", "newHeader": "t2"})
        file_diff = parse_document(json.dumps({"x": [entry]}))[0].file_diffs[0]

        assert (file_diff.index, file_diff.old_header, file_diff.new_header) == ("a.py", "t1", "t2")

    def test_unknown_fields_ignored(self):
        """Test extra keys written by other tools are accepted."""
        entry = _file_diff("a.py", dict(_hunk(1, "-a", "+b"), linedelimiters=["\n", "\n"]))
        groups = parse_document(json.dumps({"x": [entry]}))

        assert len(groups[0].file_diffs[0].hunks) == 1

    def test_empty_document(self):
        """Test an empty object."""
        assert parse_document("{}") == ()

    def test_invalid_json(self):
        """Test text that is not JSON."""
        with pytest.raises(DocumentParseError, match="not valid JSON") as exc_info:
            parse_document("{not json")
        assert exc_info.value.code == "DOCUMENT_INVALID"

    def test_top_level_must_be_object(self):
        """Test a top-level list is rejected."""
        with pytest.raises(ParseError, match="must be an object"):
            parse_document("[]")

    def test_missing_field(self):
        """Test a file diff without hunks."""
        text = json.dumps({"x": [{"oldFileName": "a", "newFileName": "b"}]})
        with pytest.raises(DocumentParseError) as exc_info:
            parse_document(text)

        locations = [error["location"] for error in exc_info.value.details["errors"]]
        assert any("hunks" in location for location in locations)

    def test_wrong_types_rejected(self):
        """Test strings and booleans are not accepted as line numbers."""
        for bad in ("1", True, None, 1.5):
            hunk = _hunk(1, "-a", "+b")
            hunk["oldStart"] = bad
            with pytest.raises(DocumentParseError):
                parse_document(json.dumps({"x": [_file_diff("a.py", hunk)]}))

    def test_lines_must_be_strings(self):
        """Test non-string hunk lines."""
        hunk = _hunk(1, "-a")
        hunk["lines"].append(3)
        with pytest.raises(DocumentParseError):
            parse_document(json.dumps({"x": [_file_diff("a.py", hunk)]}))

    def test_group_value_must_be_list(self):
        """Test a label mapped to an object instead of a list."""
        with pytest.raises(DocumentParseError):
            parse_document(json.dumps({"x": _file_diff("a.py")}))

    def test_identical_input_is_memoized(self):
        """Test cached parse results."""
        text = json.dumps({"x": [_file_diff("a.py", _hunk(1, "-a", "+b"))]})
        assert parse_document(text) is parse_document(text)


class TestExportedFileDiff:
    """Test ExportedFileDiff model."""

    def test_populate_by_field_name(self):
        """Test constructing the model with Python field names."""
        model = ExportedFileDiff(old_file_name="a", new_file_name="b", hunks=[])
        assert model.to_file_diff() == FileDiff("a", "b")
