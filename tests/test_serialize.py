"""Tests for export serialization module."""

import json

from hunklabel.associations import AssociationStore
from hunklabel.config import SessionConfig
from hunklabel.diffpack import DiffParser, FileDiff, Hunk
from hunklabel.identity import hunk_key
from hunklabel.labels import LabelStore
from hunklabel.serialize import DocumentSerializer


class TestDocumentSerializer:
    """Test DocumentSerializer class."""

    def test_unlabeled_diff_uses_sentinel(self, sample_diff, id_factory):
        """Test every hunk lands under 'undefined' when nothing is labeled."""
        files = DiffParser().parse(sample_diff)
        serializer = DocumentSerializer(SessionConfig())

        document = serializer.serialize(files, AssociationStore(), LabelStore(id_factory))

        assert list(document) == ["undefined"]
        assert [entry["oldFileName"] for entry in document["undefined"]] == ["a/a.py", "a/b.py"]
        assert [len(entry["hunks"]) for entry in document["undefined"]] == [2, 1]

    def test_groups_by_label_and_file(self, sample_diff, id_factory):
        """Test the two-file bugfix scenario."""
        file_a, file_b = DiffParser().parse(sample_diff)
        labels = LabelStore(id_factory)
        associations = AssociationStore()
        bugfix = labels.create("bugfix")
        associations.set(hunk_key(file_a, file_a.hunks[0]), bugfix)
        associations.set(hunk_key(file_b, file_b.hunks[0]), bugfix)

        document = DocumentSerializer(SessionConfig()).serialize(
            [file_a, file_b], associations, labels
        )

        assert list(document) == ["bugfix", "undefined"]
        assert [(e["newFileName"], len(e["hunks"])) for e in document["bugfix"]] == [
            ("b/a.py", 1),
            ("b/b.py", 1),
        ]
        assert document["bugfix"][0]["hunks"][0]["oldStart"] == 1
        assert document["undefined"] == [
            {
                "oldFileName": "a/a.py",
                "newFileName": "b/a.py",
                "hunks": [
                    {
                        "oldStart": 10,
                        "oldLines": 2,
                        "newStart": 10,
                        "newLines": 3,
                        "lines": [" ten", "+ten-and-a-half", " eleven"],
                    }
                ],
            }
        ]

    def test_hunk_order_preserved_within_group(self, id_factory):
        """Test hunks keep traversal order, not coordinate order."""
        later = Hunk(20, 1, 20, 1, ("-z", "+Z"))
        earlier = Hunk(2, 1, 2, 1, ("-a", "+A"))
        file_diff = FileDiff("x", "x", (later, earlier))

        document = DocumentSerializer(SessionConfig()).serialize(
            [file_diff], AssociationStore(), LabelStore(id_factory)
        )

        assert [h["oldStart"] for h in document["undefined"][0]["hunks"]] == [20, 2]

    def test_label_text_is_current(self, id_factory):
        """Test renamed labels export under their new text."""
        hunk = Hunk(1, 1, 1, 1, ("-a", "+b"))
        file_diff = FileDiff("x", "x", (hunk,))
        labels = LabelStore(id_factory)
        associations = AssociationStore()
        label_id = labels.create("old")
        associations.set(hunk_key(file_diff, hunk), label_id)
        labels.rename(label_id, "new")

        document = DocumentSerializer(SessionConfig()).serialize([file_diff], associations, labels)

        assert list(document) == ["new"]

    def test_duplicate_label_text_merged(self, id_factory):
        """Test two labels with the same text share one key without losing hunks."""
        first = Hunk(1, 1, 1, 1, ("-a", "+b"))
        second = Hunk(5, 1, 5, 1, ("-c", "+d"))
        file_diff = FileDiff("x", "x", (first, second))
        labels = LabelStore(id_factory)
        associations = AssociationStore()
        associations.set(hunk_key(file_diff, first), labels.create("same"))
        associations.set(hunk_key(file_diff, second), labels.create("same"))

        document = DocumentSerializer(SessionConfig()).serialize([file_diff], associations, labels)

        assert list(document) == ["same"]
        assert sum(len(entry["hunks"]) for entry in document["same"]) == 2

    def test_dangling_association_is_uncategorized(self, id_factory):
        """Test an association to a missing label exports as uncategorized."""
        hunk = Hunk(1, 1, 1, 1, ("-a", "+b"))
        file_diff = FileDiff("x", "x", (hunk,))
        associations = AssociationStore()
        associations.set(hunk_key(file_diff, hunk), "gone")

        document = DocumentSerializer(SessionConfig()).serialize(
            [file_diff], associations, LabelStore(id_factory)
        )

        assert list(document) == ["undefined"]

    def test_custom_uncategorized_key(self, id_factory):
        """Test the configured sentinel key."""
        hunk = Hunk(1, 1, 1, 1, ("-a", "+b"))
        config = SessionConfig(uncategorized_key="(none)")

        document = DocumentSerializer(config).serialize(
            [FileDiff("x", "x", (hunk,))], AssociationStore(), LabelStore(id_factory)
        )

        assert list(document) == ["(none)"]

    def test_optional_header_fields(self, id_factory):
        """Test index and headers are carried onto synthetic file diffs."""
        hunk = Hunk(1, 1, 1, 1, ("-a", "+b"))
        file_diff = FileDiff("x", "y", (hunk,), index="x", old_header="t1")

        document = DocumentSerializer(SessionConfig()).serialize(
            [file_diff], AssociationStore(), LabelStore(id_factory)
        )
        entry = document["undefined"][0]

        assert entry["index"] == "x"
        assert entry["oldHeader"] == "t1"
        assert "newHeader" not in entry

    def test_files_without_hunks_are_omitted(self, id_factory):
        """Test file diffs with no hunks produce no entry."""
        document = DocumentSerializer(SessionConfig()).serialize(
            [FileDiff("x", "x")], AssociationStore(), LabelStore(id_factory)
        )
        assert document == {}

    def test_to_json_string(self):
        """Test JSON rendering keeps key order and non-ASCII text."""
        serializer = DocumentSerializer(SessionConfig())
        document = {"zeta": [], "älpha": []}

        text = serializer.to_json_string(document)

        assert list(json.loads(text)) == ["zeta", "älpha"]
        assert "älpha" in text
        assert '\n  "zeta"' in text
