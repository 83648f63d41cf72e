"""Tests for the status and commit models"""
from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from git_repo_info.models import CommitHistory, CommitRecord, StatusSnapshot

WHEN = datetime(2024, 1, 15, 12, 30, tzinfo=timezone.utc)


def make_record(commit_id, parents=(), message="Subject\n\nBody text\n"):
    return CommitRecord(
        id=commit_id,
        author_name="Test User",
        author_email="test@example.com",
        timestamp=WHEN,
        message=message,
        parent_ids=tuple(parents),
    )


class TestStatusSnapshot:
    """Test StatusSnapshot invariants."""

    def test_clean_snapshot(self):
        """Test that an empty snapshot is clean."""
        status = StatusSnapshot()

        assert status.is_dirty is False
        assert status.paths == frozenset()

    def test_any_category_makes_dirty(self):
        """Test that a single path in any set makes the tree dirty."""
        assert StatusSnapshot.from_paths(modified=["a"]).is_dirty
        assert StatusSnapshot.from_paths(added=["a"]).is_dirty
        assert StatusSnapshot.from_paths(deleted=["a"]).is_dirty

    def test_overlapping_paths_rejected(self):
        """Test that a path cannot be in two categories."""
        with pytest.raises(ValueError, match="more than once"):
            StatusSnapshot.from_paths(modified=["a.txt"], deleted=["a.txt"])

    def test_sets_are_frozen(self):
        """Test that plain iterables are stored as frozensets."""
        status = StatusSnapshot(modified={"a"}, added=["b"])

        assert isinstance(status.modified, frozenset)
        assert isinstance(status.added, frozenset)

    def test_snapshot_is_immutable(self):
        """Test that snapshots cannot be mutated after construction."""
        status = StatusSnapshot()
        with pytest.raises(FrozenInstanceError):
            status.modified = frozenset({"x"})

    def test_summary_and_dict(self):
        """Test counts and the sorted dictionary form."""
        status = StatusSnapshot.from_paths(modified=["b", "a"], added=["c"])

        assert status.summary() == {"modified": 2, "added": 1, "deleted": 0}
        assert status.to_dict() == {
            "is_dirty": True,
            "modified": ["a", "b"],
            "added": ["c"],
            "deleted": [],
        }


class TestCommitRecord:
    """Test CommitRecord helpers."""

    def test_summary_is_first_line(self):
        """Test that summary is the first message line."""
        assert make_record("a" * 40).summary == "Subject"

    def test_empty_message_summary(self):
        """Test summary of an empty message."""
        assert make_record("a" * 40, message="").summary == ""

    def test_root_and_merge(self):
        """Test root and merge detection from parents."""
        root = make_record("a" * 40)
        merge = make_record("b" * 40, parents=["c" * 40, "d" * 40])

        assert root.is_root is True
        assert root.is_merge is False
        assert merge.is_merge is True
        assert merge.is_root is False

    def test_to_dict(self):
        """Test the dictionary form of a record."""
        data = make_record("a" * 40, parents=["b" * 40]).to_dict()

        assert data["id"] == "a" * 40
        assert data["parent_ids"] == ["b" * 40]
        assert data["timestamp"] == "2024-01-15 12:30:00 UTC"
        assert data["authored_at"] is None


class TestCommitHistory:
    """Test CommitHistory behaviour."""

    def test_sequence_protocol(self):
        """Test length, iteration and indexing."""
        first, second = make_record("a" * 40, ["b" * 40]), make_record("b" * 40)
        history = CommitHistory([first, second], limit=5, head_id=first.id)

        assert len(history) == 2
        assert list(history) == [first, second]
        assert history[1] is second
        assert history.ids == (first.id, second.id)

    def test_duplicate_ids_rejected(self):
        """Test that a commit cannot appear twice."""
        record = make_record("a" * 40)
        with pytest.raises(ValueError, match="unique"):
            CommitHistory([record, record])

    def test_empty_history(self):
        """Test an empty history."""
        history = CommitHistory()

        assert len(history) == 0
        assert history.to_dict() == {"head_id": None, "limit": 0, "commits": []}
