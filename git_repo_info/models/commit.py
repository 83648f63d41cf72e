"""Commit history models"""
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Optional, Tuple

from git_repo_info.formatters.date import format_timestamp


@dataclass(frozen=True)
class CommitRecord:
    """Metadata of a single commit."""
    id: str  # Full hex hash, never abbreviated
    author_name: str
    author_email: str
    timestamp: datetime  # Committer time in UTC, the order key of the walk
    message: str
    parent_ids: Tuple[str, ...] = ()
    committer_name: Optional[str] = None
    committer_email: Optional[str] = None
    authored_at: Optional[datetime] = None
    tree_id: Optional[str] = None

    @property
    def summary(self) -> str:
        """First line of the commit message."""
        lines = self.message.strip().splitlines()
        return lines[0] if lines else ""

    @property
    def is_merge(self) -> bool:
        return len(self.parent_ids) > 1

    @property
    def is_root(self) -> bool:
        return not self.parent_ids

    def to_dict(self) -> dict:
        """Convert record to a JSON-friendly dictionary."""
        return {
            "id": self.id,
            "author_name": self.author_name,
            "author_email": self.author_email,
            "committer_name": self.committer_name,
            "committer_email": self.committer_email,
            "timestamp": format_timestamp(self.timestamp),
            "authored_at": format_timestamp(self.authored_at) if self.authored_at else None,
            "message": self.message,
            "parent_ids": list(self.parent_ids),
            "tree_id": self.tree_id,
        }


@dataclass(frozen=True)
class CommitHistory:
    """Newest-first window of commits reachable from HEAD."""
    commits: Tuple[CommitRecord, ...] = ()
    limit: int = 0
    head_id: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.commits, tuple):
            object.__setattr__(self, "commits", tuple(self.commits))

        if len({commit.id for commit in self.commits}) != len(self.commits):
            raise ValueError("Commit ids must be unique within a history")

    def __len__(self) -> int:
        return len(self.commits)

    def __iter__(self) -> Iterator[CommitRecord]:
        return iter(self.commits)

    def __getitem__(self, index):
        return self.commits[index]

    @property
    def ids(self) -> Tuple[str, ...]:
        """Commit ids in history order."""
        return tuple(commit.id for commit in self.commits)

    def to_dict(self) -> dict:
        """Convert history to a JSON-friendly dictionary."""
        return {
            "head_id": self.head_id,
            "limit": self.limit,
            "commits": [commit.to_dict() for commit in self.commits],
        }
