"""Data models for git-repo-info."""

from .commit import CommitHistory, CommitRecord
from .status import StatusSnapshot

__all__ = ["CommitHistory", "CommitRecord", "StatusSnapshot"]
