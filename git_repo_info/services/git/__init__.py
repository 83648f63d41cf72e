"""Git-related services for git-repo-info."""

from .handle import RepositoryHandle
from .status_inspector import StatusInspector
from .history_reader import HistoryReader

__all__ = [
    "RepositoryHandle",
    "StatusInspector",
    "HistoryReader",
]
