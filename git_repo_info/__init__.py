"""
git-repo-info - Working tree status and recent history of a git repository
"""

from .__version__ import __version__
from .core import RepositoryInfo
from .exceptions import (
    RepoInfoError,
    PathNotFoundError,
    NotARepositoryError,
    RepositoryUnavailableError,
    CorruptIndexError,
    EmptyHistoryError,
)
from .models import CommitHistory, CommitRecord, StatusSnapshot

__all__ = [
    "RepositoryInfo",
    "StatusSnapshot",
    "CommitHistory",
    "CommitRecord",
    "RepoInfoError",
    "PathNotFoundError",
    "NotARepositoryError",
    "RepositoryUnavailableError",
    "CorruptIndexError",
    "EmptyHistoryError",
    "__version__",
]
