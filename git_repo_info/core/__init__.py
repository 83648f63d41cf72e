"""Core functionality for git-repo-info."""

from .repository_info import RepositoryInfo

__all__ = ["RepositoryInfo"]
