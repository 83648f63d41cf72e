"""Custom exceptions for git-repo-info"""

from typing import Optional


class RepoInfoError(Exception):
    """Base exception for all git-repo-info errors."""
    pass


class PathNotFoundError(RepoInfoError):
    """Exception raised when the requested path does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Path '{path}' does not exist")


class NotARepositoryError(RepoInfoError):
    """Exception raised when no git repository is found at a path."""

    def __init__(self, path: str, search_parents: bool = True):
        self.path = path
        self.search_parents = search_parents

        error_msg = f"No git repository found at '{path}'"
        if search_parents:
            error_msg += " or any of its parent directories"

        super().__init__(error_msg)


class RepositoryUnavailableError(RepoInfoError):
    """Exception raised when an opened repository can no longer be read."""

    def __init__(self, path: Optional[str], message: Optional[str] = None):
        self.path = path
        self.message = message

        error_msg = "Repository is unavailable"
        if path:
            error_msg = f"Repository at '{path}' is unavailable"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class CorruptIndexError(RepoInfoError):
    """Exception raised when the index file cannot be parsed."""

    def __init__(self, path: Optional[str], message: Optional[str] = None):
        self.path = path
        self.message = message

        error_msg = "Index file is corrupt"
        if path:
            error_msg += f" in repository '{path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class EmptyHistoryError(RepoInfoError):
    """Exception raised when HEAD does not resolve to any commit."""

    def __init__(self, path: Optional[str] = None):
        self.path = path

        error_msg = "HEAD does not point to any commit"
        if path:
            error_msg = f"Repository '{path}' has no commits: {error_msg}"

        super().__init__(error_msg)
