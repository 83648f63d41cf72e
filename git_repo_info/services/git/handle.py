"""Repository handle for git-repo-info."""

import os
from typing import Optional

import git

from git_repo_info.exceptions import (
    NotARepositoryError,
    PathNotFoundError,
    RepositoryUnavailableError,
)
from git_repo_info.logging_config import get_logger

logger = get_logger(__name__)


class RepositoryHandle:
    """Exclusive owner of one opened git.Repo.

    The handle never reopens or changes path. Once closed, every access to
    the repository raises RepositoryUnavailableError.
    """

    def __init__(self, repo: git.Repo, path: Optional[str] = None):
        """Wrap an already opened repository.

        Args:
            repo: Opened GitPython repository
            path: Path the repository was opened from (used in messages)
        """
        self._repo: Optional[git.Repo] = repo
        self.path = path or repo.working_tree_dir or repo.git_dir
        self.git_dir = repo.git_dir
        self.working_tree_dir = repo.working_tree_dir

    @classmethod
    def open(cls, path: str, search_parents: bool = True) -> "RepositoryHandle":
        """Open the repository at ``path``.

        Args:
            path: Repository root, or any path inside one when search_parents is set
            search_parents: Walk up parent directories to find the repository

        Raises:
            PathNotFoundError: If the path does not exist
            NotARepositoryError: If no repository is found
        """
        path = os.fspath(path)
        if not os.path.exists(path):
            raise PathNotFoundError(path)

        try:
            repo = git.Repo(path, search_parent_directories=search_parents)
        except git.exc.NoSuchPathError as e:
            raise PathNotFoundError(path) from e
        except git.exc.InvalidGitRepositoryError as e:
            raise NotARepositoryError(path, search_parents) from e

        logger.debug(f"Opened repository {repo.git_dir} from {path}")
        return cls(repo)

    @property
    def closed(self) -> bool:
        return self._repo is None

    @property
    def repo(self) -> git.Repo:
        """The underlying repository, checked for validity.

        Raises:
            RepositoryUnavailableError: If the handle was closed or the git
                directory is gone
        """
        if self._repo is None:
            raise RepositoryUnavailableError(self.path, "handle is closed")
        if not os.path.isdir(self.git_dir):
            raise RepositoryUnavailableError(self.path, f"git directory {self.git_dir} is missing")
        return self._repo

    def require_working_tree(self) -> str:
        """Return the working tree directory, failing if there is none.

        Raises:
            RepositoryUnavailableError: For bare repositories or a missing
                working directory
        """
        self.repo  # validates the handle itself
        if not self.working_tree_dir:
            raise RepositoryUnavailableError(self.path, "repository has no working tree")
        if not os.path.isdir(self.working_tree_dir):
            raise RepositoryUnavailableError(
                self.path, f"working directory {self.working_tree_dir} is missing"
            )
        return self.working_tree_dir

    def head_commit(self) -> Optional[git.Commit]:
        """Commit HEAD resolves to, or None for an unborn branch."""
        repo = self.repo
        if not repo.head.is_valid():
            return None
        return repo.head.commit

    def active_branch(self) -> Optional[str]:
        """Name of the checked out branch, or None when HEAD is detached."""
        repo = self.repo
        if repo.head.is_detached:
            return None
        return repo.head.reference.name

    def close(self) -> None:
        """Release the repository. Safe to call more than once."""
        if self._repo is None:
            return
        repo, self._repo = self._repo, None
        repo.close()
        logger.debug(f"Closed repository {self.git_dir}")

    def __enter__(self) -> "RepositoryHandle":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<RepositoryHandle {self.path} [{state}]>"
