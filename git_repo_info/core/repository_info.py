"""Core functionality for git-repo-info"""

from typing import Optional, Union

from git_repo_info.config import Config
from git_repo_info.exceptions import RepositoryUnavailableError
from git_repo_info.logging_config import get_logger
from git_repo_info.models.commit import CommitHistory
from git_repo_info.models.status import StatusSnapshot
from git_repo_info.services.git import HistoryReader, RepositoryHandle, StatusInspector

logger = get_logger(__name__)


class RepositoryInfo:
    """Status and recent history of one git repository.

    The repository is opened once and queried through chainable calls::

        with RepositoryInfo.open("/path/to/repo") as info:
            info.status_info().commit_info()
            print(info.status.is_dirty, [c.id for c in info.commits])

    Each query recomputes from disk and replaces only its own result.
    """

    def __init__(self, repo_path: str, config: Union[Config, dict, None] = None):
        """Open the repository.

        Args:
            repo_path: Repository root, or a path inside one when
                ``config.search_parents`` is set
            config: Configuration dict or Config object

        Raises:
            PathNotFoundError: If repo_path does not exist
            NotARepositoryError: If no repository is found at repo_path
        """
        if config is None:
            config = Config()
        elif isinstance(config, dict):
            config = Config.from_dict(config)
        self.config = config
        self.repo_path = repo_path

        self.status: Optional[StatusSnapshot] = None
        self.commits: Optional[CommitHistory] = None

        self.status_inspector = StatusInspector()
        self.history_reader = HistoryReader(default_limit=config.commit_limit)

        # Opened last so a failure above cannot leak the repository
        self._handle = RepositoryHandle.open(repo_path, search_parents=config.search_parents)
        logger.info(f"Inspecting repository at {self.path}")

    @classmethod
    def open(cls, repo_path: str, config: Union[Config, dict, None] = None) -> "RepositoryInfo":
        """Open the repository at repo_path. See ``__init__``."""
        return cls(repo_path, config)

    @property
    def path(self) -> str:
        """Working tree root of the repository (git dir for bare repositories)."""
        return self._handle.path

    @property
    def closed(self) -> bool:
        return self._handle.closed

    @property
    def branch(self) -> Optional[str]:
        """Checked out branch name, or None when HEAD is detached."""
        return self._handle.active_branch()

    @property
    def head_id(self) -> Optional[str]:
        """Full hash HEAD resolves to, or None before the first commit."""
        commit = self._handle.head_commit()
        return commit.hexsha if commit is not None else None

    def status_info(self) -> "RepositoryInfo":
        """Recompute working tree status and store it in ``status``.

        Returns:
            self, so queries can be chained

        Raises:
            RepositoryUnavailableError: If the repository can no longer be read
            CorruptIndexError: If the index file cannot be parsed
        """
        self.status = self.status_inspector.compute(self._handle)
        logger.debug(f"Status of {self.path}: dirty={self.status.is_dirty}")
        return self

    def commit_info(self, limit: Optional[int] = None) -> "RepositoryInfo":
        """Read recent commits and store them in ``commits``.

        Args:
            limit: Number of commits; defaults to ``config.commit_limit``

        Returns:
            self, so queries can be chained

        Raises:
            RepositoryUnavailableError: If the repository can no longer be read
            EmptyHistoryError: If there are no commits and limit is positive
        """
        self.commits = self.history_reader.read(self._handle, limit)
        logger.debug(f"Read {len(self.commits)} commits from {self.path}")
        return self

    def to_dict(self) -> dict:
        """Convert the gathered information to a JSON-friendly dictionary."""
        if self.closed:
            raise RepositoryUnavailableError(self.path, "handle is closed")
        return {
            "path": self.path,
            "branch": self.branch,
            "head_id": self.head_id,
            "status": self.status.to_dict() if self.status is not None else None,
            "commits": self.commits.to_dict() if self.commits is not None else None,
        }

    def close(self) -> None:
        """Release the repository handle."""
        self._handle.close()

    def __enter__(self) -> "RepositoryInfo":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"<RepositoryInfo {self.path} status={'set' if self.status is not None else 'unset'} "
            f"commits={len(self.commits) if self.commits is not None else 'unset'}>"
        )
