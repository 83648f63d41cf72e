"""Pytest fixtures for git-repo-info tests"""
import tempfile
from pathlib import Path
import pytest
import git

# Fixed base so commit order never depends on how fast the test runs
BASE_TIMESTAMP = 1_700_000_000


def commit_file(repo, name, content, message, timestamp, parents=None):
    """Write a file, stage it and commit it with a fixed author/commit date.

    Args:
        repo: git.Repo to commit into
        name: Path relative to the working tree
        content: New file content
        message: Commit message
        timestamp: Unix time used for both author and committer dates
        parents: Optional explicit parent commits (for merges)

    Returns:
        The new git.Commit
    """
    path = Path(repo.working_dir) / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    repo.index.add([name])
    date = f"{timestamp} +0000"
    kwargs = {"author_date": date, "commit_date": date}
    if parents is not None:
        kwargs["parent_commits"] = parents
    return repo.index.commit(message, **kwargs)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a configuration dictionary."""
    return {
        'verbose': False,
        'debug': False,
        'commit_limit': 10,
        'search_parents': True,
        'output_format': 'table',
    }


@pytest.fixture
def empty_repo(temp_dir):
    """Create a Git repository without any commits."""
    repo_path = temp_dir / "empty_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    yield repo

    repo.close()


@pytest.fixture
def git_repo(empty_repo):
    """Create a Git repository with a single initial commit."""
    repo = empty_repo
    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit", BASE_TIMESTAMP)

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except Exception:
        pass

    yield repo


@pytest.fixture
def linear_repo(empty_repo):
    """Create a repository with commits C1 (root) -> C2 -> C3 (HEAD).

    Returns:
        Tuple of (repo, [c1, c2, c3])
    """
    repo = empty_repo
    c1 = commit_file(repo, "a.txt", "one\n", "C1", BASE_TIMESTAMP)
    c2 = commit_file(repo, "b.txt", "two\n", "C2", BASE_TIMESTAMP + 60)
    c3 = commit_file(repo, "a.txt", "three\n", "C3", BASE_TIMESTAMP + 120)

    yield repo, [c1, c2, c3]


@pytest.fixture
def merge_repo(empty_repo):
    """Create a diamond: root -> (left, right) -> merge (HEAD).

    Returns:
        Tuple of (repo, dict of name -> commit)
    """
    repo = empty_repo
    root = commit_file(repo, "base.txt", "base\n", "root", BASE_TIMESTAMP)
    left = commit_file(repo, "left.txt", "left\n", "left", BASE_TIMESTAMP + 100)
    right = commit_file(
        repo, "right.txt", "right\n", "right", BASE_TIMESTAMP + 200, parents=[root]
    )
    merge = commit_file(
        repo, "merge.txt", "merge\n", "Merge right into left", BASE_TIMESTAMP + 300,
        parents=[left, right],
    )

    yield repo, {"root": root, "left": left, "right": right, "merge": merge}
