"""Tests for the command-line interface and display service"""
import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from git_repo_info.cli import main, parse_args
from git_repo_info.cli.main import resolve_repo_path
from git_repo_info.constants import REPO_PATH_ENV_VAR
from git_repo_info.core import RepositoryInfo
from git_repo_info.services.display_service import DisplayService


class TestParseArgs:
    """Test argument parsing."""

    def test_defaults(self):
        """Test default arguments."""
        args = parse_args([])

        assert args.path is None
        assert args.limit == 10
        assert args.json is False
        assert args.no_search_parents is False

    def test_negative_limit_rejected(self):
        """Test that negative limits are a usage error."""
        with pytest.raises(SystemExit):
            parse_args(["--limit", "-1"])

    def test_status_and_commits_only_are_exclusive(self):
        """Test that both query filters cannot be combined."""
        with pytest.raises(SystemExit):
            parse_args(["--status-only", "--commits-only"])


class TestResolveRepoPath:
    """Test repository path resolution."""

    def test_argument_wins(self, monkeypatch):
        """Test that an explicit path beats the environment."""
        monkeypatch.setenv(REPO_PATH_ENV_VAR, "/from/env")
        assert resolve_repo_path("/explicit") == "/explicit"

    def test_environment_override(self, monkeypatch):
        """Test the environment variable fallback."""
        monkeypatch.setenv(REPO_PATH_ENV_VAR, "/from/env")
        assert resolve_repo_path() == "/from/env"

    def test_current_directory(self, monkeypatch, temp_dir):
        """Test the working directory fallback."""
        monkeypatch.delenv(REPO_PATH_ENV_VAR, raising=False)
        monkeypatch.chdir(temp_dir)
        assert resolve_repo_path() == str(temp_dir)


class TestMain:
    """Test the CLI entry point."""

    def test_json_output(self, linear_repo, capsys):
        """Test machine-readable output for status and commits."""
        repo, commits = linear_repo
        (Path(repo.working_dir) / "new.txt").write_text("new\n")

        exit_code = main([repo.working_dir, "--json", "--limit", "2"])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data["status"]["added"] == ["new.txt"]
        assert [c["id"] for c in data["commits"]["commits"]] == [
            commits[2].hexsha,
            commits[1].hexsha,
        ]

    def test_status_only(self, git_repo, capsys):
        """Test that --status-only skips the history query."""
        exit_code = main([git_repo.working_dir, "--json", "--status-only"])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data["commits"] is None
        assert data["status"]["is_dirty"] is False

    def test_table_output(self, git_repo, capsys):
        """Test the default table output."""
        exit_code = main([git_repo.working_dir])

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "on main" in output
        assert "Last 1 commit(s)" in output

    def test_missing_path_fails(self, temp_dir):
        """Test that errors are reported with a non-zero exit code."""
        assert main([str(temp_dir / "nonexistent")]) == 1

    def test_empty_repository_fails_history(self, empty_repo):
        """Test that a repository without commits reports EmptyHistoryError."""
        assert main([empty_repo.working_dir]) == 1
        assert main([empty_repo.working_dir, "--status-only"]) == 0


class TestDisplayService:
    """Test rendering with rich."""

    def render(self, info, **kwargs) -> str:
        buffer = io.StringIO()
        DisplayService(output=Console(file=buffer, width=200)).display(info, **kwargs)
        return buffer.getvalue()

    def test_display_dirty_status_and_commits(self, linear_repo):
        """Test that changed paths and commits appear in the tables."""
        repo, commits = linear_repo
        (Path(repo.working_dir) / "a.txt").write_text("edited\n")

        with RepositoryInfo.open(repo.working_dir) as info:
            output = self.render(info.status_info().commit_info())

        assert "a.txt" in output
        assert "modified" in output
        assert commits[2].hexsha[:8] in output
        assert "C3" in output
        assert "Age" in output

    def test_display_detached_head(self, linear_repo):
        """Test header for a detached HEAD."""
        repo, commits = linear_repo
        repo.git.checkout(commits[0].hexsha)

        with RepositoryInfo.open(repo.working_dir) as info:
            output = self.render(info, show_legend=True)

        assert "detached HEAD" in output
        assert "Legend" in output
