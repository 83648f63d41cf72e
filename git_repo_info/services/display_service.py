"""Display and formatting service for repository information"""
import json
from typing import TYPE_CHECKING, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from git_repo_info.constants import COMMIT_COLUMNS, LEGEND_TEXT, STATUS_COLUMNS
from git_repo_info.formatters import (
    format_age,
    format_author,
    format_change,
    format_commit_id,
    format_message,
    format_parents,
    format_status_summary,
    format_timestamp,
    status_rows,
)
from git_repo_info.logging_config import get_logger
from git_repo_info.models.commit import CommitHistory
from git_repo_info.models.status import StatusSnapshot

if TYPE_CHECKING:
    from git_repo_info.core.repository_info import RepositoryInfo

console = Console()
logger = get_logger(__name__)


class DisplayService:
    def __init__(self, verbose: bool = False, debug: bool = False, output: Optional[Console] = None):
        self.verbose = verbose
        self.debug_mode = debug
        self.console = output or console

    def display_header(self, info: "RepositoryInfo") -> None:
        """Display repository path, branch and HEAD."""
        branch = escape(info.branch) if info.branch else "[yellow](detached HEAD)[/yellow]"
        head = format_commit_id(info.head_id) or "[dim](no commits)[/dim]"
        self.console.print(f"[bold]{escape(info.path)}[/bold]  on {branch} at {head}")

    def display_status(self, status: StatusSnapshot) -> None:
        """Display a table of working tree changes."""
        self.console.print(f"\nStatus: {format_status_summary(status)}")
        if not status.is_dirty:
            return

        table = Table()
        for col in STATUS_COLUMNS:
            table.add_column(col.label, width=col.width or None)

        for change_type, path in status_rows(status):
            table.add_row(format_change(change_type), escape(path))

        self.console.print(table)

    def display_commits(self, commits: CommitHistory) -> None:
        """Display a table of recent commits."""
        self.console.print(f"\nLast {len(commits)} commit(s):")
        if not len(commits):
            return

        table = Table()
        for col in COMMIT_COLUMNS:
            table.add_column(col.label, width=col.width or None)

        for commit in commits:
            # Match COMMIT_COLUMNS order: Commit, Date, Age, Author, Parents, Message
            table.add_row(
                format_commit_id(commit.id),
                format_timestamp(commit.timestamp),
                format_age(commit.timestamp),
                escape(format_author(commit.author_name, commit.author_email)),
                format_parents(commit.parent_ids),
                escape(format_message(commit)),
            )

        self.console.print(table)

    def display(self, info: "RepositoryInfo", show_legend: bool = False) -> None:
        """Display everything gathered by ``info``."""
        self.display_header(info)
        if info.status is not None:
            self.display_status(info.status)
        if info.commits is not None:
            self.display_commits(info.commits)
        if show_legend:
            self.console.print(LEGEND_TEXT)

    def display_json(self, info: "RepositoryInfo") -> None:
        """Display everything gathered by ``info`` as JSON."""
        data = info.to_dict()
        logger.debug(f"Rendering JSON with keys {sorted(data)}")
        self.console.print_json(json.dumps(data))
