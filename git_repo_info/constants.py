"""Shared constants for git-repo-info."""

from dataclasses import dataclass
from typing import List


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


STATUS_COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("change", "Change", 10),
    ColumnDefinition("path", "Path"),
]

COMMIT_COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("id", "Commit", 10),
    ColumnDefinition("date", "Date", 25),
    ColumnDefinition("age", "Age", 6),
    ColumnDefinition("author", "Author", 30),
    ColumnDefinition("parents", "Parents", 20),
    ColumnDefinition("message", "Message"),
]

SHORT_ID_LENGTH = 8

# Environment variable overriding the repository path for the CLI
REPO_PATH_ENV_VAR = "GIT_REPO_INFO_PATH"


class ChangeType:
    """Kinds of working tree changes."""

    MODIFIED = "modified"
    ADDED = "added"
    DELETED = "deleted"


# Symbol constants
CHANGE_SYMBOLS = {
    ChangeType.MODIFIED: "M",
    ChangeType.ADDED: "A",
    ChangeType.DELETED: "D",
}
SYMBOL_MERGE = "⑂"
SYMBOL_ROOT = "∅"


# CLI colors (Rich color names)
CHANGE_COLORS = {
    ChangeType.MODIFIED: "yellow",
    ChangeType.ADDED: "green",
    ChangeType.DELETED: "red",
}


LEGEND_TEXT = """
Legend:
M = Modified (content, mode or staged change)
A = Added (staged new file or untracked)
D = Deleted from the working tree
⑂ = Merge commit          ∅ = Root commit
"""
