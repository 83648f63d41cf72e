"""Formatting utilities for git-repo-info.

This package provides formatting functions for displaying repository
information, organized into logical modules:
- date: Date and time formatting
- commit: Commit id, author, parent and message formatting
- status: Working tree change formatting
"""

# Date formatters
from .date import format_timestamp, format_age

# Commit formatters
from .commit import (
    format_commit_id,
    format_author,
    format_parents,
    format_message,
)

# Status formatters
from .status import (
    format_change,
    format_dirty,
    format_status_summary,
    status_rows,
)

__all__ = [
    # Date
    "format_timestamp",
    "format_age",
    # Commit
    "format_commit_id",
    "format_author",
    "format_parents",
    "format_message",
    # Status
    "format_change",
    "format_dirty",
    "format_status_summary",
    "status_rows",
]
