"""Commit formatting utilities."""

from typing import TYPE_CHECKING, Optional, Sequence

from git_repo_info.constants import SHORT_ID_LENGTH, SYMBOL_MERGE, SYMBOL_ROOT

if TYPE_CHECKING:
    from git_repo_info.models.commit import CommitRecord


def format_commit_id(commit_id: Optional[str], length: int = SHORT_ID_LENGTH) -> str:
    """
    Abbreviate a commit hash for display.

    Args:
        commit_id: Full hex hash
        length: Number of characters to keep

    Returns:
        Abbreviated hash, or an empty string when there is none
    """
    if not commit_id:
        return ""
    return commit_id[:length]


def format_author(name: str, email: str) -> str:
    """Format an author as "Name <email>"."""
    if email:
        return f"{name} <{email}>"
    return name


def format_parents(parent_ids: Sequence[str]) -> str:
    """
    Format parent ids, marking root and merge commits.

    Args:
        parent_ids: Ordered parent hashes

    Returns:
        Abbreviated parents separated by spaces, with a merge marker when
        there is more than one parent
    """
    if not parent_ids:
        return SYMBOL_ROOT
    parents = " ".join(format_commit_id(parent) for parent in parent_ids)
    if len(parent_ids) > 1:
        return f"{SYMBOL_MERGE} {parents}"
    return parents


def format_message(commit: "CommitRecord", max_length: int = 72) -> str:
    """
    Format the first line of a commit message, truncated for tables.

    Args:
        commit: Commit record
        max_length: Maximum number of characters

    Returns:
        Summary line, ending in "…" when truncated
    """
    summary = commit.summary
    if len(summary) > max_length:
        return summary[: max_length - 1] + "…"
    return summary
