"""Status formatting utilities."""

from typing import TYPE_CHECKING, List, Tuple

from git_repo_info.constants import CHANGE_COLORS, CHANGE_SYMBOLS, ChangeType

if TYPE_CHECKING:
    from git_repo_info.models.status import StatusSnapshot


def format_change(change_type: str) -> str:
    """
    Format a change type as a colored symbol with its name.

    Args:
        change_type: One of the ChangeType constants

    Returns:
        Rich markup such as "[yellow]M modified[/yellow]"
    """
    symbol = CHANGE_SYMBOLS.get(change_type, "?")
    color = CHANGE_COLORS.get(change_type)
    text = f"{symbol} {change_type}"
    return f"[{color}]{text}[/{color}]" if color else text


def format_dirty(is_dirty: bool) -> str:
    """Format the dirty flag for display."""
    return "[red]dirty[/red]" if is_dirty else "[green]clean[/green]"


def format_status_summary(status: "StatusSnapshot") -> str:
    """
    Format a one-line summary of a status snapshot.

    Example:
        "dirty (1 modified, 2 added, 0 deleted)"
    """
    if not status.is_dirty:
        return format_dirty(False)
    counts = ", ".join(f"{count} {kind}" for kind, count in status.summary().items())
    return f"{format_dirty(True)} ({counts})"


def status_rows(status: "StatusSnapshot") -> List[Tuple[str, str]]:
    """
    Flatten a snapshot into (change_type, path) rows sorted by path.

    Args:
        status: Snapshot to flatten

    Returns:
        List of (ChangeType constant, path) tuples
    """
    rows = [(ChangeType.MODIFIED, path) for path in status.modified]
    rows += [(ChangeType.ADDED, path) for path in status.added]
    rows += [(ChangeType.DELETED, path) for path in status.deleted]
    return sorted(rows, key=lambda row: row[1])
