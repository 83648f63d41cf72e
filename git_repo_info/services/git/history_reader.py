"""Commit history reading for git-repo-info."""

import heapq
from collections import Counter
from datetime import datetime, timezone
from itertools import groupby
from operator import attrgetter
from typing import List, NamedTuple, Optional, Tuple

import git

from git_repo_info.config import DEFAULT_COMMIT_LIMIT
from git_repo_info.exceptions import EmptyHistoryError, RepositoryUnavailableError
from git_repo_info.logging_config import get_logger
from git_repo_info.models.commit import CommitHistory, CommitRecord
from git_repo_info.services.git.handle import RepositoryHandle

logger = get_logger(__name__)


class GraphNode(NamedTuple):
    """Hash, order key and parent links of one commit."""
    sha: str
    timestamp: int
    parents: Tuple[str, ...]


def parse_rev_list(output: str) -> List[GraphNode]:
    """Parse ``git rev-list --timestamp --parents`` output.

    Args:
        output: One "TIMESTAMP SHA [PARENT...]" line per commit

    Returns:
        GraphNodes in output order
    """
    nodes = []
    for line in output.splitlines():
        fields = line.split()
        if len(fields) < 2:
            continue
        nodes.append(GraphNode(fields[1], int(fields[0]), tuple(fields[2:])))
    return nodes


def break_ties(nodes: List[GraphNode]) -> List[str]:
    """Order each run of equal timestamps by hash.

    ``nodes`` must be in ``rev-list --date-order`` order, so every parent
    outside a run already comes after it. Inside a run a commit still
    waits for its children.

    Args:
        nodes: Commits in date order

    Returns:
        Commit hashes, newest first
    """
    order: List[str] = []
    for _, run in groupby(nodes, key=attrgetter("timestamp")):
        order.extend(_order_run(list(run)))
    return order


def _order_run(run: List[GraphNode]) -> List[str]:
    members = {node.sha: node for node in run}
    pending_children = Counter(
        parent for node in run for parent in node.parents if parent in members
    )

    candidates = [node.sha for node in run if not pending_children[node.sha]]
    heapq.heapify(candidates)
    order = []
    while candidates:
        sha = heapq.heappop(candidates)
        order.append(sha)
        for parent in members[sha].parents:
            if parent not in members:
                continue
            pending_children[parent] -= 1
            if not pending_children[parent]:
                heapq.heappush(candidates, parent)
    return order


def _to_utc(epoch: int) -> datetime:
    return datetime.fromtimestamp(epoch, tz=timezone.utc)


def _decode(value) -> str:
    # GitPython can return bytes for messages in unknown encodings
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value or ""


class HistoryReader:
    """Reads a bounded, newest-first window of commits reachable from HEAD."""

    def __init__(self, default_limit: int = DEFAULT_COMMIT_LIMIT):
        self.default_limit = default_limit

    def read(self, handle: RepositoryHandle, limit: Optional[int] = None) -> CommitHistory:
        """Read up to ``limit`` commits starting at HEAD.

        Args:
            handle: Open repository handle
            limit: Number of commits to return; None uses the default limit
                and 0 requests an empty history

        Returns:
            CommitHistory ordered newest first

        Raises:
            ValueError: If limit is negative
            RepositoryUnavailableError: If the handle is invalid or the graph
                cannot be read
            EmptyHistoryError: If HEAD does not resolve to a commit
        """
        if limit is None:
            limit = self.default_limit
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise ValueError(f"limit must be a non-negative integer, got {limit!r}")

        repo = handle.repo
        if limit == 0:
            logger.debug("Zero commits requested, skipping history walk")
            return CommitHistory((), limit=0, head_id=self._head_id(handle))

        head = handle.head_commit()
        if head is None:
            raise EmptyHistoryError(handle.path)

        nodes = self._load_window(handle, head.hexsha, limit)
        order = break_ties(nodes)[:limit]
        logger.debug(f"Read {len(nodes)} graph entries for {len(order)} commits")

        try:
            records = tuple(self._to_record(repo.commit(sha)) for sha in order)
        except (ValueError, git.exc.GitCommandError) as e:
            raise RepositoryUnavailableError(handle.path, f"cannot read commit: {e}") from e

        return CommitHistory(records, limit=limit, head_id=head.hexsha)

    def _head_id(self, handle: RepositoryHandle) -> Optional[str]:
        commit = handle.head_commit()
        return commit.hexsha if commit is not None else None

    def _load_window(self, handle: RepositoryHandle, head_sha: str, limit: int) -> List[GraphNode]:
        """Load the first ``limit`` commits in date order plus the rest of the last run.

        Commits sharing the timestamp of the last wanted one may be reordered
        by hash, so the window grows until that timestamp run is complete.
        """
        count = limit + 1
        while True:
            nodes = self._rev_list(handle, head_sha, count)
            if len(nodes) < count or nodes[limit - 1].timestamp != nodes[-1].timestamp:
                return nodes
            count *= 2

    def _rev_list(self, handle: RepositoryHandle, head_sha: str, count: int) -> List[GraphNode]:
        """Timestamp and parents of the newest ``count`` commits, children first."""
        try:
            output = handle.repo.git.rev_list(
                "--date-order", "--timestamp", "--parents", f"--max-count={count}", head_sha
            )
        except git.exc.GitCommandError as e:
            raise RepositoryUnavailableError(
                handle.path, f"cannot walk commit graph: {str(e.stderr or e).strip()}"
            ) from e
        return parse_rev_list(output)

    def _to_record(self, commit: git.Commit) -> CommitRecord:
        """Materialize a GitPython commit as a CommitRecord."""
        return CommitRecord(
            id=commit.hexsha,
            author_name=_decode(commit.author.name),
            author_email=_decode(commit.author.email),
            timestamp=_to_utc(commit.committed_date),
            message=_decode(commit.message),
            parent_ids=tuple(parent.hexsha for parent in commit.parents),
            committer_name=_decode(commit.committer.name),
            committer_email=_decode(commit.committer.email),
            authored_at=_to_utc(commit.authored_date),
            tree_id=commit.tree.hexsha,
        )
