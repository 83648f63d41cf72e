"""Working tree status inspection for git-repo-info."""

import os
import stat
from typing import Dict, Optional, Set

import git

from git_repo_info.exceptions import CorruptIndexError, RepositoryUnavailableError
from git_repo_info.logging_config import get_logger
from git_repo_info.models.status import StatusSnapshot
from git_repo_info.services.git.handle import RepositoryHandle

logger = get_logger(__name__)

UNTRACKED = "??"

# Conflict codes, where Y describes the other side of the merge, not the file on disk
UNMERGED = frozenset({"DD", "AU", "UD", "UA", "DU", "AA", "UU"})

# Tree entry type of a submodule commit
GITLINK_MODE = 0o160000

# Fragments of git's stderr when it cannot read the index file
CORRUPT_INDEX_MARKERS = (
    "index file corrupt",
    "bad signature",
    "bad index",
    "index file smaller than expected",
    "which we do not understand",
)


def parse_porcelain(output: str) -> Dict[str, str]:
    """Parse ``git status --porcelain -z --no-renames`` output.

    A path listed twice (staged deletion plus untracked copy on disk)
    keeps its first, tracked, code.

    Args:
        output: Raw NUL separated status output

    Returns:
        Mapping of path to its two letter XY status code
    """
    entries = {}
    for record in output.split("\0"):
        if len(record) < 4:
            continue
        # Format: "XY PATH"; X is the index side, Y the working tree side
        entries.setdefault(record[3:], record[:2])
    return entries


def is_staged(code: str) -> bool:
    """Whether the index differs from HEAD (conflicts included)."""
    return code != UNTRACKED and code[0] != " "


def is_unstaged(code: str) -> bool:
    """Whether the working tree differs from the index."""
    return code != UNTRACKED and code[1] != " "


class StatusInspector:
    """Compares HEAD, the index and the working tree.

    Classification of every changed path:
    - absent from the working tree -> deleted
    - otherwise not in the HEAD tree -> added (untracked files included)
    - otherwise -> modified (content, mode, symlink or staged-only change)

    The index is only read by git itself, so every index format git
    understands (split index, version 4) is supported.
    """

    def compute(self, handle: RepositoryHandle) -> StatusSnapshot:
        """Compute a fresh status snapshot.

        Args:
            handle: Open repository handle with a working tree

        Returns:
            StatusSnapshot of the current state

        Raises:
            RepositoryUnavailableError: If the handle or working tree is unusable
            CorruptIndexError: If git cannot read the index file
        """
        working_dir = handle.require_working_tree()

        codes = self._read_status(handle)
        head_modes = self._read_head_modes(handle)

        staged = {path for path, code in codes.items() if is_staged(code)}
        unstaged = {path for path, code in codes.items() if is_unstaged(code)}
        untracked = {path for path, code in codes.items() if code == UNTRACKED}
        logger.debug(
            f"{len(staged)} staged, {len(unstaged)} changed, {len(untracked)} untracked paths"
        )

        modified: Set[str] = set()
        added: Set[str] = set()
        deleted: Set[str] = set()
        for path, code in codes.items():
            if self._is_absent(working_dir, path, code, head_modes.get(path)):
                deleted.add(path)
            elif path not in head_modes:
                added.add(path)
            else:
                modified.add(path)

        return StatusSnapshot.from_paths(modified, added, deleted)

    def _is_absent(self, working_dir: str, path: str, code: str, head_mode: Optional[int]) -> bool:
        """Whether the tracked file at ``path`` is gone from the working tree.

        A real directory standing where HEAD has a file or symlink counts as
        absent; a submodule checkout is a directory by nature.
        """
        if code[1] == "D" and code not in UNMERGED:
            return True

        full_path = os.path.join(working_dir, path)
        if not os.path.lexists(full_path):
            return True
        if head_mode is None or stat.S_IFMT(head_mode) == GITLINK_MODE:
            return False
        return os.path.isdir(full_path) and not os.path.islink(full_path)

    def _read_head_modes(self, handle: RepositoryHandle) -> Dict[str, int]:
        """Map every non-tree entry of HEAD's tree to its mode."""
        commit = handle.head_commit()
        if commit is None:
            logger.debug("HEAD has no commit yet, comparing against an empty tree")
            return {}

        return {item.path: item.mode for item in commit.tree.traverse() if item.type != "tree"}

    def _read_status(self, handle: RepositoryHandle) -> Dict[str, str]:
        """Staged, unstaged and untracked changes as reported by git."""
        repo = handle.repo
        try:
            # No optional locks: git status must not refresh the index on disk
            with repo.git.custom_environment(GIT_OPTIONAL_LOCKS="0"):
                output = repo.git.status(
                    "--porcelain", "-z", "--no-renames", "--untracked-files=all"
                )
        except git.exc.GitCommandError as e:
            raise self._translate_command_error(handle, e) from e
        except OSError as e:
            raise RepositoryUnavailableError(handle.path, f"cannot run git status: {e}") from e
        return parse_porcelain(output)

    def _translate_command_error(self, handle: RepositoryHandle, error: git.exc.GitCommandError):
        """Map a failed git invocation to the matching repository error."""
        stderr = str(error.stderr or "").strip()
        if any(marker in stderr for marker in CORRUPT_INDEX_MARKERS):
            return CorruptIndexError(handle.path, stderr)
        return RepositoryUnavailableError(handle.path, stderr or str(error))

