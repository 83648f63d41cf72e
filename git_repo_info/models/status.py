"""Working tree status model"""
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable


@dataclass(frozen=True)
class StatusSnapshot:
    """Working tree and index status relative to HEAD at one point in time.

    Paths are repository-relative and use forward slashes. A path appears in
    at most one of ``modified``, ``added`` and ``deleted``.
    """
    modified: FrozenSet[str] = field(default_factory=frozenset)
    added: FrozenSet[str] = field(default_factory=frozenset)  # Includes untracked files
    deleted: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        # Accept any iterable of paths but always store frozensets
        for name in ("modified", "added", "deleted"):
            value = getattr(self, name)
            if not isinstance(value, frozenset):
                object.__setattr__(self, name, frozenset(value))

        overlap = (
            (self.modified & self.added)
            | (self.modified & self.deleted)
            | (self.added & self.deleted)
        )
        if overlap:
            raise ValueError(f"Paths classified more than once: {sorted(overlap)}")

    @property
    def is_dirty(self) -> bool:
        """True if anything differs from HEAD, untracked files included."""
        return bool(self.modified or self.added or self.deleted)

    @property
    def paths(self) -> FrozenSet[str]:
        """All paths that differ from HEAD."""
        return self.modified | self.added | self.deleted

    def summary(self) -> Dict[str, int]:
        """Count of paths per category."""
        return {
            "modified": len(self.modified),
            "added": len(self.added),
            "deleted": len(self.deleted),
        }

    def to_dict(self) -> dict:
        """Convert snapshot to a JSON-friendly dictionary."""
        return {
            "is_dirty": self.is_dirty,
            "modified": sorted(self.modified),
            "added": sorted(self.added),
            "deleted": sorted(self.deleted),
        }

    @classmethod
    def from_paths(
        cls,
        modified: Iterable[str] = (),
        added: Iterable[str] = (),
        deleted: Iterable[str] = (),
    ) -> "StatusSnapshot":
        """Build a snapshot from plain iterables of paths."""
        return cls(frozenset(modified), frozenset(added), frozenset(deleted))
