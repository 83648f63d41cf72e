"""Configuration handling for git-repo-info"""

from dataclasses import dataclass

DEFAULT_COMMIT_LIMIT = 10


@dataclass
class Config:
    """Configuration for git-repo-info with validation."""

    # Repository discovery
    search_parents: bool = True  # Walk up from the given path to find the repo

    # History window
    commit_limit: int = DEFAULT_COMMIT_LIMIT

    # Which queries to run from the CLI
    show_status: bool = True
    show_commits: bool = True

    # Output
    output_format: str = "table"  # table, json
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_commit_limit()
        self._validate_output_format()
        self._validate_queries()

    def _validate_commit_limit(self):
        """Validate commit_limit is a non-negative integer."""
        if isinstance(self.commit_limit, bool) or not isinstance(self.commit_limit, int):
            raise ValueError(f"commit_limit must be an integer, got {self.commit_limit!r}")
        if self.commit_limit < 0:
            raise ValueError(f"commit_limit must not be negative, got {self.commit_limit}")

    def _validate_output_format(self):
        """Validate output_format is one of allowed values."""
        allowed = ["table", "json"]
        if self.output_format not in allowed:
            raise ValueError(f"output_format must be one of {allowed}, got '{self.output_format}'")

    def _validate_queries(self):
        """Validate that at least one query is enabled."""
        if not self.show_status and not self.show_commits:
            raise ValueError("At least one of show_status or show_commits must be enabled")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "search_parents": self.search_parents,
            "commit_limit": self.commit_limit,
            "show_status": self.show_status,
            "show_commits": self.show_commits,
            "output_format": self.output_format,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        # Extract only known fields
        known_fields = {
            "search_parents",
            "commit_limit",
            "show_status",
            "show_commits",
            "output_format",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
