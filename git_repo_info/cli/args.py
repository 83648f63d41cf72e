"""Command-line argument parsing for git-repo-info."""

import argparse
from git_repo_info.__version__ import __version__
from git_repo_info.config import DEFAULT_COMMIT_LIMIT
from git_repo_info.constants import REPO_PATH_ENV_VAR


def non_negative_int(value: str) -> int:
    """argparse type for integers >= 0."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or positive, got {number}")
    return number


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Show working tree status and recent commits of a git repository",
        epilog=f"The repository path defaults to ${REPO_PATH_ENV_VAR} or the current directory.",
    )
    parser.add_argument("path", nargs="?", help="Repository root or any path inside it")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-repo-info {__version__}")
    parser.add_argument(
        "-n",
        "--limit",
        type=non_negative_int,
        default=DEFAULT_COMMIT_LIMIT,
        metavar="N",
        help=f"Number of commits to show (default: {DEFAULT_COMMIT_LIMIT})",
    )
    parser.add_argument(
        "--no-search-parents",
        action="store_true",
        help="Require PATH to be the repository root instead of searching parent directories",
    )
    query = parser.add_mutually_exclusive_group()
    query.add_argument("--status-only", action="store_true", help="Only show working tree status")
    query.add_argument("--commits-only", action="store_true", help="Only show recent commits")
    parser.add_argument("--json", action="store_true", help="Print machine-readable JSON")
    parser.add_argument("--legend", action="store_true", help="Explain the symbols used in tables")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    return parser.parse_args(argv)
