"""Command-line interface for git-repo-info"""

import os
import sys
from rich.console import Console
from git_repo_info.cli.args import parse_args
from git_repo_info.config import Config
from git_repo_info.constants import REPO_PATH_ENV_VAR
from git_repo_info.core import RepositoryInfo
from git_repo_info.exceptions import RepoInfoError
from git_repo_info.logging_config import setup_logging
from git_repo_info.services.display_service import DisplayService

console = Console(stderr=True)


def resolve_repo_path(path=None) -> str:
    """Pick the repository path: argument, then environment, then cwd."""
    return path or os.environ.get(REPO_PATH_ENV_VAR) or os.getcwd()


def main(argv=None):
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config = Config(
            search_parents=not parsed_args.no_search_parents,
            commit_limit=parsed_args.limit,
            show_status=not parsed_args.commits_only,
            show_commits=not parsed_args.status_only,
            output_format="json" if parsed_args.json else "table",
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        display = DisplayService(verbose=config.verbose, debug=config.debug)

        with RepositoryInfo.open(resolve_repo_path(parsed_args.path), config) as info:
            if config.show_status:
                info.status_info()
            if config.show_commits:
                info.commit_info()

            if config.output_format == "json":
                display.display_json(info)
            else:
                display.display(info, show_legend=parsed_args.legend)

        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except RepoInfoError as e:
        console.print(f"[red]Error: {e}[/red]")
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
