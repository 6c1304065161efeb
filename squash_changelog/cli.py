"""Command line entry point printing the changelog of a commit range."""

import argparse
import logging
import sys
from pathlib import Path

from squash_changelog.changelog.domain.value_objects import OutputFormat
from squash_changelog.changelog.services.changelog_service import ChangelogService
from squash_changelog.changelog.services.ticket_url_service import (
    TicketUrlResolver,
    resolve_space_url,
)
from squash_changelog.config import ChangelogConfig
from squash_changelog.git.domain.errors import ConfigurationError, RangeResolutionError
from squash_changelog.git.repositories.implementations import GitRepositoryImpl
from squash_changelog.git.repositories.interfaces import GitRepository
from squash_changelog.git.services.git_service import GitService

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """Define the command line options."""
    parser = argparse.ArgumentParser(
        prog="squash-changelog",
        description=(
            "Print the changelog of a range of commits, reading ticket references "
            "and merge request URLs from squash-merge commits"
        ),
    )
    parser.add_argument(
        "revision_range",
        type=str,
        nargs="?",
        default=None,
        help=(
            "Git revision range (default: $GIT_PREVIOUS_SUCCESSFUL_COMMIT..HEAD, "
            "then <latest tag>..HEAD, then the whole history)"
        ),
    )
    parser.add_argument(
        "--format",
        "-f",
        type=str,
        default=None,
        help=(
            "Output format: changes (default), commits, tickets, "
            "ticket_urls/urls, merge_requests/mr"
        ),
    )
    parser.add_argument(
        "--repo-path",
        "-C",
        type=Path,
        default=Path("."),
        help="Path to the git repository (default: current directory)",
    )
    parser.add_argument(
        "--space-url",
        type=str,
        default=None,
        help="Base URL of the space used for ticket links (default: derived from the remote)",
    )
    parser.add_argument(
        "--remote",
        type=str,
        default=None,
        help="Remote whose address names the space (default: origin)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print diagnostics to stderr",
    )
    return parser


def setup_logging(verbose: bool) -> None:
    """Send diagnostics to stderr, only warnings unless verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run(
    args: argparse.Namespace,
    config: ChangelogConfig,
    git_repository: GitRepository,
) -> int:
    """
    Resolve the run configuration and print the changelog.

    Args:
        args: Parsed command line arguments
        config: Settings read from the environment
        git_repository: Repository implementation to read history from

    Returns:
        Process exit code
    """
    git_service = GitService(git_repository)
    try:
        output_format = OutputFormat.parse(args.format or config.output_format)

        space_url = None
        if output_format.needs_space_url:
            space_url = resolve_space_url(
                git_service,
                args.repo_path,
                explicit_space_url=args.space_url or config.space_url,
                remote=args.remote or config.remote,
            )

        commit_range = git_service.resolve_commit_range(
            args.repo_path,
            explicit_range=args.revision_range,
            previous_successful_commit=config.previous_successful_commit,
        )
        logger.info("Rendering %s for %s", output_format.value, commit_range.expression)

        changelog_service = ChangelogService(git_service, TicketUrlResolver(space_url))
        for line in changelog_service.render(commit_range, output_format):
            print(line)

    except ConfigurationError as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        return 1
    except RangeResolutionError as e:
        print(f"✗ Failed to read history: {e}", file=sys.stderr)
        return 1

    return 0


def main(argv: list[str] | None = None) -> None:
    """Main function to parse arguments and print the changelog."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    config = ChangelogConfig.from_env()
    sys.exit(run(args, config, GitRepositoryImpl()))


if __name__ == "__main__":
    main()
