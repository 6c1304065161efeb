"""Concrete implementation of Git repository operations."""

import logging
import subprocess
from collections.abc import Iterator
from pathlib import Path

from squash_changelog.git.domain.entities import Commit
from squash_changelog.git.domain.errors import RangeResolutionError
from squash_changelog.git.domain.value_objects import CommitRange
from squash_changelog.git.repositories.interfaces import GitRepository

logger = logging.getLogger(__name__)

# git show indents every message line in the medium format
MESSAGE_INDENT = "    "


class GitRepositoryImpl(GitRepository):
    """Concrete implementation of Git repository operations using git commands."""

    def list_commit_hashes(self, commit_range: CommitRange) -> Iterator[str]:
        """
        List commit hashes in a range, excluding true merge commits.

        The git call runs when iteration starts.

        Args:
            commit_range: Range of commits to retrieve

        Returns:
            Iterator over commit hashes ordered from oldest to newest

        Raises:
            RangeResolutionError: If git cannot resolve the range
        """
        expression = commit_range.expression
        logger.debug("Listing commits in %s", expression)
        try:
            result = subprocess.run(
                ["git", "rev-list", "--reverse", "--no-merges", expression, "--"],
                cwd=commit_range.repo_path,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise RangeResolutionError(
                f"Failed to resolve range '{expression}': "
                f"{e.stderr.strip() if e.stderr else str(e)}"
            ) from e

        for line in result.stdout.splitlines():
            if line:
                yield line.strip()

    def get_commit(self, repo_path: Path, commit_hash: str) -> Commit:
        """
        Get a commit with its full show-text.

        Args:
            repo_path: Path to the git repository
            commit_hash: Hash of the commit

        Returns:
            Commit parsed from ``git show`` output

        Raises:
            RangeResolutionError: If the commit cannot be found
        """
        try:
            result = subprocess.run(
                ["git", "show", "--no-patch", "--no-color", "--format=medium", commit_hash],
                cwd=repo_path,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise RangeResolutionError(
                f"Failed to show commit {commit_hash}: "
                f"{e.stderr.strip() if e.stderr else str(e)}"
            ) from e

        summary, body = self._parse_message(result.stdout)
        return Commit(hash=commit_hash, show_text=result.stdout, summary=summary, body=body)

    def get_latest_tag(self, repo_path: Path) -> str | None:
        """
        Get the most recent tag reachable from HEAD.

        Args:
            repo_path: Path to the git repository

        Returns:
            Tag name, or None if the repository has no tag
        """
        result = subprocess.run(
            ["git", "describe", "--tags", "--abbrev=0"],
            cwd=repo_path,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            logger.debug("No tag found: %s", result.stderr.strip())
            return None
        return result.stdout.strip() or None

    def get_remote_url(self, repo_path: Path, remote: str = "origin") -> str | None:
        """
        Get the fetch address of a remote.

        Args:
            repo_path: Path to the git repository
            remote: Name of the remote

        Returns:
            Remote URL, or None if the remote does not exist
        """
        result = subprocess.run(
            ["git", "remote", "get-url", remote],
            cwd=repo_path,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            logger.debug("No remote '%s': %s", remote, result.stderr.strip())
            return None
        return result.stdout.strip() or None

    @staticmethod
    def _parse_message(show_text: str) -> tuple[str, str]:
        """
        Split the message of a medium-format ``git show`` into summary and body.

        Args:
            show_text: Output of ``git show --format=medium``

        Returns:
            Tuple of (summary, body)
        """
        lines = show_text.splitlines()
        try:
            header_end = lines.index("")
        except ValueError:
            return "", ""

        message_lines = [line.removeprefix(MESSAGE_INDENT) for line in lines[header_end + 1 :]]
        if not message_lines:
            return "", ""

        summary = message_lines[0]
        body_lines = message_lines[1:]
        while body_lines and not body_lines[0].strip():
            body_lines.pop(0)
        while body_lines and not body_lines[-1].strip():
            body_lines.pop()
        return summary, "\n".join(body_lines)
