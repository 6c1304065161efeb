"""Git service for coordinating Git operations."""

import logging
from collections.abc import Iterator
from pathlib import Path

from squash_changelog.git.domain.entities import Commit
from squash_changelog.git.domain.value_objects import CommitRange
from squash_changelog.git.repositories.interfaces import GitRepository

logger = logging.getLogger(__name__)


class GitService:
    """Service for Git operations."""

    def __init__(self, git_repository: GitRepository) -> None:
        """
        Initialize GitService.

        Args:
            git_repository: Repository implementation for Git operations
        """
        self._git_repository = git_repository

    def resolve_commit_range(
        self,
        repo_path: Path,
        explicit_range: str | None = None,
        previous_successful_commit: str | None = None,
    ) -> CommitRange:
        """
        Resolve which commits the changelog covers.

        The first available source wins: the explicit range expression, the
        last successfully built commit, the most recent tag. Without any of
        them the whole history reachable from HEAD is used.

        Args:
            repo_path: Path to the git repository
            explicit_range: Range expression given by the user
            previous_successful_commit: Commit of the previous successful build

        Returns:
            CommitRange to read
        """
        if explicit_range:
            logger.debug("Using explicit range %s", explicit_range)
            return CommitRange(repo_path=repo_path, revision=explicit_range)

        if previous_successful_commit:
            logger.debug("Using previous successful commit %s", previous_successful_commit)
            return CommitRange(repo_path=repo_path, start=previous_successful_commit)

        latest_tag = self._git_repository.get_latest_tag(repo_path)
        if latest_tag:
            logger.debug("Using latest tag %s", latest_tag)
            return CommitRange(repo_path=repo_path, start=latest_tag)

        logger.debug("No range, tag or previous commit found, using whole history")
        return CommitRange(repo_path=repo_path)

    def iter_commits(self, commit_range: CommitRange) -> Iterator[Commit]:
        """
        Iterate over the commits of a range, oldest first.

        Each commit is fetched once and handed out before the next is read.

        Args:
            commit_range: Range of commits to read

        Returns:
            Iterator over commits ordered from oldest to newest

        Raises:
            RangeResolutionError: If git cannot resolve the range
        """
        for commit_hash in self._git_repository.list_commit_hashes(commit_range):
            yield self._git_repository.get_commit(commit_range.repo_path, commit_hash)

    def get_remote_url(self, repo_path: Path, remote: str = "origin") -> str | None:
        """
        Get the fetch address of a remote.

        Args:
            repo_path: Path to the git repository
            remote: Name of the remote

        Returns:
            Remote URL, or None if the remote does not exist
        """
        return self._git_repository.get_remote_url(repo_path, remote)
