"""Repository interfaces for Git operations."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from squash_changelog.git.domain.entities import Commit
from squash_changelog.git.domain.value_objects import CommitRange


class GitRepository(ABC):
    """Interface for the read-only Git queries the changelog needs."""

    @abstractmethod
    def list_commit_hashes(self, commit_range: CommitRange) -> Iterator[str]:
        """
        List commit hashes in a range, excluding true merge commits.

        Args:
            commit_range: Range of commits to retrieve

        Returns:
            Iterator over commit hashes ordered from oldest to newest

        Raises:
            RangeResolutionError: If git cannot resolve the range
        """
        ...

    @abstractmethod
    def get_commit(self, repo_path: Path, commit_hash: str) -> Commit:
        """
        Get a commit with its full show-text.

        Args:
            repo_path: Path to the git repository
            commit_hash: Hash of the commit

        Returns:
            Commit parsed from ``git show`` output
        """
        ...

    @abstractmethod
    def get_latest_tag(self, repo_path: Path) -> str | None:
        """
        Get the most recent tag reachable from HEAD.

        Args:
            repo_path: Path to the git repository

        Returns:
            Tag name, or None if the repository has no tag
        """
        ...

    @abstractmethod
    def get_remote_url(self, repo_path: Path, remote: str = "origin") -> str | None:
        """
        Get the fetch address of a remote.

        Args:
            repo_path: Path to the git repository
            remote: Name of the remote

        Returns:
            Remote URL, or None if the remote does not exist
        """
        ...
