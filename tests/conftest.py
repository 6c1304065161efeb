"""Shared fixtures: an in-memory git history."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from squash_changelog.git.domain.entities import Commit
from squash_changelog.git.domain.errors import RangeResolutionError
from squash_changelog.git.domain.value_objects import CommitRange
from squash_changelog.git.repositories.interfaces import GitRepository
from squash_changelog.git.services.git_service import GitService


def make_commit(commit_hash: str, summary: str, body: str = "") -> Commit:
    """Build a commit whose show-text looks like ``git show --no-patch``."""
    message_lines = [summary]
    if body:
        message_lines += [""] + body.splitlines()
    show_text = "\n".join(
        [
            f"commit {commit_hash}",
            "Author: Jane Doe <jane@example.com>",
            "Date:   Mon Oct 19 10:00:00 2026 +0200",
            "",
        ]
        + [f"    {line}" if line else "" for line in message_lines]
    ) + "\n"
    return Commit(hash=commit_hash, show_text=show_text, summary=summary, body=body)


class InMemoryGitRepository(GitRepository):
    """Git repository serving fixed commits, oldest first."""

    def __init__(
        self,
        commits: list[Commit],
        latest_tag: str | None = None,
        remotes: dict[str, str] | None = None,
        known_revisions: set[str] | None = None,
    ) -> None:
        self.commits = commits
        self.latest_tag = latest_tag
        self.remotes = remotes or {}
        self.known_revisions = known_revisions
        self.shown: list[str] = []
        self.listed_ranges: list[str] = []

    def list_commit_hashes(self, commit_range: CommitRange) -> Iterator[str]:
        expression = commit_range.expression
        self.listed_ranges.append(expression)
        if self.known_revisions is not None and expression not in self.known_revisions:
            raise RangeResolutionError(f"Failed to resolve range '{expression}'")
        for commit in self.commits:
            yield commit.hash

    def get_commit(self, repo_path: Path, commit_hash: str) -> Commit:
        self.shown.append(commit_hash)
        for commit in self.commits:
            if commit.hash == commit_hash:
                return commit
        raise RangeResolutionError(f"Failed to show commit {commit_hash}")

    def get_latest_tag(self, repo_path: Path) -> str | None:
        return self.latest_tag

    def get_remote_url(self, repo_path: Path, remote: str = "origin") -> str | None:
        return self.remotes.get(remote)


@pytest.fixture
def ordinary_commit() -> Commit:
    return make_commit("a" * 40, "Fix crash (#10)")


@pytest.fixture
def squash_commit() -> Commit:
    return make_commit(
        "b" * 40,
        "Merge branch 'feature/search' into 'master'",
        "Implement search (#11, #12)\n"
        "\n"
        "See merge request !7\n"
        "Merged-on: https://assembla.com/x/1234",
    )


@pytest.fixture
def plain_commit() -> Commit:
    return make_commit("c" * 40, "Bump version")


@pytest.fixture
def history(ordinary_commit: Commit, squash_commit: Commit, plain_commit: Commit) -> list[Commit]:
    return [ordinary_commit, squash_commit, plain_commit]


@pytest.fixture
def git_repository(history: list[Commit]) -> InMemoryGitRepository:
    return InMemoryGitRepository(
        history,
        latest_tag="v1.2.0",
        remotes={"origin": "git@git.assembla.com:demo.git"},
    )


@pytest.fixture
def git_service(git_repository: InMemoryGitRepository) -> GitService:
    return GitService(git_repository)
