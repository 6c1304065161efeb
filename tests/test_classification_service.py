"""Tests for CommitClassifier."""

from squash_changelog.changelog.domain.value_objects import CommitKind
from squash_changelog.changelog.services.classification_service import CommitClassifier
from squash_changelog.git.domain.entities import Commit


def test_marker_makes_a_squash_merge(squash_commit: Commit) -> None:
    classifier = CommitClassifier()

    assert classifier.is_squash_merge(squash_commit.show_text)
    assert classifier.classify(squash_commit) is CommitKind.SQUASH_MERGE


def test_commit_without_marker_is_ordinary(ordinary_commit: Commit) -> None:
    classifier = CommitClassifier()

    assert not classifier.is_squash_merge(ordinary_commit.show_text)
    assert classifier.classify(ordinary_commit) is CommitKind.ORDINARY


def test_marker_is_case_sensitive() -> None:
    assert not CommitClassifier().is_squash_merge("merged-on: https://example.com/1")


def test_marker_matches_anywhere_in_text() -> None:
    # The colon is not part of the classification marker
    assert CommitClassifier().is_squash_merge("commit abc\n\n    Merged-on somewhere\n")


def test_every_commit_has_exactly_one_kind(history: list[Commit]) -> None:
    classifier = CommitClassifier()

    kinds = [classifier.classify(commit) for commit in history]

    assert kinds == [CommitKind.ORDINARY, CommitKind.SQUASH_MERGE, CommitKind.ORDINARY]
