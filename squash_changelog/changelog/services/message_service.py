"""Service for picking the changelog line of a commit."""

from squash_changelog.changelog.domain.value_objects import CommitKind
from squash_changelog.changelog.services.classification_service import CommitClassifier
from squash_changelog.git.domain.entities import Commit


class MessageExtractor:
    """Selects the text that describes a commit in the changelog."""

    def __init__(self, classifier: CommitClassifier | None = None) -> None:
        """
        Initialize MessageExtractor.

        Args:
            classifier: Commit classifier. Defaults to CommitClassifier()
        """
        self._classifier = classifier or CommitClassifier()

    def describe(self, commit: Commit, kind: CommitKind | None = None) -> str:
        """
        Describe a commit in one line.

        Squash merges are described by the first line of their body, since the
        summary line only names the merged branch. Ordinary commits are
        described by their summary line, untouched.

        Args:
            commit: Commit to describe
            kind: Kind of the commit if already known

        Returns:
            Description line, empty if a squash merge has no body
        """
        if kind is None:
            kind = self._classifier.classify(commit)

        if kind is CommitKind.SQUASH_MERGE:
            body_lines = commit.body_lines
            return body_lines[0] if body_lines else ""
        return commit.summary
