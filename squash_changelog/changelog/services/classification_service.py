"""Service for telling squash-merge commits from ordinary ones."""

from squash_changelog.changelog.domain.value_objects import CommitKind
from squash_changelog.git.domain.entities import Commit


class CommitClassifier:
    """Classifies commits by the marker squash merges leave in their message."""

    SQUASH_MERGE_MARKER = "Merged-on"

    def is_squash_merge(self, show_text: str) -> bool:
        """
        Check whether a commit is a squash merge.

        Args:
            show_text: Full ``git show`` text of the commit

        Returns:
            True if the marker appears anywhere in the text (case-sensitive)
        """
        return self.SQUASH_MERGE_MARKER in show_text

    def classify(self, commit: Commit) -> CommitKind:
        """Return the kind of a commit."""
        if self.is_squash_merge(commit.show_text):
            return CommitKind.SQUASH_MERGE
        return CommitKind.ORDINARY
