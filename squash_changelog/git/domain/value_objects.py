"""Value objects for Git domain."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CommitRange:
    """Range of commits to read from a repository.

    ``revision`` is a native git range expression passed through untouched.
    When it is not set, the range goes from ``start`` (excluded) to ``end``
    (included), or covers all history reachable from ``end``.
    """

    repo_path: Path
    start: str | None = None
    end: str = "HEAD"
    revision: str | None = None

    @property
    def expression(self) -> str:
        """Range expression as understood by ``git rev-list``."""
        if self.revision:
            return self.revision
        if self.start:
            return f"{self.start}..{self.end}"
        return self.end
