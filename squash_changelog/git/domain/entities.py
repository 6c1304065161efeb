"""Git domain entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Commit:
    """Commit entity as rendered by ``git show``.

    Attributes:
        hash: Full commit hash
        show_text: Header and message exactly as printed by git
        summary: First line of the commit message
        body: Remaining message lines, without the blank separator line
    """

    hash: str
    show_text: str
    summary: str
    body: str

    @property
    def body_lines(self) -> list[str]:
        """Lines of the message body."""
        return self.body.splitlines()
