"""Value objects for the changelog domain."""

from dataclasses import dataclass
from enum import Enum

from squash_changelog.git.domain.errors import ConfigurationError


class CommitKind(str, Enum):
    """Shape of a commit in a squash-merge workflow."""

    SQUASH_MERGE = "squash_merge"
    ORDINARY = "ordinary"


class OutputFormat(str, Enum):
    """What the changelog prints for each commit."""

    COMMITS = "commits"
    CHANGES = "changes"
    TICKETS = "tickets"
    TICKET_URLS = "ticket_urls"
    MERGE_REQUESTS = "merge_requests"

    @classmethod
    def parse(cls, name: str) -> "OutputFormat":
        """
        Parse a format name or one of its aliases.

        Args:
            name: Format name, case-insensitive, ``-`` and ``_`` are equivalent

        Returns:
            Matching OutputFormat

        Raises:
            ConfigurationError: If the name matches no format
        """
        key = name.strip().lower().replace("-", "_")
        try:
            return _ALIASES[key]
        except KeyError:
            raise ConfigurationError(
                f"Unknown output format '{name}'. "
                f"Supported values: {', '.join(sorted(_ALIASES))}"
            ) from None

    @property
    def needs_space_url(self) -> bool:
        """Whether this format links tickets to the space."""
        return self is OutputFormat.TICKET_URLS


_ALIASES: dict[str, OutputFormat] = {
    "commits": OutputFormat.COMMITS,
    "changes": OutputFormat.CHANGES,
    "ticket": OutputFormat.TICKETS,
    "tickets": OutputFormat.TICKETS,
    "ticket_urls": OutputFormat.TICKET_URLS,
    "urls": OutputFormat.TICKET_URLS,
    "merge_requests": OutputFormat.MERGE_REQUESTS,
    "mr": OutputFormat.MERGE_REQUESTS,
}


@dataclass(frozen=True)
class TicketReference:
    """Reference to a ticket, such as ``#42``.

    Attributes:
        value: Reference exactly as written in the commit, including ``#``
    """

    value: str

    def __post_init__(self) -> None:
        """Validate the reference."""
        number = self.value[1:]
        if not self.value.startswith("#") or not (number.isascii() and number.isdigit()):
            raise ValueError(f"Invalid ticket reference '{self.value}'")

    @property
    def number(self) -> str:
        """Ticket number without the leading ``#``."""
        return self.value[1:]

    @property
    def sort_key(self) -> int:
        """Numeric ordering key."""
        return int(self.number)

    def __str__(self) -> str:
        return self.value
