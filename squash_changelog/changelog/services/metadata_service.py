"""Service for parsing ticket references and merge request URLs out of commits."""

import re

from squash_changelog.changelog.domain.value_objects import TicketReference


class MetadataParser:
    """Extracts metadata written in free-form commit messages."""

    TICKET_PATTERN: re.Pattern[str] = re.compile(r"#[0-9]+")
    MERGE_REQUEST_MARKER = "Merged-on:"

    def extract_tickets(self, show_text: str) -> list[TicketReference]:
        """
        Extract ticket references such as ``#12``.

        The text is split on whitespace and every ``#<digits>`` part of each
        token is captured, so ``(#11,`` yields ``#11``.

        Args:
            show_text: Full ``git show`` text of the commit

        Returns:
            References in encounter order, duplicates included
        """
        tickets: list[TicketReference] = []
        for token in show_text.split():
            for match in self.TICKET_PATTERN.findall(token):
                tickets.append(TicketReference(match))
        return tickets

    def extract_merge_request_url(self, show_text: str) -> str | None:
        """
        Extract the merge request URL of a squash merge.

        Args:
            show_text: Full ``git show`` text of the commit

        Returns:
            Text following ``Merged-on:`` on its line, or None without marker
        """
        for line in show_text.splitlines():
            _, marker, remainder = line.partition(self.MERGE_REQUEST_MARKER)
            if marker:
                return remainder.strip()
        return None

    @staticmethod
    def unique_tickets(tickets: list[TicketReference]) -> list[TicketReference]:
        """Deduplicate references and sort them by ticket number."""
        return sorted(set(tickets), key=lambda ticket: (ticket.sort_key, ticket.value))
