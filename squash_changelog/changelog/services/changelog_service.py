"""Changelog service turning a commit range into output lines."""

import logging
from collections.abc import Callable, Iterator

from squash_changelog.changelog.domain.value_objects import OutputFormat
from squash_changelog.changelog.services.classification_service import CommitClassifier
from squash_changelog.changelog.services.message_service import MessageExtractor
from squash_changelog.changelog.services.metadata_service import MetadataParser
from squash_changelog.changelog.services.ticket_url_service import TicketUrlResolver
from squash_changelog.git.domain.entities import Commit
from squash_changelog.git.domain.value_objects import CommitRange
from squash_changelog.git.services.git_service import GitService

logger = logging.getLogger(__name__)


class ChangelogService:
    """Service for rendering the changelog of a commit range."""

    def __init__(
        self,
        git_service: GitService,
        ticket_url_resolver: TicketUrlResolver | None = None,
        classifier: CommitClassifier | None = None,
        metadata_parser: MetadataParser | None = None,
    ) -> None:
        """
        Initialize ChangelogService.

        Args:
            git_service: Service for reading commits
            ticket_url_resolver: Resolver for ticket links. Defaults to one
                without space URL, which prints raw references
            classifier: Commit classifier. Defaults to CommitClassifier()
            metadata_parser: Metadata parser. Defaults to MetadataParser()
        """
        self._git_service = git_service
        self._ticket_url_resolver = ticket_url_resolver or TicketUrlResolver(None)
        self._classifier = classifier or CommitClassifier()
        self._metadata_parser = metadata_parser or MetadataParser()
        self._message_extractor = MessageExtractor(self._classifier)

    def render(self, commit_range: CommitRange, output_format: OutputFormat) -> Iterator[str]:
        """
        Render the changelog of a range, one line at a time.

        Args:
            commit_range: Range of commits to render
            output_format: What to print for each commit

        Returns:
            Iterator over output lines, commits ordered from oldest to newest

        Raises:
            RangeResolutionError: If git cannot resolve the range
        """
        render_commit = self._renderer_for(output_format)
        for commit in self._git_service.iter_commits(commit_range):
            yield from render_commit(commit)

    def _renderer_for(self, output_format: OutputFormat) -> Callable[[Commit], Iterator[str]]:
        renderers: dict[OutputFormat, Callable[[Commit], Iterator[str]]] = {
            OutputFormat.COMMITS: self._render_hash,
            OutputFormat.CHANGES: self._render_change,
            OutputFormat.TICKETS: self._render_tickets,
            OutputFormat.TICKET_URLS: self._render_ticket_urls,
            OutputFormat.MERGE_REQUESTS: self._render_merge_request,
        }
        return renderers[output_format]

    def _render_hash(self, commit: Commit) -> Iterator[str]:
        yield commit.hash

    def _render_change(self, commit: Commit) -> Iterator[str]:
        kind = self._classifier.classify(commit)
        logger.debug("%s is %s", commit.hash[:8], kind.value)
        yield self._message_extractor.describe(commit, kind)

    def _render_tickets(self, commit: Commit) -> Iterator[str]:
        tickets = self._metadata_parser.extract_tickets(commit.show_text)
        for ticket in self._metadata_parser.unique_tickets(tickets):
            yield ticket.value

    def _render_ticket_urls(self, commit: Commit) -> Iterator[str]:
        tickets = self._metadata_parser.extract_tickets(commit.show_text)
        for ticket in self._metadata_parser.unique_tickets(tickets):
            yield self._ticket_url_resolver.resolve(ticket)

    def _render_merge_request(self, commit: Commit) -> Iterator[str]:
        url = self._metadata_parser.extract_merge_request_url(commit.show_text)
        if url is None:
            logger.debug("%s has no merge request URL", commit.hash[:8])
        yield url or ""
