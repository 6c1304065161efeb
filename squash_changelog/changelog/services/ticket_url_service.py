"""Service for linking ticket references to the project space."""

import logging
from pathlib import Path

from squash_changelog.changelog.domain.value_objects import TicketReference
from squash_changelog.git.domain.errors import ConfigurationError
from squash_changelog.git.services.git_service import GitService

logger = logging.getLogger(__name__)

DEFAULT_SPACES_URL = "https://app.assembla.com/spaces"


def derive_space_name(remote_url: str) -> str:
    """
    Derive the space name from a remote address.

    ``git@git.assembla.com:my-space.git`` and
    ``https://git.assembla.com/my-space.git`` both give ``my-space``.

    Args:
        remote_url: Fetch address of the remote

    Returns:
        Space name, possibly empty
    """
    last_separator = max(remote_url.rfind(":"), remote_url.rfind("/"))
    tail = remote_url[last_separator + 1 :]
    return tail.split(".", 1)[0].strip()


def derive_space_url(remote_url: str, spaces_url: str = DEFAULT_SPACES_URL) -> str:
    """
    Build the space URL of a repository from its remote address.

    Args:
        remote_url: Fetch address of the remote
        spaces_url: Base URL under which spaces live

    Returns:
        URL of the space

    Raises:
        ConfigurationError: If no space name can be derived
    """
    space_name = derive_space_name(remote_url)
    if not space_name:
        raise ConfigurationError(
            f"Could not derive a space name from remote '{remote_url}'. "
            "Set SQUASH_CHANGELOG_SPACE_URL or pass --space-url."
        )
    return f"{spaces_url}/{space_name}"


class TicketUrlResolver:
    """Turns ticket references into links to the space's tickets."""

    def __init__(self, space_url: str | None) -> None:
        """
        Initialize TicketUrlResolver.

        Args:
            space_url: Base URL of the space, None to keep raw references
        """
        self._space_url = space_url

    def resolve(self, ticket: TicketReference) -> str:
        """
        Resolve a ticket reference to its URL.

        Args:
            ticket: Reference to resolve

        Returns:
            Ticket URL, or the raw reference when no space URL is configured
        """
        if self._space_url is None:
            return ticket.value
        return f"{self._space_url}/tickets/{ticket.number}"


def resolve_space_url(
    git_service: GitService,
    repo_path: Path,
    explicit_space_url: str | None = None,
    remote: str = "origin",
) -> str:
    """
    Resolve the space URL once for the whole run.

    Args:
        git_service: Service used to read the remote address
        repo_path: Path to the git repository
        explicit_space_url: Space URL given by the user, used as is
        remote: Remote whose address names the space

    Returns:
        Space URL

    Raises:
        ConfigurationError: If the remote does not exist or its address names
            no space
    """
    if explicit_space_url:
        logger.debug("Using space URL %s", explicit_space_url)
        return explicit_space_url

    remote_url = git_service.get_remote_url(repo_path, remote)
    if remote_url is None:
        raise ConfigurationError(
            f"Remote '{remote}' not found, "
            "set SQUASH_CHANGELOG_SPACE_URL or pass --space-url."
        )

    space_url = derive_space_url(remote_url)
    logger.debug("Derived space URL %s from %s", space_url, remote_url)
    return space_url
