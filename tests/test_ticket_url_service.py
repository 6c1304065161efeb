"""Tests for ticket URL resolution and space URL derivation."""

from pathlib import Path

import pytest

from squash_changelog.changelog.domain.value_objects import TicketReference
from squash_changelog.changelog.services.ticket_url_service import (
    TicketUrlResolver,
    derive_space_name,
    derive_space_url,
    resolve_space_url,
)
from squash_changelog.git.domain.errors import ConfigurationError
from squash_changelog.git.services.git_service import GitService
from tests.conftest import InMemoryGitRepository


def test_resolve_with_space_url() -> None:
    resolver = TicketUrlResolver("https://app.assembla.com/spaces/demo")

    assert (
        resolver.resolve(TicketReference("#42"))
        == "https://app.assembla.com/spaces/demo/tickets/42"
    )


def test_resolve_without_space_url_keeps_reference() -> None:
    assert TicketUrlResolver(None).resolve(TicketReference("#42")) == "#42"


@pytest.mark.parametrize(
    ("remote_url", "expected"),
    [
        ("git@git.assembla.com:demo.git", "demo"),
        ("https://git.assembla.com/demo.git", "demo"),
        ("git@git.assembla.com:my-space.backend.git", "my-space"),
        ("ssh://git@git.assembla.com/team/demo", "demo"),
    ],
)
def test_derive_space_name(remote_url: str, expected: str) -> None:
    assert derive_space_name(remote_url) == expected


def test_derive_space_url() -> None:
    assert (
        derive_space_url("git@git.assembla.com:demo.git")
        == "https://app.assembla.com/spaces/demo"
    )


@pytest.mark.parametrize("remote_url", ["git@git.assembla.com:.git", "https://example.com/"])
def test_empty_space_name_is_a_configuration_error(remote_url: str) -> None:
    with pytest.raises(ConfigurationError):
        derive_space_url(remote_url)


def test_explicit_space_url_wins(git_service: GitService) -> None:
    space_url = resolve_space_url(
        git_service, Path("."), explicit_space_url="https://example.com/s"
    )

    assert space_url == "https://example.com/s"


def test_space_url_derived_from_remote(git_service: GitService) -> None:
    assert resolve_space_url(git_service, Path(".")) == "https://app.assembla.com/spaces/demo"


def test_missing_remote_is_a_configuration_error() -> None:
    git_service = GitService(InMemoryGitRepository([]))

    with pytest.raises(ConfigurationError, match="Remote 'upstream' not found"):
        resolve_space_url(git_service, Path("."), remote="upstream")


def test_explicit_space_url_needs_no_remote() -> None:
    git_service = GitService(InMemoryGitRepository([]))

    assert resolve_space_url(git_service, Path("."), explicit_space_url="https://s") == "https://s"
