"""Run configuration read from the environment and .env files."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

PREVIOUS_SUCCESSFUL_COMMIT_VAR = "GIT_PREVIOUS_SUCCESSFUL_COMMIT"
SPACE_URL_VAR = "SQUASH_CHANGELOG_SPACE_URL"
REMOTE_VAR = "SQUASH_CHANGELOG_REMOTE"
FORMAT_VAR = "SQUASH_CHANGELOG_FORMAT"


def _load_env_file() -> None:
    """Load environment variables from .env file."""
    # Try to find .env file in project root (parent of squash_changelog package)
    project_root = Path(__file__).parent.parent
    env_file = project_root / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        # Fallback: try current directory
        load_dotenv()


def _getenv(name: str) -> str | None:
    value = os.getenv(name, "").strip()
    return value or None


@dataclass(frozen=True)
class ChangelogConfig:
    """Settings resolved once at startup.

    Attributes:
        previous_successful_commit: Commit of the last successful build
        space_url: Base URL of the space tickets belong to
        remote: Remote whose address names the space
        output_format: Name of the default output format
    """

    previous_successful_commit: str | None = None
    space_url: str | None = None
    remote: str = "origin"
    output_format: str = "changes"

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "ChangelogConfig":
        """
        Build the configuration from environment variables.

        Args:
            load_env_file: Whether to load a .env file first. Variables
                already set in the environment take precedence over it

        Returns:
            ChangelogConfig with unset or empty variables left at defaults
        """
        if load_env_file:
            _load_env_file()

        return cls(
            previous_successful_commit=_getenv(PREVIOUS_SUCCESSFUL_COMMIT_VAR),
            space_url=_getenv(SPACE_URL_VAR),
            remote=_getenv(REMOTE_VAR) or "origin",
            output_format=_getenv(FORMAT_VAR) or "changes",
        )
