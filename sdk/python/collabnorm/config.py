"""
Runtime configuration.

All settings are gathered once at process start into a Settings object that
is passed down explicitly; nothing below this module reads the environment.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from collabnorm.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_REPOSITORY = "thoughtbot/maybe_haskell"
DEFAULT_PAGE_SIZE = 100
DEFAULT_TIMEOUT = 30.0

# GitHub caps per_page at 100
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class Settings:
    """Configuration for one normalize run."""

    token: str = field(repr=False)
    repository: str = DEFAULT_REPOSITORY
    base_url: str = DEFAULT_BASE_URL
    page_size: int = DEFAULT_PAGE_SIZE
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = 0

    def __post_init__(self) -> None:
        if not self.token or not self.token.strip():
            raise ConfigurationError("API token is empty")

        owner, _, name = self.repository.partition("/")
        if not owner or not name or "/" in name:
            raise ConfigurationError(
                f"Invalid repository: {self.repository!r}. Must be 'owner/name'"
            )

        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ConfigurationError(
                f"Invalid page size: {self.page_size}. Must be between 1 and {MAX_PAGE_SIZE}"
            )

        if self.max_retries < 0:
            raise ConfigurationError(
                f"Invalid max_retries: {self.max_retries}. Must not be negative"
            )

    @property
    def owner(self) -> str:
        return self.repository.partition("/")[0]

    @property
    def name(self) -> str:
        return self.repository.partition("/")[2]

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> "Settings":
        """
        Create settings from environment variables.

        Environment variables:
            GITHUB_TOKEN: Access token for the GitHub API (required)
            COLLABNORM_REPOSITORY: Target repository as owner/name
                (optional, default: thoughtbot/maybe_haskell)
            GITHUB_API_URL: Base URL for the API (optional, default: https://api.github.com)
            COLLABNORM_MAX_RETRIES: Retries on transport errors (optional, default: 0)

        Args:
            environ: Mapping to read instead of os.environ
            **overrides: Explicit values that win over the environment
                (None values are ignored)

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If GITHUB_TOKEN is missing or a value is invalid
        """
        if environ is None:
            environ = os.environ

        token = environ.get("GITHUB_TOKEN")
        if not token:
            raise ConfigurationError("GITHUB_TOKEN environment variable not set")

        values: dict[str, Any] = {
            "token": token,
            "repository": environ.get("COLLABNORM_REPOSITORY", DEFAULT_REPOSITORY),
            "base_url": environ.get("GITHUB_API_URL", DEFAULT_BASE_URL),
        }

        max_retries = environ.get("COLLABNORM_MAX_RETRIES")
        if max_retries is not None:
            try:
                values["max_retries"] = int(max_retries)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid COLLABNORM_MAX_RETRIES: {max_retries!r}. Must be an integer"
                ) from e

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

