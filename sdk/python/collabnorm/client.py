"""
collabnorm main client.

Provides the primary interface for talking to the GitHub API.
"""

from collections.abc import Mapping
from typing import Any

from collabnorm.clients import CollaboratorsClient
from collabnorm.config import Settings
from collabnorm.transport import HTTPTransport, RetryConfig


class CollabNormClient:
    """
    Main client for the GitHub collaborator API.

    Owns the HTTP transport and the resource clients built on it.

    Example:
        ```python
        from collabnorm import CollabNormClient, Settings

        settings = Settings(token="ghp_...", repository="octo/hello")
        with CollabNormClient(settings) as client:
            first_page = client.collaborators.list_page(1)
        ```
    """

    def __init__(self, settings: Settings) -> None:
        """
        Initialize the client.

        Args:
            settings: Explicit configuration (token, repository, timeouts)
        """
        self.settings = settings

        self._transport = HTTPTransport(
            base_url=settings.base_url,
            token=settings.token,
            timeout=settings.timeout,
            retry_config=RetryConfig(max_retries=settings.max_retries),
        )

        self.collaborators = CollaboratorsClient(self._transport, settings.repository)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> "CollabNormClient":
        """
        Create a client from environment variables.

        See Settings.from_env for the variables read.

        Raises:
            ConfigurationError: If GITHUB_TOKEN is missing or a value is invalid
        """
        return cls(Settings.from_env(environ, **overrides))

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "CollabNormClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
