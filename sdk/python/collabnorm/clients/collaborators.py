"""Collaborators resource client."""

from typing import TYPE_CHECKING
from urllib.parse import quote

from collabnorm.exceptions import ConfigurationError, DecodeError
from collabnorm.types.collaborators import Collaborator, Permission

if TYPE_CHECKING:
    from collabnorm.transport import HTTPTransport


class CollaboratorsClient:
    """Client for one repository's collaborator list on GitHub."""

    def __init__(self, transport: "HTTPTransport", repository: str) -> None:
        """
        Initialize the collaborators client.

        Args:
            transport: HTTP transport for making requests
            repository: Target repository as "owner/name"

        Raises:
            ConfigurationError: If repository is not "owner/name"
        """
        owner, _, name = repository.partition("/")
        if not owner or not name or "/" in name:
            raise ConfigurationError(
                f"Invalid repository: {repository!r}. Must be 'owner/name'"
            )

        self.transport = transport
        self.repository = repository
        self._base_path = f"/repos/{quote(owner, safe='')}/{quote(name, safe='')}/collaborators"

    def list_page(self, page: int, per_page: int = 100) -> list[Collaborator]:
        """
        List one page of repository collaborators.

        Args:
            page: Page number, starting at 1
            per_page: Records per page (GitHub allows at most 100)

        Returns:
            List of Collaborator objects; empty once past the last page

        Raises:
            AuthenticationError: If the token is rejected
            NotFoundError: If the repository is not found or not visible
            DecodeError: If the body is not a JSON array of collaborators
        """
        response = self.transport.request(
            method="GET",
            path=self._base_path,
            params={"page": page, "per_page": per_page},
        )

        if not isinstance(response, list):
            raise DecodeError(
                f"Expected a list of collaborators for page {page}, "
                f"got {type(response).__name__}"
            )

        return [Collaborator.from_api(item) for item in response]

    def set_permission(self, login: str, permission: Permission) -> None:
        """
        Set a collaborator's permission on the repository.

        GitHub answers 204 for an existing collaborator and 201 with an
        invitation body otherwise; both count as success.

        Args:
            login: The collaborator's username
            permission: The permission level to store

        Raises:
            ValueError: If permission is Permission.NONE
            AuthorizationError: If the token may not administer the repository
            NotFoundError: If the repository or user is not found
        """
        if permission is Permission.NONE:
            raise ValueError("Cannot set a collaborator's permission to none")

        self.transport.request(
            method="PUT",
            path=f"{self._base_path}/{quote(login, safe='')}",
            body={"permission": permission.value},
        )
