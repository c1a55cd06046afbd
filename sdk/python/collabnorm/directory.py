"""The narrow interface the normalizer needs from a collaborator backend."""

from typing import Protocol, runtime_checkable

from collabnorm.types.collaborators import Collaborator, Permission


@runtime_checkable
class CollaboratorDirectory(Protocol):
    """A paginated source of collaborators whose permissions can be changed."""

    def list_page(self, page: int, per_page: int) -> list[Collaborator]:
        """Return one page of collaborators; an empty list means past the end."""
        ...

    def set_permission(self, login: str, permission: Permission) -> None:
        """Overwrite the stored permission of one collaborator."""
        ...
