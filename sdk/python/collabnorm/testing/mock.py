"""
In-memory collaborator directory for testing.

Provides InMemoryCollaboratorDirectory, a fake backend that implements the
same list_page/set_permission interface as CollaboratorsClient without
making API calls. Downgrades are applied to its stored data, so running a
normalizer twice against it behaves like running it twice against GitHub.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from collabnorm.types.collaborators import Collaborator, Permission


@dataclass
class MockCall:
    """Record of a method call."""

    method: str
    args: tuple[Any, ...]
    kwargs: dict[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class InMemoryCollaboratorDirectory:
    """
    Fake collaborator backend.

    Example:
        ```python
        directory = InMemoryCollaboratorDirectory([
            create_mock_collaborator("alice", Permission.PUSH),
        ])
        PermissionNormalizer(directory).normalize()
        assert directory.permission_of("alice") is Permission.PULL
        ```
    """

    def __init__(
        self,
        collaborators: list[Collaborator] | None = None,
        page_sizes: list[int] | None = None,
    ) -> None:
        """
        Args:
            collaborators: Initial collaborator records, in listing order
            page_sizes: Serve pages of exactly these sizes instead of
                slicing by per_page; pages past the list are empty
        """
        self._collaborators: list[Collaborator] = list(collaborators or [])
        self._page_sizes = page_sizes
        self._page_errors: dict[int, Exception] = {}
        self._permission_errors: dict[str, Exception] = {}
        self.calls: list[MockCall] = []

    @classmethod
    def with_page_sizes(
        cls,
        page_sizes: list[int],
        permission: Permission = Permission.PULL,
    ) -> "InMemoryCollaboratorDirectory":
        """Build a directory holding sum(page_sizes) generated collaborators."""
        collaborators = [
            create_mock_collaborator(f"user-{i}", permission)
            for i in range(sum(page_sizes))
        ]
        return cls(collaborators, page_sizes=page_sizes)

    def configure_page_error(self, page: int, error: Exception) -> None:
        """Raise error when the given page is fetched."""
        self._page_errors[page] = error

    def configure_permission_error(self, login: str, error: Exception) -> None:
        """Raise error when the given collaborator's permission is set."""
        self._permission_errors[login] = error

    def list_page(self, page: int, per_page: int = 100) -> list[Collaborator]:
        self._record_call("list_page", (page, per_page), {})

        if page in self._page_errors:
            raise self._page_errors[page]

        if self._page_sizes is not None:
            if page > len(self._page_sizes):
                return []
            start = sum(self._page_sizes[: page - 1])
            return self._collaborators[start : start + self._page_sizes[page - 1]]

        start = (page - 1) * per_page
        return self._collaborators[start : start + per_page]

    def set_permission(self, login: str, permission: Permission) -> None:
        self._record_call("set_permission", (login, permission), {})

        if login in self._permission_errors:
            raise self._permission_errors[login]

        for i, collaborator in enumerate(self._collaborators):
            if collaborator.login == login:
                self._collaborators[i] = Collaborator(login=login, permission=permission)
                return
        raise KeyError(login)

    @property
    def collaborators(self) -> list[Collaborator]:
        """Current collaborator records."""
        return list(self._collaborators)

    def permission_of(self, login: str) -> Permission:
        """Current stored permission for one collaborator."""
        for collaborator in self._collaborators:
            if collaborator.login == login:
                return collaborator.permission
        raise KeyError(login)

    def _record_call(self, method: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        self.calls.append(MockCall(method=method, args=args, kwargs=kwargs))

    def get_calls(self, method: str | None = None) -> list[MockCall]:
        """Get recorded calls, optionally filtered by method name."""
        if method is None:
            return list(self.calls)
        return [c for c in self.calls if c.method == method]

    def was_called(self, method: str) -> bool:
        """Check if a method was called."""
        return any(c.method == method for c in self.calls)

    def call_count(self, method: str | None = None) -> int:
        """Get the number of calls, optionally filtered by method name."""
        return len(self.get_calls(method))

    def reset(self) -> None:
        """Clear recorded calls and configured errors."""
        self.calls.clear()
        self._page_errors.clear()
        self._permission_errors.clear()


def create_mock_collaborator(
    login: str = "mock-user",
    permission: Permission = Permission.PULL,
) -> Collaborator:
    """Create a Collaborator for tests."""
    return Collaborator(login=login, permission=permission)


def collaborator_payload(
    login: str,
    admin: bool = False,
    push: bool = False,
    pull: bool = True,
) -> dict[str, Any]:
    """Build one element of GitHub's collaborators listing."""
    return {
        "login": login,
        "type": "User",
        "site_admin": False,
        "permissions": {
            "admin": admin,
            "maintain": admin,
            "push": push,
            "triage": push,
            "pull": pull,
        },
        "role_name": "admin" if admin else "write" if push else "read" if pull else "none",
    }
