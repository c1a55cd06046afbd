"""
Pytest fixtures for collabnorm testing.
"""

from collections.abc import Generator

import pytest

from collabnorm.config import Settings
from collabnorm.testing.mock import InMemoryCollaboratorDirectory, create_mock_collaborator
from collabnorm.types.collaborators import Collaborator, Permission


@pytest.fixture
def memory_directory() -> Generator[InMemoryCollaboratorDirectory, None, None]:
    """
    Provide an InMemoryCollaboratorDirectory with one collaborator per level.

    Example:
        ```python
        def test_my_feature(memory_directory):
            PermissionNormalizer(memory_directory).normalize()
            assert memory_directory.was_called("set_permission")
        ```
    """
    directory = InMemoryCollaboratorDirectory([
        create_mock_collaborator("admin-user", Permission.ADMIN),
        create_mock_collaborator("push-user", Permission.PUSH),
        create_mock_collaborator("pull-user", Permission.PULL),
    ])
    yield directory
    directory.reset()


@pytest.fixture
def sample_collaborator() -> Collaborator:
    """Provide a sample Collaborator with write access."""
    return create_mock_collaborator("octocat", Permission.PUSH)


@pytest.fixture
def settings() -> Settings:
    """Provide Settings pointing at a test repository."""
    return Settings(
        token="ghp_" + "x" * 36,
        repository="octo-org/hello-world",
        base_url="https://api.github.test",
    )
