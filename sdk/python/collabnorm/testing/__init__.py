"""collabnorm testing utilities.

Provides an in-memory collaborator directory and fixtures for testing code
that uses collabnorm without reaching the GitHub API.
"""

from collabnorm.testing.mock import (
    InMemoryCollaboratorDirectory,
    MockCall,
    collaborator_payload,
    create_mock_collaborator,
)

__all__ = [
    "InMemoryCollaboratorDirectory",
    "MockCall",
    "create_mock_collaborator",
    "collaborator_payload",
]
