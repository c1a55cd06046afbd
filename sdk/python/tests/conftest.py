"""Shared fixtures for the collabnorm test suite."""

from collabnorm.testing.conftest import (  # noqa: F401
    memory_directory,
    sample_collaborator,
    settings,
)
