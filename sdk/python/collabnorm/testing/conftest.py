"""
Pytest plugin for collabnorm testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["collabnorm.testing.conftest"]
"""

from collabnorm.testing.fixtures import memory_directory, sample_collaborator, settings

__all__ = [
    "memory_directory",
    "sample_collaborator",
    "settings",
]
