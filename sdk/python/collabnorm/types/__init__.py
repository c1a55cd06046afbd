"""collabnorm type definitions.

This module exports all data model types used by the package.
"""

from collabnorm.types.collaborators import Collaborator, NormalizeResult, Permission

__all__ = [
    "Permission",
    "Collaborator",
    "NormalizeResult",
]
