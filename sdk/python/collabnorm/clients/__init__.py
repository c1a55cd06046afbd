"""collabnorm resource clients."""

from collabnorm.clients.collaborators import CollaboratorsClient

__all__ = [
    "CollaboratorsClient",
]
