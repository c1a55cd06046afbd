"""collabnorm - keep GitHub repository collaborators at read access."""

__version__ = "0.1.0"

from collabnorm.client import CollabNormClient  # noqa: E402
from collabnorm.config import Settings  # noqa: E402
from collabnorm.directory import CollaboratorDirectory  # noqa: E402
from collabnorm.exceptions import (  # noqa: E402
    AuthenticationError,
    AuthorizationError,
    CollabNormError,
    ConfigurationError,
    DecodeError,
    NotFoundError,
    ProtocolError,
    RateLimitedError,
    RedirectError,
    ServerError,
    TransportError,
    ValidationError,
)
from collabnorm.logging import configure_logging, get_logger  # noqa: E402
from collabnorm.normalizer import PermissionNormalizer, normalize  # noqa: E402
from collabnorm.transport import HTTPTransport, RetryConfig  # noqa: E402
from collabnorm.types import Collaborator, NormalizeResult, Permission  # noqa: E402

__all__ = [
    "__version__",
    # Main Client
    "CollabNormClient",
    "Settings",
    # Normalizer
    "PermissionNormalizer",
    "normalize",
    "CollaboratorDirectory",
    # Types
    "Permission",
    "Collaborator",
    "NormalizeResult",
    # Exceptions
    "CollabNormError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "ProtocolError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "RedirectError",
    "ValidationError",
    "ServerError",
    # Transport
    "HTTPTransport",
    "RetryConfig",
    # Logging
    "configure_logging",
    "get_logger",
]
