"""collabnorm exception classes."""


class CollabNormError(Exception):
    """Base exception for all collabnorm errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(CollabNormError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class TransportError(CollabNormError):
    """Raised when the API cannot be reached (network, DNS, TLS, timeout)."""

    def __init__(self, message: str) -> None:
        super().__init__("CONNECTION_ERROR", message)


class DecodeError(CollabNormError):
    """Raised when a response body is not the expected JSON shape."""

    def __init__(self, message: str, request_id: str | None = None) -> None:
        super().__init__("DECODE_ERROR", message, request_id)


class ProtocolError(CollabNormError):
    """Raised when the API answers with a non-success status."""

    def __init__(
        self,
        code: str,
        message: str,
        request_id: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.status_code = status_code


class RedirectError(ProtocolError):
    """Raised on a 3xx answer, e.g. for a renamed or transferred repository."""

    def __init__(
        self,
        code: str,
        message: str,
        request_id: str | None = None,
        status_code: int | None = None,
        location: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id, status_code)
        self.location = location


class AuthenticationError(ProtocolError):
    """Raised when the token is rejected."""

    pass


class AuthorizationError(ProtocolError):
    """Raised when access is denied."""

    pass


class NotFoundError(ProtocolError):
    """Raised when a repository or collaborator is not found."""

    pass


class RateLimitedError(ProtocolError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(code, message, request_id, status_code)
        self.retry_after = retry_after


class ValidationError(ProtocolError):
    """Raised on validation errors."""

    pass


class ServerError(ProtocolError):
    """Raised on server errors (5xx)."""

    pass
