"""
HTTP Transport for collabnorm.

Handles HTTP communication with the GitHub REST API: authentication headers,
optional retry on transport failures, and error handling.
"""

import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx

from collabnorm import __version__
from collabnorm.exceptions import (
    AuthenticationError,
    AuthorizationError,
    CollabNormError,
    DecodeError,
    NotFoundError,
    RateLimitedError,
    RedirectError,
    ServerError,
    TransportError,
    ValidationError,
)
from collabnorm.logging import get_logger, log_http_request, log_http_response

API_VERSION = "2022-11-28"

logger = get_logger("http")


@dataclass
class RetryConfig:
    """
    Configuration for automatic retry behavior.

    Only transport failures (connection, DNS, TLS, timeout) are retried.
    Non-success statuses and undecodable bodies always fail immediately.
    """

    max_retries: int = 0
    backoff_factor: float = 2.0
    max_backoff: float = 60.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


class HTTPTransport:
    """
    HTTP transport layer for the GitHub REST API.

    Handles:
    - Token authentication and API version headers
    - Exponential backoff with jitter for transport-level retries
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: Access token sent as a bearer credential
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": f"collabnorm/{__version__}",
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make an authenticated request.

        Args:
            method: HTTP method
            path: API path (e.g., "/repos/octo/hello/collaborators")
            params: Query parameters
            body: JSON request body (for PUT/POST/PATCH)

        Returns:
            Parsed JSON response, or None when the response has no body

        Raises:
            CollabNormError: On transport, protocol or decode errors
        """
        def make_request() -> httpx.Response:
            log_http_request(method, path, params=params, body=body)
            return self._client.request(method, path, params=params, json=body)

        return self._execute_with_retry(make_request)

    def _execute_with_retry(
        self, request_fn: Callable[[], httpx.Response]
    ) -> Any:
        """
        Execute a request, retrying transport failures only.

        Args:
            request_fn: Function that makes the HTTP request

        Returns:
            Parsed JSON response

        Raises:
            CollabNormError: On protocol/decode errors or after max retries
        """
        for attempt in range(self.retry_config.max_retries + 1):
            started = time.monotonic()
            try:
                response = request_fn()
            except httpx.RequestError as e:
                if attempt >= self.retry_config.max_retries:
                    raise TransportError(str(e) or type(e).__name__) from e

                wait_time = self._get_backoff_time(attempt)
                logger.warning(
                    "Transport error (%s), retrying in %.1fs (attempt %d/%d)",
                    type(e).__name__,
                    wait_time,
                    attempt + 1,
                    self.retry_config.max_retries,
                )
                time.sleep(wait_time)
                continue

            elapsed_ms = (time.monotonic() - started) * 1000
            log_http_response(response.status_code, str(response.url), elapsed_ms)

            if not response.is_success:
                raise self._parse_error_response(response)

            return self._decode_body(response)

        raise CollabNormError("UNKNOWN_ERROR", "Request failed with no error details")

    def _get_backoff_time(self, attempt: int) -> float:
        """
        Calculate backoff time for retry.

        Uses exponential backoff with jitter.

        Args:
            attempt: Current attempt number (0-indexed)

        Returns:
            Time to wait in seconds
        """
        # Exponential backoff: backoff_factor ^ attempt
        base_wait = self.retry_config.backoff_factor ** attempt

        # Apply jitter (±jitter%)
        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)
        wait_time = base_wait + jitter

        # Cap at max_backoff
        return min(wait_time, self.retry_config.max_backoff)

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        """Decode a success response body; 204 and empty bodies yield None."""
        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(
                f"Response from {response.url} is not valid JSON",
                response.headers.get("X-GitHub-Request-Id"),
            ) from e

    def _parse_error_response(self, response: httpx.Response) -> CollabNormError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate ProtocolError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        message = data.get("message") or f"HTTP {status_code}"
        request_id = response.headers.get("X-GitHub-Request-Id")

        if 300 <= status_code < 400:
            return RedirectError(
                "REDIRECT",
                message,
                request_id,
                status_code,
                response.headers.get("Location"),
            )
        elif status_code == 429 or (
            status_code == 403 and response.headers.get("X-RateLimit-Remaining") == "0"
        ):
            retry_after_str = response.headers.get("Retry-After", "60")
            try:
                retry_after = int(retry_after_str)
            except ValueError:
                retry_after = 60
            return RateLimitedError(
                "RATE_LIMITED", message, retry_after, request_id, status_code
            )
        elif status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, request_id, status_code)
        elif status_code == 403:
            return AuthorizationError("FORBIDDEN", message, request_id, status_code)
        elif status_code == 404:
            return NotFoundError("NOT_FOUND", message, request_id, status_code)
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, request_id, status_code)
        else:
            return ValidationError("VALIDATION_ERROR", message, request_id, status_code)
