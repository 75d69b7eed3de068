"""Error taxonomy for request configuration and dispatch."""

from __future__ import annotations

from typing import Any, Mapping


class ConfigurationError(Exception):
    """A builder was configured in a way the request cannot honour."""


class BodyNotAllowedError(ConfigurationError):
    """Raised when a body is set on a GET or HEAD request."""


class HttpClientError(Exception):
    """Base failure passed to failure handlers.

    Attributes:
        status_code: Response status when a response was received.
        meta: Normalized request metadata built by the transport.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.meta: dict[str, Any] = dict(meta or {})


class RequestTimeoutError(HttpClientError):
    """The transport gave up waiting for the server."""


class RetryableHttpError(HttpClientError):
    """Connection-level failure (refused, reset, DNS)."""


class HttpStatusError(HttpClientError):
    """The server answered with a non-success status."""
