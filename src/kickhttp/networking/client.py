"""Synchronous transport collaborator used by Request.

The request core never touches sockets itself. It hands the resolved method,
url, headers and payload to a Transport and receives a Result holding either
the live response or an HttpClientError describing why the call failed.
"""

from __future__ import annotations

import logging
from typing import IO, Any, Mapping, Protocol, Union

import requests

from .config import HttpClientConfig
from .errors import (
    HttpClientError,
    HttpStatusError,
    RequestTimeoutError,
    RetryableHttpError,
)
from .types import Err, Ok, Result

logger = logging.getLogger(__name__)

Payload = Union[bytes, IO[bytes], None]


class Transport(Protocol):
    """Anything able to execute one HTTP request."""

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        data: Payload = None,
    ) -> Result[requests.Response, HttpClientError]: ...


class HttpClient:
    """Default transport backed by a ``requests.Session``.

    Responses are requested with ``stream=True`` so the payload stays
    unread until a success handler consumes it. Any status outside 2xx is
    reported as an HttpStatusError.
    """

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        """Create a new HttpClient.

        Args:
            config: Timeouts, default headers and TLS settings.
        """
        self._config = config or HttpClientConfig()
        self._session = requests.Session()
        if self._config.user_agent:
            self._session.headers["User-Agent"] = self._config.user_agent
        self._session.headers.update(self._config.default_headers)

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    def _build_meta(
        self,
        method: str,
        request_url: str,
        response: requests.Response | None,
        final_error: str | None = None,
    ) -> dict[str, Any]:
        """Construct metadata dictionary from the response."""
        meta: dict[str, Any] = {
            "method": method,
            "url": request_url,
            "timeout_s": self._config.timeout,
        }
        if response is not None:
            meta["status"] = response.status_code
            meta["status_code"] = response.status_code
            meta["url"] = response.url
            meta["reason"] = response.reason
            try:
                meta["elapsed_s"] = response.elapsed.total_seconds()
            except AttributeError:
                pass  # elapsed is missing on hand-built responses
        if final_error is not None:
            meta["final_error"] = final_error
        return meta

    def _map_exception(
        self,
        method: str,
        url: str,
        exc: requests.exceptions.RequestException,
    ) -> HttpClientError:
        """Map requests exceptions to kickhttp errors."""
        response = exc.response
        meta = self._build_meta(method, url, response, type(exc).__name__)
        status = response.status_code if response is not None else None

        if isinstance(exc, requests.exceptions.Timeout):
            error_type: type[HttpClientError] = RequestTimeoutError
        elif isinstance(exc, requests.exceptions.ConnectionError):
            error_type = RetryableHttpError
        else:
            error_type = HttpClientError

        error = error_type(str(exc), status_code=status, meta=meta)
        error.__cause__ = exc
        return error

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        data: Payload = None,
    ) -> Result[requests.Response, HttpClientError]:
        """Execute a single request.

        Args:
            method: Upper-case HTTP verb.
            url: Absolute URL to request.
            headers: Resolved headers, merged over the session defaults.
            data: Encoded body bytes or a readable binary stream.

        Returns:
            Ok with the open response on a 2xx status, Err otherwise.
        """
        try:
            response = self._session.request(
                method,
                url,
                headers=dict(headers),
                data=data,
                timeout=self._config.timeout,
                allow_redirects=self._config.allow_redirects,
                stream=True,
                verify=self._config.verify_tls,
            )
        except requests.exceptions.RequestException as exc:
            error = self._map_exception(method, url, exc)
            if exc.response is not None:
                exc.response.close()
            return Err(error, meta=error.meta)
        except Exception as exc:
            # e.g. UnicodeEncodeError from http.client on non latin-1 headers
            meta = self._build_meta(method, url, None, type(exc).__name__)
            error = HttpClientError(str(exc), meta=meta)
            error.__cause__ = exc
            return Err(error, meta=meta)

        if not 200 <= response.status_code < 300:
            meta = self._build_meta(method, url, response, "HttpStatusError")
            response.close()
            error = HttpStatusError(
                f"{response.status_code} {response.reason} for url: {response.url}",
                status_code=response.status_code,
                meta=meta,
            )
            return Err(error, meta=meta)

        meta = self._build_meta(method, url, response)
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return Ok(response, meta=meta)

    def close(self) -> None:
        """Release the session's pooled connections."""
        self._session.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
