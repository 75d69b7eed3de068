"""A fully configured request and the code that dispatches it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import IO, Optional

import requests

from .actions import ActionProvider
from .auth import AUTHORIZATION_HEADER, AuthenticationProvider
from .body import BinarySource, BodyProvider
from .client import HttpClient, Transport
from .headers import HeaderProvider
from .verbs import HttpVerb

logger = logging.getLogger(__name__)

CONTENT_TYPE_HEADER = "Content-Type"


def _set_header(headers: dict[str, str], name: str, value: str) -> None:
    """Set ``name`` replacing any existing spelling of it."""
    for existing in [key for key in headers if key.lower() == name.lower()]:
        del headers[existing]
    headers[name] = value


def _response_stream(response: requests.Response) -> IO[bytes]:
    raw = response.raw
    # Undo gzip/deflate transfer encoding the way response.content would.
    raw.decode_content = True
    return raw


@dataclass(frozen=True)
class Request:
    """Immutable snapshot of a builder, executed once by ``go``."""

    url: str
    method: HttpVerb
    action: ActionProvider
    auth: Optional[AuthenticationProvider] = None
    headers: Optional[HeaderProvider] = None
    body: Optional[BodyProvider] = None
    transport: Optional[Transport] = None

    def _resolve(self) -> tuple[dict[str, str], Optional[BinarySource]]:
        headers = self.headers.get_headers() if self.headers else {}
        if self.auth is not None:
            _set_header(headers, AUTHORIZATION_HEADER, self.auth.get_auth_header())

        data: Optional[BinarySource] = None
        if self.body is not None:
            content = self.body.get_body()
            _set_header(headers, CONTENT_TYPE_HEADER, content.content_type)
            data = content.payload
        return headers, data

    def go(self) -> None:
        """Send the request and hand the outcome to ``action``.

        Transport failures are delivered to ``action.on_fail`` and never
        raised. Exceptions raised by the action itself propagate.
        """
        headers, data = self._resolve()
        if self.transport is not None:
            self._dispatch(self.transport, headers, data)
            return
        with HttpClient() as transport:
            self._dispatch(transport, headers, data)

    def _dispatch(
        self,
        transport: Transport,
        headers: dict[str, str],
        data: Optional[BinarySource],
    ) -> None:
        method = self.method.value
        logger.debug("Dispatching %s %s", method, self.url)
        result = transport.send(method, self.url, headers=headers, data=data)
        if not result.ok:
            logger.warning(
                "%s %s failed: %s",
                method,
                self.url,
                type(result.error).__name__,
            )
            self.action.on_fail(result.error)
            return

        response = result.value
        try:
            self.action.on_success(response.headers, _response_stream(response))
        finally:
            response.close()
