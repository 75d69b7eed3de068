"""Fluent builder that accumulates request configuration.

Example::

    (
        RequestBuilder("https://example.com/items", HttpVerb.POST)
        .auth("user", "secret")
        .form({"name": "widget"})
        .on_success_text(print)
        .on_fail(lambda error: print(error.status_code))
        .go()
    )
"""

from __future__ import annotations

import os
import shutil
from typing import IO, Any, Callable, Iterable, Mapping, Optional, Union

from .actions import (
    ActionProvider,
    FailHandler,
    SettableActionProvider,
    SuccessHandler,
)
from .auth import (
    AuthenticationProvider,
    BasicAuthenticationProvider,
    TextAuthenticationProvider,
)
from .body import (
    BodyProvider,
    FormBodyProvider,
    MultipartBodyProvider,
    NamedFileStream,
    StreamBodyProvider,
    TextBodyProvider,
)
from .client import Transport
from .errors import BodyNotAllowedError
from .headers import DictionaryHeaderProvider, HeaderProvider, ObjectHeaderProvider
from .request import Request
from .verbs import HttpVerb

PathLike = Union[str, os.PathLike]


def _copy_to(path: PathLike, mode: str) -> SuccessHandler:
    def handler(headers: Mapping[str, str], stream: IO[bytes]) -> None:
        with open(path, mode) as target:
            shutil.copyfileobj(stream, target)

    return handler


class RequestBuilder:
    """Mutable configuration for a single request.

    Every setter returns the same builder, so calls chain in any order until
    ``go`` dispatches. The builder is not copied by ``go``; calling it again
    sends another request with whatever is configured at that point.
    """

    def __init__(
        self,
        url: str,
        method: HttpVerb | str = HttpVerb.GET,
        *,
        transport: Transport | None = None,
        encoding: str = "utf-8",
    ) -> None:
        """Create a builder.

        Args:
            url: Absolute URL to request.
            method: HTTP verb, as an HttpVerb or its name.
            transport: Collaborator that performs the call. A fresh
                HttpClient is used per request when omitted.
            encoding: Codec for text bodies and text success handlers.
        """
        self._url = url
        self._method = HttpVerb(method.upper()) if isinstance(method, str) else method
        self._transport = transport
        self._encoding = encoding

        self._header_provider: Optional[HeaderProvider] = None
        self._auth_provider: Optional[AuthenticationProvider] = None
        self._body_provider: Optional[BodyProvider] = None
        self._action_provider: Optional[ActionProvider] = None
        self._success: Optional[SuccessHandler] = None
        self._fail: Optional[FailHandler] = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def method(self) -> HttpVerb:
        return self._method

    # Headers

    def headers(
        self, source: HeaderProvider | Mapping[str, str] | Any
    ) -> RequestBuilder:
        """Replace the header provider.

        Mappings are used verbatim. Any other object contributes its public
        attributes and properties, with values percent-encoded.
        """
        if isinstance(source, HeaderProvider):
            self._header_provider = source
        elif isinstance(source, Mapping):
            self._header_provider = DictionaryHeaderProvider(source)
        else:
            self._header_provider = ObjectHeaderProvider(source)
        return self

    # Auth

    def auth(
        self,
        credentials: AuthenticationProvider | str,
        password: str | None = None,
    ) -> RequestBuilder:
        """Set authentication.

        ``auth(user, password)`` sends basic credentials, ``auth(text)``
        sends ``text`` as the Authorization header value.
        """
        if isinstance(credentials, AuthenticationProvider):
            self._auth_provider = credentials
        elif password is not None:
            self._auth_provider = BasicAuthenticationProvider(credentials, password)
        else:
            self._auth_provider = TextAuthenticationProvider(credentials)
        return self

    # Body

    def body(
        self,
        payload: BodyProvider | str | bytes | IO[bytes],
        content_type: str | None = None,
    ) -> RequestBuilder:
        """Set the request body.

        Raises:
            BodyNotAllowedError: The method is GET or HEAD.
            TypeError: ``payload`` is not a supported body source.
        """
        if not self._method.allows_body:
            raise BodyNotAllowedError(
                f"Cannot set the body of a {self._method.value} request"
            )

        if isinstance(payload, BodyProvider):
            if content_type is not None:
                raise TypeError("content_type cannot be combined with a BodyProvider")
            provider: BodyProvider = payload
        elif isinstance(payload, str):
            provider = TextBodyProvider(payload, content_type, self._encoding)
        elif isinstance(payload, (bytes, bytearray)) or hasattr(payload, "read"):
            provider = StreamBodyProvider(payload, content_type)
        else:
            raise TypeError(f"Unsupported body type: {type(payload).__name__}")

        self._body_provider = provider
        return self

    def form(self, source: Mapping[str, Any] | Any) -> RequestBuilder:
        """Send ``source`` as an URL-encoded form."""
        provider = FormBodyProvider()
        provider.add_parameters(source)
        return self.body(provider)

    def upload(
        self,
        files: Iterable[NamedFileStream],
        parameters: Mapping[str, Any] | Any | None = None,
    ) -> RequestBuilder:
        """Send ``files`` and ``parameters`` as multipart/form-data."""
        provider = MultipartBodyProvider()
        for file in files:
            provider.add_file(file)
        provider.set_parameters(parameters)
        return self.body(provider)

    # Actions

    def on_success(self, handler: SuccessHandler) -> RequestBuilder:
        """Call ``handler(headers, stream)`` with the unread response."""
        self._success = handler
        return self

    def on_success_text(
        self,
        handler: Callable[..., None],
        with_headers: bool = False,
    ) -> RequestBuilder:
        """Call ``handler`` with the decoded response text.

        With ``with_headers`` the handler receives ``(headers, text)``.
        """

        def read_text(headers: Mapping[str, str], stream: IO[bytes]) -> None:
            text = stream.read().decode(self._encoding)
            if with_headers:
                handler(headers, text)
            else:
                handler(text)

        return self.on_success(read_text)

    def download_to(self, path: PathLike) -> RequestBuilder:
        """Write the response payload to ``path``, replacing its contents."""
        return self.on_success(_copy_to(path, "wb"))

    def append_to(self, path: PathLike) -> RequestBuilder:
        """Append the response payload to ``path``."""
        return self.on_success(_copy_to(path, "ab"))

    def on_fail(self, handler: FailHandler) -> RequestBuilder:
        self._fail = handler
        return self

    def action(self, provider: ActionProvider) -> RequestBuilder:
        """Route outcomes to ``provider``; success/fail callbacks are ignored."""
        self._action_provider = provider
        return self

    def build(self) -> Request:
        """Snapshot the current configuration into a Request."""
        action = self._action_provider or SettableActionProvider(
            self._success, self._fail
        )
        return Request(
            url=self._url,
            method=self._method,
            action=action,
            auth=self._auth_provider,
            headers=self._header_provider,
            body=self._body_provider,
            transport=self._transport,
        )

    def go(self) -> None:
        """Dispatch the request; outcomes arrive through the handlers."""
        self.build().go()
