"""Entry point: one factory per HTTP verb."""

from __future__ import annotations

from .builder import RequestBuilder
from .client import Transport
from .verbs import HttpVerb


class Http:
    """Start a RequestBuilder for ``url``.

    ``transport`` is forwarded to the builder; see RequestBuilder.
    """

    @staticmethod
    def get(url: str, *, transport: Transport | None = None) -> RequestBuilder:
        return RequestBuilder(url, HttpVerb.GET, transport=transport)

    @staticmethod
    def head(url: str, *, transport: Transport | None = None) -> RequestBuilder:
        return RequestBuilder(url, HttpVerb.HEAD, transport=transport)

    @staticmethod
    def post(url: str, *, transport: Transport | None = None) -> RequestBuilder:
        return RequestBuilder(url, HttpVerb.POST, transport=transport)

    @staticmethod
    def put(url: str, *, transport: Transport | None = None) -> RequestBuilder:
        return RequestBuilder(url, HttpVerb.PUT, transport=transport)

    @staticmethod
    def patch(url: str, *, transport: Transport | None = None) -> RequestBuilder:
        return RequestBuilder(url, HttpVerb.PATCH, transport=transport)

    @staticmethod
    def delete(url: str, *, transport: Transport | None = None) -> RequestBuilder:
        return RequestBuilder(url, HttpVerb.DELETE, transport=transport)

    @staticmethod
    def options(url: str, *, transport: Transport | None = None) -> RequestBuilder:
        return RequestBuilder(url, HttpVerb.OPTIONS, transport=transport)
