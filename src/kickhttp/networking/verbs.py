"""HTTP methods understood by RequestBuilder."""

from __future__ import annotations

from enum import Enum


class HttpVerb(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    PATCH = "PATCH"
    OPTIONS = "OPTIONS"

    @property
    def allows_body(self) -> bool:
        return self not in (HttpVerb.GET, HttpVerb.HEAD)
