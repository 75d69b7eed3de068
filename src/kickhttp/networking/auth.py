"""Authentication providers producing an ``Authorization`` header value."""

from __future__ import annotations

import base64
from abc import ABC, abstractmethod

AUTHORIZATION_HEADER = "Authorization"


class AuthenticationProvider(ABC):
    @abstractmethod
    def get_auth_header(self) -> str:
        """Return the value sent in the ``Authorization`` header."""


class BasicAuthenticationProvider(AuthenticationProvider):
    """RFC 7617 basic credentials, UTF-8 encoded."""

    def __init__(self, username: str, password: str) -> None:
        self.username = username
        self.password = password

    def get_auth_header(self) -> str:
        token = f"{self.username}:{self.password}".encode("utf-8")
        return "Basic " + base64.b64encode(token).decode("ascii")


class TextAuthenticationProvider(AuthenticationProvider):
    """Pre-built header value such as ``Bearer <token>``."""

    def __init__(self, text: str) -> None:
        self.text = text

    def get_auth_header(self) -> str:
        return self.text
