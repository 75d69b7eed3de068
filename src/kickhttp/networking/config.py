"""Configuration for the HttpClient transport."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


def _default_headers() -> Mapping[str, str]:
    """Return immutable empty default headers mapping."""

    return MappingProxyType({})


@dataclass(frozen=True)
class HttpClientConfig:
    """Transport settings shared by every request sent through one client.

    Timeouts live here rather than on the builder: the request core has no
    notion of them and only sees the resulting failure.
    """

    user_agent: str | None = None
    default_headers: Mapping[str, str] = field(default_factory=_default_headers)
    verify_tls: bool = True
    allow_redirects: bool = True
    timeout_seconds: float | None = None
    connect_timeout_seconds: float | None = None
    read_timeout_seconds: float | None = None

    def __post_init__(self) -> None:
        has_connect_timeout = self.connect_timeout_seconds is not None
        has_read_timeout = self.read_timeout_seconds is not None
        if has_connect_timeout != has_read_timeout:
            raise ValueError(
                "connect_timeout_seconds and read_timeout_seconds "
                "must be set together"
            )
        for name in (
            "timeout_seconds",
            "connect_timeout_seconds",
            "read_timeout_seconds",
        ):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be > 0 when provided")

        object.__setattr__(
            self,
            "default_headers",
            MappingProxyType(dict(self.default_headers)),
        )

    @property
    def timeout(self) -> float | tuple[float, float] | None:
        """Timeout value in the shape ``requests`` expects."""
        if (
            self.connect_timeout_seconds is not None
            and self.read_timeout_seconds is not None
        ):
            return (self.connect_timeout_seconds, self.read_timeout_seconds)
        return self.timeout_seconds
