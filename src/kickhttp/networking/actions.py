"""Completion handling: where a finished request's outcome ends up."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO, Callable, Mapping, Optional

from .errors import HttpClientError

SuccessHandler = Callable[[Mapping[str, str], IO[bytes]], None]
FailHandler = Callable[[HttpClientError], None]


class ActionProvider(ABC):
    """Receives exactly one outcome per dispatched request."""

    @abstractmethod
    def on_success(self, headers: Mapping[str, str], stream: IO[bytes]) -> None:
        """Called with the response headers and the unread payload."""

    @abstractmethod
    def on_fail(self, error: HttpClientError) -> None:
        """Called with the failure descriptor when the request fails."""


class SettableActionProvider(ActionProvider):
    """Adapts an optional success callback and an optional fail callback.

    A missing callback drops its outcome silently.
    """

    def __init__(
        self,
        success: Optional[SuccessHandler] = None,
        fail: Optional[FailHandler] = None,
    ) -> None:
        self.success = success
        self.fail = fail

    def on_success(self, headers: Mapping[str, str], stream: IO[bytes]) -> None:
        if self.success is not None:
            self.success(headers, stream)

    def on_fail(self, error: HttpClientError) -> None:
        if self.fail is not None:
            self.fail(error)
