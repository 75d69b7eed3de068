"""Header providers resolved into concrete headers at dispatch time."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping
from urllib.parse import quote

from .fields import flatten_fields


class HeaderProvider(ABC):
    """Produces the headers attached to an outbound request."""

    @abstractmethod
    def get_headers(self) -> dict[str, str]:
        """Return a fresh header mapping; callers may mutate it."""


class DictionaryHeaderProvider(HeaderProvider):
    """Headers taken verbatim from a mapping."""

    def __init__(self, headers: Mapping[str, str]) -> None:
        self._headers = {str(name): str(value) for name, value in headers.items()}

    def get_headers(self) -> dict[str, str]:
        return dict(self._headers)


class ObjectHeaderProvider(DictionaryHeaderProvider):
    """Headers read off an object's public attributes and properties.

    Every value is percent-encoded so arbitrary text is safe to put on the
    wire. The object is read once, at construction.
    """

    def __init__(self, source: Any) -> None:
        super().__init__(
            {name: quote(value, safe="") for name, value in flatten_fields(source)}
        )
