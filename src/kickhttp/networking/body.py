"""Body providers: text, raw stream, URL-encoded form and multipart upload.

Each provider resolves to a BodyContent holding the Content-Type header value
and the payload handed to the transport. Resolving the same provider twice
yields identical bytes, except for payloads backed by a caller stream, which
can only be read once.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import IO, Any, Mapping, Union
from urllib.parse import quote, urlencode

from urllib3.fields import RequestField
from urllib3.filepost import choose_boundary, encode_multipart_formdata

from .fields import Fields, flatten_fields

DEFAULT_STREAM_CONTENT_TYPE = "application/octet-stream"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

BinarySource = Union[bytes, IO[bytes]]


@dataclass(frozen=True)
class BodyContent:
    content_type: str
    payload: BinarySource


class BodyProvider(ABC):
    """Produces the content type and payload of a request body."""

    @abstractmethod
    def get_body(self) -> BodyContent:
        """Resolve the body for one dispatch."""


class TextBodyProvider(BodyProvider):
    def __init__(
        self,
        text: str,
        content_type: str | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self.text = text
        self.encoding = encoding
        self.content_type = content_type or f"text/plain; charset={encoding}"

    def get_body(self) -> BodyContent:
        return BodyContent(self.content_type, self.text.encode(self.encoding))


class StreamBodyProvider(BodyProvider):
    """Forwards caller bytes or a readable stream untouched.

    The transport consumes a stream directly, so a second dispatch of the
    same provider sends whatever is left in it (usually nothing).
    """

    def __init__(
        self, stream: BinarySource, content_type: str | None = None
    ) -> None:
        self.stream = stream
        self.content_type = content_type or DEFAULT_STREAM_CONTENT_TYPE

    def get_body(self) -> BodyContent:
        return BodyContent(self.content_type, self.stream)


class FormBodyProvider(BodyProvider):
    """``application/x-www-form-urlencoded`` body built from scalar pairs."""

    def __init__(self) -> None:
        self._parameters: Fields = []

    @property
    def parameters(self) -> Fields:
        return list(self._parameters)

    def add_parameters(self, source: Mapping[str, Any] | Any) -> None:
        """Append pairs from a mapping or an object's public fields."""
        self._parameters.extend(flatten_fields(source))

    def encode(self) -> str:
        return urlencode(self._parameters, quote_via=quote)

    def get_body(self) -> BodyContent:
        return BodyContent(FORM_CONTENT_TYPE, self.encode().encode("ascii"))


@dataclass(frozen=True)
class NamedFileStream:
    """One file part of a multipart upload.

    Attributes:
        name: Form field name.
        filename: File name reported to the server.
        stream: File contents, as bytes or a readable binary stream.
        content_type: Content-Type of the part.
    """

    name: str
    filename: str
    stream: BinarySource
    content_type: str = DEFAULT_STREAM_CONTENT_TYPE

    def read(self) -> bytes:
        if isinstance(self.stream, (bytes, bytearray)):
            return bytes(self.stream)
        return self.stream.read()


class MultipartBodyProvider(BodyProvider):
    """``multipart/form-data`` body made of file parts then scalar fields.

    The boundary is chosen once per provider so repeated resolution is
    byte-identical when every file is backed by bytes.
    """

    def __init__(self, boundary: str | None = None) -> None:
        self.boundary = boundary or choose_boundary()
        self._files: list[NamedFileStream] = []
        self._parameters: Fields = []

    @property
    def files(self) -> list[NamedFileStream]:
        return list(self._files)

    @property
    def parameters(self) -> Fields:
        return list(self._parameters)

    def add_file(self, file: NamedFileStream) -> None:
        self._files.append(file)

    def set_parameters(self, source: Mapping[str, Any] | Any | None) -> None:
        """Replace the scalar fields with pairs from ``source``."""
        self._parameters = flatten_fields(source)

    def _parts(self) -> list[RequestField]:
        parts = []
        for file in self._files:
            part = RequestField(file.name, file.read(), filename=file.filename)
            part.make_multipart(content_type=file.content_type)
            parts.append(part)
        for name, value in self._parameters:
            part = RequestField(name, value)
            part.make_multipart()
            parts.append(part)
        return parts

    def get_body(self) -> BodyContent:
        payload, content_type = encode_multipart_formdata(
            self._parts(), boundary=self.boundary
        )
        return BodyContent(content_type, payload)
