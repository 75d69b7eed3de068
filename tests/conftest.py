# pyright: reportUnknownParameterType=false, reportMissingParameterType=false
import io
from typing import Any

import pytest
import requests

from kickhttp.networking.errors import RetryableHttpError
from kickhttp.networking.types import Err, Ok


class _RawStream(io.BytesIO):
    decode_content = False


def build_response(
    *,
    content: bytes = b"",
    status: int = 200,
    url: str = "http://example.com",
    reason: str = "OK",
    headers: dict[str, str] | None = None,
) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.reason = reason
    response.headers.update(headers or {"Content-Type": "application/json"})
    response.raw = _RawStream(content)
    return response


class EchoTransport:
    """Answers every request with its own body."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.responses: list[requests.Response] = []

    def send(self, method, url, *, headers, data=None):
        if data is None:
            payload = b""
        elif isinstance(data, (bytes, bytearray)):
            payload = bytes(data)
        else:
            payload = data.read()
        self.calls.append(
            {"method": method, "url": url, "headers": dict(headers), "data": payload}
        )
        response = build_response(
            content=payload,
            url=url,
            headers={"X-Echo": "1"},
        )
        self.responses.append(response)
        return Ok(response, meta={"method": method, "url": url})


class RefusingTransport:
    """Fails every request as a refused connection."""

    def __init__(self) -> None:
        self.calls = 0

    def send(self, method, url, *, headers, data=None):
        self.calls += 1
        meta = {"method": method, "url": url, "final_error": "ConnectionError"}
        return Err(RetryableHttpError("connection refused", meta=meta), meta=meta)


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def echo_transport():
    return EchoTransport()


@pytest.fixture
def refusing_transport():
    return RefusingTransport()
