"""Fluent single-request HTTP layer."""

from .actions import ActionProvider, SettableActionProvider
from .auth import (
    AuthenticationProvider,
    BasicAuthenticationProvider,
    TextAuthenticationProvider,
)
from .body import (
    BodyContent,
    BodyProvider,
    FormBodyProvider,
    MultipartBodyProvider,
    NamedFileStream,
    StreamBodyProvider,
    TextBodyProvider,
)
from .builder import RequestBuilder
from .client import HttpClient, Transport
from .config import HttpClientConfig
from .errors import (
    BodyNotAllowedError,
    ConfigurationError,
    HttpClientError,
    HttpStatusError,
    RequestTimeoutError,
    RetryableHttpError,
)
from .headers import DictionaryHeaderProvider, HeaderProvider, ObjectHeaderProvider
from .http import Http
from .request import Request
from .verbs import HttpVerb

__all__ = [
    "ActionProvider",
    "AuthenticationProvider",
    "BasicAuthenticationProvider",
    "BodyContent",
    "BodyNotAllowedError",
    "BodyProvider",
    "ConfigurationError",
    "DictionaryHeaderProvider",
    "FormBodyProvider",
    "HeaderProvider",
    "Http",
    "HttpClient",
    "HttpClientConfig",
    "HttpClientError",
    "HttpStatusError",
    "HttpVerb",
    "MultipartBodyProvider",
    "NamedFileStream",
    "ObjectHeaderProvider",
    "Request",
    "RequestBuilder",
    "RequestTimeoutError",
    "RetryableHttpError",
    "SettableActionProvider",
    "StreamBodyProvider",
    "TextAuthenticationProvider",
    "TextBodyProvider",
    "Transport",
]
