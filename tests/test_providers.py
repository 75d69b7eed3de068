import base64
from collections import namedtuple
from dataclasses import dataclass

from kickhttp.networking.auth import (
    BasicAuthenticationProvider,
    TextAuthenticationProvider,
)
from kickhttp.networking.fields import flatten_fields
from kickhttp.networking.headers import (
    DictionaryHeaderProvider,
    ObjectHeaderProvider,
)


class _Plain:
    def __init__(self):
        self.A = "x"
        self.B = "y z"
        self._hidden = "no"

    @property
    def Computed(self):
        return 42

    @property
    def _private(self):
        return "no"


@dataclass
class _Point:
    x: int
    y: int
    label: str | None = None


def test_flatten_mapping_keeps_order_and_stringifies():
    assert flatten_fields({"b": 2, "a": "1"}) == [("b", "2"), ("a", "1")]


def test_flatten_object_reads_public_attributes_then_properties():
    assert flatten_fields(_Plain()) == [("A", "x"), ("B", "y z"), ("Computed", "42")]


def test_flatten_dataclass_skips_none_values():
    assert flatten_fields(_Point(1, 2)) == [("x", "1"), ("y", "2")]


def test_flatten_namedtuple_and_none_source():
    pair = namedtuple("pair", "left right")

    assert flatten_fields(pair("l", "r")) == [("left", "l"), ("right", "r")]
    assert flatten_fields(None) == []


def test_dictionary_headers_are_verbatim_and_copied():
    source = {"Accept": "text/html; q=0.9"}
    provider = DictionaryHeaderProvider(source)
    source["Accept"] = "changed"

    first = provider.get_headers()
    first["X-Mutated"] = "1"

    assert provider.get_headers() == {"Accept": "text/html; q=0.9"}


def test_object_headers_are_percent_encoded():
    provider = ObjectHeaderProvider(_Plain())

    assert provider.get_headers() == {"A": "x", "B": "y%20z", "Computed": "42"}


def test_object_headers_escape_reserved_characters():
    headers = ObjectHeaderProvider({"Token": "a/b?c=d&e"}).get_headers()

    assert headers == {"Token": "a%2Fb%3Fc%3Dd%26e"}


def test_header_resolution_is_repeatable():
    provider = ObjectHeaderProvider(_Plain())

    assert provider.get_headers() == provider.get_headers()


def test_basic_auth_header():
    value = BasicAuthenticationProvider("user", "pässword").get_auth_header()

    assert value.startswith("Basic ")
    assert base64.b64decode(value[len("Basic "):]) == "user:pässword".encode()


def test_text_auth_header_is_verbatim():
    assert TextAuthenticationProvider("Bearer abc").get_auth_header() == "Bearer abc"
