import io

from kickhttp.networking.body import (
    FormBodyProvider,
    MultipartBodyProvider,
    NamedFileStream,
    StreamBodyProvider,
    TextBodyProvider,
)


class _Fields:
    def __init__(self):
        self.name = "Jane Doe"
        self.city = "São Paulo"


def _split_parts(payload: bytes, boundary: str) -> list[bytes]:
    chunks = payload.split(f"--{boundary}".encode())
    assert chunks[0] == b""
    assert chunks[-1] == b"--\r\n"
    return chunks[1:-1]


def test_text_body_defaults_and_encoding():
    content = TextBodyProvider("héllo").get_body()

    assert content.content_type == "text/plain; charset=utf-8"
    assert content.payload == "héllo".encode("utf-8")


def test_text_body_custom_content_type():
    content = TextBodyProvider('{"a": 1}', "application/json").get_body()

    assert content.content_type == "application/json"
    assert content.payload == b'{"a": 1}'


def test_stream_body_forwards_stream_unchanged():
    stream = io.BytesIO(b"raw")
    content = StreamBodyProvider(stream).get_body()

    assert content.content_type == "application/octet-stream"
    assert content.payload is stream


def test_form_body_encodes_in_insertion_order():
    provider = FormBodyProvider()
    provider.add_parameters({"a": "1", "b": "2 3"})

    content = provider.get_body()

    assert content.content_type == "application/x-www-form-urlencoded"
    assert content.payload == b"a=1&b=2%203"


def test_form_body_from_object_and_repeated_additions():
    provider = FormBodyProvider()
    provider.add_parameters(_Fields())
    provider.add_parameters({"tag": "a&b"})

    assert provider.encode() == "name=Jane%20Doe&city=S%C3%A3o%20Paulo&tag=a%26b"
    assert provider.get_body() == provider.get_body()


def test_multipart_has_file_part_then_field_part():
    provider = MultipartBodyProvider()
    provider.add_file(NamedFileStream("f", "f.bin", b"\x00\x01data"))
    provider.set_parameters({"k": "v"})

    content = provider.get_body()

    assert content.content_type == f"multipart/form-data; boundary={provider.boundary}"
    file_part, field_part = _split_parts(content.payload, provider.boundary)
    file_headers, file_body = file_part.split(b"\r\n\r\n", 1)
    assert b'Content-Disposition: form-data; name="f"; filename="f.bin"' in file_headers
    assert b"Content-Type: application/octet-stream" in file_headers
    assert file_body == b"\x00\x01data\r\n"
    field_headers, field_body = field_part.split(b"\r\n\r\n", 1)
    assert field_headers == b'\r\nContent-Disposition: form-data; name="k"'
    assert field_body == b"v\r\n"


def test_multipart_reads_file_streams_and_object_parameters():
    provider = MultipartBodyProvider(boundary="fixedboundary")
    provider.add_file(
        NamedFileStream("doc", "notes.txt", io.BytesIO(b"notes"), "text/plain")
    )
    provider.set_parameters(_Fields())

    payload = provider.get_body().payload

    parts = _split_parts(payload, "fixedboundary")
    assert len(parts) == 3
    assert b"Content-Type: text/plain" in parts[0]
    assert parts[0].endswith(b"\r\n\r\nnotes\r\n")
    assert b'name="name"' in parts[1]
    assert parts[2].endswith("São Paulo\r\n".encode())


def test_multipart_boundary_is_stable_per_provider():
    provider = MultipartBodyProvider()
    provider.add_file(NamedFileStream("f", "f.bin", b"bytes"))

    assert provider.get_body() == provider.get_body()
    assert MultipartBodyProvider().boundary != provider.boundary


def test_multipart_set_parameters_replaces_previous():
    provider = MultipartBodyProvider()
    provider.set_parameters({"a": "1"})
    provider.set_parameters(None)

    assert provider.parameters == []
    assert provider.get_body().payload == f"--{provider.boundary}--\r\n".encode()


def test_stream_body_second_resolution_is_empty():
    provider = StreamBodyProvider(io.BytesIO(b"once"))

    assert provider.get_body().payload.read() == b"once"
    assert provider.get_body().payload.read() == b""


def test_multipart_stream_file_is_read_once():
    provider = MultipartBodyProvider(boundary="b")
    provider.add_file(NamedFileStream("f", "f.bin", io.BytesIO(b"once")))

    first = _split_parts(provider.get_body().payload, "b")
    second = _split_parts(provider.get_body().payload, "b")

    assert first[0].endswith(b"\r\n\r\nonce\r\n")
    assert second[0].endswith(b"\r\n\r\n\r\n")
