import asyncio
import io

import pytest

from airelay.encoding import blob_to_base64, strip_data_uri_prefix, to_data_uri


def test_bytes_encode_without_prefix():
    out = asyncio.run(blob_to_base64(b"hello"))
    assert out == "aGVsbG8="
    assert not out.startswith("data:")


def test_file_like_and_async_readers():
    class AsyncReader:
        async def read(self):
            return b"\xff\xfe"

    assert asyncio.run(blob_to_base64(io.BytesIO(b"hello"))) == "aGVsbG8="
    assert asyncio.run(blob_to_base64(AsyncReader())) == "//4="


def test_data_uri_prefix_is_stripped():
    uri = to_data_uri(b"hello", "audio/wav")
    assert uri == "data:audio/wav;base64,aGVsbG8="
    assert asyncio.run(blob_to_base64(uri)) == "aGVsbG8="
    assert strip_data_uri_prefix("aGVsbG8=") == "aGVsbG8="


def test_text_reader_rejected():
    with pytest.raises(TypeError):
        asyncio.run(blob_to_base64(io.StringIO("hello")))


def test_async_read_failure_propagates():
    class Failing:
        async def read(self):
            raise IOError("read aborted")

    with pytest.raises(IOError, match="read aborted"):
        asyncio.run(blob_to_base64(Failing()))


def test_plain_text_rejected():
    with pytest.raises(TypeError):
        asyncio.run(blob_to_base64("not base64 at all!"))


def test_non_base64_data_uri_rejected():
    with pytest.raises(TypeError):
        asyncio.run(blob_to_base64("data:text/plain,hi"))
    assert strip_data_uri_prefix("data:text/plain,hi") == "data:text/plain,hi"
