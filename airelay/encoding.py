from __future__ import annotations

import base64
import inspect
import re
from typing import Any, Union

BinarySource = Union[bytes, bytearray, memoryview, str, Any]

_BASE64_DATA_URI = re.compile(r"^data:[^,]*;base64,", re.IGNORECASE)


def strip_data_uri_prefix(value: str) -> str:
    """Drop a leading `data:<mime>;base64,` if present."""
    m = _BASE64_DATA_URI.match(value)
    if m:
        return value[m.end():]
    return value


def to_data_uri(data: bytes, mime_type: str = "application/octet-stream") -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


async def _read_all(blob: Any) -> bytes:
    # Anything with read(): open files, BytesIO, aiofiles handles, upload objects.
    data = blob.read()
    if inspect.isawaitable(data):
        data = await data
    if isinstance(data, str):
        raise TypeError("Binary source returned text; open it in binary mode")
    return bytes(data)


async def blob_to_base64(blob: BinarySource) -> str:
    """Encode an in-memory binary object as base64 text for a JSON field.

    Accepts raw bytes, a readable binary object (sync or async `read()`), or a
    base64 data URI string. The result never carries a `data:...;base64,` prefix.
    Errors raised while reading propagate unchanged.
    """
    if isinstance(blob, str):
        # Only base64 data URIs are accepted as text.
        if not _BASE64_DATA_URI.match(blob):
            raise TypeError("Text sources must be base64 data URIs; pass raw bytes instead")
        return strip_data_uri_prefix(blob)
    if isinstance(blob, (bytes, bytearray, memoryview)):
        data = bytes(blob)
    elif hasattr(blob, "read"):
        data = await _read_all(blob)
    else:
        raise TypeError(f"Unsupported binary source: {type(blob).__name__}")
    return base64.b64encode(data).decode("ascii")
