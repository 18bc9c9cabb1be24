import asyncio

import pytest

from airelay.providers.base import UpstreamError
from airelay.providers.gemini import gemini_generate_content


def test_key_in_url_not_header(upstream):
    asyncio.run(gemini_generate_content("g-secret", "hello", strategy=upstream.gemini()))
    req = upstream.last
    assert req.url.host == "generativelanguage.googleapis.com"
    assert req.url.path == "/v1beta/models/gemini-2.0-flash:generateContent"
    assert req.url.params["key"] == "g-secret"
    assert "authorization" not in req.headers
    assert upstream.last_json() == {"contents": [{"parts": [{"text": "hello"}]}]}


def test_model_override(upstream):
    asyncio.run(gemini_generate_content("g", "hi", {"model": "gemini-1.5-pro"}, strategy=upstream.gemini()))
    assert upstream.last.url.path == "/v1beta/models/gemini-1.5-pro:generateContent"


def test_returns_parsed_body(upstream):
    upstream.body = {"candidates": [{"content": {"parts": [{"text": "yo"}]}}]}
    out = asyncio.run(gemini_generate_content("g", "hi", strategy=upstream.gemini()))
    assert out == {"candidates": [{"content": {"parts": [{"text": "yo"}]}}]}


def test_error_message(unauthorized):
    with pytest.raises(UpstreamError, match="Google Gemini API error: 401 - unauthorized"):
        asyncio.run(gemini_generate_content("g", "hi", strategy=unauthorized.gemini()))
