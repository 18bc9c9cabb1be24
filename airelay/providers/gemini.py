from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from airelay.options import GeminiOptions, resolve_options

from .base import RequestStrategy
from .registry import get_strategy


async def gemini_generate_content(
    api_key: Optional[str],
    text: str,
    options: Optional[Union[GeminiOptions, Mapping[str, Any]]] = None,
    *,
    strategy: Optional[RequestStrategy] = None,
) -> Dict[str, Any]:
    """Single-turn `generateContent` call on the Gemini Generative Language API.

    Endpoint style (v1beta):
      https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent?key=...

    The credential travels only in the query string.
    """
    opts = resolve_options(GeminiOptions, options)
    payload: Dict[str, Any] = {
        "contents": [
            {
                "parts": [{"text": text}],
            }
        ],
    }
    strategy = strategy or get_strategy("gemini")
    return await strategy.invoke(f"/models/{opts.model}:generateContent", api_key, "POST", payload)
