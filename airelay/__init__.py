"""Thin async clients for OpenRouter and Google Gemini.

Every endpoint function performs exactly one HTTP round trip and returns the
parsed JSON body. Provider differences (host, where the credential goes, how
errors are worded) live in a small request strategy so both providers share
one invocation path.
"""
from __future__ import annotations

from .encoding import blob_to_base64
from .providers.base import ProviderError, UpstreamError
from .providers.gemini import gemini_generate_content
from .providers.openrouter import (
    chat_completion,
    image_to_video,
    text_to_image,
    text_to_voice,
    voice_chat,
)

__all__ = [
    "ProviderError",
    "UpstreamError",
    "blob_to_base64",
    "chat_completion",
    "gemini_generate_content",
    "image_to_video",
    "text_to_image",
    "text_to_voice",
    "voice_chat",
]
