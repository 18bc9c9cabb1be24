from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence, Union

from airelay.encoding import BinarySource, blob_to_base64
from airelay.options import (
    CallOptions,
    ChatOptions,
    ImageOptions,
    VideoOptions,
    VoiceChatOptions,
    VoiceOptions,
    resolve_options,
)
from airelay.schema import ChatMessage

from .base import RequestStrategy
from .registry import get_strategy

Message = Union[ChatMessage, Mapping[str, Any]]
OptionsArg = Optional[Union[CallOptions, Mapping[str, Any]]]


def _strategy(strategy: Optional[RequestStrategy]) -> RequestStrategy:
    return strategy or get_strategy("openrouter")


def _message_payload(messages: Sequence[Message]) -> list:
    # Mappings go out untouched and in order.
    return [m.model_dump() if isinstance(m, ChatMessage) else dict(m) for m in messages]


async def chat_completion(
    api_key: Optional[str],
    messages: Sequence[Message],
    options: OptionsArg = None,
    *,
    strategy: Optional[RequestStrategy] = None,
) -> Dict[str, Any]:
    opts = resolve_options(ChatOptions, options)
    payload = {
        "model": opts.model,
        "messages": _message_payload(messages),
    }
    return await _strategy(strategy).invoke("/chat/completions", api_key, "POST", payload)


async def text_to_image(
    api_key: Optional[str],
    prompt: str,
    options: OptionsArg = None,
    *,
    strategy: Optional[RequestStrategy] = None,
) -> Dict[str, Any]:
    opts = resolve_options(ImageOptions, options)
    payload = {
        "model": opts.model,
        "prompt": prompt,
        "width": opts.width,
        "height": opts.height,
        "steps": opts.steps,
    }
    return await _strategy(strategy).invoke("/images/generations", api_key, "POST", payload)


async def image_to_video(
    api_key: Optional[str],
    image_url: str,
    options: OptionsArg = None,
    *,
    strategy: Optional[RequestStrategy] = None,
) -> Dict[str, Any]:
    """Animate a still image.

    Speculative: OpenRouter does not document a video endpoint, the shape
    below is a best guess.
    """
    opts = resolve_options(VideoOptions, options)
    payload = {
        "model": opts.model,
        "image_url": image_url,
        "duration": opts.duration,
    }
    return await _strategy(strategy).invoke("/video/generations", api_key, "POST", payload)


async def text_to_voice(
    api_key: Optional[str],
    text: str,
    options: OptionsArg = None,
    *,
    strategy: Optional[RequestStrategy] = None,
) -> Dict[str, Any]:
    opts = resolve_options(VoiceOptions, options)
    payload = {
        "model": opts.model,
        "text": text,
        "voice": opts.voice,
    }
    return await _strategy(strategy).invoke("/voice/synthesis", api_key, "POST", payload)


async def voice_chat(
    api_key: Optional[str],
    audio: BinarySource,
    options: OptionsArg = None,
    *,
    strategy: Optional[RequestStrategy] = None,
) -> Dict[str, Any]:
    """Send recorded speech and get the assistant's reply.

    The audio is embedded as base64 text in the JSON body. Like
    `image_to_video` this targets an unverified endpoint shape.
    """
    opts = resolve_options(VoiceChatOptions, options)
    encoded = await blob_to_base64(audio)
    payload = {
        "model": opts.model,
        "audio": encoded,
        "language": opts.language,
    }
    return await _strategy(strategy).invoke("/voice/chat", api_key, "POST", payload)
