"""Per-call options with their documented defaults.

Callers may pass either an options model or a plain mapping; omitted fields
take the defaults below and unknown keys are rejected.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field


class CallOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", protected_namespaces=())

    model: str


class ChatOptions(CallOptions):
    model: str = "gpt-4o-mini"


class ImageOptions(CallOptions):
    model: str = "openai/dall-e-3"
    width: int = Field(512, gt=0)
    height: int = Field(512, gt=0)
    steps: int = Field(20, gt=0)


class VideoOptions(CallOptions):
    model: str = "openai/video-gen-1"
    duration: int = Field(5, gt=0, description="Clip length in seconds")


class VoiceOptions(CallOptions):
    model: str = "openai/tts-1"
    voice: str = "default"


class VoiceChatOptions(CallOptions):
    model: str = "openai/voice-chat-1"
    language: str = "en-US"


class GeminiOptions(CallOptions):
    model: str = "gemini-2.0-flash"


OptionsT = TypeVar("OptionsT", bound=CallOptions)


def resolve_options(cls: Type[OptionsT], options: Optional[Union[OptionsT, Mapping[str, Any]]]) -> OptionsT:
    if options is None:
        return cls()
    if isinstance(options, cls):
        return options
    return cls.model_validate(dict(options))
