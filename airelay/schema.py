from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    role: str
    content: str


class _Result(BaseModel):
    """Typed view over a provider response. Unknown fields are kept."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, protected_namespaces=())


class ResponseMessage(_Result):
    role: str = "assistant"
    content: Optional[str] = None


class ChatChoice(_Result):
    index: int = 0
    message: ResponseMessage
    finish_reason: Optional[str] = None


class ChatCompletion(_Result):
    id: Optional[str] = None
    model: Optional[str] = None
    choices: List[ChatChoice] = Field(default_factory=list)
    usage: Optional[Dict[str, Any]] = None

    @property
    def text(self) -> str:
        if not self.choices:
            return ""
        return self.choices[0].message.content or ""


class GeneratedAsset(_Result):
    url: Optional[str] = None
    b64_json: Optional[str] = None


class ImageGeneration(_Result):
    created: Optional[int] = None
    data: List[GeneratedAsset] = Field(default_factory=list)

    @property
    def urls(self) -> List[str]:
        return [d.url for d in self.data if d.url]


# The video and voice endpoints are not part of any published provider
# contract; these views only name the fields we expect to see.
class VideoGeneration(_Result):
    id: Optional[str] = None
    status: Optional[str] = None
    url: Optional[str] = None


class VoiceSynthesis(_Result):
    audio: Optional[str] = None
    url: Optional[str] = None


class VoiceChatReply(_Result):
    text: Optional[str] = None
    audio: Optional[str] = None


class GeminiPart(_Result):
    text: str = ""


class GeminiContentBody(_Result):
    role: Optional[str] = None
    parts: List[GeminiPart] = Field(default_factory=list)


class GeminiCandidate(_Result):
    content: Optional[GeminiContentBody] = None
    finish_reason: Optional[str] = Field(None, alias="finishReason")


class GeminiResponse(_Result):
    candidates: List[GeminiCandidate] = Field(default_factory=list)
    usage_metadata: Optional[Dict[str, Any]] = Field(None, alias="usageMetadata")

    @property
    def text(self) -> str:
        # first candidate only
        if not self.candidates or self.candidates[0].content is None:
            return ""
        return "".join(p.text for p in self.candidates[0].content.parts)
