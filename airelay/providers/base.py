from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, Literal, Optional, Tuple

import httpx

logger = logging.getLogger(__name__)

Method = Literal["POST", "GET"]

OPENROUTER_API_BASE = "https://openrouter.ai/api/v1"
GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"


class ProviderError(RuntimeError):
    pass


class UpstreamError(ProviderError):
    """Raised when a provider answers with a non-success status.

    The raw response text is kept as-is; provider-specific error schemas are
    not decoded.
    """

    def __init__(self, provider: str, status_code: int, body: str):
        super().__init__(f"{provider} API error: {status_code} - {body}")
        self.provider = provider
        self.status_code = status_code
        self.body = body


class RequestStrategy(ABC):
    """How to reach one provider: host, credential placement and error wording.

    A strategy holds no per-call state. Each `invoke` opens its own
    `httpx.AsyncClient` and closes it before returning.

    Requests time out after `timeout_s` seconds (60 by default); pass `None`
    for no timeout. Redirects are not followed, so a 3xx is an error.
    """

    name: str
    label: str
    env_var: str

    def __init__(
        self,
        base_url: str,
        timeout_s: Optional[float] = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.transport = transport

    def resolve_key(self, api_key: Optional[str]) -> str:
        key = api_key if api_key is not None else os.environ.get(self.env_var)
        if not key:
            raise ProviderError(f"Missing {self.label} API key (set {self.env_var} or pass api_key)")
        return key

    @abstractmethod
    def authorize(self, api_key: str) -> Tuple[Dict[str, str], Dict[str, str]]:
        """Return (extra headers, query params) carrying the credential."""
        raise NotImplementedError

    def error_for(self, response: httpx.Response) -> UpstreamError:
        return UpstreamError(self.label, response.status_code, response.text)

    async def invoke(
        self,
        path: str,
        api_key: Optional[str],
        method: Method = "POST",
        payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        key = self.resolve_key(api_key)
        auth_headers, params = self.authorize(key)
        headers = {"Content-Type": "application/json"}
        headers.update(auth_headers)
        url = f"{self.base_url}{path}"

        logger.debug("%s %s %s", self.name, method, url)
        async with httpx.AsyncClient(timeout=self.timeout_s, transport=self.transport) as client:
            r = await client.request(
                method,
                url,
                headers=headers,
                params=params or None,
                json=payload,
            )
        if not r.is_success:
            logger.warning("%s %s %s returned HTTP %s", self.name, method, url, r.status_code)
            raise self.error_for(r)
        return r.json()


class HeaderBearerAuth(RequestStrategy):
    """Credential sent as `Authorization: Bearer <key>`."""

    def __init__(
        self,
        base_url: str = OPENROUTER_API_BASE,
        *,
        name: str = "openrouter",
        label: str = "OpenRouter",
        env_var: str = "OPENROUTER_API_KEY",
        timeout_s: Optional[float] = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(base_url, timeout_s=timeout_s, transport=transport)
        self.name = name
        self.label = label
        self.env_var = env_var

    def authorize(self, api_key: str) -> Tuple[Dict[str, str], Dict[str, str]]:
        return {"Authorization": f"Bearer {api_key}"}, {}


class QueryParamAuth(RequestStrategy):
    """Credential sent as a URL query parameter; no Authorization header."""

    def __init__(
        self,
        base_url: str = GEMINI_API_BASE,
        *,
        name: str = "gemini",
        label: str = "Google Gemini",
        env_var: str = "GEMINI_API_KEY",
        param: str = "key",
        timeout_s: Optional[float] = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(base_url, timeout_s=timeout_s, transport=transport)
        self.name = name
        self.label = label
        self.env_var = env_var
        self.param = param

    def authorize(self, api_key: str) -> Tuple[Dict[str, str], Dict[str, str]]:
        return {}, {self.param: api_key}
