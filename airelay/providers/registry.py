from __future__ import annotations

from typing import Dict, Optional, Type

import httpx

from .base import HeaderBearerAuth, QueryParamAuth, RequestStrategy

STRATEGIES: Dict[str, Type[RequestStrategy]] = {
    "openrouter": HeaderBearerAuth,
    "gemini": QueryParamAuth,
}


def get_strategy(
    name: str,
    *,
    base_url: Optional[str] = None,
    timeout_s: Optional[float] = 60.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> RequestStrategy:
    name = name.lower().strip()
    if name not in STRATEGIES:
        raise ValueError(f"Unknown provider: {name} (expected one of {list(STRATEGIES)})")
    cls = STRATEGIES[name]
    if base_url:
        return cls(base_url, timeout_s=timeout_s, transport=transport)
    return cls(timeout_s=timeout_s, transport=transport)
