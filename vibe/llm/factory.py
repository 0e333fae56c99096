from __future__ import annotations

from vibe.config import Settings
from vibe.errors import ConfigError

from .base import Transport
from .openai_compat import OpenAICompatLLM
from .transport import HttpxTransport


def build_llm(settings: Settings, *, transport: Transport | None = None) -> OpenAICompatLLM:
    if not settings.openai_api_key:
        raise ConfigError("OPENAI_API_KEY is not set")
    if transport is None:
        transport = HttpxTransport(timeout_s=settings.timeout_s)
    return OpenAICompatLLM(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        base_url=settings.openai_base_url,
        transport=transport,
    )
