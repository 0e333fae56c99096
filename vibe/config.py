from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from vibe.errors import ConfigError

DEFAULT_OPENAI_MODEL = "gpt-4.1"
DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"


@dataclass(frozen=True)
class Settings:
    openai_api_key: str | None
    openai_model: str
    openai_base_url: str

    # None = wait as long as the transport allows
    timeout_s: float | None

    log_level: str


def load_settings() -> Settings:
    # Allow users to keep secrets in a local `.env` (not committed).
    load_dotenv(override=False)

    def getenv(key: str, default: str | None = None) -> str | None:
        v = os.getenv(key)
        if v is None or v == "":
            return default
        return v

    openai_api_key = getenv("OPENAI_API_KEY", None)
    openai_model = getenv("VIBE_OPENAI_MODEL", DEFAULT_OPENAI_MODEL) or DEFAULT_OPENAI_MODEL
    openai_base_url = getenv("VIBE_OPENAI_BASE_URL", DEFAULT_OPENAI_BASE_URL) or DEFAULT_OPENAI_BASE_URL

    raw_timeout = getenv("VIBE_TIMEOUT_S", None)
    timeout_s: float | None = None
    if raw_timeout is not None:
        try:
            timeout_s = float(raw_timeout)
        except ValueError:
            raise ConfigError(f"VIBE_TIMEOUT_S must be a number, got {raw_timeout!r}") from None
        if timeout_s <= 0:
            raise ConfigError(f"VIBE_TIMEOUT_S must be positive, got {raw_timeout!r}")

    log_level = (getenv("VIBE_LOG_LEVEL", "WARNING") or "WARNING").strip().upper()

    return Settings(
        openai_api_key=openai_api_key,
        openai_model=openai_model.strip(),
        openai_base_url=openai_base_url.strip(),
        timeout_s=timeout_s,
        log_level=log_level,
    )
