from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol


@dataclass(frozen=True)
class ChatMessage:
    role: str  # "system" | "user" | "assistant"
    content: str


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    body: bytes

    def text(self) -> str:
        return self.body.decode("utf-8", errors="surrogateescape")


class Transport(Protocol):
    def post(self, url: str, *, content: bytes, headers: Mapping[str, str]) -> TransportResponse:
        """Send one POST and return the status and the complete body."""
        raise NotImplementedError


class LLMClient(Protocol):
    def complete(self, prompt: str) -> str:
        """Return the assistant text for a single user prompt."""
        raise NotImplementedError
