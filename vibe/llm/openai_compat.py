from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from vibe.errors import DecodeError, EmptyResultError, RemoteError, SerializationError
from vibe.prompts import CODER_SYSTEM, STOP_SEQUENCES
from vibe.schema import ChatRequest, ChatResponse, WireMessage

from .base import ChatMessage, Transport, TransportResponse
from .transport import HttpxTransport

logger = logging.getLogger(__name__)


def build_chat_request(prompt: str, *, model: str) -> ChatRequest:
    """Fixed-shape request: system instruction, then the prompt verbatim."""
    messages = [
        ChatMessage("system", CODER_SYSTEM),
        ChatMessage("user", prompt),
    ]
    return ChatRequest(
        model=model,
        messages=[WireMessage(role=m.role, content=m.content) for m in messages],
        temperature=0,
        stop=list(STOP_SEQUENCES),
    )


def encode_request(request: ChatRequest) -> bytes:
    # Strict UTF-8: undecodable argv bytes survive as lone surrogates and must fail here.
    try:
        return json.dumps(request.model_dump(), ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(exc) from exc


def extract_content(response: TransportResponse) -> str:
    if response.status_code != 200:
        raise RemoteError(response.status_code, response.text(), response.body)

    try:
        data = ChatResponse.model_validate_json(response.body)
    except ValidationError as exc:
        raise DecodeError(_first_error(exc)) from exc

    if not data.choices:
        raise EmptyResultError()
    # OpenAI returns: choices[0].message.content
    return data.choices[0].message.content.strip()


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    e = errors[0]
    loc = ".".join(str(p) for p in e.get("loc", ()))
    return f"{loc}: {e.get('msg')}" if loc else str(e.get("msg"))


class OpenAICompatLLM:
    """
    Minimal OpenAI-compatible ChatCompletions client via raw HTTP.
    Works with OpenAI or any OpenAI-compatible gateway if you point base_url accordingly.
    """

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        base_url: str = "https://api.openai.com/v1",
        transport: Transport | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.transport = transport if transport is not None else HttpxTransport()

    @property
    def url(self) -> str:
        return f"{self.base_url}/chat/completions"

    def complete(self, prompt: str) -> str:
        try:
            request = build_chat_request(prompt, model=self.model)
        except ValidationError as exc:
            raise SerializationError(_first_error(exc)) from exc
        body = encode_request(request)
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        logger.debug("model=%s prompt_chars=%d", self.model, len(prompt))
        response = self.transport.post(self.url, content=body, headers=headers)
        return extract_content(response)
