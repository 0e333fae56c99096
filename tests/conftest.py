from __future__ import annotations

import json
from typing import Mapping

import pytest

from vibe.llm import TransportResponse


class ScriptedTransport:
    """Returns canned replies and records every call."""

    def __init__(self, *responses: TransportResponse) -> None:
        self.responses = list(responses)
        self.calls: list[dict] = []

    def post(self, url: str, *, content: bytes, headers: Mapping[str, str]) -> TransportResponse:
        self.calls.append({"url": url, "content": content, "headers": dict(headers)})
        return self.responses.pop(0)

    @property
    def last_body(self) -> dict:
        return json.loads(self.calls[-1]["content"])


class EchoTransport(ScriptedTransport):
    """Answers with the user message as the first choice."""

    def post(self, url: str, *, content: bytes, headers: Mapping[str, str]) -> TransportResponse:
        self.calls.append({"url": url, "content": content, "headers": dict(headers)})
        user = json.loads(content)["messages"][-1]["content"]
        return ok_response(user)


class ExplodingTransport:
    def post(self, url: str, *, content: bytes, headers: Mapping[str, str]) -> TransportResponse:
        raise AssertionError("network must not be touched")


def ok_response(content: str) -> TransportResponse:
    body = {"choices": [{"message": {"role": "assistant", "content": content}}]}
    return TransportResponse(200, json.dumps(body).encode("utf-8"))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in ("OPENAI_API_KEY", "VIBE_OPENAI_MODEL", "VIBE_OPENAI_BASE_URL", "VIBE_TIMEOUT_S", "VIBE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.setattr("vibe.config.load_dotenv", lambda **kw: False)
    monkeypatch.chdir(tmp_path)
