from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WireMessage(BaseModel):
    role: str = ""
    content: str = ""

    @field_validator("content", mode="before")
    @classmethod
    def null_content(cls, v):
        # OpenAI sends `"content": null` for refusals and tool calls.
        return "" if v is None else v


class ChatRequest(BaseModel):
    """Body of POST /chat/completions."""

    model: str
    messages: list[WireMessage]
    temperature: float = 0
    stop: list[str] = Field(default_factory=list)


class Choice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # a choice without "message" decodes to an empty one
    message: WireMessage = Field(default_factory=WireMessage)


class ChatResponse(BaseModel):
    """Only the fields the CLI consumes; `id`, `usage`, ... are ignored."""

    model_config = ConfigDict(extra="ignore")

    choices: list[Choice] = Field(default_factory=list)

    @field_validator("choices", mode="before")
    @classmethod
    def null_choices(cls, v):
        return [] if v is None else v
