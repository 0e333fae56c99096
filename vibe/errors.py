from __future__ import annotations


class VibeError(Exception):
    """Base class for every failure that ends a run with a non-zero exit."""

    kind = "error"
    exit_code = 1
    prefix = ""

    def __init__(self, detail: object = None) -> None:
        self.detail = detail
        super().__init__(self._format())

    def _format(self) -> str:
        if self.detail is None or self.detail == "":
            return self.prefix
        if not self.prefix:
            return str(self.detail)
        return f"{self.prefix}: {self.detail}"


class UsageError(VibeError):
    kind = "usage"
    prefix = "Usage: vibe <output.go> <prompt>"

    def _format(self) -> str:
        return self.prefix


class ConfigError(VibeError):
    kind = "config"


class SerializationError(VibeError):
    kind = "serialization"
    prefix = "Failed to serialize request body"


class RequestBuildError(VibeError):
    kind = "request"
    prefix = "Failed to create HTTP request"


class NetworkError(VibeError):
    kind = "network"
    prefix = "HTTP request failed"


class RemoteError(VibeError):
    """Non-200 reply from the API. ``body`` is kept verbatim for diagnosis."""

    kind = "remote"
    prefix = "API error"

    def __init__(self, status_code: int, body: str, raw: bytes | None = None) -> None:
        self.status_code = status_code
        self.body = body
        self.raw = body.encode("utf-8", errors="surrogateescape") if raw is None else raw
        super().__init__(body)

    def raw_message(self) -> bytes:
        return self.prefix.encode("utf-8") + b": " + self.raw


class DecodeError(VibeError):
    kind = "decode"
    prefix = "Failed to decode response"


class EmptyResultError(VibeError):
    kind = "empty_result"
    prefix = "No choices returned"


class PersistenceError(VibeError):
    kind = "persistence"
    prefix = "Failed to write file"
