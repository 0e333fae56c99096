from .base import ChatMessage, LLMClient, Transport, TransportResponse
from .factory import build_llm

__all__ = ["ChatMessage", "LLMClient", "Transport", "TransportResponse", "build_llm"]
