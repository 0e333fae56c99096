from .chat import ChatRequest, ChatResponse, Choice, WireMessage

__all__ = ["ChatRequest", "ChatResponse", "Choice", "WireMessage"]
