"""Services module for the Navigable AI Python SDK."""

from .chat import ChatService
from .sessions import SessionsService

__all__ = ["ChatService", "SessionsService"]
