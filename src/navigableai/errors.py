"""
Error classes for the Navigable AI Python SDK.

Configuration errors are raised at construction time. Signature and transport
errors are raised inside a call and captured by the services into a
``ChatResult``.
"""

from typing import Optional


class NavigableAIError(Exception):
    """Base exception class for the Navigable AI SDK."""

    def __init__(self, message: str) -> None:
        """Initialize Navigable AI error.

        Args:
            message: Error message
        """
        super().__init__(message)
        self.message = message


class ConfigurationError(NavigableAIError):
    """Invalid client configuration (missing API key, bad option values)."""


class SignatureError(NavigableAIError):
    """Base class for request signing failures."""


class SignatureRequiredError(SignatureError):
    """A shared secret key is configured but no signature was supplied."""

    def __init__(self, message: str = "Signature is required when using a shared secret key") -> None:
        super().__init__(message)


class InvalidSignatureError(SignatureError):
    """The supplied signature does not match the payload."""

    def __init__(self, message: str = "Invalid signature") -> None:
        super().__init__(message)


class TransportError(NavigableAIError):
    """Network-related or response parsing error."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        """Initialize transport error.

        Args:
            message: Error message
            status_code: HTTP status code, when a response was received
        """
        super().__init__(message)
        self.status_code = status_code


class ActionHandlerError(NavigableAIError):
    """An action handler raised while handling a send-message response."""

    def __init__(self, action_name: str, cause: Exception) -> None:
        super().__init__(f"Action handler for {action_name!r} failed: {cause}")
        self.action_name = action_name
        self.__cause__ = cause
