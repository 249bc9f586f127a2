"""Chat service for the Navigable AI Python SDK."""

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from ..consts import ENDPOINTS, HANDLER_ERRORS_FAIL, HANDLER_ERRORS_RAISE
from ..errors import ActionHandlerError
from ..result import ChatResult
from ..types.chat import SendMessageOptionsType
from .base import BaseService

if TYPE_CHECKING:
    from ..actions import ActionRegistry
    from ..client.http import HTTPClient
    from ..signing import SignatureVerifier

logger = logging.getLogger(__name__)

# option key -> wire field
_SEND_FIELDS = (
    ("identifier", "identifier"),
    ("new", "new"),
    ("markdown", "markdown"),
    ("current_page", "currentPage"),
    ("configured_actions", "configuredActions"),
    ("configured_functions", "configuredFunctions"),
    ("function_call_id", "functionCallId"),
)


class ChatService(BaseService):
    """Service for sending messages and reading the latest conversation."""

    def __init__(
        self,
        http_client: "HTTPClient",
        verifier: "SignatureVerifier",
        actions: "ActionRegistry",
        handler_errors: str = HANDLER_ERRORS_RAISE,
    ) -> None:
        """Initialize chat service.

        Args:
            http_client: HTTP client instance
            verifier: Signature verifier for the client's shared secret
            actions: Registry consulted when a response carries an action
            handler_errors: What to do when a handler raises: "raise",
                "log" (keep the response) or "fail" (log and return an error result)
        """
        super().__init__(http_client, verifier)
        self.actions = actions
        self.handler_errors = handler_errors

    def get_messages(self, identifier: str, signature: Optional[str] = None) -> ChatResult:
        """Get the last messages in the user's latest conversation.

        Args:
            identifier: Your user's unique identifier
            signature: Signature of ``identifier``, required with a shared secret key

        Returns:
            Result wrapping the message list response
        """
        endpoint = ENDPOINTS["GET_MESSAGES"]
        return self._call(
            "get_messages",
            identifier,
            signature,
            lambda: self.http_client.request(
                endpoint.path, endpoint.method, None, {"identifier": identifier}
            ),
            identifier=identifier,
        )

    def send_message(self, message: str, options: Optional[SendMessageOptionsType] = None) -> ChatResult:
        """Send a message and get the assistant's reply.

        On a 200 response carrying an action, the handler registered for that
        action runs before this method returns, unless ``omit_action_handler``
        is set.

        Args:
            message: Message to send
            options: Optional send options; ``signature`` signs ``message``

        Returns:
            Result wrapping the send-message response
        """
        options = options or {}
        endpoint = ENDPOINTS["SEND_MESSAGE"]
        body: Dict[str, Any] = {"message": message}
        for key, field in _SEND_FIELDS:
            if options.get(key) is not None:
                body[field] = options[key]

        result = self._call(
            "send_message",
            message,
            options.get("signature"),
            lambda: self.http_client.request(endpoint.path, endpoint.method, body),
            message=message,
            identifier=options.get("identifier"),
        )

        if result.ok and not options.get("omit_action_handler"):
            return self._dispatch_action(result)
        return result

    def _dispatch_action(self, result: ChatResult) -> ChatResult:
        response = result.response
        if response.get("statusCode") != 200:
            return result
        data = response.get("data")
        if not isinstance(data, dict):
            return result
        action = data.get("action")
        if not isinstance(action, str) or not action:
            return result

        try:
            self.actions.dispatch(action, data.get("identifier"))
        except Exception as e:
            if self.handler_errors == HANDLER_ERRORS_RAISE:
                raise
            logger.exception("Navigable AI: Error: action handler for %r failed", action)
            if self.handler_errors == HANDLER_ERRORS_FAIL:
                return ChatResult(error=ActionHandlerError(action, e))
        return result
