"""
Navigable AI Python SDK

Client for the Navigable AI assistant API.
- Send messages and read conversation history for your users
- Optional request signing with a shared secret key (HMAC-SHA256)
- Action handlers that run when the assistant suggests an action
- Type safety with TypedDict interfaces
"""

from typing import Optional, Union

from .types import (
    # Common types
    ClientOptionsType as ClientOptions,

    # Chat types
    SendMessageOptionsType as SendMessageOptions,
    ChatMessageType,
    SendMessageDataType,
    ToolCallType,

    # Session types
    ChatSessionType,

    # Response types
    ApiResponseType as ApiResponse,
    SendMessageResponseType as SendMessageResponse,
    GetMessagesResponseType as GetMessagesResponse,
    ChatSessionsResponseType as ChatSessionsResponse,
    SessionMessagesResponseType as SessionMessagesResponse,
)
from .actions import ActionHandler, ActionRegistry
from .consts import BASE_URL, DEFAULT_TIMEOUT, ENDPOINTS, HANDLER_ERRORS_RAISE
from .errors import (
    ActionHandlerError,
    ConfigurationError,
    InvalidSignatureError,
    NavigableAIError,
    SignatureError,
    SignatureRequiredError,
    TransportError,
)
from .result import ChatResult
from .signing import SignatureVerifier, compute_signature, verify_signature

# Import internal modules
from .client.http import HTTPClient
from .services.chat import ChatService
from .services.sessions import SessionsService
from .utils.validation import (
    validate_api_key,
    validate_handler_errors,
    validate_shared_secret_key,
    validate_timeout,
)


class NavigableAI:
    """Navigable AI client for a single model.

    Per-call failures (a missing or invalid signature, a network error, an
    unparseable response) are logged and returned as ``None`` by the methods
    of this class. The ``*_result`` variants return a :class:`ChatResult`
    carrying the error instead.
    """

    def __init__(
        self,
        options: Union[ClientOptions, str, None] = None,
        shared_secret_key: Optional[str] = None,
    ) -> None:
        """Create a new NavigableAI client.

        Args:
            options: Client options, or the model API key as a string
            shared_secret_key: Optional shared secret key; overrides the
                ``shared_secret_key`` option

        Raises:
            ConfigurationError: The API key is missing or blank, or an option is invalid
        """
        if isinstance(options, str):
            options = {"api_key": options}
        elif options is None:
            options = {}
        if shared_secret_key is not None:
            options = {**options, "shared_secret_key": shared_secret_key}

        api_key = validate_api_key(options.get("api_key"))
        secret = options.get("shared_secret_key")
        validate_shared_secret_key(secret)
        timeout = options.get("timeout", DEFAULT_TIMEOUT)
        validate_timeout(timeout)
        handler_errors = options.get("handler_errors", HANDLER_ERRORS_RAISE)
        validate_handler_errors(handler_errors)

        self._api_key = api_key
        self._verifier = SignatureVerifier(secret)

        self.http_client = HTTPClient(api_key, options.get("base_url", BASE_URL), timeout)
        self.actions = ActionRegistry()
        self.chat = ChatService(self.http_client, self._verifier, self.actions, handler_errors)
        self.sessions = SessionsService(self.http_client, self._verifier)

    def __repr__(self) -> str:
        return f"NavigableAI(base_url={self.base_url!r}, signing={self.signing_enabled})"

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self.http_client.base_url

    @property
    def signing_enabled(self) -> bool:
        """Whether every call must carry a signature."""
        return self._verifier.enabled

    # Chat
    def get_messages(self, identifier: str, signature: Optional[str] = None) -> Optional[GetMessagesResponse]:
        """Get the last messages in the last conversation of a user.

        Args:
            identifier: Your user's unique identifier
            signature: Signature of ``identifier`` when using a shared secret key

        Returns:
            Message list response, or None on failure
        """
        return self.get_messages_result(identifier, signature).response

    def get_messages_result(self, identifier: str, signature: Optional[str] = None) -> ChatResult:
        """Get the last messages of a user, keeping the error on failure.

        Args:
            identifier: Your user's unique identifier
            signature: Signature of ``identifier`` when using a shared secret key

        Returns:
            Result with the message list response or the error
        """
        return self.chat.get_messages(identifier, signature)

    def send_message(
        self,
        message: str,
        options: Optional[SendMessageOptions] = None,
    ) -> Optional[SendMessageResponse]:
        """Send a message to Navigable AI and get a response from the assistant.

        If the assistant responds with an action that has a registered handler,
        the handler runs before this method returns.

        Args:
            message: Message to send
            options: Send options (identifier, new, markdown, current_page,
                configured_actions, configured_functions, function_call_id,
                signature, omit_action_handler)

        Returns:
            Send-message response, or None on failure
        """
        return self.send_message_result(message, options).response

    def send_message_result(
        self,
        message: str,
        options: Optional[SendMessageOptions] = None,
    ) -> ChatResult:
        """Send a message, keeping the error on failure.

        Args:
            message: Message to send
            options: Send options, as for :meth:`send_message`

        Returns:
            Result with the send-message response or the error
        """
        return self.chat.send_message(message, options)

    # Sessions
    def list_chat_sessions(self, identifier: str, signature: Optional[str] = None) -> Optional[ChatSessionsResponse]:
        """List the chat sessions of a user.

        Args:
            identifier: Your user's unique identifier
            signature: Signature of ``identifier`` when using a shared secret key

        Returns:
            Session list response, or None on failure
        """
        return self.list_chat_sessions_result(identifier, signature).response

    def list_chat_sessions_result(self, identifier: str, signature: Optional[str] = None) -> ChatResult:
        """List the chat sessions of a user, keeping the error on failure.

        Args:
            identifier: Your user's unique identifier
            signature: Signature of ``identifier`` when using a shared secret key

        Returns:
            Result with the session list response or the error
        """
        return self.sessions.list_chat_sessions(identifier, signature)

    def get_messages_by_session_id(
        self,
        session_id: str,
        identifier: str,
        signature: Optional[str] = None,
    ) -> Optional[SessionMessagesResponse]:
        """Get the messages of a chat session.

        Args:
            session_id: Chat session id
            identifier: Your user's unique identifier
            signature: Signature of ``identifier`` when using a shared secret key

        Returns:
            Message list response, or None on failure
        """
        return self.get_messages_by_session_id_result(session_id, identifier, signature).response

    def get_messages_by_session_id_result(
        self,
        session_id: str,
        identifier: str,
        signature: Optional[str] = None,
    ) -> ChatResult:
        """Get the messages of a chat session, keeping the error on failure.

        Args:
            session_id: Chat session id
            identifier: Your user's unique identifier
            signature: Signature of ``identifier`` when using a shared secret key

        Returns:
            Result with the message list response or the error
        """
        return self.sessions.get_messages_by_session_id(session_id, identifier, signature)

    # Action handlers
    def register_action_handler(self, action_name: str, handler: ActionHandler) -> None:
        """Register an action handler.

        The handler runs when the assistant responds with a suitable action
        that can be taken by the user. It is called as
        ``handler(action_name, identifier)``.

        Args:
            action_name: Name of the action in Navigable AI
            handler: Function to handle the action
        """
        self.actions.register(action_name, handler)

    def unregister_action_handler(self, action_name: str) -> bool:
        """Remove the handler for ``action_name``; returns whether one was registered."""
        return self.actions.unregister(action_name)

    # Signing
    def sign(self, payload: str) -> str:
        """Sign an identifier or message with the configured shared secret key.

        Raises:
            ConfigurationError: No shared secret key is configured
        """
        return self._verifier.sign(payload)


__all__ = [
    # Main client
    "NavigableAI",
    "HTTPClient",
    "ChatService",
    "SessionsService",
    "ActionRegistry",
    "ActionHandler",
    "ChatResult",
    "SignatureVerifier",
    "compute_signature",
    "verify_signature",
    "ENDPOINTS",

    # Errors
    "NavigableAIError",
    "ActionHandlerError",
    "ConfigurationError",
    "SignatureError",
    "SignatureRequiredError",
    "InvalidSignatureError",
    "TransportError",

    # Types
    "ClientOptions",
    "SendMessageOptions",
    "ChatMessageType",
    "SendMessageDataType",
    "ToolCallType",
    "ChatSessionType",
    "ApiResponse",
    "SendMessageResponse",
    "GetMessagesResponse",
    "ChatSessionsResponse",
    "SessionMessagesResponse",
]
