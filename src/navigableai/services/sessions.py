"""Chat sessions service for the Navigable AI Python SDK."""

from typing import Optional

from ..consts import ENDPOINTS
from ..result import ChatResult
from .base import BaseService


class SessionsService(BaseService):
    """Service for chat session listing and history."""

    def list_chat_sessions(self, identifier: str, signature: Optional[str] = None) -> ChatResult:
        """List the chat sessions of a user.

        Args:
            identifier: Your user's unique identifier
            signature: Signature of ``identifier``, required with a shared secret key

        Returns:
            Result wrapping the session list response
        """
        endpoint = ENDPOINTS["GET_CHAT_SESSIONS"]
        return self._call(
            "list_chat_sessions",
            identifier,
            signature,
            lambda: self.http_client.request(
                endpoint.path, endpoint.method, None, {"identifier": identifier}
            ),
            identifier=identifier,
        )

    def get_messages_by_session_id(
        self,
        session_id: str,
        identifier: str,
        signature: Optional[str] = None,
    ) -> ChatResult:
        """Retrieve the messages of one chat session.

        Args:
            session_id: Session id from :meth:`list_chat_sessions`
            identifier: Your user's unique identifier
            signature: Signature of ``identifier``, required with a shared secret key

        Returns:
            Result wrapping the message list response
        """
        endpoint = ENDPOINTS["GET_SESSION_MESSAGES"]
        path = f"{endpoint.path}{self.http_client.encode_url_component(session_id)}"
        return self._call(
            "get_messages_by_session_id",
            identifier,
            signature,
            lambda: self.http_client.request(
                path, endpoint.method, None, {"identifier": identifier}
            ),
            session_id=session_id,
            identifier=identifier,
        )
