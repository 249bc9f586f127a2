"""Shared call path for Navigable AI services."""

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from ..errors import NavigableAIError
from ..result import ChatResult

if TYPE_CHECKING:
    from ..client.http import HTTPClient
    from ..signing import SignatureVerifier

logger = logging.getLogger(__name__)


class BaseService:
    """Runs the signature gate and the transport call for one operation."""

    def __init__(self, http_client: "HTTPClient", verifier: "SignatureVerifier") -> None:
        """Initialize service.

        Args:
            http_client: HTTP client instance
            verifier: Signature verifier holding the client's shared secret
        """
        self.http_client = http_client
        self.verifier = verifier

    def _call(
        self,
        operation: str,
        payload: str,
        signature: Optional[str],
        send: Callable[[], Dict[str, Any]],
        **inputs: Any,
    ) -> ChatResult:
        """Check the signature over ``payload``, then run ``send``.

        Signature and transport errors are logged and returned in the result.
        """
        try:
            self.verifier.check(payload, signature)
            return ChatResult(response=send())
        except NavigableAIError as e:
            logger.error("Navigable AI: Error: %s (operation=%s, inputs=%r)", e.message, operation, inputs)
            return ChatResult(error=e)
