"""Call outcome for the Navigable AI Python SDK services."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import NavigableAIError, SignatureError, TransportError


@dataclass(frozen=True)
class ChatResult:
    """Either a parsed response or the error that prevented one.

    The legacy client methods return ``response`` (None on failure); use the
    result directly to tell a rejected signature from a network failure.
    """

    response: Optional[Dict[str, Any]] = None
    error: Optional[NavigableAIError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def signature_failed(self) -> bool:
        return isinstance(self.error, SignatureError)

    @property
    def transport_failed(self) -> bool:
        return isinstance(self.error, TransportError)

    def unwrap(self) -> Dict[str, Any]:
        """Return the response, raising the captured error on failure."""
        if self.error is not None:
            raise self.error
        return self.response
