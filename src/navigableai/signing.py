"""
Request signing for the Navigable AI Python SDK.

When a client is configured with a shared secret key, every call must carry
a signature: the hex encoded HMAC-SHA256 of the call's payload (the user
identifier, or the message text for ``send_message``) keyed by the secret.
Your backend computes the signature with :func:`compute_signature` and hands
it to the frontend together with the identifier.
"""

import hashlib
import hmac
from typing import Optional

from .errors import ConfigurationError, InvalidSignatureError, SignatureRequiredError


def compute_signature(payload: str, shared_secret_key: str) -> str:
    """Compute the hex HMAC-SHA256 signature of ``payload``.

    Args:
        payload: Text to sign (identifier or message)
        shared_secret_key: Shared secret used as the HMAC key

    Returns:
        Lowercase hex digest
    """
    return hmac.new(
        shared_secret_key.encode("utf-8"),
        payload.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def verify_signature(
    payload: str,
    signature: Optional[str],
    shared_secret_key: Optional[str] = None,
) -> bool:
    """Check ``signature`` against ``payload``.

    Signing is opt-in: without a shared secret key every signature passes.
    The comparison is constant-time.

    Args:
        payload: Signed text
        signature: Signature supplied by the caller
        shared_secret_key: Shared secret, or None when signing is disabled

    Returns:
        True when the signature matches or signing is disabled
    """
    if shared_secret_key is None:
        return True
    if not isinstance(signature, str):
        return False
    expected = compute_signature(payload, shared_secret_key)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))


class SignatureVerifier:
    """Holds the optional shared secret of a client and gates calls on it."""

    def __init__(self, shared_secret_key: Optional[str] = None) -> None:
        self._shared_secret_key = shared_secret_key

    def __repr__(self) -> str:
        return f"SignatureVerifier(enabled={self.enabled})"

    @property
    def enabled(self) -> bool:
        return self._shared_secret_key is not None

    def sign(self, payload: str) -> str:
        if self._shared_secret_key is None:
            raise ConfigurationError("No shared secret key configured")
        return compute_signature(payload, self._shared_secret_key)

    def verify(self, payload: str, signature: Optional[str]) -> bool:
        return verify_signature(payload, signature, self._shared_secret_key)

    def check(self, payload: str, signature: Optional[str]) -> None:
        """Raise unless ``signature`` is acceptable for ``payload``.

        Raises:
            SignatureRequiredError: signing is enabled and no signature given
            InvalidSignatureError: the signature does not match
        """
        if not self.enabled:
            return
        if not signature:
            raise SignatureRequiredError()
        if not self.verify(payload, signature):
            raise InvalidSignatureError()
