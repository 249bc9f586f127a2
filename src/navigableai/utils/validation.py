from typing import Any

from ..consts import HANDLER_ERROR_POLICIES
from ..errors import ConfigurationError


def validate_api_key(api_key: Any) -> str:
    """Validate that the API key is a non-empty string."""
    if not isinstance(api_key, str) or not api_key.strip():
        raise ConfigurationError('api_key is required and cannot be empty')
    return api_key


def validate_shared_secret_key(shared_secret_key: Any) -> None:
    """Validate the optional shared secret key."""
    if shared_secret_key is None:
        return
    if not isinstance(shared_secret_key, str) or not shared_secret_key:
        raise ConfigurationError('shared_secret_key must be a non-empty string when provided')


def validate_timeout(timeout: Any) -> None:
    """Validate that the timeout is a positive number of seconds."""
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigurationError('timeout must be a positive number of seconds')


def validate_handler_errors(policy: Any) -> None:
    """Validate the action handler error policy."""
    if policy not in HANDLER_ERROR_POLICIES:
        raise ConfigurationError(
            f"handler_errors must be one of {', '.join(HANDLER_ERROR_POLICIES)}"
        )
