"""Service constants for the Navigable AI Python SDK."""

from typing import Dict, NamedTuple

HOSTNAME = "www.navigable.ai"
BASE_URL = f"https://{HOSTNAME}"
API_KEY_HEADER = "X-Api-Key"
DEFAULT_TIMEOUT = 30  # seconds


class Endpoint(NamedTuple):
    path: str
    method: str


# API Endpoints
ENDPOINTS: Dict[str, Endpoint] = {
    "SEND_MESSAGE": Endpoint("/api/v1/chat", "POST"),
    "GET_MESSAGES": Endpoint("/api/v1/chat", "GET"),
    "GET_CHAT_SESSIONS": Endpoint("/api/v1/chat/sessions", "GET"),
    # session id is appended per request
    "GET_SESSION_MESSAGES": Endpoint("/api/v1/chat/sessions/", "GET"),
}

# What send_message does when an action handler raises
HANDLER_ERRORS_RAISE = "raise"  # re-raise to the caller
HANDLER_ERRORS_LOG = "log"  # log and return the response
HANDLER_ERRORS_FAIL = "fail"  # log and fail the call like any other per-call error
HANDLER_ERROR_POLICIES = (HANDLER_ERRORS_RAISE, HANDLER_ERRORS_LOG, HANDLER_ERRORS_FAIL)
