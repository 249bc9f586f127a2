"""
HTTP transport for the Navigable AI Python SDK.

One request per call, no retries. The parsed JSON body is returned with the
HTTP status code injected as ``statusCode``; error statuses are not raised
because the service reports them inside its response envelope.
"""

import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote, urlencode

import requests

from ..consts import BASE_URL, DEFAULT_TIMEOUT
from ..errors import TransportError
from .auth import build_headers

logger = logging.getLogger(__name__)


class HTTPClient:
    """Simple HTTP client authenticating with the model API key."""

    def __init__(self, api_key: str, base_url: str = BASE_URL, timeout: float = DEFAULT_TIMEOUT):
        """Initialize HTTP client.

        Args:
            api_key: API key sent as X-Api-Key on every request
            base_url: Service root, without trailing slash
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def request(
        self,
        path: str,
        method: str = 'GET',
        body: Optional[Dict[str, Any]] = None,
        query: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Make HTTP request to the Navigable AI API.

        Args:
            path: Request path (e.g., '/api/v1/chat')
            method: HTTP method
            body: Optional JSON body, sent for write requests only
            query: Optional query string parameters

        Returns:
            Parsed JSON object with ``statusCode`` set to the HTTP status

        Raises:
            TransportError: On network failure or an unparseable body
        """
        url = f"{self.base_url}{path}"
        if query:
            url += f"?{urlencode(query)}"
        has_body = body is not None and method not in ['GET', 'DELETE']
        headers = build_headers(self.api_key, has_body)

        logger.debug("%s %s", method, url)
        try:
            response = requests.request(
                method,
                url,
                headers=headers,
                json=body if has_body else None,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f'Request failed: {e}') from e

        try:
            parsed = response.json()
        except ValueError as e:
            raise TransportError('Failed to parse response body', response.status_code) from e

        if not isinstance(parsed, dict):
            raise TransportError('Unexpected response body', response.status_code)

        parsed['statusCode'] = response.status_code
        return parsed

    @staticmethod
    def encode_url_component(component: str) -> str:
        """Encode URL component (similar to encodeURIComponent in JS).

        Args:
            component: String to encode

        Returns:
            URL-encoded string
        """
        return quote(component, safe='')
