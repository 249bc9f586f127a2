from typing import Dict

from ..consts import API_KEY_HEADER


def build_headers(api_key: str, has_body: bool = False) -> Dict[str, str]:
    """
    Build request headers for the Navigable AI API.

    Args:
        api_key: model API key to send as X-Api-Key
        has_body: whether the request has a JSON body (adds Content-Type)

    Returns:
        headers dictionary
    """
    headers: Dict[str, str] = {API_KEY_HEADER: api_key}
    if has_body:
        headers['Content-Type'] = 'application/json'
    return headers
