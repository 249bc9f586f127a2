"""Transport layer for the Navigable AI Python SDK."""

from .auth import build_headers
from .http import HTTPClient

__all__ = ["HTTPClient", "build_headers"]
