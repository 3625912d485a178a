"""Outbound HTTP clients.

- ServiceClient: base wrapper mapping failures to RemoteServiceError
- AstroClient: open-notify astronauts feed
- build_http_client: httpx client with logging hooks
"""

from starter_api.clients.astro import AstroClient
from starter_api.clients.base import ServiceClient
from starter_api.clients.http import build_http_client

__all__ = [
    "AstroClient",
    "ServiceClient",
    "build_http_client",
]
