"""httpx client construction with request/response logging hooks."""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)


def log_request(request: httpx.Request) -> None:
    logger.info("----------------------------------------------")
    logger.info("request url   : %s %s", request.method, request.url)
    logger.info("request body  : %s", request.content.decode("utf-8", errors="replace"))


def log_response(response: httpx.Response) -> None:
    request = response.request
    logger.info("response      : %s %s -> %s", request.method, request.url, response.status_code)


def build_http_client(base_url: str, *, transport: httpx.BaseTransport | None = None) -> httpx.Client:
    """Create a synchronous client bound to ``base_url``.

    The hook chain is fixed at construction and never changed afterwards.
    ``transport`` is only meant for tests (``httpx.MockTransport``).
    """
    logger.info("base url: %s", base_url)
    return httpx.Client(
        base_url=base_url,
        transport=transport,
        event_hooks={"request": [log_request], "response": [log_response]},
    )
