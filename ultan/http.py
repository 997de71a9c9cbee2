"""
Thin async JSON request helper on top of httpx.

One request, no retries. Non-success statuses raise ``HttpError``; transport
errors from httpx propagate unchanged.
"""

from typing import Any

import httpx

from ultan.config import get_config
from ultan.errors import HttpError
from ultan.log import get_logger

logger = get_logger(__name__)


async def req_flow(
    url: str,
    method: str = "GET",
    *,
    client: httpx.AsyncClient | None = None,
    **options: Any,
) -> Any:
    """
    Send a request and return the decoded JSON body.

    Args:
        url: Target URL
        method: HTTP method
        client: Client to send through; left open for the caller. A
            short-lived client is created when omitted.
        **options: Passed unchanged to ``httpx.AsyncClient.request``
            (headers, json, content, params, ...)

    Raises:
        HttpError: if the response status is not 2xx
        httpx.RequestError: on connection or transport failure
    """
    if client is None:
        timeout = get_config().http.timeout_seconds
        async with httpx.AsyncClient(timeout=timeout) as own_client:
            return await _send(own_client, method, url, options)
    return await _send(client, method, url, options)


async def _send(client: httpx.AsyncClient, method: str, url: str, options: dict[str, Any]) -> Any:
    response = await client.request(method, url, **options)
    if not response.is_success:
        logger.warning(
            "http_request_failed", method=method, url=url, status_code=response.status_code
        )
        raise HttpError(response.status_code)
    return response.json()
