from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Final

import httpx

from ._results import NONE, Option, Some
from ._types import Request

DEFAULT_HEADERS: Final[Mapping[str, str]] = MappingProxyType(
    {"Content-Type": "application/json"}
)
"""Headers sent with every request, overridable by the caller."""


def _merge_headers(headers: Mapping[str, str]) -> httpx.Headers:
    merged = httpx.Headers(dict(DEFAULT_HEADERS))
    merged.update(headers)
    return merged


async def _fetch_json(client: httpx.AsyncClient, request: Request) -> Option[Any]:
    response = await client.request(
        request.method,
        request.url,
        headers=_merge_headers(request.headers),
        content=request.body,
    )
    if not response.is_success:
        msg = f"HTTP error! Status: {response.status_code}"
        raise httpx.HTTPStatusError(msg, request=response.request, response=response)
    return Some(response.json())


async def fetch_with_option(
    request: Request | Mapping[str, Any],
    *,
    client: httpx.AsyncClient | None = None,
) -> Option[Any]:
    """Issue `request` and return its decoded JSON body as `Some`.

    Any failure gives `NONE`: a transport error, a status outside the 2xx range, or a body that is not JSON.
    The status code of a failed response is not observable by the caller.

    `DEFAULT_HEADERS` are sent with the request, and the caller headers replace them on a (case-insensitive) collision.

    Args:
        request (Request | Mapping[str, Any]): The request, or a `{url, headers, method?, body?}` mapping.
        client (httpx.AsyncClient | None): Client to send the request with. When omitted, a client following redirects is opened for this call only.
            An injected client is used as configured, so it only follows redirects if built with `follow_redirects=True`.

    Returns:
        Option[Any]: The decoded body, or `NONE`.

    Example:
    ```python
    >>> import asyncio
    >>> import httpx
    >>> import optionkit as ox
    >>> def handler(request: httpx.Request) -> httpx.Response:
    ...     return httpx.Response(200, json={"a": 1})
    >>> async def main() -> ox.Option[dict[str, int]]:
    ...     async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
    ...         return await ox.fetch_with_option(ox.Request("https://example.com"), client=client)
    >>> asyncio.run(main())
    Some(value={'a': 1})

    ```
    """
    try:
        if not isinstance(request, Request):
            request = Request.from_mapping(request)
        if client is None:
            async with httpx.AsyncClient(follow_redirects=True) as owned:
                return await _fetch_json(owned, request)
        return await _fetch_json(client, request)
    except Exception:  # noqa: BLE001
        return NONE
