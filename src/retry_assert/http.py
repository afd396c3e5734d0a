r"""Helpers to poll an HTTP resource until it reaches an expected state.

Example:
    ```python
    import httpx
    from retry_assert.http import has_status, retry_get

    async with httpx.AsyncClient(base_url="https://api.example.com") as client:
        response = await retry_get("/jobs/42", client=client).with_timeout(10.0).until(
            has_status(200)
        )
    ```
"""

from __future__ import annotations

__all__ = ["has_status", "retry_get", "retry_request"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from retry_assert.builder import RetryBuilder

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


def retry_request(
    method: str,
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    **kwargs: Any,
) -> RetryBuilder[httpx.Response]:
    """Create a builder whose operation sends an HTTP request.

    Transport errors (``httpx.RequestError``) are failures of the
    operation, so ``until`` retries them and ``ensure`` fails on them.
    Responses are not checked for error status codes; that is the job
    of the success check.

    Args:
        method: The HTTP method (e.g., "GET", "POST").
        url: The URL to request.
        client: Optional async client to send the request with. If
            None, a short-lived client is created for each attempt.
        **kwargs: Additional keyword arguments passed to
            ``httpx.AsyncClient.request``.

    Returns:
        A builder for the request.
    """

    async def send() -> httpx.Response:
        logger.debug(f"Sending {method} request to {url}")
        if client is not None:
            return await client.request(method, url, **kwargs)
        async with httpx.AsyncClient() as session:
            return await session.request(method, url, **kwargs)

    return RetryBuilder(send)


def retry_get(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    **kwargs: Any,
) -> RetryBuilder[httpx.Response]:
    """Create a builder whose operation sends a GET request.

    Args:
        url: The URL to request.
        client: Optional async client to send the request with.
        **kwargs: Additional keyword arguments passed to
            ``httpx.AsyncClient.request``.

    Returns:
        A builder for the request.
    """
    return retry_request("GET", url, client=client, **kwargs)


def has_status(*status_codes: int) -> Callable[[httpx.Response], None]:
    """Create a success check on the response status code.

    Args:
        *status_codes: The accepted status codes.

    Returns:
        An assertion raising ``AssertionError`` when the response status
        is not one of ``status_codes``.

    Example:
        ```pycon
        >>> import httpx
        >>> from retry_assert.http import has_status
        >>> check = has_status(200, 204)
        >>> check(httpx.Response(204))
        >>> check(httpx.Response(404))
        Traceback (most recent call last):
        ...
        AssertionError: expected status in (200, 204), got 404

        ```
    """
    if not status_codes:
        msg = "at least one status code is required"
        raise ValueError(msg)

    def check(response: httpx.Response) -> None:
        if response.status_code not in status_codes:
            msg = f"expected status in {status_codes}, got {response.status_code}"
            raise AssertionError(msg)

    return check
