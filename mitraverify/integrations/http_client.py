"""
aiohttp transport for the verification backend.

Sessions belong to their caller. A MitraVerifyClient opens one with
`open_session()` when it enters `async with` and closes it on exit, so one
client shutting down never touches another client's connections:

    sess = http_client.open_session()
    try:
        response = await http_client.execute(url, timeout_ms=30_000, session=sess)
    finally:
        await sess.close()

Calls made without an open session get a temporary one for that call only.

`execute()` issues exactly one request with its own deadline. It maps the
deadline firing to RequestTimeout and connection failures to NetworkError;
it never interprets HTTP status codes.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, Mapping, Optional

import aiohttp

from mitraverify.errors import NetworkError, RequestTimeout

logger = logging.getLogger(__name__)


def open_session() -> aiohttp.ClientSession:
    """New session for one owner; the per-request deadline lives in execute()."""
    return aiohttp.ClientSession()


@asynccontextmanager
async def request_session(session: Optional[aiohttp.ClientSession] = None):
    """
    Yield the caller's session while it is open, else a per-call session.

    Only the per-call session is closed here.
    """
    if session is not None and not session.closed:
        yield session
        return

    tmp = open_session()
    try:
        yield tmp
    finally:
        await tmp.close()


async def execute(
    url: str,
    method: str = "GET",
    *,
    timeout_ms: int,
    headers: Optional[Mapping[str, str]] = None,
    data: Any = None,
    session: Optional[aiohttp.ClientSession] = None,
) -> aiohttp.ClientResponse:
    """
    Send one request bounded by `timeout_ms`.

    The body is read before returning, so the response stays inspectable
    (status, .json(), .text()) after its connection is released.
    """
    merged_headers = {"Accept": "application/json", **(headers or {})}
    timeout = aiohttp.ClientTimeout(total=timeout_ms / 1000)

    async with request_session(session) as sess:
        try:
            async with sess.request(method, url, headers=merged_headers, data=data, timeout=timeout) as response:
                await response.read()
                logger.debug(f"[HTTP] {method} {url} -> {response.status}")
                return response
        except asyncio.TimeoutError:
            logger.warning(f"[HTTP] {method} {url} timed out after {timeout_ms}ms")
            raise RequestTimeout(timeout_ms) from None
        except aiohttp.ClientError as e:
            logger.warning(f"[HTTP] {method} {url} failed: {e}")
            raise NetworkError(f"Network error: {e}") from e
