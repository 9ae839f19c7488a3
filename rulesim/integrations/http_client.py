"""
Shared aiohttp ClientSession: initialized once per test-suite lifecycle.

Usage:
    async with http_client.request_session() as sess:
        async with sess.post(url, json=payload) as response:
            ...

The context manager yields the shared session when available, otherwise
creates and closes a temporary one (covers one-off calls and tests).
"""

import logging
from contextlib import asynccontextmanager

import aiohttp

from rulesim.config import settings

logger = logging.getLogger(__name__)

session: aiohttp.ClientSession | None = None


def _timeout() -> aiohttp.ClientTimeout:
    return aiohttp.ClientTimeout(total=settings.http_timeout_sec)


async def initialize() -> None:
    global session
    if session and not session.closed:
        return
    session = aiohttp.ClientSession(timeout=_timeout())
    logger.info("[STARTUP] Shared HTTP session initialized")


async def close() -> None:
    global session
    if session and not session.closed:
        await session.close()
        session = None
        logger.info("[SHUTDOWN] Shared HTTP session closed")


@asynccontextmanager
async def request_session():
    """
    Async context manager that yields the shared session if available,
    otherwise creates and closes a temporary one.

    Never closes the shared session; http_client.close() handles that.
    """
    if session and not session.closed:
        yield session
    else:
        tmp = aiohttp.ClientSession(timeout=_timeout())
        try:
            yield tmp
        finally:
            await tmp.close()
