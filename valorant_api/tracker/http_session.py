from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import aiohttp

from valorant_api.config import ApiConfig


def client_timeout(config: ApiConfig) -> aiohttp.ClientTimeout:
    """``config.timeout`` bounds the whole request; connecting may take at most 10s of it."""
    connect = min(10.0, config.timeout)
    return aiohttp.ClientTimeout(total=config.timeout, connect=connect, sock_connect=connect)


def build_session(config: ApiConfig) -> aiohttp.ClientSession:
    return aiohttp.ClientSession(timeout=client_timeout(config))


@asynccontextmanager
async def open_session(
        config: ApiConfig,
        session: Optional[aiohttp.ClientSession] = None
) -> AsyncIterator[aiohttp.ClientSession]:
    """
    Yield ``session`` untouched when the caller owns one, otherwise a fresh
    session that is closed once the single request is done.
    """
    if session is not None and not session.closed:
        yield session
        return
    own = build_session(config)
    try:
        yield own
    finally:
        await own.close()
