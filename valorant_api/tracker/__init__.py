import asyncio
from typing import Any, Optional
from urllib.parse import quote

import aiohttp

from valorant_api.config import ApiConfig
from valorant_api.errors import MalformedEnvelope, TransportError
from valorant_api.logger import logger
from valorant_api.tracker.envelope import ApiError, Failure, ResponseEnvelope, Success, T, decode_envelope_json
from valorant_api.tracker.http_session import client_timeout, open_session
from valorant_api.tracker.season import SeasonToken, format_season, parse_season
from valorant_api.tracker.structures import AccountData, AccountRegion, MMRData, SeasonMMRData


def _segment(value: str) -> str:
    return quote(value, safe="")


async def _get_envelope(
        path: str,
        payload_type: type[T],
        config: ApiConfig,
        session: Optional[aiohttp.ClientSession] = None,
        params: Optional[dict[str, Any]] = None
) -> "ResponseEnvelope[T]":
    url = f"{config.base_url}{path}"
    logger.debug("GET %s params=%s", url, params)

    try:
        async with open_session(config, session) as http:
            async with http.get(
                    url, params=params, headers=config.headers, timeout=client_timeout(config)
            ) as response:
                status = response.status
                body = await response.read()
    except aiohttp.ClientError as e:
        logger.warning(f"HTTP error on GET {url}: {e}")
        raise TransportError(f"GET {url} failed: {e}", url) from e
    except asyncio.TimeoutError as e:
        logger.warning(f"Timeout error on GET {url}")
        raise TransportError(f"GET {url} timed out", url) from e

    try:
        envelope = decode_envelope_json(body, payload_type)
    except MalformedEnvelope as e:
        if not 200 <= status < 300:
            logger.warning(f"GET {url} -> {status} without a readable envelope: {e}")
            raise TransportError(f"GET {url} answered {status}", url, status) from e
        logger.error(f"GET {url} -> {status} returned a malformed {payload_type.__name__} envelope: {e}")
        raise

    if isinstance(envelope, Success) and not 200 <= status < 300:
        logger.warning(f"GET {url} -> {status} carried a success body")
        raise TransportError(f"GET {url} answered {status}", url, status)

    if isinstance(envelope, Failure):
        logger.info(
            f"GET {url} -> {envelope.status}: "
            f"{'; '.join(err.message for err in envelope.errors) or 'no error message'}"
        )
    return envelope


async def fetch_account(
        name: str,
        tag: str,
        *,
        config: ApiConfig,
        session: Optional[aiohttp.ClientSession] = None
) -> "ResponseEnvelope[AccountData]":
    return await _get_envelope(
        f"/v1/account/{_segment(name)}/{_segment(tag)}", AccountData, config, session
    )


async def fetch_mmr(
        region: AccountRegion | str,
        name: str,
        tag: str,
        *,
        config: ApiConfig,
        session: Optional[aiohttp.ClientSession] = None
) -> "ResponseEnvelope[MMRData]":
    region = AccountRegion(region)
    return await _get_envelope(
        f"/v2/mmr/{region.value}/{_segment(name)}/{_segment(tag)}", MMRData, config, session
    )


async def fetch_season_mmr(
        region: AccountRegion | str,
        name: str,
        tag: str,
        season: SeasonToken | str,
        *,
        config: ApiConfig,
        session: Optional[aiohttp.ClientSession] = None
) -> "ResponseEnvelope[SeasonMMRData]":
    """
    Rank summary of a single act. ``season`` may be given as text (``"e5a3"``)
    and is validated before any request is made.
    """
    region = AccountRegion(region)
    if not isinstance(season, SeasonToken):
        season = parse_season(season)
    return await _get_envelope(
        f"/v2/mmr/{region.value}/{_segment(name)}/{_segment(tag)}",
        SeasonMMRData,
        config,
        session,
        params={"filter": format_season(season)},
    )


__all__ = [
    "AccountData",
    "AccountRegion",
    "ApiError",
    "Failure",
    "MMRData",
    "ResponseEnvelope",
    "SeasonMMRData",
    "SeasonToken",
    "Success",
    "fetch_account",
    "fetch_mmr",
    "fetch_season_mmr",
]
