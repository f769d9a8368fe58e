import asyncio
import logging
from typing import Optional

import aiohttp
import requests

from config import (
    HEADERS,
    TIMEOUT,
)

logger = logging.getLogger("fetcher")


async def _fetch_async(
        url: str,
        headers: dict,
        method: str,
        body,
) -> str:
    timeout = aiohttp.ClientTimeout(total=TIMEOUT)
    async with aiohttp.ClientSession(
            headers=HEADERS,
            timeout=timeout,
    ) as session:
        async with session.request(
                method,
                url,
                headers=headers,
                data=body,
        ) as resp:
            resp.raise_for_status()
            return await resp.text()


def _fetch_blocking(
        url: str,
        headers: dict,
        method: str,
        body,
) -> str:
    resp = requests.request(
        method,
        url,
        headers={**HEADERS, **headers},
        data=body,
        timeout=TIMEOUT,
    )
    resp.raise_for_status()
    return resp.text


async def fetch_page(
        url: str,
        *,
        headers: Optional[dict] = None,
        method: str = "GET",
        body=None,
) -> Optional[str]:
    """
    aiohttp first, requests as a fallback.
    Returns None when both transports fail.
    """
    headers = headers or {}
    try:
        return await _fetch_async(url, headers, method, body)
    except Exception as e:
        logger.warning(f"aiohttp fetch failed → {url}: {e}")

    try:
        return await asyncio.to_thread(_fetch_blocking, url, headers, method, body)
    except Exception as e:
        logger.error(f"fetch error: {e}")
        return None


def fetch(url: str) -> Optional[str]:
    """
    Blocking wrapper for scripts.
    """
    return asyncio.run(fetch_page(url))
