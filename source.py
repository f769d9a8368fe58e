"""
Entry points called by the host application.
Each returns a JSON string (or None where no stream is available) and never raises.
"""
import logging
from typing import Optional

from config import LOG_NAME
from parser.browse_parser import BrowseParser
from parser.video_parser import VideoParser

logger = logging.getLogger(LOG_NAME)

_browse = BrowseParser(logger)
_video = VideoParser(logger)


async def search_results(keyword: str) -> str:
    return await _browse.search_results(keyword)


async def fetch_trending() -> str:
    return await _browse.fetch_trending()


async def extract_details(url: str) -> str:
    return await _video.extract_details(url)


async def extract_episodes(url: str) -> str:
    return await _video.extract_episodes(url)


async def extract_stream_url(url: str) -> Optional[str]:
    return await _video.extract_stream_url(url)
