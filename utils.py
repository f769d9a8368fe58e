import re
from datetime import datetime, timezone

from config import SITE, CDN


def normalize_keyword(keyword: str) -> str:
    return re.sub(r"\s+", "-", keyword.strip().lower())


def video_href(slug: str) -> str:
    return f"{SITE}/videos/hentai/{slug}"


def cover_url(slug: str) -> str:
    return f"{CDN}/images/covers/{slug}-cv1.png"


def format_views(views) -> str:
    if not views:
        return "0"
    if isinstance(views, (int, float)) and not isinstance(views, bool):
        return f"{views:,}"
    return str(views)


def format_release_date(unix_ts) -> str:
    if not unix_ts:
        return "Unknown"
    d = datetime.fromtimestamp(int(unix_ts), tz=timezone.utc)
    return f"{d.month}/{d.day}/{d.year}"
