from config import SITE, TRENDING_ALIASES, RANDOM_ALIASES
from fetcher import fetch_page
from parser.nuxt import extract_nuxt_data, page_field, dumps
from utils import normalize_keyword, video_href, cover_url

ERROR_RESULTS = [{"title": "Error", "image": "", "href": ""}]


def browse_url(slug: str) -> str:
    if slug in TRENDING_ALIASES:
        return f"{SITE}/browse/trending"
    if slug in RANDOM_ALIASES:
        return f"{SITE}/browse/random"
    return f"{SITE}/browse/tags/{slug}"


def to_search_item(video: dict) -> dict:
    slug = video.get("slug")
    return {
        "title": video.get("name") or "Untitled",
        "image": video.get("cover_url") or cover_url(slug),
        "href": video_href(slug),
    }


class BrowseParser:
    def __init__(self, logger):
        self.logger = logger

    async def _load_videos(self, url: str):
        html = await fetch_page(url)
        if html is None:
            raise RuntimeError(f"page not loaded: {url}")

        nuxt = extract_nuxt_data(html)
        if nuxt is None:
            return None
        return page_field(nuxt, "hentai_videos") or []

    async def search_results(self, keyword: str) -> str:
        try:
            slug = normalize_keyword(keyword)
            self.logger.info(f"search: {slug}")

            videos = await self._load_videos(browse_url(slug))
            if videos is None:
                self.logger.info("__NUXT__ not found, fallback to trending")
                return await self.fetch_trending()

            if not videos:
                self.logger.info(f"no videos for tag {slug}, fallback to trending")
                return await self.fetch_trending()

            results = [to_search_item(v) for v in videos]
            self.logger.info(f"found videos: {len(results)}")
            return dumps(results)
        except Exception as e:
            self.logger.error(f"search error: {e}")
            try:
                return await self.fetch_trending()
            except Exception as e:
                self.logger.error(f"trending fallback failed: {e}")
                return dumps(ERROR_RESULTS)

    async def fetch_trending(self) -> str:
        try:
            videos = await self._load_videos(f"{SITE}/browse/trending")
            if not videos:
                return dumps([])

            results = [to_search_item(v) for v in videos]
            self.logger.info(f"trending videos: {len(results)}")
            return dumps(results)
        except Exception as e:
            self.logger.error(f"trending fetch error: {e}")
            return dumps([])
