from fetcher import fetch_page
from parser.nuxt import extract_nuxt_data, page_field, dumps
from utils import video_href, format_views, format_release_date

ERROR_DETAILS = [{
    "description": "Error loading description",
    "aliases": "Unknown",
    "airdate": "Released: Unknown",
}]


def stream_height(stream: dict) -> int:
    try:
        return int(stream.get("height") or 0)
    except (TypeError, ValueError):
        return 0


class VideoParser:
    def __init__(self, logger):
        self.logger = logger

    async def _load_nuxt(self, url: str):
        html = await fetch_page(url)
        if html is None:
            raise RuntimeError(f"page not loaded: {url}")
        return extract_nuxt_data(html)

    @staticmethod
    def _video_info(nuxt: dict) -> dict:
        video = page_field(nuxt, "hentai_video")
        if not video:
            raise RuntimeError("video info not found")
        return video

    @staticmethod
    def build_details(video: dict) -> dict:
        tags = video.get("hentai_tags")
        tags = ", ".join(str(t.get("text") or "") for t in tags) if tags is not None else "None"

        brand = video.get("brand")
        brand = (brand.get("title") or "Unknown") if brand else "Unknown"

        aliases = (
            f"Tags: {tags}\n"
            f"Brand: {brand}\n"
            f"Views: {format_views(video.get('views'))}"
        )
        return {
            "description": video.get("description") or "No description available",
            "aliases": aliases,
            "airdate": f"Released: {format_release_date(video.get('released_at_unix'))}",
        }

    async def extract_details(self, url: str) -> str:
        try:
            nuxt = await self._load_nuxt(url)
            if nuxt is None:
                self.logger.warning(f"__NUXT__ not found: {url}")
                return dumps(ERROR_DETAILS)

            details = self.build_details(self._video_info(nuxt))
            self.logger.info("details extracted")
            return dumps([details])
        except Exception as e:
            self.logger.error(f"details error: {e}")
            return dumps(ERROR_DETAILS)

    async def extract_episodes(self, url: str) -> str:
        try:
            nuxt = await self._load_nuxt(url)
            if nuxt is None:
                self.logger.warning(f"__NUXT__ not found: {url}")
                return dumps([])

            video = self._video_info(nuxt)
            franchise = video.get("hentai_franchise_hentai_videos") or []

            # серія франшизи або одиночне відео
            if franchise:
                episodes = [
                    {
                        "href": video_href(ep.get("slug")),
                        "number": idx,
                        "title": ep.get("name") or f"Episode {idx}",
                    }
                    for idx, ep in enumerate(franchise, start=1)
                ]
            else:
                episodes = [{
                    "href": url,
                    "number": 1,
                    "title": video.get("name") or "Full Video",
                }]

            self.logger.info(f"episodes found: {len(episodes)}")
            return dumps(episodes)
        except Exception as e:
            self.logger.error(f"episodes error: {e}")
            return dumps([])

    @staticmethod
    def collect_streams(manifest) -> list:
        servers = (manifest or {}).get("servers") or []
        if not servers:
            return []

        # тільки перший сервер, від більшої якості до меншої
        streams = sorted(
            servers[0].get("streams") or [],
            key=stream_height,
            reverse=True,
        )

        result = []
        for stream in streams:
            if not stream.get("url"):
                continue
            height = stream.get("height")
            result.extend([f"{height}p" if height else "Unknown", stream["url"]])
        return result

    async def extract_stream_url(self, url: str):
        try:
            nuxt = await self._load_nuxt(url)
            if nuxt is None:
                self.logger.warning(f"__NUXT__ not found: {url}")
                return None

            streams = self.collect_streams(page_field(nuxt, "videos_manifest"))
            if not streams:
                self.logger.warning("no playable streams")
                return None

            self.logger.info(f"streams extracted: {len(streams) // 2}")
            return dumps({"streams": streams, "subtitles": ""})
        except Exception as e:
            self.logger.error(f"stream extraction error: {e}")
            return None
