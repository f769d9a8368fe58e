SITE = "https://hanime.tv"
CDN = "https://hanime-cdn.com"
HEADERS = {
    "User-Agent": "Mozilla/5.0",
    "Referer": SITE + "/",
}
TIMEOUT = 20

# Ключові слова, які відкривають спеціальні сторінки замість тегів
TRENDING_ALIASES = ("trending", "recent", "latest")
RANDOM_ALIASES = ("random",)

LOG_NAME = "hnmtv"
