import json
import re
from typing import Optional

NUXT_RE = re.compile(r"window\.__NUXT__\s*=\s*({.+?});?\s*</script>", re.DOTALL)


class NuxtDataError(ValueError):
    pass


def extract_nuxt_data(html: str) -> Optional[dict]:
    match = NUXT_RE.search(html)
    if not match:
        return None

    try:
        data = json.loads(match.group(1))
    except json.JSONDecodeError as e:
        raise NuxtDataError(f"__NUXT__ is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise NuxtDataError("__NUXT__ is not an object")
    return data


def page_field(nuxt: Optional[dict], key: str):
    """
    nuxt["data"][0][key], or None if any step is missing or empty.
    """
    if not nuxt:
        return None
    pages = nuxt.get("data")
    if not pages or not isinstance(pages, list):
        return None
    page = pages[0]
    if not page or not isinstance(page, dict):
        return None
    return page.get(key) or None


def dumps(value) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
