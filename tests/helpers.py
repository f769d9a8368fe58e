import json


def make_nuxt_page(data) -> str:
    return (
        "<html><head><script>"
        f"window.__NUXT__={json.dumps(data)};"
        "</script></head><body></body></html>"
    )
