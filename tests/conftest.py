import logging

import pytest

from tests.helpers import make_nuxt_page


class FakeSite:
    """
    url -> html map served instead of the network.
    Missing urls behave like a failed fetch.
    """

    def __init__(self):
        self.pages = {}
        self.requested = []

    def add(self, url, data):
        self.pages[url] = make_nuxt_page(data)

    def add_html(self, url, html):
        self.pages[url] = html

    async def fetch_page(self, url, **kwargs):
        self.requested.append(url)
        return self.pages.get(url)


@pytest.fixture
def log():
    return logging.getLogger("hnmtv.tests")


@pytest.fixture
def site(monkeypatch):
    fake = FakeSite()
    monkeypatch.setattr("parser.browse_parser.fetch_page", fake.fetch_page)
    monkeypatch.setattr("parser.video_parser.fetch_page", fake.fetch_page)
    return fake
