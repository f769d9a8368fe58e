import pytest

from utils import (
    cover_url,
    format_release_date,
    format_views,
    normalize_keyword,
    video_href,
)


@pytest.mark.parametrize("keyword, expected", [
    ("glasses", "glasses"),
    ("  Office   Lady ", "office-lady"),
    ("School\tGirl", "school-girl"),
    ("TRENDING", "trending"),
])
def test_normalize_keyword(keyword, expected):
    assert normalize_keyword(keyword) == expected


def test_urls():
    assert video_href("abc-1") == "https://hanime.tv/videos/hentai/abc-1"
    assert cover_url("abc-1") == "https://hanime-cdn.com/images/covers/abc-1-cv1.png"


@pytest.mark.parametrize("views, expected", [
    (None, "0"),
    (0, "0"),
    (999, "999"),
    (1234567, "1,234,567"),
    (1234.7, "1,234.7"),
    ("12.5k", "12.5k"),
])
def test_format_views(views, expected):
    assert format_views(views) == expected


def test_format_release_date():
    assert format_release_date(1609459200) == "1/1/2021"
    assert format_release_date(1702339200) == "12/12/2023"


@pytest.mark.parametrize("value", [None, 0])
def test_format_release_date_unknown(value):
    assert format_release_date(value) == "Unknown"


def test_format_release_date_float():
    assert format_release_date(1609459200.9) == "1/1/2021"
