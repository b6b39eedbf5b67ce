# Руководство к файлу (TESTS/unit/test_link_discovery_unit.py)
# Назначение:
# - Unit-тесты LinkExtractor/LinkDiscovery: префикс seed, разрешение относительных ссылок,
#   удаление фрагмента, фильтры длины и схемы, лимит ссылок на страницу.

from __future__ import annotations

from linkcrawler.parse.link_discovery import LinkDiscovery
from linkcrawler.parse.link_extractor import LinkExtractor

SEED = "http://example.test/docs/"


def _html(*hrefs: str) -> str:
    return "<html><body>" + "".join(f'<a href="{h}">x</a>' for h in hrefs) + "</body></html>"


def test_extract_hrefs_in_document_order():
    html = '<div><a href="/one">1</a><p><a href="/two">2</a></p><a name="anchor">no</a><a href=" /three ">3</a></div>'
    assert LinkExtractor.extract_hrefs(html) == ["/one", "/two", "/three"]


def test_extract_hrefs_tolerates_malformed_markup():
    html = b'<html><body><a href="/ok">ok</a><div><p><a href="/still-ok">unclosed'
    assert LinkExtractor.extract_hrefs(html) == ["/ok", "/still-ok"]


def test_base_outside_seed_prefix_yields_nothing():
    d = LinkDiscovery(SEED)
    html = _html("http://example.test/docs/page-one")

    assert d.discover("http://example.test/blog/post", html, 10) == []
    assert d.discover("https://example.test/docs/", html, 10) == []
    assert d.discover("http://example.test/docs/page", html, 10) == ["http://example.test/docs/page-one"]


def test_relative_links_resolved_and_fragment_stripped():
    d = LinkDiscovery(SEED)
    html = _html("page-two#section", "../about-us", "/docs/page-three?q=1#top", "#only-fragment")

    assert d.discover("http://example.test/docs/index.html", html, 10) == [
        "http://example.test/docs/page-two",
        "http://example.test/about-us",
        "http://example.test/docs/page-three?q=1",
        "http://example.test/docs/index.html",
    ]


def test_fragment_variants_map_to_the_same_url():
    d = LinkDiscovery(SEED)
    html = _html("http://example.test/docs/y#frag", "http://example.test/docs/y")

    links = d.discover(SEED, html, 10)
    assert links == ["http://example.test/docs/y", "http://example.test/docs/y"]


def test_short_and_non_http_links_are_dropped():
    d = LinkDiscovery(SEED)
    html = _html(
        "http://a.io/x",
        "mailto:someone@example.test",
        "javascript:void(0)",
        "ftp://files.example.test/archive.zip",
        "https://example.test/docs/kept",
    )

    assert d.discover(SEED, html, 10) == ["https://example.test/docs/kept"]


def test_cap_limits_candidates_per_page():
    d = LinkDiscovery(SEED)
    html = _html(*[f"/docs/page-{i}" for i in range(5)])

    assert d.discover(SEED, html, 2) == [
        "http://example.test/docs/page-0",
        "http://example.test/docs/page-1",
    ]
    assert d.discover(SEED, html, 0) == []


def test_relative_links_ignored_when_following_disabled():
    d = LinkDiscovery(SEED, follow_relative_links=False)
    html = _html("/docs/relative-page", "http://example.test/docs/absolute")

    assert d.discover(SEED, html, 10) == ["http://example.test/docs/absolute"]


def test_page_without_links():
    d = LinkDiscovery(SEED)
    assert d.discover(SEED, "<html><body><p>nothing here</p></body></html>", 10) == []
    assert d.discover(SEED, b"", 10) == []


def test_duplicate_hrefs_count_toward_cap():
    d = LinkDiscovery(SEED)
    html = _html("/docs/same-page", "/docs/same-page#again", "/docs/other-page")

    assert d.discover(SEED, html, 2) == [
        "http://example.test/docs/same-page",
        "http://example.test/docs/same-page",
    ]


def test_unparseable_href_is_skipped():
    d = LinkDiscovery(SEED)
    html = _html("http://[broken-ipv6/x", "/docs/after-bad-link")

    assert d.discover(SEED, html, 10) == ["http://example.test/docs/after-bad-link"]
