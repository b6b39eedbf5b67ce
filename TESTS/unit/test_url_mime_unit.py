# Руководство к файлу (TESTS/unit/test_url_mime_unit.py)
# Назначение:
# - Unit-тесты утилит URL (каноникализация) и MIME (распознавание HTML).

from __future__ import annotations

import pytest

from linkcrawler.utils.mime import content_mime, is_html
from linkcrawler.utils.url import canonicalize, has_prefix, is_http_url


def test_canonicalize_strips_fragment_without_base():
    assert canonicalize("http://x.test/y#frag") == "http://x.test/y"
    assert canonicalize("  http://x.test/y  ") == "http://x.test/y"


def test_canonicalize_keeps_trailing_slash_and_case():
    assert canonicalize("http://X.test/Dir/") == "http://X.test/Dir/"
    assert canonicalize("sub/", "http://x.test/dir/") == "http://x.test/dir/sub/"


def test_scheme_and_prefix_checks():
    assert is_http_url("https://x.test/")
    assert not is_http_url("ftp://x.test/")
    assert has_prefix("http://x.test/docs/a", "http://x.test/docs/")
    assert not has_prefix("http://x.test/blog", "http://x.test/docs/")


@pytest.mark.parametrize(
    "header,expected",
    [
        ("text/html", True),
        ("text/html; charset=UTF-8", True),
        ("TEXT/HTML;charset=utf-8", True),
        ("application/json", False),
        ("text/plain", False),
        (None, False),
        ("", False),
    ],
)
def test_is_html(header, expected):
    assert is_html(header) is expected


def test_content_mime_drops_parameters():
    assert content_mime('text/html; charset="ISO-8859-1"') == "text/html"
    assert content_mime(" Text/HTML ") == "text/html"
    assert content_mime(None) is None
