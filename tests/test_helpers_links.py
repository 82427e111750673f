"""Tests for URL, feed, pagination, and asset helpers."""

from __future__ import annotations

import typing as typ

import pytest
from markupsafe import Markup

from blog_pages.config import SiteConfigError, SiteMetadata
from blog_pages.errors import PageContextError
from blog_pages.helpers import (
    asset,
    feed_url,
    local_feed_url,
    page_count,
    page_number,
    page_url,
    url,
)
from blog_pages.pages import PageLink

if typ.TYPE_CHECKING:
    from blog_pages.pages import Page

    PageFactory = typ.Callable[..., Page]

SITE_URL = "https://example.com/"


def test_url_strips_index_and_adds_slash(make_page: PageFactory) -> None:
    """Paths lose ``index.html`` and become root-relative with a slash."""
    page = make_page("blog/page/2/index.html", isPageIndex=True, pagination={"num": 2})

    assert url(page, SITE_URL) == "/blog/page/2/"


def test_url_prefers_explicit_url(make_page: PageFactory) -> None:
    """An explicit absolute URL is returned verbatim."""
    page = make_page(collection=["posts"], url="https://example.com/x")

    assert url(page, SITE_URL) == "https://example.com/x"


@pytest.mark.parametrize(
    ("path", "absolute", "expected"),
    [
        ("index.html", False, "/"),
        ("azure-functions", False, "/azure-functions/"),
        ("azure-functions/index.html", True, "https://example.com/azure-functions/"),
        ("about/", True, "https://example.com/about/"),
    ],
)
def test_url_variants(path: str, *, absolute: bool, expected: str) -> None:
    """Root-relative and absolute forms always end in a slash."""
    assert url({"path": path}, SITE_URL, absolute=absolute) == expected


def test_url_without_path_is_a_contract_violation() -> None:
    """Targets with neither url nor path cannot be linked."""
    with pytest.raises(PageContextError):
        url({"title": "orphan"}, SITE_URL)


def test_page_url_for_siblings() -> None:
    """Sibling links resolve relative to the root or the site URL."""
    assert page_url(PageLink("page/3/index.html"), SITE_URL) == "/page/3/"
    assert page_url("index.html", SITE_URL, absolute=True) == SITE_URL


def test_page_number_and_count(make_page: PageFactory) -> None:
    """Pagination counters come from the pagination block."""
    page = make_page(
        "page/2/index.html",
        isPageIndex=True,
        pagination={
            "num": 2,
            "pages": ["index.html", {"path": "page/2/index.html"}, "page/3/index.html"],
        },
    )

    assert page_number(page) == 2
    assert page_count(page) == 3


def test_pagination_helpers_require_pagination(make_page: PageFactory) -> None:
    """Posts have no pagination block to count."""
    with pytest.raises(PageContextError):
        page_number(make_page(collection=["posts"]))


def test_feed_urls(site: SiteMetadata) -> None:
    """Feed URLs resolve against the site and wrap the reader prefix."""
    assert local_feed_url(site) == "https://example.com/rss.xml"
    assert feed_url(site) == (
        "https://feedly.com/i/subscription/feed/https://example.com/rss.xml"
    )


def test_feed_url_requires_feed_configuration() -> None:
    """A site without a feed path cannot advertise one."""
    site = SiteMetadata(title="Blog", url=SITE_URL)

    with pytest.raises(SiteConfigError, match="feedRss"):
        local_feed_url(site)


def test_asset_uses_manifest_revision(site: SiteMetadata) -> None:
    """Known assets resolve to their revisioned filename."""
    result = asset("theme.css", site.asset_manifest)

    assert result == "/assets/theme-abcd1234.css"
    assert isinstance(result, Markup)


def test_asset_passes_unknown_names_through(site: SiteMetadata) -> None:
    """Assets missing from the manifest keep their logical name."""
    assert asset("theme.js", site.asset_manifest) == "/assets/theme.js"
    assert asset("theme.css") == "/assets/theme.css"
