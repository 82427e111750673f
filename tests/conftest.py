"""Shared fixtures for blog_pages tests.

The fixtures build pages, site metadata, and on-disk layout trees in the
shapes the upstream content pipeline produces, so individual tests only
spell out the fields they care about.
"""

from __future__ import annotations

import typing as typ

import pytest

from blog_pages.config import NavLink, SiteMetadata
from blog_pages.pages import page_from_mapping

if typ.TYPE_CHECKING:
    from pathlib import Path

    from blog_pages.pages import Page

PageFactory = typ.Callable[..., "Page"]


@pytest.fixture
def site() -> SiteMetadata:
    """Return site metadata resembling the production blog."""
    return SiteMetadata(
        title="Blog",
        url="https://example.com/",
        description="Notes on building things",
        navigation=[NavLink("Home", "/"), NavLink("About Me", "/about/")],
        feed_rss="rss.xml",
        asset_manifest={"theme.css": "theme-abcd1234.css"},
    )


@pytest.fixture
def make_page() -> PageFactory:
    """Return a factory building pages from pipeline-style keyword fields."""

    def _make(path: str = "post/index.html", **fields: typ.Any) -> Page:
        return page_from_mapping(path, fields)

    return _make


@pytest.fixture
def write_tree() -> typ.Callable[[Path, dict[str, str]], Path]:
    """Return a helper that writes ``{relative path: text}`` under a root."""

    def _write(root: Path, files: dict[str, str]) -> Path:
        for relative, text in files.items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        return root

    return _write
