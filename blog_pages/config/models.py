"""Typed dataclasses describing blog build configuration and site metadata."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from blog_pages._constants import DEFAULT_LAYOUT, DEFAULT_PARTIAL_EXTENSION
from blog_pages.errors import SiteConfigError


@dc.dataclass(slots=True)
class NavLink:
    """Navigation entry rendered in the site header."""

    label: str
    url: str


@dc.dataclass(slots=True)
class Author:
    """Author profile shown in post footers and feeds."""

    name: str
    bio: str | None = None
    image: str | None = None
    location: str | None = None
    website: str | None = None
    twitter: str | None = None


@dc.dataclass(slots=True)
class SiteMetadata:
    """Process-wide metadata shared by every page render.

    Attributes
    ----------
    title : str
        Site title used by ``meta_title`` and feeds.
    url : str
        Absolute base URL of the deployed site.
    description : str
        Short description used in meta tags.
    lang : str
        Document language code.
    navigation : list[NavLink]
        Header navigation entries in display order.
    author : Author or None
        Default author profile.
    feed_rss : str or None
        Site-relative location of the RSS feed.
    feed_image : str or None
        Image advertised by the feed.
    asset_manifest : dict[str, str]
        Logical asset name to revisioned filename; filled by
        :func:`blog_pages.metadata.merge_asset_manifest`.
    extra : dict[str, typing.Any]
        Remaining metadata keys, reachable from templates as ``site.extra``.
    """

    title: str
    url: str
    description: str = ""
    lang: str = "en"
    navigation: list[NavLink] = dc.field(default_factory=list)
    author: Author | None = None
    feed_rss: str | None = None
    feed_image: str | None = None
    asset_manifest: dict[str, str] = dc.field(default_factory=dict)
    extra: dict[str, typ.Any] = dc.field(default_factory=dict)

    def require_feed(self) -> str:
        """Return the configured feed path or raise when none is set."""
        if not self.feed_rss:
            msg = "Site metadata does not define 'feedRss'."
            raise SiteConfigError(msg)
        return self.feed_rss


@dc.dataclass(slots=True)
class DestinationConfig:
    """Output locations for rendered pages and built assets."""

    site: Path = Path("build")
    assets: Path = Path("build/assets")


@dc.dataclass(slots=True)
class BuildConfig:
    """Resolved build configuration loaded from ``config/blog.yaml``.

    All paths are absolute, resolved against the directory holding the
    configuration file.
    """

    base_dir: Path
    layouts: Path
    partials: list[Path]
    metadata: Path
    pages: Path
    destination: DestinationConfig
    partial_extension: str = DEFAULT_PARTIAL_EXTENSION
    default_layout: str = DEFAULT_LAYOUT
    assets: list[str] = dc.field(default_factory=list)


__all__ = [
    "Author",
    "BuildConfig",
    "DestinationConfig",
    "NavLink",
    "SiteConfigError",
    "SiteMetadata",
]
