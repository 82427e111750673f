"""Root-relative and absolute URLs for pages, siblings, and feeds."""

from __future__ import annotations

import typing as typ
from urllib.parse import urljoin

from blog_pages._constants import FEED_READER_PREFIX, INDEX_DOCUMENT

from ._context import lookup, require

if typ.TYPE_CHECKING:
    from blog_pages.config.models import SiteMetadata
    from blog_pages.pages.models import PageLink


def _strip_index(path: str) -> str:
    if path.endswith(INDEX_DOCUMENT):
        return path[: -len(INDEX_DOCUMENT)]
    return path


def _base(site_url: str, *, absolute: bool) -> str:
    return site_url if absolute else "/"


def url(target: object, site_url: str, *, absolute: bool = False) -> str:
    """Return the canonical URL of ``target``.

    An explicit ``url`` field is returned verbatim. Otherwise the ``path``
    loses a trailing ``index.html`` and is resolved against ``/`` (or the
    site URL when ``absolute``), always ending with a slash.

    Examples
    --------
    >>> url({"path": "blog/page/2/index.html"}, "https://example.com/")
    '/blog/page/2/'
    >>> url({"url": "https://example.com/x"}, "https://example.com/")
    'https://example.com/x'
    >>> url({"path": "about"}, "https://example.com/", absolute=True)
    'https://example.com/about/'
    """
    explicit = lookup(target, "url")
    if explicit:
        return str(explicit)
    path = str(require(target, "path"))
    result = urljoin(_base(site_url, absolute=absolute), _strip_index(path))
    return result if result.endswith("/") else f"{result}/"


def page_url(
    sibling: PageLink | str, site_url: str, *, absolute: bool = False
) -> str:
    """Return the URL of a sibling page in a pagination group.

    Examples
    --------
    >>> page_url("page/2/index.html", "https://example.com/")
    '/page/2/'
    >>> page_url("index.html", "https://example.com/", absolute=True)
    'https://example.com/'
    """
    path = sibling if isinstance(sibling, str) else str(require(sibling, "path"))
    return urljoin(_base(site_url, absolute=absolute), _strip_index(path))


def local_feed_url(site: SiteMetadata) -> str:
    """Return the absolute URL of the site's RSS feed."""
    return urljoin(site.url, site.require_feed())


def feed_url(site: SiteMetadata) -> str:
    """Return a feed-reader subscription link for the site's RSS feed."""
    return f"{FEED_READER_PREFIX}{local_feed_url(site)}"


__all__ = ["feed_url", "local_feed_url", "page_url", "url"]
