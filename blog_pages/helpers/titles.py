"""Document titles for the ``<title>`` element."""

from __future__ import annotations

import typing as typ

from blog_pages.pages.models import PageKind

if typ.TYPE_CHECKING:
    from blog_pages.config.models import SiteMetadata
    from blog_pages.pages.models import Page


def _paged(title: str, num: int) -> str:
    return title if num == 1 else f"{title} (Page {num})"


def meta_title(page: Page, site: SiteMetadata) -> str:
    """Return the document title for ``page``.

    An explicit page title wins; listing pages derive theirs from the site
    title and, for tag pages, the tag name, with a ``(Page N)`` suffix past
    the first page.

    Examples
    --------
    >>> from blog_pages.config.models import SiteMetadata
    >>> from blog_pages.pages.models import Page, PageKind, Pagination
    >>> tag_page = Page(
    ...     path="tag/azure-ad/page/2/index.html",
    ...     kind=PageKind.TAG_INDEX,
    ...     tag="Azure AD",
    ...     pagination=Pagination(num=2),
    ... )
    >>> meta_title(tag_page, SiteMetadata(title="Blog", url="https://example.com/"))
    'Azure AD - Blog (Page 2)'
    """
    if page.title:
        return page.title
    match page.kind:
        case PageKind.PAGINATION_INDEX:
            return _paged(site.title, page.require_pagination().num)
        case PageKind.TAG_INDEX:
            title = f"{page.require('tag')} - {site.title}"
            return _paged(title, page.require_pagination().num)
        case PageKind.HOME:
            num = page.pagination.num if page.pagination else 1
            return _paged(site.title, num)
        case _:
            return site.title


__all__ = ["meta_title"]
