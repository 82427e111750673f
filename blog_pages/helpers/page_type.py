"""Predicates templates use to branch on page shape."""

from __future__ import annotations

import typing as typ

from blog_pages.pages.models import PageKind

if typ.TYPE_CHECKING:
    from blog_pages.pages.models import Page


def is_home_page(page: Page) -> bool:
    """Return True for the first page of the main pagination group."""
    if page.kind is PageKind.HOME:
        return True
    return page.kind is PageKind.PAGINATION_INDEX and page.require_pagination().is_first


def is_tag_page(page: Page) -> bool:
    """Return True for generated tag listing pages."""
    return page.kind is PageKind.TAG_INDEX


def is_post_or_page(page: Page) -> bool:
    """Return True for posts and standalone pages."""
    return page.kind in (PageKind.POST, PageKind.PAGE)


def is_next_page(page: Page) -> bool:
    """Return True for any paginated page past the first."""
    return page.pagination is not None and page.pagination.num > 1


__all__ = ["is_home_page", "is_next_page", "is_post_or_page", "is_tag_page"]
