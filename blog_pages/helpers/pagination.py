"""Pagination counters."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from blog_pages.pages.models import Page


def page_number(page: Page) -> int:
    """Return the 1-based number of ``page`` within its group."""
    return page.require_pagination().num


def page_count(page: Page) -> int:
    """Return how many pages the group containing ``page`` has."""
    return len(page.require_pagination().pages)


__all__ = ["page_count", "page_number"]
