"""CSS class strings derived from a page's kind and tags."""

from __future__ import annotations

import typing as typ

from blog_pages._constants import INDEX_DOCUMENT
from blog_pages.pages.models import PageKind

from .text import slugify

if typ.TYPE_CHECKING:
    from blog_pages.pages.models import Page


def _tag_tokens(page: Page) -> list[str]:
    return [f"tag-{tag.slug}" for tag in page.tags]


def _is_site_root(path: str) -> bool:
    return path.lstrip("/") in ("", INDEX_DOCUMENT)


def body_class(page: Page) -> str:
    """Return the ``<body>`` class list for ``page``.

    Pagination index pages are classified before tag pages.

    Examples
    --------
    >>> from blog_pages.pages.models import Page, PageKind, TagRef
    >>> post = Page(
    ...     path="azure/index.html",
    ...     kind=PageKind.POST,
    ...     tags=(TagRef("Azure", "azure"), TagRef("Fabric", "fabric")),
    ... )
    >>> body_class(post)
    'post-template tag-azure tag-fabric'
    """
    match page.kind:
        case PageKind.PAGINATION_INDEX:
            num = page.require_pagination().num
            if num > 1:
                return "paged"
            return "home-template" if _is_site_root(page.path) else ""
        case PageKind.HOME:
            return "home-template"
        case PageKind.TAG_INDEX:
            tag_slug = page.tag_slug or slugify(page.require("tag"))
            classes = ["tag-template", f"tag-{tag_slug}"]
            if page.require_pagination().num > 1:
                classes.append("paged")
            return " ".join(classes)
        case PageKind.POST:
            return " ".join(["post-template", *_tag_tokens(page)])
        case PageKind.PAGE:
            classes = ["page-template"]
            label = page.permalink or page.title
            label_slug = slugify(label) if label else ""
            if label_slug:
                classes.append(f"page-{label_slug}")
            return " ".join(classes)
        case _:
            return ""


def post_class(page: Page) -> str:
    """Return the class list for a post's ``<article>`` element."""
    match page.kind:
        case PageKind.POST:
            return " ".join(["post", *_tag_tokens(page)])
        case PageKind.PAGE:
            return "post page"
        case _:
            return "post"


__all__ = ["body_class", "post_class"]
