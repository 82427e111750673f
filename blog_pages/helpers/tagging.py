"""Tag links, tag predicates, and the site-wide tag listing."""

from __future__ import annotations

import typing as typ

from markupsafe import Markup, escape

from blog_pages._constants import TAG_PATH_TEMPLATE

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from blog_pages.pages.models import Page, TagIndex

TAG_LINK = Markup('<a href="/tag/{slug}/">{name}</a>')


def tags(page: Page, *, prefix: str | None = None, plain: bool = False) -> Markup | str:
    """Render the page's tags.

    Parameters
    ----------
    page : Page
        Page whose ``tags`` are rendered.
    prefix : str, optional
        Literal text placed before the links when the page has tags.
    plain : bool, optional
        Return comma-separated tag names without markup.

    Returns
    -------
    Markup or str
        Linked, escaped tag names joined by ``", "``; a plain string in
        ``plain`` mode.

    Examples
    --------
    >>> from blog_pages.pages.models import Page, PageKind, TagRef
    >>> post = Page(path="p/", kind=PageKind.POST, tags=(TagRef("C & C++", "c-c"),))
    >>> tags(post, prefix="on ")
    Markup('on <a href="/tag/c-c/">C &amp; C++</a>')
    >>> tags(post, plain=True)
    'C & C++'
    """
    if plain:
        return ", ".join(tag.name for tag in page.tags)
    if not page.tags:
        return Markup("")
    links = Markup(", ").join(
        TAG_LINK.format(slug=tag.slug, name=tag.name) for tag in page.tags
    )
    if prefix:
        return escape(prefix) + links
    return links


def has_tags(page: Page) -> bool:
    """Return True when the page carries at least one tag."""
    return bool(page.tags)


def tag_list(
    tag_index: TagIndex | None,
    block: cabc.Callable[[dict[str, typ.Any]], str],
    site_url: str,
) -> Markup:
    """Render ``block`` once per tag in index order.

    Each call receives ``name``, ``path`` (``tag/<slug>/``), ``count``, and
    ``site.url``.
    """
    if not tag_index:
        return Markup("")
    rendered = [
        block(
            {
                "name": name,
                "path": TAG_PATH_TEMPLATE.format(slug=entry.slug),
                "count": entry.count,
                "site": {"url": site_url},
            }
        )
        for name, entry in tag_index.items()
    ]
    return Markup("".join(str(item) for item in rendered))


__all__ = ["has_tags", "tag_list", "tags"]
