"""Block helpers that render template fragments for data items."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from markupsafe import Markup

if typ.TYPE_CHECKING:
    from blog_pages.pages.models import Page
    from blog_pages.partials import PartialRegistry


def _with_site_url(item: object, site_url: str) -> dict[str, typ.Any]:
    """Return a shallow copy of ``item`` with ``site.url`` set."""
    match item:
        case cabc.Mapping():
            fields = dict(item)
        case _ if dc.is_dataclass(item) and not isinstance(item, type):
            fields = {
                field.name: getattr(item, field.name) for field in dc.fields(item)
            }
        case _:
            msg = f"Cannot render list item of type {type(item).__name__}."
            raise TypeError(msg)
    site = fields.get("site")
    fields["site"] = {**(site if isinstance(site, cabc.Mapping) else {}), "url": site_url}
    return fields


def list_items(
    items: cabc.Iterable[object],
    block: cabc.Callable[[dict[str, typ.Any]], str],
    site_url: str,
) -> Markup:
    """Render ``block`` for every item, in order, and concatenate the output.

    Items are shallow-copied with ``site.url`` injected; the originals are
    left untouched.

    Examples
    --------
    >>> list_items([{"label": "Home"}], lambda item: item["site"]["url"], "https://x/")
    Markup('https://x/')
    """
    rendered = [block(_with_site_url(item, site_url)) for item in items]
    return Markup("".join(str(item) for item in rendered))


def header_injection(
    page: Page,
    registry: PartialRegistry,
    render_partial: cabc.Callable[[str, Page], str],
) -> Markup:
    """Render the partial named by ``page.header_injection``.

    Returns an empty string when the page names no partial.

    Raises
    ------
    PartialNotFoundError
        If the page names a partial the registry does not hold.
    """
    name = page.header_injection
    if not name:
        return Markup("")
    registry.get(name)
    return Markup(render_partial(name, page))


__all__ = ["header_injection", "list_items"]
