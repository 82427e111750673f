"""Jinja rendering of blog pages with partials and presentation helpers.

:class:`PageRenderer` owns a Jinja2 ``Environment`` whose loader serves
layouts from the layouts directory and partials from a
:class:`~blog_pages.partials.PartialRegistry`. The helper functions from
:mod:`blog_pages.helpers` are installed as globals that read the current page
from the ``this`` context variable, so a layout can write::

    <body class="{{ body_class() }}">
      {% include "header" %}
      <h1>{{ meta_title() }}</h1>
      {{ tags(prefix="on ") }}
      {% call(link) list(site.navigation) %}
        <a href="{{ link.url }}">{{ link.label }}</a>
      {% endcall %}

Example
-------
>>> from pathlib import Path
>>> from blog_pages.config import SiteMetadata
>>> from blog_pages.partials import PartialRegistry
>>> renderer = PageRenderer(
...     PartialRegistry(),
...     SiteMetadata(title="Blog", url="https://example.com/"),
...     layouts_dir=Path("layouts"),
... )  # doctest: +SKIP
>>> renderer.render(page)  # doctest: +SKIP
'<!DOCTYPE html>...'
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, pass_context

from . import helpers
from ._constants import DEFAULT_LAYOUT
from .errors import PageContextError
from .logging import get_logger
from .pages.models import Page
from .partials import RegistryLoader

if typ.TYPE_CHECKING:
    from pathlib import Path

    from jinja2.runtime import Context
    from markupsafe import Markup

    from .config.models import SiteMetadata
    from .pages.models import PageLink, TagIndex
    from .partials import PartialRegistry

logger = get_logger("renderer")


def _current_page(context: Context, target: object = None) -> Page:
    """Return ``target`` when given, else the page bound to ``this``."""
    page = context.get("this") if target is None else target
    if not isinstance(page, Page):
        raise PageContextError(None, "this")
    return page


class PageRenderer:
    """Render pages through their layouts with partials and helpers installed."""

    def __init__(
        self,
        registry: PartialRegistry,
        site: SiteMetadata,
        *,
        layouts_dir: Path,
        default_layout: str = DEFAULT_LAYOUT,
        tag_index: TagIndex | None = None,
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        registry : PartialRegistry
            Registry holding the partials templates may include by name.
        site : SiteMetadata
            Site-wide metadata, including the merged asset manifest.
        layouts_dir : Path
            Directory containing layout templates.
        default_layout : str, optional
            Layout used for pages that do not name one.
        tag_index : TagIndex, optional
            Aggregated tag listing used by ``tagList``.
        """
        self.registry = registry
        self.site = site
        self.layouts_dir = layouts_dir
        self.default_layout = default_layout
        self.tag_index = tag_index or {}
        self.env = Environment(
            loader=ChoiceLoader(
                [RegistryLoader(registry), FileSystemLoader(str(layouts_dir))]
            ),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.globals.update(self._helper_globals())

    def render(self, page: Page) -> str:
        """Render ``page`` through its layout and return the HTML."""
        template = self.env.get_template(page.layout or self.default_layout)
        html = template.render(**self._context_for(page))
        if not html.endswith("\n"):
            html += "\n"
        return html

    def render_partial(self, name: str, page: Page) -> str:
        """Render the partial ``name`` with ``page`` as its data context."""
        return self.env.get_template(name).render(**self._context_for(page))

    def render_all(self, pages: cabc.Iterable[Page], output_dir: Path) -> list[Path]:
        """Render every page to ``output_dir / page.path``.

        Returns
        -------
        list[Path]
            Written files, in input order.
        """
        written: list[Path] = []
        for page in pages:
            output_path = output_dir / page.path.lstrip("/")
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(self.render(page), encoding="utf-8")
            logger.debug("rendered %s", output_path)
            written.append(output_path)
        return written

    def _context_for(self, page: Page) -> dict[str, typ.Any]:
        return {"this": page, "site": self.site, "tag_index": self.tag_index}

    def _helper_globals(self) -> dict[str, typ.Any]:  # noqa: C901 - one closure per helper
        site = self.site

        def asset(name: str) -> Markup:
            return helpers.asset(name, site.asset_manifest)

        @pass_context
        def body_class(context: Context) -> str:
            return helpers.body_class(_current_page(context))

        @pass_context
        def date(
            context: Context, format: str | None = None, target: object = None  # noqa: A002
        ) -> str:
            return helpers.date(_current_page(context, target), format)

        def now(format: str | None = None) -> str:  # noqa: A002
            return helpers.now(format)

        @pass_context
        def excerpt(context: Context, words: int, target: object = None) -> str:
            page = _current_page(context, target)
            return helpers.excerpt(page.require("excerpt"), words)

        def feed_url() -> str:
            return helpers.feed_url(site)

        def local_feed_url() -> str:
            return helpers.local_feed_url(site)

        @pass_context
        def header_injection(context: Context) -> Markup:
            return helpers.header_injection(
                _current_page(context), self.registry, self.render_partial
            )

        def list_(items: cabc.Iterable[object], caller: cabc.Callable[..., str]) -> Markup:
            return helpers.list_items(items, caller, site.url)

        @pass_context
        def meta_title(context: Context) -> str:
            return helpers.meta_title(_current_page(context), site)

        @pass_context
        def page(context: Context) -> int:
            return helpers.page_number(_current_page(context))

        @pass_context
        def pages(context: Context) -> int:
            return helpers.page_count(_current_page(context))

        def page_url(sibling: PageLink | str, absolute: bool = False) -> str:  # noqa: FBT001, FBT002
            return helpers.page_url(sibling, site.url, absolute=absolute)

        @pass_context
        def post_class(context: Context, target: object = None) -> str:
            return helpers.post_class(_current_page(context, target))

        @pass_context
        def tag_list(context: Context, caller: cabc.Callable[..., str]) -> Markup:
            return helpers.tag_list(context.get("tag_index"), caller, site.url)

        @pass_context
        def tags(
            context: Context,
            prefix: str | None = None,
            plain: bool = False,  # noqa: FBT001, FBT002
            target: object = None,
        ) -> Markup | str:
            page = _current_page(context, target)
            return helpers.tags(page, prefix=prefix, plain=plain)

        @pass_context
        def has_tags(context: Context, target: object = None) -> bool:
            return helpers.has_tags(_current_page(context, target))

        @pass_context
        def url(
            context: Context, target: object = None, absolute: bool = False  # noqa: FBT001, FBT002
        ) -> str:
            subject = context.get("this") if target is None else target
            return helpers.url(subject, site.url, absolute=absolute)

        @pass_context
        def is_home_page(context: Context) -> bool:
            return helpers.is_home_page(_current_page(context))

        @pass_context
        def is_tag_page(context: Context) -> bool:
            return helpers.is_tag_page(_current_page(context))

        @pass_context
        def is_post_or_page(context: Context) -> bool:
            return helpers.is_post_or_page(_current_page(context))

        @pass_context
        def is_next_page(context: Context) -> bool:
            return helpers.is_next_page(_current_page(context))

        return {
            "asset": asset,
            "body_class": body_class,
            "date": date,
            "now": now,
            "excerpt": excerpt,
            "feed_url": feed_url,
            "local_feed_url": local_feed_url,
            "headerInjection": header_injection,
            "list": list_,
            "meta_title": meta_title,
            "page": page,
            "pages": pages,
            "page_url": page_url,
            "post_class": post_class,
            "slug": helpers.slug,
            "tagList": tag_list,
            "tags": tags,
            "hasTags": has_tags,
            "url": url,
            "isHomePage": is_home_page,
            "isTagPage": is_tag_page,
            "isPostOrPage": is_post_or_page,
            "isNextPage": is_next_page,
        }


__all__ = ["PageRenderer"]
