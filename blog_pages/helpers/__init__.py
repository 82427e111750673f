"""Presentation helpers used by blog layouts.

Each helper is a plain function of the current page (and, where needed, the
site metadata, tag index, or partial registry) returning text for a template
placeholder. Plain ``str`` results are escaped by the renderer;
:class:`markupsafe.Markup` results are trusted HTML and inserted as is.
:class:`blog_pages.renderer.PageRenderer` binds these functions to template
names such as ``body_class`` and ``headerInjection``.
"""

from .assets import asset
from .blocks import header_injection, list_items
from .classes import body_class, post_class
from .dates import date, format_date, now
from .links import feed_url, local_feed_url, page_url, url
from .page_type import is_home_page, is_next_page, is_post_or_page, is_tag_page
from .pagination import page_count, page_number
from .tagging import has_tags, tag_list, tags
from .text import excerpt, slug, slugify
from .titles import meta_title

__all__ = [
    "asset",
    "body_class",
    "date",
    "excerpt",
    "feed_url",
    "format_date",
    "has_tags",
    "header_injection",
    "is_home_page",
    "is_next_page",
    "is_post_or_page",
    "is_tag_page",
    "list_items",
    "local_feed_url",
    "meta_title",
    "now",
    "page_count",
    "page_number",
    "page_url",
    "post_class",
    "slug",
    "slugify",
    "tag_list",
    "tags",
    "url",
]
