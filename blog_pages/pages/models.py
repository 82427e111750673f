"""Page data model consumed by the presentation helpers.

Pages arrive from the upstream content pipeline already converted to HTML,
grouped into collections, paginated, and tagged. The model here is read-only
from the helpers' perspective; the only derived datum is :class:`PageKind`,
assigned once by :func:`blog_pages.pages.page_from_mapping`.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata
import enum
import typing as typ

from markupsafe import Markup

from blog_pages.errors import PageContextError


class PageKind(enum.Enum):
    """Shape of a page, decided once when the page is loaded."""

    POST = "post"
    PAGE = "page"
    HOME = "home"
    TAG_INDEX = "tag-index"
    PAGINATION_INDEX = "pagination-index"
    OTHER = "other"


@dc.dataclass(frozen=True, slots=True)
class TagRef:
    """A tag attached to a post."""

    name: str
    slug: str


@dc.dataclass(frozen=True, slots=True)
class PageLink:
    """Reference to a sibling page inside a pagination group."""

    path: str


@dc.dataclass(frozen=True, slots=True)
class Pagination:
    """Position of a page within its pagination group.

    Attributes
    ----------
    num : int
        1-based page number.
    pages : tuple[PageLink, ...]
        Every page of the group in order, including this one.
    files : tuple[Page, ...]
        Pages listed on this page of the group.
    """

    num: int
    pages: tuple[PageLink, ...] = ()
    files: tuple[Page, ...] = ()

    @property
    def is_first(self) -> bool:
        """Return True for the first page of the group."""
        return self.num == 1


@dc.dataclass(frozen=True, slots=True)
class TagEntry:
    """Aggregated listing of the pages carrying one tag."""

    slug: str
    pages: tuple[str, ...] = ()

    @property
    def count(self) -> int:
        """Return the number of pages tagged with this entry."""
        return len(self.pages)


TagIndex = dict[str, TagEntry]


@dc.dataclass(slots=True)
class Page:
    """One output document and the metadata templates may read.

    Unrecognised front-matter keys live in ``extra`` and are reachable as
    attributes, so layouts can use ``this.subtitle`` for a custom field.
    """

    path: str
    kind: PageKind
    title: str | None = None
    contents: Markup = dc.field(default_factory=Markup)
    excerpt: str | None = None
    date: dt.datetime | None = None
    collection: tuple[str, ...] = ()
    tags: tuple[TagRef, ...] = ()
    permalink: str | None = None
    tag: str | None = None
    tag_slug: str | None = None
    pagination: Pagination | None = None
    is_page_index: bool = False
    header_injection: str | None = None
    url: str | None = None
    layout: str | None = None
    extra: dict[str, typ.Any] = dc.field(default_factory=dict)

    def __getattr__(self, name: str) -> typ.Any:  # noqa: ANN401 - front matter is untyped
        if name == "extra" or name.startswith("__"):
            raise AttributeError(name)
        try:
            return self.extra[name]
        except KeyError:
            raise AttributeError(name) from None

    def require(self, field: str) -> typ.Any:  # noqa: ANN401 - field types vary
        """Return ``field`` or raise :class:`PageContextError` when it is unset."""
        value = getattr(self, field, None)
        if value is None:
            raise PageContextError(self.path, field)
        return value

    def require_pagination(self) -> Pagination:
        """Return the pagination block or raise when the page has none."""
        return typ.cast("Pagination", self.require("pagination"))


__all__ = [
    "Page",
    "PageKind",
    "PageLink",
    "Pagination",
    "TagEntry",
    "TagIndex",
    "TagRef",
]
