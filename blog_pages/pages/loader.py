"""Build :class:`Page` objects from the upstream pipeline's JSON output.

The content pipeline serialises its file map as::

    {
      "files": {"<output path>": {<front matter and derived fields>}, ...},
      "tags": {"<tag name>": {"slug": "...", "pages": ["<path>", ...]}, ...}
    }

Field names follow the pipeline's camelCase conventions (``isPageIndex``,
``headerInjection``); snake_case spellings are accepted too.
"""

from __future__ import annotations

import datetime as dt
import json
import typing as typ

from markupsafe import Markup

from blog_pages.config.helpers import _optional_str, _parse_timestamp
from blog_pages.errors import PageContextError, SiteConfigError
from blog_pages.helpers.text import slugify

from .models import Page, PageKind, PageLink, Pagination, TagEntry, TagIndex, TagRef

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

_ALIASES: dict[str, str] = {
    "isPageIndex": "is_page_index",
    "headerInjection": "header_injection",
    "tagSlug": "tag_slug",
}
_KNOWN_FIELDS = frozenset(
    {
        "path",
        "title",
        "contents",
        "excerpt",
        "date",
        "collection",
        "tags",
        "permalink",
        "tag",
        "tag_slug",
        "pagination",
        "is_page_index",
        "header_injection",
        "url",
        "layout",
    }
)


def detect_kind(path: str, data: cabc.Mapping[str, typ.Any]) -> PageKind:
    """Classify a page by its shape.

    Pagination index pages win over tag pages, which win over collection
    membership. A page matching none of these is a content-model error.

    Raises
    ------
    PageContextError
        If the page has no collection and is neither a tag nor a
        pagination index page.
    """
    if data.get("is_page_index"):
        return PageKind.PAGINATION_INDEX
    collection = _as_collection(data.get("collection"))
    if not collection and data.get("tag"):
        return PageKind.TAG_INDEX
    if not collection:
        raise PageContextError(path, "collection")
    if "posts" in collection:
        return PageKind.POST
    if "pages" in collection:
        return PageKind.PAGE
    if "home" in collection:
        return PageKind.HOME
    return PageKind.OTHER


def page_from_mapping(path: str, raw: cabc.Mapping[str, typ.Any]) -> Page:
    """Build a :class:`Page` for ``path`` from an upstream data mapping.

    Parameters
    ----------
    path : str
        Output path the pipeline keyed the file under. A ``path`` entry in
        ``raw`` (rewritten by permalinks) takes precedence.
    raw : Mapping[str, Any]
        Front matter plus fields derived by upstream plugins.

    Returns
    -------
    Page
        Page with its :class:`PageKind` assigned.
    """
    data = {_ALIASES.get(key, key): value for key, value in raw.items()}
    page_path = _optional_str(data.get("path")) or path
    kind = detect_kind(page_path, data)
    tag = _optional_str(data.get("tag"))
    return Page(
        path=page_path,
        kind=kind,
        title=_optional_str(data.get("title")),
        contents=Markup(data.get("contents") or ""),
        excerpt=data.get("excerpt"),
        date=_build_date(page_path, data.get("date")),
        collection=_as_collection(data.get("collection")),
        tags=_build_tags(page_path, data.get("tags")),
        permalink=_optional_str(data.get("permalink")),
        tag=tag,
        tag_slug=_optional_str(data.get("tag_slug")) or (slugify(tag) if tag else None),
        pagination=_build_pagination(page_path, data.get("pagination")),
        is_page_index=bool(data.get("is_page_index")),
        header_injection=_optional_str(data.get("header_injection")),
        url=_optional_str(data.get("url")),
        layout=_optional_str(data.get("layout")),
        extra={key: value for key, value in data.items() if key not in _KNOWN_FIELDS},
    )


def load_pages(path: Path) -> tuple[list[Page], TagIndex]:
    """Load the pipeline's pages document into pages and a tag index.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    SiteConfigError
        If the document is not a mapping with a ``files`` mapping.
    """
    if not path.exists():
        msg = f"Pages document '{path}' not found."
        raise FileNotFoundError(msg)
    with path.open("r", encoding="utf-8") as handle:
        document = json.load(handle)
    if not isinstance(document, dict) or not isinstance(document.get("files"), dict):
        msg = f"Pages document '{path}' must contain a 'files' mapping."
        raise SiteConfigError(msg)

    pages: list[Page] = []
    for key, payload in document["files"].items():
        if not isinstance(payload, dict):
            msg = f"Pages document '{path}' entry '{key}' must be an object."
            raise SiteConfigError(msg)
        pages.append(page_from_mapping(key, payload))
    return pages, build_tag_index(document.get("tags") or {})


def build_tag_index(raw: cabc.Mapping[str, typ.Any]) -> TagIndex:
    """Convert the upstream tag listing into an ordered :data:`TagIndex`."""
    index: TagIndex = {}
    for name, payload in raw.items():
        match payload:
            case {"slug": str() as slug, **rest}:
                pages = rest.get("pages") or []
            case list() as pages:
                slug = slugify(name)
            case _:
                msg = (
                    f"Tag index entry '{name}' must be a list of pages or an "
                    "object with a 'slug'."
                )
                raise SiteConfigError(msg)
        index[name] = TagEntry(slug=slug, pages=tuple(_link_path(item) for item in pages))
    return index


def _as_collection(value: object) -> tuple[str, ...]:
    match value:
        case str() as name:
            return (name,)
        case list() | tuple():
            return tuple(str(item) for item in value)
        case _:
            return ()


def _build_date(path: str, value: object) -> dt.datetime | None:
    match value:
        case None:
            return None
        case str() as text if not text.strip():
            return None
        case str() | dt.date():
            parsed = _parse_timestamp(value)
        case _:
            parsed = None
    if parsed is None:
        raise PageContextError(path, "date")
    return parsed


def _build_tags(path: str, value: object) -> tuple[TagRef, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise PageContextError(path, "tags")
    tags: list[TagRef] = []
    for entry in value:
        match entry:
            case {"name": str() as name, **rest} if name.strip():
                slug = rest.get("slug") or slugify(name)
                tags.append(TagRef(name=name, slug=str(slug)))
            case str() as name if name.strip():
                tags.append(TagRef(name=name, slug=slugify(name)))
            case _:
                raise PageContextError(path, "tags")
    return tuple(tags)


def _build_pagination(path: str, value: object) -> Pagination | None:
    if value is None:
        return None
    if not isinstance(value, dict) or "num" not in value:
        raise PageContextError(path, "pagination.num")
    pages = value.get("pages") or []
    files = value.get("files") or []
    return Pagination(
        num=int(value["num"]),
        pages=tuple(PageLink(path=_link_path(item)) for item in pages),
        files=tuple(
            page_from_mapping(_link_path(item), item)
            for item in _file_mappings(path, files)
        ),
    )


def _file_mappings(path: str, files: object) -> list[dict[str, typ.Any]]:
    if not isinstance(files, list) or not all(isinstance(item, dict) for item in files):
        raise PageContextError(path, "pagination.files")
    return files


def _link_path(item: object) -> str:
    match item:
        case {"path": str() as link}:
            return link
        case _:
            return str(item)


__all__ = ["build_tag_index", "detect_kind", "load_pages", "page_from_mapping"]
