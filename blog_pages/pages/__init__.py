"""Page model and the loader that builds it from upstream pipeline output."""

from .loader import build_tag_index, detect_kind, load_pages, page_from_mapping
from .models import Page, PageKind, PageLink, Pagination, TagEntry, TagIndex, TagRef

__all__ = [
    "Page",
    "PageKind",
    "PageLink",
    "Pagination",
    "TagEntry",
    "TagIndex",
    "TagRef",
    "build_tag_index",
    "detect_kind",
    "load_pages",
    "page_from_mapping",
]
