"""Load site metadata and merge the asset-revision manifest into it.

The site metadata file is the JSON document describing the blog itself
(title, base URL, navigation, author, feed locations). The asset build writes
``rev-manifest.json`` next to the revisioned files; merging it here lets the
``asset`` helper emit cache-busted URLs.

Example
-------
>>> from pathlib import Path
>>> from blog_pages.metadata import load_site_metadata, merge_asset_manifest
>>> site = load_site_metadata(Path("content/metadata.json"))  # doctest: +SKIP
>>> merge_asset_manifest(site, Path("build/assets")).asset_manifest  # doctest: +SKIP
{'theme.css': 'theme-1a2b3c4d.css'}
"""

from __future__ import annotations

import json
import typing as typ

from ._constants import REV_MANIFEST_NAME
from .config.helpers import _build_author, _build_navigation, _optional_str
from .config.models import SiteConfigError, SiteMetadata
from .logging import get_logger

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = get_logger("metadata")

_KNOWN_KEYS = frozenset(
    {"title", "url", "description", "lang", "navigation", "author", "feedRss", "feedImage"}
)


def load_site_metadata(path: Path) -> SiteMetadata:
    """Load the site metadata JSON file.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    SiteConfigError
        If the document is not an object or lacks ``title`` or ``url``.
    """
    if not path.exists():
        msg = f"Site metadata file '{path}' not found."
        raise FileNotFoundError(msg)
    with path.open("r", encoding="utf-8") as handle:
        raw = json.load(handle)
    if not isinstance(raw, dict):
        msg = "Site metadata must be a JSON object."
        raise SiteConfigError(msg)

    title = _optional_str(raw.get("title"))
    url = _optional_str(raw.get("url"))
    if title is None or url is None:
        msg = "Site metadata requires both 'title' and 'url'."
        raise SiteConfigError(msg)

    return SiteMetadata(
        title=title,
        url=url,
        description=_optional_str(raw.get("description")) or "",
        lang=_optional_str(raw.get("lang")) or "en",
        navigation=_build_navigation(raw.get("navigation")),
        author=_build_author(raw.get("author")),
        feed_rss=_optional_str(raw.get("feedRss")),
        feed_image=_optional_str(raw.get("feedImage")),
        extra={key: value for key, value in raw.items() if key not in _KNOWN_KEYS},
    )


def read_asset_manifest(path: Path) -> dict[str, str]:
    """Read a revision manifest, validating that it maps strings to strings."""
    with path.open("r", encoding="utf-8") as handle:
        try:
            raw = json.load(handle)
        except json.JSONDecodeError as exc:
            msg = f"Asset manifest '{path}' is not valid JSON: {exc}"
            raise SiteConfigError(msg) from exc
    if not isinstance(raw, dict) or not all(
        isinstance(key, str) and isinstance(value, str) for key, value in raw.items()
    ):
        msg = f"Asset manifest '{path}' must map asset names to file names."
        raise SiteConfigError(msg)
    return raw


def merge_asset_manifest(site: SiteMetadata, assets_dir: Path) -> SiteMetadata:
    """Store the manifest found in ``assets_dir`` on ``site``.

    A missing manifest leaves ``site`` unchanged, since an unbuilt asset
    tree still renders with un-revisioned URLs.
    """
    manifest_path = assets_dir / REV_MANIFEST_NAME
    if not manifest_path.exists():
        logger.debug("no asset manifest at %s", manifest_path)
        return site
    site.asset_manifest = read_asset_manifest(manifest_path)
    logger.info("merged %d asset revisions", len(site.asset_manifest))
    return site


__all__ = ["load_site_metadata", "merge_asset_manifest", "read_asset_manifest"]
