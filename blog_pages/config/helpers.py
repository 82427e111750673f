"""Utility helpers shared by the blog configuration loaders."""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from .models import Author, NavLink, SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_path(base_dir: Path, value: object, *, field: str) -> Path:
    """Resolve ``value`` against ``base_dir`` unless it is already absolute."""
    text = _optional_str(value)
    if text is None:
        msg = f"Configuration field '{field}' must be a non-empty path."
        raise SiteConfigError(msg)
    path = Path(text)
    return path if path.is_absolute() else (base_dir / path).resolve()


def _path_list(base_dir: Path, value: object, *, field: str) -> list[Path]:
    """Resolve a single path or a list of paths, preserving order."""
    match value:
        case str() | Path():
            return [_resolve_path(base_dir, value, field=field)]
        case list() | tuple():
            return [_resolve_path(base_dir, item, field=field) for item in value]
        case _:
            msg = f"Configuration field '{field}' must be a path or list of paths."
            raise SiteConfigError(msg)


def _build_navigation(value: object) -> list[NavLink]:
    """Build navigation links from a list of ``{label, url}`` mappings."""
    if value is None:
        return []
    if not isinstance(value, list):
        msg = "Site metadata 'navigation' must be a list."
        raise SiteConfigError(msg)
    links: list[NavLink] = []
    for entry in value:
        if not isinstance(entry, dict):
            msg = "Navigation entries must be objects with 'label' and 'url'."
            raise SiteConfigError(msg)
        label = _optional_str(entry.get("label"))
        url = _optional_str(entry.get("url"))
        if label is None or url is None:
            msg = "Navigation entries require 'label' and 'url'."
            raise SiteConfigError(msg)
        links.append(NavLink(label=label, url=url))
    return links


def _build_author(value: typ.Mapping[str, typ.Any] | None) -> Author | None:
    """Build an :class:`Author` from a metadata mapping, if provided."""
    if not value:
        return None
    name = _optional_str(value.get("name"))
    if name is None:
        msg = "Site metadata 'author' requires a 'name'."
        raise SiteConfigError(msg)
    return Author(
        name=name,
        bio=_optional_str(value.get("bio")),
        image=_optional_str(value.get("image")),
        location=_optional_str(value.get("location")),
        website=_optional_str(value.get("website")),
        twitter=_optional_str(value.get("twitter")),
    )


def _parse_timestamp(value: dt.datetime | dt.date | str | None) -> dt.datetime | None:
    """Return a timezone-aware UTC datetime parsed from ``value``, or None.

    Naive values are interpreted as UTC; bare dates become midnight UTC.
    """
    match value:
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime.combine(value, dt.time())
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError:
                return None
        case _:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


__all__ = [
    "_build_author",
    "_build_navigation",
    "_optional_str",
    "_parse_timestamp",
    "_path_list",
    "_resolve_path",
]
