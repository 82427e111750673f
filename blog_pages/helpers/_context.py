"""Field access shared by helpers that accept pages or plain mappings."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from blog_pages.errors import PageContextError


def lookup(target: object, field: str, default: typ.Any = None) -> typ.Any:  # noqa: ANN401
    """Return ``field`` from a mapping key or attribute, else ``default``."""
    if isinstance(target, cabc.Mapping):
        return target.get(field, default)
    return getattr(target, field, default)


def require(target: object, field: str) -> typ.Any:  # noqa: ANN401
    """Return ``field`` from ``target`` or raise :class:`PageContextError`."""
    value = lookup(target, field)
    if value is None:
        raise PageContextError(lookup(target, "path"), field)
    return value


__all__ = ["lookup", "require"]
