"""Resolve logical asset names to their cache-busted URLs."""

from __future__ import annotations

import collections.abc as cabc

from markupsafe import Markup

from blog_pages._constants import ASSET_URL_PREFIX


def asset(name: str, manifest: cabc.Mapping[str, str] | None = None) -> Markup:
    """Return the ``/assets/`` URL for ``name``, revisioned when the manifest knows it.

    Examples
    --------
    >>> asset("theme.css", {"theme.css": "theme-abcd1234.css"})
    Markup('/assets/theme-abcd1234.css')
    >>> asset("theme.js", {})
    Markup('/assets/theme.js')
    """
    resolved = (manifest or {}).get(name) or name
    return Markup("{prefix}{name}").format(prefix=ASSET_URL_PREFIX, name=resolved)


__all__ = ["asset"]
