"""Presentation layer for a static blog build.

This package registers template partials, exposes the presentation helpers
layouts call while rendering, merges the asset-revision manifest into the
site metadata, and renders the pages produced by the upstream content
pipeline.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from blog_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
