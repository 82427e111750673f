"""Load and validate build configuration for the blog.

This subpackage parses the project's ``config/blog.yaml`` file, resolves the
content, layout, partial, and output directories against the project root,
and produces :class:`BuildConfig` plus the :class:`SiteMetadata` model that
helpers read while rendering. The primary entry point is
:func:`load_build_config`.

Examples
--------
>>> from pathlib import Path
>>> from blog_pages.config import load_build_config
>>> config = load_build_config(Path("config/blog.yaml"))  # doctest: +SKIP
>>> [path.name for path in config.partials]  # doctest: +SKIP
['partials']
"""

from .loader import load_build_config
from .models import (
    Author,
    BuildConfig,
    DestinationConfig,
    NavLink,
    SiteConfigError,
    SiteMetadata,
)

__all__ = [
    "Author",
    "BuildConfig",
    "DestinationConfig",
    "NavLink",
    "SiteConfigError",
    "SiteMetadata",
    "load_build_config",
]
