"""Load build configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from blog_pages._constants import DEFAULT_LAYOUT, DEFAULT_PARTIAL_EXTENSION

from .helpers import _optional_str, _path_list, _resolve_path
from .models import BuildConfig, DestinationConfig, SiteConfigError


def load_build_config(path: Path) -> BuildConfig:
    """Load the YAML configuration describing where the blog build reads and writes.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML build configuration (for example,
        ``config/blog.yaml``). Relative paths inside the file resolve against
        the directory containing the file's parent ``config`` folder when the
        file lives in one, otherwise against the file's own directory.

    Returns
    -------
    BuildConfig
        Parsed configuration with absolute paths.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required fields are missing or hold invalid values.

    Examples
    --------
    >>> from pathlib import Path
    >>> from blog_pages.config import load_build_config
    >>> config = load_build_config(Path("config/blog.yaml"))  # doctest: +SKIP
    >>> config.default_layout  # doctest: +SKIP
    'post.jinja'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    base_dir = _base_dir_for(path)
    source = raw.get("source", {}) or {}
    destination_raw = raw.get("destination", {}) or {}

    layouts = _resolve_path(base_dir, source.get("layouts", "layouts"), field="layouts")
    partials_raw = source.get("partials", str(layouts / "partials"))
    destination = DestinationConfig(
        site=_resolve_path(base_dir, destination_raw.get("site", "build"), field="site"),
        assets=_resolve_path(
            base_dir, destination_raw.get("assets", "build/assets"), field="assets"
        ),
    )

    extension = _optional_str(raw.get("partial_extension")) or DEFAULT_PARTIAL_EXTENSION
    if not extension.startswith("."):
        extension = f".{extension}"

    assets = raw.get("assets", []) or []
    if not isinstance(assets, list):
        msg = "Configuration field 'assets' must be a list of file names."
        raise SiteConfigError(msg)

    return BuildConfig(
        base_dir=base_dir,
        layouts=layouts,
        partials=_path_list(base_dir, partials_raw, field="partials"),
        metadata=_resolve_path(
            base_dir, source.get("metadata", "content/metadata.json"), field="metadata"
        ),
        pages=_resolve_path(base_dir, source.get("pages", "build/pages.json"), field="pages"),
        destination=destination,
        partial_extension=extension,
        default_layout=_optional_str(raw.get("default_layout")) or DEFAULT_LAYOUT,
        assets=[str(name) for name in assets],
    )


def _base_dir_for(path: Path) -> Path:
    """Return the project directory a config file's relative paths refer to."""
    parent = path.resolve().parent
    if parent.name == "config":
        return parent.parent
    return parent


__all__ = ["load_build_config"]
