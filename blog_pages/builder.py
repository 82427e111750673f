"""Blog rendering pipeline.

This module ties the configuration, metadata merge, partial registration,
and page rendering steps together. The main entry point is
:class:`SiteBuilder`, which reads the upstream pipeline's pages document,
renders every page through its layout, and writes the HTML under the
configured site destination.

Typical usage mirrors the CLI:

>>> from pathlib import Path
>>> from blog_pages.config import load_build_config
>>> builder = SiteBuilder(load_build_config(Path("config/blog.yaml")))  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
[PosixPath('build/index.html'), ...]

Each run starts from an empty :class:`~blog_pages.partials.PartialRegistry`;
nothing carries over between runs.
"""

from __future__ import annotations

import typing as typ

from .metadata import load_site_metadata, merge_asset_manifest
from .pages import load_pages
from .partials import PartialRegistry, register_partials
from .renderer import PageRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import BuildConfig, SiteMetadata


class SiteBuilder:
    """Render the blog described by a :class:`BuildConfig`."""

    def __init__(self, config: BuildConfig, *, output_dir: Path | None = None) -> None:
        """Initialize the builder.

        Parameters
        ----------
        config : BuildConfig
            Resolved build configuration.
        output_dir : Path, optional
            Override for the rendered site directory; defaults to
            ``config.destination.site``.
        """
        self.config = config
        self.output_dir = output_dir or config.destination.site

    def load_site(self) -> SiteMetadata:
        """Load site metadata and merge the asset manifest into it."""
        site = load_site_metadata(self.config.metadata)
        return merge_asset_manifest(site, self.config.destination.assets)

    def load_partials(self) -> PartialRegistry:
        """Return a fresh registry populated from the configured roots."""
        registry = PartialRegistry()
        register_partials(
            registry,
            self.config.partials,
            base_dir=self.config.base_dir,
            extension=self.config.partial_extension,
        )
        return registry

    def run(self) -> list[Path]:
        """Render every page and return the written paths.

        Raises
        ------
        PartialRootError
            If a configured partial directory is missing.
        PageContextError
            If a page violates the content model a helper relies on.
        PartialNotFoundError
            If a page requests a partial that was not registered.
        """
        site = self.load_site()
        registry = self.load_partials()
        pages, tag_index = load_pages(self.config.pages)
        renderer = PageRenderer(
            registry,
            site,
            layouts_dir=self.config.layouts,
            default_layout=self.config.default_layout,
            tag_index=tag_index,
        )
        return renderer.render_all(pages, self.output_dir)


__all__ = ["SiteBuilder"]
