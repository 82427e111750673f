"""Cyclopts CLI entrypoint for rendering the blog.

The ``blog`` console script defined here lists the registered partials,
renders every page produced by the upstream content pipeline, and revisions
built assets for cache busting. Typical usage runs ``blog revision`` after
the stylesheets and scripts are compiled, then ``blog render``.

Examples
--------
Render the site using the default configuration:

>>> from blog_pages.cli import main
>>> main()  # doctest: +SKIP

Render into a scratch directory with debug logging:

>>> from blog_pages.cli import app
>>> app(["render", "--output-dir", "dist", "--verbose"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .assets import revision_assets
from .builder import SiteBuilder
from .config import load_build_config
from .logging import configure_logging

DEFAULT_CONFIG = Path("config/blog.yaml")

app = App(name="blog", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="List the partials discovered under the configured roots.")
def partials(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to build config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print every registered partial name, one per line.

    Parameters
    ----------
    config : Path, optional
        Path to the ``blog.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    """
    registry = SiteBuilder(load_build_config(config)).load_partials()
    for name in registry.names():
        print(name)


@app.command(help="Render every page through its layout.")
def render(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to build config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Render the blog described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Path to the ``blog.yaml`` configuration file.
    output_dir : Path or None, optional
        Override for the rendered site directory.
    verbose : bool, optional
        Log partial registration and per-page progress.

    Returns
    -------
    None
        Writes rendered pages and prints the generated paths.
    """
    configure_logging(verbose=verbose)
    builder = SiteBuilder(load_build_config(config), output_dir=output_dir)
    for path in builder.run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Content-hash built assets and update rev-manifest.json.")
def revision(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to build config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Revision the assets listed in the configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``blog.yaml`` configuration file.
    """
    build_config = load_build_config(config)
    revised = revision_assets(build_config.destination.assets, build_config.assets)
    for name, revisioned in sorted(revised.items()):
        print(f"{name} -> {revisioned}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``blog`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
