"""Discover template partials on disk and register them by name.

A partial's name is its path relative to the root it was found under, with
the template extension removed and separators normalised to ``/``. For a
root ``layouts/partials`` the file ``layouts/partials/post/meta.jinja`` is
registered as ``post/meta``.

Example
-------
>>> from blog_pages.partials import PartialRegistry, register_partials
>>> registry = PartialRegistry()
>>> register_partials(registry, "layouts/partials")  # doctest: +SKIP
['footer', 'header', 'post/meta']
>>> registry.get("header")  # doctest: +SKIP
'<header>...</header>'
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from jinja2 import BaseLoader, TemplateNotFound

from ._constants import DEFAULT_PARTIAL_EXTENSION
from .errors import PartialNotFoundError, PartialRootError
from .logging import get_logger

if typ.TYPE_CHECKING:
    from jinja2 import Environment

logger = get_logger("partials")


class PartialRegistry:
    """Mapping of partial names to raw template source.

    The registry is an explicit object handed to the renderer rather than
    process-wide state, so each build (and each test) owns its own copy.
    """

    def __init__(self) -> None:
        self._partials: dict[str, str] = {}

    def register(self, name: str, source: str) -> None:
        """Register ``source`` under ``name``, replacing any earlier entry."""
        if name in self._partials:
            logger.debug("overriding partial %s", name)
        self._partials[name] = source

    def get(self, name: str) -> str:
        """Return the source registered under ``name``.

        Raises
        ------
        PartialNotFoundError
            If no partial has been registered under ``name``.
        """
        try:
            return self._partials[name]
        except KeyError:
            raise PartialNotFoundError(name) from None

    def names(self) -> list[str]:
        """Return registered names in sorted order."""
        return sorted(self._partials)

    def as_dict(self) -> dict[str, str]:
        """Return a copy of the name to source mapping."""
        return dict(self._partials)

    def __contains__(self, name: object) -> bool:
        return name in self._partials

    def __len__(self) -> int:
        return len(self._partials)


class RegistryLoader(BaseLoader):
    """Jinja loader that serves templates from a :class:`PartialRegistry`."""

    def __init__(self, registry: PartialRegistry) -> None:
        self.registry = registry

    def get_source(
        self, environment: Environment, template: str
    ) -> tuple[str, str | None, cabc.Callable[[], bool] | None]:
        """Return the registered source for ``template``."""
        try:
            source = self.registry.get(template)
        except PartialNotFoundError:
            raise TemplateNotFound(template) from None

        def uptodate() -> bool:
            try:
                return self.registry.get(template) == source
            except PartialNotFoundError:
                return False

        return source, None, uptodate

    def list_templates(self) -> list[str]:
        """Return every registered partial name."""
        return self.registry.names()


def register_partials(
    registry: PartialRegistry,
    roots: str | Path | cabc.Sequence[str | Path],
    *,
    base_dir: Path | None = None,
    extension: str = DEFAULT_PARTIAL_EXTENSION,
) -> list[str]:
    """Register every partial found beneath ``roots``.

    Parameters
    ----------
    registry : PartialRegistry
        Registry receiving the partials.
    roots : str, Path, or sequence of either
        One root directory or several, scanned in the given order. A name
        found under a later root replaces the same name from an earlier one.
    base_dir : Path, optional
        Directory that relative roots resolve against; defaults to the
        current working directory.
    extension : str, optional
        File suffix identifying partials; defaults to ``".jinja"``.

    Returns
    -------
    list[str]
        Names registered by this call, in registration order.

    Raises
    ------
    PartialRootError
        If a root does not resolve to an existing directory.
    OSError
        If a partial file cannot be read.
    UnicodeDecodeError
        If a partial file is not valid UTF-8.
    """
    root_list = [roots] if isinstance(roots, str | Path) else list(roots)
    base = base_dir or Path.cwd()
    registered: list[str] = []
    for root in root_list:
        directory = Path(root)
        if not directory.is_absolute():
            directory = base / directory
        registered.extend(_register_directory(registry, directory, extension))
    return registered


def partial_name(path: Path, root: Path, extension: str) -> str:
    """Derive the registry name for ``path`` found beneath ``root``."""
    relative = path.relative_to(root).as_posix()
    return relative[: -len(extension)]


def _register_directory(
    registry: PartialRegistry, directory: Path, extension: str
) -> list[str]:
    if not directory.is_dir():
        raise PartialRootError(directory)
    names: list[str] = []
    for path in sorted(directory.rglob(f"*{extension}")):
        if not path.is_file():
            continue
        name = partial_name(path, directory, extension)
        registry.register(name, path.read_text(encoding="utf-8"))
        logger.debug("registered partial %s from %s", name, path)
        names.append(name)
    return names


__all__ = [
    "PartialRegistry",
    "RegistryLoader",
    "partial_name",
    "register_partials",
]
