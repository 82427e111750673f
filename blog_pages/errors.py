"""Exception types raised by the blog_pages build steps.

Configuration problems derive from :class:`SiteConfigError` so callers can
treat every bad-setup failure alike, while content-model violations and
registry misses carry the offending page path, field, or partial name.
"""

from __future__ import annotations


class SiteConfigError(ValueError):
    """Raised when the build configuration or site metadata is invalid."""


class PartialRootError(SiteConfigError):
    """Raised when a configured partial root is not an existing directory."""

    def __init__(self, root: object) -> None:
        self.root = root
        super().__init__(f"Partial directory '{root}' does not exist.")


class PageContextError(KeyError):
    """Raised when a page lacks a field that a helper requires.

    Attributes
    ----------
    path : str
        Output path of the offending page, or ``"<unknown>"`` when the page
        itself could not be identified.
    field : str
        Name of the missing field.
    """

    def __init__(self, path: str | None, field: str) -> None:
        self.path = path or "<unknown>"
        self.field = field
        super().__init__(field)

    def __str__(self) -> str:
        return f"Page '{self.path}' is missing required field '{self.field}'."


class PartialNotFoundError(LookupError):
    """Raised when a named partial is absent from the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Partial '{name}' is not registered.")


__all__ = [
    "PageContextError",
    "PartialNotFoundError",
    "PartialRootError",
    "SiteConfigError",
]
