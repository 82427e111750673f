"""Behaviour tests for partial registration using pytest-bdd.

These scenarios register partial trees from disk and render a layout that
includes them, covering nested names, directory overrides, and missing roots.

Usage
-----
Run ``pytest tests/bdd/test_partial_registration.py -v``. Every file is
written under ``tmp_path``, so no fixtures beyond pytest's own are needed.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, scenarios, then, when

from blog_pages.config import SiteMetadata
from blog_pages.errors import PartialRootError
from blog_pages.pages import page_from_mapping
from blog_pages.partials import PartialRegistry, register_partials
from blog_pages.renderer import PageRenderer

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "partial_registration.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]

PARTIALS = {
    "header.jinja": "<header>{{ site.title }}</header>",
    "post/meta.jinja": "<p>{{ this.title }}</p>",
    "injections/mathjax.v2.jinja": "<script></script>",
    "notes.txt": "ignored",
}


def _write(root: Path, files: dict[str, str]) -> None:
    for relative, text in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {"roots": []}


@given("a partials directory with nested partials")
def given_nested_partials(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Write a partials tree containing nested and dotted names."""
    root = tmp_path / "partials"
    _write(root, PARTIALS)
    scenario_state["roots"].append(root)


@given("an override directory redefining the header partial")
def given_override(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Write a second root whose ``header`` replaces the first one."""
    root = tmp_path / "overrides"
    _write(root, {"header.jinja": "<header>override</header>"})
    scenario_state["roots"].append(root)


@given("a partials directory that does not exist")
def given_missing_root(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Point registration at a directory that was never created."""
    scenario_state["roots"].append(tmp_path / "absent")


@when("I register the partials")
@when("I register both partial directories")
def when_register(scenario_state: ScenarioState) -> None:
    """Register every configured root into a fresh registry."""
    registry = PartialRegistry()
    scenario_state["registry"] = registry
    try:
        scenario_state["names"] = register_partials(registry, scenario_state["roots"])
    except PartialRootError as exc:
        scenario_state["error"] = exc


@then("the registry holds the partials by relative path without extension")
def then_names(scenario_state: ScenarioState) -> None:
    """Names mirror the file layout below the root."""
    registry = typ.cast("PartialRegistry", scenario_state["registry"])
    assert registry.names() == ["header", "injections/mathjax.v2", "post/meta"]
    assert registry.get("post/meta") == "<p>{{ this.title }}</p>"


@then("a layout can include a nested partial by name")
def then_layout_includes(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """A layout resolves ``{% include %}`` through the registry."""
    layouts = tmp_path / "layouts"
    _write(layouts, {"post.jinja": '{% include "header" %}{% include "post/meta" %}'})
    renderer = PageRenderer(
        typ.cast("PartialRegistry", scenario_state["registry"]),
        SiteMetadata(title="Blog", url="https://example.com/"),
        layouts_dir=layouts,
    )
    page = page_from_mapping(
        "hello/index.html", {"title": "Hi", "collection": ["posts"]}
    )

    assert renderer.render(page) == "<header>Blog</header><p>Hi</p>\n"


@then("the header partial comes from the override directory")
def then_override_wins(scenario_state: ScenarioState) -> None:
    """The last root to define a name wins."""
    registry = typ.cast("PartialRegistry", scenario_state["registry"])
    assert registry.get("header") == "<header>override</header>"
    assert "post/meta" in registry


@then("registration fails naming the missing directory")
def then_missing_root(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """The error carries the directory that could not be scanned."""
    error = typ.cast("PartialRootError", scenario_state["error"])
    assert error.root == tmp_path / "absent"
    assert "absent" in str(error)
