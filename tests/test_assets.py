"""Tests for asset revisioning."""

from __future__ import annotations

import hashlib
import json
import typing as typ

import pytest

from blog_pages.assets import revision_assets, revisioned_name

if typ.TYPE_CHECKING:
    from pathlib import Path


def _digest(content: bytes) -> str:
    return hashlib.md5(content, usedforsecurity=False).hexdigest()[:8]


def test_revisioned_name_inserts_hash_before_suffix() -> None:
    """The hash goes between the stem and the extension."""
    content = b"body{color:red}"

    assert revisioned_name("theme.css", content) == f"theme-{_digest(content)}.css"
    assert revisioned_name("LICENSE", content) == f"LICENSE-{_digest(content)}"


def test_revision_assets_copies_and_merges_manifest(tmp_path: Path) -> None:
    """Revisioned copies are written and merged into the existing manifest."""
    (tmp_path / "theme.css").write_bytes(b"body{}")
    (tmp_path / "theme.js").write_bytes(b"void 0;")
    (tmp_path / "rev-manifest.json").write_text(
        json.dumps({"logo.svg": "logo-11111111.svg"}), encoding="utf-8"
    )

    revised = revision_assets(tmp_path, ["theme.css", "theme.js"])

    css_name = f"theme-{_digest(b'body{}')}.css"
    assert revised == {
        "theme.css": css_name,
        "theme.js": f"theme-{_digest(b'void 0;')}.js",
    }
    assert (tmp_path / css_name).read_bytes() == b"body{}"
    manifest = json.loads((tmp_path / "rev-manifest.json").read_text(encoding="utf-8"))
    assert manifest["logo.svg"] == "logo-11111111.svg"
    assert manifest["theme.css"] == css_name


def test_revision_assets_requires_existing_files(tmp_path: Path) -> None:
    """Missing assets fail loudly."""
    with pytest.raises(FileNotFoundError):
        revision_assets(tmp_path, ["missing.css"])
