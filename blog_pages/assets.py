"""Content-hash built assets for cache busting.

Compiled stylesheets and scripts are copied to ``<stem>-<hash><suffix>`` and
the mapping from logical to revisioned name is merged into
``rev-manifest.json`` alongside them.
"""

from __future__ import annotations

import hashlib
import json
import shutil
import typing as typ

from ._constants import REV_MANIFEST_NAME
from .logging import get_logger
from .metadata import read_asset_manifest

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

logger = get_logger("assets")

HASH_LENGTH = 8


def revisioned_name(name: str, content: bytes) -> str:
    """Return ``name`` with a short content hash inserted before its suffix.

    Examples
    --------
    >>> revisioned_name("theme.css", b"body{}")
    'theme-aa676972.css'
    """
    digest = hashlib.md5(content, usedforsecurity=False).hexdigest()[:HASH_LENGTH]
    stem, dot, suffix = name.rpartition(".")
    if not dot:
        return f"{name}-{digest}"
    return f"{stem}-{digest}.{suffix}"


def revision_assets(assets_dir: Path, names: cabc.Iterable[str]) -> dict[str, str]:
    """Copy each named asset to its revisioned name and update the manifest.

    Parameters
    ----------
    assets_dir : Path
        Directory holding the built assets and the manifest.
    names : Iterable[str]
        Asset file names relative to ``assets_dir``.

    Returns
    -------
    dict[str, str]
        Entries revisioned by this call.

    Raises
    ------
    FileNotFoundError
        If a named asset does not exist.
    """
    manifest_path = assets_dir / REV_MANIFEST_NAME
    manifest = read_asset_manifest(manifest_path) if manifest_path.exists() else {}

    revised: dict[str, str] = {}
    for name in names:
        source = assets_dir / name
        if not source.is_file():
            msg = f"Asset '{source}' not found."
            raise FileNotFoundError(msg)
        target_name = revisioned_name(source.name, source.read_bytes())
        target = source.with_name(target_name)
        shutil.copyfile(source, target)
        key = source.relative_to(assets_dir).as_posix()
        revised[key] = target.relative_to(assets_dir).as_posix()
        logger.debug("revisioned %s -> %s", key, revised[key])

    manifest.update(revised)
    manifest_path.write_text(
        json.dumps(manifest, indent=2, sort_keys=True) + "\n", encoding="utf-8"
    )
    return revised


__all__ = ["revision_assets", "revisioned_name"]
