"""``package.json`` patching after ``npm init``."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..utils import load_json, save_json

MANIFEST_FILENAME = "package.json"


async def patch_manifest_scripts(root: Path, scripts: dict[str, str]) -> dict[str, Any]:
    """Replace the manifest's ``scripts`` map with exactly *scripts*.

    Whatever scripts the initializer wrote (e.g. npm's placeholder ``test``)
    are discarded; every other key keeps its value and position.

    Returns:
        The manifest as written.

    Raises:
        FileNotFoundError: If the initializer did not produce a manifest.
    """
    path = root / MANIFEST_FILENAME
    manifest = load_json(path)
    manifest["scripts"] = dict(scripts)
    await save_json(manifest, path)
    return manifest
