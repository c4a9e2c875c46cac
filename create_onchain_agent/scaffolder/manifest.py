"""``package.json`` mutation."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Optional

from create_onchain_agent.registry.constants import get_model_provider_profile
from create_onchain_agent.utils import load_json, save_json

MANIFEST_FILENAME = "package.json"


def apply_model_provider_dependencies(
    manifest: dict[str, Any], model_provider: Optional[str] = None
) -> dict[str, Any]:
    """Return a copy of *manifest* with the provider's dependencies added.

    Both the LangChain and the Vercel AI SDK package for the provider are
    added (or overwritten) under ``dependencies``; nothing else changes.
    Unrecognised providers fall back to OpenAI.
    """
    updated = copy.deepcopy(manifest)
    dependencies = updated.get("dependencies")
    if not isinstance(dependencies, dict):
        dependencies = updated["dependencies"] = {}

    for name, version in get_model_provider_profile(model_provider).dependencies:
        dependencies[name] = version
    return updated


async def update_package_json(path: str | Path, model_provider: Optional[str] = None) -> Path:
    """Add the model-provider dependencies to the manifest at *path*."""
    manifest_path = Path(path)
    manifest = apply_model_provider_dependencies(load_json(manifest_path), model_provider)
    await save_json(manifest, manifest_path)
    return manifest_path


async def set_package_name(path: str | Path, package_name: str) -> Path:
    """Set the ``name`` field of the manifest at *path*."""
    manifest_path = Path(path)
    manifest = load_json(manifest_path)
    manifest["name"] = package_name
    await save_json(manifest, manifest_path)
    return manifest_path
