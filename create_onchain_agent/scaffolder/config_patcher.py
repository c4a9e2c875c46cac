"""Patching of ``claude_desktop_config.json`` for the ``mcp`` template.

The template document has the shape::

    {"mcpServers": {"agentkit": {"args": ["{absolutePath}/build/index.js"],
                                 "env": {"NETWORK_ID": "", ...}}}}

Only ``args[0]`` and keys of ``env`` are touched; every other field survives
the parse / serialise round trip.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Optional

from create_onchain_agent.registry.constants import MODEL_PROVIDERS, NETWORK_ID_TO_CHAIN_ID
from create_onchain_agent.registry.models import ModelProvider, coerce_enum
from create_onchain_agent.utils import dump_json, write_text

CONFIG_FILENAME = "claude_desktop_config.json"
PATH_PLACEHOLDER = "{absolutePath}"
SERVER_NAME = "agentkit"


def _server(config: dict[str, Any]) -> dict[str, Any]:
    return config["mcpServers"][SERVER_NAME]


def has_path_placeholder(config: dict[str, Any]) -> bool:
    """Return ``True`` if the first launch argument contains the path placeholder."""
    args = _server(config).get("args") or []
    return bool(args) and PATH_PLACEHOLDER in str(args[0])


def patch_runtime_config(
    template: dict[str, Any] | str,
    destination: str | Path,
    model_provider: Optional[str] = None,
    network: Optional[str] = None,
    chain_id: Optional[str] = None,
) -> dict[str, Any]:
    """Return a patched copy of the runtime config *template*.

    Args:
        template: Parsed template document, or its JSON text.
        destination: Project root; its absolute path replaces the
            ``{absolutePath}`` placeholder in the first launch argument.
        model_provider: Adds ``<PROVIDER>_API_KEY`` (empty) and
            ``<PROVIDER>_MODEL`` (default model) to the server env.
        network: Written to ``NETWORK_ID`` and, translated to its chain id,
            to ``CHAIN_ID`` -- each only if the key already exists.
        chain_id: Unconditionally written to ``CHAIN_ID``; takes precedence
            over the network translation.

    The placeholder replacement is a plain text replace: when the placeholder
    is absent nothing happens.  Use :func:`has_path_placeholder` beforehand to
    detect that case.
    """
    if isinstance(template, str):
        config = json.loads(template)
    else:
        config = copy.deepcopy(template)

    server = _server(config)
    args = server.get("args") or []
    if args:
        args[0] = str(args[0]).replace(PATH_PLACEHOLDER, str(Path(destination).resolve()))

    env = server.get("env")
    if env is None and (model_provider or chain_id):
        env = server["env"] = {}

    if model_provider:
        provider_name = getattr(model_provider, "value", model_provider)
        member = coerce_enum(ModelProvider, model_provider)
        env[f"{provider_name.upper()}_API_KEY"] = ""
        env[f"{provider_name.upper()}_MODEL"] = (
            MODEL_PROVIDERS[member].default_model if member is not None else ""
        )

    if network and env is not None:
        network_id = getattr(network, "value", network)
        # Privy templates address the chain by CHAIN_ID, the others by NETWORK_ID.
        if "NETWORK_ID" in env:
            env["NETWORK_ID"] = network_id
        if "CHAIN_ID" in env and network_id in NETWORK_ID_TO_CHAIN_ID:
            env["CHAIN_ID"] = NETWORK_ID_TO_CHAIN_ID[network_id]

    if chain_id:
        env["CHAIN_ID"] = str(chain_id)

    return config


def dump_runtime_config(config: dict[str, Any]) -> str:
    """Serialise a runtime config with a two-space indent."""
    return dump_json(config)


async def write_runtime_config(root: str | Path, config: dict[str, Any]) -> Path:
    """Write *config* to ``<root>/claude_desktop_config.json``."""
    return await write_text(Path(root) / CONFIG_FILENAME, dump_runtime_config(config))
