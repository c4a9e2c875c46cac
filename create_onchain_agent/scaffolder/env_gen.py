"""``.env.local`` generation for the ``next`` template."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from create_onchain_agent.registry.constants import get_model_provider_profile
from create_onchain_agent.registry.models import AgentkitRouteConfiguration
from create_onchain_agent.utils import write_text

ENV_FILENAME = ".env.local"


def model_provider_env_lines(model_provider: Optional[str] = None) -> list[str]:
    """Return the model-provider block that opens the env file.

    Unset or unrecognised providers fall back to OpenAI.
    """
    profile = get_model_provider_profile(model_provider)
    return [
        f"# {profile.label} Configuration",
        f"# {profile.key_hint}",
        f"{profile.api_key_var}=",
        f"{profile.model_var}={profile.default_model}",
    ]


def render_env(
    route_config: AgentkitRouteConfiguration,
    network: Optional[str] = None,
    chain_id: Optional[str] = None,
    rpc_url: Optional[str] = None,
    model_provider: Optional[str] = None,
) -> str:
    """Render the ``.env.local`` content for a wallet route.

    Layout::

        <model provider block>

        # <top comments>

        # Required
        KEY=
        ...

        # Optional
        NETWORK_ID=<network>
        RPC_URL=<rpc url>      (only when given)
        CHAIN_ID=<chain id>    (only when given)
        KEY=
        ...

    Values of route variables are always empty; the user fills them in.
    """
    env = route_config.env
    network_id = getattr(network, "value", network) or ""

    lines: list[str] = []
    lines.extend(model_provider_env_lines(model_provider))

    lines.append("")
    lines.extend(f"# {comment}" for comment in env.top_comments)

    lines.append("")
    lines.append("# Required")
    lines.extend(f"{name}=" for name in env.required)

    lines.append("")
    lines.append("# Optional")
    lines.append(f"NETWORK_ID={network_id}")
    if rpc_url:
        lines.append(f"RPC_URL={rpc_url}")
    if chain_id:
        lines.append(f"CHAIN_ID={chain_id}")
    lines.extend(f"{name}=" for name in env.optional)

    return "\n".join(lines)


async def write_env_file(root: str | Path, content: str) -> Path:
    """Write *content* to ``<root>/.env.local``, replacing any existing file."""
    return await write_text(Path(root) / ENV_FILENAME, content)
