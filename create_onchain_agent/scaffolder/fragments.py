"""Standalone fragment generators.

Unlike :class:`~create_onchain_agent.scaffolder.assembler.ProjectAssembler`
these flows do not produce a project.  They drop one or a few files into an
existing directory:

- ``prepareAgentkit``: the wallet-preparation source for a network / wallet
  provider pair, written as ``prepareAgentkit.ts``;
- ``createAgent``: the agent-creation source for a framework plus the AI
  provider factory under ``ai/``.

The template is staged in a temporary directory which is always removed.
"""

from __future__ import annotations

import asyncio
import tempfile
from pathlib import Path
from typing import Optional

from create_onchain_agent.config import GeneratorSettings
from create_onchain_agent.errors import SelectionError
from create_onchain_agent.registry.constants import (
    CREATE_AGENT_DEFAULT_MODELS,
    CREATE_AGENT_FRAMEWORK_DIRS,
    PREPARE_AGENTKIT_ROUTES,
)
from create_onchain_agent.registry.models import Framework, ModelProvider, Template, coerce_enum
from create_onchain_agent.registry.resolver import require_network_family, resolve_route
from create_onchain_agent.utils import copy_tree
from .templates import TemplateRenderer

PREPARE_AGENTKIT_OUTPUT = "prepareAgentkit.ts"
CREATE_AGENT_OUTPUT = "createAgent.ts"
AI_PROVIDERS_DIR = Path("ai") / "providers"
AI_PROVIDER_FILES = ("base.ts", "factory.ts", "anthropic.ts", "gemini.ts", "openai.ts")


class FragmentGenerator:
    """Writes the ``prepareAgentkit`` and ``createAgent`` fragments."""

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.settings = settings or GeneratorSettings()
        self.renderer = renderer or TemplateRenderer()

    async def generate_prepare_agentkit(
        self,
        wallet_provider: object,
        network: Optional[str] = None,
        chain_id: Optional[str] = None,
        destination: str | Path | None = None,
    ) -> Path:
        """Write ``prepareAgentkit.ts`` for the wallet provider into *destination*.

        Raises:
            SelectionError: If the network is unsupported or the wallet
                provider is not routed for its family.
        """
        family = require_network_family(network, chain_id)
        route = resolve_route(PREPARE_AGENTKIT_ROUTES, family, wallet_provider)

        dest_dir = Path(destination) if destination is not None else self.settings.output_dir
        target = dest_dir / PREPARE_AGENTKIT_OUTPUT

        with tempfile.TemporaryDirectory(prefix="prepareAgentkit-") as staging:
            stage = await self._stage(Template.PREPARE_AGENTKIT, Path(staging))
            await copy_tree(stage / "agentkit" / route.route, target)
        return target

    async def generate_create_agent(
        self,
        framework: object,
        model_provider: object = ModelProvider.OPENAI,
        destination: str | Path | None = None,
    ) -> list[Path]:
        """Write ``createAgent.ts`` and the ``ai/`` provider files into *destination*.

        Returns:
            Every file written, ``createAgent.ts`` first.
        """
        framework_member = coerce_enum(Framework, framework)
        framework_dir = CREATE_AGENT_FRAMEWORK_DIRS.get(framework_member) if framework_member else None
        if framework_dir is None:
            raise SelectionError("Selected invalid framework for this template")
        provider = coerce_enum(ModelProvider, model_provider)
        if provider is None:
            raise SelectionError(f"Unknown model provider: {model_provider}")

        dest_dir = Path(destination) if destination is not None else self.settings.output_dir
        providers_dir = dest_dir / AI_PROVIDERS_DIR
        written: list[Path] = [dest_dir / CREATE_AGENT_OUTPUT]

        with tempfile.TemporaryDirectory(prefix="createAgent-") as staging:
            stage = await self._stage(Template.CREATE_AGENT, Path(staging))
            await copy_tree(stage / "framework" / framework_dir / CREATE_AGENT_OUTPUT, written[0])

            copies = [
                copy_tree(stage / AI_PROVIDERS_DIR / name, providers_dir / name)
                for name in AI_PROVIDER_FILES
            ]
            await asyncio.gather(*copies)
            written.extend(providers_dir / name for name in AI_PROVIDER_FILES)

        context = {
            "providers": [member.value for member in ModelProvider],
            "provider": provider.value,
            "default_models": {
                member.value: model for member, model in CREATE_AGENT_DEFAULT_MODELS.items()
            },
        }
        written.append(
            await self.renderer.render_to_file(
                "ai/providers/index.ts.j2", providers_dir / "index.ts", context
            )
        )
        written.append(
            await self.renderer.render_to_file(
                "ai/config.ts.j2", dest_dir / "ai" / "config.ts", context
            )
        )
        return written

    async def _stage(self, template: Template, staging: Path) -> Path:
        """Copy *template* into the staging directory and return its root there."""
        source = self.settings.template_path(template.value)
        stage = staging / template.value
        await copy_tree(source, stage)
        return stage
