"""Main assembly orchestrator.

Takes a validated ``Selection`` and turns a copy of the matching template
tree into a ready-to-install project: generated configuration is written,
the selected variant files are promoted to their canonical paths, the agent
source is rewritten for the model provider, and the unused variants are
removed.

Assembly is not transactional.  A failure part-way through leaves whatever
was already written on disk; the caller decides how to report it.
"""

from __future__ import annotations

from pathlib import Path

from create_onchain_agent.config import GeneratorSettings
from create_onchain_agent.errors import SelectionError, SubstitutionError
from create_onchain_agent.registry.constants import AGENTKIT_ROUTES, MCP_ROUTES
from create_onchain_agent.registry.models import Selection, Template
from create_onchain_agent.registry.resolver import (
    require_network_family,
    resolve_framework_route,
    resolve_route,
)
from create_onchain_agent.utils import copy_tree, is_empty_dir, load_json, move_file, remove_tree
from .config_patcher import (
    has_path_placeholder,
    patch_runtime_config,
    write_runtime_config,
)
from .env_gen import render_env, write_env_file
from .manifest import MANIFEST_FILENAME, set_package_name, update_package_json
from .rewriter import rewrite_file


# ---------------------------------------------------------------------------
# Template layout (relative to the project root)
# ---------------------------------------------------------------------------

NEXT_AGENT_DIR = Path("app") / "api" / "agent"
MCP_SOURCE_DIR = Path("src")
AGENTKIT_SLOT = "agentkit"
FRAMEWORK_SLOT = "framework"

PREPARE_AGENTKIT_FILE = "prepare-agentkit.ts"
CREATE_AGENT_FILE = "create-agent.ts"
API_ROUTE_FILE = "route.ts"
GET_AGENTKIT_FILE = "getAgentKit.ts"


class ProjectAssembler:
    """Assembles a project directory from a template and a ``Selection``.

    Warnings about substitutions that matched nothing are collected in
    :attr:`warnings`; with ``settings.strict`` they raise
    :class:`~create_onchain_agent.errors.SubstitutionError` instead.
    """

    def __init__(self, settings: GeneratorSettings | None = None) -> None:
        self.settings = settings or GeneratorSettings()
        self.warnings: list[str] = []

    # -- Public API --------------------------------------------------------

    async def assemble(self, selection: Selection) -> Path:
        """Generate the project described by *selection*.

        Returns:
            Absolute path of the generated project root.
        """
        self.warnings = []

        # 1. Copy the template tree
        root = await self.copy_template(selection)

        # 2-8. Template specific resolution, generation and promotion
        if selection.template is Template.NEXT:
            await self.handle_next_selection(root, selection)
        elif selection.template is Template.MCP:
            await self.handle_mcp_selection(root, selection)
        else:
            raise SelectionError(
                f"Template '{selection.template.value}' cannot be assembled as a project"
            )
        return root

    async def copy_template(self, selection: Selection) -> Path:
        """Copy the selected template to ``<output_dir>/<project_name>``.

        Refuses to write into a non-empty existing directory.  The manifest
        ``name`` is set to the selection's package name.
        """
        source = self.settings.template_path(selection.template.value)
        root = self.settings.project_path(selection.project_name)
        if not is_empty_dir(root):
            raise FileExistsError(f"{root} already exists and is not empty")

        await copy_tree(source, root)

        manifest = root / MANIFEST_FILENAME
        if manifest.is_file():
            await set_package_name(manifest, selection.package_name)
        return root

    # -- next template -----------------------------------------------------

    async def handle_next_selection(self, root: Path, selection: Selection) -> None:
        """Resolve, generate and promote files for the full-app template."""
        agent_dir = root / NEXT_AGENT_DIR

        family = require_network_family(selection.network, selection.chain_id)
        agentkit_route = resolve_route(AGENTKIT_ROUTES, family, selection.wallet_provider)
        framework_route = resolve_framework_route(selection.framework)

        env_text = render_env(
            agentkit_route,
            network=selection.network,
            chain_id=selection.chain_id,
            rpc_url=selection.rpc_url,
            model_provider=selection.model_provider,
        )
        await write_env_file(root, env_text)

        await self._promote(
            agent_dir / AGENTKIT_SLOT / agentkit_route.prepare_agentkit_route,
            agent_dir / PREPARE_AGENTKIT_FILE,
        )
        await self._promote(
            agent_dir / FRAMEWORK_SLOT / framework_route.create_agent_route,
            agent_dir / CREATE_AGENT_FILE,
        )
        await self._promote(
            agent_dir / FRAMEWORK_SLOT / framework_route.api_route,
            agent_dir / API_ROUTE_FILE,
        )

        create_agent = agent_dir / CREATE_AGENT_FILE
        result = await rewrite_file(create_agent, selection.model_provider)
        if result.framework is None:
            self._report(create_agent, ["framework import signature"])
        elif result.missed:
            self._report(create_agent, result.missed)

        await update_package_json(root / MANIFEST_FILENAME, selection.model_provider)

        await remove_tree(agent_dir / AGENTKIT_SLOT)
        await remove_tree(agent_dir / FRAMEWORK_SLOT)

    # -- mcp template ------------------------------------------------------

    async def handle_mcp_selection(self, root: Path, selection: Selection) -> None:
        """Resolve, generate and promote files for the tool-server template."""
        src_dir = root / MCP_SOURCE_DIR

        family = require_network_family(selection.network, selection.chain_id)
        mcp_route = resolve_route(MCP_ROUTES, family, selection.wallet_provider)

        config_template = src_dir / AGENTKIT_SLOT / mcp_route.config_route
        template_config = load_json(config_template)
        if not has_path_placeholder(template_config):
            self._report(config_template, ["{absolutePath} placeholder"])
        config = patch_runtime_config(
            template_config,
            root,
            model_provider=selection.model_provider,
            network=selection.network,
            chain_id=selection.chain_id,
        )
        await write_runtime_config(root, config)

        await self._promote(
            src_dir / AGENTKIT_SLOT / mcp_route.get_agentkit_route,
            src_dir / GET_AGENTKIT_FILE,
        )

        await remove_tree(src_dir / AGENTKIT_SLOT)

    # -- Helpers -----------------------------------------------------------

    async def _promote(self, variant: Path, canonical: Path) -> Path:
        """Move the selected *variant* file to its *canonical* path."""
        return await move_file(variant, canonical)

    def _report(self, path: Path, missed: list[str]) -> None:
        if self.settings.strict:
            raise SubstitutionError(path, missed)
        self.warnings.append(f"{path}: no match for {', '.join(missed)}")

