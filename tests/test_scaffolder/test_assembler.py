"""Tests for the ProjectAssembler.

Covers:
- Template copy (package name, refusing non-empty destinations)
- next: env file, promotion, rewriting, manifest, cleanup
- mcp: runtime config, promotion, cleanup
- Strict and non-strict reporting of substitution misses
- Selection errors for unroutable combinations
"""

from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from create_onchain_agent.errors import SelectionError, SubstitutionError, TemplateNotFoundError
from create_onchain_agent.registry.models import Selection, Template
from create_onchain_agent.scaffolder.assembler import (
    AGENTKIT_SLOT,
    FRAMEWORK_SLOT,
    MCP_SOURCE_DIR,
    NEXT_AGENT_DIR,
    ProjectAssembler,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _next_selection(**overrides) -> Selection:
    values = {"project_name": "my-agent", "network": "base-sepolia", "framework": "Langchain"}
    values.update(overrides)
    return Selection(**values)


def _mcp_selection(**overrides) -> Selection:
    values = {
        "project_name": "my-server",
        "network": "base-sepolia",
        "framework": "Model Context Protocol",
    }
    values.update(overrides)
    return Selection(**values)


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Template copy
# ---------------------------------------------------------------------------


class TestCopyTemplate:
    async def test_sets_package_name(self, settings):
        assembler = ProjectAssembler(settings)
        root = await assembler.copy_template(_next_selection(project_name="My Agent"))

        assert root == settings.project_path("My Agent")
        manifest = json.loads(_read(root / "package.json"))
        assert manifest["name"] == "my-agent"
        assert (root / "app" / "page.tsx").is_file()

    async def test_refuses_non_empty_destination(self, settings):
        root = settings.project_path("my-agent")
        root.mkdir(parents=True)
        (root / "existing.txt").write_text("keep", encoding="utf-8")

        with pytest.raises(FileExistsError):
            await ProjectAssembler(settings).assemble(_next_selection())
        assert _read(root / "existing.txt") == "keep"

    async def test_empty_destination_allowed(self, settings):
        settings.project_path("my-agent").mkdir(parents=True)
        root = await ProjectAssembler(settings).assemble(_next_selection())
        assert (root / "package.json").is_file()

    async def test_missing_template(self, settings, templates_dir):
        shutil.rmtree(templates_dir / "next")

        with pytest.raises(TemplateNotFoundError):
            await ProjectAssembler(settings).assemble(_next_selection())


# ---------------------------------------------------------------------------
# next template
# ---------------------------------------------------------------------------


class TestNextAssembly:
    async def test_canonical_files(self, settings):
        root = await ProjectAssembler(settings).assemble(
            _next_selection(wallet_provider="Privy")
        )
        agent_dir = root / NEXT_AGENT_DIR

        assert _read(agent_dir / "prepare-agentkit.ts") == "// prepare-agentkit for EVM/Privy\n"
        assert _read(agent_dir / "route.ts") == "// langchain api route\n"
        assert "@langchain/langgraph" in _read(agent_dir / "create-agent.ts")
        assert not (agent_dir / AGENTKIT_SLOT).exists()
        assert not (agent_dir / FRAMEWORK_SLOT).exists()

    async def test_vercel_framework(self, settings):
        root = await ProjectAssembler(settings).assemble(
            _next_selection(framework="Vercel AI SDK", model_provider="Gemini")
        )
        agent_dir = root / NEXT_AGENT_DIR

        assert _read(agent_dir / "route.ts") == "// vercel-ai-sdk api route\n"
        create_agent = _read(agent_dir / "create-agent.ts")
        assert 'const model = google("gemini-pro");' in create_agent
        assert "GOOGLE_GENERATIVE_AI_API_KEY" in create_agent

    async def test_env_file(self, settings):
        root = await ProjectAssembler(settings).assemble(_next_selection(wallet_provider="Viem"))
        env = _read(root / ".env.local")

        assert env.startswith("# OpenAI Configuration\n")
        assert "\nPRIVATE_KEY=\n" in env
        assert "\nNETWORK_ID=base-sepolia\n" in env

    async def test_custom_chain(self, settings):
        selection = _next_selection(network=None, chain_id="42", rpc_url="https://rpc.example")
        root = await ProjectAssembler(settings).assemble(selection)
        agent_dir = root / NEXT_AGENT_DIR

        assert _read(agent_dir / "prepare-agentkit.ts") == "// prepare-agentkit for CUSTOM_EVM/Viem\n"
        env = _read(root / ".env.local")
        assert "\nNETWORK_ID=\n" in env
        assert "\nRPC_URL=https://rpc.example\n" in env
        assert "\nCHAIN_ID=42\n" in env

    async def test_solana(self, settings):
        root = await ProjectAssembler(settings).assemble(
            _next_selection(network="solana-devnet", wallet_provider="SolanaKeypair")
        )
        prepare = _read(root / NEXT_AGENT_DIR / "prepare-agentkit.ts")
        assert prepare == "// prepare-agentkit for SVM/SolanaKeypair\n"
        assert "\nSOLANA_PRIVATE_KEY=\n" in _read(root / ".env.local")

    async def test_manifest_dependencies(self, settings):
        root = await ProjectAssembler(settings).assemble(_next_selection(model_provider="Anthropic"))
        manifest = json.loads(_read(root / "package.json"))

        assert manifest["name"] == "my-agent"
        assert manifest["dependencies"]["@langchain/anthropic"] == "^1.3.10"
        assert manifest["dependencies"]["@ai-sdk/anthropic"] == "^3.0.15"
        assert manifest["dependencies"]["@coinbase/agentkit"] == "^0.10.0"


class TestNextReporting:
    async def test_missing_pattern_is_warning(self, settings, templates_dir):
        create_agent = templates_dir / "next" / "app" / "api" / "agent" / "framework" / "langchain" / "create-agent.ts"
        create_agent.write_text(
            _read(create_agent).replace("if (!process.env.OPENAI_API_KEY)", "if (false)"),
            encoding="utf-8",
        )

        assembler = ProjectAssembler(settings)
        root = await assembler.assemble(_next_selection(model_provider="Anthropic"))

        assert len(assembler.warnings) == 1
        assert "guard" in assembler.warnings[0]
        assert "ChatAnthropic" in _read(root / NEXT_AGENT_DIR / "create-agent.ts")

    async def test_unknown_framework_source_is_warning(self, settings, templates_dir):
        create_agent = templates_dir / "next" / "app" / "api" / "agent" / "framework" / "langchain" / "create-agent.ts"
        create_agent.write_text("export {};\n", encoding="utf-8")

        assembler = ProjectAssembler(settings)
        await assembler.assemble(_next_selection())

        assert assembler.warnings
        assert "framework import signature" in assembler.warnings[0]

    async def test_strict_raises(self, strict_settings, templates_dir):
        create_agent = templates_dir / "next" / "app" / "api" / "agent" / "framework" / "langchain" / "create-agent.ts"
        create_agent.write_text("export {};\n", encoding="utf-8")

        with pytest.raises(SubstitutionError) as excinfo:
            await ProjectAssembler(strict_settings).assemble(_next_selection())
        assert excinfo.value.path.name == "create-agent.ts"

    async def test_clean_run_has_no_warnings(self, settings):
        assembler = ProjectAssembler(settings)
        await assembler.assemble(_next_selection(model_provider="Gemini"))
        assert assembler.warnings == []


# ---------------------------------------------------------------------------
# mcp template
# ---------------------------------------------------------------------------


class TestMcpAssembly:
    async def test_runtime_config(self, settings):
        root = await ProjectAssembler(settings).assemble(
            _mcp_selection(wallet_provider="CDPEvmWallet", model_provider="Anthropic")
        )
        config = json.loads(_read(root / "claude_desktop_config.json"))
        server = config["mcpServers"]["agentkit"]

        assert server["args"][0] == f"{root}/build/index.js"
        assert server["env"]["NETWORK_ID"] == "base-sepolia"
        assert server["env"]["ANTHROPIC_API_KEY"] == ""
        assert server["env"]["ANTHROPIC_MODEL"] == "claude-3-5-sonnet-20241022"
        assert config["globalShortcut"] == "Ctrl+Space"

    async def test_privy_chain_id(self, settings):
        root = await ProjectAssembler(settings).assemble(_mcp_selection(wallet_provider="Privy"))
        env = json.loads(_read(root / "claude_desktop_config.json"))["mcpServers"]["agentkit"]["env"]

        assert env["CHAIN_ID"] == "84532"
        assert "NETWORK_ID" not in env

    async def test_promotion_and_cleanup(self, settings):
        root = await ProjectAssembler(settings).assemble(
            _mcp_selection(network="solana-devnet", wallet_provider="SolanaKeypair")
        )
        src_dir = root / MCP_SOURCE_DIR

        assert _read(src_dir / "getAgentKit.ts") == "// getAgentKit for SVM/SolanaKeypair\n"
        assert (src_dir / "index.ts").is_file()
        assert not (src_dir / AGENTKIT_SLOT).exists()
        assert not (root / ".env.local").exists()

    async def test_custom_chain(self, settings):
        root = await ProjectAssembler(settings).assemble(
            _mcp_selection(network=None, chain_id="42", rpc_url="https://rpc.example")
        )
        env = json.loads(_read(root / "claude_desktop_config.json"))["mcpServers"]["agentkit"]["env"]
        assert env["CHAIN_ID"] == "42"
        assert env["OPENAI_MODEL"] == "gpt-4"

    async def test_missing_placeholder_is_warning(self, settings, templates_dir):
        config_path = templates_dir / "mcp" / "src" / "agentkit" / "evm" / "smart" / "claude_desktop_config.json"
        config = json.loads(_read(config_path))
        config["mcpServers"]["agentkit"]["args"] = ["/fixed/build/index.js"]
        config_path.write_text(json.dumps(config), encoding="utf-8")

        assembler = ProjectAssembler(settings)
        root = await assembler.assemble(_mcp_selection())

        assert any("{absolutePath}" in warning for warning in assembler.warnings)
        written = json.loads(_read(root / "claude_desktop_config.json"))
        assert written["mcpServers"]["agentkit"]["args"] == ["/fixed/build/index.js"]


# ---------------------------------------------------------------------------
# Selection errors
# ---------------------------------------------------------------------------


class TestAssemblyErrors:
    async def test_fragment_template_rejected(self, settings):
        selection = Selection.model_construct(
            project_name="x",
            package_name="x",
            network=None,
            chain_id="42",
            rpc_url=None,
            wallet_provider=None,
            framework=None,
            template=Template.PREPARE_AGENTKIT,
            model_provider=None,
        )
        with pytest.raises(SelectionError):
            await ProjectAssembler(settings).assemble(selection)

    async def test_unroutable_combination(self, settings):
        selection = Selection.model_construct(
            project_name="x",
            package_name="x",
            network=None,
            chain_id="42",
            rpc_url=None,
            wallet_provider="Privy",
            framework="Langchain",
            template=Template.NEXT,
            model_provider="OpenAI",
        )
        with pytest.raises(SelectionError, match="invalid network & wallet provider"):
            await ProjectAssembler(settings).assemble(selection)

    async def test_unsupported_network(self, settings):
        selection = Selection.model_construct(
            project_name="x",
            package_name="x",
            network=None,
            chain_id=None,
            rpc_url=None,
            wallet_provider="Viem",
            framework="Langchain",
            template=Template.NEXT,
            model_provider="OpenAI",
        )
        with pytest.raises(SelectionError, match="Unsupported network"):
            await ProjectAssembler(settings).assemble(selection)
