"""Shared pytest fixtures for the create-onchain-agent test suite.

Provides reusable fixtures for:
- Miniature template trees (next, mcp, prepareAgentkit, createAgent) built
  from the registry route tables
- Agent sources wired to OpenAI for the rewriter
- MCP runtime config documents
- Generator settings pointing at temporary directories
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from create_onchain_agent.config import GeneratorSettings
from create_onchain_agent.registry.constants import (
    AGENTKIT_ROUTES,
    CREATE_AGENT_FRAMEWORK_DIRS,
    MCP_ROUTES,
    NEXT_TEMPLATE_ROUTES,
    PREPARE_AGENTKIT_ROUTES,
)
from create_onchain_agent.registry.models import NetworkFamily, WalletProvider


# ---------------------------------------------------------------------------
# Agent sources
# ---------------------------------------------------------------------------

LANGCHAIN_CREATE_AGENT = """\
import { AgentKit } from "@coinbase/agentkit";
import { getLangChainTools } from "@coinbase/agentkit-langchain";
import { MemorySaver } from "@langchain/langgraph";
import { createReactAgent } from "@langchain/langgraph/prebuilt";
import { ChatOpenAI } from "@langchain/openai";
import { prepareAgentkitAndWalletProvider } from "./prepare-agentkit";

let agent: ReturnType<typeof createReactAgent>;

export async function createAgent(): Promise<ReturnType<typeof createReactAgent>> {
  if (agent) {
    return agent;
  }

  if (!process.env.OPENAI_API_KEY) {
    throw new Error("I need an OPENAI_API_KEY in your .env file to power my intelligence.");
  }

  const llm = new ChatOpenAI({ model: "gpt-4o-mini" });

  const { agentkit } = await prepareAgentkitAndWalletProvider();
  const tools = await getLangChainTools(agentkit);
  const memory = new MemorySaver();

  agent = createReactAgent({ llm, tools, checkpointSaver: memory });
  return agent;
}
"""

VERCEL_CREATE_AGENT = """\
import { openai } from "@ai-sdk/openai";
import { getVercelAITools } from "@coinbase/agentkit-vercel-ai-sdk";
import { prepareAgentkitAndWalletProvider } from "./prepare-agentkit";

export async function createAgent() {
  if (!process.env.OPENAI_API_KEY) {
    throw new Error("I need an OPENAI_API_KEY in your .env file to power my intelligence.");
  }

  const model = openai("gpt-4o-mini");

  const { agentkit } = await prepareAgentkitAndWalletProvider();
  const tools = getVercelAITools(agentkit);
  return { model, tools, maxSteps: 10 };
}
"""


@pytest.fixture
def langchain_source() -> str:
    """A LangChain ``create-agent.ts`` wired to OpenAI."""
    return LANGCHAIN_CREATE_AGENT


@pytest.fixture
def vercel_source() -> str:
    """A Vercel AI SDK ``create-agent.ts`` wired to OpenAI."""
    return VERCEL_CREATE_AGENT


# ---------------------------------------------------------------------------
# MCP runtime configs
# ---------------------------------------------------------------------------


def make_mcp_config(env: dict[str, str] | None = None, arg: str = "{absolutePath}/build/index.js") -> dict[str, Any]:
    server: dict[str, Any] = {"command": "node", "args": [arg]}
    if env is not None:
        server["env"] = dict(env)
    return {"mcpServers": {"agentkit": server}, "globalShortcut": "Ctrl+Space"}


def _mcp_env(family: NetworkFamily, provider: WalletProvider) -> dict[str, str]:
    if provider is WalletProvider.PRIVY:
        env = {"PRIVY_APP_ID": "", "PRIVY_APP_SECRET": ""}
        if family is NetworkFamily.EVM:
            env["CHAIN_ID"] = ""
        else:
            env["NETWORK_ID"] = ""
        return env
    if family is NetworkFamily.CUSTOM_EVM:
        return {"PRIVATE_KEY": "", "CHAIN_ID": "", "RPC_URL": ""}
    if provider in (WalletProvider.VIEM, WalletProvider.SOLANA_KEYPAIR):
        return {"PRIVATE_KEY": "", "NETWORK_ID": ""}
    return {"CDP_API_KEY_ID": "", "CDP_API_KEY_SECRET": "", "NETWORK_ID": ""}


@pytest.fixture
def mcp_config() -> dict[str, Any]:
    """A CDP-style runtime config with ``NETWORK_ID`` in its env."""
    return make_mcp_config({"CDP_API_KEY_ID": "", "CDP_API_KEY_SECRET": "", "NETWORK_ID": ""})


@pytest.fixture
def privy_mcp_config() -> dict[str, Any]:
    """A Privy EVM runtime config that addresses the chain by ``CHAIN_ID``."""
    return make_mcp_config({"PRIVY_APP_ID": "", "PRIVY_APP_SECRET": "", "CHAIN_ID": ""})


# ---------------------------------------------------------------------------
# Template trees
# ---------------------------------------------------------------------------


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _manifest(name: str) -> str:
    return json.dumps(
        {
            "name": name,
            "version": "0.1.0",
            "private": True,
            "dependencies": {"@coinbase/agentkit": "^0.10.0"},
        },
        indent=2,
    )


def build_next_template(root: Path) -> Path:
    agent_dir = root / "app" / "api" / "agent"
    _write(root / "package.json", _manifest("agentkit-next-template"))
    _write(root / "app" / "page.tsx", "export default function Home() { return null; }\n")

    for family, provider in AGENTKIT_ROUTES.keys():
        route = AGENTKIT_ROUTES.get(family, provider)
        _write(
            agent_dir / "agentkit" / route.prepare_agentkit_route,
            f"// prepare-agentkit for {family.value}/{provider.value}\n",
        )

    sources = {"langchain": LANGCHAIN_CREATE_AGENT, "vercel-ai-sdk": VERCEL_CREATE_AGENT}
    for framework_route in NEXT_TEMPLATE_ROUTES.values():
        framework_dir = framework_route.create_agent_route.split("/")[0]
        _write(agent_dir / "framework" / framework_route.create_agent_route, sources[framework_dir])
        _write(
            agent_dir / "framework" / framework_route.api_route,
            f"// {framework_dir} api route\n",
        )
    return root


def build_mcp_template(root: Path) -> Path:
    src_dir = root / "src"
    _write(root / "package.json", _manifest("agentkit-mcp-template"))
    _write(src_dir / "index.ts", 'import { getAgentKit } from "./getAgentKit";\n')

    for family, provider in MCP_ROUTES.keys():
        route = MCP_ROUTES.get(family, provider)
        _write(
            src_dir / "agentkit" / route.get_agentkit_route,
            f"// getAgentKit for {family.value}/{provider.value}\n",
        )
        _write(
            src_dir / "agentkit" / route.config_route,
            json.dumps(make_mcp_config(_mcp_env(family, provider)), indent=2),
        )
    return root


def build_prepare_agentkit_template(root: Path) -> Path:
    for family, provider in PREPARE_AGENTKIT_ROUTES.keys():
        route = PREPARE_AGENTKIT_ROUTES.get(family, provider)
        _write(root / "agentkit" / route.route, f"// prepareAgentkit for {family.value}/{provider.value}\n")
    return root


def build_create_agent_template(root: Path) -> Path:
    sources = {"langchain": LANGCHAIN_CREATE_AGENT, "vercelAISDK": VERCEL_CREATE_AGENT}
    for directory in CREATE_AGENT_FRAMEWORK_DIRS.values():
        _write(root / "framework" / directory / "createAgent.ts", sources[directory])
    for name in ("base", "factory", "anthropic", "gemini", "openai"):
        _write(root / "ai" / "providers" / f"{name}.ts", f"// {name} provider\n")
    return root


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """A templates root holding all four template trees."""
    root = tmp_path / "templates"
    build_next_template(root / "next")
    build_mcp_template(root / "mcp")
    build_prepare_agentkit_template(root / "prepareAgentkit")
    build_create_agent_template(root / "createAgent")
    return root


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty directory generated projects are written into."""
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def settings(templates_dir: Path, output_dir: Path) -> GeneratorSettings:
    """Non-strict settings pointing at the temporary template and output dirs."""
    return GeneratorSettings(templates_dir=templates_dir, output_dir=output_dir)


@pytest.fixture
def strict_settings(settings: GeneratorSettings) -> GeneratorSettings:
    return settings.model_copy(update={"strict": True})


@pytest.fixture
def make_config():
    """Factory for runtime config documents: ``make_config(env=None, arg=...)``."""
    return make_mcp_config
