"""Tests for the MCP runtime config patcher."""

from __future__ import annotations

import copy
import json

import pytest

from create_onchain_agent.registry.models import ModelProvider, Network
from create_onchain_agent.scaffolder.config_patcher import (
    CONFIG_FILENAME,
    has_path_placeholder,
    patch_runtime_config,
    write_runtime_config,
)

pytestmark = pytest.mark.unit


class TestPlaceholder:
    def test_detects_placeholder(self, mcp_config):
        assert has_path_placeholder(mcp_config)

    def test_missing_placeholder(self, make_config):
        assert not has_path_placeholder(make_config(arg="/opt/agent/build/index.js"))

    def test_no_args(self, make_config):
        config = make_config()
        config["mcpServers"]["agentkit"]["args"] = []
        assert not has_path_placeholder(config)


class TestPatchRuntimeConfig:
    def test_only_placeholder_changes(self, mcp_config, tmp_path):
        original = copy.deepcopy(mcp_config)
        patched = patch_runtime_config(mcp_config, tmp_path)

        expected = copy.deepcopy(original)
        expected["mcpServers"]["agentkit"]["args"][0] = f"{tmp_path.resolve()}/build/index.js"
        assert patched == expected
        assert mcp_config == original

    def test_idempotent_without_env(self, make_config, tmp_path):
        template = make_config()
        patched = patch_runtime_config(template, tmp_path)
        assert "env" not in patched["mcpServers"]["agentkit"]
        assert patched["globalShortcut"] == "Ctrl+Space"

    def test_accepts_json_text(self, mcp_config, tmp_path):
        patched = patch_runtime_config(json.dumps(mcp_config), tmp_path, network="base-mainnet")
        assert patched["mcpServers"]["agentkit"]["env"]["NETWORK_ID"] == "base-mainnet"

    def test_model_provider_keys(self, mcp_config, tmp_path):
        patched = patch_runtime_config(mcp_config, tmp_path, model_provider=ModelProvider.ANTHROPIC)
        env = patched["mcpServers"]["agentkit"]["env"]
        assert env["ANTHROPIC_API_KEY"] == ""
        assert env["ANTHROPIC_MODEL"] == "claude-3-5-sonnet-20241022"

    def test_model_provider_creates_env(self, make_config, tmp_path):
        patched = patch_runtime_config(make_config(), tmp_path, model_provider="Gemini")
        assert patched["mcpServers"]["agentkit"]["env"] == {
            "GEMINI_API_KEY": "",
            "GEMINI_MODEL": "gemini-2.5-flash-lite",
        }

    def test_unknown_model_provider(self, mcp_config, tmp_path):
        patched = patch_runtime_config(mcp_config, tmp_path, model_provider="Mistral")
        env = patched["mcpServers"]["agentkit"]["env"]
        assert env["MISTRAL_API_KEY"] == ""
        assert env["MISTRAL_MODEL"] == ""

    def test_never_injects_network_id(self, privy_mcp_config, tmp_path):
        keys = set(privy_mcp_config["mcpServers"]["agentkit"]["env"])
        patched = patch_runtime_config(privy_mcp_config, tmp_path, network="base-sepolia")
        env = patched["mcpServers"]["agentkit"]["env"]
        assert set(env) == keys
        assert "NETWORK_ID" not in env

    def test_network_translated_to_chain_id(self, privy_mcp_config, tmp_path):
        patched = patch_runtime_config(privy_mcp_config, tmp_path, network=Network.BASE_SEPOLIA)
        assert patched["mcpServers"]["agentkit"]["env"]["CHAIN_ID"] == "84532"

    def test_network_without_chain_id_translation(self, make_config, tmp_path):
        template = make_config({"CHAIN_ID": "", "NETWORK_ID": ""})
        patched = patch_runtime_config(template, tmp_path, network="solana-devnet")
        env = patched["mcpServers"]["agentkit"]["env"]
        assert env == {"CHAIN_ID": "", "NETWORK_ID": "solana-devnet"}

    def test_network_without_env(self, make_config, tmp_path):
        patched = patch_runtime_config(make_config(), tmp_path, network="base-sepolia")
        assert "env" not in patched["mcpServers"]["agentkit"]

    def test_chain_id_wins(self, privy_mcp_config, tmp_path):
        patched = patch_runtime_config(
            privy_mcp_config, tmp_path, network="base-sepolia", chain_id="42"
        )
        assert patched["mcpServers"]["agentkit"]["env"]["CHAIN_ID"] == "42"


async def test_write_runtime_config(mcp_config, tmp_path):
    path = await write_runtime_config(tmp_path, mcp_config)
    assert path == tmp_path / CONFIG_FILENAME
    text = path.read_text(encoding="utf-8")
    assert text.startswith('{\n  "mcpServers"')
    assert json.loads(text) == mcp_config
