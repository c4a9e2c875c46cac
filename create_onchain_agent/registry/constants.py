"""Static compatibility tables.

These tables are the single source of truth for which (network family,
wallet provider, framework, template) combinations the generator supports.
They are built once at import time and never mutated.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import (
    AgentkitRouteConfiguration,
    EnvConfiguration,
    Framework,
    MCPRouteConfiguration,
    ModelProvider,
    ModelProviderProfile,
    Network,
    NetworkFamily,
    NextTemplateRouteConfiguration,
    PrepareAgentkitRouteConfiguration,
    RouteTable,
    Template,
    WalletProvider,
    coerce_enum,
)


# ---------------------------------------------------------------------------
# Networks
# ---------------------------------------------------------------------------

EVM_NETWORKS: tuple[Network, ...] = (
    Network.BASE_MAINNET,
    Network.BASE_SEPOLIA,
    Network.ETHEREUM_MAINNET,
    Network.ETHEREUM_SEPOLIA,
    Network.ARBITRUM_MAINNET,
    Network.ARBITRUM_SEPOLIA,
    Network.OPTIMISM_MAINNET,
    Network.OPTIMISM_SEPOLIA,
    Network.POLYGON_MAINNET,
    Network.POLYGON_MUMBAI,
)

SVM_NETWORKS: tuple[Network, ...] = (
    Network.SOLANA_MAINNET,
    Network.SOLANA_DEVNET,
    Network.SOLANA_TESTNET,
)

NETWORKS: tuple[Network, ...] = EVM_NETWORKS + SVM_NETWORKS

DEFAULT_NETWORK = Network.BASE_SEPOLIA

# Maps EVM chain ids to network ids.
CHAIN_ID_TO_NETWORK_ID: Mapping[int, str] = MappingProxyType({
    1: "ethereum-mainnet",
    11155111: "ethereum-sepolia",
    137: "polygon-mainnet",
    80001: "polygon-mumbai",
    8453: "base-mainnet",
    84532: "base-sepolia",
    42161: "arbitrum-mainnet",
    421614: "arbitrum-sepolia",
    10: "optimism-mainnet",
    11155420: "optimism-sepolia",
})

NETWORK_ID_TO_CHAIN_ID: Mapping[str, str] = MappingProxyType({
    network_id: str(chain_id) for chain_id, network_id in CHAIN_ID_TO_NETWORK_ID.items()
})


# ---------------------------------------------------------------------------
# Wallet providers
# ---------------------------------------------------------------------------

CDP_SUPPORTED_EVM_WALLET_PROVIDERS: tuple[WalletProvider, ...] = (
    WalletProvider.CDP_SMART_WALLET,
    WalletProvider.CDP_EVM_WALLET,
    WalletProvider.VIEM,
    WalletProvider.PRIVY,
)

NON_CDP_SUPPORTED_EVM_WALLET_PROVIDERS: tuple[WalletProvider, ...] = (
    WalletProvider.VIEM,
    WalletProvider.PRIVY,
)

SVM_WALLET_PROVIDERS: tuple[WalletProvider, ...] = (
    WalletProvider.CDP_SOLANA_WALLET,
    WalletProvider.SOLANA_KEYPAIR,
    WalletProvider.PRIVY,
)

CUSTOM_EVM_WALLET_PROVIDERS: tuple[WalletProvider, ...] = (WalletProvider.VIEM,)

NETWORK_TO_WALLET_PROVIDERS: Mapping[Network, tuple[WalletProvider, ...]] = MappingProxyType({
    Network.ARBITRUM_MAINNET: CDP_SUPPORTED_EVM_WALLET_PROVIDERS,
    Network.ARBITRUM_SEPOLIA: NON_CDP_SUPPORTED_EVM_WALLET_PROVIDERS,
    Network.BASE_MAINNET: CDP_SUPPORTED_EVM_WALLET_PROVIDERS,
    Network.BASE_SEPOLIA: CDP_SUPPORTED_EVM_WALLET_PROVIDERS,
    Network.ETHEREUM_MAINNET: CDP_SUPPORTED_EVM_WALLET_PROVIDERS,
    Network.ETHEREUM_SEPOLIA: NON_CDP_SUPPORTED_EVM_WALLET_PROVIDERS,
    Network.OPTIMISM_MAINNET: NON_CDP_SUPPORTED_EVM_WALLET_PROVIDERS,
    Network.OPTIMISM_SEPOLIA: NON_CDP_SUPPORTED_EVM_WALLET_PROVIDERS,
    Network.POLYGON_MAINNET: CDP_SUPPORTED_EVM_WALLET_PROVIDERS,
    Network.POLYGON_MUMBAI: NON_CDP_SUPPORTED_EVM_WALLET_PROVIDERS,
    Network.SOLANA_MAINNET: SVM_WALLET_PROVIDERS,
    Network.SOLANA_DEVNET: SVM_WALLET_PROVIDERS,
    Network.SOLANA_TESTNET: SVM_WALLET_PROVIDERS,
})

WALLET_PROVIDER_DESCRIPTIONS: Mapping[WalletProvider, str] = MappingProxyType({
    WalletProvider.CDP_SMART_WALLET: "Uses Coinbase Developer Platform (CDP)'s Smart Wallet.",
    WalletProvider.CDP_EVM_WALLET: "Uses Coinbase Developer Platform (CDP)'s EVM wallet.",
    WalletProvider.CDP_SOLANA_WALLET: "Uses Coinbase Developer Platform (CDP)'s Solana wallet.",
    WalletProvider.VIEM: "Client-side Ethereum wallet.",
    WalletProvider.PRIVY: "Authentication and wallet infrastructure.",
    WalletProvider.SOLANA_KEYPAIR: "Client-side Solana wallet.",
})


# ---------------------------------------------------------------------------
# Route tables
# ---------------------------------------------------------------------------

_CDP_PORTAL = "Get keys from CDP Portal: https://portal.cdp.coinbase.com/"
_PRIVY_DASHBOARD = "Get keys from Privy Dashboard: https://dashboard.privy.io/"
_CDP_KEYS = ("CDP_API_KEY_ID", "CDP_API_KEY_SECRET")
_CDP_WALLET_KEYS = _CDP_KEYS + ("CDP_WALLET_SECRET",)
_PRIVY_WALLET_KEYS = (
    "PRIVY_WALLET_ID",
    "PRIVY_WALLET_AUTHORIZATION_PRIVATE_KEY",
    "PRIVY_WALLET_AUTHORIZATION_KEY_ID",
)

AGENTKIT_ROUTES: RouteTable[AgentkitRouteConfiguration] = RouteTable("agentkit", {
    NetworkFamily.EVM: {
        WalletProvider.CDP_EVM_WALLET: AgentkitRouteConfiguration(
            env=EnvConfiguration(
                top_comments=(_CDP_PORTAL,),
                required=_CDP_WALLET_KEYS,
                optional=("RPC_URL",),
            ),
            prepare_agentkit_route="evm/cdp/prepare-agentkit.ts",
        ),
        WalletProvider.VIEM: AgentkitRouteConfiguration(
            env=EnvConfiguration(
                top_comments=("Export private key from your Ethereum wallet and save", _CDP_PORTAL),
                required=("PRIVATE_KEY",),
                optional=_CDP_KEYS + ("RPC_URL",),
            ),
            prepare_agentkit_route="evm/viem/prepare-agentkit.ts",
        ),
        WalletProvider.PRIVY: AgentkitRouteConfiguration(
            env=EnvConfiguration(
                top_comments=(_PRIVY_DASHBOARD, _CDP_PORTAL),
                required=("PRIVY_APP_ID", "PRIVY_APP_SECRET"),
                optional=("CHAIN_ID",) + _PRIVY_WALLET_KEYS + _CDP_KEYS,
            ),
            prepare_agentkit_route="evm/privy/prepare-agentkit.ts",
        ),
        WalletProvider.CDP_SMART_WALLET: AgentkitRouteConfiguration(
            env=EnvConfiguration(
                top_comments=(
                    _CDP_PORTAL,
                    "Optionally provide a private key, otherwise one will be generated",
                ),
                required=_CDP_WALLET_KEYS,
                optional=("PAYMASTER_URL", "RPC_URL"),
            ),
            prepare_agentkit_route="evm/smart/prepare-agentkit.ts",
        ),
    },
    NetworkFamily.CUSTOM_EVM: {
        WalletProvider.VIEM: AgentkitRouteConfiguration(
            env=EnvConfiguration(
                top_comments=("Export private key from your Ethereum wallet and save", _CDP_PORTAL),
                required=("PRIVATE_KEY",),
                optional=_CDP_KEYS,
            ),
            prepare_agentkit_route="custom-evm/viem/prepare-agentkit.ts",
        ),
    },
    NetworkFamily.SVM: {
        WalletProvider.CDP_SOLANA_WALLET: AgentkitRouteConfiguration(
            env=EnvConfiguration(
                top_comments=(_CDP_PORTAL,),
                required=_CDP_WALLET_KEYS,
                optional=(),
            ),
            prepare_agentkit_route="svm/cdp/prepare-agentkit.ts",
        ),
        WalletProvider.SOLANA_KEYPAIR: AgentkitRouteConfiguration(
            env=EnvConfiguration(
                top_comments=("Export private key from your Solana wallet and save", _CDP_PORTAL),
                required=("SOLANA_PRIVATE_KEY",),
                optional=("SOLANA_RPC_URL",) + _CDP_KEYS,
            ),
            prepare_agentkit_route="svm/solanaKeypair/prepare-agentkit.ts",
        ),
        WalletProvider.PRIVY: AgentkitRouteConfiguration(
            env=EnvConfiguration(
                top_comments=(_PRIVY_DASHBOARD, _CDP_PORTAL),
                required=("PRIVY_APP_ID", "PRIVY_APP_SECRET"),
                optional=_PRIVY_WALLET_KEYS + _CDP_KEYS,
            ),
            prepare_agentkit_route="svm/privy/prepare-agentkit.ts",
        ),
    },
})


def _mcp(directory: str) -> MCPRouteConfiguration:
    return MCPRouteConfiguration(
        get_agentkit_route=f"{directory}/getAgentKit.ts",
        config_route=f"{directory}/claude_desktop_config.json",
    )


MCP_ROUTES: RouteTable[MCPRouteConfiguration] = RouteTable("mcp", {
    NetworkFamily.EVM: {
        WalletProvider.CDP_EVM_WALLET: _mcp("evm/cdp"),
        WalletProvider.VIEM: _mcp("evm/viem"),
        WalletProvider.PRIVY: _mcp("evm/privy"),
        WalletProvider.CDP_SMART_WALLET: _mcp("evm/smart"),
    },
    NetworkFamily.CUSTOM_EVM: {
        WalletProvider.VIEM: _mcp("custom-evm/viem"),
    },
    NetworkFamily.SVM: {
        WalletProvider.CDP_SOLANA_WALLET: _mcp("svm/cdp"),
        WalletProvider.SOLANA_KEYPAIR: _mcp("svm/solana-keypair"),
        WalletProvider.PRIVY: _mcp("svm/privy"),
    },
})


PREPARE_AGENTKIT_ROUTES: RouteTable[PrepareAgentkitRouteConfiguration] = RouteTable(
    "prepareAgentkit",
    {
        NetworkFamily.EVM: {
            WalletProvider.CDP_EVM_WALLET: PrepareAgentkitRouteConfiguration(route="evm/cdp/prepareAgentkit.ts"),
            WalletProvider.VIEM: PrepareAgentkitRouteConfiguration(route="evm/viem/prepareAgentkit.ts"),
            WalletProvider.PRIVY: PrepareAgentkitRouteConfiguration(route="evm/privy/prepareAgentkit.ts"),
            WalletProvider.CDP_SMART_WALLET: PrepareAgentkitRouteConfiguration(route="evm/smart/prepareAgentkit.ts"),
        },
        NetworkFamily.CUSTOM_EVM: {
            WalletProvider.VIEM: PrepareAgentkitRouteConfiguration(route="custom-evm/viem/prepareAgentkit.ts"),
        },
        NetworkFamily.SVM: {
            WalletProvider.CDP_SOLANA_WALLET: PrepareAgentkitRouteConfiguration(route="svm/cdp/prepareAgentkit.ts"),
            WalletProvider.SOLANA_KEYPAIR: PrepareAgentkitRouteConfiguration(
                route="svm/solana-keypair/prepareAgentkit.ts"
            ),
            WalletProvider.PRIVY: PrepareAgentkitRouteConfiguration(route="svm/privy/prepareAgentkit.ts"),
        },
    },
)


# ---------------------------------------------------------------------------
# Frameworks & templates
# ---------------------------------------------------------------------------

FRAMEWORK_TO_TEMPLATES: Mapping[Framework, tuple[Template, ...]] = MappingProxyType({
    Framework.LANGCHAIN: (Template.NEXT,),
    Framework.VERCEL_AI_SDK: (Template.NEXT,),
    Framework.MCP: (Template.MCP,),
})

NEXT_TEMPLATE_ROUTES: Mapping[Framework, NextTemplateRouteConfiguration] = MappingProxyType({
    Framework.LANGCHAIN: NextTemplateRouteConfiguration(
        api_route="langchain/route.ts",
        create_agent_route="langchain/create-agent.ts",
    ),
    Framework.VERCEL_AI_SDK: NextTemplateRouteConfiguration(
        api_route="vercel-ai-sdk/route.ts",
        create_agent_route="vercel-ai-sdk/create-agent.ts",
    ),
})

# Directory names used by the standalone createAgent template.
CREATE_AGENT_FRAMEWORK_DIRS: Mapping[Framework, str] = MappingProxyType({
    Framework.LANGCHAIN: "langchain",
    Framework.VERCEL_AI_SDK: "vercelAISDK",
})


# ---------------------------------------------------------------------------
# Model providers
# ---------------------------------------------------------------------------

MODEL_PROVIDERS: Mapping[ModelProvider, ModelProviderProfile] = MappingProxyType({
    ModelProvider.OPENAI: ModelProviderProfile(
        provider=ModelProvider.OPENAI,
        label="OpenAI",
        key_hint="Get keys from OpenAI Platform: https://platform.openai.com/api-keys",
        env_prefix="OPENAI",
        default_model="gpt-4",
        dependencies=(("@langchain/openai", "^1.2.2"), ("@ai-sdk/openai", "^3.0.12")),
    ),
    ModelProvider.GEMINI: ModelProviderProfile(
        provider=ModelProvider.GEMINI,
        label="Google Gemini",
        key_hint="Get keys from Google AI Studio: https://aistudio.google.com/app/apikey",
        env_prefix="GEMINI",
        default_model="gemini-2.5-flash-lite",
        dependencies=(("@langchain/google-genai", "^2.1.10"), ("@ai-sdk/google", "^3.0.10")),
    ),
    ModelProvider.ANTHROPIC: ModelProviderProfile(
        provider=ModelProvider.ANTHROPIC,
        label="Anthropic",
        key_hint="Get keys from Anthropic Console: https://console.anthropic.com/",
        env_prefix="ANTHROPIC",
        default_model="claude-3-5-sonnet-20241022",
        dependencies=(("@langchain/anthropic", "^1.3.10"), ("@ai-sdk/anthropic", "^3.0.15")),
    ),
})

DEFAULT_MODEL_PROVIDER = ModelProvider.OPENAI

# Models written into ai/config.ts by the standalone createAgent template.
CREATE_AGENT_DEFAULT_MODELS: Mapping[ModelProvider, str] = MappingProxyType({
    ModelProvider.OPENAI: "gpt-4o-mini",
    ModelProvider.GEMINI: "gemini-2.5-flash-lite",
    ModelProvider.ANTHROPIC: "claude-3-5-sonnet-20241022",
})


def get_model_provider_profile(provider: object) -> ModelProviderProfile:
    """Return the profile for *provider*, falling back to the default provider."""
    member = coerce_enum(ModelProvider, provider)
    return MODEL_PROVIDERS[member or DEFAULT_MODEL_PROVIDER]
