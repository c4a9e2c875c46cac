"""Compatibility registry -- static tables, network classification, route resolution."""

from .constants import (
    AGENTKIT_ROUTES,
    CHAIN_ID_TO_NETWORK_ID,
    CUSTOM_EVM_WALLET_PROVIDERS,
    DEFAULT_NETWORK,
    EVM_NETWORKS,
    FRAMEWORK_TO_TEMPLATES,
    MCP_ROUTES,
    MODEL_PROVIDERS,
    NETWORK_ID_TO_CHAIN_ID,
    NETWORKS,
    NEXT_TEMPLATE_ROUTES,
    PREPARE_AGENTKIT_ROUTES,
    SVM_NETWORKS,
    WALLET_PROVIDER_DESCRIPTIONS,
    get_model_provider_profile,
)
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
    Selection,
    Template,
    WalletProvider,
)
from .network import classify, get_wallet_providers
from .resolver import require_network_family, resolve_framework_route, resolve_route

__all__ = [
    "AGENTKIT_ROUTES",
    "AgentkitRouteConfiguration",
    "CHAIN_ID_TO_NETWORK_ID",
    "CUSTOM_EVM_WALLET_PROVIDERS",
    "DEFAULT_NETWORK",
    "EVM_NETWORKS",
    "EnvConfiguration",
    "FRAMEWORK_TO_TEMPLATES",
    "Framework",
    "MCPRouteConfiguration",
    "MCP_ROUTES",
    "MODEL_PROVIDERS",
    "ModelProvider",
    "ModelProviderProfile",
    "NETWORKS",
    "NETWORK_ID_TO_CHAIN_ID",
    "NEXT_TEMPLATE_ROUTES",
    "Network",
    "NetworkFamily",
    "NextTemplateRouteConfiguration",
    "PREPARE_AGENTKIT_ROUTES",
    "PrepareAgentkitRouteConfiguration",
    "RouteTable",
    "SVM_NETWORKS",
    "Selection",
    "Template",
    "WALLET_PROVIDER_DESCRIPTIONS",
    "WalletProvider",
    "classify",
    "get_model_provider_profile",
    "get_wallet_providers",
    "require_network_family",
    "resolve_framework_route",
    "resolve_route",
]
