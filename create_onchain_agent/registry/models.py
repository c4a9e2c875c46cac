"""Pydantic v2 models for the compatibility registry and user selection.

Defines the enumerations (networks, wallet providers, frameworks, templates,
model providers), the route configuration shapes stored in the static tables,
and the validated :class:`Selection` consumed by the assembly driver.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import PureWindowsPath
from typing import Generic, Iterator, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Network(str, Enum):
    """Named blockchain networks the generator knows about."""
    BASE_MAINNET = "base-mainnet"
    BASE_SEPOLIA = "base-sepolia"
    ETHEREUM_MAINNET = "ethereum-mainnet"
    ETHEREUM_SEPOLIA = "ethereum-sepolia"
    ARBITRUM_MAINNET = "arbitrum-mainnet"
    ARBITRUM_SEPOLIA = "arbitrum-sepolia"
    OPTIMISM_MAINNET = "optimism-mainnet"
    OPTIMISM_SEPOLIA = "optimism-sepolia"
    POLYGON_MAINNET = "polygon-mainnet"
    POLYGON_MUMBAI = "polygon-mumbai"
    SOLANA_MAINNET = "solana-mainnet"
    SOLANA_DEVNET = "solana-devnet"
    SOLANA_TESTNET = "solana-testnet"


class NetworkFamily(str, Enum):
    """Coarse network partition that selects the route tables."""
    EVM = "EVM"
    CUSTOM_EVM = "CUSTOM_EVM"
    SVM = "SVM"


class WalletProvider(str, Enum):
    """Wallet integration strategies."""
    CDP_SMART_WALLET = "CDPSmartWallet"
    CDP_EVM_WALLET = "CDPEvmWallet"
    VIEM = "Viem"
    PRIVY = "Privy"
    CDP_SOLANA_WALLET = "CDPSolanaWallet"
    SOLANA_KEYPAIR = "SolanaKeypair"


class Framework(str, Enum):
    """Agent calling conventions."""
    LANGCHAIN = "Langchain"
    VERCEL_AI_SDK = "Vercel AI SDK"
    MCP = "Model Context Protocol"


class Template(str, Enum):
    """Physical template directories."""
    NEXT = "next"
    MCP = "mcp"
    PREPARE_AGENTKIT = "prepareAgentkit"
    CREATE_AGENT = "createAgent"


class ModelProvider(str, Enum):
    """LLM vendors. The first member is the default."""
    OPENAI = "OpenAI"
    GEMINI = "Gemini"
    ANTHROPIC = "Anthropic"


E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: type[E], value: object) -> Optional[E]:
    """Return ``value`` as a member of ``enum_cls``, or ``None`` if it is not one."""
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Route configurations
# ---------------------------------------------------------------------------

class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class EnvConfiguration(_Frozen):
    """Environment variables a wallet provider needs in ``.env.local``."""
    top_comments: tuple[str, ...] = Field(default=(), description="Comment lines above the sections")
    required: tuple[str, ...] = Field(default=(), description="Variables the user must fill in")
    optional: tuple[str, ...] = Field(default=(), description="Variables the user may fill in")


class AgentkitRouteConfiguration(_Frozen):
    """Route configuration for the full-app (``next``) template."""
    env: EnvConfiguration
    prepare_agentkit_route: str = Field(..., description="Variant path under app/api/agent/agentkit/")


class MCPRouteConfiguration(_Frozen):
    """Route configuration for the tool-server (``mcp``) template."""
    get_agentkit_route: str = Field(..., description="Variant path under src/agentkit/")
    config_route: str = Field(..., description="claude_desktop_config.json variant under src/agentkit/")


class PrepareAgentkitRouteConfiguration(_Frozen):
    """Route configuration for the bare ``prepareAgentkit`` template."""
    route: str = Field(..., description="Variant path under agentkit/")


class NextTemplateRouteConfiguration(_Frozen):
    """Framework specific files promoted inside the ``next`` template."""
    create_agent_route: str
    api_route: str


class ModelProviderProfile(_Frozen):
    """Everything the generator needs to know about one model provider."""
    provider: ModelProvider
    label: str = Field(..., description="Human readable vendor name used in comments")
    key_hint: str = Field(..., description="Where to obtain an API key")
    env_prefix: str = Field(..., description="Prefix of the <PREFIX>_API_KEY / <PREFIX>_MODEL variables")
    default_model: str
    dependencies: tuple[tuple[str, str], ...] = Field(
        default=(), description="(package, version) pairs added to package.json"
    )

    @property
    def api_key_var(self) -> str:
        return f"{self.env_prefix}_API_KEY"

    @property
    def model_var(self) -> str:
        return f"{self.env_prefix}_MODEL"


RouteT = TypeVar("RouteT", bound=BaseModel)


class RouteTable(Generic[RouteT]):
    """Immutable (family, wallet provider) -> route configuration mapping.

    Lookups return ``None`` on absence; turning absence into an error is the
    resolver's job.
    """

    def __init__(
        self,
        name: str,
        entries: Mapping[NetworkFamily, Mapping[WalletProvider, RouteT]],
    ) -> None:
        self.name = name
        self._entries: dict[NetworkFamily, dict[WalletProvider, RouteT]] = {
            family: dict(routes) for family, routes in entries.items()
        }

    def get(self, family: object, provider: object) -> Optional[RouteT]:
        family_key = coerce_enum(NetworkFamily, family)
        provider_key = coerce_enum(WalletProvider, provider)
        if family_key is None or provider_key is None:
            return None
        return self._entries.get(family_key, {}).get(provider_key)

    def providers(self, family: object) -> tuple[WalletProvider, ...]:
        """Return the wallet providers that have a route for ``family``."""
        family_key = coerce_enum(NetworkFamily, family)
        if family_key is None:
            return ()
        return tuple(self._entries.get(family_key, {}))

    def keys(self) -> Iterator[tuple[NetworkFamily, WalletProvider]]:
        for family, routes in self._entries.items():
            for provider in routes:
                yield family, provider

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        return self.get(*key) is not None

    def __repr__(self) -> str:
        return f"RouteTable({self.name!r}, {len(list(self.keys()))} routes)"


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

_PACKAGE_NAME_RE = re.compile(r"(?:@[a-z\d\-*~][a-z\d\-*._~]*/)?[a-z\d\-~][a-z\d\-._~]*")


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` if *name* is a valid npm package name."""
    return bool(_PACKAGE_NAME_RE.fullmatch(name))


def is_plain_directory_name(name: str) -> bool:
    """Return ``True`` if *name* names a single directory below the output dir."""
    if name in (".", "..") or "/" in name or "\\" in name:
        return False
    return not PureWindowsPath(name).drive


def to_valid_package_name(project_name: str) -> str:
    """Sanitise a project name into an npm package name.

    Examples::

        to_valid_package_name("My Agent") -> "my-agent"
        to_valid_package_name(".hidden") -> "hidden"
    """
    name = project_name.strip().lower()
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"^[._]", "", name)
    return re.sub(r"[^a-z\d\-~]+", "-", name)


class Selection(BaseModel):
    """The fully validated user choices for one generator invocation.

    Built once (by the CLI or any other front end) and consumed once by
    :class:`~create_onchain_agent.scaffolder.assembler.ProjectAssembler`.
    Defaults mirror the interactive tool: the package name is derived from the
    project name, the template from a single-template framework, the wallet
    provider from the network, and the model provider is OpenAI.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Directory name of the generated project")
    package_name: Optional[str] = Field(default=None, description="package.json name")
    network: Optional[Network] = Field(default=None, description="Named network")
    chain_id: Optional[str] = Field(default=None, description="Custom EVM chain id")
    rpc_url: Optional[str] = Field(default=None, description="RPC endpoint for custom chains")
    wallet_provider: Optional[WalletProvider] = Field(default=None)
    framework: Framework = Field(default=Framework.LANGCHAIN)
    template: Optional[Template] = Field(default=None)
    model_provider: ModelProvider = Field(default=ModelProvider.OPENAI)

    @model_validator(mode="before")
    @classmethod
    def _fill_defaults(cls, data: object) -> object:
        # Imported lazily: constants imports this module.
        from .constants import CUSTOM_EVM_WALLET_PROVIDERS, FRAMEWORK_TO_TEMPLATES
        from .network import get_wallet_providers

        if not isinstance(data, dict):
            return data
        values = dict(data)

        project_name = str(values.get("project_name") or "").strip()
        values["project_name"] = project_name
        if not values.get("package_name"):
            values["package_name"] = to_valid_package_name(project_name)

        chain_id = values.get("chain_id")
        if chain_id is not None:
            values["chain_id"] = str(chain_id).strip() or None

        network = coerce_enum(Network, values.get("network"))
        if not values.get("wallet_provider"):
            if network is None and values.get("chain_id"):
                values["wallet_provider"] = CUSTOM_EVM_WALLET_PROVIDERS[0]
            elif network is not None:
                values["wallet_provider"] = get_wallet_providers(network)[0]

        framework = coerce_enum(Framework, values.get("framework", Framework.LANGCHAIN))
        if not values.get("template") and framework is not None:
            templates = FRAMEWORK_TO_TEMPLATES[framework]
            if len(templates) == 1:
                values["template"] = templates[0]
        return values

    @model_validator(mode="after")
    def _check_combination(self) -> "Selection":
        from .constants import CUSTOM_EVM_WALLET_PROVIDERS, FRAMEWORK_TO_TEMPLATES
        from .network import get_wallet_providers

        if not self.project_name:
            raise ValueError("project name must not be empty")
        if not is_plain_directory_name(self.project_name):
            raise ValueError(
                f"project name must be a plain directory name, not a path: {self.project_name!r}"
            )
        if not self.package_name or not is_valid_package_name(self.package_name):
            raise ValueError(f"invalid package.json name: {self.package_name!r}")
        if self.network is None and self.chain_id is None:
            raise ValueError("either a network or a chain id is required")
        if self.chain_id is not None and (not self.chain_id.isdigit() or int(self.chain_id) == 0):
            raise ValueError("chain id must be a positive number")
        if self.rpc_url is not None and not self.rpc_url.startswith("http"):
            raise ValueError("RPC URL must start with http:// or https://")

        offered = (
            get_wallet_providers(self.network)
            if self.network is not None
            else CUSTOM_EVM_WALLET_PROVIDERS
        )
        if self.wallet_provider not in offered:
            raise ValueError(
                f"wallet provider {getattr(self.wallet_provider, 'value', self.wallet_provider)} is not offered for "
                f"{self.network.value if self.network else 'chain ' + str(self.chain_id)}"
            )

        templates = FRAMEWORK_TO_TEMPLATES[self.framework]
        if self.template is None:
            raise ValueError(f"framework {self.framework.value} requires an explicit template")
        if self.template not in templates:
            raise ValueError(
                f"template {self.template.value} is not available for {self.framework.value}"
            )
        return self
