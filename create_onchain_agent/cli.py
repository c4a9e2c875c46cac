"""Command line entry point.

Non-interactive front end for the generator: flags are turned into a
validated :class:`~create_onchain_agent.registry.Selection` (or fragment
arguments), the engine runs, and the outcome is reported on the Rich console.

Usage::

    create-onchain-agent init my-agent --network base-sepolia --model-provider Anthropic
    create-onchain-agent init my-agent --chain-id 42 --rpc-url https://rpc.example
    create-onchain-agent prepare --network solana-devnet --wallet-provider SolanaKeypair
    create-onchain-agent agent --framework vercel-ai-sdk --model-provider Gemini
"""

from __future__ import annotations

import argparse
import asyncio
import os
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Sequence

from pydantic import ValidationError

from create_onchain_agent import __version__
from create_onchain_agent.config import GeneratorSettings
from create_onchain_agent.errors import GeneratorError
from create_onchain_agent.registry import (
    DEFAULT_NETWORK,
    WALLET_PROVIDER_DESCRIPTIONS,
    Framework,
    ModelProvider,
    Network,
    Selection,
    Template,
    WalletProvider,
)
from create_onchain_agent.scaffolder import FragmentGenerator, ProjectAssembler
from create_onchain_agent.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)

_CDP_KEY_PROVIDERS = {WalletProvider.CDP_EVM_WALLET, WalletProvider.CDP_SMART_WALLET}


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _enum_arg(enum_cls: type[Enum]) -> Callable[[str], Enum]:
    """Build an argparse ``type`` accepting a member's value or kebab-case name.

    ``--framework "Vercel AI SDK"`` and ``--framework vercel-ai-sdk`` are
    equivalent; matching is case-insensitive.
    """
    aliases: dict[str, Enum] = {}
    for member in enum_cls:
        aliases[str(member.value).lower()] = member
        aliases[member.name.lower().replace("_", "-")] = member

    def parse(raw: str) -> Enum:
        member = aliases.get(raw.strip().lower())
        if member is None:
            choices = ", ".join(str(m.value) for m in enum_cls)
            raise argparse.ArgumentTypeError(f"invalid choice {raw!r} (choose from {choices})")
        return member

    parse.__name__ = enum_cls.__name__
    return parse


def _add_settings_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory (default: $COA_OUTPUT_DIR or the current directory)",
    )
    parser.add_argument(
        "--templates",
        default=None,
        help="Templates root directory (default: $COA_TEMPLATES_DIR or ./templates)",
    )


def _wallet_provider_help(prefix: str) -> str:
    descriptions = "; ".join(
        f"{provider.value}: {text}" for provider, text in WALLET_PROVIDER_DESCRIPTIONS.items()
    )
    return f"{prefix} ({descriptions})"


def _add_network_args(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--network",
        type=_enum_arg(Network),
        help=f"Named network (default for init: {DEFAULT_NETWORK.value})",
    )
    group.add_argument("--chain-id", default=None, help="Chain id of a custom EVM network")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-onchain-agent",
        description="Generate an onchain AI agent project from a template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-onchain-agent init my-agent --network base-sepolia\n"
            "  create-onchain-agent init my-agent --framework mcp --network solana-devnet\n"
            "  create-onchain-agent prepare --network base-mainnet --wallet-provider Privy\n"
            "  create-onchain-agent agent --framework langchain --model-provider Anthropic\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init = subparsers.add_parser("init", help="Create a new project")
    init.add_argument("project_name", help="Project directory name")
    _add_network_args(init)
    init.add_argument("--rpc-url", default=None, help="RPC endpoint (custom chains)")
    init.add_argument(
        "--wallet-provider",
        type=_enum_arg(WalletProvider),
        default=None,
        help=_wallet_provider_help("Wallet provider, the network's default if omitted"),
    )
    init.add_argument("--framework", type=_enum_arg(Framework), default=Framework.LANGCHAIN)
    init.add_argument("--template", type=_enum_arg(Template), default=None)
    init.add_argument("--model-provider", type=_enum_arg(ModelProvider), default=ModelProvider.OPENAI)
    init.add_argument("--package-name", default=None, help="package.json name (derived if omitted)")
    init.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail when a placeholder or rewrite pattern matches nothing",
    )
    _add_settings_args(init)

    prepare = subparsers.add_parser("prepare", help="Write prepareAgentkit.ts for a wallet provider")
    _add_network_args(prepare)
    prepare.add_argument(
        "--wallet-provider",
        type=_enum_arg(WalletProvider),
        required=True,
        help=_wallet_provider_help("Wallet provider"),
    )
    _add_settings_args(prepare)

    agent = subparsers.add_parser("agent", help="Write createAgent.ts and the AI provider factory")
    agent.add_argument("--framework", type=_enum_arg(Framework), default=Framework.LANGCHAIN)
    agent.add_argument("--model-provider", type=_enum_arg(ModelProvider), default=ModelProvider.OPENAI)
    _add_settings_args(agent)

    return parser


def _settings_from_args(args: argparse.Namespace) -> GeneratorSettings:
    """Environment settings, overridden by any flag that was given."""
    overrides: dict[str, object] = {}
    if args.output:
        overrides["output_dir"] = Path(args.output)
    if args.templates:
        overrides["templates_dir"] = Path(args.templates)
    if getattr(args, "strict", None):
        overrides["strict"] = True
    return GeneratorSettings.from_env().model_copy(update=overrides)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


async def run_init(args: argparse.Namespace, settings: GeneratorSettings) -> Path:
    network = args.network
    if network is None and args.chain_id is None:
        network = DEFAULT_NETWORK
    selection = Selection(
        project_name=args.project_name,
        package_name=args.package_name,
        network=network,
        chain_id=args.chain_id,
        rpc_url=args.rpc_url,
        wallet_provider=args.wallet_provider,
        framework=args.framework,
        template=args.template,
        model_provider=args.model_provider,
    )

    assembler = ProjectAssembler(settings)
    root = await assembler.assemble(selection)

    for warning in assembler.warnings:
        print_warning(f"Warning: {warning}")
    _report_project(root, selection)
    return root


async def run_prepare(args: argparse.Namespace, settings: GeneratorSettings) -> Path:
    generator = FragmentGenerator(settings)
    target = await generator.generate_prepare_agentkit(
        args.wallet_provider,
        network=args.network,
        chain_id=args.chain_id,
        destination=settings.output_dir,
    )
    print_success(f"Successfully created {target.name}")
    return target


async def run_agent(args: argparse.Namespace, settings: GeneratorSettings) -> Path:
    generator = FragmentGenerator(settings)
    written = await generator.generate_create_agent(
        args.framework,
        args.model_provider,
        destination=settings.output_dir,
    )
    print_success(f"Successfully created {written[0].name}")
    print_summary_table(
        {
            "Provider": args.model_provider.value,
            "Framework": args.framework.value,
        },
        title="Agent",
    )
    console.print(
        "[yellow]Next steps:\n"
        "1. Set your AI_API_KEY environment variable\n"
        "2. Customize ai/config.ts to change the provider or model\n"
        "3. Update createAgent.ts to use the AI provider factory if needed[/yellow]"
    )
    return written[0]


def _report_project(root: Path, selection: Selection) -> None:
    print_success(f"Successfully created your AgentKit project in {root}")
    network = selection.network.value if selection.network else f"chain {selection.chain_id}"
    print_summary_table(
        {
            "Template": selection.template.value,
            "Framework": selection.framework.value,
            "Network": network,
            "Wallet provider": selection.wallet_provider.value,
            "AI model provider": selection.model_provider.value,
            "Package name": selection.package_name,
        },
        title="Project",
    )

    steps: list[str] = []
    cwd = Path.cwd().resolve()
    if root != cwd:
        steps.append(f"cd {os.path.relpath(root, cwd)}")
    steps.append("npm install")
    provider = selection.model_provider.value
    if selection.template is Template.NEXT:
        steps.append(f"[dim]# Open .env.local and configure your {provider} API key[/dim]")
        steps.append("mv .env.local .env")
        steps.append("npm run dev")
    else:
        steps.append("npm run build")
        steps.append(
            "cp claude_desktop_config.json "
            "~/Library/Application\\ Support/Claude/claude_desktop_config.json"
        )
        if selection.wallet_provider in _CDP_KEY_PROVIDERS:
            steps.append("# Make sure to open claude_desktop_config.json and configure your CDP API keys!")
        elif selection.wallet_provider is WalletProvider.PRIVY:
            steps.append("# Make sure to open claude_desktop_config.json and configure your Privy API keys!")
        steps.append(f"[dim]# Configure your {provider} API key in the config file[/dim]")

    console.print("\n[bold]What's Next?[/bold]\n")
    for step in steps:
        console.print(f" - {step}")
    console.print()


_COMMANDS = {
    "init": run_init,
    "prepare": run_prepare,
    "agent": run_agent,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point for ``create-onchain-agent`` / ``python -m create_onchain_agent``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = _settings_from_args(args)
        asyncio.run(_COMMANDS[args.command](args, settings))
    except ValidationError as exc:
        for error in exc.errors():
            print_error(f"Error: {error['msg']}")
        return 1
    except (GeneratorError, OSError) as exc:
        print_error(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
