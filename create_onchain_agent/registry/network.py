"""Network classification helpers."""

from __future__ import annotations

from typing import Optional

from .constants import (
    EVM_NETWORKS,
    NETWORK_TO_WALLET_PROVIDERS,
    NON_CDP_SUPPORTED_EVM_WALLET_PROVIDERS,
    SVM_NETWORKS,
)
from .models import Network, NetworkFamily, WalletProvider, coerce_enum


def classify(
    network: Optional[str] = None, chain_id: Optional[str] = None
) -> Optional[NetworkFamily]:
    """Derive the network family from a (network, chain id) pair.

    A recognised network wins; otherwise a chain id means a custom EVM chain.
    Returns ``None`` when neither identifies a family -- callers must treat
    that as an unsupported selection rather than guess.

    Examples::

        classify("base-sepolia")        -> NetworkFamily.EVM
        classify("solana-devnet")       -> NetworkFamily.SVM
        classify(None, "42")            -> NetworkFamily.CUSTOM_EVM
        classify(None, None)            -> None
    """
    if network:
        if network in EVM_NETWORKS:
            return NetworkFamily.EVM
        if network in SVM_NETWORKS:
            return NetworkFamily.SVM

    if chain_id:
        return NetworkFamily.CUSTOM_EVM

    return None


def get_wallet_providers(network: Optional[str] = None) -> tuple[WalletProvider, ...]:
    """Return the wallet providers offered for *network*, default first.

    Without a network (or with an unknown one) the providers that work on any
    EVM chain are returned.
    """
    member = coerce_enum(Network, network)
    if member is None:
        return NON_CDP_SUPPORTED_EVM_WALLET_PROVIDERS
    return NETWORK_TO_WALLET_PROVIDERS[member]
