"""Turn registry lookups into hard errors.

The registry tables answer "is there a route?" with ``None``; the functions
here are what the assembly driver calls, and they never substitute a default
for a missing combination.
"""

from __future__ import annotations

from typing import Optional

from create_onchain_agent.errors import SelectionError
from .constants import NEXT_TEMPLATE_ROUTES
from .models import (
    Framework,
    NetworkFamily,
    NextTemplateRouteConfiguration,
    RouteT,
    RouteTable,
    coerce_enum,
)
from .network import classify


def require_network_family(
    network: Optional[str] = None, chain_id: Optional[str] = None
) -> NetworkFamily:
    """Classify the network or raise :class:`SelectionError`."""
    family = classify(network, chain_id)
    if family is None:
        raise SelectionError("Unsupported network and chainId selected")
    return family


def resolve_route(
    table: RouteTable[RouteT], family: NetworkFamily, provider: object
) -> RouteT:
    """Return the route configured for ``(family, provider)`` in *table*.

    Raises:
        SelectionError: If *table* has no entry for the combination.
    """
    route = table.get(family, provider)
    if route is None:
        raise SelectionError("Selected invalid network & wallet provider combination")
    return route


def resolve_framework_route(framework: object) -> NextTemplateRouteConfiguration:
    """Return the ``next`` template routes for *framework*.

    Raises:
        SelectionError: If the framework has no ``next`` template routes.
    """
    member = coerce_enum(Framework, framework)
    route = NEXT_TEMPLATE_ROUTES.get(member) if member is not None else None
    if route is None:
        raise SelectionError("Selected invalid framework for this template")
    return route
