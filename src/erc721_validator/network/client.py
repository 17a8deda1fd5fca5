# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Network collaborator abstraction and factory."""

from collections.abc import Sequence
from typing import Any, Protocol

from ..artifacts import ProbeArtifact
from ..config import NetworkSettings, load_network_settings
from ..models.outcome import CallResult, SimulationOutcome
from ..models.probe import TransactionEnvelope


class ProbeNetwork(Protocol):
    """Minimal protocol for simulating probe deployments against a node."""

    async def estimate_deployment_gas(
        self,
        artifact: ProbeArtifact,
        arguments: Sequence[Any],
        *,
        envelope: TransactionEnvelope | None = None,
    ) -> SimulationOutcome: ...

    async def call(self, to: str, data: str, *, envelope: TransactionEnvelope | None = None) -> CallResult: ...

    async def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_network(settings: NetworkSettings | None = None) -> ProbeNetwork:
    """Factory for the default httpx-backed JSON-RPC client."""
    from .jsonrpc import JsonRpcNetwork

    return JsonRpcNetwork(settings or load_network_settings())
