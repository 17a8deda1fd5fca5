# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process ProbeNetwork implementations."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from ..artifacts import ProbeArtifact
from ..models.outcome import CallResult, SimulationOutcome
from ..models.probe import TransactionEnvelope
from .client import ProbeNetwork

OutcomeFactory = Callable[[ProbeArtifact, list[Any], TransactionEnvelope], SimulationOutcome]


@dataclass(frozen=True)
class RecordedSimulation:
    artifact: ProbeArtifact
    arguments: list[Any]
    envelope: TransactionEnvelope


class StubNetwork(ProbeNetwork):
    """
    Deterministic, programmable ProbeNetwork for tests.

    Outcomes are looked up by ``(artifact name, case id)``, then by artifact
    name, then fall back to ``default``. Every simulation is recorded.
    """

    def __init__(
        self,
        outcomes: dict[Any, SimulationOutcome | OutcomeFactory] | None = None,
        default: SimulationOutcome | OutcomeFactory | None = None,
    ):
        self._outcomes = dict(outcomes or {})
        self._default = default
        self.simulations: list[RecordedSimulation] = []
        self.calls: list[tuple[str, str]] = []
        self.call_results: dict[str, CallResult] = {}
        self.closed = False

    def add(self, key: Any, outcome: SimulationOutcome | OutcomeFactory) -> None:
        self._outcomes[key] = outcome

    async def estimate_deployment_gas(
        self,
        artifact: ProbeArtifact,
        arguments: Sequence[Any],
        *,
        envelope: TransactionEnvelope | None = None,
    ) -> SimulationOutcome:
        args = list(arguments)
        env = envelope or TransactionEnvelope()
        self.simulations.append(RecordedSimulation(artifact=artifact, arguments=args, envelope=env))

        case_id = args[0] if args else None
        entry = self._outcomes.get((artifact.name, case_id))
        if entry is None:
            entry = self._outcomes.get(artifact.name)
        if entry is None:
            entry = self._default
        if entry is None:
            return SimulationOutcome.from_error(f"No stubbed outcome for {artifact.name} case {case_id}", error_type="StubMissing")
        if callable(entry):
            return entry(artifact, args, env)
        return entry

    async def call(self, to: str, data: str, *, envelope: TransactionEnvelope | None = None) -> CallResult:  # noqa: ARG002
        self.calls.append((to, data))
        return self.call_results.get(to, CallResult(ok=True))

    async def close(self) -> None:
        self.closed = True


__all__ = ["RecordedSimulation", "StubNetwork"]
