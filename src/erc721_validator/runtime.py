# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level validator facade for single cases and full-matrix runs."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from .artifacts import ArtifactStore
from .config import ProbeSettings, load_network_settings, load_probe_settings
from .errors import ClassificationError
from .models import (
    CaseReport,
    CaseStatus,
    MatrixReport,
    ProbeCategory,
    ProbeDefinition,
    ProbeRequest,
    ValidationResult,
)
from .network.client import ProbeNetwork, create_default_network
from .probes.classifier import OutcomeClassifier
from .probes.deployer import ProbeDeployer
from .probes.runner import ValidationRunner

logger = logging.getLogger(__name__)


class ERC721Validator:
    """
    Convenience wrapper that wires settings, the network handle and artifacts into a ValidationRunner.

    The network handle is injected (or built from the environment) and closed by
    ``close``/``async with``.
    """

    def __init__(
        self,
        network: ProbeNetwork | None = None,
        *,
        artifacts: ArtifactStore | None = None,
        probe_settings: ProbeSettings | None = None,
    ):
        self.probe_settings = probe_settings or load_probe_settings()
        self.network = network or create_default_network(load_network_settings())
        self.artifacts = artifacts or ArtifactStore.from_settings(self.probe_settings)
        self.runner = ValidationRunner(
            self.network,
            self.artifacts,
            deployer=ProbeDeployer(
                funded_address=self.probe_settings.funded_address,
                transfer_value=self.probe_settings.transfer_value,
            ),
            classifier=OutcomeClassifier(self.probe_settings.extra_revert_signatures),
        )

    async def basic(self, case_id: int, contract: str | None) -> ValidationResult:
        return await self.runner.basic(case_id, contract)

    async def token(self, case_id: int, contract: str | None, token_id: int | None) -> ValidationResult:
        return await self.runner.token(case_id, contract, token_id)

    async def transfer(
        self,
        case_id: int,
        contract: str | None,
        token_id: int | None,
        giver: str | None,
    ) -> ValidationResult:
        return await self.runner.transfer(case_id, contract, token_id, giver)

    async def _run_case(self, definition: ProbeDefinition, request: ProbeRequest) -> CaseReport:
        try:
            result = await self.runner.run(request)
        except ClassificationError as exc:
            return CaseReport(definition=definition, status=CaseStatus.ERROR, reason=str(exc))
        return CaseReport.from_result(definition, result)

    def _skip_reason(self, definition: ProbeDefinition, token_id: int | None, giver: str | None) -> str | None:
        if definition.requires_token and token_id is None:
            return "token id not provided"
        if definition.category == ProbeCategory.TRANSFER:
            if definition.requires_giver and not giver:
                return "giver address not provided"
            if not self.probe_settings.funded_address:
                return "funded address not configured"
        return None

    async def run_matrix(
        self,
        contract: str,
        *,
        token_id: int | None = None,
        giver: str | None = None,
        categories: Iterable[ProbeCategory] | None = None,
    ) -> MatrixReport:
        """
        Run every applicable case concurrently.

        Cases whose inputs are missing are reported as SKIPPED; unclassifiable
        outcomes as ERROR. InvalidArguments and ArtifactError still propagate.
        """
        definitions = self.runner.catalog.all_cases(categories)
        slots: list[CaseReport | None] = []
        pending = []
        for definition in definitions:
            reason = self._skip_reason(definition, token_id, giver)
            if reason is not None:
                slots.append(CaseReport(definition=definition, status=CaseStatus.SKIPPED, reason=reason))
                continue
            request = ProbeRequest(
                definition.category,
                definition.case_id,
                contract,
                token_id=token_id if definition.requires_token else None,
                giver=giver if definition.category == ProbeCategory.TRANSFER else None,
            )
            slots.append(None)
            pending.append(self._run_case(definition, request))

        logger.info("Running %d of %d cases against %s", len(pending), len(definitions), contract)
        completed = iter(await asyncio.gather(*pending))
        cases = [slot if slot is not None else next(completed) for slot in slots]
        return MatrixReport(contract=contract, cases=cases)

    async def close(self) -> None:
        await self.network.close()

    async def __aenter__(self) -> ERC721Validator:
        return self

    async def __aexit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        await self.close()


__all__ = ["ERC721Validator"]
