# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-case validation pipeline: catalog, deployer, network, classifier."""

from __future__ import annotations

import logging

from ..artifacts import ArtifactStore
from ..errors import ArtifactError
from ..models.outcome import ValidationResult
from ..models.probe import ProbeCategory, ProbeRequest
from ..network.client import ProbeNetwork
from .catalog import CATALOG, ProbeCatalog
from .classifier import OutcomeClassifier
from .deployer import ProbeDeployer

logger = logging.getLogger(__name__)


class ValidationRunner:
    """
    Runs one compliance case per call.

    Each run issues exactly one gas-estimation request; local failures
    (UnknownCase, InvalidArguments, ArtifactError) are raised before the
    network is touched, and nothing is retried.
    """

    def __init__(
        self,
        network: ProbeNetwork,
        artifacts: ArtifactStore,
        *,
        deployer: ProbeDeployer | None = None,
        classifier: OutcomeClassifier | None = None,
        catalog: ProbeCatalog | None = None,
    ):
        self.network = network
        self.artifacts = artifacts
        self.catalog = catalog or CATALOG
        self.deployer = deployer or ProbeDeployer(catalog=self.catalog)
        self.classifier = classifier or OutcomeClassifier()

    async def run(self, request: ProbeRequest) -> ValidationResult:
        definition = self.catalog.lookup(request.category, request.case_id)
        deployment = self.deployer.prepare(request, definition)
        artifact = self.artifacts.get(deployment.artifact_name)
        values = deployment.arguments.values()
        if len(artifact.constructor_types) != len(values):
            raise ArtifactError(
                f"Artifact {artifact.name}@{artifact.version} expects {len(artifact.constructor_types)} "
                f"constructor arguments, got {len(values)}"
            )

        logger.debug(
            "Probing %s case %d (%s, expectation=%s) against %s",
            definition.category.value,
            definition.case_id,
            definition.title,
            definition.expectation.value,
            deployment.arguments.contract,
        )
        outcome = await self.network.estimate_deployment_gas(
            artifact,
            values,
            envelope=deployment.envelope,
        )
        result = self.classifier.classify(outcome)
        logger.debug(
            "%s case %d: compliant=%s gas=%d",
            definition.category.value,
            definition.case_id,
            result.compliant,
            result.gas_used,
        )
        return result

    async def basic(self, case_id: int, contract: str | None) -> ValidationResult:
        return await self.run(ProbeRequest(ProbeCategory.BASIC, case_id, contract))

    async def token(self, case_id: int, contract: str | None, token_id: int | None) -> ValidationResult:
        return await self.run(ProbeRequest(ProbeCategory.TOKEN, case_id, contract, token_id=token_id))

    async def transfer(
        self,
        case_id: int,
        contract: str | None,
        token_id: int | None,
        giver: str | None,
    ) -> ValidationResult:
        return await self.run(ProbeRequest(ProbeCategory.TRANSFER, case_id, contract, token_id=token_id, giver=giver))


__all__ = ["ValidationRunner"]
