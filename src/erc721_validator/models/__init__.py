# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for the ERC-721 validator."""

from .outcome import CallResult, SimulationOutcome, ValidationResult
from .probe import (
    BasicArguments,
    DeploymentSpec,
    ProbeArguments,
    ProbeCategory,
    ProbeDefinition,
    ProbeExpectation,
    ProbeRequest,
    TokenArguments,
    TransactionEnvelope,
    TransferArguments,
)
from .report import CaseReport, CaseStatus, MatrixReport

__all__ = [
    "BasicArguments",
    "CallResult",
    "CaseReport",
    "CaseStatus",
    "DeploymentSpec",
    "MatrixReport",
    "ProbeArguments",
    "ProbeCategory",
    "ProbeDefinition",
    "ProbeExpectation",
    "ProbeRequest",
    "SimulationOutcome",
    "TokenArguments",
    "TransactionEnvelope",
    "TransferArguments",
    "ValidationResult",
]
