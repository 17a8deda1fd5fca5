# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
ERC-721 validator package entrypoint.

This package checks deployed contracts for ERC-721 compliance by simulating the
deployment of probe contracts (gas estimation only) and classifying the outcome.
Network access is abstracted behind an injectable ProbeNetwork interface, probe
bytecode is loaded from versioned artifact files, and domain objects are modeled
with typed dataclasses.
"""

from .artifacts import ArtifactStore, ProbeArtifact
from .config import NetworkSettings, ProbeSettings, load_network_settings, load_probe_settings
from .errors import (
    ArtifactError,
    ClassificationError,
    InvalidArguments,
    UnknownCase,
    ValidatorError,
)
from .log import setup_logging
from .models import (
    CaseReport,
    CaseStatus,
    MatrixReport,
    ProbeCategory,
    ProbeRequest,
    SimulationOutcome,
    ValidationResult,
)
from .network import JsonRpcNetwork, ProbeNetwork, StubNetwork, create_default_network
from .probes import CATALOG, OutcomeClassifier, ProbeCatalog, ProbeDeployer, ValidationRunner
from .runtime import ERC721Validator
from .version import __version__

__all__ = [
    "ArtifactError",
    "ArtifactStore",
    "CATALOG",
    "CaseReport",
    "CaseStatus",
    "ClassificationError",
    "ERC721Validator",
    "InvalidArguments",
    "JsonRpcNetwork",
    "MatrixReport",
    "NetworkSettings",
    "OutcomeClassifier",
    "ProbeArtifact",
    "ProbeCatalog",
    "ProbeCategory",
    "ProbeDeployer",
    "ProbeNetwork",
    "ProbeRequest",
    "ProbeSettings",
    "SimulationOutcome",
    "StubNetwork",
    "UnknownCase",
    "ValidationResult",
    "ValidationRunner",
    "ValidatorError",
    "create_default_network",
    "load_network_settings",
    "load_probe_settings",
    "setup_logging",
    "__version__",
]
