# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe orchestration: case catalog, argument assembly, classification and the runner."""

from .catalog import CATALOG, ProbeCatalog, lookup
from .classifier import EXPECTED_FAILURE_SIGNATURES, OutcomeClassifier, classify
from .deployer import ZERO_ADDRESS, ProbeDeployer
from .runner import ValidationRunner

__all__ = [
    "CATALOG",
    "EXPECTED_FAILURE_SIGNATURES",
    "OutcomeClassifier",
    "ProbeCatalog",
    "ProbeDeployer",
    "ValidationRunner",
    "ZERO_ADDRESS",
    "classify",
    "lookup",
]
