# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Turn a raw simulation outcome into a compliance verdict."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import ClassificationError
from ..models.outcome import SimulationOutcome, ValidationResult

logger = logging.getLogger(__name__)

# Substrings nodes use when the simulated code deliberately reverted
# (geth/erigon, legacy parity, ganache, hardhat).
EXPECTED_FAILURE_SIGNATURES: tuple[str, ...] = (
    "execution reverted",
    "always failing transaction",
    "VM Exception while processing transaction: revert",
    "Transaction reverted",
)


class OutcomeClassifier:
    """
    Classify gas-estimation outcomes.

    - a gas estimate means the probe constructor completed: compliant, with that gas;
    - an error matching a known revert signature: not compliant, zero gas;
    - anything else raises ClassificationError.
    """

    def __init__(self, extra_signatures: Iterable[str] = ()):
        signatures = list(EXPECTED_FAILURE_SIGNATURES)
        signatures.extend(sig for sig in extra_signatures if sig)
        self.signatures: tuple[str, ...] = tuple(signatures)
        self._folded = tuple(sig.casefold() for sig in self.signatures)

    def is_expected_failure(self, message: str | None) -> bool:
        if not message:
            return False
        folded = message.casefold()
        return any(sig in folded for sig in self._folded)

    def classify(self, outcome: SimulationOutcome) -> ValidationResult:
        if outcome.ok:
            if outcome.gas < 0:
                logger.warning("Negative gas estimate: %s", outcome.gas)
                raise ClassificationError(outcome, f"Negative gas estimate: {outcome.gas}")
            return ValidationResult(compliant=True, gas_used=int(outcome.gas or 0))

        if self.is_expected_failure(outcome.error_message):
            return ValidationResult(compliant=False, gas_used=0)

        logger.warning(
            "Unclassifiable simulation outcome (type=%s code=%s): %s",
            outcome.error_type,
            outcome.error_code,
            outcome.error_message,
        )
        raise ClassificationError(outcome)


_DEFAULT_CLASSIFIER = OutcomeClassifier()


def classify(outcome: SimulationOutcome) -> ValidationResult:
    """Classify with the default signature set."""
    return _DEFAULT_CLASSIFIER.classify(outcome)


__all__ = ["EXPECTED_FAILURE_SIGNATURES", "OutcomeClassifier", "classify"]
