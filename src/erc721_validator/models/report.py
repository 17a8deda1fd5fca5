# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclasses for per-case and full-matrix reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .outcome import ValidationResult
from .probe import ProbeCategory, ProbeDefinition


class CaseStatus(str, Enum):
    COMPLIANT = "COMPLIANT"
    NON_COMPLIANT = "NON_COMPLIANT"
    ERROR = "ERROR"
    SKIPPED = "SKIPPED"


@dataclass
class CaseReport:
    """One row of a matrix run."""

    definition: ProbeDefinition
    status: CaseStatus
    result: ValidationResult | None = None
    reason: str | None = None

    @property
    def gas_used(self) -> int:
        return self.result.gas_used if self.result is not None else 0

    @classmethod
    def from_result(cls, definition: ProbeDefinition, result: ValidationResult) -> CaseReport:
        status = CaseStatus.COMPLIANT if result.compliant else CaseStatus.NON_COMPLIANT
        return cls(definition=definition, status=status, result=result)

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.definition.category.value,
            "case_id": self.definition.case_id,
            "title": self.definition.title,
            "expectation": self.definition.expectation.value,
            "status": self.status.value,
            "gas_used": self.gas_used,
            "reason": self.reason,
        }


@dataclass
class MatrixReport:
    """Results of every applicable case against one contract."""

    contract: str
    cases: list[CaseReport] = field(default_factory=list)

    def by_category(self, category: ProbeCategory) -> list[CaseReport]:
        return [case for case in self.cases if case.definition.category == category]

    def counts(self) -> dict[str, int]:
        totals = {status.value: 0 for status in CaseStatus}
        for case in self.cases:
            totals[case.status.value] += 1
        return totals

    @property
    def has_errors(self) -> bool:
        return any(case.status == CaseStatus.ERROR for case in self.cases)

    def to_dict(self) -> dict[str, Any]:
        return {
            "contract": self.contract,
            "summary": self.counts(),
            "cases": [case.to_dict() for case in self.cases],
        }


__all__ = ["CaseReport", "CaseStatus", "MatrixReport"]
