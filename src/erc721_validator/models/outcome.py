# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Simulation outcome and validation result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import ErrorCategory


@dataclass
class SimulationOutcome:
    """Raw result of a gas-estimation request: a gas quantity or an error descriptor."""

    gas: int | None = None
    error_message: str | None = None
    error_code: int | None = None
    error_type: str | None = None
    error_category: ErrorCategory | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.error_message is None and self.error_type is None and self.gas is not None

    @classmethod
    def from_gas(cls, gas: int) -> SimulationOutcome:
        return cls(gas=gas)

    @classmethod
    def from_error(
        cls,
        message: str,
        *,
        code: int | None = None,
        error_type: str | None = None,
        category: ErrorCategory | None = None,
    ) -> SimulationOutcome:
        return cls(error_message=message, error_code=code, error_type=error_type, error_category=category)


@dataclass
class CallResult:
    """Result of a read-only ``eth_call``."""

    ok: bool
    data: str = "0x"
    error_message: str | None = None
    error_code: int | None = None
    error_type: str | None = None


@dataclass(frozen=True)
class ValidationResult:
    compliant: bool
    gas_used: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"compliant": self.compliant, "gas_used": self.gas_used}
