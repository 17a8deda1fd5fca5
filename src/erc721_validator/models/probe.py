# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe request and deployment models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class ProbeCategory(str, Enum):
    """Probe contract family; each one has its own bytecode and constructor shape."""

    BASIC = "basic"
    TOKEN = "token"
    TRANSFER = "transfer"


class ProbeExpectation(str, Enum):
    """How a compliant target is expected to make the probe behave (informational only)."""

    SUCCEEDS = "succeeds"
    REVERTS = "reverts"
    CONDITIONAL = "conditional"


@dataclass(frozen=True)
class ProbeDefinition:
    category: ProbeCategory
    case_id: int
    title: str
    expectation: ProbeExpectation = ProbeExpectation.SUCCEEDS
    requires_giver: bool = False

    @property
    def requires_token(self) -> bool:
        return self.category in {ProbeCategory.TOKEN, ProbeCategory.TRANSFER}

    @property
    def argument_slots(self) -> tuple[str, ...]:
        """Constructor slots that follow ``(case_id, contract)``."""
        if self.category == ProbeCategory.TOKEN:
            return ("token_id",)
        if self.category == ProbeCategory.TRANSFER:
            return ("token_id", "giver")
        return ()


@dataclass(frozen=True)
class ProbeRequest:
    category: ProbeCategory
    case_id: int
    contract: str | None
    token_id: int | None = None
    giver: str | None = None


@dataclass(frozen=True)
class BasicArguments:
    case_id: int
    contract: str

    def values(self) -> list[Any]:
        return [self.case_id, self.contract]


@dataclass(frozen=True)
class TokenArguments:
    case_id: int
    contract: str
    token_id: int

    def values(self) -> list[Any]:
        return [self.case_id, self.contract, self.token_id]


@dataclass(frozen=True)
class TransferArguments:
    case_id: int
    contract: str
    token_id: int
    giver: str

    def values(self) -> list[Any]:
        return [self.case_id, self.contract, self.token_id, self.giver]


ProbeArguments = Union[BasicArguments, TokenArguments, TransferArguments]


@dataclass(frozen=True)
class TransactionEnvelope:
    """Optional transaction fields sent along with a simulation."""

    sender: str | None = None
    value: int = 0

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.sender:
            params["from"] = self.sender
        if self.value:
            params["value"] = hex(self.value)
        return params


@dataclass(frozen=True)
class DeploymentSpec:
    """Everything needed to simulate one probe deployment."""

    definition: ProbeDefinition
    arguments: ProbeArguments
    envelope: TransactionEnvelope = TransactionEnvelope()

    @property
    def artifact_name(self) -> str:
        return self.definition.category.value
