# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Constructor argument assembly for probe deployments."""

from __future__ import annotations

from eth_utils import is_checksum_address, is_hex_address, remove_0x_prefix, to_checksum_address

from ..config import DEFAULT_TRANSFER_VALUE
from ..errors import InvalidArguments
from ..models.probe import (
    BasicArguments,
    DeploymentSpec,
    ProbeArguments,
    ProbeCategory,
    ProbeDefinition,
    ProbeRequest,
    TokenArguments,
    TransactionEnvelope,
    TransferArguments,
)
from .catalog import CATALOG, ProbeCatalog

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
MAX_UINT256 = 2**256 - 1


def _require_address(value: str | None, field_name: str) -> str:
    if not value:
        raise InvalidArguments(f"You must provide {field_name} as input")
    if not isinstance(value, str) or not is_hex_address(value):
        raise InvalidArguments(f"Invalid {field_name}: {value!r}")
    digits = remove_0x_prefix(value)
    # mixed case carries an EIP-55 checksum
    if digits != digits.lower() and digits != digits.upper() and not is_checksum_address(value):
        raise InvalidArguments(f"Invalid {field_name} checksum: {value!r}")
    return to_checksum_address(value)


def _require_token_id(value: int | None) -> int:
    if value is None:
        raise InvalidArguments("You must provide token id as input")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArguments(f"Token id must be an integer, got {value!r}")
    if value < 0 or value > MAX_UINT256:
        raise InvalidArguments(f"Token id out of uint256 range: {value}")
    return value


class ProbeDeployer:
    """
    Build the DeploymentSpec for a probe request.

    Every check happens here, before the network is involved. Transfer probes buy
    their token from the giver during construction, so they are simulated from the
    configured funded address with ``transfer_value`` attached.
    """

    def __init__(
        self,
        *,
        funded_address: str | None = None,
        transfer_value: int = DEFAULT_TRANSFER_VALUE,
        catalog: ProbeCatalog | None = None,
    ):
        self.funded_address = funded_address
        self.transfer_value = transfer_value
        self.catalog = catalog or CATALOG

    def prepare(self, request: ProbeRequest, definition: ProbeDefinition | None = None) -> DeploymentSpec:
        definition = definition or self.catalog.lookup(request.category, request.case_id)
        arguments = self._build_arguments(request, definition)
        envelope = self._build_envelope(definition)
        return DeploymentSpec(definition=definition, arguments=arguments, envelope=envelope)

    def _build_arguments(self, request: ProbeRequest, definition: ProbeDefinition) -> ProbeArguments:
        contract = _require_address(request.contract, "contract address")
        slots = definition.argument_slots

        if "token_id" not in slots:
            return BasicArguments(case_id=definition.case_id, contract=contract)

        token_id = _require_token_id(request.token_id)
        if "giver" not in slots:
            return TokenArguments(case_id=definition.case_id, contract=contract, token_id=token_id)

        if definition.requires_giver or request.giver:
            giver = _require_address(request.giver, "giver address")
        else:
            giver = ZERO_ADDRESS
        return TransferArguments(case_id=definition.case_id, contract=contract, token_id=token_id, giver=giver)

    def _build_envelope(self, definition: ProbeDefinition) -> TransactionEnvelope:
        if definition.category != ProbeCategory.TRANSFER:
            return TransactionEnvelope()
        sender = _require_address(self.funded_address, "funded address")
        return TransactionEnvelope(sender=sender, value=self.transfer_value)


__all__ = ["MAX_UINT256", "ProbeDeployer", "ZERO_ADDRESS"]
