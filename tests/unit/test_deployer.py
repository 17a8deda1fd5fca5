# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from erc721_validator.errors import InvalidArguments, UnknownCase
from erc721_validator.models import (
    BasicArguments,
    ProbeCategory,
    ProbeRequest,
    TokenArguments,
    TransactionEnvelope,
    TransferArguments,
)
from erc721_validator.probes.catalog import CATALOG
from erc721_validator.probes.deployer import MAX_UINT256, ZERO_ADDRESS, ProbeDeployer

CONTRACT = "0x" + "11" * 20
GIVER = "0x" + "22" * 20
FUNDED = "0x" + "33" * 20
MIXED_CASE = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


def test_basic_arguments_order():
    deployment = ProbeDeployer().prepare(ProbeRequest(ProbeCategory.BASIC, 3, CONTRACT))
    assert deployment.arguments == BasicArguments(case_id=3, contract=CONTRACT)
    assert deployment.arguments.values() == [3, CONTRACT]
    assert deployment.envelope == TransactionEnvelope()
    assert deployment.artifact_name == "basic"


def test_token_arguments_append_token_id():
    deployment = ProbeDeployer().prepare(ProbeRequest(ProbeCategory.TOKEN, 1, CONTRACT, token_id=7))
    assert isinstance(deployment.arguments, TokenArguments)
    assert deployment.arguments.values() == [1, CONTRACT, 7]


def test_token_id_zero_is_valid():
    deployment = ProbeDeployer().prepare(ProbeRequest(ProbeCategory.TOKEN, 2, CONTRACT, token_id=0))
    assert deployment.arguments.values() == [2, CONTRACT, 0]


def test_transfer_arguments_and_envelope():
    deployer = ProbeDeployer(funded_address=FUNDED, transfer_value=1_000_000)
    deployment = deployer.prepare(ProbeRequest(ProbeCategory.TRANSFER, 2, CONTRACT, token_id=5, giver=GIVER))
    assert isinstance(deployment.arguments, TransferArguments)
    assert deployment.arguments.values() == [2, CONTRACT, 5, GIVER]
    assert deployment.envelope == TransactionEnvelope(sender=FUNDED, value=1_000_000)
    assert deployment.envelope.to_params() == {"from": FUNDED, "value": hex(1_000_000)}


def test_transfer_without_token_movement_uses_zero_giver():
    deployer = ProbeDeployer(funded_address=FUNDED)
    deployment = deployer.prepare(ProbeRequest(ProbeCategory.TRANSFER, 8, CONTRACT, token_id=5))
    assert deployment.arguments.values()[-1] == ZERO_ADDRESS


def test_addresses_are_checksummed():
    deployment = ProbeDeployer().prepare(ProbeRequest(ProbeCategory.BASIC, 1, MIXED_CASE.lower()))
    assert deployment.arguments.contract == MIXED_CASE


@pytest.mark.parametrize(
    "request_",
    [
        ProbeRequest(ProbeCategory.BASIC, 1, None),
        ProbeRequest(ProbeCategory.BASIC, 1, ""),
        ProbeRequest(ProbeCategory.BASIC, 1, "0x1234"),
        ProbeRequest(ProbeCategory.BASIC, 1, "not-an-address"),
        ProbeRequest(ProbeCategory.TOKEN, 1, CONTRACT),
        ProbeRequest(ProbeCategory.TOKEN, 1, CONTRACT, token_id=-1),
        ProbeRequest(ProbeCategory.TOKEN, 1, CONTRACT, token_id=MAX_UINT256 + 1),
        ProbeRequest(ProbeCategory.TRANSFER, 2, CONTRACT, giver=GIVER),
        ProbeRequest(ProbeCategory.TRANSFER, 2, CONTRACT, token_id=1),
        ProbeRequest(ProbeCategory.TRANSFER, 8, CONTRACT, token_id=1, giver="0xzz"),
    ],
)
def test_missing_or_malformed_inputs(request_):
    with pytest.raises(InvalidArguments):
        ProbeDeployer(funded_address=FUNDED).prepare(request_)


def test_checksum_mismatch_is_rejected():
    bad = MIXED_CASE[:-1] + ("D" if MIXED_CASE[-1] == "d" else "d")
    with pytest.raises(InvalidArguments):
        ProbeDeployer().prepare(ProbeRequest(ProbeCategory.BASIC, 1, bad))


def test_transfer_requires_funded_address():
    with pytest.raises(InvalidArguments, match="funded address"):
        ProbeDeployer().prepare(ProbeRequest(ProbeCategory.TRANSFER, 2, CONTRACT, token_id=1, giver=GIVER))


def test_unknown_case_is_raised_before_argument_checks():
    with pytest.raises(UnknownCase):
        ProbeDeployer().prepare(ProbeRequest(ProbeCategory.TOKEN, 9, None))


def test_token_id_must_be_int():
    with pytest.raises(InvalidArguments):
        ProbeDeployer().prepare(ProbeRequest(ProbeCategory.TOKEN, 1, CONTRACT, token_id="1"))


def test_uppercase_and_lowercase_addresses_skip_checksum_check():
    upper = "0x" + MIXED_CASE[2:].upper()
    deployment = ProbeDeployer().prepare(ProbeRequest(ProbeCategory.BASIC, 1, upper))
    assert deployment.arguments.contract == MIXED_CASE


def test_giver_with_bad_checksum_is_rejected():
    bad = MIXED_CASE[:3] + MIXED_CASE[3].swapcase() + MIXED_CASE[4:]
    request = ProbeRequest(ProbeCategory.TRANSFER, 2, CONTRACT, token_id=1, giver=bad)
    with pytest.raises(InvalidArguments, match="giver address checksum"):
        ProbeDeployer(funded_address=FUNDED).prepare(request)


def test_argument_values_follow_definition_slots():
    deployer = ProbeDeployer(funded_address=FUNDED)
    for definition in CATALOG.all_cases():
        request = ProbeRequest(definition.category, definition.case_id, CONTRACT, token_id=1, giver=GIVER)
        deployment = deployer.prepare(request, definition)
        assert len(deployment.arguments.values()) == 2 + len(definition.argument_slots)
