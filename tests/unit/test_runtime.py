# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import asyncio

import pytest

from erc721_validator.config import ProbeSettings
from erc721_validator.errors import InvalidArguments
from erc721_validator.models import CaseStatus, ProbeCategory, SimulationOutcome, ValidationResult
from erc721_validator.network import StubNetwork
from erc721_validator.runtime import ERC721Validator

CONTRACT = "0x" + "11" * 20
GIVER = "0x" + "22" * 20
FUNDED = "0x" + "33" * 20


def _validator(network, artifact_store, **settings):
    probe_settings = ProbeSettings(funded_address=FUNDED, **settings)
    return ERC721Validator(network, artifacts=artifact_store, probe_settings=probe_settings)


def test_entry_points_share_pipeline(artifact_store):
    network = StubNetwork(
        {
            ("basic", 3): SimulationOutcome.from_gas(50000),
            ("token", 1): SimulationOutcome.from_gas(40000),
            ("transfer", 3): SimulationOutcome.from_error("execution reverted"),
        }
    )
    validator = _validator(network, artifact_store)

    async def go():
        return (
            await validator.basic(3, CONTRACT),
            await validator.token(1, CONTRACT, 9),
            await validator.transfer(3, CONTRACT, 9, GIVER),
        )

    basic, token, transfer = asyncio.run(go())
    assert basic == ValidationResult(True, 50000)
    assert token == ValidationResult(True, 40000)
    assert transfer == ValidationResult(False, 0)
    assert [sim.artifact.name for sim in network.simulations] == ["basic", "token", "transfer"]


def test_extra_revert_signatures_reach_classifier(artifact_store):
    network = StubNetwork(default=SimulationOutcome.from_error("custom abort: nope"))
    validator = _validator(network, artifact_store, extra_revert_signatures=("custom abort",))
    assert asyncio.run(validator.basic(1, CONTRACT)) == ValidationResult(False, 0)


def test_transfer_value_comes_from_settings(artifact_store):
    network = StubNetwork(default=SimulationOutcome.from_gas(1))
    validator = _validator(network, artifact_store, transfer_value=5)
    asyncio.run(validator.transfer(1, CONTRACT, 1, GIVER))
    assert network.simulations[0].envelope.value == 5


def test_run_matrix_reports_every_case(artifact_store):
    def outcome(artifact, args, env):
        if artifact.name == "transfer" and args[0] == 3:
            return SimulationOutcome.from_error("execution reverted")
        if artifact.name == "basic" and args[0] == 5:
            return SimulationOutcome.from_error("connection timeout")
        return SimulationOutcome.from_gas(1000 + args[0])

    network = StubNetwork(default=outcome)
    validator = _validator(network, artifact_store)
    report = asyncio.run(validator.run_matrix(CONTRACT, token_id=4, giver=GIVER))

    assert len(report.cases) == 27
    assert len(network.simulations) == 27
    assert [(c.definition.category, c.definition.case_id) for c in report.cases][:2] == [
        (ProbeCategory.BASIC, 1),
        (ProbeCategory.BASIC, 2),
    ]
    counts = report.counts()
    assert counts == {"COMPLIANT": 25, "NON_COMPLIANT": 1, "ERROR": 1, "SKIPPED": 0}
    errored = [c for c in report.cases if c.status == CaseStatus.ERROR][0]
    assert errored.definition.case_id == 5
    assert "connection timeout" in errored.reason
    assert report.has_errors is True

    data = report.to_dict()
    assert data["contract"] == CONTRACT
    assert data["summary"]["NON_COMPLIANT"] == 1
    assert data["cases"][0]["gas_used"] == 1001


def test_run_matrix_skips_cases_without_inputs(artifact_store):
    network = StubNetwork(default=SimulationOutcome.from_gas(1))
    validator = _validator(network, artifact_store)
    report = asyncio.run(validator.run_matrix(CONTRACT))
    assert report.counts()["SKIPPED"] == 17
    assert len(network.simulations) == 10

    network = StubNetwork(default=SimulationOutcome.from_gas(1))
    validator = _validator(network, artifact_store)
    report = asyncio.run(validator.run_matrix(CONTRACT, token_id=1))
    skipped = [c.definition.case_id for c in report.cases if c.status == CaseStatus.SKIPPED]
    assert skipped == [1, 2, 3, 4, 5, 6, 7, 9, 12, 13, 14]
    assert all(c.reason == "giver address not provided" for c in report.cases if c.status == CaseStatus.SKIPPED)


def test_run_matrix_without_funded_address_skips_transfer(artifact_store):
    network = StubNetwork(default=SimulationOutcome.from_gas(1))
    validator = ERC721Validator(network, artifacts=artifact_store, probe_settings=ProbeSettings())
    report = asyncio.run(
        validator.run_matrix(CONTRACT, token_id=1, giver=GIVER, categories=[ProbeCategory.TRANSFER])
    )
    assert {c.status for c in report.cases} == {CaseStatus.SKIPPED}
    assert network.simulations == []


def test_run_matrix_category_filter(artifact_store):
    network = StubNetwork(default=SimulationOutcome.from_gas(1))
    validator = _validator(network, artifact_store)
    report = asyncio.run(validator.run_matrix(CONTRACT, token_id=1, categories=[ProbeCategory.TOKEN]))
    assert [c.definition.case_id for c in report.cases] == [1, 2, 3]
    assert report.by_category(ProbeCategory.BASIC) == []


def test_run_matrix_propagates_invalid_contract(artifact_store):
    validator = _validator(StubNetwork(default=SimulationOutcome.from_gas(1)), artifact_store)
    with pytest.raises(InvalidArguments):
        asyncio.run(validator.run_matrix("0xnope"))


def test_async_context_closes_network(artifact_store):
    network = StubNetwork()

    async def go():
        async with _validator(network, artifact_store):
            pass

    asyncio.run(go())
    assert network.closed is True
