# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import pytest

from erc721_validator.artifacts import ArtifactStore

BYTECODE = "0x6080604052"

_INPUTS = {
    "basic": [("_test", "uint256"), ("_contract", "address")],
    "token": [("_test", "uint256"), ("_contract", "address"), ("_tokenId", "uint256")],
    "transfer": [("_test", "uint256"), ("_contract", "address"), ("_tokenId", "uint256"), ("_giver", "address")],
}


def _constructor(inputs):
    return {
        "type": "constructor",
        "stateMutability": "payable",
        "inputs": [{"name": name, "type": type_, "internalType": type_} for name, type_ in inputs],
    }


def write_artifacts(root, version="v1"):
    directory = root / version
    directory.mkdir(parents=True, exist_ok=True)
    for name, inputs in _INPUTS.items():
        data = {"abi": [_constructor(inputs)], "bytecode": BYTECODE}
        (directory / f"{name}.json").write_text(json.dumps(data), encoding="utf-8")
    giver = {
        "abi": [
            _constructor([]),
            {
                "type": "event",
                "name": "Transfer",
                "anonymous": False,
                "inputs": [
                    {"name": "from", "type": "address", "indexed": True},
                    {"name": "to", "type": "address", "indexed": True},
                    {"name": "tokenId", "type": "uint256", "indexed": True},
                ],
            },
        ],
        "bin": "6080604052",
    }
    (directory / "giver.json").write_text(json.dumps(giver), encoding="utf-8")
    return directory


@pytest.fixture
def artifact_store(tmp_path):
    write_artifacts(tmp_path)
    return ArtifactStore(tmp_path, "v1")
