# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Network collaborator exports."""

from .adapters import RecordedSimulation, StubNetwork
from .client import ProbeNetwork, create_default_network
from .jsonrpc import JsonRpcNetwork, RpcResponse

__all__ = [
    "JsonRpcNetwork",
    "ProbeNetwork",
    "RecordedSimulation",
    "RpcResponse",
    "StubNetwork",
    "create_default_network",
]
