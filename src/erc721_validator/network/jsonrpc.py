# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed Ethereum JSON-RPC implementation of ProbeNetwork."""

from __future__ import annotations

import itertools
import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import httpx

from ..artifacts import ProbeArtifact
from ..config import NetworkSettings, load_network_settings
from ..errors import ErrorCategory, categorize_exception
from ..models.outcome import CallResult, SimulationOutcome
from ..models.probe import TransactionEnvelope
from .client import ProbeNetwork

logger = logging.getLogger(__name__)


@dataclass
class RpcResponse:
    """Normalized JSON-RPC reply: a result or an error, never an exception."""

    ok: bool
    result: Any = None
    error_message: str | None = None
    error_code: int | None = None
    error_type: str | None = None
    error_category: ErrorCategory | None = None
    status_code: int | None = None
    meta: dict[str, Any] = field(default_factory=dict)


def _parse_quantity(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        return int(value, 16) if value.lower().startswith("0x") else int(value)
    raise ValueError(f"Not a JSON-RPC quantity: {value!r}")


class JsonRpcNetwork(ProbeNetwork):
    """Async JSON-RPC client wrapper (``eth_estimateGas`` / ``eth_call``)."""

    def __init__(self, settings: NetworkSettings | None = None, client: httpx.AsyncClient | None = None):
        self.settings = settings or load_network_settings()
        self._client = client or httpx.AsyncClient(
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )
        self._ids = itertools.count(1)

    async def request(self, method: str, params: list[Any]) -> RpcResponse:
        payload = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
        headers = {"Content-Type": "application/json", "User-Agent": self.settings.user_agent}
        try:
            resp = await self._client.post(self.settings.rpc_url, json=payload, headers=headers)
        except Exception as exc:  # noqa: BLE001
            return RpcResponse(
                ok=False,
                error_message=str(exc) or type(exc).__name__,
                error_type=type(exc).__name__,
                error_category=categorize_exception(exc),
            )

        try:
            body = resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return RpcResponse(
                ok=False,
                error_message=f"HTTP {resp.status_code}: response is not JSON",
                error_type="InvalidResponse",
                error_category=ErrorCategory.RPC_ERROR,
                status_code=resp.status_code,
            )

        # Some nodes answer reverts with a non-200 status and a JSON-RPC error body.
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            data = error.get("data")
            return RpcResponse(
                ok=False,
                error_message=str(error.get("message") or ""),
                error_code=error.get("code") if isinstance(error.get("code"), int) else None,
                error_category=ErrorCategory.RPC_ERROR,
                status_code=resp.status_code,
                meta={"data": data} if data is not None else {},
            )

        if resp.status_code >= 400 or not isinstance(body, dict) or "result" not in body:
            return RpcResponse(
                ok=False,
                error_message=f"HTTP {resp.status_code}: malformed JSON-RPC response",
                error_type="InvalidResponse",
                error_category=ErrorCategory.RPC_ERROR,
                status_code=resp.status_code,
            )

        return RpcResponse(ok=True, result=body["result"], status_code=resp.status_code)

    async def estimate_deployment_gas(
        self,
        artifact: ProbeArtifact,
        arguments: Sequence[Any],
        *,
        envelope: TransactionEnvelope | None = None,
    ) -> SimulationOutcome:
        tx: dict[str, str] = {"data": artifact.deployment_data(arguments)}
        tx.update((envelope or TransactionEnvelope()).to_params())
        logger.debug("eth_estimateGas for %s@%s (%d args)", artifact.name, artifact.version, len(arguments))

        response = await self.request("eth_estimateGas", [tx])
        if not response.ok:
            outcome = SimulationOutcome.from_error(
                response.error_message or "",
                code=response.error_code,
                error_type=response.error_type,
                category=response.error_category,
            )
            outcome.meta.update(response.meta)
            return outcome

        try:
            gas = _parse_quantity(response.result)
        except ValueError as exc:
            return SimulationOutcome.from_error(str(exc), error_type="InvalidResponse", category=ErrorCategory.RPC_ERROR)
        return SimulationOutcome.from_gas(gas)

    async def call(self, to: str, data: str, *, envelope: TransactionEnvelope | None = None) -> CallResult:
        tx: dict[str, str] = {"to": to, "data": data}
        tx.update((envelope or TransactionEnvelope()).to_params())
        response = await self.request("eth_call", [tx, "latest"])
        if not response.ok:
            return CallResult(
                ok=False,
                error_message=response.error_message,
                error_code=response.error_code,
                error_type=response.error_type,
            )
        return CallResult(ok=True, data=str(response.result or "0x"))

    async def close(self) -> None:
        await self._client.aclose()
