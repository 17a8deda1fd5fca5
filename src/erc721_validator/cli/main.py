# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""ERC-721 validator CLI."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

from ..artifacts import PROBE_ARTIFACTS, STUB_ARTIFACTS, ArtifactStore
from ..config import NetworkSettings, ProbeSettings, load_network_settings, load_probe_settings
from ..errors import ValidatorError
from ..log import setup_logging
from ..models import MatrixReport, ProbeCategory, ValidationResult
from ..network import create_default_network
from ..runtime import ERC721Validator


def _int_arg(value: str) -> int:
    try:
        return int(value, 0)
    except ValueError:
        pass
    # base 0 rejects leading zeros ("007")
    try:
        return int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Probe a deployed contract for ERC-721 compliance via gas estimation")
    parser.add_argument("--json", action="store_true", help="Output JSON instead of human-friendly summary")
    parser.add_argument("--rpc-url", help="JSON-RPC endpoint (default: ERC721_VALIDATOR_RPC_URL)")
    parser.add_argument("--funded-address", help="Account with balance used as sender for transfer probes")
    parser.add_argument("--artifacts-dir", help="Directory holding versioned probe artifacts")
    parser.add_argument("--artifacts-version", help="Probe artifact version to load")
    parser.add_argument("--log-level", help="Logging level (default: ERC721_VALIDATOR_LOG_LEVEL or WARNING)")
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed nodes)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    basic = sub.add_parser("basic", help="Run one basic case")
    basic.add_argument("case_id", type=_int_arg)
    basic.add_argument("contract")

    token = sub.add_parser("token", help="Run one token case")
    token.add_argument("case_id", type=_int_arg)
    token.add_argument("contract")
    token.add_argument("token_id", type=_int_arg)

    transfer = sub.add_parser("transfer", help="Run one transfer case")
    transfer.add_argument("case_id", type=_int_arg)
    transfer.add_argument("contract")
    transfer.add_argument("token_id", type=_int_arg)
    transfer.add_argument("giver")

    matrix = sub.add_parser("matrix", help="Run every applicable case")
    matrix.add_argument("contract")
    matrix.add_argument("--token-id", type=_int_arg)
    matrix.add_argument("--giver")
    matrix.add_argument(
        "--category",
        action="append",
        choices=[category.value for category in ProbeCategory],
        help="Restrict to a category (repeatable)",
    )

    abis = sub.add_parser("abis", help="Print the ABIs of stored probe artifacts")
    abis.add_argument("names", nargs="*", help="Artifact names (default: every probe and stub)")
    return parser


def _print_json(data: Any) -> None:
    payload = data.to_dict() if hasattr(data, "to_dict") else data
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _pretty_print_result(command: str, case_id: int, result: ValidationResult) -> None:
    verdict = "compliant" if result.compliant else "not compliant"
    print(f"[ERC721] {command} case {case_id}: {verdict} (gas {result.gas_used})")


def _pretty_print_matrix(report: MatrixReport) -> None:
    counts = report.counts()
    print(f"[ERC721] Contract: {report.contract}")
    print("Summary: " + ", ".join(f"{status}={count}" for status, count in counts.items()))
    for category in ProbeCategory:
        rows = report.by_category(category)
        if not rows:
            continue
        print(f"{category.value}:")
        for row in rows:
            suffix = f" ({row.reason})" if row.reason else ""
            gas = f" gas={row.gas_used}" if row.gas_used else ""
            print(f"  {row.definition.case_id:>2} {row.status.value:<13} {row.definition.title}{gas}{suffix}")


def _settings_from_args(args: argparse.Namespace) -> tuple[NetworkSettings, ProbeSettings]:
    network_settings = load_network_settings()
    probe_settings = load_probe_settings()
    if args.rpc_url:
        network_settings.rpc_url = args.rpc_url
    if args.ignore_ssl_errors:
        network_settings.verify_ssl = False
    if args.funded_address:
        probe_settings.funded_address = args.funded_address
    if args.artifacts_dir:
        probe_settings.artifacts_dir = args.artifacts_dir
    if args.artifacts_version:
        probe_settings.artifacts_version = args.artifacts_version
    return network_settings, probe_settings


def _print_abis(store: ArtifactStore, names: list[str], as_json: bool) -> None:
    selected = names or [name for name in (*PROBE_ARTIFACTS, *STUB_ARTIFACTS) if name in store.available()]
    payload = {name: store.get(name).abi_with_signatures() for name in selected}
    if as_json:
        _print_json(payload)
        return
    for name, abi in payload.items():
        print(f"{name}:", json.dumps(abi))
        print("")


async def _run(args: argparse.Namespace, network_settings: NetworkSettings, probe_settings: ProbeSettings) -> int:
    network = create_default_network(network_settings)
    async with ERC721Validator(network, probe_settings=probe_settings) as validator:
        if args.command == "matrix":
            categories = [ProbeCategory(value) for value in args.category] if args.category else None
            report = await validator.run_matrix(
                args.contract,
                token_id=args.token_id,
                giver=args.giver,
                categories=categories,
            )
            if args.json:
                _print_json(report)
            else:
                _pretty_print_matrix(report)
            return 1 if report.has_errors else 0

        if args.command == "basic":
            result = await validator.basic(args.case_id, args.contract)
        elif args.command == "token":
            result = await validator.token(args.case_id, args.contract, args.token_id)
        else:
            result = await validator.transfer(args.case_id, args.contract, args.token_id, args.giver)

    if args.json:
        _print_json(result)
    else:
        _pretty_print_result(args.command, args.case_id, result)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    network_settings, probe_settings = _settings_from_args(args)
    try:
        if args.command == "abis":
            _print_abis(ArtifactStore.from_settings(probe_settings), args.names, args.json)
            return 0
        return asyncio.run(_run(args, network_settings, probe_settings))
    except ValidatorError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
